"""Score file storage and leaderboard formatting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

MAX_ENTRIES = 100
TOP_COUNT = 3

_ENTRY = re.compile(r"\s*(\S+)(?!\S)\s*:\s*([+-]?\d+)")


@dataclass(frozen=True)
class ScoreEntry:
    """One player's recorded score."""

    name: str
    score: int


def append_score(path, name, score):
    """Append a 'name : score' line to the score file."""
    with Path(path).open("a", encoding="utf-8") as handle:
        handle.write(f"{name} : {int(score)}\n")


def parse_scores(text, limit=MAX_ENTRIES):
    """Read entries until the first line that does not match or the limit."""
    entries = []
    pos = 0
    while len(entries) < limit:
        match = _ENTRY.match(text, pos)
        if match is None:
            break
        entries.append(ScoreEntry(match.group(1), int(match.group(2))))
        pos = match.end()
    return entries


def read_scores(path, limit=MAX_ENTRIES):
    """Read entries from a score file; a missing file has none."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return parse_scores(text, limit)


def top_scores(entries, count=TOP_COUNT):
    """Return the best entries, highest score first."""
    ranked = list(entries)
    # Exchange sort: equal scores keep the order this swapping produces.
    for i in range(len(ranked) - 1):
        for j in range(i + 1, len(ranked)):
            if ranked[j].score > ranked[i].score:
                ranked[i], ranked[j] = ranked[j], ranked[i]
    return ranked[:count]


def format_score_line(entry):
    """Leaderboard line: name, a wide gap, then the score."""
    return " %s%15s%d" % (entry.name, "", entry.score)


def format_score(score):
    """HUD text for the running score."""
    return "Score: %d" % score