# scrollrun

A small side-scrolling game for one or two players, built on pygame.

## Playing

Install the package and start the game from a directory that holds its assets:

```
pip install .
scrollrun
```

The game looks for these files in the current directory:

- `October-Wish.ttf`: the font used for all text
- `nom.png`: the name entry screen
- `guide.png`: the guide icon shown in the top-left corner
- `bg1.png`, `bg2.png`: the level 1 and level 2 backgrounds
- `best.png`: the best-scores screen
- `music.mp3`: background music (optional; without it the game prints a
  message and goes on silently)

If the font, `nom.png`, `guide.png` or a level background cannot be loaded, an
error is printed and `scrollrun` exits with status 1.

### Name entry

Type your name (ASCII characters, at most 19) and press Enter; Backspace
deletes the last character. Enter does nothing while the name is empty.
Closing the window at this point quits without playing.

### Controls

| Key                       | Action                               |
|---------------------------|--------------------------------------|
| Z Q S D                   | Player 1: up, left, down, right      |
| Arrow keys                | Player 2: up, left, down, right      |
| P                         | Toggle split-screen mode             |
| Esc                       | Quit                                 |
| Click on the guide icon   | Show or hide the controls guide      |

A player moves only while one of their keys is held down.

In single-screen mode player 1 scrolls through level 1 and then level 2. Each
step the view moves to the right adds a point to the score. The run ends when
the view reaches the right edge of level 2.

In split-screen mode each player has a camera on one half of the window, with a
white divider between them. A player moves on to level 2 once their camera
reaches the right edge of level 1. The score does not change in this mode, and
the run lasts until Esc is pressed or the window is closed.

The clock at the top right shows the time since the game started, and the
current score is shown under the guide icon.

## Scores

When a run ends, `name : score` is appended to `scores.txt`. The three best
scores are then shown over `best.png` for five seconds. If `best.png` is
missing, a message is printed and that screen is skipped.

The score helpers in `scrollrun.scores` can be used on their own:

```python
from scrollrun.scores import append_score, read_scores, top_scores, format_score_line

append_score("scores.txt", "alice", 42)
for entry in top_scores(read_scores("scores.txt", 100), 3):
    print(format_score_line(entry))
```

- `append_score(path, name, score)` appends one line to the file.
- `read_scores(path, limit)` returns `ScoreEntry(name, score)` items, stopping
  at the first line that does not parse or after `limit` entries (100 by
  default); a missing file gives an empty list.
- `parse_scores(text, limit)` does the same from a string.
- `top_scores(entries, count)` returns the best `count` entries (3 by default),
  highest score first.
- `format_score_line(entry)` and `format_score(score)` give the leaderboard and
  HUD texts.

Names are read back as single words, so a name that contains spaces is not read
back as it was typed.

## Limitations

There is no settings screen or menu: window size (800×600), asset names and the
scores file are fixed. Only two levels are available, and the best-scores
screen is shown once, at the end of a run.

## Development

```
pip install -e ".[test]"
pytest
```