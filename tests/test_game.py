from unittest import mock

import pygame
import pytest

from scrollrun.background import SCREEN_H, SCREEN_W, AssetError, Direction
from scrollrun.game import GameState, NameInput, main, run, show_best_scores
from scrollrun.scores import read_scores


@pytest.fixture
def display(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    font = pygame.font.Font(None, 24)
    pygame.event.clear()
    yield screen, font
    pygame.quit()


def _make_png(path, size):
    surface = pygame.Surface(size)
    surface.fill((40, 80, 120))
    pygame.image.save(surface, str(path))


def _make_assets(directory):
    _make_png(directory / "bg1.png", (SCREEN_W + 10, SCREEN_H))
    _make_png(directory / "bg2.png", (SCREEN_W + 10, SCREEN_H))
    _make_png(directory / "guide.png", (32, 32))


def test_name_input_confirms_with_return():
    entry = NameInput()
    entry.feed(pygame.K_a, "a")
    entry.feed(pygame.K_b, "b")
    assert entry.feed(pygame.K_RETURN, "\r") is True
    assert entry.text == "ab"


def test_name_input_backspace_removes_last():
    entry = NameInput()
    for char in "abc":
        entry.feed(ord(char), char)
    entry.feed(pygame.K_BACKSPACE, "\b")
    assert entry.text == "ab"
    assert entry.done is False


def test_name_input_length_limit():
    entry = NameInput()
    for _ in range(30):
        entry.feed(pygame.K_x, "x")
    assert entry.text == "x" * 19


def test_name_input_ignores_non_ascii_and_empty():
    entry = NameInput()
    entry.feed(pygame.K_e, "é")
    entry.feed(pygame.K_LSHIFT, "")
    assert entry.text == ""


def test_name_input_return_on_empty_does_not_finish():
    entry = NameInput()
    assert entry.feed(pygame.K_RETURN, "\r") is False


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_q, Direction.LEFT),
        (pygame.K_z, Direction.UP),
        (pygame.K_s, Direction.DOWN),
    ],
)
def test_player_one_keys(key, expected):
    state = GameState()
    state.key_down(key)
    assert state.direction1 == expected
    assert state.direction2 == -1


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
    ],
)
def test_player_two_keys(key, expected):
    state = GameState()
    state.key_down(key)
    assert state.direction2 == expected
    assert state.direction1 == -1


def test_key_up_stops_only_that_player():
    state = GameState()
    state.key_down(pygame.K_d)
    state.key_down(pygame.K_UP)
    state.key_up(pygame.K_s)
    assert state.direction1 == -1
    assert state.direction2 == Direction.UP


def test_p_toggles_split_screen_and_escape_quits():
    state = GameState()
    state.key_down(pygame.K_p)
    assert state.split_screen is True
    state.key_down(pygame.K_p)
    assert state.split_screen is False
    state.key_down(pygame.K_ESCAPE)
    assert state.running is False


def test_click_toggles_guide_inclusive_edges():
    state = GameState()
    icon = pygame.Rect(10, 10, 32, 32)
    state.click((42, 42), icon)
    assert state.show_guide is True
    state.click((10, 10), icon)
    assert state.show_guide is False


def test_click_outside_icon_does_nothing():
    state = GameState()
    state.click((43, 20), pygame.Rect(10, 10, 32, 32))
    assert state.show_guide is False


def test_run_missing_assets_raises(display):
    screen, font = display
    with pytest.raises(AssetError):
        run(screen, font, "alice")


def test_run_quit_records_zero_score(display, tmp_path):
    screen, font = display
    _make_assets(tmp_path)
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    score = run(screen, font, "alice")
    assert score == 0
    assert [(e.name, e.score) for e in read_scores(tmp_path / "scores.txt")] == [("alice", 0)]


def test_run_scrolling_to_the_end_scores_points(display, tmp_path):
    screen, font = display
    _make_assets(tmp_path)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d, mod=0, unicode="d"))
    score = run(screen, font, "bob")
    assert score > 0
    entries = read_scores(tmp_path / "scores.txt")
    assert [(e.name, e.score) for e in entries] == [("bob", score)]


def test_show_best_scores_top_three(display, tmp_path):
    screen, font = display
    _make_png(tmp_path / "best.png", (SCREEN_W, SCREEN_H))
    path = tmp_path / "scores.txt"
    path.write_text("bob : 5\nann : 9\ncid : 1\ndan : 7\n", encoding="utf-8")
    with mock.patch("pygame.time.delay") as delay:
        lines = show_best_scores(screen, font, path)
    delay.assert_called_once_with(5000)
    assert len(lines) == 3
    assert [line.split()[0] for line in lines] == ["ann", "dan", "bob"]
    assert [int(line.split()[-1]) for line in lines] == [9, 7, 5]


def test_show_best_scores_without_backdrop(display, tmp_path):
    screen, font = display
    path = tmp_path / "scores.txt"
    path.write_text("bob : 5\n", encoding="utf-8")
    with mock.patch("pygame.time.delay") as delay:
        lines = show_best_scores(screen, font, path)
    assert lines == []
    assert delay.call_count == 0


def test_main_fails_without_font(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1