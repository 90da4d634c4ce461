"""Name entry, the main game loop and the end-of-game leaderboard."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field

import pygame

from .background import (
    BLACK,
    SCREEN_H,
    SCREEN_W,
    WHITE,
    AssetError,
    Background,
    Direction,
    LevelImage,
    draw_elapsed_time,
    draw_guide,
    load_background,
    load_image,
    load_level_image,
    load_music,
    move_camera,
)
from .scores import append_score, format_score, format_score_line, read_scores, top_scores

FONT_FILE = "October-Wish.ttf"
FONT_SIZE = 24
NAME_BACKDROP = "nom.png"
GUIDE_ICON = "guide.png"
LEVEL_FILES = ("bg1.png", "bg2.png")
BEST_BACKDROP = "best.png"
SCORES_FILE = "scores.txt"

ICON_POS = (10, 10)
SCORE_POS = (10, 80)
STEP = 5
FRAME_DELAY_MS = 30
BEST_DELAY_MS = 5000
NO_DIRECTION = -1

_P1_KEYS = {
    pygame.K_d: Direction.RIGHT,
    pygame.K_q: Direction.LEFT,
    pygame.K_z: Direction.UP,
    pygame.K_s: Direction.DOWN,
}
_P2_KEYS = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


@dataclass
class NameInput:
    """Line editor for the player's name."""

    MAX_LENGTH = 19

    text: str = ""
    done: bool = False

    def feed(self, key, char):
        """Apply one key press; return True once the name is confirmed."""
        if key == pygame.K_RETURN and self.text:
            self.done = True
        elif key == pygame.K_BACKSPACE and self.text:
            self.text = self.text[:-1]
        elif len(char) == 1 and 0 < ord(char) < 0x80 and len(self.text) < self.MAX_LENGTH:
            self.text += char
        return self.done


def _left_half():
    return pygame.Rect(0, 0, SCREEN_W // 2, SCREEN_H)


def _right_half():
    return pygame.Rect(SCREEN_W // 2, 0, SCREEN_W // 2, SCREEN_H)


@dataclass
class GameState:
    """Input-driven state of a running game."""

    running: bool = True
    direction1: int = NO_DIRECTION
    direction2: int = NO_DIRECTION
    split_screen: bool = False
    show_guide: bool = False
    level_p1: int = 1
    level_p2: int = 1
    cam1: pygame.Rect = field(default_factory=_left_half)
    cam2: pygame.Rect = field(default_factory=_right_half)
    score: int = 0

    def key_down(self, key):
        """React to a pressed key."""
        if key in _P1_KEYS:
            self.direction1 = _P1_KEYS[key]
        elif key in _P2_KEYS:
            self.direction2 = _P2_KEYS[key]
        elif key == pygame.K_p:
            self.split_screen = not self.split_screen
        elif key == pygame.K_ESCAPE:
            self.running = False

    def key_up(self, key):
        """Stop a player's movement when one of their keys is released."""
        if key in _P1_KEYS:
            self.direction1 = NO_DIRECTION
        elif key in _P2_KEYS:
            self.direction2 = NO_DIRECTION

    def click(self, pos, icon_rect):
        """Toggle the guide when the click lands on the icon, edges included."""
        mx, my = pos
        icon = pygame.Rect(icon_rect)
        if icon.x <= mx <= icon.x + icon.w and icon.y <= my <= icon.y + icon.h:
            self.show_guide = not self.show_guide

    def _handle_event(self, event, icon_rect):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.key_down(event.key)
        elif event.type == pygame.KEYUP:
            self.key_up(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self.click(event.pos, icon_rect)

    def _scroll(self, background: Background):
        old_x = background.view.x
        background.scroll(self.direction1, STEP, STEP)
        if background.view.x > old_x:
            self.score += 1

    def _draw_split(self, screen, levels: tuple[LevelImage, LevelImage]):
        level_one = levels[0]
        image1 = levels[self.level_p1 - 1].image
        image2 = levels[self.level_p2 - 1].image
        self.cam1 = move_camera(self.cam1, self.direction1, image1.get_size(), STEP, STEP)
        self.cam2 = move_camera(self.cam2, self.direction2, image2.get_size(), STEP, STEP)

        screen.blit(image1, _left_half().topleft, area=self.cam1)
        screen.blit(image2, _right_half().topleft, area=self.cam2)

        end = level_one.image.get_width()
        if self.level_p1 == 1 and self.cam1.x + self.cam1.w >= end:
            self.level_p1 = 2
            self.cam1.topleft = (0, 0)
        if self.level_p2 == 1 and self.cam2.x + self.cam2.w >= end:
            self.level_p2 = 2
            self.cam2.topleft = (0, 0)

    def _play_single(self, screen, backgrounds: dict):
        if self.level_p1 == 1:
            if 1 not in backgrounds:
                backgrounds[1] = load_background(LEVEL_FILES[0])
            current = backgrounds[1]
            self._scroll(current)
            current.draw(screen)
            if current.at_end():
                self.level_p1 = 2
                if 2 not in backgrounds:
                    second = load_background(LEVEL_FILES[1])
                    second.start_time = pygame.time.get_ticks()
                    backgrounds[2] = second
        else:
            if 2 not in backgrounds:
                backgrounds[2] = load_background(LEVEL_FILES[1])
            current = backgrounds[2]
            self._scroll(current)
            current.draw(screen)
            if current.at_end():
                self.running = False


def _start_music():
    try:
        load_music()
    except AssetError as exc:
        print(exc, file=sys.stderr)
        print("Continuer sans musique.", file=sys.stderr)


def _stop_music():
    if pygame.mixer.get_init():
        pygame.mixer.music.stop()
        pygame.mixer.quit()


def run(screen, font, player_name):
    """Play until quit or the last level ends; record and return the score."""
    guide_icon = load_image(GUIDE_ICON)
    icon_rect = guide_icon.get_rect(topleft=ICON_POS)
    levels = tuple(load_level_image(path) for path in LEVEL_FILES)
    _start_music()

    state = GameState()
    backgrounds: dict[int, Background] = {}
    try:
        while state.running:
            for event in pygame.event.get():
                state._handle_event(event, icon_rect)

            screen.fill(BLACK)
            if state.split_screen:
                state._draw_split(screen, levels)
            else:
                state._play_single(screen, backgrounds)

            screen.blit(guide_icon, ICON_POS)
            if state.show_guide:
                draw_guide(screen, font)
            draw_elapsed_time(0, screen, font)
            screen.blit(font.render(format_score(state.score), False, WHITE), SCORE_POS)

            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        _stop_music()

    append_score(SCORES_FILE, player_name, state.score)
    return state.score


def show_best_scores(screen, font, path):
    """Show the top three scores from the file; return the lines drawn."""
    try:
        backdrop = pygame.image.load(BEST_BACKDROP)
    except (pygame.error, OSError) as exc:
        print(f"Erreur chargement {BEST_BACKDROP} : {exc}", file=sys.stderr)
        return []
    screen.blit(backdrop, (0, 0))

    drawn = []
    for rank, entry in enumerate(top_scores(read_scores(path))):
        line = format_score_line(entry)
        try:
            text = font.render(line, False, WHITE)
        except pygame.error as exc:
            print(f"Erreur rendu texte score {rank + 1} : {exc}", file=sys.stderr)
            continue
        x = (SCREEN_W - text.get_width() + 20) // 2 - 110
        screen.blit(text, (x, 220 + rank * 115))
        drawn.append(line)

    pygame.display.flip()
    pygame.time.delay(BEST_DELAY_MS)
    return drawn


def _ask_name(screen, font, backdrop):
    """Collect the player's name; None if the window is closed."""
    centered = ((SCREEN_W - 800) // 2, (SCREEN_H - 600) // 2)
    screen.blit(backdrop, centered)
    pygame.display.flip()

    entry = NameInput()
    while not entry.done:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.KEYDOWN:
                entry.feed(event.key, event.unicode)

        screen.blit(backdrop, centered)
        if entry.text:
            text = font.render(entry.text, False, WHITE)
            pos = (
                centered[0] + (800 - text.get_width()) // 2,
                centered[1] + (600 - text.get_height()) // 2 + 20,
            )
            screen.blit(text, pos)
        pygame.display.flip()
        pygame.time.delay(10)
    return entry.text


def main(argv=None):
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="scrollrun", description="Two-player scrolling game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
        pygame.display.set_caption("Jeu ")
        try:
            font = pygame.font.Font(FONT_FILE, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            print(f"Erreur chargement {FONT_FILE} : {exc}", file=sys.stderr)
            return 1
        try:
            backdrop = pygame.image.load(NAME_BACKDROP)
        except (pygame.error, OSError) as exc:
            print(f"Erreur chargement {NAME_BACKDROP} : {exc}", file=sys.stderr)
            return 1

        name = _ask_name(screen, font, backdrop)
        if name is None:
            return 0
        try:
            run(screen, font, name)
        except AssetError as exc:
            print(exc, file=sys.stderr)
            return 1
        show_best_scores(screen, font, SCORES_FILE)
        return 0
    finally:
        pygame.quit()