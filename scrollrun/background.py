"""Scrolling backgrounds, cameras, split screen and HUD drawing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

import pygame

SCREEN_W = 800
SCREEN_H = 600

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

GUIDE_SIZE = (500, 140)
GUIDE_LINES = (
    "            === GUIDE DE JEU ===",
    "Joueur 1 : Z Q S D",
    "Joueur 2 :(up,left,down,right)",
    "ESC : Quitter",
)
GUIDE_LINE_STEP = 28

_TICKS_MODULO = 2**32


class AssetError(RuntimeError):
    """Raised when an image, font or sound cannot be loaded."""


class Direction(IntEnum):
    """Scrolling direction; anything else means no movement."""

    RIGHT = 0
    LEFT = 1
    UP = 2
    DOWN = 3


def _shift(rect: pygame.Rect, direction, dx: int, dy: int) -> pygame.Rect:
    moved = rect.copy()
    if direction == Direction.RIGHT:
        moved.x += dx
    elif direction == Direction.LEFT:
        moved.x -= dx
    elif direction == Direction.UP:
        moved.y -= dy
    elif direction == Direction.DOWN:
        moved.y += dy
    return moved


def _load_surface(path: str, what: str) -> pygame.Surface:
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise AssetError(f"Erreur chargement {what} : {exc}") from exc


@dataclass
class Background:
    """A screen-sized view scrolling over a larger image."""

    image: pygame.Surface
    view: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, SCREEN_W, SCREEN_H))
    position: tuple[int, int] = (0, 0)
    start_time: int = 0
    camera_pos: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    screen_pos: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    direction: int = -1

    def scroll(self, direction, dx, dy):
        """Move the view, keeping it inside the image."""
        moved = _shift(self.view, direction, dx, dy)
        width, height = self.image.get_size()
        if moved.x < 0:
            moved.x = 0
        if moved.x + SCREEN_W > width:
            moved.x = width - SCREEN_W
        if moved.y < 0:
            moved.y = 0
        if moved.y + SCREEN_H > height:
            moved.y = height - SCREEN_H
        self.view = moved

    def draw(self, screen):
        """Blit the visible part of the image onto the screen."""
        return screen.blit(self.image, self.position, area=self.view)

    def at_end(self):
        """True once the view reaches the right edge of the image."""
        return self.view.x + SCREEN_W >= self.image.get_width()

    def update_game_time(self, screen, font, now=None):
        """Start the clock on first call, then draw the elapsed time."""
        if now is None:
            now = pygame.time.get_ticks()
        if not self.start_time:
            self.start_time = now
        return draw_elapsed_time(self.start_time, screen, font, now)

    def update_animation(self, frame_width, nb_frames):
        """Advance the sprite-sheet camera by one frame, wrapping around."""
        self.camera_pos.x += frame_width
        if self.camera_pos.x >= frame_width * nb_frames:
            self.camera_pos.x = 0


def load_background(path="bg1.png"):
    """Load a scrolling background showing its top-left screen area."""
    return Background(image=_load_surface(path, path))


@dataclass
class LevelImage:
    """A whole level image drawn in one piece."""

    filename: str
    image: pygame.Surface
    view: pygame.Rect
    position: tuple[int, int] = (0, 0)

    def draw(self, screen):
        """Blit the level image onto the screen."""
        return screen.blit(self.image, self.position, area=self.view)


def load_level_image(path="bg1.png"):
    """Load a level image whose view covers all of it."""
    surface = _load_surface(path, path)
    return LevelImage(filename=path, image=surface, view=surface.get_rect())


def move_camera(camera, direction, image_size, dx, dy):
    """Return the camera moved one step and clamped to the image size."""
    width, height = image_size
    moved = _shift(pygame.Rect(camera), direction, dx, dy)
    if moved.x < 0:
        moved.x = 0
    if moved.x + moved.w > width:
        moved.x = width - moved.w
    if moved.y < 0:
        moved.y = 0
    if moved.y + moved.h > height:
        moved.y = height - moved.h
    return moved


def split_screen(screen, image, cam1, cam2):
    """Draw two camera views side by side with a white divider."""
    half = SCREEN_W // 2
    screen.blit(image.image, (0, 0), area=cam1)
    screen.blit(image.image, (half, 0), area=cam2)
    border = pygame.Rect(half - 1, 0, 2, SCREEN_H)
    screen.fill(WHITE, border)
    return border


def format_elapsed(ms):
    """Format milliseconds as the clock text."""
    return "Time: %02d:%02d" % (ms // 60000, (ms // 1000) % 60)


def draw_elapsed_time(start_time, screen, font, now=None):
    """Draw the elapsed time at the top right; return the drawn rect."""
    if now is None:
        now = pygame.time.get_ticks()
    elapsed = (now - start_time) % _TICKS_MODULO
    text = font.render(format_elapsed(elapsed), False, WHITE)
    return screen.blit(text, (SCREEN_W - text.get_width() - 10, 10))


def load_image(path):
    """Load an image file."""
    return _load_surface(path, f"image {path}")


def load_music(path="music.mp3"):
    """Open audio, then play the track in a loop at half volume."""
    try:
        pygame.mixer.init(44100, -16, 2, 1024)
    except pygame.error as exc:
        raise AssetError(f"Erreur audio : {exc}") from exc
    try:
        pygame.mixer.music.load(path)
    except (pygame.error, OSError) as exc:
        raise AssetError(f"Erreur musique : {exc}") from exc
    pygame.mixer.music.play(-1)
    pygame.mixer.music.set_volume(0.5)


def draw_guide(screen, font):
    """Draw the controls guide in a translucent centred box; return the box."""
    box_w, box_h = GUIDE_SIZE
    box = pygame.Rect(
        (screen.get_width() - box_w) // 2,
        (screen.get_height() - box_h) // 2,
        box_w,
        box_h,
    )
    overlay = pygame.Surface(box.size, pygame.SRCALPHA, 32)
    overlay.fill((255, 255, 255, 200))
    screen.blit(overlay, box.topleft)

    y_offset = box.y + 15
    for line in GUIDE_LINES:
        text = font.render(line, True, BLACK)
        if text is not None:
            screen.blit(text, (box.x + 20, y_offset))
            y_offset += GUIDE_LINE_STEP
    return box