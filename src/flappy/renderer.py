"""
renderer.py: Draws one frame of the session onto a 2D canvas.

`render_frame` only talks to the `Canvas` protocol, so any raster surface
offering the four primitives below can host the game. `PygameCanvas`
is the adapter used by the desktop client.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Protocol, Tuple

import pygame

from .constants import (
    VARIANT_ENHANCED, BACKGROUND_COLOR, PIPE_COLOR, PIPE_EDGE_COLOR,
    BIRD_COLOR, BIRD_FLAP_COLOR, TEXT_COLOR, OVERLAY_COLOR, SCORE_FONT_SIZE,
    SCORE_POS, TITLE_FONT_SIZE, HINT_FONT_SIZE, GAME_OVER_TEXT,
    RESTART_HINT_TEXT, TITLE_OFFSET_X, HINT_OFFSET, BIRD_WIDTH, BIRD_HEIGHT,
    PIPE_WIDTH
)
from .data_models import Avatar, SessionState

Color = Tuple[int, ...]


class Canvas(Protocol):
    """Drawing primitives the game consumes. Text y is the baseline."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def draw_image(self, image: Any, x: float, y: float, w: float, h: float) -> None: ...

    def draw_rotated_image(self, image: Any, cx: float, cy: float, angle: float,
                           w: float, h: float) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None: ...


@dataclass
class Sprites:
    """Opaque image handles; only the canvas knows how to draw them."""
    background: Any
    bird: Any
    bird_flap: Any
    pipe_top: Any
    pipe_bottom: Any


def make_default_sprites() -> Sprites:
    """Plain procedural surfaces used when no artwork is supplied."""
    background = pygame.Surface((1, 1))
    background.fill(BACKGROUND_COLOR)

    def bird(color):
        surf = pygame.Surface((int(BIRD_WIDTH), int(BIRD_HEIGHT)), pygame.SRCALPHA)
        body = surf.get_rect()
        pygame.draw.ellipse(surf, color, body)
        pygame.draw.circle(surf, (255, 255, 255), (int(body.w * 0.7), int(body.h * 0.35)), 8)
        pygame.draw.circle(surf, (0, 0, 0), (int(body.w * 0.74), int(body.h * 0.35)), 3)
        return surf

    def pipe(lip_at_bottom):
        surf = pygame.Surface((int(PIPE_WIDTH), 64))
        surf.fill(PIPE_COLOR)
        pygame.draw.rect(surf, PIPE_EDGE_COLOR, surf.get_rect(), 3)
        lip_y = surf.get_height() - 12 if lip_at_bottom else 0
        pygame.draw.rect(surf, PIPE_EDGE_COLOR, (0, lip_y, surf.get_width(), 12))
        return surf

    return Sprites(
        background=background,
        bird=bird(BIRD_COLOR),
        bird_flap=bird(BIRD_FLAP_COLOR),
        pipe_top=pipe(lip_at_bottom=True),
        pipe_bottom=pipe(lip_at_bottom=False),
    )


class PygameCanvas:
    """Canvas adapter over a pygame.Surface."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def fill_rect(self, x, y, w, h, color):
        rect = pygame.Rect(int(x), int(y), int(w), int(h))
        if len(color) == 4:
            layer = pygame.Surface(rect.size, pygame.SRCALPHA)
            layer.fill(color)
            self.surface.blit(layer, rect.topleft)
        else:
            self.surface.fill(color, rect)

    def draw_image(self, image, x, y, w, h):
        size = (int(round(w)), int(round(h)))
        if size[0] <= 0 or size[1] <= 0:
            return
        self.surface.blit(pygame.transform.scale(image, size), (int(x), int(y)))

    def draw_rotated_image(self, image, cx, cy, angle, w, h):
        size = (int(round(w)), int(round(h)))
        if size[0] <= 0 or size[1] <= 0:
            return
        scaled = pygame.transform.scale(image, size)
        # Positive angle turns clockwise on screen; pygame rotates counter-clockwise
        rotated = pygame.transform.rotate(scaled, -math.degrees(angle))
        self.surface.blit(rotated, rotated.get_rect(center=(int(cx), int(cy))))

    def draw_text(self, text, x, y, size, color):
        font = self._font(size)
        surf = font.render(text, True, color)
        self.surface.blit(surf, (int(x), int(y) - font.get_ascent()))


def draw_avatar(canvas: Canvas, avatar: Avatar, sprites: Sprites, variant: str):
    if variant != VARIANT_ENHANCED:
        canvas.draw_image(sprites.bird, avatar.x, avatar.y, avatar.width, avatar.height)
        return

    sprite = sprites.bird_flap if avatar.flap_timer > 0 else sprites.bird
    canvas.draw_rotated_image(
        sprite,
        avatar.x + avatar.width / 2,
        avatar.y + avatar.height / 2,
        avatar.angle,
        avatar.width,
        avatar.height,
    )


def render_frame(canvas: Canvas, state: SessionState, sprites: Sprites):
    """Background, pipes, bird, score and, once the game is over, the overlay."""
    width, height = state.settings.width, state.settings.height

    canvas.draw_image(sprites.background, 0, 0, width, height)

    for obstacle in state.obstacles:
        canvas.draw_image(sprites.pipe_top, obstacle.x, 0, obstacle.width, obstacle.top)
        canvas.draw_image(sprites.pipe_bottom, obstacle.x, height - obstacle.bottom,
                          obstacle.width, obstacle.bottom)

    draw_avatar(canvas, state.avatar, sprites, state.settings.variant)

    canvas.draw_text(f"Score: {state.score}", SCORE_POS[0], SCORE_POS[1],
                     SCORE_FONT_SIZE, TEXT_COLOR)

    if state.game_over:
        canvas.fill_rect(0, 0, width, height, OVERLAY_COLOR)
        canvas.draw_text(GAME_OVER_TEXT, width / 2 + TITLE_OFFSET_X, height / 2,
                         TITLE_FONT_SIZE, TEXT_COLOR)
        canvas.draw_text(RESTART_HINT_TEXT, width / 2 + HINT_OFFSET[0],
                         height / 2 + HINT_OFFSET[1], HINT_FONT_SIZE, TEXT_COLOR)
