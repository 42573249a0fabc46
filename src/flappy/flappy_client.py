#!/usr/bin/env python3
"""
flappy_client.py

Desktop client: pygame window, input translation and the frame loop.
Uses the modular architecture: physics_engine, frame_loop, renderer.
"""

import logging
import random
from enum import Enum, auto
from typing import Optional

import pygame

from .constants import DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_VARIANT, RENDER_FPS
from .frame_loop import FrameScheduler
from .physics_engine import GameEngine
from .renderer import PygameCanvas, Sprites, make_default_sprites, render_frame

logger = logging.getLogger(__name__)


class InputAction(Enum):
    TRIGGER = auto()   # flap, or restart after game over
    RESIZE = auto()
    QUIT = auto()


def translate_event(event: pygame.event.Event) -> Optional[InputAction]:
    """Maps a pygame event onto the few actions the game understands."""
    if event.type == pygame.QUIT:
        return InputAction.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return InputAction.QUIT
        if event.key == pygame.K_SPACE:
            return InputAction.TRIGGER
        return None
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL also emits a mouse event for each touch; FINGERDOWN already covers it
        if getattr(event, "touch", False):
            return None
        return InputAction.TRIGGER
    if event.type == pygame.FINGERDOWN:
        return InputAction.TRIGGER
    if event.type == pygame.VIDEORESIZE:
        return InputAction.RESIZE
    return None


class FlappyClient:
    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 variant: str = DEFAULT_VARIANT, fps: int = RENDER_FPS,
                 seed: Optional[int] = None, sprites: Optional[Sprites] = None):
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(f"Flappy ({variant})")

        # --- Game Logic ---
        self.engine = GameEngine(width=width, height=height, variant=variant,
                                 rng=random.Random(seed))
        self.scheduler = FrameScheduler(fps)

        # --- Rendering ---
        self.canvas = PygameCanvas(self.screen)
        self.sprites = sprites or make_default_sprites()

        self.running = False

    def run(self):
        """The main client execution loop."""
        logger.info("Starting %s game at %sx%s",
                    self.engine.variant, self.engine.width, self.engine.height)
        self.running = True
        self.scheduler.request_frame(self._frame)
        try:
            while self.running:
                self.scheduler.wait_for_frame()
                for event in pygame.event.get():
                    self.handle_event(event)
                self.scheduler.tick()
        finally:
            self.scheduler.cancel()
            logger.info("Client stopped after %s frames", self.scheduler.frame_count)
            pygame.quit()

    def handle_event(self, event: pygame.event.Event):
        action = translate_event(event)
        if action is InputAction.QUIT:
            self.running = False
        elif action is InputAction.TRIGGER:
            self.on_trigger()
        elif action is InputAction.RESIZE:
            self.on_resize(event.w, event.h)

    def on_trigger(self):
        """Flap while playing; restart and resume the loop after game over."""
        if self.engine.trigger():
            self.scheduler.request_frame(self._frame)

    def on_resize(self, width: int, height: int):
        surface = pygame.display.get_surface()
        if surface is not None and surface.get_size() != (width, height):
            surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        if surface is not None:
            self.screen = surface
            self.canvas = PygameCanvas(surface)

        self.engine.resize(width, height)
        self.scheduler.request_frame(self._frame)

    def _frame(self):
        """One display refresh: update, draw, and continue only while playing."""
        self.engine.step()
        render_frame(self.canvas, self.engine.state, self.sprites)
        pygame.display.flip()

        if self.engine.is_playing:
            self.scheduler.request_frame(self._frame)
