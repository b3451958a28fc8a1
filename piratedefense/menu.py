"""Home screen: background, start button and music switch."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from .gui import GameWindow
from .jeu import Jeu

log = logging.getLogger(__name__)

WINDOW_SIZE = (1090, 920)
TITLE = "Pirate Defense"
CLEAR_COLOR = (255, 255, 255)
BUTTON_SCALE = 0.5
BUTTON_BOTTOM_MARGIN = 35
SOUND_MARGIN = 10
MUSIC_VOLUME = 1.0
FRAME_RATE = 60

START, TOGGLE_SOUND, QUIT = "start", "toggle_sound", "quit"

BACKGROUND_IMAGE = "HomePirate.png"
START_IMAGE = "BoutonStart.png"
START_PRESSED_IMAGE = "BoutonStartPressed.png"
SOUND_ON_IMAGE = "Boutonson.png"
SOUND_OFF_IMAGE = "BoutonSonS.png"
MUSIC_FILE = "musique_pirate.wav"
CLICK_FILE = "clic_start.wav"


def _mixer_ready() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error as exc:
        log.warning("no audio available: %s", exc)
        return False
    return bool(pygame.mixer.get_init())


class HomeMenu:
    """The start screen shown before a game is played."""

    def __init__(self, surface: pygame.Surface, assets_dir: str | Path = "data") -> None:
        self.surface = surface
        self.assets_dir = Path(assets_dir)
        width, height = surface.get_size()

        self.background = self._load_image(BACKGROUND_IMAGE)
        self.start_image = self._scaled(self._load_image(START_IMAGE), BUTTON_SCALE)
        self.start_pressed_image = self._scaled(
            self._load_image(START_PRESSED_IMAGE), BUTTON_SCALE
        )
        self.sound_on_image = self._load_image(SOUND_ON_IMAGE)
        self.sound_off_image = self._load_image(SOUND_OFF_IMAGE)

        bw, bh = self.start_image.get_size()
        self.start_rect = pygame.Rect(
            int((width - bw) / 2), height - bh - BUTTON_BOTTOM_MARGIN, bw, bh
        )
        pw, ph = self.start_pressed_image.get_size()
        self.start_pressed_rect = pygame.Rect(
            int((width - pw) / 2), height - ph - BUTTON_BOTTOM_MARGIN, pw, ph
        )
        sw, sh = self.sound_on_image.get_size()
        self.sound_rect = pygame.Rect(SOUND_MARGIN, height - sh - SOUND_MARGIN, sw, sh)
        ow, oh = self.sound_off_image.get_size()
        self.sound_off_rect = pygame.Rect(
            SOUND_MARGIN, height - oh - SOUND_MARGIN, ow, oh
        )

        self.music: pygame.mixer.Sound | None = None
        self.click: pygame.mixer.Sound | None = None
        if _mixer_ready():
            self.music = self._load_sound(MUSIC_FILE)
            self.click = self._load_sound(CLICK_FILE)
            self.music.set_volume(MUSIC_VOLUME)
            self.music.play(loops=-1)

        self.button_pressed = False
        self.sound_on = True
        self.running = True

    def _path(self, name: str) -> Path:
        path = self.assets_dir / name
        if not path.is_file():
            raise FileNotFoundError(f"cannot load {path}")
        return path

    def _load_image(self, name: str) -> pygame.Surface:
        path = self._path(name)
        try:
            return pygame.image.load(str(path))
        except pygame.error as exc:
            raise FileNotFoundError(f"cannot load {path}: {exc}") from exc

    def _load_sound(self, name: str) -> pygame.mixer.Sound:
        path = self._path(name)
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            raise FileNotFoundError(f"cannot load {path}: {exc}") from exc

    @staticmethod
    def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
        w, h = image.get_size()
        return pygame.transform.scale(
            image, (max(int(w * factor), 1), max(int(h * factor), 1))
        )

    def handle_event(self, event: pygame.event.Event) -> list[str]:
        """React to one window event; return the actions it triggered."""
        actions: list[str] = []
        if event.type == pygame.QUIT:
            self.running = False
            actions.append(QUIT)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self.start_rect.collidepoint(event.pos):
                if self.click is not None:
                    self.click.play()
                self.button_pressed = True
                actions.append(START)
            if self.sound_rect.collidepoint(event.pos):
                if self.music is not None:
                    if self.sound_on:
                        self.music.stop()
                    else:
                        self.music.play(loops=-1)
                self.sound_on = not self.sound_on
                actions.append(TOGGLE_SOUND)
        elif event.type == pygame.MOUSEBUTTONUP:
            self.button_pressed = False
        return actions

    def draw(self) -> tuple[str, str]:
        """Draw the screen; return which start and sound buttons were shown."""
        self.surface.fill(CLEAR_COLOR)
        self.surface.blit(self.background, (0, 0))
        if self.button_pressed:
            self.surface.blit(self.start_pressed_image, self.start_pressed_rect)
            start_state = "pressed"
        else:
            self.surface.blit(self.start_image, self.start_rect)
            start_state = "normal"
        if self.sound_on:
            self.surface.blit(self.sound_on_image, self.sound_rect)
            sound_state = "on"
        else:
            self.surface.blit(self.sound_off_image, self.sound_off_rect)
            sound_state = "off"
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()
        return (start_state, sound_state)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the home screen and play games from it."""
    parser = argparse.ArgumentParser(
        prog="piratedefense", description="Play the game in a window."
    )
    parser.add_argument("--assets", default="data", help="directory of images and sounds")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        try:
            menu = HomeMenu(surface, args.assets)
        except FileNotFoundError as exc:
            print(f"Erreur de chargement: {exc}", file=sys.stderr)
            return 1
        game: GameWindow | None = None
        clock = pygame.time.Clock()
        while menu.running:
            for event in pygame.event.get():
                if START in menu.handle_event(event):
                    if game is None:
                        game = GameWindow(surface, Jeu(), args.assets)
                    game.run()
                    if not game.running:
                        menu.running = False
                        break
            if not menu.running:
                break
            menu.draw()
            clock.tick(FRAME_RATE)
        return 0
    finally:
        pygame.quit()