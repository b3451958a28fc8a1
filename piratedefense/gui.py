"""Graphical front end: draws a running game and drives it in real time."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import pygame

from .carte import DIM
from .gui_layout import (
    TAILLE_SPRITE,
    ShopSlot,
    bullet_color,
    cell_from_pixel,
    character_pixel_position,
    enemy_heading,
    enemy_pixel_position,
    shop_slots,
    slot_at,
)
from .jeu import Jeu

log = logging.getLogger(__name__)

CLEAR_COLOR = (230, 240, 255)
WHITE = (255, 255, 255)
RED = (255, 0, 0)

ENEMY_STEP = 0.1
SHOT_STEP = 0.005
GAME_STEP = 0.5
SPAWN_STEP = 1.5
SHOT_SPEEDUP = 5
SCORE_RATE = 2

CREW_SIZE = (60, 60)
BULLET_RADIUS = 5
BULLET_DY = 12
DRAG_OFFSET = (30, 30)
HUD_FONT_SIZE = 24
PRICE_FONT_SIZE = 20
GAME_OVER_FONT_SIZE = 50
HUD_SPACE = 600
PAUSE_SCALE = 2.5
PAUSE_SPACING = 20.0
FRAME_RATE = 60

RESUME, RESTART, HOME, QUIT = "resume", "restart", "home", "quit"

_ENEMY_IMAGES = {
    "right": ("ennemiboatd.png", (90, 80)),
    "left": ("ennemiboatg.png", (90, 80)),
    "up": ("ennemiboath.png", (55, 100)),
    "down": ("ennemiboatb.png", (55, 100)),
}
_CREW_IMAGES = {level: f"Equipage{level}.gif" for level in (1, 2, 3, 4)}
_CREW_FALLBACK = {1: (200, 160, 60), 2: (60, 160, 200), 3: (160, 60, 200), 4: (60, 60, 60)}
_PAUSE_IMAGES = {
    RESUME: "Resumebouton.png",
    RESTART: "Restartbouton.png",
    HOME: "Homebouton.png",
}


class GameWindow:
    """Draws a :class:`Jeu` on a surface and advances it from a clock."""

    def __init__(
        self,
        surface: pygame.Surface,
        jeu: Jeu | None = None,
        assets_dir: str | Path = "data",
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.jeu = jeu if jeu is not None else Jeu()
        self.assets_dir = Path(assets_dir)
        self.width, self.height = surface.get_size()
        self._fonts: dict[int, pygame.font.Font] = {}

        self.background = self._image(
            "MapPirate.png", (40, 110, 170), size=(max(self.width - 145, 1), self.height + 40)
        )
        self.enemy_sprites = {
            heading: self._image(name, (120, 70, 30), size=size)
            for heading, (name, size) in _ENEMY_IMAGES.items()
        }
        self.crew_sprites = {
            level: self._image(name, _CREW_FALLBACK[level], size=CREW_SIZE)
            for level, name in _CREW_IMAGES.items()
        }
        bar = self._image("menupersos.jpg", (110, 70, 40), fallback_size=(162, self.height))
        self.bar = pygame.transform.scale(bar, (bar.get_width(), self.height))
        self.coin = self._image("piecepixel.png", (230, 190, 40), fallback_size=(16, 16))
        heart = self._image("coeurpixel.png", RED, fallback_size=(20, 20))
        self.heart = heart
        self.big_heart = pygame.transform.scale(
            heart, (int(heart.get_width() * 1.2), int(heart.get_height() * 1.2))
        )
        over = self._image("gameover.png", (20, 20, 20), fallback_size=(330, 330))
        self.game_over_image = pygame.transform.scale(
            over, (max(over.get_width() // 3, 1), max(over.get_height() // 3, 1))
        )
        self.pause_images = {
            name: self._scaled(
                self._image(path, (90, 60, 30), fallback_size=(64, 20)), PAUSE_SCALE
            )
            for name, path in _PAUSE_IMAGES.items()
        }
        self.pause_buttons = self._pause_layout()

        self.slots: list[ShopSlot] = shop_slots(self.jeu.carte.dim_x)
        self.dragging: ShopSlot | None = None
        self.drag_pos: tuple[float, float] | None = None
        self.running = True
        self.paused = False
        self.game_over = False
        self._clocks: dict[str, float] | None = None
        self._score_start = 0.0
        self._score_base = 0

    # -- resources -------------------------------------------------------

    def _image(
        self,
        name: str,
        color: tuple[int, int, int],
        size: tuple[int, int] | None = None,
        fallback_size: tuple[int, int] = (TAILLE_SPRITE, TAILLE_SPRITE),
    ) -> pygame.Surface:
        path = self.assets_dir / name
        try:
            image = pygame.image.load(str(path))
        except (FileNotFoundError, pygame.error) as exc:
            log.warning("cannot load %s: %s", path, exc)
            image = pygame.Surface(size or fallback_size, pygame.SRCALPHA)
            image.fill(color)
        if size is not None:
            image = pygame.transform.scale(image, size)
        return image

    @staticmethod
    def _scaled(image: pygame.Surface, factor: float) -> pygame.Surface:
        w, h = image.get_size()
        return pygame.transform.scale(image, (int(w * factor), int(h * factor)))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = self.assets_dir / "pixelfont.ttf"
            try:
                self._fonts[size] = pygame.font.Font(str(path), size)
            except (FileNotFoundError, OSError, pygame.error):
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, text: str, size: int, color, position) -> pygame.Rect:
        rendered = self._font(size).render(text, True, color)
        return self.surface.blit(rendered, position)

    def _present(self) -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()

    def _pause_layout(self) -> dict[str, pygame.Rect]:
        order = (RESUME, RESTART, HOME)
        heights = [self.pause_images[name].get_height() for name in order]
        total = sum(heights) + PAUSE_SPACING * 2
        top = (self.height - total) / 2
        width = self.pause_images[RESUME].get_width()
        left = self.width / 2 - width / 2
        layout = {}
        for name, height in zip(order, heights):
            image = self.pause_images[name]
            layout[name] = pygame.Rect(int(left), int(top), image.get_width(), height)
            top += height + PAUSE_SPACING
        return layout

    # -- drawing ---------------------------------------------------------

    def draw(self) -> None:
        """Draw the whole frame: board, enemies, crew, shots, bar and HUD."""
        self.surface.fill(CLEAR_COLOR)
        self.surface.blit(self.background, (0, 0))
        self._draw_enemies()
        self._draw_crew()
        self.draw_shots()
        self.draw_bar()
        self.draw_hud()
        if self.dragging is not None and self.drag_pos is not None:
            sprite = self.crew_sprites.get(self.dragging.level)
            if sprite is not None:
                self.surface.blit(sprite, self.drag_pos)
        self._present()

    def _draw_enemies(self) -> None:
        carte = self.jeu.carte
        for ennemi in self.jeu.ennemis:
            if ennemi.x == 0 and ennemi.y == 0:
                continue
            try:
                heading = enemy_heading(carte.cell(ennemi.x, ennemi.y))
            except IndexError:
                continue
            if heading is None:
                continue
            position = enemy_pixel_position(ennemi.x, ennemi.y, carte.dim_x, carte.dim_y)
            self.surface.blit(self.enemy_sprites[heading], position)

    def _draw_crew(self) -> None:
        for perso in self.jeu.equipage:
            sprite = self.crew_sprites.get(int(perso.type))
            if sprite is None:
                continue
            w, h = sprite.get_size()
            self.surface.blit(sprite, character_pixel_position(perso.x, perso.y, w, h))

    def draw_hud(self) -> list[str]:
        """Draw lives, score, coins and the leading enemy's resistance; return the texts."""
        jeu = self.jeu
        vies = f"Vies : {jeu.vies}"
        score = f"Score : {jeu.score}"
        pieces = f"Pieces : {jeu.pieces}"
        self._text(vies, HUD_FONT_SIZE, WHITE, (10, 10))
        self.surface.blit(self.big_heart, (108, 20))
        self._text(score, HUD_FONT_SIZE, WHITE, ((10 + HUD_SPACE + 250) / 2, 10))
        self._text(pieces, HUD_FONT_SIZE, WHITE, (HUD_SPACE + 150, 10))

        leader = jeu.ennemi_par_indice(0)
        x = leader.x * TAILLE_SPRITE
        y = leader.y * TAILLE_SPRITE
        self.surface.blit(self.heart, (x + 20, y - 50))
        resistance = str(leader.res)
        self._text(resistance, PRICE_FONT_SIZE, WHITE, (x, y - 58))
        return [vies, score, pieces, resistance]

    def draw_bar(self) -> list[ShopSlot]:
        """Draw the side bar with the crew choices and their prices."""
        if not self.slots:
            return []
        self.surface.blit(self.bar, (self.slots[0].left, 0))
        hud_coin = (HUD_SPACE + 150 + 132.0, 10 + 10.0)
        for slot in self.slots:
            self._text(str(slot.price), PRICE_FONT_SIZE, WHITE, slot.price_position)
            self.surface.blit(self.coin, hud_coin)
            self.surface.blit(self.coin, slot.coin_position)
        return list(self.slots)

    def draw_shots(self) -> int:
        """Draw every bullet away from the origin; return how many were drawn."""
        drawn = 0
        for arme in self.jeu.armes:
            color = bullet_color(arme.degat)
            if color is None:
                continue
            for balle in arme.balles:
                px = balle.x * TAILLE_SPRITE
                py = balle.y * TAILLE_SPRITE + BULLET_DY
                if px == 0 or py == 0:
                    continue
                center = (int(px + BULLET_RADIUS), int(py + BULLET_RADIUS))
                pygame.draw.circle(self.surface, color, center, BULLET_RADIUS)
                drawn += 1
        return drawn

    def draw_game_over(self) -> None:
        """Draw the game-over banner in the middle of the window."""
        rendered = self._font(GAME_OVER_FONT_SIZE).render("GAME OVER", True, RED)
        rect = rendered.get_rect(center=(self.width / 2, self.height / 2))
        self.surface.blit(rendered, rect)
        self.surface.blit(
            self.game_over_image, (self.width / 2 - 110, self.height / 2 - 250)
        )
        self._present()

    def pause_menu(self) -> str:
        """Show the pause buttons until one is chosen; return the choice."""
        while True:
            for name, rect in self.pause_buttons.items():
                self.surface.blit(self.pause_images[name], rect)
            self._present()
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                    return QUIT
                if event.type == pygame.KEYDOWN and event.key == pygame.K_p:
                    return RESUME
                if event.type == pygame.MOUSEBUTTONDOWN:
                    for name, rect in self.pause_buttons.items():
                        if rect.collidepoint(event.pos):
                            return name
            if not events:
                pygame.time.wait(10)

    # -- input and timing ------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one window event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_p:
                self.paused = True
            elif event.key == pygame.K_a:
                self.jeu.action_clavier("a")
            elif event.key == pygame.K_z:
                self.jeu.action_clavier("z")
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            slot = slot_at(self.slots, *event.pos)
            if slot is not None:
                self.dragging = slot
                self.drag_pos = None
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.dragging is not None:
                cx, cy = cell_from_pixel(*event.pos)
                self.jeu.action_souris(cx, cy, self.dragging.key)
                self.dragging = None
                self.drag_pos = None
        elif event.type == pygame.MOUSEMOTION and self.dragging is not None:
            px, py = event.pos
            self.drag_pos = (px - DRAG_OFFSET[0], py - DRAG_OFFSET[1])

    def _restart_clocks(self, now: float) -> None:
        self._clocks = {"game": now, "enemies": now, "shots": now, "spawn": now}
        self._score_start = now

    def update(self, now: float) -> bool:
        """Advance the game to time ``now`` (seconds); return True once it is over."""
        if self._clocks is None:
            self._restart_clocks(now)
        clocks = self._clocks
        jeu = self.jeu
        jeu.score = int((now - self._score_start) * SCORE_RATE + self._score_base)

        elapsed = now - clocks["game"]
        elapsed_enemies = now - clocks["enemies"]
        elapsed_shots = now - clocks["shots"]
        elapsed_spawn = now - clocks["spawn"]

        if self.game_over:
            return True
        if elapsed_spawn > SPAWN_STEP:
            jeu.init_ennemi_jeu()
            clocks["spawn"] = now
        if elapsed_enemies > ENEMY_STEP:
            for ennemi in jeu.ennemis:
                if 0 <= ennemi.x <= DIM - 1 and 0 < ennemi.y <= DIM - 1:
                    ennemi.move(jeu.carte, elapsed_enemies)
            clocks["enemies"] = now
        if elapsed_shots > SHOT_STEP:
            jeu.action_tir(elapsed_shots * SHOT_SPEEDUP)
            clocks["shots"] = now
        if elapsed > GAME_STEP:
            for ennemi in jeu.ennemis:
                jeu.ennemi_arrive(ennemi)
            jeu.action_automatique(elapsed)
            clocks["game"] = now
        if jeu.vies <= 0:
            jeu.action_automatique(elapsed)
            self.draw()
            self.draw_game_over()
            self.game_over = True
        return self.game_over

    def run(self) -> None:
        """Play until the window is closed or the player goes home."""
        clock = pygame.time.Clock()
        self.running = True
        while self.running:
            if self.paused:
                self._score_base = self.jeu.score
                choice = self.pause_menu()
                self.paused = False
                self._restart_clocks(time.monotonic())
                if choice == QUIT:
                    self.running = False
                    break
                if choice == HOME:
                    return
                if choice == RESTART:
                    self.jeu = Jeu()
                    self.game_over = False
                    self._score_base = 0
            else:
                self.update(time.monotonic())
                for event in pygame.event.get():
                    self.handle_event(event)
            if self.running and not self.game_over:
                self.draw()
            clock.tick(FRAME_RATE)