"""Screen geometry and drawing choices for the graphical front end."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

TAILLE_SPRITE = 49

BAR_OFFSET = 52
SLOT_TOP = 165
SLOT_SPACING = 170
SLOT_WIDTH = 155
SLOT_HEIGHT = 90
PRICE_TEXT_DY = 60
COIN_DX = 130
COIN_DY = 67

# (key, price, crew level, price text x offset)
_SHOP = (
    ("a", 10, 1, 110),
    ("z", 20, 2, 100),
    ("b", 30, 3, 100),
    ("c", 40, 4, 100),
)

_BULLET_COLORS: dict[int, tuple[int, int, int]] = {
    1: (255, 255, 255),
    3: (0, 255, 0),
    8: (0, 0, 255),
    12: (0, 0, 0),
}

_HEADINGS = {1: "right", 2: "left", 3: "up", 4: "down"}


@dataclass(frozen=True)
class ShopSlot:
    """A clickable crew choice in the side bar."""

    key: str
    price: int
    level: int
    left: float
    top: float
    width: float = SLOT_WIDTH
    height: float = SLOT_HEIGHT
    price_dx: float = 100

    def contains(self, px: float, py: float) -> bool:
        """True when pixel (px, py) lies in the slot (right and bottom edges excluded)."""
        return (
            self.left <= px < self.left + self.width
            and self.top <= py < self.top + self.height
        )

    @property
    def price_position(self) -> tuple[float, float]:
        return (self.left + self.price_dx, self.top + PRICE_TEXT_DY)

    @property
    def coin_position(self) -> tuple[float, float]:
        return (self.left + COIN_DX, self.top + COIN_DY)


def enemy_pixel_position(
    x: float, y: float, dim_x: int, dim_y: int
) -> tuple[float, float]:
    """Pixel position of an enemy sprite at board position (x, y)."""
    px = x * (dim_x - 1) * TAILLE_SPRITE / dim_x
    py = y * (dim_y - 1) * TAILLE_SPRITE / dim_y
    return (px, py - TAILLE_SPRITE // 2)


def character_pixel_position(
    x: float, y: float, sprite_w: float, sprite_h: float
) -> tuple[float, float]:
    """Pixel position that centres a crew sprite in cell (x, y)."""
    return (
        x * TAILLE_SPRITE + (TAILLE_SPRITE - sprite_w) / 2,
        y * TAILLE_SPRITE + (TAILLE_SPRITE - sprite_h) / 2,
    )


def cell_from_pixel(px: float, py: float) -> tuple[int, int]:
    """Board cell under pixel (px, py), truncated toward zero."""
    return (int(px / TAILLE_SPRITE), int(py / TAILLE_SPRITE))


def shop_slots(map_dim_x: int) -> list[ShopSlot]:
    """The four crew choices of the side bar, top to bottom."""
    left = map_dim_x * TAILLE_SPRITE - BAR_OFFSET
    return [
        ShopSlot(
            key=key,
            price=price,
            level=level,
            left=left,
            top=SLOT_TOP + i * SLOT_SPACING,
            price_dx=price_dx,
        )
        for i, (key, price, level, price_dx) in enumerate(_SHOP)
    ]


def slot_at(slots: Iterable[ShopSlot], px: float, py: float) -> ShopSlot | None:
    """First slot containing pixel (px, py), or None."""
    return next((slot for slot in slots if slot.contains(px, py)), None)


def bullet_color(degat: int) -> tuple[int, int, int] | None:
    """RGB colour of a bullet dealing ``degat`` damage, or None if unknown."""
    return _BULLET_COLORS.get(degat)


def enemy_heading(cell_value: int) -> str | None:
    """Sprite heading for a path cell code, or None off the path."""
    return _HEADINGS.get(cell_value)