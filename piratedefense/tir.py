"""Projectiles fired at enemies."""

from __future__ import annotations

from .vecteur import Vecteur

SPEED = 5


class Tir:
    """A bullet with a position and a fixed unit direction once fired."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.position = Vecteur(x, y)
        self.direction = Vecteur(0.0, 0.0)
        self.tire = False

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def tirer_vers(self, x: float, y: float, dt: float) -> None:
        """Advance toward (x, y); the heading is fixed on the first call."""
        if self.direction.is_zero() and x != 0 and y != 0:
            delta = Vecteur(x - self.position.x, y - self.position.y)
            length = delta.norm()
            if length:
                self.direction = Vecteur(delta.x / length, delta.y / length)
        self.position.x += self.direction.x * dt * SPEED
        self.position.y += self.direction.y * dt * SPEED

    def recharger(self, x: float, y: float) -> None:
        """Put the bullet back at (x, y) with no heading."""
        self.position = Vecteur(x, y)
        self.direction = Vecteur(0.0, 0.0)