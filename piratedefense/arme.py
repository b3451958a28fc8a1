"""Weapons carried by crew members."""

from __future__ import annotations

import math

from .carte import DIM
from .ennemi import Ennemi
from .personnage import Personnage
from .tir import Tir
from .vecteur import Vecteur

# Damage dealt per hit, by crew level.
DEGATS: dict[int, int] = {1: 1, 2: 3, 3: 8, 4: 12}

# A bullet closer than this to its target is considered to have hit it.
HIT_DISTANCE = 0.5


class Arme:
    """A weapon whose type and damage follow the level of its owner."""

    def __init__(self, personnage: Personnage) -> None:
        level = int(personnage.type)
        if level not in DEGATS:
            raise ValueError(f"no weapon for crew level {level}")
        self.type = level
        self.degat = DEGATS[level]
        self.position = Vecteur(personnage.x, personnage.y)
        self.balles: list[Tir] = [Tir(personnage.x, personnage.y)]

    def tirer(self, ennemi: Ennemi, dt: float) -> None:
        """Hit ``ennemi`` at once, lowering its resistance by the damage."""
        if ennemi.res < 0:
            raise ValueError(f"enemy resistance is negative: {ennemi.res}")
        ennemi.res -= self.degat

    def tirer_fluide(self, ennemi: Ennemi, dt: float) -> None:
        """Move every bullet toward ``ennemi``; reload those that hit or leave the board."""
        for i, balle in enumerate(self.balles):
            balle.tirer_vers(ennemi.x, ennemi.y, dt)
            distance = math.hypot(balle.x - ennemi.x, balle.y - ennemi.y)
            outside = not (0 <= balle.x <= DIM and 0 <= balle.y <= DIM)
            if outside or distance < HIT_DISTANCE:
                self.charger_balle(i)

    def charger_balle(self, i: int) -> None:
        """Put bullet ``i`` back at the weapon's position, with no heading."""
        self.balles[i].recharger(self.position.x, self.position.y)

    def __repr__(self) -> str:
        return f"Arme(type={self.type}, degat={self.degat}, balles={len(self.balles)})"