"""Crew members placed on the board."""

from __future__ import annotations

from enum import IntEnum

from .vecteur import Vecteur


class Niveau(IntEnum):
    """Level of a crew member."""

    NIVEAU1 = 1
    NIVEAU2 = 2
    NIVEAU3 = 3
    NIVEAU4 = 4
    NIVEAU5 = 5


class Personnage:
    """A crew member with a position and a level."""

    def __init__(
        self, x: float = 0.0, y: float = 0.0, type_: int = Niveau.NIVEAU1, valeur: int = 0
    ) -> None:
        if not Niveau.NIVEAU1 <= type_ <= Niveau.NIVEAU5:
            raise ValueError(f"invalid crew level: {type_!r}")
        self.position = Vecteur(x, y)
        self.type = Niveau(type_)
        self.valeur = valeur

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def __repr__(self) -> str:
        return f"Personnage(x={self.x}, y={self.y}, type={int(self.type)})"