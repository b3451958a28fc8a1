"""Enemy ships that follow the path on the board."""

from __future__ import annotations

from .carte import DIM, Carte
from .vecteur import Vecteur

RIGHT, LEFT, UP, DOWN = 1, 2, 3, 4


class Ennemi:
    """An enemy with a position, a resistance and an arrival flag."""

    def __init__(self, x: float = 0.0, y: float = 0.0, resistance: int = 0) -> None:
        self.position = Vecteur(x, y)
        self.last_move = 0
        self.res = resistance
        self.arrive = False
        self.indice = 0
        self.nbcase = 0

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def move(self, carte: Carte, dt: float) -> None:
        """Move by ``dt`` along the heading of the current cell."""
        pos = self.position
        if pos.x < 0:
            pos.x += dt
        elif 0 <= pos.x < DIM - 2 and 0 <= pos.y < DIM - 1:
            heading = carte.cell(pos.x, pos.y)
            if heading == RIGHT:
                pos.x += dt
            elif heading == DOWN:
                pos.y += dt
            elif heading == LEFT:
                pos.x -= dt
            elif heading == UP:
                pos.y -= dt
        else:
            self.arrive = True

    def remettre_a_un(self, carte: Carte) -> None:
        """Restore the path marker under the enemy."""
        carte.set_cell(self.x, self.y, RIGHT)

    def marquer(self, carte: Carte) -> None:
        """Write the enemy's resistance into its cell."""
        carte.set_cell(self.x, self.y, self.res)

    def __repr__(self) -> str:
        return (
            f"Ennemi(x={self.x}, y={self.y}, res={self.res}, "
            f"indice={self.indice}, arrive={self.arrive})"
        )