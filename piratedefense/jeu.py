"""Game state: crew, weapons, enemies, board and counters."""

from __future__ import annotations

import random

from .arme import Arme
from .carte import DIM, Carte
from .ennemi import RIGHT, Ennemi
from .personnage import Personnage

NB_ENNEMIS = 5
START_RESISTANCE = 16
START_LIVES = 5
KILL_REWARD = 5
SPAWN_POSITION = (0, 4)

# key -> (cost in coins, crew level, display value)
RECRUITS: dict[str, tuple[int, int, int]] = {
    "a": (10, 1, 3),
    "z": (20, 2, 4),
    "b": (30, 3, 3),
    "c": (40, 4, 3),
}
KEYBOARD_RECRUITS = ("a", "z")


class Jeu:
    """The whole state of one game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.ennemis: list[Ennemi] = []
        self.init_ennemi_tab()
        self.equipage: list[Personnage] = [Personnage(8, 5, 1, 2)]
        self.ennemi_seul = Ennemi(0, 0, 10)
        self.carte = Carte()
        self.niveau = 0
        self.score = 0
        self.pieces = 0
        self.vies = START_LIVES
        self.arme = Arme(self.equipage[0])
        self.armes: list[Arme] = [Arme(self.equipage[0])]

    def init_ennemi_tab(self) -> None:
        """Fill the enemy table with fresh enemies parked at the origin."""
        self.ennemis = []
        for i in range(NB_ENNEMIS):
            ennemi = Ennemi(0, 0, START_RESISTANCE)
            ennemi.indice = i
            ennemi.nbcase = 0
            self.ennemis.append(ennemi)

    def _recruit(self, x: int, y: int, key: str) -> bool:
        cost, level, valeur = RECRUITS[key]
        if self.pieces < cost:
            return False
        self.equipage.append(Personnage(x, y, level, valeur))
        self.armes.append(Arme(Personnage(x, y, level, 0)))
        self.pieces -= cost
        return True

    def action_clavier(self, c: str) -> bool:
        """Recruit at a random board cell for key 'a' or 'z'; True if recruited."""
        if c not in KEYBOARD_RECRUITS:
            return False
        while True:
            x = 2 + self._rng.randrange(15)
            y = 2 + self._rng.randrange(15)
            if self.carte.cell(x, y) != 0:
                break
        return self._recruit(x, y, c)

    def action_souris(self, x: float, y: float, c: str) -> bool:
        """Recruit at cell (x, y) for keys 'a', 'z', 'b', 'c'; True if recruited."""
        if c not in RECRUITS:
            return False
        cx, cy = int(x), int(y)
        if not (0 <= cx < self.carte.dim_x and 0 <= cy < self.carte.dim_y):
            return False
        if self.carte.cell(cx, cy) != 0:
            return False
        return self._recruit(cx, cy, c)

    def action_tir(self, dt: float) -> None:
        """Move every weapon's bullets toward the leading enemy."""
        for arme in self.armes:
            arme.tirer_fluide(self.ennemi_par_indice(0), dt)

    def action_automatique(self, dt: float) -> None:
        """Let each weapon hit the leading enemy, then settle kills."""
        for arme in self.armes:
            arme.tirer(self.ennemi_par_indice(0), dt)
            self.ennemi_tue(self.ennemi_par_indice(0))
            self.tue_ennemi_tab(self.ennemi_par_indice(0))

    def nb_perso_niveau(self, n: int) -> int:
        """Number of crew members of level ``n``."""
        return sum(1 for perso in self.equipage if perso.type == n)

    def ennemi(self, index: int) -> Ennemi:
        """Enemy at slot ``index`` of the table."""
        if not 0 <= index < NB_ENNEMIS:
            raise IndexError(f"invalid enemy index: {index}")
        return self.ennemis[index]

    def ennemi_par_indice(self, indice: int) -> Ennemi:
        """Enemy whose rank in the wave is ``indice``."""
        for ennemi in self.ennemis:
            if ennemi.indice == indice:
                return ennemi
        raise LookupError(f"no enemy with rank {indice}")

    def ennemi_tue(self, ennemi: Ennemi) -> bool:
        """Reward the player if ``ennemi`` is dead; True if it was."""
        if ennemi.res <= 0:
            self.pieces += KILL_REWARD
            return True
        return False

    def ennemi_arrive(self, ennemi: Ennemi) -> bool:
        """Cost the player a life if ``ennemi`` reached the end; True if it did."""
        if ennemi.arrive:
            self.vies -= 1
            return True
        return False

    def init_ennemi_jeu(self) -> None:
        """Send the first parked enemy to the start of the path."""
        for ennemi in self.ennemis:
            if ennemi.x == 0 and ennemi.y == 0:
                ennemi.position.x, ennemi.position.y = SPAWN_POSITION
                break

    def tue_ennemi_tab(self, ennemi: Ennemi) -> bool:
        """Recycle a dead or arrived enemy and rotate the wave ranks."""
        if ennemi.res > 0 and not ennemi.arrive:
            return False
        ennemi.position.x, ennemi.position.y = SPAWN_POSITION
        ennemi.res = int(self.score * 1.2 + 10)
        ennemi.arrive = False
        for other in self.ennemis:
            other.indice = (other.indice - 1) % NB_ENNEMIS
        return True

    def _is_path(self, x: int, y: int) -> bool:
        if not (0 <= x < self.carte.dim_x and 0 <= y < self.carte.dim_y):
            return False
        return self.carte.cell(x, y) == RIGHT

    def coordonnee_personnage_valide(self, x: int, y: int) -> bool:
        """True when (x, y) is on the border or touches a rightward path cell."""
        if x >= DIM or x <= 0 or y >= DIM or y <= 0:
            return True
        return any(
            self._is_path(cx, cy)
            for cx, cy in ((x, y), (x + 1, y), (x, y + 1), (x, y - 1), (x - 1, y))
        )