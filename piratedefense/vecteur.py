"""Two-dimensional float vector used for positions and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vecteur:
    """A 2D vector with float coordinates."""

    x: float = 0.0
    y: float = 0.0

    def norm(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def is_zero(self) -> bool:
        """True when both components are exactly zero."""
        return self.x == 0 and self.y == 0