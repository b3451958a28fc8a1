"""The game board: a fixed grid of cell codes."""

from __future__ import annotations

DIM = 20

# 0: free space where a crew member may stand
# 1, 2, 3, 4: path heading right, left, up, down
# 9: forbidden cell
_LAYOUT: tuple[tuple[int, ...], ...] = (
    (9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9),
    (9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9),
    (9, 9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 1, 4, 9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (3, 9, 9, 9, 9, 9, 4, 9, 0, 0, 9, 1, 1, 1, 1, 1, 1, 4, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 9, 9, 9, 9, 9, 4, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 0, 0, 0, 0, 9, 4, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 0, 0, 0, 0, 9, 4, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 0, 0, 0, 9, 9, 4, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 0, 0, 4, 2, 2, 2, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 0, 0, 9, 3, 0, 0, 4, 9, 9, 0, 0, 0),
    (3, 0, 0, 0, 0, 9, 4, 9, 9, 9, 9, 3, 0, 0, 4, 9, 9, 0, 0, 0),
    (3, 0, 0, 0, 0, 9, 1, 1, 1, 1, 1, 3, 0, 0, 4, 9, 9, 0, 0, 0),
    (3, 0, 0, 0, 0, 0, 9, 9, 9, 9, 9, 9, 9, 0, 4, 9, 9, 0, 0, 0),
    (3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 9, 9, 9, 9, 9),
    (3, 9, 9, 9, 9, 9, 9, 9, 0, 0, 9, 9, 0, 0, 1, 1, 1, 1, 1, 1),
    (3, 9, 9, 9, 9, 9, 9, 9, 9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (3, 9, 9, 9, 9, 9, 9, 9, 9, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (3, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9),
)


def _index(value: float, limit: int, axis: str) -> int:
    index = int(value)
    if not 0 <= index < limit:
        raise IndexError(f"{axis}={value!r} is outside the board")
    return index


class Carte:
    """A DIM x DIM board, indexed as ``grid[row][column]``."""

    def __init__(self) -> None:
        self.dim_x = DIM
        self.dim_y = DIM
        self.grid: list[list[int]] = [list(row) for row in _LAYOUT]

    def cell(self, x: float, y: float) -> int:
        """Return the code at column ``x``, row ``y`` (coordinates truncated)."""
        return self.grid[_index(y, self.dim_y, "y")][_index(x, self.dim_x, "x")]

    def set_cell(self, x: float, y: float, value: int) -> None:
        """Store ``value`` at column ``x``, row ``y``."""
        self.grid[_index(y, self.dim_y, "y")][_index(x, self.dim_x, "x")] = value

    def xy_int(self, x: int, y: int) -> int:
        """Return ``grid[x][y]``: ``x`` selects the row, ``y`` the column."""
        if not 0 <= x < self.dim_x or not 0 <= y < self.dim_y:
            raise IndexError(f"({x}, {y}) is outside the board")
        return self.grid[x][y]

    def render(self) -> str:
        """Return the board without its outer border, one line per row."""
        inner = range(1, DIM - 1)
        return "".join(
            "".join(f"{self.grid[i][j]} " for j in inner) + "\n" for i in inner
        )