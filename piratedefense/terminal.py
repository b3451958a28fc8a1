"""A character-cell window drawn on a terminal with ANSI escapes."""

from __future__ import annotations

import contextlib
import itertools
import os
import select
import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

PAUSE_PROMPT = "Appuyer sur une touche\n"
_PAUSE_POLL = 0.01


def term_move(x: int, y: int, stream: TextIO | None = None) -> None:
    """Move the terminal cursor to column ``x``, row ``y``."""
    out = stream if stream is not None else sys.stdout
    out.write(f"\033[{y};{x}H")


def term_clear(stream: TextIO | None = None) -> None:
    """Clear the terminal and put the cursor at the top left."""
    out = stream if stream is not None else sys.stdout
    out.write("\033[2J\033[H")
    out.flush()


@contextlib.contextmanager
def raw_terminal() -> Iterator[bool]:
    """Turn off line buffering and echo on stdin while active.

    Yields True when the terminal mode was changed, False when stdin is not
    a terminal or the platform has no termios.
    """
    try:
        import termios
    except ImportError:
        yield False
        return
    try:
        fd = sys.stdin.fileno()
    except (AttributeError, OSError, ValueError):
        yield False
        return
    if not os.isatty(fd):
        yield False
        return
    saved = termios.tcgetattr(fd)
    mode = termios.tcgetattr(fd)
    mode[3] &= ~(termios.ICANON | termios.ECHO)
    mode[6][termios.VMIN] = 1
    termios.tcsetattr(fd, termios.TCSANOW, mode)
    try:
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def _as_code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else int(c)


class WinTxt:
    """A ``dimx`` x ``dimy`` grid of integer codes shown on a text stream."""

    def __init__(self, dimx: int, dimy: int, stream: TextIO | None = None) -> None:
        self.dimx = dimx
        self.dimy = dimy
        self.stream = stream if stream is not None else sys.stdout
        self.input = sys.stdin
        self.cells: list[list[int]] = [[0] * dimy for _ in range(dimx)]
        self.clear()

    def clear(self, c: int | str = " ") -> None:
        """Fill every cell with ``c`` (a character is stored as its code)."""
        code = _as_code(c)
        for row in self.cells:
            row[:] = [code] * self.dimy

    def put(self, x: int, y: int, c: int | str) -> None:
        """Store ``c`` at (x, y); positions outside the window are ignored."""
        if 0 <= x < self.dimx and 0 <= y < self.dimy:
            self.cells[x][y] = _as_code(c)

    def put_row(self, x: int, y: int, values: Iterable[int | str]) -> None:
        """Store successive values at (y + i, x), stopping at a zero value."""
        codes = (_as_code(v) for v in values)
        for i, code in enumerate(itertools.takewhile(lambda v: v != 0, codes)):
            self.put(y + i, x, code)

    def draw(
        self,
        pieces: int,
        vies: int,
        enemies: Iterable[tuple[int, ...]],
        nb_pers1: int,
        nb_pers2: int,
        score: int,
    ) -> None:
        """Write the status lines and the grid to the stream."""
        out = self.stream
        term_move(0, 5, out)
        for i, (ex, ey, indice, res, *_rest) in enumerate(enemies):
            out.write(
                f"Ennemi {i} Position (x;y) = ({ex};{ey}) Indice = {indice} "
                f"Resistance = {res}\n"
            )
        out.write(f"Score: {score}     \n")
        out.write(f"Pieces: {pieces}     \n")
        out.write(f"Vies restantes: {vies}\n")
        out.write(f"Nb personnage niveau 1 :{nb_pers1}\n")
        out.write(f"Nb personnage niveau 2 :{nb_pers2}\n")
        for row in self.cells:
            out.write("".join(f"   {code}" for code in row) + "\n")
        term_move(0, self.dimy, out)
        out.flush()

    def _buffered_key_ready(self) -> bool:
        try:
            position = self.input.tell()
            ahead = self.input.read(1)
            self.input.seek(position)
        except (AttributeError, OSError, ValueError):
            return False
        return bool(ahead)

    def _key_ready(self) -> bool:
        try:
            fd = self.input.fileno()
        except (AttributeError, OSError, ValueError):
            return self._buffered_key_ready()
        try:
            ready, _, _ = select.select([fd], [], [], 0)
        except (OSError, ValueError):
            return False
        return bool(ready)

    def get_ch(self) -> str:
        """Return one pending key, or an empty string when none is waiting."""
        if self._key_ready():
            return self.input.read(1)
        return ""

    def pause(self) -> None:
        """Prompt and wait until a key is available (the key is not consumed)."""
        self.stream.write(PAUSE_PROMPT)
        self.stream.flush()
        while not self._key_ready():
            time.sleep(_PAUSE_POLL)