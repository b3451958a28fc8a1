"""Text-mode front end: draws the board and runs the game loop."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from .jeu import Jeu
from .terminal import WinTxt, raw_terminal, term_clear

CREW_CODE = 3
FRAME_DELAY = 1.0
INPUT_DELAY = 0.01
AUTO_DT = 0.1
RECRUIT_KEYS = ("a", "z")
QUIT_KEY = "q"


def render_frame(win: WinTxt, jeu: Jeu) -> None:
    """Draw the board, the crew and the status of ``jeu`` into ``win``."""
    enemies = [
        (int(e.x), int(e.y), e.indice, e.res, int(e.arrive)) for e in jeu.ennemis
    ]
    carte = jeu.carte
    win.clear()
    for x in range(carte.dim_x):
        for y in range(carte.dim_y):
            win.put(x, y, carte.xy_int(x, y))
    for perso in jeu.equipage:
        win.put(int(perso.x), int(perso.y), CREW_CODE)
    win.draw(
        jeu.pieces,
        jeu.vies,
        enemies,
        jeu.nb_perso_niveau(1),
        jeu.nb_perso_niveau(2),
        jeu.score,
    )


def run(jeu: Jeu, win: WinTxt) -> None:
    """Play until the player quits or has no lives left."""
    start = time.monotonic()
    while True:
        time.sleep(FRAME_DELAY)
        jeu.score = int(time.monotonic() - start)
        render_frame(win, jeu)
        time.sleep(INPUT_DELAY)
        jeu.action_automatique(AUTO_DT)
        key = win.get_ch()
        if key in RECRUIT_KEYS:
            jeu.action_clavier(key)
        elif key == QUIT_KEY:
            break
        if jeu.vies <= 0:
            break
    win.stream.write("Game Over\n")
    win.stream.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start a text-mode game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="piratedefense-txt", description="Play the game in the terminal."
    )
    parser.parse_args(argv)
    out = sys.stdout
    term_clear(out)
    jeu = Jeu()
    win = WinTxt(jeu.carte.dim_x, jeu.carte.dim_y, out)
    with raw_terminal():
        run(jeu, win)
    term_clear(out)
    return 0