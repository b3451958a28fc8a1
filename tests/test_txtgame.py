import io
import itertools
from unittest import mock

from piratedefense.jeu import START_LIVES, START_RESISTANCE, Jeu
from piratedefense.terminal import WinTxt
from piratedefense.txtgame import CREW_CODE, main, render_frame, run


def _win(jeu, keys=""):
    win = WinTxt(jeu.carte.dim_x, jeu.carte.dim_y, io.StringIO())
    win.input = io.StringIO(keys)
    return win


def test_render_frame_board_and_crew():
    jeu = Jeu()
    win = _win(jeu)
    render_frame(win, jeu)
    crew = {(int(p.x), int(p.y)) for p in jeu.equipage}
    for x in range(jeu.carte.dim_x):
        for y in range(jeu.carte.dim_y):
            if (x, y) in crew:
                assert win.cells[x][y] == CREW_CODE
            else:
                assert win.cells[x][y] == jeu.carte.xy_int(x, y)


def test_render_frame_status():
    jeu = Jeu()
    jeu.pieces = 12
    win = _win(jeu)
    render_frame(win, jeu)
    text = win.stream.getvalue()
    assert "Pieces: 12     \n" in text
    assert f"Vies restantes: {START_LIVES}\n" in text
    assert f"Resistance = {START_RESISTANCE}" in text


@mock.patch("time.sleep")
def test_run_quits_on_q(_sleep):
    jeu = Jeu()
    win = _win(jeu, "q")
    with mock.patch("time.monotonic", side_effect=itertools.count(100.0, 3.0)):
        run(jeu, win)
    assert win.stream.getvalue().endswith("Game Over\n")
    assert jeu.score == 3
    assert jeu.ennemi_par_indice(0).res < START_RESISTANCE


@mock.patch("time.sleep")
def test_run_stops_without_lives(_sleep):
    jeu = Jeu()
    jeu.vies = 0
    win = _win(jeu)
    run(jeu, win)
    assert win.stream.getvalue().endswith("Game Over\n")
    assert jeu.vies == 0


@mock.patch("time.sleep")
def test_run_recruits_with_key(_sleep):
    jeu = Jeu()
    jeu.pieces = 10
    win = _win(jeu, "aq")
    run(jeu, win)
    assert len(jeu.equipage) == 2
    assert len(jeu.armes) == 2
    assert jeu.pieces == 0


@mock.patch("time.sleep")
def test_main_plays_until_quit(_sleep, capsys):
    with mock.patch("sys.stdin", io.StringIO("q")):
        assert main([]) == 0
    assert "Game Over" in capsys.readouterr().out