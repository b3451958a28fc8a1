import random

import pytest

from piratedefense.jeu import NB_ENNEMIS, Jeu


@pytest.fixture
def jeu():
    return Jeu(random.Random(0))


def test_initial_state(jeu):
    assert jeu.pieces == 0
    assert jeu.vies == 5
    assert jeu.score == 0
    assert jeu.niveau == 0
    assert len(jeu.equipage) == 1
    assert (jeu.equipage[0].x, jeu.equipage[0].y) == (8, 5)
    assert len(jeu.armes) == 1


def test_enemy_table(jeu):
    assert len(jeu.ennemis) == NB_ENNEMIS
    assert [e.indice for e in jeu.ennemis] == list(range(NB_ENNEMIS))
    assert all(e.res == 16 for e in jeu.ennemis)
    assert all((e.x, e.y) == (0, 0) for e in jeu.ennemis)


def test_souris_without_coins_does_nothing(jeu):
    assert jeu.action_souris(8, 5, "a") is False
    assert len(jeu.equipage) == 1


@pytest.mark.parametrize("key, cost, level", [("a", 10, 1), ("z", 20, 2), ("b", 30, 3), ("c", 40, 4)])
def test_souris_recruits(jeu, key, cost, level):
    jeu.pieces = cost
    assert jeu.action_souris(8, 5, key) is True
    assert jeu.pieces == 0
    assert jeu.equipage[-1].type == level
    assert jeu.armes[-1].type == level
    assert jeu.nb_perso_niveau(level) == (2 if level == 1 else 1)


def test_souris_on_path_is_refused(jeu):
    jeu.pieces = 100
    assert jeu.action_souris(0, 4, "a") is False
    assert jeu.pieces == 100


def test_souris_outside_board_is_refused(jeu):
    jeu.pieces = 100
    assert jeu.action_souris(25, 3, "a") is False
    assert len(jeu.armes) == 1


def test_clavier_recruits_on_non_empty_cell(jeu):
    jeu.pieces = 10
    assert jeu.action_clavier("a") is True
    perso = jeu.equipage[-1]
    assert 2 <= perso.x <= 16 and 2 <= perso.y <= 16
    assert jeu.carte.cell(perso.x, perso.y) != 0
    assert jeu.pieces == 0


def test_clavier_without_coins(jeu):
    assert jeu.action_clavier("z") is False
    assert len(jeu.equipage) == 1


def test_ennemi_bounds(jeu):
    assert jeu.ennemi(2) is jeu.ennemis[2]
    with pytest.raises(IndexError):
        jeu.ennemi(NB_ENNEMIS)
    with pytest.raises(IndexError):
        jeu.ennemi(-1)


def test_ennemi_par_indice_missing(jeu):
    jeu.ennemis[0].indice = 99
    with pytest.raises(LookupError):
        jeu.ennemi_par_indice(0)


def test_ennemi_tue(jeu):
    e = jeu.ennemis[0]
    e.res = 1
    assert jeu.ennemi_tue(e) is False
    e.res = 0
    assert jeu.ennemi_tue(e) is True
    assert jeu.pieces == 5


def test_ennemi_arrive(jeu):
    e = jeu.ennemis[1]
    assert jeu.ennemi_arrive(e) is False
    e.arrive = True
    assert jeu.ennemi_arrive(e) is True
    assert jeu.vies == 4


def test_init_ennemi_jeu(jeu):
    jeu.init_ennemi_jeu()
    assert (jeu.ennemis[0].x, jeu.ennemis[0].y) == (0, 4)
    assert (jeu.ennemis[1].x, jeu.ennemis[1].y) == (0, 0)
    jeu.init_ennemi_jeu()
    assert (jeu.ennemis[1].x, jeu.ennemis[1].y) == (0, 4)


def test_tue_ennemi_tab_recycles_and_rotates(jeu):
    e = jeu.ennemi_par_indice(0)
    e.res = 0
    e.position.x, e.position.y = 10, 13
    assert jeu.tue_ennemi_tab(e) is True
    assert (e.x, e.y) == (0, 4)
    assert e.res == 10
    assert e.indice == NB_ENNEMIS - 1
    assert jeu.ennemi_par_indice(0) is jeu.ennemis[1]


def test_tue_ennemi_tab_leaves_living_enemy(jeu):
    e = jeu.ennemis[0]
    assert jeu.tue_ennemi_tab(e) is False
    assert e.indice == 0


def test_action_automatique_hits_leader(jeu):
    e = jeu.ennemi_par_indice(0)
    start = e.res
    jeu.action_automatique(0.5)
    assert e.res == start - jeu.armes[0].degat
    assert jeu.pieces == 0


def test_action_automatique_kill(jeu):
    e = jeu.ennemi_par_indice(0)
    e.res = 1
    jeu.action_automatique(0.5)
    assert jeu.pieces == 5
    assert (e.x, e.y) == (0, 4)
    assert jeu.ennemi_par_indice(0) is jeu.ennemis[1]


def test_action_tir_moves_bullets(jeu):
    e = jeu.ennemi_par_indice(0)
    e.position.x, e.position.y = 12, 12
    jeu.action_tir(0.01)
    balle = jeu.armes[0].balles[0]
    assert balle.x > 8 and balle.y > 5


@pytest.mark.parametrize(
    "x, y, expected",
    [(0, 5, True), (20, 5, True), (5, 0, True), (1, 3, True), (8, 5, False)],
)
def test_coordonnee_personnage_valide(jeu, x, y, expected):
    assert jeu.coordonnee_personnage_valide(x, y) is expected