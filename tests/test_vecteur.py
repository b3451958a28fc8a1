import pytest

from piratedefense.vecteur import Vecteur


def test_default_is_origin():
    v = Vecteur()
    assert (v.x, v.y) == (0.0, 0.0)
    assert v.is_zero()


def test_norm_of_three_four():
    assert Vecteur(3, 4).norm() == pytest.approx(5.0)


def test_norm_is_symmetric_under_sign():
    assert Vecteur(-2.5, 1.5).norm() == pytest.approx(Vecteur(2.5, -1.5).norm())


def test_norm_of_zero_vector():
    assert Vecteur(0, 0).norm() == 0


def test_components_are_mutable():
    v = Vecteur(1, 2)
    v.x = 7
    v.y = -3
    assert v == Vecteur(7, -3)
    assert not v.is_zero()