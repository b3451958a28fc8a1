import os
import wave

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from piratedefense import menu
from piratedefense.menu import QUIT, START, TOGGLE_SOUND, HomeMenu

RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
PURPLE = (128, 0, 128)
BLUE = (0, 0, 255)


def _save(path, size, color):
    image = pygame.Surface(size)
    image.fill(color)
    pygame.image.save(image, str(path))


def _wav(path):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 2205)


@pytest.fixture
def assets(tmp_path):
    _save(tmp_path / menu.BACKGROUND_IMAGE, menu.WINDOW_SIZE, BLUE)
    _save(tmp_path / menu.START_IMAGE, (200, 100), RED)
    _save(tmp_path / menu.START_PRESSED_IMAGE, (200, 100), GREEN)
    _save(tmp_path / menu.SOUND_ON_IMAGE, (40, 40), YELLOW)
    _save(tmp_path / menu.SOUND_OFF_IMAGE, (40, 40), PURPLE)
    _wav(tmp_path / menu.MUSIC_FILE)
    _wav(tmp_path / menu.CLICK_FILE)
    return tmp_path


@pytest.fixture
def home(assets):
    surface = pygame.Surface(menu.WINDOW_SIZE)
    return HomeMenu(surface, assets)


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def _release(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=button)


def test_start_button_layout(home):
    width, height = home.surface.get_size()
    assert home.start_rect.size == (100, 50)
    assert abs(home.start_rect.centerx - width / 2) <= 1
    assert home.start_rect.bottom == height - menu.BUTTON_BOTTOM_MARGIN


def test_sound_button_layout(home):
    _, height = home.surface.get_size()
    assert home.sound_rect.left == menu.SOUND_MARGIN
    assert home.sound_rect.bottom == height - menu.SOUND_MARGIN


def test_start_click_then_release(home):
    assert home.handle_event(_click(home.start_rect.center)) == [START]
    assert home.button_pressed is True
    assert home.handle_event(_release(home.start_rect.center)) == []
    assert home.button_pressed is False


def test_click_outside_buttons_does_nothing(home):
    assert home.handle_event(_click((5, 5))) == []
    assert home.button_pressed is False
    assert home.sound_on is True


def test_sound_button_toggles(home):
    assert home.handle_event(_click(home.sound_rect.center)) == [TOGGLE_SOUND]
    assert home.sound_on is False
    home.handle_event(_click(home.sound_rect.center))
    assert home.sound_on is True


def test_quit_event_stops_menu(home):
    assert home.handle_event(pygame.event.Event(pygame.QUIT)) == [QUIT]
    assert home.running is False


def test_draw_normal_state(home):
    assert home.draw() == ("normal", "on")
    assert home.surface.get_at(home.start_rect.center)[:3] == RED
    assert home.surface.get_at(home.sound_rect.center)[:3] == YELLOW
    assert home.surface.get_at((300, 300))[:3] == BLUE


def test_draw_pressed_and_muted(home):
    home.handle_event(_click(home.start_rect.center))
    home.handle_event(_click(home.sound_rect.center))
    assert home.draw() == ("pressed", "off")
    assert home.surface.get_at(home.start_pressed_rect.center)[:3] == GREEN
    assert home.surface.get_at(home.sound_off_rect.center)[:3] == PURPLE


def test_missing_image_raises(assets):
    (assets / menu.START_IMAGE).unlink()
    with pytest.raises(FileNotFoundError):
        HomeMenu(pygame.Surface(menu.WINDOW_SIZE), assets)


def test_main_reports_missing_assets(tmp_path):
    assert menu.main(["--assets", str(tmp_path / "absent")]) == 1