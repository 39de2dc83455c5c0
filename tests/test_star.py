import pytest
import pygame

from officebeat.scene import Scene
from officebeat.settings import InputState
from officebeat.star import HIDDEN_AFTER, HIDDEN_START, Star


def _star():
    image = pygame.Surface((20, 20))
    image.fill((250, 250, 0))
    return Star(image=image)


def _scene():
    return Scene(1, InputState())


def test_starts_hidden():
    star = _star()
    assert (star.x, star.y) == HIDDEN_START
    assert star.image_switched is False


@pytest.mark.parametrize(
    "key, spot",
    [("up", (240, 190)), ("down", (350, 290)), ("left", (270, 230)), ("right", (430, 190))],
)
def test_arrow_key_moves_star(key, spot):
    star = _star()
    scene = _scene()
    scene.input.press(key)
    star.update(scene)
    assert (star.x, star.y) == spot
    assert star.image_switched is True


def test_hides_after_timer():
    star = _star()
    scene = _scene()
    scene.input.press("left")
    star.update(scene)
    scene.input.release("left")
    for _ in range(100):
        star.update(scene)
    assert (star.x, star.y) == (270, 230)
    for _ in range(25):
        star.update(scene)
    assert (star.x, star.y) == HIDDEN_AFTER
    assert star.image_switched is False


def test_draw_blits_image():
    star = _star()
    scene = _scene()
    scene.input.press("up")
    star.update(scene)
    surface = pygame.Surface((900, 672))
    star.draw(surface)
    assert tuple(surface.get_at((245, 195)))[:3] == (250, 250, 0)
    assert tuple(surface.get_at((230, 180)))[:3] == (0, 0, 0)