import pygame

from officebeat.element import EleType
from officebeat.judge import IDLE_COLOR, PRESSED_COLOR, Judge
from officebeat.scene import Scene
from officebeat.settings import InputState


def _scene():
    return Scene(1, InputState())


def test_hitboxes_share_centre_with_growing_radii():
    judge = Judge()
    boxes = [judge.hitbox_pf, judge.hitbox_gd, judge.hitbox_ok]
    assert [b.r for b in boxes] == [5, 30, 50]
    assert all((b.x, b.y) == (judge.x, judge.y) for b in boxes)


def test_interacts_with_beats():
    assert Judge().interacts == [EleType.BEAT]


def test_color_follows_space_key():
    scene = _scene()
    judge = Judge()
    assert judge.color == IDLE_COLOR
    scene.input.press("space")
    judge.update(scene)
    assert judge.color == PRESSED_COLOR
    scene.input.release("space")
    judge.update(scene)
    assert judge.color == IDLE_COLOR


def test_draw_puts_ring_outline():
    judge = Judge()
    surface = pygame.Surface((200, 700))
    judge.draw(surface)
    assert tuple(surface.get_at((judge.x + judge.r - 3, judge.y)))[:3] == IDLE_COLOR
    assert tuple(surface.get_at((judge.x, judge.y)))[:3] == (0, 0, 0)