import pygame

from officebeat.beat import Beat
from officebeat.element import EleType
from officebeat.judge import Judge
from officebeat.scene import Scene
from officebeat.settings import InputState

GREY = (100, 100, 100)


def _scene(space=False):
    state = InputState()
    if space:
        state.press("space")
    return Scene(1, state)


def test_new_beat_state():
    beat = Beat(505, 580, -4, GREY)
    assert (beat.hitbox.x, beat.hitbox.y, beat.hitbox.r) == (505, 580, 5)
    assert beat.interacts == [EleType.JUDGE]
    assert beat.ev is False and beat.expired is False


def test_update_moves_beat_and_hitbox():
    beat = Beat(505, 580, -4, GREY)
    beat.update(_scene())
    assert beat.x == 501
    assert beat.hitbox.x == beat.x


def test_passing_ring_is_bad_once(capsys):
    beat = Beat(6, 580, -4, GREY)
    scene = _scene()
    beat.update(scene)
    beat.update(scene)
    assert beat.ev is True
    assert beat.rating == "Bad"
    assert capsys.readouterr().out == "Bad\n"


def test_leaving_screen_expires():
    beat = Beat(-98, 580, -4, GREY)
    beat.update(_scene())
    assert beat.expired is True


def test_perfect_hit(capsys):
    beat = Beat(85, 580, -4, GREY)
    beat.interact(Judge(), _scene(space=True))
    assert beat.expired is True
    assert capsys.readouterr().out == "Perfect\n"


def test_good_and_ok_hits():
    good = Beat(85 + 20, 580, -4, GREY)
    ok = Beat(85 + 50, 580, -4, GREY)
    scene = _scene(space=True)
    good.interact(Judge(), scene)
    ok.interact(Judge(), scene)
    assert (good.rating, ok.rating) == ("Good", "Ok")
    assert good.expired and ok.expired


def test_miss_when_far_or_not_pressed_or_judged():
    far = Beat(85 + 60, 580, -4, GREY)
    far.interact(Judge(), _scene(space=True))
    idle = Beat(85, 580, -4, GREY)
    idle.interact(Judge(), _scene())
    judged = Beat(85, 580, -4, GREY)
    judged.ev = True
    judged.interact(Judge(), _scene(space=True))
    assert [far.expired, idle.expired, judged.expired] == [False, False, False]


def test_scene_removes_hit_beat():
    scene = _scene(space=True)
    scene.register(Judge())
    scene.register(Beat(89, 580, -4, GREY))
    scene.update()
    assert scene.label_elements(EleType.BEAT) == []


def test_draw_ring():
    beat = Beat(100, 100, -4, GREY)
    surface = pygame.Surface((200, 200))
    beat.draw(surface)
    assert tuple(surface.get_at((136, 100)))[:3] == GREY
    assert tuple(surface.get_at((100, 100)))[:3] == (0, 0, 0)