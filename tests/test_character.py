from dataclasses import dataclass

import pygame
import pytest

from officebeat.character import Character, CharacterState
from officebeat.element import EleType
from officebeat.projectile import Projectile
from officebeat.scene import Scene
from officebeat.settings import HEIGHT, GameError


@dataclass
class FakeGif:
    width: int = 40
    height: int = 30
    done: bool = False
    display_index: int = 0
    color: tuple = (255, 0, 0, 255)

    def frame_at(self, seconds):
        return bytes(self.color) * (self.width * self.height)


def make_character():
    gifs = {state: FakeGif() for state in CharacterState}
    return Character(
        gifs=gifs, projectile_image=pygame.Surface((20, 10)), clock=lambda: 1.0
    )


def make_scene(*keys):
    scene = Scene(1)
    for key in keys:
        scene.input.press(key)
    return scene


def test_initial_position_and_hitbox():
    chara = make_character()
    assert chara.x == 300
    assert chara.y == HEIGHT - chara.height - 60
    assert (chara.hitbox.x1, chara.hitbox.y1) == (chara.x, chara.y)
    assert chara.hitbox.x2 - chara.hitbox.x1 == chara.width
    assert chara.state == CharacterState.STOP
    assert chara.label == EleType.CHARACTER


def test_missing_animation_raises():
    with pytest.raises(GameError):
        Character(gifs={CharacterState.STOP: FakeGif()})


def test_stop_to_attack():
    chara = make_character()
    chara.update(make_scene("space", "a"))
    assert chara.state == CharacterState.ATK


def test_stop_to_move_sets_direction_without_moving():
    chara = make_character()
    chara.update(make_scene("d"))
    assert chara.state == CharacterState.MOVE
    assert chara.direction is True
    assert chara.x == 300
    chara.state = CharacterState.STOP
    chara.update(make_scene("a"))
    assert chara.direction is False


def test_move_shifts_and_keeps_hitbox_in_step():
    chara = make_character()
    chara.state = CharacterState.MOVE
    start = chara.x
    chara.update(make_scene("d"))
    assert chara.x == start + 5
    chara.update(make_scene("a"))
    chara.update(make_scene("a"))
    assert chara.x == start - 5
    assert chara.hitbox.x1 == chara.x


def test_move_ends_when_animation_done():
    chara = make_character()
    chara.state = CharacterState.MOVE
    chara.gifs[CharacterState.MOVE].done = True
    chara.update(make_scene())
    assert chara.state == CharacterState.STOP


def test_attack_spawns_one_projectile_facing_right():
    chara = make_character()
    chara.direction = True
    chara.state = CharacterState.ATK
    chara.gifs[CharacterState.ATK].display_index = 2
    scene = make_scene()
    chara.update(scene)
    chara.update(scene)
    shots = scene.label_elements(EleType.PROJECTILE)
    assert len(shots) == 1
    shot = shots[0]
    assert isinstance(shot, Projectile)
    assert shot.v > 0
    assert shot.x == chara.x + chara.width - 100
    assert shot.y == chara.y + 10
    assert chara.new_proj is True


def test_attack_facing_left_shoots_left():
    chara = make_character()
    chara.state = CharacterState.ATK
    chara.gifs[CharacterState.ATK].display_index = 2
    scene = make_scene()
    chara.update(scene)
    shot = scene.label_elements(EleType.PROJECTILE)[0]
    assert shot.v < 0
    assert shot.x == chara.x - 50


def test_attack_finishes():
    chara = make_character()
    chara.state = CharacterState.ATK
    chara.new_proj = True
    chara.gifs[CharacterState.ATK].done = True
    scene = make_scene()
    chara.update(scene)
    assert chara.state == CharacterState.STOP
    assert chara.new_proj is False
    assert scene.label_elements(EleType.PROJECTILE) == []


def test_shift_moves_both_axes():
    chara = make_character()
    y = chara.y
    chara.shift(3, -2)
    assert (chara.x, chara.y) == (303, y - 2)
    assert chara.hitbox.y1 == chara.y


def test_draw_blits_frame():
    chara = make_character()
    surface = pygame.Surface((900, 672))
    chara.draw(surface)
    assert tuple(surface.get_at((chara.x, chara.y))) == (255, 0, 0, 255)
    assert tuple(surface.get_at((chara.x - 1, chara.y))) == (0, 0, 0, 255)