import pygame

from officebeat.element import EleType, Element
from officebeat.projectile import Projectile
from officebeat.scene import Scene
from officebeat.scenery import Tree
from officebeat.settings import WIDTH


def make_projectile(x=100, y=200, v=5):
    image = pygame.Surface((20, 10))
    image.fill((0, 0, 255))
    return Projectile(x, y, v, image=image)


def test_hitbox_centered_on_image():
    shot = make_projectile()
    assert shot.hitbox.center_x() == shot.x + shot.width // 2
    assert shot.hitbox.center_y() == shot.y + shot.height // 2
    assert shot.hitbox.r == min(shot.width, shot.height) // 2
    assert shot.interacts == [EleType.TREE, EleType.FLOOR]


def test_update_moves_by_speed():
    shot = make_projectile(v=-5)
    cx = shot.hitbox.center_x()
    shot.update(Scene(1))
    assert shot.x == 95
    assert shot.hitbox.center_x() == cx - 5


def test_shift_moves_hitbox():
    shot = make_projectile()
    shot.shift(0, 7)
    assert shot.y == 207
    assert shot.hitbox.center_y() == shot.y + shot.height // 2


def test_expires_off_left_edge():
    floor = Element(EleType.FLOOR)
    shot = make_projectile(x=-shot_width() - 1)
    shot.interact(floor, Scene(1))
    assert shot.expired is True


def shot_width():
    return 20


def test_expires_off_right_edge_only_past_margin():
    floor = Element(EleType.FLOOR)
    shot = make_projectile(x=WIDTH + 20)
    shot.interact(floor, Scene(1))
    assert shot.expired is False
    shot.shift(1, 0)
    shot.interact(floor, Scene(1))
    assert shot.expired is True


def test_tree_hit_expires():
    tree = Tree(image=pygame.Surface((30, 30)))
    shot = make_projectile(x=tree.x, y=tree.y)
    shot.interact(tree, Scene(1))
    assert shot.expired is True


def test_tree_miss_keeps_projectile():
    tree = Tree(image=pygame.Surface((30, 30)))
    shot = make_projectile(x=tree.x + 300, y=tree.y)
    shot.interact(tree, Scene(1))
    assert shot.expired is False


def test_scene_update_drops_projectile_off_screen():
    scene = Scene(1)
    scene.register(Element(EleType.FLOOR))
    shot = make_projectile(x=WIDTH + 20, v=5)
    scene.register(shot)
    scene.update()
    assert scene.label_elements(EleType.PROJECTILE) == []


def test_draw_blits_image():
    shot = make_projectile(x=10, y=10, v=-5)
    surface = pygame.Surface((100, 100))
    shot.draw(surface)
    assert tuple(surface.get_at((15, 15)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)