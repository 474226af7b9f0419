import random

import pygame
import pytest

from lawnmower.enemy import Enemy, EnemyFactory, Grass, Weed, draw_enemies
from lawnmower.entity import Rect


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _image(size=(10, 10), color=(255, 0, 0)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_grass_and_weed_hit_points():
    assert Grass().hp == 225
    assert Weed().hp == 350


def test_take_damage_default_and_amount():
    grass = Grass(image=_image())
    grass.take_damage()
    assert grass.hp == 224
    grass.take_damage(24)
    assert grass.hp == 200


def test_is_dead_at_zero_and_below():
    weed = Weed(image=_image())
    weed.hp = 1
    assert not weed.is_dead()
    weed.take_damage()
    assert weed.is_dead()
    weed.take_damage(5)
    assert weed.is_dead()


def test_random_position_within_lawn():
    rng = random.Random(7)
    for _ in range(200):
        x, y = Grass(rng).position
        assert 100.0 <= x <= 1820.0
        assert 100.0 <= y <= 980.0


def test_same_seed_gives_same_position():
    first_x, first_y = Grass(random.Random(3)).position
    second_x, second_y = Grass(random.Random(3)).position
    assert 100.0 <= first_x <= 1820.0
    assert 100.0 <= first_y <= 980.0
    assert (first_x, first_y) == (second_x, second_y)


def test_bounds_centered_on_position():
    grass = Grass(image=_image((30, 20)))
    grass.position = (400.0, 300.0)
    assert grass.bounds() == Rect.centered((400.0, 300.0), (30, 20))


def test_bounds_empty_without_image(capsys):
    grass = Grass()
    assert grass.image is None
    assert grass.bounds() == Rect()
    assert "[Grass Texture Error]" in capsys.readouterr().err


def test_missing_weed_image_reported(capsys):
    Weed()
    assert "[Weed Texture Error]" in capsys.readouterr().err


def test_image_loaded_from_sprites_dir(_in_tmp):
    (_in_tmp / "sprites").mkdir()
    pygame.image.save(_image((30, 20)), str(_in_tmp / "sprites" / "Grass.png"))
    grass = Grass()
    assert grass.bounds().width == 30
    assert grass.bounds().height == 20


def test_set_image_changes_bounds():
    enemy = Grass()
    enemy.set_image(_image((8, 6)))
    assert (enemy.bounds().width, enemy.bounds().height) == (8, 6)


def test_draw_blits_image_at_position():
    target = pygame.Surface((200, 200))
    target.fill((0, 0, 0))
    grass = Grass(image=_image())
    grass.position = (50.0, 50.0)
    grass.draw(target)
    assert tuple(target.get_at((50, 50)))[:3] == (255, 0, 0)
    assert tuple(target.get_at((0, 0)))[:3] == (0, 0, 0)


def test_draw_enemies_draws_all():
    target = pygame.Surface((200, 200))
    target.fill((0, 0, 0))
    first = Grass(image=_image(color=(0, 255, 0)))
    first.position = (30.0, 30.0)
    second = Weed(image=_image(color=(0, 0, 255)))
    second.position = (150.0, 150.0)
    draw_enemies([first, second], target)
    assert tuple(target.get_at((30, 30)))[:3] == (0, 255, 0)
    assert tuple(target.get_at((150, 150)))[:3] == (0, 0, 255)


def test_factory_builds_kinds():
    rng = random.Random(1)
    grass = EnemyFactory.grass(rng)
    weed = EnemyFactory.weed(rng)
    assert isinstance(grass, Grass) and grass.hp == 225
    assert isinstance(weed, Weed) and weed.hp == 350
    assert isinstance(grass, Enemy)