import pygame
import pytest

from spritequest.entity import Entity, Player


@pytest.fixture
def player_sheet():
    return pygame.Surface((192 * 14, 192 * 2))


def test_move_without_component_does_nothing():
    entity = Entity()
    entity.set_position(3.0, 4.0)
    entity.move(1.0, 1.0, 1.0)
    entity.update(1.0)
    assert entity.sprite.position == pygame.math.Vector2(3.0, 4.0)


def test_movement_component_moves_entity():
    entity = Entity()
    entity.create_movement_component(300.0, 15.0, 5.0)
    entity.move(1.0, 0.0, 0.1)
    assert entity.movement_component.velocity.x == 15.0


def test_render_draws_texture():
    entity = Entity()
    texture = pygame.Surface((4, 4))
    texture.fill((200, 100, 50))
    entity.set_texture(texture)
    entity.set_position(2, 2)
    target = pygame.Surface((8, 8))
    target.fill((0, 0, 0))
    entity.render(target)
    assert tuple(target.get_at((3, 3)))[:3] == (200, 100, 50)
    assert tuple(target.get_at((0, 0)))[:3] == (0, 0, 0)


def test_player_setup(player_sheet):
    player = Player(10.0, 20.0, player_sheet)
    assert player.sprite.position == pygame.math.Vector2(10.0, 20.0)
    assert set(player.animation_component.animations) == {"IDLE_LEFT", "WALK_LEFT"}
    assert player.movement_component.max_velocity == 300.0
    assert player.sprite.texture_rect == pygame.Rect(0, 192, 192, 192)


def test_idle_player_plays_idle(player_sheet):
    player = Player(0.0, 0.0, player_sheet)
    player.update(0.01)
    component = player.animation_component
    assert component.last_animation is component.animations["IDLE_LEFT"]


def test_player_walking_left(player_sheet):
    player = Player(0.0, 0.0, player_sheet)
    player.move(-1.0, 0.0, 0.1)
    player.update(0.1)
    component = player.animation_component
    assert component.last_animation is component.animations["WALK_LEFT"]
    assert player.sprite.position.x < 0.0