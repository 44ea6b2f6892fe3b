import math
from dataclasses import replace

from pytest import approx

from cellarena.services.movement import cell_speed, update_ai_players, update_player_cells
from factories import ai, cell


def test_player_cell_accelerates_toward_direction(make_world):
    world = make_world(player_cells=[cell(x=100, y=100)])

    for _ in range(5):
        update_player_cells(world, (1.0, 0.0))

    moved = world.player_cells[0]
    assert moved.vx > 0
    assert moved.vy == 0
    assert moved.x > 100


def test_velocity_uses_inertia(make_world):
    world = make_world(player_cells=[cell(x=100, y=100, mass=100, vx=2.0)])

    update_player_cells(world, (0.0, 1.0))

    speed = 5 / (30 / 20)
    moved = world.player_cells[0]
    assert moved.vx == approx(1.8)
    assert moved.vy == approx(speed * 0.1)
    assert moved.x == approx(101.8)


def test_smaller_cells_are_faster():
    assert cell_speed(100, 5, 20) > cell_speed(400, 5, 20)
    assert cell_speed(0, 5, 20) == 5


def test_zero_direction_leaves_cells_untouched(make_world):
    world = make_world(player_cells=[cell(x=100, y=100, vx=3.0, vy=-1.0)])

    update_player_cells(world, (0.0, 0.0))

    unchanged = world.player_cells[0]
    assert (unchanged.x, unchanged.y) == (100, 100)
    assert (unchanged.vx, unchanged.vy) == (3.0, -1.0)


def test_cells_are_clamped_but_keep_velocity(make_world):
    world = make_world(player_cells=[cell(x=1999, y=1, vx=50.0, vy=-50.0)])

    update_player_cells(world, (1.0, 0.0))

    pressed = world.player_cells[0]
    assert (pressed.x, pressed.y) == (2000, 0)
    assert pressed.vx > 0
    assert pressed.vy < 0


def test_ai_moves_along_heading(make_world, empty_config):
    config = replace(empty_config, ai_turn_chance=0.0)
    world = make_world(config=config, ai_players=[ai(x=500, y=500, mass=0, direction=0.0)])

    update_ai_players(world)

    bot = world.ai_players[0]
    assert bot.x == approx(505)
    assert bot.y == approx(500)


def test_ai_picks_new_heading(make_world, empty_config):
    config = replace(empty_config, ai_turn_chance=1.0)
    world = make_world(config=config, ai_players=[ai(x=500, y=500, direction=-1.0)])

    update_ai_players(world)

    assert 0 <= world.ai_players[0].direction < 2 * math.pi


def test_ai_clamped_to_world(make_world, empty_config):
    config = replace(empty_config, ai_turn_chance=0.0)
    world = make_world(config=config, ai_players=[ai(x=0, y=0, direction=math.pi)])

    update_ai_players(world)

    assert world.ai_players[0].x == 0
