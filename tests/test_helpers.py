import math
from dataclasses import replace

from pytest import approx

from cellarena.utils.helpers import (
    calculate_distance,
    calculate_radius,
    center_of_mass,
    clamp_to_world,
    find_safe_spawn,
)
from factories import ai, cell


def test_radius_of_zero_mass_is_base_radius():
    assert calculate_radius(0) == 20


def test_radius_values():
    assert calculate_radius(100) == 30
    assert calculate_radius(400) == 40


def test_radius_is_strictly_increasing():
    radii = [calculate_radius(mass) for mass in (0, 1, 10, 100, 1000, 10000)]
    assert radii == sorted(radii)
    assert len(set(radii)) == len(radii)


def test_radius_of_negative_mass_is_nan():
    assert math.isnan(calculate_radius(-100))


def test_distance_to_self_is_zero():
    point = cell(x=10, y=10)
    assert calculate_distance(point, point) == 0


def test_distance_is_symmetric():
    a = cell(x=0, y=0)
    b = cell(x=3, y=4)
    assert calculate_distance(a, b) == 5
    assert calculate_distance(b, a) == 5


def test_center_of_mass_single_cell():
    assert center_of_mass([cell(x=10, y=20)]) == (10, 20)


def test_center_of_mass_is_weighted():
    x, y = center_of_mass([cell(x=0, y=0, mass=100), cell(x=10, y=10, mass=300)])
    assert x == approx(7.5)
    assert y == approx(7.5)


def test_center_of_mass_empty_is_origin():
    assert center_of_mass([]) == (0, 0)


def test_center_of_mass_zero_mass_is_origin():
    cells = [cell(x=10, y=20, mass=0), cell(x=30, y=40, mass=0)]
    assert center_of_mass(cells) == (0, 0)


def test_clamp_to_world():
    assert clamp_to_world(-5, 2500, 2000) == (0, 2000)
    assert clamp_to_world(10, 20, 2000) == (10, 20)


def test_safe_spawn_in_empty_world(world):
    x, y = find_safe_spawn(world)
    assert 0 <= x <= world.size
    assert 0 <= y <= world.size


def test_safe_spawn_keeps_clearance(make_world):
    blocker = ai(x=1000, y=1000, mass=100)
    player = cell(x=500, y=500, mass=100)
    world = make_world(ai_players=[blocker], player_cells=[player])

    for _ in range(20):
        x, y = find_safe_spawn(world, min_distance=200)
        spot = cell(x=x, y=y)
        assert calculate_distance(spot, blocker) >= calculate_radius(100) + 200
        assert calculate_distance(spot, player) >= calculate_radius(100) + 200


def test_safe_spawn_falls_back_when_world_is_crowded(make_world, empty_config):
    tiny = replace(empty_config, world_size=50)
    world = make_world(config=tiny, ai_players=[ai(x=25, y=25, mass=100)])

    x, y = find_safe_spawn(world)

    assert 0 <= x <= 50
    assert 0 <= y <= 50
