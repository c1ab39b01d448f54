import pytest

from snakegrid.config import (
    CELL_X,
    CELL_Y,
    MAP_NAMES,
    Wall,
    map_walls,
    tick_interval,
)


def test_classic_box_spans_whole_board():
    walls = map_walls(1)
    max_x = max(max(w.x1, w.x2) for w in walls)
    max_y = max(max(w.y1, w.y2) for w in walls)
    assert (max_x, max_y) == (40, 26)
    assert (max_x, max_y) == (CELL_X, CELL_Y)


def test_borderless_map_has_no_walls():
    assert map_walls(0) == ()


def test_classic_box_walls_lie_on_border():
    walls = map_walls(1)
    assert walls
    for w in walls:
        on_horizontal = w.y1 == w.y2 and w.y1 in (0, CELL_Y)
        on_vertical = w.x1 == w.x2 and w.x1 in (0, CELL_X)
        assert on_horizontal or on_vertical


def test_classic_box_covers_every_border_segment():
    walls = set(map_walls(1))
    for x in range(CELL_X):
        assert Wall(x, 0, x + 1, 0) in walls
        assert Wall(x, CELL_Y, x + 1, CELL_Y) in walls
    for y in range(CELL_Y):
        assert Wall(0, y, 0, y + 1) in walls
        assert Wall(CELL_X, y, CELL_X, y + 1) in walls


@pytest.mark.parametrize("map_id", [1, 2])
def test_walls_are_unit_segments_in_ascending_order(map_id):
    for w in map_walls(map_id):
        assert (w.x2 - w.x1) + (w.y2 - w.y1) == 1
        assert w.x2 >= w.x1 and w.y2 >= w.y1


@pytest.mark.parametrize("map_id", [1, 2])
def test_walls_are_unique(map_id):
    walls = map_walls(map_id)
    assert len(set(walls)) == len(walls)


def test_trail_station_contains_known_segments():
    walls = set(map_walls(2))
    assert Wall(3, 3, 4, 3) in walls
    assert Wall(37, 20, 37, 21) in walls
    assert Wall(33, 16, 34, 16) in walls
    assert Wall(34, 16, 35, 16) not in walls


def test_every_named_map_has_walls_defined_and_no_more():
    assert MAP_NAMES == ("Borderless", "Classic_Box", "Trail_Station")
    counts = [len(map_walls(map_id)) for map_id, _ in enumerate(MAP_NAMES)]
    assert counts[0] == 0
    assert counts[1] > 0 and counts[2] > 0
    with pytest.raises(ValueError):
        map_walls(len(MAP_NAMES))


@pytest.mark.parametrize("map_id", [-1, 3])
def test_unknown_map_raises(map_id):
    with pytest.raises(ValueError):
        map_walls(map_id)


@pytest.mark.parametrize(
    "level, interval", [(1, 120), (2, 100), (3, 75), (4, 50)]
)
def test_tick_interval(level, interval):
    assert tick_interval(level) == interval


@pytest.mark.parametrize("level", [0, 5])
def test_unknown_difficulty_raises(level):
    with pytest.raises(ValueError):
        tick_interval(level)