import pytest

from snakegrid.app import cell_rect, food_color, food_size
from snakegrid.config import CELL, DELTA_X, DELTA_Y, SCELL


@pytest.mark.parametrize("food_type", range(9))
def test_normal_food_is_red_and_small(food_type):
    assert food_color(food_type) == "red"
    assert food_size(food_type) == 23


@pytest.mark.parametrize(
    "food_type, color", [(9, "yellow"), (10, "#800080"), (11, "blue")]
)
def test_special_food_colors(food_type, color):
    assert food_color(food_type) == color
    assert food_size(food_type) == 27


@pytest.mark.parametrize("x, y", [(0, 0), (3, 7), (39, 25)])
def test_cell_rect_is_centred_in_cell(x, y):
    left, top, width, height = cell_rect(x, y, SCELL)
    assert (width, height) == (SCELL, SCELL)
    cell_left = x * CELL + DELTA_X
    cell_top = y * CELL + DELTA_Y
    assert left - cell_left == cell_left + CELL - (left + width)
    assert top - cell_top == cell_top + CELL - (top + height)


def test_cell_rect_steps_by_cell():
    a = cell_rect(4, 9, SCELL)
    b = cell_rect(5, 10, SCELL)
    assert b[0] - a[0] == CELL
    assert b[1] - a[1] == CELL


def test_cell_rect_full_cell_starts_at_corner():
    assert cell_rect(2, 3, CELL) == (2 * CELL + DELTA_X, 3 * CELL + DELTA_Y, CELL, CELL)