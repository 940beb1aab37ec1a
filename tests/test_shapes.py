import random

import pytest

from blockfall.shapes import (
    NUMBER_OF_SHAPES,
    PIXEL_PER_SHAPES,
    POSITION_PER_SHAPES,
    Coord,
    Shape,
    random_shape,
    shape_offsets,
)

PIECES = [s for s in Shape if s not in (Shape.EMPTY, Shape.ERROR)]


def test_square_offsets_match_table():
    assert shape_offsets(Shape.SQUARE, 0) == (
        Coord(0, 0),
        Coord(1, 0),
        Coord(1, 1),
        Coord(0, 1),
    )


def test_rectangle_vertical_offsets_match_table():
    assert shape_offsets(Shape.RECTANGLE, 1) == (
        Coord(0, 0),
        Coord(0, -1),
        Coord(0, 1),
        Coord(0, 2),
    )


@pytest.mark.parametrize("shape", PIECES)
@pytest.mark.parametrize("position", range(POSITION_PER_SHAPES))
def test_every_rotation_starts_at_origin_with_distinct_pixels(shape, position):
    offsets = shape_offsets(shape, position)
    assert len(offsets) == PIXEL_PER_SHAPES
    assert offsets[0] == Coord(0, 0)
    assert len(set(offsets)) == PIXEL_PER_SHAPES


def test_empty_shape_collapses_to_origin():
    assert set(shape_offsets(Shape.EMPTY, 2)) == {Coord(0, 0)}


def test_accepts_plain_int_shape():
    assert shape_offsets(1, 3) == shape_offsets(Shape.SQUARE, 3)


@pytest.mark.parametrize("position", [-1, POSITION_PER_SHAPES])
def test_invalid_position_raises(position):
    with pytest.raises(ValueError):
        shape_offsets(Shape.T_SHAPE, position)


def test_error_shape_has_no_geometry():
    with pytest.raises(ValueError):
        shape_offsets(Shape.ERROR, 0)


def test_unknown_shape_value_raises():
    with pytest.raises(ValueError):
        shape_offsets(42, 0)


def test_random_shape_covers_all_pieces_and_never_empty():
    rng = random.Random(1234)
    drawn = {random_shape(rng) for _ in range(500)}
    assert drawn == set(PIECES)
    assert len(drawn) == NUMBER_OF_SHAPES


class _FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def test_random_shape_maps_draw_to_shape():
    rng = _FixedRng(NUMBER_OF_SHAPES - 1)
    assert random_shape(rng) is Shape.T_SHAPE
    assert rng.calls == [NUMBER_OF_SHAPES]


def test_random_shape_lowest_draw_is_square():
    assert random_shape(_FixedRng(0)) is Shape.SQUARE


def test_random_shape_default_source():
    assert random_shape() in PIECES