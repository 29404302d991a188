import math

from intrect.core import bounds, config
from intrect.core.int32 import INT32_MAX, INT32_MIN


# ---- from_doubles ----

def test_from_doubles_floors_position_and_ceils_size() -> None:
    assert bounds.from_doubles(1.5, 2.5, 3.2, 4.0) == (1, 2, 4, 5)
    assert bounds.from_doubles(0.0, 0.0, 10.0, 10.0) == (0, 0, 10, 10)


def test_from_doubles_negative_size_is_not_compensated() -> None:
    assert bounds.from_doubles(0.5, 0.0, -2.5, 1.0) == (0, 0, -3, 1)


def test_from_doubles_unrepresentable_position() -> None:
    assert bounds.from_doubles(5e9, 0.0, 10.0, 10.0) == (INT32_MAX, 0, -1, 10)
    assert bounds.from_doubles(0.0, 5e9, 1.0, 1.0) == (0, INT32_MAX, 1, -1)


def test_from_doubles_clipped_position_keeps_far_edge() -> None:
    assert bounds.from_doubles(3e9, 0.0, 10.0, 10.0) == (INT32_MAX, 0, 852516363, 10)
    assert bounds.from_doubles(-3e9, 0.0, 10.0, 10.0) == (INT32_MIN, 0, -852516342, 10)


def test_from_doubles_huge_size_and_nan() -> None:
    assert bounds.from_doubles(0.0, 0.0, 1e12, 1.0) == (0, 0, INT32_MAX, 1)
    assert bounds.from_doubles(math.nan, 0.0, 10.0, 1.0) == (0, 0, 0, 1)


# ---- translate ----

def test_translate_plain_move_and_back() -> None:
    moved = bounds.translate((3, 4, 5, 6), 7, -8)
    assert moved == (10, -4, 5, 6)
    assert bounds.translate(moved, -7, 8) == (3, 4, 5, 6)


def test_translate_past_max_pins_x_and_grows_width() -> None:
    assert bounds.translate((1, 0, 10, 10), INT32_MAX, 0) == (INT32_MAX, 0, 11, 10)
    assert bounds.translate((0, INT32_MAX - 1, 4, 4), 0, 3) == (0, INT32_MAX, 4, 6)


def test_translate_past_max_clamps_width() -> None:
    assert bounds.translate((INT32_MAX - 5, 0, INT32_MAX, 1), 10, 0) == (INT32_MAX, 0, INT32_MAX, 1)


def test_translate_past_min_shrinks_width() -> None:
    assert bounds.translate((INT32_MIN + 5, 0, 10, 10), -10, 0) == (INT32_MIN, 0, 5, 10)
    # far edge also below the range: width turns negative
    assert bounds.translate((INT32_MIN + 5, 0, 3, 1), -10, 0) == (INT32_MIN, 0, -2, 1)


def test_translate_leaves_negative_size_alone() -> None:
    assert bounds.translate((1, 0, -1, 10), INT32_MAX, 0) == (INT32_MAX, 0, -1, 10)
    assert bounds.translate((0, INT32_MIN + 1, 3, -4), 0, -5) == (0, INT32_MIN, 3, -4)


def test_translate_delta_is_a_32_bit_value() -> None:
    assert bounds.translate((0, 0, 1, 1), 1 << 32, 0) == (0, 0, 1, 1)


# ---- inside ----

def test_inside_is_half_open() -> None:
    b = (0, 0, 10, 10)
    assert bounds.inside(b, 0, 0)
    assert bounds.inside(b, 9, 9)
    assert not bounds.inside(b, 10, 5)
    assert not bounds.inside(b, 5, 10)
    assert not bounds.inside(b, -1, 5)


def test_inside_degenerate_rectangles() -> None:
    assert not bounds.inside((0, 0, -1, 10), 0, 0)
    assert not bounds.inside((0, 0, 0, 10), 0, 0)


def test_inside_with_far_edge_beyond_range() -> None:
    b = (INT32_MAX - 5, 0, 10, 10)
    assert bounds.inside(b, INT32_MAX, 3)
    assert not bounds.inside(b, INT32_MAX - 6, 3)


# ---- contains_bounds ----

def test_contains_bounds_basic() -> None:
    b = (0, 0, 10, 10)
    assert bounds.contains_bounds(b, (2, 2, 5, 5))
    assert bounds.contains_bounds(b, (0, 0, 10, 10))
    assert not bounds.contains_bounds(b, (5, 5, 6, 5))
    assert not bounds.contains_bounds(b, (-1, 0, 5, 5))


def test_contains_bounds_negative_sizes() -> None:
    assert not bounds.contains_bounds((0, 0, 10, 10), (2, 2, -1, 5))
    assert not bounds.contains_bounds((0, 0, -10, 10), (2, 2, 1, 1))


def test_contains_bounds_zero_width_argument() -> None:
    assert not bounds.contains_bounds((0, 0, 10, 10), (2, 2, 0, 5))


def test_contains_bounds_overflowing_edges() -> None:
    # both far edges past INT32_MAX
    assert bounds.contains_bounds((INT32_MAX - 5, 0, 10, 10), (INT32_MAX - 3, 0, 5, 5))
    # only the argument's far edge past INT32_MAX
    assert not bounds.contains_bounds((0, 0, 10, 10), (5, 0, INT32_MAX, 5))


# ---- intersects ----

def test_intersects_basic() -> None:
    b = (0, 0, 10, 10)
    assert bounds.intersects(b, (5, 5, 10, 10))
    assert not bounds.intersects(b, (10, 0, 5, 5))
    assert not bounds.intersects(b, (20, 20, 5, 5))
    assert not bounds.intersects(b, (2, 2, 0, 5))


def test_intersects_with_far_edges_beyond_range() -> None:
    assert bounds.intersects((INT32_MAX - 5, 0, 10, 10), (INT32_MAX - 2, 0, 10, 10))
    assert not bounds.intersects((INT32_MAX - 5, 0, 10, 10), (0, 0, 10, 10))


# ---- intersection ----

def test_intersection_overlap_and_gap() -> None:
    assert bounds.intersection((0, 0, 10, 10), (5, 5, 10, 10)) == (5, 5, 5, 5)
    assert bounds.intersection((0, 0, 10, 10), (20, 20, 5, 5)) == (20, 20, -10, -10)


def test_intersection_clamps_low_end_only() -> None:
    got = bounds.intersection((INT32_MAX - 1, 0, 1, 1), (INT32_MIN, 0, 1, 1))
    assert got == (INT32_MAX - 1, 0, INT32_MIN, 1)


def test_intersection_uses_wide_far_edges() -> None:
    got = bounds.intersection((INT32_MAX - 5, 0, 10, 10), (INT32_MAX - 2, 0, 10, 10))
    assert got == (INT32_MAX - 2, 0, 7, 10)


# ---- union / add ----

def test_union_non_existent_sides() -> None:
    assert bounds.union((-5, -5, -5, -5), (0, 0, 5, 5)) == (0, 0, 5, 5)
    assert bounds.union((0, 0, 5, 5), (1, 1, -1, 3)) == (0, 0, 5, 5)
    assert bounds.union((1, 1, -1, -1), (2, 2, -3, 4)) == (2, 2, -3, 4)


def test_union_basic_and_zero_size() -> None:
    assert bounds.union((0, 0, 10, 10), (5, 5, 10, 10)) == (0, 0, 15, 15)
    assert bounds.union((0, 0, 0, 0), (5, 5, 1, 1)) == (0, 0, 6, 6)


def test_union_clamps_high_end() -> None:
    assert bounds.union((INT32_MIN, 0, 1, 1), (INT32_MAX - 1, 0, 1, 1)) == (INT32_MIN, 0, INT32_MAX, 1)


def test_add_point_extends_edges() -> None:
    assert bounds.add_point((0, 0, 10, 10), 20, 5) == (0, 0, 20, 10)
    assert bounds.add_point((5, 5, 2, 2), 1, 1) == (1, 1, 6, 6)


def test_add_point_to_non_existent_collapses_on_point() -> None:
    assert bounds.add_point((3, 3, -1, 5), 7, 8) == (7, 8, 0, 0)


def test_add_point_clamps_high_end() -> None:
    assert bounds.add_point((INT32_MIN, 0, 0, 0), INT32_MAX, 0) == (INT32_MIN, 0, INT32_MAX, 0)


def test_add_rect() -> None:
    assert bounds.add_rect((1, 1, -1, 1), (2, 3, 4, 5)) == (2, 3, 4, 5)
    assert bounds.add_rect((0, 0, 1, 1), (5, 5, -1, 1)) == (0, 0, 1, 1)
    assert bounds.add_rect((1, 1, -1, 1), (2, 2, -2, 2)) == (2, 2, -2, 2)
    assert bounds.add_rect((0, 0, 10, 10), (5, 5, 10, 10)) == (0, 0, 15, 15)


# ---- grow ----

def test_grow_and_shrink() -> None:
    assert bounds.grow((10, 10, 5, 5), 2, 3) == (8, 7, 9, 11)
    assert bounds.grow((10, 10, 5, 5), -2, 0) == (12, 10, 1, 5)
    assert bounds.grow((0, 0, 10, 10), 0, 0) == (0, 0, 10, 10)


def test_grow_past_zero_keeps_size_negative() -> None:
    assert bounds.grow((10, 10, 5, 5), -5, 0) == (15, 10, -5, 5)
    assert bounds.grow((INT32_MAX, 0, 0, 1), -INT32_MAX, 0) == (INT32_MAX, 0, INT32_MIN, 1)


def test_grow_clamps_near_edge_before_size() -> None:
    assert bounds.grow((INT32_MIN, 0, 10, 10), 5, 0) == (INT32_MIN, 0, 15, 10)
    assert bounds.grow((0, 0, INT32_MAX, 1), INT32_MAX, 0) == (-INT32_MAX, 0, INT32_MAX, 1)


# ---- emptiness ----

def test_is_empty_and_non_existent() -> None:
    assert bounds.is_empty((0, 0, 0, 5))
    assert bounds.is_empty((0, 0, 5, -1))
    assert not bounds.is_empty((0, 0, 5, 5))
    assert bounds.is_nonexistent((0, 0, 5, -1))
    assert not bounds.is_nonexistent((0, 0, 0, 0))


# ---- debug trace ----

def test_clamp_trace_printed_when_enabled(monkeypatch, capsys) -> None:
    monkeypatch.setattr(config, "DEBUG_CLAMP", True)
    bounds.union((INT32_MIN, 0, 1, 1), (INT32_MAX - 1, 0, 1, 1))
    out = capsys.readouterr().out
    assert "[intrect] union width: 4294967295 -> 2147483647" in out


def test_clamp_trace_silent_by_default(monkeypatch, capsys) -> None:
    monkeypatch.setattr(config, "DEBUG_CLAMP", False)
    bounds.union((INT32_MIN, 0, 1, 1), (INT32_MAX - 1, 0, 1, 1))
    assert capsys.readouterr().out == ""
