# Module: overflow-safe rectangle algorithms over (x, y, width, height) tuples.
# Main: translate, grow, add_point, union, intersection, intersects, inside, contains_bounds.
# Example: from intrect.core import bounds; bounds.union((0, 0, 5, 5), (3, 3, 5, 5))

from typing import Tuple

from intrect.core import config
from intrect.core.int32 import (
    INT32_MAX,
    INT32_MIN,
    add_i32,
    any_negative,
    clamp_high,
    clamp_i32,
    clamp_low,
    clip_double,
    wrap_i32,
)

Bounds = Tuple[int, int, int, int]


def _trace(op: str, field: str, raw, clamped) -> None:
    if config.DEBUG_CLAMP and raw != clamped:
        print(f"[intrect] {op} {field}: {raw} -> {clamped}", flush=True)


def narrow(x: int, y: int, width: int, height: int) -> Bounds:
    return (wrap_i32(x), wrap_i32(y), wrap_i32(width), wrap_i32(height))


def is_nonexistent(b: Bounds) -> bool:
    return any_negative(b[2], b[3])


def is_empty(b: Bounds) -> bool:
    return b[2] <= 0 or b[3] <= 0


# ---------- set_rect (floats -> ints) ----------

def _clip_axis(pos: float, size: float, name: str) -> Tuple[int, int]:
    if pos > 2.0 * INT32_MAX:
        # too far right/down to keep any part of the rectangle
        _trace("set_rect", name, pos, INT32_MAX)
        return INT32_MAX, -1
    new_pos = clip_double(pos, False)
    if size >= 0:
        # keep the far edge where it was
        size += pos - new_pos
    new_size = clip_double(size, size >= 0)
    _trace("set_rect", name, pos, new_pos)
    return new_pos, new_size


def from_doubles(x: float, y: float, width: float, height: float) -> Bounds:
    nx, nw = _clip_axis(float(x), float(width), "x")
    ny, nh = _clip_axis(float(y), float(height), "y")
    return (nx, ny, nw, nh)


# ---------- translate ----------

def _translate_axis(pos: int, size: int, delta: int, name: str) -> Tuple[int, int]:
    moved = pos + delta
    if delta < 0:
        if moved < INT32_MIN:
            if size >= 0:
                size += moved - INT32_MIN
            _trace("translate", name, moved, INT32_MIN)
            moved = INT32_MIN
    elif moved > INT32_MAX:
        if size >= 0:
            size += moved - INT32_MAX
            if size > INT32_MAX:
                _trace("translate", name + ".size", size, INT32_MAX)
                size = INT32_MAX
        _trace("translate", name, moved, INT32_MAX)
        moved = INT32_MAX
    return moved, size


def translate(b: Bounds, dx: int, dy: int) -> Bounds:
    x, y, w, h = b
    x, w = _translate_axis(x, w, wrap_i32(dx), "x")
    y, h = _translate_axis(y, h, wrap_i32(dy), "y")
    return (x, y, w, h)


# ---------- containment ----------

def inside(b: Bounds, px: int, py: int) -> bool:
    x, y, w, h = b
    if any_negative(w, h):
        return False
    px, py = wrap_i32(px), wrap_i32(py)
    if px < x or py < y:
        return False
    w = add_i32(w, x)
    h = add_i32(h, y)
    # far < near only when the far edge wrapped past INT32_MAX
    return (w < x or w > px) and (h < y or h > py)


def contains_bounds(b: Bounds, other: Bounds) -> bool:
    x, y, w, h = b
    ox, oy, ow, oh = other
    if any_negative(w, h, ow, oh):
        return False
    if ox < x or oy < y:
        return False
    w = add_i32(w, x)
    ow = add_i32(ow, ox)
    if ow <= ox:
        # other's far edge overflowed, or its width is zero
        if w >= x or ow > w:
            return False
    else:
        if w >= x and ow > w:
            return False
    h = add_i32(h, y)
    oh = add_i32(oh, oy)
    if oh <= oy:
        if h >= y or oh > h:
            return False
    else:
        if h >= y and oh > h:
            return False
    return True


def intersects(b: Bounds, other: Bounds) -> bool:
    tx, ty, tw, th = b
    rx, ry, rw, rh = other
    if rw <= 0 or rh <= 0 or tw <= 0 or th <= 0:
        return False
    rw = add_i32(rw, rx)
    rh = add_i32(rh, ry)
    tw = add_i32(tw, tx)
    th = add_i32(th, ty)
    return ((rw < rx or rw > tx) and
            (rh < ry or rh > ty) and
            (tw < tx or tw > rx) and
            (th < ty or th > ry))


# ---------- combining ----------

def intersection(b: Bounds, other: Bounds) -> Bounds:
    tx1, ty1, tw, th = b
    rx1, ry1, rw, rh = other
    tx2 = tx1 + tw
    ty2 = ty1 + th
    rx2 = rx1 + rw
    ry2 = ry1 + rh
    tx1 = max(tx1, rx1)
    ty1 = max(ty1, ry1)
    tx2 = min(tx2, rx2) - tx1
    ty2 = min(ty2, ry2) - ty1
    # a span can only fall below the range, never above it
    w, h = clamp_low(tx2), clamp_low(ty2)
    _trace("intersection", "width", tx2, w)
    _trace("intersection", "height", ty2, h)
    return (tx1, ty1, w, h)


def union(b: Bounds, other: Bounds) -> Bounds:
    if is_nonexistent(b):
        return tuple(other)
    if is_nonexistent(other):
        return tuple(b)
    tx1, ty1, tw, th = b
    rx1, ry1, rw, rh = other
    tx2 = max(tx1 + tw, rx1 + rw)
    ty2 = max(ty1 + th, ry1 + rh)
    tx1 = min(tx1, rx1)
    ty1 = min(ty1, ry1)
    tx2 -= tx1
    ty2 -= ty1
    w, h = clamp_high(tx2), clamp_high(ty2)
    _trace("union", "width", tx2, w)
    _trace("union", "height", ty2, h)
    return (tx1, ty1, w, h)


def add_point(b: Bounds, px: int, py: int) -> Bounds:
    px, py = wrap_i32(px), wrap_i32(py)
    if is_nonexistent(b):
        return (px, py, 0, 0)
    x1, y1, w, h = b
    x2 = max(x1 + w, px)
    y2 = max(y1 + h, py)
    x1 = min(x1, px)
    y1 = min(y1, py)
    x2 -= x1
    y2 -= y1
    w, h = clamp_high(x2), clamp_high(y2)
    _trace("add", "width", x2, w)
    _trace("add", "height", y2, h)
    return (x1, y1, w, h)


def add_rect(b: Bounds, other: Bounds) -> Bounds:
    if is_nonexistent(b):
        return tuple(other)
    # a non-existent `other` leaves b unchanged through union()
    return union(b, other)


def _grow_axis(pos: int, size: int, delta: int, name: str) -> Tuple[int, int]:
    near = pos - delta
    far = pos + size + delta
    if far < near:
        # the axis collapsed: keep the size negative
        span = far - near
        size = clamp_low(span)
        _trace("grow", name + ".size", span, size)
        new_near = clamp_i32(near)
    else:
        new_near = clamp_i32(near)
        span = far - new_near
        size = clamp_i32(span)
        _trace("grow", name + ".size", span, size)
    _trace("grow", name, near, new_near)
    return new_near, size


def grow(b: Bounds, h: int, v: int) -> Bounds:
    x, y, w, hh = b
    x, w = _grow_axis(x, w, wrap_i32(h), "x")
    y, hh = _grow_axis(y, hh, wrap_i32(v), "y")
    return (x, y, w, hh)
