# Module: value types for integer geometry.
# Main: Point, Size, Rectangle (immutable), MutableRectangle (in-place).
# Example: from intrect.core.models import Rectangle; Rectangle(0, 0, 10, 10).union(r)

from dataclasses import dataclass
from typing import Any, Dict, Union

from intrect.core import bounds
from intrect.core.bounds import Bounds
from intrect.core.int32 import wrap_i32


def _int_field(d: Dict[str, Any], key: str) -> int:
    return wrap_i32(int(d.get(key, 0)))


@dataclass(frozen=True, slots=True)
class Point:
    x: int = 0
    y: int = 0

    def __post_init__(self):
        object.__setattr__(self, "x", wrap_i32(self.x))
        object.__setattr__(self, "y", wrap_i32(self.y))

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Point":
        return Point(_int_field(d, "x"), _int_field(d, "y"))


@dataclass(frozen=True, slots=True)
class Size:
    width: int = 0
    height: int = 0

    def __post_init__(self):
        object.__setattr__(self, "width", wrap_i32(self.width))
        object.__setattr__(self, "height", wrap_i32(self.height))

    def to_dict(self) -> Dict[str, Any]:
        return {"width": self.width, "height": self.height}

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Size":
        return Size(_int_field(d, "width"), _int_field(d, "height"))


class _RectQueries:
    """Read-only operations shared by Rectangle and MutableRectangle.

    A rectangle with negative width or height is non-existent: it contains
    nothing, intersects nothing and is ignored by union/add.
    """

    __slots__ = ()

    @property
    def bounds(self) -> Bounds:
        return (self.x, self.y, self.width, self.height)

    def get_location(self) -> Point:
        return Point(self.x, self.y)

    def get_size(self) -> Size:
        return Size(self.width, self.height)

    def get_bounds(self) -> "Rectangle":
        return Rectangle(self.x, self.y, self.width, self.height)

    def is_empty(self) -> bool:
        """True when width or height is zero or negative."""
        return bounds.is_empty(self.bounds)

    def is_nonexistent(self) -> bool:
        return bounds.is_nonexistent(self.bounds)

    def inside(self, px: int, py: int) -> bool:
        return bounds.inside(self.bounds, px, py)

    def contains(self, px: int, py: int) -> bool:
        """Point test over [x, x + width) x [y, y + height)."""
        return bounds.inside(self.bounds, px, py)

    def contains_point(self, p: Point) -> bool:
        return bounds.inside(self.bounds, p.x, p.y)

    def contains_bounds(self, x: int, y: int, width: int, height: int) -> bool:
        return bounds.contains_bounds(self.bounds, bounds.narrow(x, y, width, height))

    def contains_rect(self, r: "_RectQueries") -> bool:
        return bounds.contains_bounds(self.bounds, r.bounds)

    def intersects(self, r: "_RectQueries") -> bool:
        """True when both rectangles have positive size and share an interior point."""
        return bounds.intersects(self.bounds, r.bounds)

    def intersection(self, r: "_RectQueries"):
        """Overlap of both rectangles; negative width/height means none."""
        return self._of(bounds.intersection(self.bounds, r.bounds))

    def union(self, r: "_RectQueries"):
        """Smallest rectangle holding both; a non-existent side yields a copy of the other."""
        return self._of(bounds.union(self.bounds, r.bounds))

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


AnyRect = Union["Rectangle", "MutableRectangle"]


@dataclass(frozen=True, slots=True)
class Rectangle(_RectQueries):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        x, y, w, h = bounds.narrow(self.x, self.y, self.width, self.height)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "height", h)

    @classmethod
    def _of(cls, b: Bounds) -> "Rectangle":
        return cls(*b)

    @classmethod
    def from_rect(cls, r: AnyRect) -> "Rectangle":
        return cls(r.x, r.y, r.width, r.height)

    @classmethod
    def of_size(cls, width: int, height: int) -> "Rectangle":
        return cls(0, 0, width, height)

    @classmethod
    def from_point(cls, p: Point) -> "Rectangle":
        return cls(p.x, p.y, 0, 0)

    @classmethod
    def from_size(cls, s: Size) -> "Rectangle":
        return cls(0, 0, s.width, s.height)

    @classmethod
    def from_point_size(cls, p: Point, s: Size) -> "Rectangle":
        return cls(p.x, p.y, s.width, s.height)

    @classmethod
    def from_doubles(cls, x: float, y: float, width: float, height: float) -> "Rectangle":
        """Build from floats, clipping to the int32 range and keeping far edges where possible.

        x/y are floored, width/height ceiled. An x (or y) beyond 2 * INT32_MAX
        cannot be represented at all and gives x = INT32_MAX, width = -1.
        """
        return cls._of(bounds.from_doubles(x, y, width, height))

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Rectangle":
        return Rectangle(
            _int_field(d, "x"),
            _int_field(d, "y"),
            _int_field(d, "width"),
            _int_field(d, "height"),
        )

    def thaw(self) -> "MutableRectangle":
        return MutableRectangle(self.x, self.y, self.width, self.height)

    # ---- pure counterparts of the in-place operations ----

    def with_bounds(self, x: int, y: int, width: int, height: int) -> "Rectangle":
        return Rectangle(x, y, width, height)

    def with_location(self, x: int, y: int) -> "Rectangle":
        return Rectangle(x, y, self.width, self.height)

    def with_size(self, width: int, height: int) -> "Rectangle":
        return Rectangle(self.x, self.y, width, height)

    def translated(self, dx: int, dy: int) -> "Rectangle":
        """Move by (dx, dy).

        A move past the int32 range pins x (or y) to the boundary and, for a
        non-negative width (or height), resizes so the far edge lands where an
        unbounded move would have put it.
        """
        return self._of(bounds.translate(self.bounds, dx, dy))

    def grown(self, h: int, v: int) -> "Rectangle":
        return self._of(bounds.grow(self.bounds, h, v))

    def including(self, px: int, py: int) -> "Rectangle":
        return self._of(bounds.add_point(self.bounds, px, py))

    def including_point(self, p: Point) -> "Rectangle":
        return self._of(bounds.add_point(self.bounds, p.x, p.y))

    def including_rect(self, r: AnyRect) -> "Rectangle":
        return self._of(bounds.add_rect(self.bounds, r.bounds))


@dataclass(slots=True)
class MutableRectangle(_RectQueries):
    """Rectangle whose bounds change in place; every setter goes through set_bounds."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        self.set_bounds(self.x, self.y, self.width, self.height)

    @classmethod
    def _of(cls, b: Bounds) -> "MutableRectangle":
        return cls(*b)

    @classmethod
    def from_rect(cls, r: AnyRect) -> "MutableRectangle":
        return cls(r.x, r.y, r.width, r.height)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "MutableRectangle":
        return Rectangle.from_dict(d).thaw()

    def freeze(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height)

    def set_bounds(self, x: int, y: int, width: int, height: int) -> None:
        self.x, self.y, self.width, self.height = bounds.narrow(x, y, width, height)

    def set_bounds_of(self, r: AnyRect) -> None:
        self.set_bounds(r.x, r.y, r.width, r.height)

    def set_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.set_bounds(*bounds.from_doubles(x, y, width, height))

    def set_location(self, x: int, y: int) -> None:
        self.set_bounds(x, y, self.width, self.height)

    def set_location_of(self, p: Point) -> None:
        self.set_location(p.x, p.y)

    def set_size(self, width: int, height: int) -> None:
        self.set_bounds(self.x, self.y, width, height)

    def set_size_of(self, s: Size) -> None:
        self.set_size(s.width, s.height)

    def translate(self, dx: int, dy: int) -> None:
        self.set_bounds(*bounds.translate(self.bounds, dx, dy))

    def grow(self, h: int, v: int) -> None:
        """Push each edge out by h (left/right) and v (top/bottom); negative values shrink.

        An axis that shrinks past zero keeps a negative size instead of being
        clamped to 0.
        """
        self.set_bounds(*bounds.grow(self.bounds, h, v))

    def add(self, px: int, py: int) -> None:
        """Extend to take in (px, py); a non-existent rectangle becomes (px, py, 0, 0).

        The point ends up on the right/bottom edge when it extends them, so
        contains(px, py) can still be False afterwards.
        """
        self.set_bounds(*bounds.add_point(self.bounds, px, py))

    def add_point(self, p: Point) -> None:
        self.add(p.x, p.y)

    def add_rect(self, r: AnyRect) -> None:
        self.set_bounds(*bounds.add_rect(self.bounds, r.bounds))
