# Module: Qt interop for the integer geometry types.
# Main: to_qrect/from_qrect, to_qpoint/from_qpoint, to_qsize/from_qsize, union_all, virtual_geometry.
# Example: from intrect.core.geometry import from_qrect, virtual_geometry

from typing import Iterable

from PySide6.QtCore import QPoint, QRect, QSize
from PySide6.QtGui import QGuiApplication

from intrect.core.models import Point, Rectangle, Size

# what union_all gives back when there is nothing to join
NO_RECT = Rectangle(0, 0, -1, -1)


def to_qrect(r) -> QRect:
    return QRect(r.x, r.y, r.width, r.height)


def from_qrect(q: QRect) -> Rectangle:
    # width()/height() are x2 - x1 + 1, so a "null" QRect comes back as size 0
    return Rectangle(q.x(), q.y(), q.width(), q.height())


def to_qpoint(p: Point) -> QPoint:
    return QPoint(p.x, p.y)


def from_qpoint(q: QPoint) -> Point:
    return Point(q.x(), q.y())


def to_qsize(s: Size) -> QSize:
    return QSize(s.width, s.height)


def from_qsize(q: QSize) -> Size:
    return Size(q.width(), q.height())


def union_all(rects: Iterable) -> Rectangle:
    total = NO_RECT
    first = True
    for r in rects:
        if first:
            total = Rectangle.from_rect(r)
            first = False
        else:
            total = total.union(r)
    return total


def virtual_geometry() -> Rectangle:
    """Bounding rectangle of every screen, in virtual desktop coordinates."""
    return union_all(from_qrect(s.geometry()) for s in QGuiApplication.screens())
