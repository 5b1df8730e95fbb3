"""
Connector geometry

Pure functions over axis-aligned rectangles that place a curved connector
between two blocks:

- anchor_point: where the centre-to-centre line leaves the source rectangle
- control_points: the cubic Bezier handles for the curve between two anchors
- connector_path: both anchors plus handles, ready to draw

Nothing here reads the graph store.
"""
import math
from dataclasses import dataclass
from typing import Tuple

# Upper bound on how far a control point is pulled away from its anchor
MAX_CONTROL_OFFSET = 100


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size"""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @classmethod
    def from_block(cls, block) -> 'Rect':
        """Rectangle covered by a block (anything with position and size)"""
        return cls(block.position.x, block.position.y, block.size.width, block.size.height)


def anchor_point(source: Rect, target: Rect) -> Point:
    """
    Point where the line from source's centre to target's centre crosses
    source's boundary.

    The side is chosen by comparing |dx| / width with |dy| / height: a
    larger horizontal ratio puts the anchor on the left or right edge,
    otherwise on the top or bottom edge. The other coordinate is found by
    scaling the centre-to-centre delta to that edge.

    Coincident centres or a zero-area source yield the source centre.
    """
    source_center = source.center
    target_center = target.center
    dx = target_center.x - source_center.x
    dy = target_center.y - source_center.y

    if (dx == 0 and dy == 0) or source.width <= 0 or source.height <= 0:
        return source_center

    width_ratio = abs(dx) / source.width
    height_ratio = abs(dy) / source.height

    if width_ratio > height_ratio:
        # width_ratio > 0 here, so dx != 0
        edge_dx = _sign(dx) * (source.width / 2)
        return Point(source_center.x + edge_dx, source_center.y + dy * edge_dx / dx)

    # height_ratio >= width_ratio and not both zero, so dy != 0
    edge_dy = _sign(dy) * (source.height / 2)
    return Point(source_center.x + dx * edge_dy / dy, source_center.y + edge_dy)


def control_points(start: Point, end: Point) -> Tuple[Point, Point]:
    """
    Cubic Bezier control points for a connector from start to end.

    Each handle is pushed away from its anchor along the dominant axis by
    min(distance / 3, 100), so mostly-horizontal connectors leave and enter
    horizontally and mostly-vertical ones vertically.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    offset = min(math.hypot(dx, dy) / 3, MAX_CONTROL_OFFSET)

    if abs(dx) > abs(dy):
        step = _sign(dx) * offset
        return Point(start.x + step, start.y), Point(end.x - step, end.y)

    step = _sign(dy) * offset
    return Point(start.x, start.y + step), Point(end.x, end.y - step)


@dataclass(frozen=True)
class ConnectorPath:
    """A cubic Bezier connector between two block boundaries"""
    start: Point
    control1: Point
    control2: Point
    end: Point

    def to_svg(self) -> str:
        """SVG path data, e.g. 'M 100 50 C 200 50, 200 50, 300 50'"""
        return (
            f"M {_fmt(self.start.x)} {_fmt(self.start.y)} "
            f"C {_fmt(self.control1.x)} {_fmt(self.control1.y)}, "
            f"{_fmt(self.control2.x)} {_fmt(self.control2.y)}, "
            f"{_fmt(self.end.x)} {_fmt(self.end.y)}"
        )

    def to_dict(self) -> dict:
        return {
            "start": self.start.to_dict(),
            "control1": self.control1.to_dict(),
            "control2": self.control2.to_dict(),
            "end": self.end.to_dict(),
        }


def _fmt(value: float) -> str:
    # 100.0 -> "100", 66.666... -> "66.667"
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def connector_path(source: Rect, target: Rect) -> ConnectorPath:
    """Anchors on both rectangles facing each other, plus control points"""
    start = anchor_point(source, target)
    end = anchor_point(target, source)
    control1, control2 = control_points(start, end)
    return ConnectorPath(start=start, control1=control1, control2=control2, end=end)
