from dataclasses import dataclass


def truncate(value):
    """Float to pixel coordinate, rounding toward zero."""
    return int(value)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class PointF:
    x: float
    y: float

    def __iter__(self):
        return iter((self.x, self.y))

    def to_point(self):
        return Point(truncate(self.x), truncate(self.y))


@dataclass(frozen=True)
class Size:
    width: int
    height: int

    def __iter__(self):
        return iter((self.width, self.height))


@dataclass(frozen=True)
class LineSegment:
    p0: Point
    p1: Point


@dataclass(frozen=True)
class ColoredLineSegment:
    segment: LineSegment
    color: tuple

    @classmethod
    def between(cls, p0, p1, color):
        return cls(LineSegment(p0, p1), color)
