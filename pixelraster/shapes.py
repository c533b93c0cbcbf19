import math

from .geometry import Point, PointF, ColoredLineSegment, truncate

# cos/sin of 0, 90, 180 and 270 degrees: a square standing on one corner.
ROTATED_SQUARE_TABLE = ((1, 0), (0, 1), (-1, 0), (0, -1))


def corner_at(center, radius, angle):
    return Point(center.x + truncate(radius * math.cos(angle)),
                 center.y + truncate(radius * math.sin(angle)))


def regular_corners(center, radius, count):
    step = 2 * math.pi / count
    return [corner_at(center, radius, i * step) for i in range(count)]


def closed_outline(corners, color):
    n = len(corners)
    return [ColoredLineSegment.between(corners[i], corners[(i + 1) % n], color)
            for i in range(n)]


def star_segments(center, radius, num_points, color):
    if num_points < 1:
        raise ValueError(f'a star needs at least one point, got {num_points}')
    return [ColoredLineSegment.between(center, tip, color)
            for tip in regular_corners(center, radius, num_points)]


def star(rasterizer, center, radius, num_points, color):
    rasterizer.lines(star_segments(center, radius, num_points, color))


def polygon_segments(center, radius, num_sides, color):
    if num_sides < 3:
        raise ValueError(f'a polygon needs at least 3 sides, got {num_sides}')
    return closed_outline(regular_corners(center, radius, num_sides), color)


def polygon(rasterizer, center, radius, num_sides, color):
    rasterizer.lines(polygon_segments(center, radius, num_sides, color))


def rotated_square_corners(center, radius):
    return [Point(center.x + radius * c, center.y + radius * s)
            for c, s in ROTATED_SQUARE_TABLE]


def rotated_square(rasterizer, center, radius, color):
    corners = rotated_square_corners(center, radius)
    for i, corner in enumerate(corners):
        rasterizer.line(corner, corners[(i + 1) % len(corners)], color)


def rotated_square_segments(center, radius, color):
    return closed_outline(rotated_square_corners(center, radius), color)


def fractal_tree(start, length, direction, length_factor, spread,
                 spread_factor, depth, color):
    """
    Returns the 2 ** (depth + 1) - 1 segments of a binary tree rooted at
    START, in pre-order. Each level scales the branch length by
    LENGTH_FACTOR and the angle between siblings by SPREAD_FACTOR. Angles
    are in radians, measured in canvas coordinates (y down).
    """
    if depth < 0:
        raise ValueError(f'depth must be non-negative, got {depth}')
    if not isinstance(start, PointF):
        start = PointF(float(start.x), float(start.y))
    segments = []
    _grow(segments, start, length, direction, length_factor, spread,
          spread_factor, depth, color)
    return segments


def _grow(segments, start, length, direction, length_factor, spread,
          spread_factor, depth, color):
    end = PointF(start.x + length * math.cos(direction),
                 start.y + length * math.sin(direction))
    segments.append(
        ColoredLineSegment.between(start.to_point(), end.to_point(), color))
    if depth == 0:
        return
    length *= length_factor
    for child_direction in (direction - spread, direction + spread):
        _grow(segments, end, length, child_direction, length_factor,
              spread * spread_factor, spread_factor, depth - 1, color)
