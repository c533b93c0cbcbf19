import itertools

import pytest

from pixelraster.canvas import BLACK
from pixelraster.geometry import Point, ColoredLineSegment
from pixelraster.rasterizer import Rasterizer

from conftest import RecordingCanvas

ENDPOINTS = [
    (Point(0, 0), Point(10, 3)),
    (Point(0, 0), Point(3, 10)),
    (Point(5, 5), Point(-7, 2)),
    (Point(5, 5), Point(2, -7)),
    (Point(-3, 4), Point(9, -8)),
    (Point(0, 0), Point(6, 6)),
    (Point(10, 0), Point(0, 10)),
    (Point(4, 4), Point(4, -4)),
    (Point(-2, 1), Point(8, 1)),
]


def line_pixels(p0, p1):
    recorder = RecordingCanvas()
    Rasterizer(recorder).line(p0, p1, BLACK)
    return recorder.pixels()


@pytest.mark.parametrize('p0,p1', [
    (Point(2, 5), Point(9, 5)),
    (Point(9, 5), Point(2, 5)),
    (Point(3, -4), Point(3, 6)),
    (Point(3, 6), Point(3, -4)),
])
def test_simple_line_covers_inclusive_range(raster, recorder, p0, p1):
    raster.simple_line(p0, p1, BLACK)
    if p0.y == p1.y:
        xs = range(min(p0.x, p1.x), max(p0.x, p1.x) + 1)
        expected = [(x, p0.y) for x in xs]
    else:
        ys = range(min(p0.y, p1.y), max(p0.y, p1.y) + 1)
        expected = [(p0.x, y) for y in ys]
    assert recorder.pixels() == expected


def test_simple_line_single_point(raster, recorder):
    raster.simple_line(Point(4, 4), Point(4, 4), BLACK)
    assert recorder.pixels() == [(4, 4)]


def test_simple_line_rejects_diagonal(raster):
    with pytest.raises(AssertionError):
        raster.simple_line(Point(0, 0), Point(3, 1), BLACK)


@pytest.mark.parametrize('p0,p1', ENDPOINTS)
def test_line_includes_both_endpoints(p0, p1):
    pixels = line_pixels(p0, p1)
    assert tuple(p0) in pixels
    assert tuple(p1) in pixels


@pytest.mark.parametrize('p0,p1', ENDPOINTS)
def test_line_one_pixel_per_major_step(p0, p1):
    pixels = line_pixels(p0, p1)
    major = max(abs(p1.x - p0.x), abs(p1.y - p0.y))
    assert len(pixels) == major + 1
    assert len(set(pixels)) == len(pixels)


@pytest.mark.parametrize('p0,p1', ENDPOINTS)
def test_line_is_8_connected(p0, p1):
    pixels = sorted(line_pixels(p0, p1),
                    key=lambda p: (p[0], p[1])
                    if abs(p1.x - p0.x) >= abs(p1.y - p0.y)
                    else (p[1], p[0]))
    for (ax, ay), (bx, by) in zip(pixels, pixels[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1


@pytest.mark.parametrize('p0,p1', ENDPOINTS)
def test_line_stays_close_to_ideal(p0, p1):
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    length = (dx * dx + dy * dy) ** 0.5
    for x, y in line_pixels(p0, p1):
        # distance from the pixel center to the infinite ideal line
        dist = abs(dy * (x - p0.x) - dx * (y - p0.y)) / length
        assert dist <= 1


@pytest.mark.parametrize('p0,p1', ENDPOINTS)
def test_line_same_pixels_when_endpoints_swapped(p0, p1):
    assert set(line_pixels(p0, p1)) == set(line_pixels(p1, p0))


def test_line_degenerate_single_pixel():
    assert line_pixels(Point(7, -3), Point(7, -3)) == [(7, -3)]


def test_line_reference_shallow():
    assert line_pixels(Point(0, 0), Point(6, 2)) == [
        (0, 0), (1, 0), (2, 1), (3, 1), (4, 1), (5, 2), (6, 2)]


def test_line_reference_steep_descending():
    assert line_pixels(Point(0, 0), Point(-2, -5)) == [
        (-2, -5), (-2, -4), (-1, -3), (-1, -2), (0, -1), (0, 0)]


def test_line_reference_exact_diagonal():
    assert line_pixels(Point(3, 3), Point(0, 0)) == [
        (0, 0), (1, 1), (2, 2), (3, 3)]


def test_lines_batch_keeps_order_last_write_wins(raster, recorder):
    red = (255, 0, 0)
    blue = (0, 0, 255)
    raster.lines([
        ColoredLineSegment.between(Point(0, 0), Point(4, 0), red),
        ColoredLineSegment.between(Point(2, 0), Point(2, 3), blue),
    ])
    last = {}
    for x, y, color in recorder.writes:
        last[(x, y)] = color
    assert last[(2, 0)] == blue
    assert last[(0, 0)] == red
    assert recorder.writes[0] == (0, 0, red)


def test_lines_matches_individual_calls():
    segments = [ColoredLineSegment.between(a, b, BLACK)
                for a, b in itertools.islice(ENDPOINTS, 4)]
    batch = RecordingCanvas()
    Rasterizer(batch).lines(segments)
    expected = []
    for a, b in itertools.islice(ENDPOINTS, 4):
        expected.extend(line_pixels(a, b))
    assert batch.pixels() == expected
