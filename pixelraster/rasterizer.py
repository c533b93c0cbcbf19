from fractions import Fraction

from .geometry import Point, truncate


class Rasterizer:
    """
    Draws primitives into CANVAS, which only needs a set_pixel(x, y, color)
    method. Clipping of out-of-bounds writes is left to the canvas.
    """
    def __init__(self, canvas):
        self.canvas = canvas

    def simple_line(self, p0, p1, color):
        """
        Axis-aligned line. P0 and P1 must share x or y.
        """
        assert p0.x == p1.x or p0.y == p1.y, \
            f'simple_line needs an axis-aligned segment, got {p0} {p1}'
        if p0.y == p1.y:
            for x in range(min(p0.x, p1.x), max(p0.x, p1.x) + 1):
                self.canvas.set_pixel(x, p0.y, color)
        else:
            for y in range(min(p0.y, p1.y), max(p0.y, p1.y) + 1):
                self.canvas.set_pixel(p0.x, y, color)

    def line(self, p0, p1, color):
        x0, y0 = p0
        x1, y1 = p1
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0

        dx = x1 - x0
        dy = y1 - y0
        yi = 1
        if dy < 0:
            yi = -1
            dy = -dy
        D = 2 * dy - dx
        y = y0

        for x in range(x0, x1 + 1):
            if steep:
                self.canvas.set_pixel(y, x, color)
            else:
                self.canvas.set_pixel(x, y, color)
            if D > 0:
                y += yi
                D += 2 * (dy - dx)
            else:
                D += 2 * dy

    def lines(self, segments):
        for colored in segments:
            self.line(colored.segment.p0, colored.segment.p1, colored.color)

    def circle(self, center, radius, color):
        def plot_octants(x, y):
            cx, cy = center
            self.canvas.set_pixel(cx + x, cy + y, color)
            self.canvas.set_pixel(cx + y, cy + x, color)
            self.canvas.set_pixel(cx - y, cy + x, color)
            self.canvas.set_pixel(cx - x, cy + y, color)
            self.canvas.set_pixel(cx - x, cy - y, color)
            self.canvas.set_pixel(cx - y, cy - x, color)
            self.canvas.set_pixel(cx + y, cy - x, color)
            self.canvas.set_pixel(cx + x, cy - y, color)
        self._walk_circle(radius, plot_octants)

    def filled_half_circle(self, center, radius, color):
        """
        Fills the upper half (rows above and including the center row) of
        the circle with horizontal spans.
        """
        def fill_spans(x, y):
            cx, cy = center
            self.simple_line(Point(cx - x, cy - y), Point(cx + x, cy - y),
                             color)
            self.simple_line(Point(cx - y, cy - x), Point(cx + y, cy - x),
                             color)
        self._walk_circle(radius, fill_spans)

    def _walk_circle(self, radius, visit):
        # Midpoint stepping over the first octant; VISIT mirrors it.
        if radius < 0:
            raise ValueError(f'radius must be non-negative, got {radius}')
        x = radius
        y = 0
        dx = 1
        dy = 1
        err = dx - (radius << 1)

        while x >= y:
            visit(x, y)
            if err <= 0:
                y += 1
                err += dy
                dy += 2
            if err > 0:
                x -= 1
                dx += 2
                err += dx - (radius << 1)

    def fill_triangle(self, v1, v2, v3, color):
        v1, v2, v3 = sorted((v1, v2, v3), key=lambda p: p.y)

        if v1.y == v3.y:
            xs = (v1.x, v2.x, v3.x)
            self.simple_line(Point(min(xs), v1.y), Point(max(xs), v1.y), color)
        elif v2.y == v3.y:
            self._fill_flat_bottom(v1, v2, v3, color)
        elif v1.y == v2.y:
            self._fill_flat_top(v1, v2, v3, color)
        else:
            boundary = Point(
                truncate(v1.x + Fraction(v2.y - v1.y, v3.y - v1.y)
                         * (v3.x - v1.x)),
                v2.y)
            self._fill_flat_bottom(v1, v2, boundary, color)
            self._fill_flat_top(v2, boundary, v3, color)

    def _fill_flat_bottom(self, v1, v2, v3, color):
        # Apex V1 above the flat edge V2-V3. Fractions keep x exact.
        invslope1 = Fraction(v1.x - v2.x, v1.y - v2.y)
        invslope2 = Fraction(v1.x - v3.x, v1.y - v3.y)
        curx1 = curx2 = Fraction(v1.x)

        for y in range(v1.y, v2.y + 1):
            self.simple_line(Point(truncate(curx1), y),
                             Point(truncate(curx2), y), color)
            curx1 += invslope1
            curx2 += invslope2

    def _fill_flat_top(self, v1, v2, v3, color):
        # Flat edge V1-V2 above the apex V3.
        invslope1 = Fraction(v3.x - v1.x, v3.y - v1.y)
        invslope2 = Fraction(v3.x - v2.x, v3.y - v2.y)
        curx1 = curx2 = Fraction(v3.x)

        for y in range(v3.y, v1.y - 1, -1):
            self.simple_line(Point(truncate(curx1), y),
                             Point(truncate(curx2), y), color)
            curx1 -= invslope1
            curx2 -= invslope2
