import functools
import logging

from . import shapes
from .canvas import Canvas
from .errors import HeartBoundsError, UnknownPrimitiveError
from .heart import heart
from .rasterizer import Rasterizer

logger = logging.getLogger(__name__)

# Each draw_* takes its geometry first and the canvas last, so
# functools.partial over the geometry gives a one-argument op.


def draw_line(p0, p1, color, canvas):
    Rasterizer(canvas).line(p0, p1, color)


def draw_segments(segments, canvas):
    Rasterizer(canvas).lines(segments)


def draw_circle(center, radius, color, canvas):
    Rasterizer(canvas).circle(center, radius, color)


def draw_star(center, radius, num_points, color, canvas):
    shapes.star(Rasterizer(canvas), center, radius, num_points, color)


def draw_polygon(center, radius, num_sides, color, canvas):
    shapes.polygon(Rasterizer(canvas), center, radius, num_sides, color)


def draw_rotated_square(center, radius, color, canvas):
    shapes.rotated_square(Rasterizer(canvas), center, radius, color)


def draw_fractal_tree(start, length, direction, length_factor, spread,
                      spread_factor, depth, color, canvas):
    segments = shapes.fractal_tree(start, length, direction, length_factor,
                                   spread, spread_factor, depth, color)
    Rasterizer(canvas).lines(segments)


def draw_triangle(v1, v2, v3, color, canvas):
    Rasterizer(canvas).fill_triangle(v1, v2, v3, color)


def draw_heart(center, width, height, color, canvas):
    heart(Rasterizer(canvas), center, width, height, color)


PRIMITIVES = {
    'line': draw_line,
    'segments': draw_segments,
    'circle': draw_circle,
    'star': draw_star,
    'polygon': draw_polygon,
    'rotated_square': draw_rotated_square,
    'fractal_tree': draw_fractal_tree,
    'triangle': draw_triangle,
    'heart': draw_heart,
}


class Renderer:
    def __init__(self, config):
        self.config = config
        self.primitives = []

    def new_canvas(self):
        return Canvas.from_size(self.config.size, self.config.background)

    def render(self, ops):
        """
        Applies each op, a callable taking the canvas, in order to a fresh
        canvas and returns it.
        """
        ops = list(ops)
        canvas = self.new_canvas()
        for op in ops:
            op(canvas)
        logger.debug('rendered %d ops on %dx%d canvas', len(ops),
                     canvas.width, canvas.height)
        return canvas

    @staticmethod
    def op(prim_name, *args):
        if prim_name not in PRIMITIVES:
            raise UnknownPrimitiveError(prim_name)
        return functools.partial(PRIMITIVES[prim_name], *args)

    def add_line(self, p0, p1, color):
        return self._add_primitive_struct('line', [p0, p1, color])

    def add_segments(self, segments):
        return self._add_primitive_struct('segments', [list(segments)])

    def add_circle(self, center, radius, color):
        return self._add_primitive_struct('circle', [center, radius, color])

    def add_star(self, center, radius, num_points, color):
        return self._add_primitive_struct(
            'star', [center, radius, num_points, color])

    def add_polygon(self, center, radius, num_sides, color):
        return self._add_primitive_struct(
            'polygon', [center, radius, num_sides, color])

    def add_rotated_square(self, center, radius, color):
        return self._add_primitive_struct(
            'rotated_square', [center, radius, color])

    def add_fractal_tree(self, start, length, direction, length_factor,
                         spread, spread_factor, depth, color):
        return self._add_primitive_struct(
            'fractal_tree', [start, length, direction, length_factor, spread,
                             spread_factor, depth, color])

    def add_triangle(self, v1, v2, v3, color):
        return self._add_primitive_struct('triangle', [v1, v2, v3, color])

    def add_heart(self, center, width, height, color):
        return self._add_primitive_struct(
            'heart', [center, width, height, color])

    def _add_primitive_struct(self, prim_name, args):
        if prim_name not in PRIMITIVES:
            raise UnknownPrimitiveError(prim_name)
        struct = (prim_name, args)
        self.primitives.append(struct)
        return struct

    def clear_primitives(self):
        self.primitives = []

    def render_canvas(self):
        """
        Renders the added primitives in order. A heart that does not fit is
        skipped with a warning; the rest of the primitives are still drawn.
        """
        canvas = self.new_canvas()
        for command_name, command_args in self.primitives:
            try:
                PRIMITIVES[command_name](*command_args, canvas)
            except HeartBoundsError as e:
                logger.warning('skipping heart: %s', e)
        return canvas

    def write_spec(self, filename='spec'):
        path = f'{filename}.txt'
        with open(path, 'w') as spec_file:
            for command_name, command_args in self.primitives:
                spec_file.write(f'{command_name}{tuple(command_args)}\n')
        return path
