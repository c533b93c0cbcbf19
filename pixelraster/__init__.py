from .canvas import Canvas, save_animation
from .config import RenderConfig
from .errors import PixelRasterError, HeartBoundsError, UnknownPrimitiveError
from .geometry import Point, PointF, Size, LineSegment, ColoredLineSegment
from .rasterizer import Rasterizer
from .renderer import Renderer

__all__ = [
    'Canvas',
    'save_animation',
    'RenderConfig',
    'PixelRasterError',
    'HeartBoundsError',
    'UnknownPrimitiveError',
    'Point',
    'PointF',
    'Size',
    'LineSegment',
    'ColoredLineSegment',
    'Rasterizer',
    'Renderer',
]
