import logging

from .errors import HeartBoundsError
from .geometry import Point

logger = logging.getLogger(__name__)


def heart_bbox(center, width, height):
    """
    Returns (x0, y0, x1, y1), inclusive, of the pixels a heart of WIDTH x
    HEIGHT at CENTER may touch.
    """
    circle_r = width // 4
    return (center.x - 2 * circle_r,
            center.y - circle_r,
            center.x + 2 * circle_r,
            max(center.y, center.y + height - circle_r))


def heart_fits(center, width, height, canvas_size):
    if width < 0 or height < 0:
        return False
    x0, y0, x1, y1 = heart_bbox(center, width, height)
    return (x0 >= 0 and y0 >= 0
            and x1 < canvas_size.width and y1 < canvas_size.height)


def heart(rasterizer, center, width, height, color):
    """
    Two filled half circles side by side over a filled triangle. Raises
    HeartBoundsError, before drawing anything, when the heart would leave
    the canvas.
    """
    canvas = rasterizer.canvas
    canvas_size = canvas.size
    if not heart_fits(center, width, height, canvas_size):
        raise HeartBoundsError(heart_bbox(center, width, height), canvas_size)

    circle_r = width // 4
    rasterizer.filled_half_circle(Point(center.x - circle_r, center.y),
                                  circle_r, color)
    rasterizer.filled_half_circle(Point(center.x + circle_r, center.y),
                                  circle_r, color)
    rasterizer.fill_triangle(Point(center.x - 2 * circle_r, center.y),
                             Point(center.x + 2 * circle_r, center.y),
                             Point(center.x, center.y + height - circle_r),
                             color)
    logger.debug('heart %dx%d at (%d, %d)', width, height, *center)


def heart_frames(config):
    """
    Yields the (width, height) of each animation frame: growing from
    HEART_MIN to HEART_MAX and shrinking back.
    """
    growing = list(range(config.heart_min, config.heart_max + 1,
                         config.heart_step))
    for extent in growing + growing[-2::-1]:
        yield extent, extent
