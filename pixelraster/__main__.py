import argparse
import logging
import os

from . import shapes
from .canvas import save_animation, BLUE, GREEN, MAGENTA, RED
from .config import RenderConfig
from .errors import HeartBoundsError
from .geometry import Point
from .heart import heart_frames
from .log import setup_logging
from .renderer import Renderer

logger = logging.getLogger('pixelraster')


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='pixelraster',
        description='Render the demo primitives to PNG files.')
    parser.add_argument('--out', default='out', help='output directory')
    parser.add_argument('--size', type=int, default=512,
                        help='canvas width and height in pixels')
    parser.add_argument('--depth', type=int, default=8,
                        help='fractal tree recursion depth')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)


def demo_scenes(config):
    """
    Returns {name: ops} for each still image.
    """
    c = config.center
    r = config.radius
    fg = config.foreground
    op = Renderer.op
    quarter = config.size.width // 4
    return {
        'lines': [op('line', Point(c.x - r, c.y - r // 3),
                     Point(c.x + r, c.y + r // 3), fg),
                  op('line', Point(c.x - r // 3, c.y - r),
                     Point(c.x + r // 3, c.y + r), config.accent),
                  op('line', Point(c.x - r, c.y), Point(c.x + r, c.y), BLUE)],
        'circle': [op('circle', c, r, fg),
                   op('circle', c, r // 2, config.accent)],
        'star': [op('star', c, r, config.num_points, fg)],
        'polygon': [op('polygon', c, r, config.num_sides, fg)],
        'square': [op('rotated_square', c, r, fg)],
        'square_batch': [op('segments',
                            shapes.rotated_square_segments(c, r, fg))],
        'tree': [op('fractal_tree', config.tree_root, config.tree_length,
                    config.tree_direction, config.tree_length_factor,
                    config.tree_spread, config.tree_spread_factor,
                    config.tree_depth, GREEN)],
        'triangles': [op('triangle', Point(quarter, quarter),
                         Point(c.x + quarter // 2, quarter + 2),
                         Point(3 * quarter, 3 * quarter), MAGENTA),
                      op('triangle', Point(quarter, c.y),
                         Point(quarter, 3 * quarter),
                         Point(c.x, 3 * quarter), BLUE)],
    }


def render_heart_animation(renderer, out_dir):
    config = renderer.config
    frames = []
    for i, (width, height) in enumerate(heart_frames(config)):
        try:
            canvas = renderer.render(
                [Renderer.op('heart', config.center, width, height, RED)])
        except HeartBoundsError as e:
            logger.warning('frame %d skipped: %s', i, e)
            continue
        canvas.save_canvas(os.path.join(out_dir, f'heart_{i:03d}'))
        frames.append(canvas)
    if frames:
        path = save_animation(frames, os.path.join(out_dir, 'heart'),
                              config.frame_duration)
        logger.info('wrote %d heart frames and %s', len(frames), path)
    return frames


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = RenderConfig.from_args(args)
    os.makedirs(args.out, exist_ok=True)

    renderer = Renderer(config)
    for name, ops in demo_scenes(config).items():
        path = renderer.render(ops).save_canvas(os.path.join(args.out, name))
        logger.info('wrote %s', path)
    render_heart_animation(renderer, args.out)


if __name__ == '__main__':
    main()
