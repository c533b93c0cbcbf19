import logging

import numpy as np
import imageio

from .geometry import Size

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
MAGENTA = (255, 0, 255)


class Canvas:
    def __init__(self, width, height, background=WHITE):
        self.width = width
        self.height = height
        self.background = background
        self.canvas = self._blank()

    @classmethod
    def from_size(cls, size, background=WHITE):
        return cls(size.width, size.height, background)

    @property
    def size(self):
        return Size(self.width, self.height)

    def _blank(self):
        blank = np.zeros((self.height, self.width, 3), dtype='uint8')
        blank[:, :] = self.background
        return blank

    def set_pixel(self, x, y, color):
        if x >= 0 and x < self.width and y >= 0 and y < self.height:
            self.canvas[y, x] = color

    def get_pixel(self, x, y):
        return tuple(int(c) for c in self.canvas[y, x])

    def painted_pixels(self):
        """
        Returns the set of (x, y) coordinates whose color differs from the
        background.
        """
        mask = np.any(self.canvas != np.array(self.background, dtype='uint8'),
                      axis=2)
        ys, xs = np.nonzero(mask)
        return set(zip(xs.tolist(), ys.tolist()))

    def save_canvas(self, filename='img'):
        FILETYPE = 'png'
        path = f'{filename}.{FILETYPE}'
        imageio.imwrite(path, self.canvas)
        logger.debug('wrote %dx%d canvas to %s', self.width, self.height, path)
        return path


def save_animation(canvases, filename='anim', duration=100):
    """
    Writes CANVASES as the frames of a looping GIF. All canvases must share
    one size. DURATION is the per-frame delay in milliseconds.
    """
    if not canvases:
        raise ValueError('no frames to save')
    path = f'{filename}.gif'
    frames = [c.canvas for c in canvases]
    imageio.mimsave(path, frames, duration=duration, loop=0)
    logger.debug('wrote %d frames to %s', len(frames), path)
    return path
