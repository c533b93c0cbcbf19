import pytest

from pixelraster.geometry import Size
from pixelraster.rasterizer import Rasterizer


class RecordingCanvas:
    """Collects every write, including ones outside any real canvas."""
    def __init__(self, width=512, height=512):
        self.width = width
        self.height = height
        self.writes = []

    @property
    def size(self):
        return Size(self.width, self.height)

    def set_pixel(self, x, y, color):
        self.writes.append((x, y, color))

    def pixels(self):
        return [(x, y) for x, y, _ in self.writes]

    def pixel_set(self):
        return set(self.pixels())


@pytest.fixture
def recorder():
    return RecordingCanvas()


@pytest.fixture
def raster(recorder):
    return Rasterizer(recorder)
