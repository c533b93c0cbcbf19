class PixelRasterError(Exception):
    """Base error for the package."""


class HeartBoundsError(PixelRasterError, ValueError):
    """The requested heart does not fit on the canvas. Nothing was drawn."""

    def __init__(self, bbox, canvas_size):
        self.bbox = bbox
        self.canvas_size = canvas_size
        x0, y0, x1, y1 = bbox
        super().__init__(
            f'heart bbox ({x0}, {y0})-({x1}, {y1}) exceeds canvas '
            f'{canvas_size.width}x{canvas_size.height}')


class UnknownPrimitiveError(PixelRasterError, KeyError):
    pass
