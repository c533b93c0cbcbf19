import math
from dataclasses import dataclass, field

from .canvas import WHITE, BLACK, RED
from .geometry import Point, Size


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything one render needs. Build a new one rather than mutating.
    """
    size: Size = field(default_factory=lambda: Size(512, 512))
    center: Point = field(default_factory=lambda: Point(256, 256))
    radius: int = 200
    num_points: int = 16
    num_sides: int = 6
    foreground: tuple = BLACK
    background: tuple = WHITE
    accent: tuple = RED

    tree_length: float = 120.0
    tree_direction: float = -math.pi / 2
    tree_length_factor: float = 0.7
    tree_spread: float = math.pi / 5
    tree_spread_factor: float = 0.9
    tree_depth: int = 8

    heart_min: int = 40
    heart_max: int = 240
    heart_step: int = 20
    frame_duration: int = 80

    @classmethod
    def from_args(cls, args):
        size = Size(args.size, args.size)
        return cls(size=size,
                   center=Point(size.width // 2, size.height // 2),
                   radius=size.width * 2 // 5,
                   tree_depth=args.depth,
                   heart_max=min(cls.heart_max, size.width // 2 - 16))

    @property
    def tree_root(self):
        return Point(self.center.x, self.size.height - 1)
