import logging

import numpy as np
import imageio

from .geometry import edges, point_in_polygon, to_polygon
from .rasterizer import line_pixels, scanline_spans

logger = logging.getLogger(__name__)

WHITE = 0xFFFFFF
BLACK = 0x000000
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
YELLOW = 0xFFFF00


class Canvas:
    def __init__(self, height, width, background=WHITE):
        if height <= 0 or width <= 0:
            raise ValueError(f'canvas size must be positive, got {width}x{height}')
        self.height = height
        self.width = width
        self.background = background
        self.canvas = np.full((height, width), background, dtype=np.uint32)

    @property
    def pixels(self):
        """
        Flat row-major view of the buffer: pixel (x, y) lives at
        y * width + x. Writes through the view land in the canvas.
        """
        return self.canvas.reshape(-1)

    def in_bounds(self, x, y):
        return x >= 0 and x < self.width and y >= 0 and y < self.height

    def set_pixel(self, x, y, color):
        if self.in_bounds(x, y):
            self.canvas[y, x] = color

    def get_pixel(self, x, y):
        return int(self.canvas[y, x])

    def clear_canvas(self, color=None):
        if color is None:
            color = self.background
        self.canvas[:] = color

    def render_line(self, p1, p2, color):
        for x, y in line_pixels(p1, p2):
            self.set_pixel(x, y, color)

    def render_outline(self, polygon, color):
        if len(polygon) < 2:
            return
        for p1, p2 in edges(polygon):
            self.render_line(p1, p2, color)

    def render_polygon(self, polygon, color, hole=None):
        """
        Scanline fill of POLYGON with COLOR. When HOLE is given, every pixel
        inside it (by the parity test) is left untouched. The outline is not
        drawn; call render_outline afterwards if it is wanted.
        """
        polygon = to_polygon(polygon)
        if hole is not None:
            hole = to_polygon(hole)
        painted = 0
        for y, x_start, x_end in scanline_spans(polygon):
            if y < 0 or y >= self.height:
                continue
            for x in range(max(x_start, 0), min(x_end, self.width - 1) + 1):
                if hole is not None and point_in_polygon(hole, (x, y)):
                    continue
                self.canvas[y, x] = color
                painted += 1
        logger.debug('filled %d pixels with %06x', painted, color)
        return painted

    def to_rgb(self):
        rgb = np.empty((self.height, self.width, 3), dtype=np.uint8)
        rgb[..., 0] = (self.canvas >> 16) & 0xFF
        rgb[..., 1] = (self.canvas >> 8) & 0xFF
        rgb[..., 2] = self.canvas & 0xFF
        return rgb

    def save_canvas(self, filename='out', filetype='png'):
        path = f'{filename}.{filetype}'
        imageio.imwrite(path, self.to_rgb())
        logger.debug('wrote %dx%d canvas to %s', self.width, self.height, path)
        return path
