from .geometry import Point, to_polygon, point_in_polygon
from .rasterizer import line_pixels, scanline_spans
from .canvas import Canvas, WHITE, BLACK, RED, GREEN, BLUE, YELLOW
