import logging

from .geometry import Point, edges, trunc_div

logger = logging.getLogger(__name__)


def line_pixels(p1, p2):
    """
    Integer Bresenham path from P1 to P2, both endpoints included.
    The path is always traced from the smaller endpoint so that swapping
    the arguments only reverses the order of the returned pixels.
    """
    p1, p2 = Point(*p1), Point(*p2)
    if p2 < p1:
        path = _trace_line(p2.x, p2.y, p1.x, p1.y)
        path.reverse()
        return path
    return _trace_line(p1.x, p1.y, p2.x, p2.y)


def _trace_line(x0, y0, x1, y1):
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    path = []

    while True:
        path.append(Point(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
    return path


def scanline_intersections(polygon, y):
    xs = []
    for (x1, y1), (x2, y2) in edges(polygon):
        # Half-open: a vertex sitting on the row counts for one edge only
        if (y1 <= y and y2 > y) or (y2 <= y and y1 > y):
            xs.append(x1 + trunc_div((y - y1) * (x2 - x1), y2 - y1))
    xs.sort()
    return xs


def scanline_spans(polygon):
    """
    Yields (y, x_start, x_end) interior spans of POLYGON, row by row from
    its lowest to its highest vertex. Sorted intersections are paired up
    consecutively; an unpaired trailing intersection is dropped.
    """
    if len(polygon) < 3:
        return
    ys = [y for _, y in polygon]
    ymin, ymax = min(ys), max(ys)
    logger.debug('scanning rows %d..%d of %d-gon', ymin, ymax, len(polygon))
    for y in range(ymin, ymax + 1):
        xs = scanline_intersections(polygon, y)
        for i in range(0, len(xs) - 1, 2):
            yield y, xs[i], xs[i + 1]
