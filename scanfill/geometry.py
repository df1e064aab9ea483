from collections import namedtuple

Point = namedtuple('Point', ['x', 'y'])


def to_polygon(coords):
    return tuple(Point(int(x), int(y)) for x, y in coords)


def edges(polygon):
    """
    Yields each (P1, P2) vertex pair of POLYGON, including the closing pair
    from the last vertex back to the first.
    """
    n = len(polygon)
    for i in range(n):
        yield polygon[i], polygon[(i + 1) % n]


def trunc_div(a, b):
    # Rounds toward zero, unlike //
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        return -q
    return q


def point_in_polygon(polygon, point):
    """
    Ray-casting parity test: shoot a ray from POINT towards +x and count
    how many edges of POLYGON it crosses. Points lying exactly on an edge
    may land either way.
    """
    if len(polygon) < 3:
        return False
    x, y = point
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y):
            x_cross = trunc_div((xj - xi) * (y - yi), yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside
