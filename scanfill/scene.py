from .canvas import BLACK, BLUE, GREEN, RED, YELLOW

POLYGONS = {
    'star': [
        (165, 380), (185, 360), (180, 330), (207, 345), (233, 330),
        (230, 360), (250, 380), (220, 385), (205, 410), (193, 383)
    ],
    'quad': [(321, 335), (288, 286), (339, 251), (374, 302)],
    'triangle': [(377, 249), (411, 197), (436, 249)],
    'island': [
        (413, 177), (448, 159), (502, 88), (553, 53), (535, 36),
        (676, 37), (660, 52), (750, 145), (761, 179), (672, 192),
        (659, 214), (615, 214), (632, 230), (580, 230), (597, 215),
        (552, 214), (517, 144), (466, 180)
    ],
    'lake': [(682, 175), (708, 120), (735, 148), (739, 170)],
}

# name -> (fill color, name of the hole carved out of it)
SHAPES = {
    'star': (RED, None),
    'quad': (GREEN, None),
    'triangle': (BLUE, None),
    'island': (YELLOW, 'lake'),
}


def draw_scene(canvas, names, outline_holes=True):
    """
    Fills each shape in NAMES, in order, onto CANVAS. Holes are carved out
    of their shape's fill and, with OUTLINE_HOLES, traced in black once all
    fills are done.
    """
    holes = []
    for name in names:
        color, hole_name = SHAPES[name]
        hole = POLYGONS[hole_name] if hole_name else None
        canvas.render_polygon(POLYGONS[name], color, hole)
        if hole is not None:
            holes.append(hole)
    if outline_holes:
        for hole in holes:
            canvas.render_outline(hole, BLACK)
