"""
Tests for the laboratory scene and the command line entry point. No window
is opened here.
"""

import imageio.v3 as iio
import pytest

from scanfill.__main__ import main
from scanfill.canvas import Canvas, WHITE, BLACK, BLUE, YELLOW
from scanfill.scene import POLYGONS, SHAPES, draw_scene


class TestDrawScene:
    def test_triangle_only(self):
        c = Canvas(600, 800)
        draw_scene(c, ['triangle'])
        assert c.get_pixel(411, 230) == BLUE
        assert c.get_pixel(200, 370) == WHITE
        assert c.get_pixel(10, 10) == WHITE

    def test_island_keeps_its_lake_open(self):
        c = Canvas(600, 800)
        draw_scene(c, ['island'])
        assert c.get_pixel(600, 155) == YELLOW
        assert c.get_pixel(715, 155) == WHITE
        for x, y in POLYGONS['lake']:
            assert c.get_pixel(x, y) == BLACK

    def test_without_hole_outline(self):
        c = Canvas(600, 800)
        draw_scene(c, ['island'], outline_holes=False)
        assert c.get_pixel(708, 120) != BLACK

    def test_every_shape_has_a_polygon(self):
        for name, (_, hole) in SHAPES.items():
            assert name in POLYGONS
            assert hole is None or hole in POLYGONS

    def test_unknown_shape(self):
        with pytest.raises(KeyError):
            draw_scene(Canvas(10, 10), ['hexagon'])


class TestMain:
    def test_writes_png(self, tmp_path):
        out = tmp_path / 'scene.png'
        assert main(['--shapes', 'triangle', '--output', str(out)]) == 0
        img = iio.imread(out)
        assert img.shape == (600, 800, 3)
        assert list(img[230, 411]) == [0, 0, 255]

    def test_custom_size(self, tmp_path):
        out = tmp_path / 'small.png'
        assert main(['--width', '64', '--height', '32', '--shapes', '--output', str(out)]) == 0
        assert iio.imread(out).shape == (32, 64, 3)

    def test_bad_size_is_fatal(self, tmp_path):
        assert main(['--width', '0', '--output', str(tmp_path / 'x.png')]) == 1

    def test_unwritable_output_is_fatal(self, tmp_path):
        out = tmp_path / 'missing' / 'x.png'
        assert main(['--shapes', 'quad', '--output', str(out)]) == 1
        assert not out.exists()
