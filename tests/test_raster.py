import unittest
from unittest.mock import patch

import numpy as np

from mandelview.color import Color
from mandelview.errors import RenderError
from mandelview.evaluator import BOUNDED, evaluate
from mandelview.mapping import PlaneBounds, pixel_to_plane
from mandelview.palette import build_palette
from mandelview.raster import render

BOUNDS = PlaneBounds(real_lo=-2.0, real_hi=1.0, imag_lo=-1.5, imag_hi=1.5)
PALETTE = build_palette(Color(0, 0, 0), Color(255, 0, 0), 20)
IN_SET = Color(5, 5, 5)


class TestRender(unittest.TestCase):

    def test_shape_and_layout(self):
        raster = render(BOUNDS, 12, 8, PALETTE, IN_SET)
        self.assertEqual((raster.width, raster.height), (12, 8))
        self.assertEqual(raster.pixels.shape, (8, 12, 3))
        self.assertEqual(raster.pixels.dtype, np.uint8)

    def test_every_pixel_matches_scalar_evaluation(self):
        width, height = 16, 12
        raster = render(BOUNDS, width, height, PALETTE, IN_SET)
        for y in range(height):
            for x in range(width):
                result = evaluate(pixel_to_plane(BOUNDS, x, y, width, height), PALETTE.max_iteration)
                expected = IN_SET if result is BOUNDED else PALETTE[result.iteration]
                self.assertEqual(raster.color_at(x, y), expected, msg=f"pixel ({x}, {y})")

    def test_bounded_points_use_in_set_color_not_terminal_slot(self):
        bounds = PlaneBounds(real_lo=-0.1, real_hi=0.1, imag_lo=-0.1, imag_hi=0.1)
        raster = render(bounds, 4, 4, PALETTE, IN_SET)
        self.assertTrue(np.all(raster.pixels == IN_SET.as_tuple()))

    def test_escape_threshold_is_forwarded(self):
        bounds = PlaneBounds(real_lo=3.0, real_hi=3.5, imag_lo=0.0, imag_hi=0.5)
        near = render(bounds, 1, 1, PALETTE, IN_SET)
        far = render(bounds, 1, 1, PALETTE, IN_SET, escape_threshold=4.0)
        self.assertEqual(near.color_at(0, 0), PALETTE[0])
        self.assertEqual(far.color_at(0, 0), PALETTE[1])

    def test_raster_is_read_only(self):
        raster = render(BOUNDS, 4, 4, PALETTE, IN_SET)
        with self.assertRaises(ValueError):
            raster.pixels[0, 0, 0] = 1

    def test_to_image(self):
        raster = render(BOUNDS, 6, 4, PALETTE, IN_SET)
        image = raster.to_image()
        self.assertEqual(image.size, (6, 4))
        self.assertEqual(image.mode, "RGB")
        self.assertEqual(image.getpixel((3, 2)), raster.color_at(3, 2).as_tuple())

    def test_invalid_dimensions(self):
        with self.assertRaises(RenderError):
            render(BOUNDS, 0, 4, PALETTE, IN_SET)

    def test_allocation_failure_is_a_render_error(self):
        with patch("mandelview.raster.plane_grid", side_effect=MemoryError):
            with self.assertRaises(RenderError):
                render(BOUNDS, 4, 4, PALETTE, IN_SET)


if __name__ == '__main__':
    unittest.main()
