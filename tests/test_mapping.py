import unittest

import numpy as np

from mandelview.mapping import PlaneBounds, map_range, pixel_to_plane, plane_grid

BOUNDS = PlaneBounds(real_lo=-2.0, real_hi=1.0, imag_lo=-1.5, imag_hi=1.5)


class TestMapRange(unittest.TestCase):

    def test_endpoints(self):
        self.assertEqual(map_range(0, 0, 10, -2.0, 1.0), -2.0)
        self.assertAlmostEqual(map_range(10, 0, 10, -2.0, 1.0), 1.0)

    def test_is_affine(self):
        x1, x2 = 12.0, 36.0
        mid = (x1 + x2) / 2
        lhs = map_range(x1, 0, 100, -2.0, 1.0) + map_range(x2, 0, 100, -2.0, 1.0)
        self.assertAlmostEqual(lhs, 2 * map_range(mid, 0, 100, -2.0, 1.0))

    def test_works_on_arrays(self):
        values = map_range(np.array([0.0, 5.0, 10.0]), 0, 10, 0.0, 1.0)
        np.testing.assert_allclose(values, [0.0, 0.5, 1.0])


class TestPixelToPlane(unittest.TestCase):

    def test_origin_pixel_maps_to_low_corner(self):
        self.assertEqual(pixel_to_plane(BOUNDS, 0, 0, 100, 80), complex(-2.0, -1.5))

    def test_last_pixel_is_within_one_step_of_high_corner(self):
        width, height = 100, 80
        point = pixel_to_plane(BOUNDS, width - 1, height - 1, width, height)
        real_step = BOUNDS.real_range / width
        imag_step = BOUNDS.imag_range / height
        self.assertAlmostEqual(BOUNDS.real_hi - point.real, real_step)
        self.assertAlmostEqual(BOUNDS.imag_hi - point.imag, imag_step)

    def test_middle_pixel_maps_to_center(self):
        point = pixel_to_plane(BOUNDS, 50, 40, 100, 80)
        self.assertAlmostEqual(point.real, -0.5)
        self.assertAlmostEqual(point.imag, 0.0)

    def test_ranges(self):
        self.assertEqual(BOUNDS.real_range, 3.0)
        self.assertEqual(BOUNDS.imag_range, 3.0)


class TestPlaneGrid(unittest.TestCase):

    def test_shape_and_dtype(self):
        grid = plane_grid(BOUNDS, 7, 5)
        self.assertEqual(grid.shape, (5, 7))
        self.assertEqual(grid.dtype, np.complex128)

    def test_grid_agrees_with_pixel_mapping(self):
        width, height = 7, 5
        grid = plane_grid(BOUNDS, width, height)
        for y in range(height):
            for x in range(width):
                self.assertEqual(grid[y, x], pixel_to_plane(BOUNDS, x, y, width, height))

    def test_rows_grow_toward_imag_hi(self):
        grid = plane_grid(BOUNDS, 3, 4)
        self.assertTrue(np.all(np.diff(grid.imag[:, 0]) > 0))
        self.assertTrue(np.all(np.diff(grid.real[0, :]) > 0))


if __name__ == '__main__':
    unittest.main()
