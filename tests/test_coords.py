from __future__ import annotations

import math
import unittest

import numpy as np

from plotcoord import CoordError, DiscreteRanged, IntCoord, Interval, LinearCoord, LogCoord, SliceCoord, as_coord
from plotcoord.ticks import nice_ticks


class LinearCoordTests(unittest.TestCase):
    def test_maps_and_extrapolates(self) -> None:
        coord = LinearCoord(0.0, 10.0)
        self.assertEqual(coord.map(5.0, (0, 100)), 50)
        self.assertEqual(coord.map(-5.0, (0, 100)), -50)
        self.assertEqual(coord.map(15.0, (0, 100)), 150)

    def test_decreasing_pixel_limit(self) -> None:
        coord = LinearCoord(0.0, 10.0)
        self.assertEqual(coord.map(0.0, (100, 0)), 100)
        self.assertEqual(coord.map(2.5, (100, 0)), 75)
        self.assertEqual(coord.map(10.0, (100, 0)), 0)

    def test_third_positions_do_not_floor_short(self) -> None:
        coord = LinearCoord(0.0, 3.0)
        self.assertEqual(coord.map(1.0, (0, 300)), 100)
        self.assertEqual(coord.map(2.0, (0, 300)), 200)

    def test_degenerate_inputs_still_map(self) -> None:
        coord = LinearCoord(0.0, 10.0)
        self.assertEqual(coord.map(math.nan, (0, 100)), 0)
        self.assertEqual(coord.map(math.inf, (0, 100)), 100)
        self.assertEqual(coord.map(-math.inf, (0, 100)), 0)
        self.assertEqual(coord.map(3.0, (5, 5)), 5)
        self.assertEqual(LinearCoord(3.0, 3.0).map(7.0, (0, 100)), 0)

    def test_rejects_non_finite_bounds(self) -> None:
        with self.assertRaises(CoordError):
            LinearCoord(math.nan, 1.0)
        with self.assertRaises(ValueError):
            LinearCoord(0.0, math.inf)

    def test_key_points_stay_inside_domain(self) -> None:
        coord = LinearCoord(0.0, 10.0)
        self.assertEqual(coord.key_points(11), [float(v) for v in range(11)])
        self.assertEqual(coord.key_points(5), [0.0, 5.0, 10.0])
        self.assertEqual(coord.key_points(2), [0.0, 10.0])
        self.assertEqual(coord.key_points(1), [0.0])
        self.assertEqual(coord.key_points(0), [])
        self.assertEqual(LinearCoord(10.0, 0.0).key_points(3), [0.0, 5.0, 10.0])

    def test_key_points_fall_back_to_bounds(self) -> None:
        points = LinearCoord(0.1, 0.4).key_points(2)
        self.assertLessEqual(len(points), 2)
        self.assertTrue(all(0.1 <= p <= 0.4 for p in points))

    def test_map_many_matches_map(self) -> None:
        coord = LinearCoord(-2.0, 7.0)
        values = [-5.0, -2.0, 0.0, 1.3, 6.99, 7.0, 12.0, math.nan, math.inf, -math.inf]
        for limit in ((0, 640), (480, 0), (7, 7)):
            expected = [coord.map(v, limit) for v in values]
            self.assertEqual(coord.map_many(values, limit).tolist(), expected)
        self.assertEqual(LinearCoord(1.0, 1.0).map_many([0.0, math.nan], (0, 10)).tolist(), [0, 0])

    def test_far_out_positions_saturate(self) -> None:
        coord = LinearCoord(0.0, 1.0)
        self.assertEqual(coord.map(1e307, (0, 1000)), 1000)
        self.assertEqual(coord.map(-1e307, (0, 1000)), 0)
        self.assertEqual(coord.map(1e307, (1000, 0)), 0)
        self.assertEqual(coord.map(1e30, (0, 1000)), 1000)
        values = [1e307, -1e307, 1e30, 0.5]
        for limit in ((0, 1000), (1000, 0)):
            expected = [coord.map(v, limit) for v in values]
            self.assertEqual(coord.map_many(values, limit).tolist(), expected)
        self.assertEqual(IntCoord(0, 1).map(10**300, (0, 10)), 10)

    def test_key_points_on_extreme_domains(self) -> None:
        self.assertEqual(LinearCoord(-1e308, 1e308).key_points(10), [-1e308, 1e308])
        self.assertEqual(LinearCoord(0.0, 5e-324).key_points(10), [0.0, 5e-324])
        self.assertEqual(LinearCoord(0.0, 5e-324).key_points(1), [0.0])


class IntCoordTests(unittest.TestCase):
    def test_discrete_round_trip(self) -> None:
        coord = IntCoord(0, 10)
        self.assertEqual(coord.size(), 11)
        for idx in range(coord.size()):
            self.assertEqual(coord.index_of(coord.from_index(idx)), idx)
        for value in range(0, 11):
            self.assertEqual(coord.from_index(coord.index_of(value)), value)
        self.assertIsNone(coord.index_of(11))
        self.assertIsNone(coord.index_of(-1))
        self.assertIsNone(coord.index_of(2.0))
        self.assertIsNone(coord.from_index(11))
        self.assertIsNone(coord.from_index(-1))

    def test_reversed_domain_enumerates_in_domain_order(self) -> None:
        coord = IntCoord(5, 1)
        self.assertEqual(coord.size(), 5)
        self.assertEqual(coord.values(), [5, 4, 3, 2, 1])
        self.assertEqual(coord.index_of(2), 3)
        self.assertEqual(coord.map(1, (0, 100)), 100)

    def test_integer_key_points(self) -> None:
        self.assertEqual(IntCoord(0, 100).key_points(5), [0, 50, 100])
        self.assertEqual(IntCoord(0, 3).key_points(10), [0, 1, 2, 3])
        self.assertEqual(IntCoord(4, 4).key_points(10), [4])

    def test_rejects_non_integer_bounds(self) -> None:
        with self.assertRaises(CoordError):
            IntCoord(0, 1.5)  # type: ignore[arg-type]
        with self.assertRaises(CoordError):
            IntCoord(True, 3)

    def test_map_many_matches_map(self) -> None:
        coord = IntCoord(0, 7)
        values = np.arange(-2, 10)
        expected = [coord.map(int(v), (0, 300)) for v in values]
        self.assertEqual(coord.map_many(values, (0, 300)).tolist(), expected)


class _GappyCoord(DiscreteRanged[int]):
    def size(self) -> int:
        return 3

    def index_of(self, value: int) -> int | None:
        return value if value in (0, 2) else None

    def from_index(self, index: int) -> int | None:
        return index if index in (0, 2) else None


class DiscreteValuesTests(unittest.TestCase):
    def test_missing_member_raises_coord_error(self) -> None:
        with self.assertRaises(CoordError):
            _GappyCoord().values()


class LogCoordTests(unittest.TestCase):
    def test_maps_by_decade(self) -> None:
        coord = LogCoord(1.0, 1000.0)
        self.assertEqual(coord.map(1.0, (0, 300)), 0)
        self.assertEqual(coord.map(10.0, (0, 300)), 100)
        self.assertEqual(coord.map(100.0, (0, 300)), 200)
        self.assertEqual(coord.map(1e6, (0, 300)), 600)

    def test_non_positive_values_map_to_start(self) -> None:
        coord = LogCoord(1.0, 1000.0)
        self.assertEqual(coord.map(0.0, (0, 300)), 0)
        self.assertEqual(coord.map(-5.0, (0, 300)), 0)

    def test_rejects_non_positive_bounds(self) -> None:
        with self.assertRaises(CoordError):
            LogCoord(0.0, 10.0)

    def test_key_points(self) -> None:
        coord = LogCoord(1.0, 1e4)
        self.assertEqual(coord.key_points(10), [1.0, 10.0, 100.0, 1000.0, 10000.0])
        self.assertEqual(coord.key_points(3), [1.0, 100.0, 10000.0])
        self.assertEqual(LogCoord(2.0, 8.0).key_points(4), [2.0, 4.0, 6.0, 8.0])

    def test_map_many_matches_map(self) -> None:
        coord = LogCoord(1.0, 1000.0)
        values = [0.0, -1.0, 1.0, 10.0, 100.0, 1000.0, math.nan, math.inf]
        expected = [coord.map(v, (0, 300)) for v in values]
        self.assertEqual(coord.map_many(values, (0, 300)).tolist(), expected)


class SliceCoordTests(unittest.TestCase):
    def test_maps_members_evenly(self) -> None:
        coord = SliceCoord(["a", "b", "c", "d", "e"])
        self.assertEqual(coord.map("a", (0, 100)), 0)
        self.assertEqual(coord.map("c", (0, 100)), 50)
        self.assertEqual(coord.map("e", (0, 100)), 100)
        self.assertEqual(coord.map("z", (0, 100)), 0)
        self.assertEqual(coord.range(), Interval("a", "e"))
        self.assertEqual(SliceCoord(["only"]).map("only", (10, 90)), 10)

    def test_key_points_stride(self) -> None:
        coord = SliceCoord(["a", "b", "c", "d", "e"])
        self.assertEqual(coord.key_points(2), ["a", "d"])
        self.assertEqual(coord.key_points(10), ["a", "b", "c", "d", "e"])
        self.assertEqual(coord.key_points(0), [])

    def test_discrete_round_trip(self) -> None:
        coord = SliceCoord(("mon", "tue", "wed"))
        for idx in range(coord.size()):
            self.assertEqual(coord.index_of(coord.from_index(idx)), idx)
        for value in coord.values():
            self.assertEqual(coord.from_index(coord.index_of(value)), value)
        self.assertIsNone(coord.index_of(["unhashable"]))
        self.assertIsNone(coord.from_index(3))

    def test_rejects_invalid_members(self) -> None:
        with self.assertRaises(CoordError):
            SliceCoord([])
        with self.assertRaises(CoordError):
            SliceCoord(["a", "a"])
        with self.assertRaises(CoordError):
            SliceCoord([[1], [2]])

    def test_map_many_uses_scalar_mapping(self) -> None:
        coord = SliceCoord(["x", "y", "z"])
        self.assertEqual(coord.map_many(["z", "x", "q"], (0, 10)).tolist(), [10, 0, 0])


class AsCoordTests(unittest.TestCase):
    def test_conversions(self) -> None:
        self.assertEqual(as_coord((0, 10)), IntCoord(0, 10))
        self.assertEqual(as_coord(Interval(np.int64(2), np.int64(4))), IntCoord(2, 4))
        self.assertEqual(as_coord((0, 2.5)), LinearCoord(0.0, 2.5))
        self.assertEqual(as_coord(Interval(np.float32(1.0), 3)), LinearCoord(1.0, 3.0))
        self.assertEqual(as_coord(["a", "b"]), SliceCoord(["a", "b"]))
        coord = LogCoord(1.0, 10.0)
        self.assertIs(as_coord(coord), coord)

    def test_unconvertible_descriptions(self) -> None:
        with self.assertRaises(CoordError):
            as_coord(("a", "b"))
        with self.assertRaises(CoordError):
            as_coord("ab")
        with self.assertRaises(CoordError):
            as_coord(42)
        with self.assertRaises(CoordError):
            as_coord((True, False))


class NiceTicksTests(unittest.TestCase):
    def test_ticks_respect_limit_and_bounds(self) -> None:
        for vmin, vmax, limit in ((0.0, 1.0, 4), (-3.7, 12.2, 6), (1e-4, 3e-4, 3), (-1.0, 1.0, 3)):
            with self.subTest(vmin=vmin, vmax=vmax, limit=limit):
                ticks = nice_ticks(vmin, vmax, limit)
                self.assertGreater(ticks.size, 0)
                self.assertLessEqual(ticks.size, limit)
                self.assertTrue(np.all(ticks >= vmin))
                self.assertTrue(np.all(ticks <= vmax))

    def test_zero_is_snapped(self) -> None:
        ticks = nice_ticks(-1.0, 1.0, 3)
        self.assertEqual(ticks.tolist(), [-1.0, 0.0, 1.0])

    def test_degenerate_inputs(self) -> None:
        self.assertEqual(nice_ticks(0.0, math.nan, 5).size, 0)
        self.assertEqual(nice_ticks(0.0, 1.0, 0).size, 0)
        self.assertEqual(nice_ticks(2.0, 2.0, 5).tolist(), [2.0])


if __name__ == "__main__":
    unittest.main()
