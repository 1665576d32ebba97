from __future__ import annotations

import unittest

import numpy as np

from chartlayout import DataPoint, InvalidDataError, Scale
from chartlayout.scales import build_y_labels, find_border_values, format_tick, format_ticks_for_axis, scale_steps


def _points(*values: float) -> list[DataPoint]:
    return [DataPoint(label=f"p{i}", value=v) for i, v in enumerate(values)]


class ScaleResolverTests(unittest.TestCase):
    def test_border_values_follow_data_range(self) -> None:
        scale = find_border_values(_points(3.0, 7.0, 5.0), start_at_zero=False)
        self.assertEqual(scale, Scale(min=3.0, max=7.0))

    def test_zero_anchor_forces_min_to_zero(self) -> None:
        scale = find_border_values(_points(3.0, 7.0, 5.0), start_at_zero=True)
        self.assertEqual(scale.min, 0.0)
        self.assertEqual(scale.max, 7.0)

    def test_zero_anchor_over_negative_data_keeps_max_above_min(self) -> None:
        scale = find_border_values(_points(-3.0, -7.0), start_at_zero=True)
        self.assertEqual(scale.min, 0.0)
        self.assertGreaterEqual(scale.max, scale.min)

    def test_equal_values_yield_degenerate_scale(self) -> None:
        scale = find_border_values(_points(4.0, 4.0, 4.0), start_at_zero=False)
        self.assertTrue(scale.is_degenerate)
        self.assertEqual(scale.size, 0.0)

    def test_max_never_below_min_for_mixed_data(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(50):
            values = rng.normal(scale=100.0, size=int(rng.integers(2, 12))).tolist()
            for at_zero in (False, True):
                scale = find_border_values(_points(*values), start_at_zero=at_zero)
                self.assertGreaterEqual(scale.max, scale.min)

    def test_range_too_wide_for_floats_is_rejected(self) -> None:
        with self.assertRaises(InvalidDataError):
            find_border_values(_points(-1e308, 1e308), start_at_zero=False)

    def test_extreme_but_representable_range_stays_finite(self) -> None:
        scale = find_border_values(_points(-1e307, 1e307), start_at_zero=False)
        self.assertTrue(np.all(np.isfinite(scale_steps(scale, 3))))

    def test_empty_data_is_rejected(self) -> None:
        with self.assertRaises(InvalidDataError):
            find_border_values([], start_at_zero=False)

    def test_scale_rejects_inverted_range(self) -> None:
        with self.assertRaises(ValueError):
            Scale(min=2.0, max=1.0)

    def test_scale_steps_span_min_to_max_inclusive(self) -> None:
        ticks = scale_steps(Scale(min=0.0, max=30.0), 3)
        self.assertTrue(np.allclose(ticks, [0.0, 10.0, 20.0, 30.0]))

    def test_scale_steps_rejects_non_positive_step_count(self) -> None:
        with self.assertRaises(ValueError):
            scale_steps(Scale(min=0.0, max=1.0), 0)

    def test_y_label_count_is_steps_plus_one(self) -> None:
        for steps in (1, 3, 5):
            labels = build_y_labels(Scale(min=-4.0, max=9.0), steps)
            self.assertEqual(len(labels), steps + 1)

    def test_y_labels_keep_integer_ticks_whole(self) -> None:
        labels = build_y_labels(Scale(min=0.0, max=30.0), 3)
        self.assertEqual([label.text for label in labels], ["0", "10", "20", "30"])

    def test_y_labels_round_repeating_steps(self) -> None:
        labels = build_y_labels(Scale(min=0.0, max=10.0), 3)
        self.assertEqual([label.text for label in labels], ["0", "3.333333", "6.666667", "10"])

    def test_degenerate_scale_labels_repeat_the_value(self) -> None:
        labels = build_y_labels(Scale(min=5.0, max=5.0), 3)
        self.assertEqual([label.text for label in labels], ["5", "5", "5", "5"])

    def test_tick_formatting_uses_step_decimals(self) -> None:
        labels = format_ticks_for_axis(np.asarray([1.5, 2.0, 2.5, 3.0], dtype=np.float64))
        self.assertEqual(labels, ["1.5", "2", "2.5", "3"])

    def test_tick_formatting_snaps_near_zero(self) -> None:
        self.assertEqual(format_tick(-4.4409e-16, step=1.0), "0")

    def test_tick_formatting_uses_exponent_for_huge_values(self) -> None:
        self.assertEqual(format_tick(2.5e12), "2.5000e+12")


if __name__ == "__main__":
    unittest.main()
