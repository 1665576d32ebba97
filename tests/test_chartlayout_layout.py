from __future__ import annotations

import unittest

import numpy as np

from chartlayout import Axis, DataPoint, Frame, Label, Paddings, Scale
from chartlayout.contracts import Painter
from chartlayout.paddings import measure_paddings_x, measure_paddings_y, negotiate_paddings
from chartlayout.placement import place_labels_x, place_labels_y
from chartlayout.projection import place_data_points, project_values


class FixedPainter(Painter):
    """Every label is `char_width` px per character and `size` px tall."""

    def __init__(self, char_width: float = 10.0, fixed_width: float | None = None) -> None:
        self.char_width = char_width
        self.fixed_width = fixed_width

    def measure_label_width(self, text: str, size: float) -> float:
        if self.fixed_width is not None:
            return self.fixed_width
        return self.char_width * len(text)

    def measure_label_height(self, size: float) -> float:
        return size


def _labels(*texts: str) -> list[Label]:
    return [Label(t) for t in texts]


class PaddingNegotiationTests(unittest.TestCase):
    def test_negotiation_takes_elementwise_max(self) -> None:
        out = negotiate_paddings(Paddings(0.0, 0.0, 0.0, 20.0), Paddings(40.0, 10.0, 0.0, 10.0))
        self.assertEqual(out, Paddings(left=40.0, top=10.0, right=0.0, bottom=20.0))

    def test_x_paddings_reserve_one_line_at_bottom(self) -> None:
        out = measure_paddings_x(Axis.X, FixedPainter(), 18.0)
        self.assertEqual(out, Paddings(0.0, 0.0, 0.0, 18.0))

    def test_x_paddings_empty_when_x_hidden(self) -> None:
        self.assertEqual(measure_paddings_x(Axis.Y, FixedPainter(), 18.0), Paddings.zero())
        self.assertEqual(measure_paddings_x(Axis.NONE, FixedPainter(), 18.0), Paddings.zero())

    def test_y_paddings_use_widest_label_and_half_lines(self) -> None:
        out = measure_paddings_y(Axis.XY, FixedPainter(), 20.0, _labels("0", "10", "200", "3000"))
        self.assertEqual(out, Paddings(40.0, 10.0, 0.0, 10.0))

    def test_y_paddings_empty_when_y_hidden(self) -> None:
        out = measure_paddings_y(Axis.X, FixedPainter(), 20.0, _labels("0", "10"))
        self.assertEqual(out, Paddings.zero())

    def test_paddings_reject_negative_sides(self) -> None:
        with self.assertRaises(ValueError):
            Paddings(-1.0, 0.0, 0.0, 0.0)


class LabelPlacementTests(unittest.TestCase):
    def test_anchored_placement_insets_by_half_label_width(self) -> None:
        labels = _labels("A", "B", "C")
        frame = Frame(left=0.0, top=0.0, right=300.0, bottom=100.0)
        place_labels_x(labels, frame, axis=Axis.XY, packed=False, painter=FixedPainter(fixed_width=30.0), labels_size=12.0)
        self.assertEqual(labels[0].x, 15.0)
        self.assertEqual(labels[2].x, 285.0)
        self.assertAlmostEqual(labels[1].x, (15.0 + 285.0) / 2.0)

    def test_anchored_placement_uses_each_edge_labels_own_width(self) -> None:
        labels = _labels("AAAA", "B", "CC")
        frame = Frame(left=10.0, top=0.0, right=210.0, bottom=100.0)
        place_labels_x(labels, frame, axis=Axis.X, packed=False, painter=FixedPainter(), labels_size=12.0)
        self.assertEqual(labels[0].x, 30.0)
        self.assertEqual(labels[2].x, 200.0)
        self.assertAlmostEqual(labels[1].x, 115.0)

    def test_packed_placement_centres_labels_in_equal_cells(self) -> None:
        labels = _labels("a", "b", "c", "d")
        frame = Frame(left=10.0, top=0.0, right=410.0, bottom=100.0)
        place_labels_x(labels, frame, axis=Axis.XY, packed=True, painter=FixedPainter(), labels_size=12.0)
        self.assertEqual([label.x - frame.left for label in labels], [50.0, 150.0, 250.0, 350.0])

    def test_hidden_x_axis_spans_bare_frame_edges(self) -> None:
        labels = _labels("long label", "x", "another long one")
        frame = Frame(left=5.0, top=0.0, right=105.0, bottom=50.0)
        place_labels_x(labels, frame, axis=Axis.Y, packed=False, painter=FixedPainter(), labels_size=12.0)
        self.assertEqual([label.x for label in labels], [5.0, 55.0, 105.0])

    def test_x_labels_sit_one_line_below_frame(self) -> None:
        labels = _labels("A", "B")
        frame = Frame(left=0.0, top=0.0, right=100.0, bottom=80.0)
        place_labels_x(labels, frame, axis=Axis.XY, packed=False, painter=FixedPainter(), labels_size=14.0)
        self.assertTrue(all(label.y == 94.0 for label in labels))

    def test_single_x_label_is_placed_at_left_anchor(self) -> None:
        labels = _labels("AB")
        frame = Frame(left=0.0, top=0.0, right=100.0, bottom=80.0)
        place_labels_x(labels, frame, axis=Axis.XY, packed=False, painter=FixedPainter(), labels_size=12.0)
        self.assertEqual(labels[0].x, 10.0)
        self.assertFalse(np.isnan(labels[0].x))

    def test_y_labels_climb_from_bottom_by_constant_step(self) -> None:
        labels = _labels("1", "3", "5", "7")
        frame = Frame(left=50.0, top=10.0, right=300.0, bottom=100.0)
        place_labels_y(labels, frame, painter=FixedPainter(), labels_size=20.0, steps=3)
        self.assertEqual([label.y for label in labels], [110.0, 80.0, 50.0, 20.0])
        self.assertTrue(all(label.x == 45.0 for label in labels))

    def test_y_label_x_is_offset_by_half_own_width(self) -> None:
        labels = _labels("0", "100")
        frame = Frame(left=50.0, top=0.0, right=300.0, bottom=100.0)
        place_labels_y(labels, frame, painter=FixedPainter(), labels_size=10.0, steps=1)
        self.assertEqual(labels[0].x, 45.0)
        self.assertEqual(labels[1].x, 35.0)


class DataProjectionTests(unittest.TestCase):
    def test_min_projects_to_bottom_and_max_to_top(self) -> None:
        frame = Frame(left=0.0, top=10.0, right=100.0, bottom=110.0)
        ys = project_values(np.asarray([0.0, 5.0, 10.0]), Scale(min=0.0, max=10.0), frame)
        self.assertEqual(ys.tolist(), [110.0, 60.0, 10.0])

    def test_degenerate_scale_places_points_at_vertical_centre(self) -> None:
        frame = Frame(left=0.0, top=10.0, right=100.0, bottom=110.0)
        ys = project_values(np.asarray([3.0, 3.0]), Scale(min=3.0, max=3.0), frame)
        self.assertEqual(ys.tolist(), [60.0, 60.0])

    def test_points_reuse_x_label_columns(self) -> None:
        data = [DataPoint("a", 1.0), DataPoint("b", 2.0), DataPoint("c", 3.0)]
        labels = [Label("a", 12.0, 0.0), Label("b", 47.0, 0.0), Label("c", 91.0, 0.0)]
        frame = Frame(left=0.0, top=0.0, right=100.0, bottom=100.0)
        place_data_points(data, labels, Scale(min=1.0, max=3.0), frame)
        self.assertEqual([p.screen_position_x for p in data], [12.0, 47.0, 91.0])
        self.assertEqual([p.screen_position_y for p in data], [100.0, 50.0, 0.0])

    def test_projection_rejects_label_count_mismatch(self) -> None:
        with self.assertRaises(ValueError):
            place_data_points(
                [DataPoint("a", 1.0)],
                [],
                Scale(min=0.0, max=1.0),
                Frame(left=0.0, top=0.0, right=1.0, bottom=1.0),
            )


if __name__ == "__main__":
    unittest.main()
