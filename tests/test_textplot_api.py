from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import unittest

import numpy as np

from textplot import (
    AllNonFiniteError,
    ChartConfig,
    ChartError,
    ChartErrorKind,
    EmptyDataError,
    InvalidRangeError,
    ZeroDimensionError,
    generate_sine,
    render,
    render_ascii,
    render_overlay,
    render_overlay_with_config,
    render_range,
    render_sized,
    render_unlabeled,
    render_with_config,
)


NAN = float("nan")


class RenderWithConfigTests(unittest.TestCase):
    def test_ascending_fixture_with_labels(self) -> None:
        chart = render_with_config([1, 2, 3, 4, 5], ChartConfig(height=5, width=5))
        self.assertEqual(
            chart.split("\n"),
            [
                "5.00┤    ╭",
                "4.00┤   ╭╯",
                "3.00┤  ╭╯",
                "2.00┤ ╭╯",
                "1.00┤─╯",
            ],
        )

    def test_descending_fixture_with_labels(self) -> None:
        chart = render_with_config([5, 4, 3, 2, 1], ChartConfig(height=5, width=5))
        self.assertEqual(
            chart.split("\n"),
            [
                "5.00┤─╮",
                "4.00┤ ╰╮",
                "3.00┤  ╰╮",
                "2.00┤   ╰╮",
                "1.00┤    ╰",
            ],
        )

    def test_empty_series(self) -> None:
        with self.assertRaises(EmptyDataError) as ctx:
            render_with_config([], ChartConfig())
        self.assertIs(ctx.exception.kind, ChartErrorKind.EMPTY_DATA)

    def test_inverted_range(self) -> None:
        with self.assertRaises(InvalidRangeError):
            render_with_config([1.0, 2.0, 3.0], ChartConfig(min=10.0, max=5.0))

    def test_zero_height(self) -> None:
        with self.assertRaises(ZeroDimensionError):
            render_with_config([1.0], ChartConfig(height=0))

    def test_all_non_finite(self) -> None:
        with self.assertRaises(AllNonFiniteError):
            render_with_config([NAN, float("inf")], ChartConfig())

    def test_all_non_finite_with_explicit_range_renders_blank_body(self) -> None:
        chart = render_with_config([NAN, NAN], ChartConfig(height=3, width=2, min=0.0, max=1.0))
        self.assertEqual(chart.split("\n"), ["1.00┤", "0.50┤", "0.00┤"])

    def test_errors_share_one_base_class(self) -> None:
        for exc in (EmptyDataError(), AllNonFiniteError(), InvalidRangeError(), ZeroDimensionError()):
            self.assertIsInstance(exc, ChartError)
            self.assertIsInstance(exc, ValueError)
            self.assertTrue(str(exc))
            self.assertIsInstance(exc.kind, ChartErrorKind)

    def test_base_error_requires_a_kind(self) -> None:
        with self.assertRaises(TypeError):
            ChartError("no kind")

    def test_flat_series_keeps_configured_height(self) -> None:
        chart = render_with_config([3.0, 3.0, 3.0, 3.0], ChartConfig(height=5, width=4, show_labels=False))
        lines = chart.split("\n")
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[2], "────")

    def test_tiny_range_keeps_configured_height(self) -> None:
        chart = render_with_config([1.001, 1.002, 1.003, 1.002, 1.001], ChartConfig(width=5))
        self.assertEqual(len(chart.split("\n")), 10)

    def test_single_sample_draws_one_glyph(self) -> None:
        chart = render_with_config([7.0], ChartConfig(width=5, show_labels=False))
        lines = chart.split("\n")
        self.assertEqual(len(lines), 10)
        self.assertEqual([line for line in lines if line], ["─"])

    def test_nan_creates_gap(self) -> None:
        chart = render_with_config([1, 2, NAN, 4, 5], ChartConfig(height=5, width=5, show_labels=False))
        self.assertEqual(chart.split("\n"), ["    ╭", "   ─╯", "", " ╭", "─╯"])

    def test_width_truncates_long_series(self) -> None:
        chart = render_with_config(list(range(20)), ChartConfig(height=4, width=6, show_labels=False))
        self.assertTrue(all(len(line) <= 6 for line in chart.split("\n")))

    def test_offset_pads_label_margin(self) -> None:
        chart = render_with_config([1, 2], ChartConfig(height=2, width=2, offset=8))
        self.assertEqual(chart.split("\n"), ["   2.00┤ ╭", "   1.00┤─╯"])

    def test_single_tick_labels_top_row_only(self) -> None:
        chart = render_with_config([1, 2], ChartConfig(height=3, width=2, label_ticks=1))
        self.assertEqual(chart.split("\n"), ["2.00┤ ╭", "    ┤ │", "    ┤─╯"])

    def test_label_format(self) -> None:
        chart = render_with_config([0, 1000], ChartConfig(height=2, width=2, label_format="{:,.0f}"))
        self.assertTrue(chart.startswith("1,000┤"))

    def test_explicit_range_clamps_outliers(self) -> None:
        chart = render_with_config([-50, 50], ChartConfig(height=3, width=2, min=0, max=1, show_labels=False))
        self.assertEqual(chart.split("\n"), [" ╭", " │", "─╯"])

    def test_extreme_magnitudes_use_full_height(self) -> None:
        chart = render_with_config([-1e308, 0.0, 1e308], ChartConfig(height=3, width=3, label_format="{:.0e}"))
        self.assertEqual(chart.split("\n"), [" 1e+308┤  ╭", "  0e+00┤ ╭╯", "-1e+308┤─╯"])

    def test_rendering_is_idempotent_and_does_not_mutate_input(self) -> None:
        data = np.asarray([1.0, 3.0, NAN, 2.0, 8.0, 5.0])
        before = data.copy()
        cfg = ChartConfig(height=8, width=6)
        first = render_with_config(data, cfg)
        second = render_with_config(data, cfg)
        self.assertEqual(first, second)
        self.assertTrue(np.array_equal(data, before, equal_nan=True))

    def test_concurrent_renders_match(self) -> None:
        data = generate_sine(60, 2.0)
        cfg = ChartConfig(height=12, width=60)
        expected = render_with_config(data, cfg)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: render_with_config(data, cfg), range(8)))
        self.assertEqual(results, [expected] * 8)

    def test_render_logs_summary_at_debug(self) -> None:
        with self.assertLogs("textplot.api", level="DEBUG") as logs:
            render_with_config([1.0, 2.0], ChartConfig(height=2, width=2))
        self.assertIn("rendered 1 series", logs.output[0])


class OverlayTests(unittest.TestCase):
    def test_later_series_wins_overlap(self) -> None:
        cfg = ChartConfig(height=2, width=2, show_labels=False)
        self.assertEqual(render_overlay_with_config([[1, 2], [2, 2]], cfg), "──\n─╯")
        self.assertEqual(render_overlay_with_config([[2, 2], [1, 2]], cfg), "─╭\n─╯")

    def test_overlay_shares_one_scale(self) -> None:
        chart = render_overlay([[0.0, 1.0], [10.0, 5.0]])
        lines = chart.split("\n")
        self.assertTrue(lines[0].startswith("10.00┤"))
        self.assertTrue(lines[-1].startswith(" 0.00┤"))

    def test_overlay_accepts_2d_array(self) -> None:
        cfg = ChartConfig(height=2, width=2, show_labels=False)
        chart = render_overlay_with_config(np.asarray([[1.0, 2.0], [2.0, 2.0]]), cfg)
        self.assertEqual(chart, "──\n─╯")

    def test_overlay_with_some_empty_series(self) -> None:
        cfg = ChartConfig(height=2, width=2, show_labels=False)
        self.assertEqual(render_overlay_with_config([[], [1, 2]], cfg), " ╭\n─╯")

    def test_overlay_of_only_empty_series(self) -> None:
        with self.assertRaises(EmptyDataError):
            render_overlay_with_config([[], []], ChartConfig())
        with self.assertRaises(EmptyDataError):
            render_overlay_with_config([], ChartConfig())


class ConvenienceTests(unittest.TestCase):
    def test_render_defaults(self) -> None:
        chart = render([1.0, 2.0, 3.0, 4.0, 5.0, 4.0, 3.0, 2.0, 1.0])
        lines = chart.split("\n")
        self.assertEqual(len(lines), 10)
        self.assertTrue(lines[0].startswith("5.00┤"))
        self.assertTrue(lines[-1].startswith("1.00┤"))
        self.assertTrue(all("┤" in line for line in lines))

    def test_render_sized(self) -> None:
        chart = render_sized(generate_sine(40), 20, 40)
        self.assertEqual(len(chart.split("\n")), 20)
        self.assertEqual(chart, render(generate_sine(40), height=20, width=40))

    def test_render_range(self) -> None:
        chart = render_range([1.0, 2.0, 3.0], 0.0, 10.0)
        self.assertIn("10.00", chart)
        self.assertIn("0.00", chart)

    def test_render_unlabeled(self) -> None:
        chart = render_unlabeled([1.0, 2.0, 3.0])
        self.assertNotIn("┤", chart)
        self.assertTrue(chart.split("\n")[-1].startswith("─"))

    def test_render_ascii(self) -> None:
        chart = render_ascii([1.0, 2.0, 3.0])
        self.assertTrue(chart.isascii())
        self.assertIn("+", chart)
        self.assertIn("|", chart)

    def test_negative_values(self) -> None:
        chart = render([-5.0, -2.0, 0.0, 2.0, 5.0])
        self.assertIn("-5.00", chart)

    def test_convenience_entries_degrade_to_blank(self) -> None:
        with self.assertLogs("textplot.api", level="WARNING") as logs:
            self.assertEqual(render([]), "")
            self.assertEqual(render_unlabeled([]), "")
            self.assertEqual(render_ascii([NAN, NAN]), "")
            self.assertEqual(render_range([1.0, 2.0], 5.0, 1.0), "")
            self.assertEqual(render_sized([1.0], 0, 10), "")
            self.assertEqual(render_overlay([]), "")
        self.assertEqual(len(logs.output), 6)
        self.assertIn("empty_data", logs.output[0])

    def test_negative_sizes_degrade_to_blank(self) -> None:
        with self.assertLogs("textplot.api", level="WARNING") as logs:
            self.assertEqual(render([1.0, 2.0], height=-3), "")
            self.assertEqual(render_sized([1.0, 2.0], 5, -1), "")
        self.assertEqual(len(logs.output), 2)
        self.assertTrue(all("zero_dimension" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()
