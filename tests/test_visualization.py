import math
import tempfile
import unittest
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import plotly.graph_objects as go  # noqa: E402

from samplemean import RenderingBackendError, prepare_sample_mean, render_frames  # noqa: E402
from samplemean.core.functions import parabola  # noqa: E402
from samplemean.visualization import (  # noqa: E402
    DARK_THEME,
    MatplotlibFrameRenderer,
    PlotlyFrameCollector,
    build_convergence_plot,
    build_frame_animation,
    resolve_theme,
)
from samplemean.visualization.figure_utils import clip_extent, evaluate_curve, value_limits  # noqa: E402


class MatplotlibRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.run = prepare_sample_mean(n=6, seed=0)

    def test_renders_all_frames_headless(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False, record=True)
        try:
            self.assertEqual(render_frames(self.run.frames, renderer), 6)
            self.assertEqual(len(renderer.snapshots), 6)
            self.assertEqual(len(renderer.ax.patches), 6)
            self.assertIn("n = 6/6", renderer.ax.get_title())
            self.assertEqual(renderer.ax.get_ylabel(), "y = x - x^2")
        finally:
            renderer.close()

    def test_bars_follow_frame_geometry(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False)
        try:
            frame = self.run.frames.frame(4)
            renderer.render_frame(frame)
            lefts = sorted(patch.get_x() for patch in renderer.ax.patches)
            np.testing.assert_allclose(lefts, np.sort(frame.left))
        finally:
            renderer.close()

    def test_draw_options_reach_bar_primitive(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False)
        try:
            frames = self.run.frames.with_options(draw_options={"edgecolor": "none"})
            renderer.render_frame(frames.frame(2))
            for patch in renderer.ax.patches:
                self.assertEqual(patch.get_edgecolor()[3], 0.0)
        finally:
            renderer.close()

    def test_bad_draw_option_becomes_rendering_error(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False)
        try:
            frames = self.run.frames.with_options(draw_options={"no_such_property": 1})
            with self.assertRaises(RenderingBackendError):
                render_frames(frames, renderer)
        finally:
            renderer.close()

    def test_gif_export(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False, record=True, interval=0.1)
        try:
            render_frames(self.run.frames, renderer)
            with tempfile.TemporaryDirectory() as tmp:
                path = renderer.save_gif(Path(tmp) / "anim.gif")
                self.assertTrue(path.exists())
        finally:
            renderer.close()

    def test_gif_without_recording_returns_none(self) -> None:
        renderer = MatplotlibFrameRenderer(parabola, show=False)
        try:
            with tempfile.TemporaryDirectory() as tmp:
                self.assertIsNone(renderer.save_gif(Path(tmp) / "anim.gif"))
        finally:
            renderer.close()

    def test_integrand_undefined_at_zero_renders(self) -> None:
        run = prepare_sample_mean(math.log, n=20, seed=0)
        renderer = MatplotlibFrameRenderer(math.log, show=False)
        try:
            self.assertEqual(render_frames(run.frames, renderer), 20)
            low, high = renderer.ax.get_ylim()
            self.assertTrue(math.isfinite(low) and math.isfinite(high))
            self.assertLessEqual(low, float(np.min(run.samples.y)))
        finally:
            renderer.close()

    def test_infinite_heights_are_clipped_to_axes(self) -> None:
        def spike(x: float) -> float:
            return math.inf if x < 0.5 else x

        run = prepare_sample_mean(spike, n=10, seed=0)
        self.assertTrue(np.isinf(run.samples.y).any())
        renderer = MatplotlibFrameRenderer(spike, show=False)
        try:
            self.assertEqual(render_frames(run.frames, renderer), 10)
            low, high = renderer.ax.get_ylim()
            self.assertTrue(math.isfinite(low) and math.isfinite(high))
            heights = [patch.get_height() for patch in renderer.ax.patches]
            self.assertTrue(all(math.isfinite(height) for height in heights))
            self.assertAlmostEqual(max(heights), high)
        finally:
            renderer.close()


class FigureUtilsTests(unittest.TestCase):
    def test_undefined_curve_points_become_nan(self) -> None:
        curve = evaluate_curve(math.log, np.array([0.0, 1.0]))
        self.assertTrue(math.isnan(curve[0]))
        self.assertEqual(curve[1], 0.0)

    def test_infinite_curve_points_become_nan(self) -> None:
        curve = evaluate_curve(lambda x: np.log(x), np.array([0.0, 1.0]))
        self.assertTrue(math.isnan(curve[0]))

    def test_limits_ignore_non_finite_values(self) -> None:
        low, high = value_limits(
            np.array([np.nan, 0.5]), np.array([math.inf, -2.0]), pad_ratio=0.0
        )
        self.assertEqual((low, high), (-2.0, 0.5))

    def test_limits_always_include_zero(self) -> None:
        low, high = value_limits(np.array([2.0, 3.0]), np.array([2.5]), pad_ratio=0.0)
        self.assertEqual((low, high), (0.0, 3.0))

    def test_clip_extent(self) -> None:
        bottom, top = clip_extent(
            np.array([-math.inf, 0.0]), np.array([0.0, math.inf]), -1.0, 2.0
        )
        np.testing.assert_array_equal(bottom, [-1.0, 0.0])
        np.testing.assert_array_equal(top, [0.0, 2.0])


class PlotlyAnimationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.run = prepare_sample_mean(n=5, seed=1)

    def test_collector_builds_one_frame_per_step(self) -> None:
        collector = PlotlyFrameCollector(parabola, theme=DARK_THEME)
        render_frames(self.run.frames, collector)
        figure = collector.figure()
        self.assertIsInstance(figure, go.Figure)
        self.assertEqual(collector.frame_count, 5)
        self.assertEqual([frame.name for frame in figure.frames], ["1", "2", "3", "4", "5"])
        last_bars = figure.frames[-1].data[0]
        self.assertEqual(len(last_bars.x), 5)

    def test_build_frame_animation(self) -> None:
        figure = build_frame_animation(self.run.frames, parabola, interval=0.5)
        self.assertEqual(len(figure.frames), 5)
        self.assertEqual(figure.layout.updatemenus[0].buttons[0].args[1]["frame"]["duration"], 500)

    def test_empty_collector_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PlotlyFrameCollector(parabola).figure()

    def test_write_html(self) -> None:
        collector = PlotlyFrameCollector(parabola)
        render_frames(self.run.frames, collector)
        with tempfile.TemporaryDirectory() as tmp:
            path = collector.write_html(Path(tmp) / "out" / "anim.html")
            self.assertTrue(path.exists())

    def test_convergence_plot(self) -> None:
        figure = build_convergence_plot(self.run.result, exact=1.0 / 6.0)
        running = figure.data[1].y
        self.assertAlmostEqual(running[-1], self.run.result.estimate)

    def test_convergence_band_uses_running_standard_error(self) -> None:
        figure = build_convergence_plot(self.run.result)
        band = figure.data[0].y
        running = figure.data[1].y
        self.assertAlmostEqual(band[0], running[0])
        self.assertAlmostEqual(band[4] - running[4], 2.0 * self.run.result.standard_error)

    def test_integrand_undefined_at_zero_collects_frames(self) -> None:
        def inverse_sqrt(x: float) -> float:
            return 1.0 / math.sqrt(x)

        run = prepare_sample_mean(inverse_sqrt, n=10, seed=0)
        collector = PlotlyFrameCollector(inverse_sqrt)
        self.assertEqual(render_frames(run.frames, collector), 10)
        figure = collector.figure()
        self.assertTrue(math.isnan(figure.data[0].y[0]))
        y_low, y_high = figure.layout.yaxis.range
        self.assertTrue(math.isfinite(y_low) and math.isfinite(y_high))

    def test_infinite_heights_are_clipped_in_frames(self) -> None:
        def spike(x: float) -> float:
            return -math.inf if x < 0.5 else x

        run = prepare_sample_mean(spike, n=10, seed=0)
        figure = build_frame_animation(run.frames, spike)
        y_low, _ = figure.layout.yaxis.range
        bars = figure.frames[-1].data[0]
        self.assertTrue(np.all(np.isfinite(np.asarray(bars.y, dtype=float))))
        self.assertAlmostEqual(float(np.min(bars.base)), y_low)

    def test_theme_resolution(self) -> None:
        self.assertIs(resolve_theme("DARK"), DARK_THEME)
        self.assertEqual(resolve_theme(None)["name"], "light")
        self.assertEqual(resolve_theme("unknown")["name"], "light")

    def test_theme_palettes_share_keys(self) -> None:
        light = resolve_theme("light")["palette"]
        self.assertEqual(set(light), {"curve", "settled", "current", "zero_line", "estimate"})
        self.assertEqual(set(DARK_THEME["palette"]), set(light))


if __name__ == "__main__":
    unittest.main()
