import unittest

import numpy as np

from samplemean.core.frames import FrameSequence, RectangleRole, RectangleStyle
from samplemean.core.validator import EmptySequence, InvalidArgument


class FrameSequenceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.xx = np.array([0.5, 0.0, 1.0, 0.25, 0.75])
        self.y = np.array([0.2, -0.1, 0.0, 0.3, 0.15])
        self.x = np.array([0.55, 0.02, 0.97, 0.3, 0.8])
        self.frames = FrameSequence(self.xx, self.y, self.x, style=("gray", "black"))

    def test_sequence_has_one_frame_per_sample(self) -> None:
        self.assertEqual(len(self.frames), 5)
        self.assertEqual(len(list(self.frames)), 5)

    def test_settled_and_current_partition(self) -> None:
        for i, frame in enumerate(self.frames, start=1):
            self.assertEqual(frame.step, i)
            self.assertEqual(list(frame.settled), list(range(1, i)))
            self.assertEqual(frame.current, i)
            roles = frame.roles
            self.assertEqual(roles.count(RectangleRole.CURRENT), 1)
            self.assertEqual(roles[-1], RectangleRole.CURRENT)

    def test_settled_set_grows_by_one(self) -> None:
        frames = list(self.frames)
        for previous, following in zip(frames, frames[1:]):
            self.assertEqual(set(following.settled) - set(previous.settled), {previous.current})
            self.assertEqual(following.current, previous.current + 1)

    def test_sequence_is_restartable(self) -> None:
        first = [(f.step, f.left.tolist(), f.top.tolist()) for f in self.frames]
        second = [(f.step, f.left.tolist(), f.top.tolist()) for f in self.frames]
        self.assertEqual(first, second)

    def test_partial_consumption_then_restart(self) -> None:
        iterator = iter(self.frames)
        next(iterator)
        next(iterator)
        self.assertEqual(next(iter(self.frames)).step, 1)

    def test_rectangle_geometry(self) -> None:
        frame = self.frames.frame(2)
        np.testing.assert_allclose(frame.left, [0.4, -0.1])
        np.testing.assert_allclose(frame.right, [0.6, 0.1])
        np.testing.assert_allclose(frame.bottom, [0.0, -0.1])
        np.testing.assert_allclose(frame.top, [0.2, 0.0])
        self.assertAlmostEqual(frame.half_width, 0.1)

    def test_negative_height_extent_is_inverted(self) -> None:
        rect = self.frames.frame(2).rectangles()[1]
        self.assertEqual(rect.index, 2)
        self.assertEqual(rect.role, RectangleRole.CURRENT)
        self.assertAlmostEqual(rect.bottom, -0.1)
        self.assertAlmostEqual(rect.top, 0.0)

    def test_colors_and_current_tick(self) -> None:
        frame = self.frames.frame(3)
        self.assertEqual(frame.colors, ["gray", "gray", "black"])
        self.assertAlmostEqual(frame.current_x, 0.97)
        self.assertEqual(frame.style, RectangleStyle("gray", "black"))

    def test_indexing(self) -> None:
        self.assertEqual(self.frames[0].step, 1)
        self.assertEqual(self.frames[-1].step, 5)
        self.assertTrue(self.frames[-1].is_last)
        with self.assertRaises(IndexError):
            self.frames[5]
        with self.assertRaises(IndexError):
            self.frames.frame(0)

    def test_numpy_integer_indexing(self) -> None:
        self.assertEqual(self.frames[np.int64(0)].step, 1)
        self.assertEqual(self.frames[np.intp(-1)].step, 5)
        with self.assertRaises(TypeError):
            self.frames[1.0]
        with self.assertRaises(TypeError):
            self.frames["0"]

    def test_draw_options_are_forwarded_read_only(self) -> None:
        frames = FrameSequence(self.xx, self.y, draw_options={"edgecolor": "none"})
        frame = frames.frame(1)
        self.assertEqual(dict(frame.draw_options), {"edgecolor": "none"})
        with self.assertRaises(TypeError):
            frame.draw_options["edgecolor"] = "red"

    def test_with_options_shares_samples(self) -> None:
        restyled = self.frames.with_options(style=("blue", "red"), draw_options={"alpha": 0.3})
        self.assertEqual(len(restyled), len(self.frames))
        self.assertEqual(restyled.frame(2).colors, ["blue", "red"])
        self.assertEqual(dict(restyled.draw_options), {"alpha": 0.3})
        np.testing.assert_array_equal(restyled.frame(5).top, self.frames.frame(5).top)

    def test_single_sample_sequence(self) -> None:
        frames = list(FrameSequence([0.0], [0.4]))
        self.assertEqual(len(frames), 1)
        self.assertEqual(list(frames[0].settled), [])
        self.assertEqual(frames[0].current, 1)
        self.assertAlmostEqual(frames[0].half_width, 0.5)

    def test_empty_sequence_rejected(self) -> None:
        with self.assertRaises(EmptySequence):
            FrameSequence([], [])

    def test_mismatched_lengths_rejected(self) -> None:
        with self.assertRaises(InvalidArgument):
            FrameSequence([0.1, 0.2], [0.3])

    def test_bad_style_rejected(self) -> None:
        with self.assertRaises(InvalidArgument):
            FrameSequence(self.xx, self.y, style="gray")


if __name__ == "__main__":
    unittest.main()
