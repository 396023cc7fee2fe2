"""Unit tests for the Taichi-backed canvas.

Tests cover:
- Allocation and dimension validation
- Writing and reading pixels, bounds checking
- Fill and clear
- Array export orientation and 8-bit quantization
"""

import numpy as np
import pytest


class TestCanvasCreation:
    """Tests for canvas allocation."""

    def test_new_canvas_is_black(self):
        from phongtrace.core.canvas import Canvas

        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert np.all(canvas.to_numpy() == 0.0)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_non_positive_dimensions_raise(self, width, height):
        from phongtrace.core.canvas import Canvas

        with pytest.raises(ValueError, match="positive"):
            Canvas(width, height)

    def test_oversized_canvas_raises(self):
        from phongtrace.core.canvas import MAX_CANVAS_WIDTH, Canvas

        with pytest.raises(ValueError, match="exceed maximum"):
            Canvas(MAX_CANVAS_WIDTH + 1, 10)

    def test_repr(self):
        from phongtrace.core.canvas import Canvas

        assert repr(Canvas(4, 3)) == "Canvas(width=4, height=3)"


class TestCanvasPixels:
    """Tests for pixel access."""

    def test_put_and_get_pixel(self):
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(10, 20)
        canvas.put_pixel(Color(1, 0, 0), (2, 3))
        assert canvas.get_pixel((2, 3)) == Color(1, 0, 0)
        assert canvas.get_pixel((3, 2)) == Color(0, 0, 0)

    def test_values_are_not_clamped(self):
        """The buffer keeps out-of-range intensities until quantization."""
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(2, 2)
        canvas.put_pixel(Color(1.5, -0.5, 0.25), (1, 1))
        assert canvas.get_pixel((1, 1)).approx_eq(Color(1.5, -0.5, 0.25))

    @pytest.mark.parametrize("at", [(-1, 0), (0, -1), (10, 0), (0, 20)])
    def test_out_of_bounds_raises(self, at):
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(10, 20)
        with pytest.raises(IndexError, match="outside"):
            canvas.put_pixel(Color(1, 1, 1), at)
        with pytest.raises(IndexError, match="outside"):
            canvas.get_pixel(at)

    def test_fill_and_clear(self):
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(4, 3)
        canvas.fill(Color(0.25, 0.5, 0.75))
        arr = canvas.to_numpy()
        assert np.allclose(arr[..., 0], 0.25)
        assert np.allclose(arr[..., 1], 0.5)
        assert np.allclose(arr[..., 2], 0.75)

        canvas.clear()
        assert np.all(canvas.to_numpy() == 0.0)


class TestCanvasExport:
    """Tests for array export."""

    def test_to_numpy_is_row_major(self):
        """Arrays are indexed [y, x] with row 0 at the top."""
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(5, 3)
        canvas.put_pixel(Color(0, 1, 0), (4, 2))
        arr = canvas.to_numpy()
        assert arr.shape == (3, 5, 3)
        assert arr.dtype == np.float32
        assert arr[2, 4].tolist() == [0.0, 1.0, 0.0]

    def test_to_rgb8_quantizes(self):
        """Channels are clamped to [0, 1], scaled by 255 and rounded."""
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(5, 3)
        canvas.put_pixel(Color(1.5, 0, 0), (0, 0))
        canvas.put_pixel(Color(0, 0.5, 0), (2, 1))
        canvas.put_pixel(Color(-0.5, 0, 1), (4, 2))
        rgb = canvas.to_rgb8()
        assert rgb.shape == (3, 5, 3)
        assert rgb.dtype == np.uint8
        assert rgb[0, 0].tolist() == [255, 0, 0]
        assert rgb[1, 2].tolist() == [0, 128, 0]
        assert rgb[2, 4].tolist() == [0, 0, 255]
        assert rgb[1, 1].tolist() == [0, 0, 0]

    def test_to_rgb8_rounding(self):
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(1, 1)
        canvas.put_pixel(Color(0.2, 0.8, 0.6), (0, 0))
        assert canvas.to_rgb8()[0, 0].tolist() == [51, 204, 153]


class TestCanvasLifecycle:
    """Tests for buffer allocation across many canvases."""

    def test_kernels_run_on_fresh_canvas(self):
        """Fill and quantization kernels compile and run."""
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        canvas = Canvas(3, 2)
        canvas.fill(Color(1, 0.5, 0))
        assert canvas.to_rgb8().reshape(-1, 3).tolist() == [[255, 128, 0]] * 6

    def test_many_canvases_add_no_snode_trees(self):
        """Canvas buffers are ndarrays, so the program's SNode trees stay fixed."""
        from taichi.lang import impl

        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        # Warm up so kernel compilation is not counted
        Canvas(4, 4).to_rgb8()
        prog = impl.get_runtime().prog
        before = prog.get_snode_tree_size()

        for _ in range(20):
            canvas = Canvas(64, 64)
            canvas.fill(Color(0.5, 0.5, 0.5))
            canvas.to_rgb8()
            del canvas

        assert prog.get_snode_tree_size() == before

    def test_get_pixel_has_float32_precision(self):
        """Read-back colors match the written ones to single precision."""
        from phongtrace.core.canvas import Canvas
        from phongtrace.core.color import Color

        written = Color(0.38066, 0.47583, 0.2855)
        canvas = Canvas(1, 1)
        canvas.put_pixel(written, (0, 0))
        read = canvas.get_pixel((0, 0))
        assert read.approx_eq(written, epsilon=1e-7)
        assert read.r == float(np.float32(written.r))
