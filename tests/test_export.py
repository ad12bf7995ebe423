"""Tests for image export.

This module tests the preview/export functionality including:
- PPM channel conversion (upper clamp, truncation)
- Plain-text PPM layout
- PPM and PNG files on disk
"""

import numpy as np
import pytest
from PIL import Image as PILImage


class TestPpmChannels:
    """Test float to PPM channel conversion."""

    def test_unit_values(self):
        """Test 0 -> 0 and 1 -> 255."""
        from whitted.preview.export import image_to_ppm_channels

        image = np.array([[[0.0, 1.0, 0.0]]], dtype=np.float32)
        assert image_to_ppm_channels(image).tolist() == [[[0, 255, 0]]]

    def test_values_above_one_clamp(self):
        from whitted.preview.export import image_to_ppm_channels

        image = np.array([[[1.1, 5.0, 1000.0]]], dtype=np.float32)
        assert image_to_ppm_channels(image).tolist() == [[[255, 255, 255]]]

    def test_truncates(self):
        """Test int(c * 255) truncates rather than rounds."""
        from whitted.preview.export import image_to_ppm_channels

        image = np.array([[[0.5, 0.999, 0.2]]], dtype=np.float32)
        # 127.5 -> 127, 254.745 -> 254, 51.0 -> 51
        assert image_to_ppm_channels(image).tolist() == [[[127, 254, 51]]]

    def test_background_color(self):
        from whitted.preview.export import image_to_ppm_channels

        image = np.array([[[0.2, 0.2, 0.3]]], dtype=np.float32)
        assert image_to_ppm_channels(image).tolist() == [[[51, 51, 76]]]

    def test_negative_values_not_clamped(self):
        from whitted.preview.export import image_to_ppm_channels

        image = np.array([[[-0.1, 0.0, 0.0]]], dtype=np.float32)
        assert image_to_ppm_channels(image)[0, 0, 0] < 0

    @pytest.mark.parametrize("shape", [(4, 4), (4, 4, 4), (4, 4, 3, 1)])
    def test_rejects_bad_shape(self, shape):
        from whitted.preview.export import image_to_ppm_channels

        with pytest.raises(ValueError, match=r"\(H, W, 3\)"):
            image_to_ppm_channels(np.zeros(shape, dtype=np.float32))


class TestFormatPpm:
    """Test the plain-text PPM layout."""

    def test_header_and_line_count(self):
        from whitted.preview.export import format_ppm

        image = np.zeros((3, 5, 3), dtype=np.float32)
        lines = format_ppm(image).splitlines()

        assert lines[:3] == ["P3", "5 3", "255"]
        assert len(lines) == 3 + 5 * 3

    def test_trailing_newline(self):
        from whitted.preview.export import format_ppm

        assert format_ppm(np.zeros((2, 2, 3), dtype=np.float32)).endswith("0 0 0\n")

    def test_pixel_order_is_row_major(self):
        """Test pixels are written row by row, left to right."""
        from whitted.preview.export import format_ppm

        image = np.zeros((2, 2, 3), dtype=np.float32)
        image[0, 1] = (1.0, 0.0, 0.0)
        image[1, 0] = (0.0, 1.0, 0.0)
        image[1, 1] = (0.0, 0.0, 1.0)

        lines = format_ppm(image).splitlines()
        assert lines[3:] == ["0 0 0", "255 0 0", "0 255 0", "0 0 255"]


class TestSaveFiles:
    """Test writing PPM and PNG files."""

    def test_save_ppm(self, tmp_path):
        from whitted.preview.export import format_ppm, save_ppm

        image = np.full((4, 6, 3), 0.5, dtype=np.float32)
        path = save_ppm(image, tmp_path / "out.ppm")

        assert path.exists()
        assert path.read_text(encoding="ascii") == format_ppm(image)

    def test_save_png(self, tmp_path):
        from whitted.preview.export import save_png

        image = np.zeros((4, 6, 3), dtype=np.float32)
        image[..., 0] = 2.0
        image[..., 1] = -1.0
        image[..., 2] = 0.5
        path = save_png(image, str(tmp_path / "out.png"))

        with PILImage.open(path) as loaded:
            assert loaded.size == (6, 4)
            assert loaded.mode == "RGB"
            assert loaded.getpixel((0, 0)) == (255, 0, 127)

    def test_image_to_uint8_clamps_both_ends(self):
        from whitted.preview.export import image_to_uint8

        image = np.array([[[-0.5, 0.5, 1.5]]], dtype=np.float32)
        result = image_to_uint8(image)
        assert result.dtype == np.uint8
        assert result.tolist() == [[[0, 127, 255]]]
