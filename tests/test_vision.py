# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for color vision deficiency simulation and warm/cool labels."""

import logging

import numpy as np
import pytest

from tinct.schema import RGB, ColorTemperature, Deficiency, TemperatureKind
from tinct.perception import (
    CVD_MATRICES,
    color_temperature,
    simulate_color_blindness,
    simulate_hex,
    simulate_pixels,
)


class TestSimulation:
    def test_protanopia_red(self):
        result = simulate_color_blindness(255, 0, 0, Deficiency.PROTANOPIA)
        assert result == RGB(145, 142, 0)
        assert result.r < 255

    def test_accepts_string_tag(self):
        assert simulate_color_blindness(255, 0, 0, "protanopia") == RGB(145, 142, 0)

    def test_tritanopia_blue(self):
        assert simulate_color_blindness(0, 0, 255, Deficiency.TRITANOPIA) == RGB(0, 145, 134)

    def test_achromatopsia_is_gray(self):
        result = simulate_color_blindness(59, 130, 246, Deficiency.ACHROMATOPSIA)
        assert result.r == result.g == result.b

    @pytest.mark.parametrize("deficiency", list(Deficiency))
    def test_white_and_black_fixed(self, deficiency):
        assert simulate_color_blindness(0, 0, 0, deficiency) == RGB(0, 0, 0)
        white = simulate_color_blindness(255, 255, 255, deficiency)
        assert all(c >= 254 for c in white.as_tuple())

    def test_unknown_tag_leaves_color(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert simulate_color_blindness(255, 0, 0, "deuteranomaly") == RGB(255, 0, 0)
        assert "deuteranomaly" in caplog.text
        assert simulate_hex("#3B82F6", "tetrachromacy") == "#3b82f6"
        pixels = np.array([[10, 20, 30]], dtype=np.uint8)
        np.testing.assert_array_equal(simulate_pixels(pixels, "x"), pixels)

    def test_hex(self):
        assert simulate_hex("#ff0000", Deficiency.PROTANOPIA) == "#918e00"
        assert simulate_hex("nope", Deficiency.PROTANOPIA) is None

    def test_batch_shape_and_dtype(self):
        img = np.zeros((4, 5, 3), dtype=np.uint8)
        img[..., 0] = 255
        out = simulate_pixels(img, Deficiency.PROTANOPIA)
        assert out.shape == (4, 5, 3)
        assert out.dtype == np.uint8
        np.testing.assert_array_equal(out[2, 3], [145, 142, 0])

    def test_matrices_read_only(self):
        with pytest.raises(ValueError):
            CVD_MATRICES[Deficiency.PROTANOPIA][0, 0] = 1.0


class TestTemperature:
    def test_red_is_warm(self):
        assert color_temperature("#ff0000") == ColorTemperature(TemperatureKind.WARM, 4700)

    def test_blue_is_cool(self):
        assert color_temperature("#0000ff") == ColorTemperature(TemperatureKind.COOL, 10667)

    def test_green_splits_at_120(self):
        assert color_temperature("#00ff00").kind is TemperatureKind.COOL
        assert color_temperature("#80ff00").kind is TemperatureKind.WARM

    def test_gray_is_neutral(self):
        assert color_temperature("#808080") == ColorTemperature(TemperatureKind.NEUTRAL, 6500)

    def test_purple_band_is_neutral(self):
        # hue 285
        assert color_temperature("#bf00ff").kind is TemperatureKind.NEUTRAL

    def test_invalid_is_neutral(self):
        assert color_temperature("xyz").kind is TemperatureKind.NEUTRAL

    def test_dict_layout(self):
        assert color_temperature("#ff0000").to_dict() == {"type": "warm", "kelvin": 4700}
