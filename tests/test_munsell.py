# -*- coding: utf-8 -*-
# Tint: Weaving the mathematics of colour appearance
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Tests for tint_munsell."""
from __future__ import annotations

import numpy as np
import pytest

from tint_colorspace import RGB, XYZ, Yxy
from tint_config import ConvergenceWarning, InvalidNotation, SolverLimits
from tint_munsell import (
    Achromatic,
    Chromatic,
    Munsell,
    build_munsell_table,
    hue_name_to_value,
    hue_value_to_name,
    value_to_y,
    wrap_hue,
    y_to_value,
)


class TestRenotationTable:
    """Tests for the decoded renotation table."""

    def test_built_once(self) -> None:
        """Repeated calls share one table."""
        assert build_munsell_table() is build_munsell_table()

    def test_shape(self) -> None:
        """Nine value levels, 40 hue buckets, 27 chroma slots."""
        table = build_munsell_table()
        assert table.xy.shape == (9, 40, 27, 2)
        assert table.max_chroma.shape == (9, 40)
        assert table.top == 8

    def test_read_only(self) -> None:
        """Decoded arrays cannot be modified."""
        table = build_munsell_table()
        with pytest.raises(ValueError):
            table.xy[0, 0, 1, 0] = 0.0

    def test_first_samples(self) -> None:
        """Second-order differences decode to the renotation chromaticities."""
        table = build_munsell_table()
        np.testing.assert_allclose(table.xy[0, 0, 1], [0.363, 0.271], atol=1e-9)
        np.testing.assert_allclose(table.xy[0, 0, 2], [0.392, 0.242], atol=1e-9)
        assert table.max_chroma[0, 0] == 12

    def test_missing_samples(self) -> None:
        """Chroma 0 is the illuminant C white; untabulated cells are None."""
        table = build_munsell_table()
        assert table.get_xy(0, 0, 0) == (0.3101, 0.3162)
        assert table.get_xy(0, 0, 50) is None


class TestValueLuminance:
    """Tests for Munsell value <-> luminance."""

    def test_cubic(self) -> None:
        """V = 5 follows the JIS cubic."""
        assert value_to_y(5.0) == pytest.approx(0.197667, abs=1e-6)

    def test_linear_below_one(self) -> None:
        """Below V = 1 the relation is linear."""
        assert value_to_y(0.5) == pytest.approx(0.00605)
        assert y_to_value(0.00605) == pytest.approx(0.5)

    @pytest.mark.parametrize("v", [1.5, 3.0, 5.0, 7.5, 9.0])
    def test_inverse(self, v: float) -> None:
        """Newton inversion recovers the value."""
        assert y_to_value(value_to_y(v)) == pytest.approx(v, abs=0.01)

    def test_iteration_cap_warns(self) -> None:
        """Hitting the iteration cap emits a ConvergenceWarning."""
        with pytest.warns(ConvergenceWarning):
            y_to_value(0.5, SolverLimits(max_iterations=1))


class TestHueNames:
    """Tests for hue name <-> hue value."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("5YR", 15.0), ("10RP", 0.0), ("2.5R", 2.5), ("7.5PB", 77.5), ("N", None)],
    )
    def test_name_to_value(self, name: str, expected: float | None) -> None:
        """Hue families are offset by ten, 10RP wraps to zero."""
        assert hue_name_to_value(name) == expected

    @pytest.mark.parametrize("name", ["R", "YR", "5XX", "5"])
    def test_invalid_names(self, name: str) -> None:
        """Unparseable hue names raise InvalidNotation."""
        with pytest.raises(InvalidNotation):
            hue_name_to_value(name)

    @pytest.mark.parametrize(
        ("hue", "expected"),
        [(15.0, "5YR"), (0.0, "10RP"), (10.0, "10R"), (2.5, "2.5R"), (25.0, "5Y")],
    )
    def test_value_to_name(self, hue: float, expected: str) -> None:
        """Hue values format as Munsell hue names."""
        assert hue_value_to_name(hue, 4.0) == expected

    def test_achromatic_name(self) -> None:
        """Zero chroma or no hue is neutral."""
        assert hue_value_to_name(15.0, 0.0) == "N"
        assert hue_value_to_name(None, 4.0) == "N"
        assert hue_value_to_name(-1, 4.0) == "N"


class TestNotation:
    """Tests for Munsell notation formatting and parsing."""

    def test_format_chromatic(self) -> None:
        """Chromatic colours print hue, value and chroma."""
        assert Munsell.to_string([25.0, 6.0, 8.0]) == "5Y 6.0/8.0"

    def test_format_achromatic(self) -> None:
        """Neutral colours print only the value."""
        assert Munsell.to_string([10.0, 5.0, 0.0]) == "N 5.0"
        assert Munsell.to_string(Achromatic(5.0)) == "N 5.0"

    def test_parse_chromatic(self) -> None:
        """Notation parses into a Chromatic colour."""
        assert Munsell.parse("5Y 6/8") == Chromatic(25.0, 6.0, 8.0)

    def test_parse_achromatic(self) -> None:
        """N notation parses into an Achromatic colour."""
        assert Munsell.parse("N 5") == Achromatic(5.0)
        assert Munsell.parse("5R 5/0") == Achromatic(5.0)

    def test_format_parse(self) -> None:
        """Formatted notation parses back to the same colour."""
        color = Chromatic(15.0, 4.0, 6.0)
        assert Munsell.parse(Munsell.to_string(color)) == color

    @pytest.mark.parametrize("text", ["", "hello", "5Y 6", "5XY 6/8", "5Y 6/8/2"])
    def test_parse_invalid(self, text: str) -> None:
        """Malformed notation raises InvalidNotation."""
        with pytest.raises(InvalidNotation):
            Munsell.parse(text)

    def test_classify(self) -> None:
        """Negative hue or tiny chroma is achromatic."""
        assert Munsell.classify([-1.0, 5.0, 4.0]) == Achromatic(5.0)
        assert Munsell.classify([50.0, 5.0, 0.01]) == Achromatic(5.0)
        assert Munsell.classify([105.0, 5.0, 4.0]) == Chromatic(5.0, 5.0, 4.0)


class TestConversion:
    """Tests for XYZ <-> Munsell."""

    def test_round_trip(self, orange_xyz: np.ndarray) -> None:
        """XYZ -> HVC -> XYZ reproduces the chromaticity."""
        hvc = Munsell.from_xyz(orange_xyz).value
        res = Munsell.to_xyz(hvc)
        np.testing.assert_allclose(Yxy.from_xyz(res.value)[1:], Yxy.from_xyz(orange_xyz)[1:], atol=0.02)
        assert res.value[1] == pytest.approx(orange_xyz[1], abs=0.01)
        assert not res.saturated

    def test_orange_is_warm(self, orange_xyz: np.ndarray) -> None:
        """An sRGB orange lands between the R and Y families."""
        res = Munsell.from_xyz(orange_xyz)
        h, v, c = res.value
        assert not res.saturated
        assert 0.0 < h < 30.0
        assert 3.0 < v < 7.0
        assert c > 4.0

    def test_grey_is_neutral(self) -> None:
        """Mid grey has (almost) no chroma."""
        res = Munsell.from_xyz(RGB.to_xyz([128, 128, 128]))
        assert res.value[2] < 0.5
        assert not res.saturated

    def test_illuminant_c_white_is_achromatic(self) -> None:
        """The illuminant C white point itself has zero chroma."""
        xyz_c = Yxy.to_xyz([0.5, 0.3101, 0.3162]).value
        res = Munsell.from_xyz(XYZ.from_illuminant_c(xyz_c))
        assert res.value[2] < 0.05
        assert not res.saturated

    def test_achromatic_ignores_hue(self) -> None:
        """With zero chroma the hue has no effect."""
        xyz = Munsell.to_xyz(np.array([[0.0, 5.0, 0.0], [25.0, 5.0, 0.0], [75.0, 5.0, 0.0]])).value
        np.testing.assert_allclose(xyz, np.broadcast_to(xyz[0], xyz.shape))

    def test_black_with_chroma_is_saturated(self) -> None:
        """V = 0 cannot carry chroma."""
        assert Munsell.to_xyz([25.0, 0.0, 4.0]).saturated is True

    def test_above_top_value_is_saturated(self) -> None:
        """Values beyond the table are extrapolated and flagged."""
        assert Munsell.to_xyz([25.0, 9.5, 4.0]).saturated is True

    def test_beyond_chroma_is_saturated(self) -> None:
        """Chroma beyond the tabulated maximum is flagged."""
        assert Munsell.to_xyz([25.0, 5.0, 40.0]).saturated is True

    def test_batch_shapes(self, rgb_samples: np.ndarray) -> None:
        """Batches keep their leading dimension."""
        xyz = RGB.to_xyz(rgb_samples)
        fwd = Munsell.from_xyz(xyz)
        assert fwd.value.shape == xyz.shape
        assert fwd.saturated.shape == (len(xyz),)
        res = Munsell.to_xyz(fwd.value)
        assert res.value.shape == xyz.shape
        assert res.saturated.shape == (len(xyz),)

    def test_out_of_gamut_red_is_saturated(self) -> None:
        """sRGB red lies outside the renotation table and is reported neutral."""
        res = Munsell.from_xyz(RGB.to_xyz([255, 0, 0]))
        assert res.saturated is True
        assert res.value[0] == 0.0
        assert res.value[2] == 0.0
        assert 4.0 < res.value[1] < 6.0

    def test_chromatic_above_top_value_is_saturated(self) -> None:
        """A tinted colour brighter than V = 9 cannot be placed in the table."""
        xyz_c = Yxy.to_xyz([0.95, 0.33, 0.34]).value
        res = Munsell.from_xyz(XYZ.from_illuminant_c(xyz_c))
        assert res.saturated is True
        assert res.value[1] > 9.0
        assert res.value[2] == 0.0

    def test_neutral_above_top_value_is_not_saturated(self) -> None:
        """The neutral axis extends past the top tabulated value."""
        xyz_c = Yxy.to_xyz([0.95, 0.3101, 0.3162]).value
        res = Munsell.from_xyz(XYZ.from_illuminant_c(xyz_c))
        assert res.saturated is False
        assert res.value[1] > 9.0

    def test_batch_flags_per_colour(self, rgb_samples: np.ndarray) -> None:
        """Only the colours outside the table are flagged."""
        res = Munsell.from_xyz(RGB.to_xyz(rgb_samples))
        assert res.saturated[2]
        assert not res.saturated[5]
        assert not res.saturated[6]

    def test_value_inversion_within_tolerance(self) -> None:
        """The Newton value inversion stays within the configured step tolerance."""
        limits = SolverLimits()
        for v in np.linspace(1.5, 10.0, 18):
            assert abs(y_to_value(value_to_y(v), limits) - v) <= limits.value_tolerance


class TestHueWrapping:
    """Tests for hues beyond one full turn."""

    @pytest.mark.parametrize("turns", [1, 2, 5])
    def test_to_xyz_wraps_hue(self, turns: int) -> None:
        """Adding whole turns of 100 leaves the colour unchanged."""
        base = Munsell.to_xyz([25.0, 5.0, 4.0])
        res = Munsell.to_xyz([25.0 + 100.0 * turns, 5.0, 4.0])
        np.testing.assert_allclose(res.value, base.value, atol=1e-12)
        assert res.saturated == base.saturated

    def test_classify_wraps_hue(self) -> None:
        """Classification reduces the hue into [0, 100)."""
        assert Munsell.classify([225.0, 5.0, 4.0]) == Chromatic(25.0, 5.0, 4.0)

    @pytest.mark.parametrize(
        ("hue", "expected"),
        [(250.0, 50.0), (-1e-17, 0.0), (-25.0, 75.0), (100.0, 0.0)],
    )
    def test_wrap_hue(self, hue: float, expected: float) -> None:
        """Hues reduce modulo the period into [0, period)."""
        assert wrap_hue(hue) == pytest.approx(expected)
