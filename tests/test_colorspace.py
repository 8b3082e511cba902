# -*- coding: utf-8 -*-
# Tint: Weaving the mathematics of colour appearance
# Copyright (c) 2026 opticsWolf
#
# SPDX-License-Identifier: LGPL-3.0-or-later

"""Tests for tint_colorspace."""
from __future__ import annotations

import numpy as np
import pytest

from tint_colorspace import (
    D65_XY,
    LMS,
    LRGB,
    REF_WHITE_D65,
    RGB,
    XYZ,
    YIQ,
    Converted,
    Lab,
    LMSBasis,
    Yxy,
    get_lms_basis,
    set_lms_basis,
    set_strict_ieee,
)
from tint_config import ShapeError


class TestRgbTransfer:
    """Tests for sRGB <-> linear RGB."""

    def test_black_and_white(self) -> None:
        """0 and 255 map to the ends of the linear range."""
        lrgb = RGB.to_lrgb(np.array([[0, 0, 0], [255, 255, 255]], dtype=np.float64))
        np.testing.assert_allclose(lrgb, [[0, 0, 0], [1, 1, 1]], atol=1e-12)

    def test_linear_segment(self) -> None:
        """Values below the knee are divided by 12.92."""
        lrgb = RGB.to_lrgb([5.0, 5.0, 5.0])
        np.testing.assert_allclose(lrgb, 5.0 / 255.0 / 12.92, rtol=1e-12)

    def test_clamps_and_reports_saturation(self) -> None:
        """Out-of-range linear values clamp to 255 and set the flag."""
        res = RGB.from_lrgb([2.0, 2.0, 2.0])
        assert isinstance(res, Converted)
        np.testing.assert_array_equal(res.value, [255, 255, 255])
        assert res.saturated is True

    def test_in_gamut_not_saturated(self) -> None:
        """Mid grey stays unclamped."""
        res = RGB.from_lrgb([0.5, 0.5, 0.5])
        assert res.saturated is False
        np.testing.assert_array_equal(res.value, [187, 187, 187])

    def test_negative_clamps_to_zero(self) -> None:
        """Negative channels clamp to 0."""
        res = RGB.from_lrgb([-0.2, 0.5, 0.5])
        assert res.value[0] == 0
        assert res.saturated is True

    def test_batch_flags(self) -> None:
        """A batch reports one flag per colour."""
        res = RGB.from_lrgb(np.array([[0.5, 0.5, 0.5], [2.0, 0.0, 0.0]]))
        np.testing.assert_array_equal(res.saturated, [False, True])

    def test_unpacking(self) -> None:
        """Converted unpacks into value and flag."""
        value, saturated = RGB.from_lrgb([0.1, 0.2, 0.3])
        assert value.shape == (3,)
        assert saturated is False

    def test_strict_ieee_matches_fast(self, rgb_samples: np.ndarray) -> None:
        """Strict kernels agree with the fastmath kernels."""
        fast = RGB.to_lrgb(rgb_samples)
        set_strict_ieee(True)
        strict = RGB.to_lrgb(rgb_samples)
        np.testing.assert_allclose(fast, strict, rtol=1e-12, atol=1e-15)


class TestRgbRoundTrip:
    """sRGB -> Lab -> sRGB round trips."""

    def test_lab_round_trip(self, rgb_samples: np.ndarray) -> None:
        """Round trip reproduces every channel within one step."""
        back = RGB.from_lab(RGB.to_lab(rgb_samples))
        np.testing.assert_allclose(back.value, rgb_samples, atol=1.0)

    def test_grid_round_trip(self) -> None:
        """A coarse grid of the sRGB cube survives the round trip."""
        axis = np.arange(0, 256, 51, dtype=np.float64)
        grid = np.array(np.meshgrid(axis, axis, axis)).reshape(3, -1).T
        back = RGB.from_lab(RGB.to_lab(grid))
        np.testing.assert_allclose(back.value, grid, atol=1.0)

    def test_yxy_round_trip(self, rgb_samples: np.ndarray) -> None:
        """sRGB -> Yxy -> sRGB within one step."""
        back = RGB.from_yxy(RGB.to_yxy(rgb_samples))
        np.testing.assert_allclose(back.value, rgb_samples, atol=1.0)


class TestColorInteger:
    """Tests for 0xAARRGGBB packing."""

    def test_unpack(self) -> None:
        """Alpha is ignored when unpacking."""
        np.testing.assert_array_equal(RGB.from_color_integer(0xFF102030), [16, 32, 48])

    def test_pack(self) -> None:
        """Packing sets an opaque alpha."""
        assert RGB.to_color_integer([16, 32, 48]) == 0xFF102030


class TestLightness:
    """Tests for the lightness-only preview."""

    def test_grey_output(self) -> None:
        """Red becomes a grey of equal lightness."""
        res = RGB.to_lightness([255, 0, 0])
        assert np.ptp(res.value) <= 1.0
        assert not res.saturated
        lab = RGB.to_lab(res.value)
        assert lab[0] == pytest.approx(RGB.to_lab([255, 0, 0])[0], abs=1.0)


class TestLab:
    """Tests for XYZ <-> CIELAB."""

    def test_red(self) -> None:
        """sRGB red has the reference Lab coordinates."""
        lab = RGB.to_lab([255, 0, 0])
        np.testing.assert_allclose(lab, [53.24, 80.09, 67.20], atol=0.1)

    def test_white(self) -> None:
        """sRGB white is L*=100 and neutral."""
        lab = RGB.to_lab([255, 255, 255])
        np.testing.assert_allclose(lab, [100, 0, 0], atol=0.1)

    def test_black(self) -> None:
        """Black maps to L*=0 through the linear segment."""
        np.testing.assert_allclose(Lab.from_xyz([0, 0, 0]), [0, 0, 0], atol=1e-9)

    def test_xyz_round_trip(self) -> None:
        """Lab -> XYZ is the exact inverse, on both sides of the knee."""
        xyz = np.array([[0.001, 0.002, 0.003], [0.3, 0.4, 0.5], [0.95, 1.0, 1.09]])
        np.testing.assert_allclose(Lab.to_xyz(Lab.from_xyz(xyz)), xyz, rtol=1e-10, atol=1e-14)

    def test_custom_white(self) -> None:
        """The white point itself maps to L*=100."""
        white = np.array([0.9642, 1.0, 0.8249])
        np.testing.assert_allclose(Lab.from_xyz(white, white), [100, 0, 0], atol=1e-9)

    def test_lightness_only(self) -> None:
        """lightness_from_xyz agrees with the full transform."""
        xyz = np.array([[0.2, 0.3, 0.4], [0.5, 0.5, 0.5]])
        np.testing.assert_allclose(Lab.lightness_from_xyz(xyz), Lab.from_xyz(xyz)[:, 0])

    def test_polar(self) -> None:
        """Chroma is the radius and hue lies in [0, 360)."""
        lch = Lab.to_polar(np.array([[50, 0, 10], [50, 0, -10], [50, -3, -4]], dtype=np.float64))
        np.testing.assert_allclose(lch[:, 1], [10, 10, 5])
        np.testing.assert_allclose(lch[:2, 2], [90, 270])
        assert np.all((lch[:, 2] >= 0) & (lch[:, 2] < 360))

    def test_polar_round_trip(self) -> None:
        """to_orthogonal inverts to_polar."""
        lab = np.array([[50, 20, -30], [70, -5, 12]], dtype=np.float64)
        np.testing.assert_allclose(Lab.to_orthogonal(Lab.to_polar(lab)), lab, atol=1e-10)


class TestYxy:
    """Tests for XYZ <-> Yxy."""

    def test_round_trip(self) -> None:
        """XYZ -> Yxy -> XYZ is exact away from black."""
        xyz = np.array([[0.2, 0.3, 0.4], [0.9, 0.8, 0.1], [0.01, 0.02, 0.5]])
        res = Yxy.to_xyz(Yxy.from_xyz(xyz))
        np.testing.assert_allclose(res.value, xyz, rtol=1e-12)
        assert not res.any_saturated

    def test_black_uses_white_chromaticity(self) -> None:
        """X+Y+Z=0 yields the D65 chromaticity."""
        np.testing.assert_allclose(Yxy.from_xyz([0, 0, 0]), [0, D65_XY[0], D65_XY[1]])

    def test_zero_y_is_black(self) -> None:
        """A zero y chromaticity gives black, not saturated."""
        res = Yxy.to_xyz([0.5, 0.3, 0.0])
        np.testing.assert_array_equal(res.value, [0, 0, 0])
        assert res.saturated is False

    def test_beyond_white_is_saturated(self) -> None:
        """Luminance above the white point sets the flag."""
        res = Yxy.to_xyz([1.2, D65_XY[0], D65_XY[1]])
        assert res.saturated is True


class TestLms:
    """Tests for XYZ <-> LMS."""

    @pytest.mark.parametrize("basis", list(LMSBasis))
    def test_inverse_consistency(self, basis: LMSBasis) -> None:
        """Each basis round-trips to float precision."""
        xyz = np.array([[0.2, 0.3, 0.4], [0.95, 1.0, 1.09], [0.0, 0.0, 0.0]])
        back = LMS.to_xyz(LMS.from_xyz(xyz, basis), basis)
        np.testing.assert_allclose(back, xyz, atol=1e-12)

    def test_set_basis(self) -> None:
        """The selected basis changes the default transform."""
        xyz = np.array([0.3, 0.4, 0.5])
        default = LMS.from_xyz(xyz)
        set_lms_basis("bradford")
        assert get_lms_basis() is LMSBasis.BRADFORD
        np.testing.assert_allclose(LMS.from_xyz(xyz), LMS.from_xyz(xyz, LMSBasis.BRADFORD))
        assert not np.allclose(LMS.from_xyz(xyz), default)

    def test_unknown_basis(self) -> None:
        """Unknown basis names are rejected."""
        with pytest.raises(ValueError):
            set_lms_basis("hunt")


class TestMatrices:
    """Tests for the remaining matrix transforms."""

    def test_lrgb_white_is_d65(self) -> None:
        """Linear white maps to the D65 white point."""
        np.testing.assert_allclose(LRGB.to_xyz([1, 1, 1]), REF_WHITE_D65, atol=1e-4)

    def test_lrgb_round_trip(self) -> None:
        """LRGB <-> XYZ matrices are inverse to their printed precision."""
        lrgb = np.array([[0.2, 0.5, 0.8], [1.0, 0.0, 0.3]])
        np.testing.assert_allclose(LRGB.from_xyz(LRGB.to_xyz(lrgb)), lrgb, atol=1e-5)

    def test_yiq_white(self) -> None:
        """White has Y=1 and no chrominance."""
        np.testing.assert_allclose(YIQ.from_lrgb([1, 1, 1]), [1, 0, 0], atol=1e-6)

    def test_yiq_round_trip(self) -> None:
        """YIQ matrices are inverse to their printed precision."""
        lrgb = np.array([[0.2, 0.5, 0.8], [0.9, 0.1, 0.3]])
        np.testing.assert_allclose(YIQ.to_lrgb(YIQ.from_lrgb(lrgb)), lrgb, atol=2e-3)

    def test_illuminant_c_round_trip(self) -> None:
        """C <-> D65 adaptation matrices are inverse pairs."""
        xyz = np.array([0.3, 0.4, 0.5])
        np.testing.assert_allclose(XYZ.from_illuminant_c(XYZ.to_illuminant_c(xyz)), xyz, atol=1e-5)


class TestShapes:
    """Tests for the shape contract."""

    def test_single_in_single_out(self) -> None:
        """A (3,) input gives a (3,) output."""
        assert LRGB.to_xyz([0.1, 0.2, 0.3]).shape == (3,)

    def test_batch_in_batch_out(self) -> None:
        """An (N, 3) input gives an (N, 3) output."""
        assert LRGB.to_xyz(np.zeros((7, 3))).shape == (7, 3)

    @pytest.mark.parametrize("bad", [np.zeros(4), np.zeros((2, 4)), np.zeros((2, 2, 3))])
    def test_bad_shape(self, bad: np.ndarray) -> None:
        """Anything but (3,) or (N, 3) raises ShapeError."""
        with pytest.raises(ShapeError):
            LRGB.to_xyz(bad)
