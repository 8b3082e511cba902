# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Primitive Colour Spaces
=======================
Closed-form transforms between sRGB, linear RGB, CIE 1931 XYZ, CIE Yxy,
CIELAB, LMS and YIQ, plus the illuminant C <-> D65 adaptation used by the
Munsell engine.

Conventions:
1. Shapes: every public transform accepts a single colour ``(3,)`` or a batch
   ``(N, 3)`` and returns the same rank (see ``handle_shapes``).
2. Scales: sRGB is expressed in [0, 255], linear RGB and XYZ in [0, 1]
   (Y = 1 for the reference white), L* in [0, 100].
3. Lossy transforms (clamping sRGB output, Yxy beyond the white point)
   return a ``Converted`` value carrying a per-colour ``saturated`` flag
   instead of setting process-wide state.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
    - Vienot, Brettel, Mollon (1999). "Digital video colourmaps for checking
      the legibility of displays by dichromats".
    - Bruce Lindbloom, "RGB/XYZ Matrices" and "Munsell Calculator".
"""

import functools
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Final, TypeAlias, Union

import numpy as np
from numba import njit

from tint_config import ShapeError, logger

__all__ = [
    # --- Type Aliases ---
    "ArrayFloat",
    "ArrayBool",

    # --- Constants ---
    "D65_XY",
    "D50_XY",
    "REF_WHITE_D65",
    "REF_WHITE_D50",
    "LAB_EPSILON",
    "LAB_DELTA",
    "DEG2RAD",
    "RAD2DEG",

    # --- Configuration ---
    "set_strict_ieee",
    "LMSBasis",
    "set_lms_basis",
    "get_lms_basis",

    # --- Decorators ---
    "handle_shapes",

    # --- Classes ---
    "Converted",
    "RGB",
    "LRGB",
    "XYZ",
    "YIQ",
    "Yxy",
    "Lab",
    "LMS",
]

# --- Type Aliases ---
ArrayFloat: TypeAlias = np.typing.NDArray[np.floating]
ArrayBool: TypeAlias = np.typing.NDArray[np.bool_]

# --- Constants & Pre-Transposed Matrices ---

# Chromaticity (x, y, z) of the reference illuminants
# Reference: http://www.babelcolor.com/download/A%20review%20of%20RGB%20color%20spaces.pdf
D65_XY: Final[tuple[float, float, float]] = (0.31273, 0.32902, 0.35825)
D50_XY: Final[tuple[float, float, float]] = (0.34567, 0.35850, 0.29583)

# Tristimulus values of the white points (Y = 1)
REF_WHITE_D65: Final[ArrayFloat] = np.array(
    [D65_XY[0] / D65_XY[1], 1.0, D65_XY[2] / D65_XY[1]], dtype=np.float64
)
REF_WHITE_D50: Final[ArrayFloat] = np.array(
    [D50_XY[0] / D50_XY[1], 1.0, D50_XY[2] / D50_XY[1]], dtype=np.float64
)

# Linear RGB (sRGB primaries, D65) <-> XYZ
# We pre-transpose these so that row-vector batches can be multiplied with
# ``np.dot(batch, M_T)``.
_M_LRGB_TO_XYZ_BASE = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041]
], dtype=np.float64)
M_LRGB_TO_XYZ_T: Final[ArrayFloat] = _M_LRGB_TO_XYZ_BASE.T.copy()

_M_XYZ_TO_LRGB_BASE = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252]
], dtype=np.float64)
M_XYZ_TO_LRGB_T: Final[ArrayFloat] = _M_XYZ_TO_LRGB_BASE.T.copy()

# YIQ (NTSC 1953)
# Y in [0, 1], I in [-0.5957, 0.5957], Q in [-0.5226, 0.5226]
_M_LRGB_TO_YIQ_BASE = np.array([
    [0.2990,    0.5870,    0.1140  ],
    [0.595716, -0.274453, -0.321263],
    [0.211456, -0.522591,  0.311135]
], dtype=np.float64)
M_LRGB_TO_YIQ_T: Final[ArrayFloat] = _M_LRGB_TO_YIQ_BASE.T.copy()

_M_YIQ_TO_LRGB_BASE = np.array([
    [1.0,  0.9563,  0.6210],
    [1.0, -0.2721, -0.6474],
    [1.0, -1.1070,  1.7046]
], dtype=np.float64)
M_YIQ_TO_LRGB_T: Final[ArrayFloat] = _M_YIQ_TO_LRGB_BASE.T.copy()

# Illuminant C <-> D65 (Von Kries method)
# Reference: http://www.brucelindbloom.com/index.html?MunsellCalculator.html
_M_C_TO_D65_BASE = np.array([
    [ 0.9972812, -0.0093756, -0.0154171],
    [-0.0010298,  1.0007636,  0.0002084],
    [ 0.0,        0.0,        0.9209267]
], dtype=np.float64)
M_C_TO_D65_T: Final[ArrayFloat] = _M_C_TO_D65_BASE.T.copy()

_M_D65_TO_C_BASE = np.array([
    [1.0027359,  0.0093941,  0.0167846],
    [0.0010319,  0.9992466, -0.0002089],
    [0.0,        0.0,        1.0858628]
], dtype=np.float64)
M_D65_TO_C_T: Final[ArrayFloat] = _M_D65_TO_C_BASE.T.copy()

# --- Exact Rational Math Constants ---
# Defined by CIE 1976 for the Lab transformation.
LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = LAB_DELTA * LAB_DELTA * LAB_DELTA          # (6/29)^3 ~0.008856
_LAB_SLOPE: Final[float] = (29.0 * 29.0) / (6.0 * 6.0) / 3.0           # (1/3)(29/6)^2 ~7.787
_LAB_SLOPE_INV: Final[float] = 3.0 * (6.0 * 6.0) / (29.0 * 29.0)       # 3(6/29)^2 ~0.1284
_LAB_OFFSET: Final[float] = 16.0 / 116.0

# sRGB transfer function breakpoints (W3C sRGB note)
_SRGB_EOTF_KNEE: Final[float] = 0.03928
_SRGB_OETF_KNEE: Final[float] = 0.00304

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi


# --- Runtime Configuration ---
# When True, the transfer-function kernels use fastmath=False variants that
# preserve strict IEEE 754 semantics (inf / NaN propagation, no FP
# reassociation).
_STRICT_IEEE: bool = False
_CONFIG_LOCK = threading.RLock()

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    with _CONFIG_LOCK:
        _STRICT_IEEE = bool(enabled)


# =============================================================================
# 1. RESULT TYPE & DECORATORS
# =============================================================================

@dataclass(slots=True, frozen=True)
class Converted:
    """
    Result of a transform that may clamp or leave its tabulated range.

    Attributes:
        value: Converted colour(s), shape (3,) or (N, 3).
        saturated: ``bool`` for a single colour, boolean array of shape (N,)
            for a batch.  True where the value was clamped or extrapolated.
    """

    value: ArrayFloat
    saturated: Union[bool, ArrayBool]

    def __iter__(self):
        yield self.value
        yield self.saturated

    @property
    def any_saturated(self) -> bool:
        """True if at least one colour of the result was saturated."""
        return bool(np.any(self.saturated))


def handle_shapes(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to normalize inputs to (N, 3) and safeguard shape.

    This ensures that 1D inputs (single colours) are treated as 2D batches
    internally, simplifying the kernels.

    Args:
        func: The function to decorate.

    Returns:
        The wrapped function with shape handling.
        - If input is (3,), returns (3,) (or a scalar for per-colour results)
        - If input is (N, 3), returns (N, 3) (or (N,))
        ``Converted`` results are unwrapped the same way.
    """
    @functools.wraps(func)
    def wrapper(arr: Any, *args: Any, **kwargs: Any) -> Any:
        arr = np.asarray(arr, dtype=np.float64)
        arr_in = np.ascontiguousarray(np.atleast_2d(arr))

        if arr_in.ndim != 2 or arr_in.shape[-1] != 3:
            raise ShapeError(f"Expected shape (3,) or (N, 3), got {arr.shape}")

        res = func(arr_in, *args, **kwargs)

        if arr.ndim == 1:
            if isinstance(res, Converted):
                return Converted(res.value[0], bool(res.saturated[0]))
            return res[0]
        return res
    return wrapper


# =============================================================================
# 2. LOW-LEVEL MATH KERNELS (Numba Optimized)
# =============================================================================
# Each kernel is written once and compiled twice: a cached fastmath=True
# variant and a strict IEEE variant selected through ``set_strict_ieee``.

def _srgb_eotf_py(srgb: ArrayFloat) -> ArrayFloat:
    """sRGB [0, 1] -> linear RGB (gamma removal)."""
    out = np.empty_like(srgb)
    srgb_flat = srgb.ravel()
    out_flat = out.ravel()
    for i in range(srgb.size):
        v = srgb_flat[i]
        if v < 0.03928:
            out_flat[i] = v / 12.92
        else:
            out_flat[i] = ((v + 0.055) / 1.055) ** 2.4
    return out

def _srgb_oetf_py(linear: ArrayFloat) -> ArrayFloat:
    """Linear RGB -> sRGB [0, 1] (gamma correction)."""
    out = np.empty_like(linear)
    linear_flat = linear.ravel()
    out_flat = out.ravel()
    for i in range(linear.size):
        v = linear_flat[i]
        if v > 0.00304:
            out_flat[i] = 1.055 * (v ** (1.0 / 2.4)) - 0.055
        else:
            out_flat[i] = 12.92 * v
    return out

def _lab_f_py(t: ArrayFloat) -> ArrayFloat:
    """
    Non-linear transfer function f(t) for CIELAB.

    Cube root above (6/29)^3, linear slope below it to avoid an infinite
    derivative at zero.
    """
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_EPSILON:
            out_flat[i] = v ** (1.0 / 3.0)
        else:
            out_flat[i] = _LAB_SLOPE * v + _LAB_OFFSET
    return out

def _lab_f_inv_py(t: ArrayFloat) -> ArrayFloat:
    """Exact inverse of ``_lab_f_py``."""
    out = np.empty_like(t)
    t_flat = t.ravel()
    out_flat = out.ravel()
    for i in range(t.size):
        v = t_flat[i]
        if v > LAB_DELTA:
            out_flat[i] = v * v * v
        else:
            out_flat[i] = (v - _LAB_OFFSET) * _LAB_SLOPE_INV
    return out

_fast_srgb_eotf = njit(cache=True, fastmath=True)(_srgb_eotf_py)
_fast_srgb_oetf = njit(cache=True, fastmath=True)(_srgb_oetf_py)
_fast_lab_f = njit(cache=True, fastmath=True)(_lab_f_py)
_fast_lab_f_inv = njit(cache=True, fastmath=True)(_lab_f_inv_py)

# Strict variants are not cached: the on-disk cache index does not
# distinguish fastmath flags of the same Python function.
_strict_srgb_eotf = njit(fastmath=False)(_srgb_eotf_py)
_strict_srgb_oetf = njit(fastmath=False)(_srgb_oetf_py)
_strict_lab_f = njit(fastmath=False)(_lab_f_py)
_strict_lab_f_inv = njit(fastmath=False)(_lab_f_inv_py)


# --- Kernel dispatchers ---

def _srgb_eotf(srgb: ArrayFloat) -> ArrayFloat:
    if _STRICT_IEEE:
        return _strict_srgb_eotf(srgb)
    return _fast_srgb_eotf(srgb)

def _srgb_oetf(linear: ArrayFloat) -> ArrayFloat:
    if _STRICT_IEEE:
        return _strict_srgb_oetf(linear)
    return _fast_srgb_oetf(linear)

def _lab_f(t: ArrayFloat) -> ArrayFloat:
    if _STRICT_IEEE:
        return _strict_lab_f(t)
    return _fast_lab_f(t)

def _lab_f_inv(t: ArrayFloat) -> ArrayFloat:
    if _STRICT_IEEE:
        return _strict_lab_f_inv(t)
    return _fast_lab_f_inv(t)


@njit(cache=True, fastmath=True)
def _lab_to_lch_kernel(lab: ArrayFloat) -> ArrayFloat:
    """
    Low-level kernel for Lab -> LCh conversion.
    Input shape (N, 3), Output shape (N, 3), hue in [0, 360).
    """
    n = lab.shape[0]
    lch = np.empty_like(lab)

    for i in range(n):
        L, a, b = lab[i, 0], lab[i, 1], lab[i, 2]
        C = np.hypot(a, b)
        h_deg = np.arctan2(b, a) * RAD2DEG
        if h_deg < 0:
            h_deg += 360.0
        lch[i, 0], lch[i, 1], lch[i, 2] = L, C, h_deg
    return lch

@njit(cache=True, fastmath=True)
def _lch_to_lab_kernel(lch: ArrayFloat) -> ArrayFloat:
    """
    Low-level kernel for LCh -> Lab conversion.
    Input shape (N, 3), Output shape (N, 3).
    """
    n = lch.shape[0]
    lab = np.empty_like(lch)

    for i in range(n):
        L, C, h_deg = lch[i, 0], lch[i, 1], lch[i, 2]
        h_rad = h_deg * DEG2RAD
        lab[i, 0] = L
        lab[i, 1] = C * np.cos(h_rad)
        lab[i, 2] = C * np.sin(h_rad)
    return lab


# =============================================================================
# 3. LMS BASES
# =============================================================================

class LMSBasis(Enum):
    """Cone-response bases available for XYZ <-> LMS."""

    SMITH_POKORNY = "smith_pokorny"
    BRADFORD = "bradford"
    VON_KRIES = "von_kries"


_LMS_MATRICES: Final[dict[LMSBasis, ArrayFloat]] = {
    # Vienot, Brettel & Mollon (1999)
    LMSBasis.SMITH_POKORNY: np.array([
        [ 0.15514, 0.54312, -0.03286],
        [-0.15514, 0.45684,  0.03286],
        [ 0.0,     0.0,      0.01608]
    ], dtype=np.float64),
    LMSBasis.BRADFORD: np.array([
        [ 0.8951000,  0.2664000, -0.1614000],
        [-0.7502000,  1.7135000,  0.0367000],
        [ 0.0389000, -0.0685000,  1.0296000]
    ], dtype=np.float64),
    LMSBasis.VON_KRIES: np.array([
        [ 0.4002400, 0.7076000, -0.0808100],
        [-0.2263000, 1.1653200,  0.0457000],
        [ 0.0000000, 0.0000000,  0.9182200]
    ], dtype=np.float64),
}

# (forward_T, inverse_T) pairs; inverses are computed so that each pair
# round-trips to float precision.
_LMS_TRANSFORMS: Final[dict[LMSBasis, tuple[ArrayFloat, ArrayFloat]]] = {
    basis: (m.T.copy(), np.linalg.inv(m).T.copy()) for basis, m in _LMS_MATRICES.items()
}

_LMS_BASIS: LMSBasis = LMSBasis.SMITH_POKORNY

def set_lms_basis(basis: Union[LMSBasis, str]) -> None:
    """
    Select the basis used by ``LMS.from_xyz`` / ``LMS.to_xyz``.

    Args:
        basis: An ``LMSBasis`` member or its value (e.g. ``"bradford"``).
    """
    global _LMS_BASIS
    basis = LMSBasis(basis)
    with _CONFIG_LOCK:
        _LMS_BASIS = basis
    logger.debug("LMS basis set to %s", basis.value)

def get_lms_basis() -> LMSBasis:
    """Returns the currently selected LMS basis."""
    return _LMS_BASIS


# =============================================================================
# 4. COLOUR SPACE CLASSES
# =============================================================================

class RGB:
    """
    sRGB in [0, 255].
    Reference: http://www.w3.org/Graphics/Color/sRGB.html
    """

    @staticmethod
    @handle_shapes
    def to_lrgb(rgb: ArrayFloat) -> ArrayFloat:
        """Converts sRGB [0, 255] to linear RGB [0, 1] (gamma removal)."""
        return _srgb_eotf(rgb / 255.0)

    @staticmethod
    @handle_shapes
    def from_lrgb(lrgb: ArrayFloat) -> Converted:
        """
        Converts linear RGB to sRGB [0, 255].

        Channels are truncated toward zero and clamped to [0, 255]; the
        result is flagged as saturated where clamping occurred.
        """
        dest = np.trunc(_srgb_oetf(lrgb) * 255.0)
        clipped = np.clip(dest, 0.0, 255.0)
        saturated = np.any(clipped != dest, axis=-1)
        return Converted(clipped, saturated)

    @staticmethod
    def to_xyz(rgb: ArrayFloat) -> ArrayFloat:
        """Converts sRGB to XYZ (D65)."""
        return LRGB.to_xyz(RGB.to_lrgb(rgb))

    @staticmethod
    def from_xyz(xyz: ArrayFloat) -> Converted:
        """Converts XYZ (D65) to sRGB."""
        return RGB.from_lrgb(LRGB.from_xyz(xyz))

    @staticmethod
    def to_lab(rgb: ArrayFloat) -> ArrayFloat:
        """Converts sRGB to CIELAB."""
        return Lab.from_xyz(RGB.to_xyz(rgb))

    @staticmethod
    def from_lab(lab: ArrayFloat) -> Converted:
        """Converts CIELAB to sRGB."""
        return RGB.from_xyz(Lab.to_xyz(lab))

    @staticmethod
    def to_yxy(rgb: ArrayFloat) -> ArrayFloat:
        """Converts sRGB to Yxy."""
        return Yxy.from_xyz(RGB.to_xyz(rgb))

    @staticmethod
    def from_yxy(yxy: ArrayFloat) -> Converted:
        """Converts Yxy to sRGB."""
        xyz = Yxy.to_xyz(yxy)
        return RGB.from_xyz(xyz.value)

    @staticmethod
    def to_lightness(rgb: ArrayFloat) -> Converted:
        """
        Converts sRGB to a grey of the same CIELAB lightness.

        Used to preview how a colour reads when only lightness is perceived.
        """
        rgb = np.asarray(rgb, dtype=np.float64)
        ls = Lab.lightness_from_xyz(RGB.to_xyz(rgb))
        lab = np.zeros(np.shape(ls) + (3,), dtype=np.float64)
        lab[..., 0] = ls
        return RGB.from_lab(lab)

    @staticmethod
    def from_color_integer(v: int) -> ArrayFloat:
        """Unpacks a 0xAARRGGBB integer into an sRGB triple."""
        return np.array([(v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF], dtype=np.float64)

    @staticmethod
    def to_color_integer(rgb: ArrayFloat) -> int:
        """Packs an sRGB triple into an opaque 0xFFRRGGBB integer."""
        r, g, b = (int(c) for c in np.asarray(rgb).ravel()[:3])
        return (r << 16) | (g << 8) | b | 0xFF000000


class LRGB:
    """
    Linear RGB with sRGB primaries (D65).
    Reference: http://www.brucelindbloom.com/index.html?Eqn_RGB_XYZ_Matrix.html
    """

    @staticmethod
    @handle_shapes
    def to_xyz(lrgb: ArrayFloat) -> ArrayFloat:
        """Converts linear RGB to XYZ."""
        return np.dot(lrgb, M_LRGB_TO_XYZ_T)

    @staticmethod
    @handle_shapes
    def from_xyz(xyz: ArrayFloat) -> ArrayFloat:
        """Converts XYZ to linear RGB (unclamped)."""
        return np.dot(xyz, M_XYZ_TO_LRGB_T)


class XYZ:
    """CIE 1931 XYZ helpers that have no better home."""

    @staticmethod
    @handle_shapes
    def from_illuminant_c(xyz: ArrayFloat) -> ArrayFloat:
        """Converts XYZ under illuminant C to XYZ under D65."""
        return np.dot(xyz, M_C_TO_D65_T)

    @staticmethod
    @handle_shapes
    def to_illuminant_c(xyz: ArrayFloat) -> ArrayFloat:
        """Converts XYZ under D65 to XYZ under illuminant C."""
        return np.dot(xyz, M_D65_TO_C_T)


class YIQ:
    """
    YIQ (NTSC).
    Reference: http://en.wikipedia.org/wiki/YIQ
    """

    @staticmethod
    @handle_shapes
    def from_lrgb(lrgb: ArrayFloat) -> ArrayFloat:
        """Converts linear RGB to YIQ."""
        return np.dot(lrgb, M_LRGB_TO_YIQ_T)

    @staticmethod
    @handle_shapes
    def to_lrgb(yiq: ArrayFloat) -> ArrayFloat:
        """Converts YIQ to linear RGB."""
        return np.dot(yiq, M_YIQ_TO_LRGB_T)


class Yxy:
    """CIE Yxy, stored in the order (Y, x, y)."""

    @staticmethod
    @handle_shapes
    def from_xyz(xyz: ArrayFloat) -> ArrayFloat:
        """
        Converts XYZ to Yxy.

        Black (X + Y + Z = 0) has no chromaticity; the D65 white point
        chromaticity is substituted.
        """
        total = np.sum(xyz, axis=-1)
        mask = total != 0.0
        out = np.empty_like(xyz)
        out[:, 0] = xyz[:, 1]
        out[:, 1] = D65_XY[0]
        out[:, 2] = D65_XY[1]
        if np.any(mask):
            inv_sum = 1.0 / total[mask]
            out[mask, 1] = xyz[mask, 0] * inv_sum
            out[mask, 2] = xyz[mask, 1] * inv_sum
        return out

    @staticmethod
    @handle_shapes
    def to_xyz(yxy: ArrayFloat) -> Converted:
        """
        Converts Yxy to XYZ.

        A zero y chromaticity yields black.  The result is flagged as
        saturated where any component exceeds the D65 white point.
        """
        Y, sx, sy = yxy[:, 0], yxy[:, 1], yxy[:, 2]
        xyz = np.zeros_like(yxy)
        mask = np.abs(sy) > 1e-12
        if np.any(mask):
            factor = Y[mask] / sy[mask]
            xyz[mask, 0] = sx[mask] * factor
            xyz[mask, 1] = Y[mask]
            xyz[mask, 2] = (1.0 - sx[mask] - sy[mask]) * factor
        saturated = np.any(xyz > REF_WHITE_D65, axis=-1) & mask
        return Converted(xyz, saturated)


class Lab:
    """
    CIE 1976 (L*, a*, b*), D65 reference white by default.
    Reference: http://en.wikipedia.org/wiki/Lab_color_space
    """

    WHITE: Final[ArrayFloat] = REF_WHITE_D65

    @staticmethod
    @handle_shapes
    def from_xyz(xyz: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """
        Converts XYZ to CIELAB.

        Args:
            xyz: Input XYZ data, shape (N, 3) or (3,).
            white: Reference white point (default D65).
        """
        f_xyz = _lab_f(np.ascontiguousarray(xyz / white))
        out = np.empty_like(xyz)
        out[:, 0] = 116.0 * f_xyz[:, 1] - 16.0
        out[:, 1] = 500.0 * (f_xyz[:, 0] - f_xyz[:, 1])
        out[:, 2] = 200.0 * (f_xyz[:, 1] - f_xyz[:, 2])
        return out

    @staticmethod
    @handle_shapes
    def to_xyz(lab: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Converts CIELAB to XYZ."""
        fy = (lab[:, 0] + 16.0) / 116.0
        f = np.empty_like(lab)
        f[:, 0] = fy + lab[:, 1] / 500.0
        f[:, 1] = fy
        f[:, 2] = fy - lab[:, 2] / 200.0
        return _lab_f_inv(f) * white

    @staticmethod
    @handle_shapes
    def lightness_from_xyz(xyz: ArrayFloat, white: ArrayFloat = REF_WHITE_D65) -> ArrayFloat:
        """Returns L* only; shape (N,) or a scalar."""
        fy = _lab_f(np.ascontiguousarray(xyz[:, 1] / white[1]))
        return 116.0 * fy - 16.0

    @staticmethod
    @handle_shapes
    def to_polar(lab: ArrayFloat) -> ArrayFloat:
        """Converts (L*, a*, b*) to (L*, C*, h) with h in degrees [0, 360)."""
        return _lab_to_lch_kernel(lab)

    @staticmethod
    @handle_shapes
    def to_orthogonal(lch: ArrayFloat) -> ArrayFloat:
        """Converts (L*, C*, h) back to (L*, a*, b*)."""
        return _lch_to_lab_kernel(lch)


class LMS:
    """Cone response LMS in the basis chosen with ``set_lms_basis``."""

    @staticmethod
    @handle_shapes
    def from_xyz(xyz: ArrayFloat, basis: Union[LMSBasis, None] = None) -> ArrayFloat:
        """Converts XYZ to LMS."""
        forward_t, _ = _LMS_TRANSFORMS[basis or _LMS_BASIS]
        return np.dot(xyz, forward_t)

    @staticmethod
    @handle_shapes
    def to_xyz(lms: ArrayFloat, basis: Union[LMSBasis, None] = None) -> ArrayFloat:
        """Converts LMS to XYZ."""
        _, inverse_t = _LMS_TRANSFORMS[basis or _LMS_BASIS]
        return np.dot(lms, inverse_t)
