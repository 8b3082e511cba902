# -*- coding: utf-8 -*-
"""
Tint: Weaving the mathematics of colour appearance
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Colour Vision Simulation
========================
Dichromat simulation on LMS cone responses and the age-related change of
hue and chroma perception.

References:
    - Brettel, Vienot, Mollon (1997). "Computerized simulation of color
      appearance for dichromats", JOSA A 14, 2647-2655.
    - Okajima, Kanbe (2007). "A Real-time Color Simulation of Dichromats",
      IEICE technical report 107(117), 107-110.
    - Okajima (2009). "Human Color Vision Mechanism and its Age-Related
      Change", IEICE technical report 109(249), 43-48.
"""

from typing import Final

import numpy as np

from tint_colorspace import DEG2RAD, LMS, LRGB, ArrayFloat, handle_shapes

__all__ = [
    "ALPHA",
    "BETA",
    "brettel_protanopia",
    "brettel_deuteranopia",
    "okajima_correction_protanopia",
    "okajima_correction_deuteranopia",
    "lms_to_protanopia",
    "lms_to_deuteranopia",
    "lrgb_to_protanopia",
    "lrgb_to_deuteranopia",
    "lab_to_elderly_ab",
    "lab_to_young_ab",
]

# Weights of the L and M cones in the Okajima correction
ALPHA: Final[float] = 1.0
BETA: Final[float] = 1.0

_M_BRETTEL_P_T: Final[ArrayFloat] = np.array([
    [0.0, 2.02344, -2.52581],
    [0.0, 1.0,      0.0    ],
    [0.0, 0.0,      1.0    ]
], dtype=np.float64).T.copy()

_M_BRETTEL_D_T: Final[ArrayFloat] = np.array([
    [1.0,      0.0, 0.0    ],
    [0.494207, 0.0, 1.24827],
    [0.0,      0.0, 1.0    ]
], dtype=np.float64).T.copy()

# Linear RGB compression applied before the simulation (gain, offset)
_LRGB_PROTANOPIA: Final[tuple[float, float]] = (0.992052, 0.003974)
_LRGB_DEUTERANOPIA: Final[tuple[float, float]] = (0.957237, 0.0213814)


# =============================================================================
# 1. DICHROMAT SIMULATION (Brettel + Okajima)
# =============================================================================

@handle_shapes
def brettel_protanopia(lms: ArrayFloat) -> ArrayFloat:
    """Projects LMS onto the protanope's plane (L cone missing)."""
    return np.dot(lms, _M_BRETTEL_P_T)

@handle_shapes
def brettel_deuteranopia(lms: ArrayFloat) -> ArrayFloat:
    """Projects LMS onto the deuteranope's plane (M cone missing)."""
    return np.dot(lms, _M_BRETTEL_D_T)

def _lms_base() -> ArrayFloat:
    """LMS of the equal-energy white in the current basis."""
    return LMS.from_xyz(np.ones(3))

def _lms_base_display() -> ArrayFloat:
    """LMS of the display white (linear RGB 1, 1, 1) in the current basis."""
    return LMS.from_xyz(LRGB.to_xyz(np.ones(3)))

def _okajima(sp: ArrayFloat, weight: float, lms2: ArrayFloat, base: ArrayFloat) -> ArrayFloat:
    dp = lms2 / base
    k = weight * sp / (ALPHA * dp[:, 0] + BETA * dp[:, 1])
    return (k[:, None] * dp) * base

@handle_shapes
def okajima_correction_protanopia(lms2: ArrayFloat, m: ArrayFloat, base: ArrayFloat) -> ArrayFloat:
    """
    Corrects a protanopia simulation so that the M response is preserved.

    Args:
        lms2: Simulated LMS colour(s).
        m: Original M response(s), scalar or shape (N,).
        base: LMS of the reference white.
    """
    return _okajima(np.asarray(m, dtype=np.float64) / base[1], BETA, lms2, base)

@handle_shapes
def okajima_correction_deuteranopia(lms2: ArrayFloat, l: ArrayFloat, base: ArrayFloat) -> ArrayFloat:
    """
    Corrects a deuteranopia simulation so that the L response is preserved.

    Args:
        lms2: Simulated LMS colour(s).
        l: Original L response(s), scalar or shape (N,).
        base: LMS of the reference white.
    """
    return _okajima(np.asarray(l, dtype=np.float64) / base[0], ALPHA, lms2, base)

@handle_shapes
def lms_to_protanopia(lms: ArrayFloat, do_correction: bool = False) -> ArrayFloat:
    """LMS -> LMS as seen with protanopia."""
    ds = brettel_protanopia(lms)
    if not do_correction:
        return ds
    return okajima_correction_protanopia(ds, lms[:, 1], _lms_base())

@handle_shapes
def lms_to_deuteranopia(lms: ArrayFloat, do_correction: bool = False) -> ArrayFloat:
    """LMS -> LMS as seen with deuteranopia."""
    ds = brettel_deuteranopia(lms)
    if not do_correction:
        return ds
    return okajima_correction_deuteranopia(ds, lms[:, 0], _lms_base())

@handle_shapes
def lrgb_to_protanopia(lrgb: ArrayFloat, do_correction: bool = False) -> ArrayFloat:
    """Linear RGB -> linear RGB as seen with protanopia."""
    gain, offset = _LRGB_PROTANOPIA
    lms = LMS.from_xyz(LRGB.to_xyz(lrgb * gain + offset))
    lms2 = brettel_protanopia(lms)
    if do_correction:
        lms2 = okajima_correction_protanopia(lms2, lms[:, 1], _lms_base_display())
    return LRGB.from_xyz(LMS.to_xyz(lms2))

@handle_shapes
def lrgb_to_deuteranopia(lrgb: ArrayFloat, do_correction: bool = False) -> ArrayFloat:
    """Linear RGB -> linear RGB as seen with deuteranopia."""
    gain, offset = _LRGB_DEUTERANOPIA
    lms = LMS.from_xyz(LRGB.to_xyz(lrgb * gain + offset))
    lms2 = brettel_deuteranopia(lms)
    if do_correction:
        lms2 = okajima_correction_deuteranopia(lms2, lms[:, 0], _lms_base_display())
    return LRGB.from_xyz(LMS.to_xyz(lms2))


# =============================================================================
# 2. AGE-RELATED CHANGE
# =============================================================================
# Lightness is left untouched; hue is handled in degrees.

def _hue_deg(a: ArrayFloat, b: ArrayFloat) -> ArrayFloat:
    """Hue angle in degrees, [0, 360]."""
    rad = np.where(b > 0, np.arctan2(b, a), np.arctan2(-b, -a) + np.pi)
    return rad / DEG2RAD

def _hue_diff(hue: ArrayFloat) -> ArrayFloat:
    """Hue shift (degrees) between a 20 and a 70 year old observer."""
    return 4.5 * np.cos(2.0 * np.pi * (hue - 28.8) / 50.9) + 4.4

def _chroma_ratio(c: ArrayFloat) -> ArrayFloat:
    """Chroma ratio between a 20 and a 70 year old observer."""
    return 0.83 * np.exp(-c / 13.3) - (1.0 / 8.0) * np.exp(-(c - 50.0) ** 2 / (3000.0 * 3000.0)) + 1.0

def _shift_ab(lab: ArrayFloat, sign: float) -> ArrayFloat:
    a, b = lab[:, 1], lab[:, 2]
    hue = _hue_deg(a, b)
    c = np.hypot(a, b)
    ratio = _chroma_ratio(c)
    h = (hue + sign * _hue_diff(hue)) * DEG2RAD
    c = c * ratio if sign > 0 else c / ratio
    out = np.empty_like(lab)
    out[:, 0] = lab[:, 0]
    out[:, 1] = np.cos(h) * c
    out[:, 2] = np.sin(h) * c
    return out

@handle_shapes
def lab_to_elderly_ab(lab: ArrayFloat) -> ArrayFloat:
    """CIELAB of a young observer -> CIELAB as perceived at about 70 years."""
    return _shift_ab(lab, 1.0)

@handle_shapes
def lab_to_young_ab(lab: ArrayFloat) -> ArrayFloat:
    """CIELAB as perceived at about 70 years -> CIELAB of a young observer."""
    return _shift_ab(lab, -1.0)
