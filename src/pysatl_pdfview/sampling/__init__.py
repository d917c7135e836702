"""
Curve Sampler package.

Exports
-------
PointArray
sample_curve, sample_fill_polygon, marker_positions, visible_mass
MARKER_OFFSETS, MEAN_MARKER_INDEX
PlotBounds, auto_fit_view, default_view_range
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .curve import (
    MARKER_OFFSETS,
    MEAN_MARKER_INDEX,
    marker_positions,
    sample_curve,
    sample_fill_polygon,
    visible_mass,
)
from .points import PointArray
from .view import PlotBounds, auto_fit_view, default_view_range

__all__ = [
    "PointArray",
    "sample_curve",
    "sample_fill_polygon",
    "marker_positions",
    "visible_mass",
    "MARKER_OFFSETS",
    "MEAN_MARKER_INDEX",
    "PlotBounds",
    "auto_fit_view",
    "default_view_range",
]
