"""
Curve Sampler
=============

Stateless conversion of a normal distribution and a horizontal view range
into plot-ready data:

- :func:`sample_curve`: density curve through both view edges.
- :func:`sample_fill_polygon`: closed polygon for shading the area under the
  curve.
- :func:`marker_positions`: the mean and the ±1, ±2, ±3 standard deviation
  positions.

Notes
-----
- Polygon interior points are spaced strictly between the view edges. A point
  on an edge would coincide in x with a floor corner and give a zero-area
  edge.
- Filtering markers to the visible range and styling them is left to the
  caller. The mean is always at index :data:`MEAN_MARKER_INDEX`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_pdfview.gaussian.characteristics import cdf, pdf
from pysatl_pdfview.sampling.points import PointArray
from pysatl_pdfview.types import ViewRange

if TYPE_CHECKING:
    from pysatl_pdfview.types import GaussianLike

MARKER_OFFSETS: tuple[int, ...] = (-3, -2, -1, 0, 1, 2, 3)
"""Marker positions in units of standard deviation from the mean."""

MEAN_MARKER_INDEX: int = MARKER_OFFSETS.index(0)
"""Index of the mean within :func:`marker_positions`."""


def sample_curve(
    distribution: GaussianLike, view_min: float, view_max: float, n: int
) -> PointArray:
    """
    Evenly spaced density points across the view, both edges included.

    Parameters
    ----------
    distribution : GaussianLike
        Distribution to evaluate.
    view_min, view_max : float
        Edges of the view.
    n : int
        Number of points, at least 2.

    Returns
    -------
    PointArray
        ``n`` points spaced ``(view_max - view_min) / (n - 1)`` apart.

    Raises
    ------
    ValueError
        If ``n < 2`` or the view is empty.
    """
    if n < 2:
        raise ValueError(f"A curve needs at least 2 points, got {n}")
    view = ViewRange(view_min, view_max)

    x = np.linspace(view.view_min, view.view_max, n)
    return PointArray.from_xy(x, pdf(distribution, x))


def sample_fill_polygon(
    distribution: GaussianLike, view_min: float, view_max: float, n: int
) -> PointArray:
    """
    Closed polygon enclosing the area under the density curve.

    The vertices are ``(view_min, 0)``, ``n`` curve points strictly inside
    the view and ``(view_max, 0)``. The polygon closes from the last vertex
    back to the first.

    Parameters
    ----------
    distribution : GaussianLike
        Distribution to evaluate.
    view_min, view_max : float
        Edges of the view.
    n : int
        Number of curve points between the floor corners. A single point is
        placed at the middle of the view.

    Returns
    -------
    PointArray
        ``n + 2`` vertices.

    Raises
    ------
    ValueError
        If ``n`` is negative or the view is empty.
    """
    if n < 0:
        raise ValueError(f"Point count must be non-negative, got {n}")
    view = ViewRange(view_min, view_max)

    if n == 1:
        x = np.array([view.center])
    else:
        i = np.arange(1, n + 1, dtype=float)
        x = view.view_min + view.width * i / (n + 1)

    xs = np.concatenate(([view.view_min], x, [view.view_max]))
    ys = np.concatenate(([0.0], pdf(distribution, x), [0.0]))
    return PointArray.from_xy(xs, ys)


def marker_positions(distribution: GaussianLike) -> tuple[float, ...]:
    """
    Characteristic x-positions of a distribution.

    Returns
    -------
    tuple[float, ...]
        ``mean - 3σ, mean - 2σ, mean - σ, mean, mean + σ, mean + 2σ, mean + 3σ``.
    """
    mean = distribution.mean
    std_dev = distribution.std_dev
    return tuple(mean if k == 0 else mean + k * std_dev for k in MARKER_OFFSETS)


def visible_mass(distribution: GaussianLike, view_min: float, view_max: float) -> float:
    """Probability mass of the distribution that falls inside the view."""
    view = ViewRange(view_min, view_max)
    lo, hi = cdf(distribution, np.array([view.view_min, view.view_max]))
    return float(hi - lo)
