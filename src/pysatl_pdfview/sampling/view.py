"""
Plot bounds helpers: the default view and fitting the view to a set of
distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_pdfview.config import configure
from pysatl_pdfview.gaussian.characteristics import pdf_peak
from pysatl_pdfview.types import ViewRange

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pysatl_pdfview.config import PdfViewConfig
    from pysatl_pdfview.types import GaussianLike


@dataclass(frozen=True, slots=True)
class PlotBounds:
    """
    Rectangle of the plot to show.

    Parameters
    ----------
    x : ViewRange
        Horizontal range.
    y_min, y_max : float
        Vertical range.
    """

    x: ViewRange
    y_min: float
    y_max: float


def default_view_range(config: PdfViewConfig | None = None) -> ViewRange:
    """Horizontal range shown before the user pans or zooms."""
    return (config or configure()).default_view


def auto_fit_view(
    distributions: Iterable[GaussianLike], config: PdfViewConfig | None = None
) -> PlotBounds | None:
    """
    Bounds showing every distribution with its tails.

    The horizontal range spans from the smallest to the largest mean, widened
    on both sides by ``auto_fit_margin_sigmas`` of the largest standard
    deviation. The vertical range goes from zero to the peak density of a
    normal distribution with that largest standard deviation, times
    ``auto_fit_headroom``.

    Parameters
    ----------
    distributions : Iterable[GaussianLike]
        Distributions to fit.
    config : PdfViewConfig, optional
        Configuration to read margins from; the cached one by default.

    Returns
    -------
    PlotBounds or None
        ``None`` when there is nothing to fit.
    """
    config = config or configure()
    distributions = list(distributions)
    if not distributions:
        return None

    min_mean = min(d.mean for d in distributions)
    max_mean = max(d.mean for d in distributions)
    max_std_dev = max(d.std_dev for d in distributions)

    margin = config.auto_fit_margin_sigmas * max_std_dev
    x = ViewRange(min_mean - margin, max_mean + margin)
    y_max = pdf_peak(max_std_dev) * config.auto_fit_headroom

    return PlotBounds(x=x, y_min=0.0, y_max=y_max)
