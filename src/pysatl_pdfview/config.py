"""
Explorer Configuration
======================

Fixed settings of the explorer core:

- curve resolution (points per curve and per fill polygon);
- the view shown before the user pans or zooms;
- auto-fit margins;
- control ranges for leaf parameters;
- display settings of a fresh session.

Notes
-----
- The configuration is built once and cached; tests reset it with
  :func:`reset_configuration`.
- Sample count is fixed and does not follow the zoom level.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from functools import lru_cache

from pysatl_pdfview.session.settings import DisplaySettings
from pysatl_pdfview.types import ViewRange

DEFAULT_SAMPLE_COUNT = 300
DEFAULT_VIEW = ViewRange(-6.0, 6.0)


@dataclass(frozen=True, slots=True)
class PdfViewConfig:
    """
    Configuration of the explorer core.

    Parameters
    ----------
    sample_count : int, default=300
        Points per curve and interior points per fill polygon.
    default_view : ViewRange, default=ViewRange(-6, 6)
        Horizontal range used when the caller supplies none.
    auto_fit_margin_sigmas : float, default=4.0
        Tail width, in largest standard deviations, added on both sides by
        auto-fit.
    auto_fit_headroom : float, default=1.1
        Factor applied to the tallest possible peak to get the top of the
        auto-fit view.
    mean_limits : tuple[float, float], default=(-10.0, 10.0)
        Range offered by the mean control.
    std_dev_limits : tuple[float, float], default=(0.1, 5.0)
        Range offered by the standard deviation control.
    default_settings : DisplaySettings
        Display settings of a fresh session.
    """

    sample_count: int = DEFAULT_SAMPLE_COUNT
    default_view: ViewRange = DEFAULT_VIEW
    auto_fit_margin_sigmas: float = 4.0
    auto_fit_headroom: float = 1.1
    mean_limits: tuple[float, float] = (-10.0, 10.0)
    std_dev_limits: tuple[float, float] = (0.1, 5.0)
    default_settings: DisplaySettings = field(default_factory=DisplaySettings)

    def __post_init__(self) -> None:
        if self.sample_count < 2:
            raise ValueError(f"sample_count must be at least 2, got {self.sample_count}")
        if self.auto_fit_margin_sigmas < 0:
            raise ValueError("auto_fit_margin_sigmas must be non-negative")
        if self.auto_fit_headroom <= 0:
            raise ValueError("auto_fit_headroom must be positive")
        lo, hi = self.mean_limits
        if lo > hi:
            raise ValueError(f"mean_limits are reversed: {self.mean_limits}")
        lo, hi = self.std_dev_limits
        if not 0 < lo <= hi:
            raise ValueError(f"std_dev_limits must satisfy 0 < low <= high: {self.std_dev_limits}")

    def clamp_leaf_parameters(self, mean: float, std_dev: float) -> tuple[float, float]:
        """Clamp leaf parameters to the control ranges."""
        return (
            min(max(mean, self.mean_limits[0]), self.mean_limits[1]),
            min(max(std_dev, self.std_dev_limits[0]), self.std_dev_limits[1]),
        )


@lru_cache(maxsize=1)
def configure() -> PdfViewConfig:
    """
    Build the default configuration.

    Returns
    -------
    PdfViewConfig
        Cached configuration instance.
    """
    return PdfViewConfig()


def reset_configuration() -> None:
    """
    Reset the cached configuration.
    """
    configure.cache_clear()
