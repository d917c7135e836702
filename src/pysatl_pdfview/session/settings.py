"""
Global display settings persisted with a session.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass, replace
from typing import Any

from pysatl_pdfview.errors import InvalidParameterError


@dataclass(frozen=True, slots=True)
class DisplaySettings:
    """
    Display options shared by every plotted distribution.

    Parameters
    ----------
    show_shading : bool, default=True
        Whether the area under each curve is shaded.
    shading_opacity : float, default=0.3
        Opacity of the shading, in ``[0, 1]``.
    show_std_markers : bool, default=True
        Whether mean and standard deviation markers are drawn.
    """

    show_shading: bool = True
    shading_opacity: float = 0.3
    show_std_markers: bool = True

    def __post_init__(self) -> None:
        for flag in ("show_shading", "show_std_markers"):
            value = getattr(self, flag)
            if not isinstance(value, bool):
                raise InvalidParameterError(f"{flag} must be a bool, got {type(value).__name__}")
        opacity = self.shading_opacity
        if isinstance(opacity, bool) or not isinstance(opacity, int | float):
            raise InvalidParameterError(
                f"shading_opacity must be a number, got {type(opacity).__name__}"
            )
        if not (math.isfinite(opacity) and 0.0 <= opacity <= 1.0):
            raise InvalidParameterError(f"shading_opacity must be in [0, 1], got {opacity}")

    def replace(self, **changes: Any) -> DisplaySettings:
        """Copy with some fields changed, validated like a new instance."""
        return replace(self, **changes)
