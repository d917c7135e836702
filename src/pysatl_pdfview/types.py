"""
Core Type Definitions
=====================

Fundamental types and data structures shared by the distribution store,
the curve sampler and the session codec.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import isfinite
from typing import Any, NewType, Protocol, cast, overload, runtime_checkable

import numpy as np
from numpy.typing import NDArray

DistributionId = NewType("DistributionId", int)
"""Stable handle of a distribution record inside a store."""


class DistributionKind(StrEnum):
    """
    Enumeration of distribution record kinds.

    Attributes
    ----------
    LEAF : str
        Distribution whose parameters are set directly.
    PRODUCT : str
        Distribution derived by multiplying its parents' densities.
    """

    LEAF = "leaf"
    PRODUCT = "product"


@runtime_checkable
class GaussianLike(Protocol):
    """Anything exposing the two parameters of a normal distribution."""

    @property
    def mean(self) -> float: ...
    @property
    def std_dev(self) -> float: ...


NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class ViewRange:
    """
    Closed horizontal range of the plot currently on screen.

    Parameters
    ----------
    view_min : float
        Left edge of the view.
    view_max : float
        Right edge of the view, strictly greater than ``view_min``.

    Raises
    ------
    ValueError
        If an edge is not finite or the range is empty.
    """

    view_min: float
    view_max: float

    def __post_init__(self) -> None:
        if not (isfinite(self.view_min) and isfinite(self.view_max)):
            raise ValueError("View range edges must be finite")
        if self.view_max <= self.view_min:
            raise ValueError(
                f"View range is empty: view_max={self.view_max} <= view_min={self.view_min}"
            )

    @property
    def width(self) -> float:
        """Width of the range."""
        return self.view_max - self.view_min

    @property
    def center(self) -> float:
        """Midpoint of the range."""
        return (self.view_min + self.view_max) / 2

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) lie inside the range, edges included.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the range, False otherwise.
        """
        arr = np.asarray(x)
        result = (arr >= self.view_min) & (arr <= self.view_max)

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the range."""
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "DistributionId",
    "DistributionKind",
    "GaussianLike",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "ViewRange",
]
