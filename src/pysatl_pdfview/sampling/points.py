"""
Point Containers
================

Array-backed containers for the plot-ready point sequences produced by the
curve sampler.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt


class PointArray:
    """
    Sequence of ``(x, y)`` points stored as a 2D floating-point array
    of shape (n, 2).

    Parameters
    ----------
    data : numpy.ndarray
        Floating-point array of shape (n, 2).

    Raises
    ------
    ValueError
        If data is not of shape (n, 2).
    """

    data: npt.NDArray[np.floating[Any]]

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2 or data.shape[1] != 2:
            raise ValueError("PointArray expects 2D array of shape (n, 2).")
        self.data = data

    @classmethod
    def from_xy(
        cls, x: npt.NDArray[np.floating[Any]], y: npt.NDArray[np.floating[Any]]
    ) -> PointArray:
        """Build from matching coordinate vectors."""
        return cls(np.column_stack((np.asarray(x, dtype=float), np.asarray(y, dtype=float))))

    def __len__(self) -> int:
        """Return the number of points (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        """Iterate over points as ``(x, y)`` pairs."""
        for x, y in self.data:
            yield float(x), float(y)

    def __getitem__(self, index: int) -> tuple[float, float]:
        x, y = self.data[index]
        return float(x), float(y)

    @property
    def x(self) -> npt.NDArray[np.floating[Any]]:
        return self.data[:, 0]

    @property
    def y(self) -> npt.NDArray[np.floating[Any]]:
        return self.data[:, 1]

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        """Return the backing array."""
        return self.data

    def to_list(self) -> list[list[float]]:
        """Points as nested lists, the form most plotting widgets accept."""
        return [[float(x), float(y)] for x, y in self.data]
