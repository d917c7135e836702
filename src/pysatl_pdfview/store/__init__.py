"""
Distribution Store package.

Exports
-------
DistributionRecord
DistributionStore, IdAllocator
DependencyGraph
PropagationReport, propagate
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .graph import DependencyGraph
from .propagation import PropagationReport, propagate
from .record import DistributionRecord
from .store import DistributionStore, IdAllocator

__all__ = [
    "DistributionRecord",
    "DistributionStore",
    "IdAllocator",
    "DependencyGraph",
    "PropagationReport",
    "propagate",
]
