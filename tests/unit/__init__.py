"""
PySATL PDF View
===============

Unit tests for the explorer core: algebra, store, propagation, sampling and
session persistence.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
