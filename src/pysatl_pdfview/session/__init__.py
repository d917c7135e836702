"""
Session persistence: display settings and the JSON session codec.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .codec import SCHEMA_VERSION, load, save
from .settings import DisplaySettings

__all__ = [
    "SCHEMA_VERSION",
    "DisplaySettings",
    "load",
    "save",
]
