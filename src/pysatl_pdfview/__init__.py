"""
PySATL PDF View
===============

Core of an interactive explorer for normal distributions and their products:
the Gaussian product algebra, a keyed distribution store with update
propagation, curve sampling for plotting, and session persistence.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import PdfViewConfig, configure, reset_configuration
from .errors import *
from .errors import __all__ as _errors_all
from .explorer import Explorer, Selection
from .gaussian import *
from .gaussian import __all__ as _gaussian_all
from .sampling import *
from .sampling import __all__ as _sampling_all
from .session import *
from .session import __all__ as _session_all
from .store import *
from .store import __all__ as _store_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-pdfview")
__all__ = [
    "__version__",
    "PdfViewConfig",
    "configure",
    "reset_configuration",
    "Explorer",
    "Selection",
    *_errors_all,
    *_gaussian_all,
    *_sampling_all,
    *_session_all,
    *_store_all,
    *_types_all,
]

del _errors_all
del _gaussian_all
del _sampling_all
del _session_all
del _store_all
del _types_all
