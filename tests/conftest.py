from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from pysatl_pdfview.config import reset_configuration

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_configuration() -> Generator[None, Any, None]:
    reset_configuration()
    yield
