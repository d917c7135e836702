"""
Session Codec
=============

JSON serialization of a distribution store together with the display
settings.

Document layout
---------------
.. code-block:: json

    {
      "version": 1,
      "distributions": {
        "0": {"id": 0, "name": "Gaussian 1", "mean": 0.0, "std_dev": 1.0,
              "parent_ids": [], "is_product": false}
      },
      "next_id": 1,
      "show_shading": true,
      "shading_opacity": 0.3,
      "show_std_markers": true
    }

Notes
-----
* Derived product parameters are stored and restored as they are; loading
  does not recompute them.
* Selection and view bounds are not session data and never appear here.
* A document without ``version`` is read as the current schema. A document
  with an unknown version is read as the current schema with a warning.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json
import logging
import warnings
from typing import TYPE_CHECKING, Any

from pysatl_pdfview.errors import DecodeError, DependencyCycleError
from pysatl_pdfview.session.settings import DisplaySettings
from pysatl_pdfview.store.record import DistributionRecord
from pysatl_pdfview.store.store import DistributionStore
from pysatl_pdfview.types import DistributionId, DistributionKind

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
"""Version written into every saved session."""

_RECORD_KEYS = ("id", "name", "mean", "std_dev", "parent_ids", "is_product")


# --------------------------------------------------------------------------- #
# Encoding
# --------------------------------------------------------------------------- #


def _encode_record(record: DistributionRecord) -> dict[str, Any]:
    return {
        "id": int(record.id),
        "name": record.name,
        "mean": record.mean,
        "std_dev": record.std_dev,
        "parent_ids": [int(p) for p in record.parent_ids],
        "is_product": record.is_product,
    }


def save(store: DistributionStore, settings: DisplaySettings) -> str:
    """
    Serialize a store and display settings.

    Parameters
    ----------
    store : DistributionStore
        Every record is written, including derived product parameters.
    settings : DisplaySettings
        Display settings to persist.

    Returns
    -------
    str
        Pretty-printed JSON document.
    """
    document = {
        "version": SCHEMA_VERSION,
        "distributions": {str(r.id): _encode_record(r) for r in store.records()},
        "next_id": store.next_id,
        "show_shading": settings.show_shading,
        "shading_opacity": settings.shading_opacity,
        "show_std_markers": settings.show_std_markers,
    }
    text = json.dumps(document, indent=2, allow_nan=False)
    logger.info("Saved session with %d distributions", len(store))
    return text


# --------------------------------------------------------------------------- #
# Decoding
# --------------------------------------------------------------------------- #


def _field(mapping: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in mapping:
        raise DecodeError(f"{where}: missing field '{key}'")
    return mapping[key]


def _as_int(value: Any, where: str) -> int:
    # bool is a subclass of int but never a valid id or counter
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{where}: expected an integer, got {type(value).__name__}")
    return value


def _as_float(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise DecodeError(f"{where}: expected a number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        raise DecodeError(f"{where}: number is too large for a float") from None


def _as_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise DecodeError(f"{where}: expected a boolean, got {type(value).__name__}")
    return value


def _as_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{where}: expected a string, got {type(value).__name__}")
    return value


def _as_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{where}: expected an object, got {type(value).__name__}")
    return value


def _decode_record(key: str, raw: Any) -> DistributionRecord:
    where = f"distributions[{key!r}]"
    obj = _as_object(raw, where)
    values = {k: _field(obj, k, where) for k in _RECORD_KEYS}

    distribution_id = _as_int(values["id"], f"{where}.id")
    if key != str(distribution_id):
        raise DecodeError(f"{where}: key does not match id {distribution_id}")

    raw_parents = values["parent_ids"]
    if not isinstance(raw_parents, list):
        raise DecodeError(f"{where}.parent_ids: expected a list")
    parent_ids = tuple(
        DistributionId(_as_int(p, f"{where}.parent_ids[{i}]")) for i, p in enumerate(raw_parents)
    )

    is_product = _as_bool(values["is_product"], f"{where}.is_product")
    return DistributionRecord(
        id=DistributionId(distribution_id),
        name=_as_str(values["name"], f"{where}.name"),
        mean=_as_float(values["mean"], f"{where}.mean"),
        std_dev=_as_float(values["std_dev"], f"{where}.std_dev"),
        parent_ids=parent_ids,
        kind=DistributionKind.PRODUCT if is_product else DistributionKind.LEAF,
    )


def _check_version(document: Mapping[str, Any]) -> None:
    if "version" not in document:
        return
    version = _as_int(document["version"], "version")
    if version != SCHEMA_VERSION:
        warnings.warn(
            f"Session version {version} is unknown; reading it as version {SCHEMA_VERSION}",
            UserWarning,
            stacklevel=3,
        )


def load(text: str) -> tuple[DistributionStore, DisplaySettings]:
    """
    Parse a session document.

    Parameters
    ----------
    text : str
        Document produced by :func:`save`.

    Returns
    -------
    tuple[DistributionStore, DisplaySettings]
        A new store and the saved display settings.

    Raises
    ------
    DecodeError
        If the text is not valid JSON, a field is missing or has the wrong
        type, a parameter is out of range, or the ids are inconsistent.

    Notes
    -----
    Only new objects are built, so a failed load cannot affect a session
    already in memory.
    """
    try:
        document = json.loads(text)
    except (ValueError, TypeError, RecursionError) as exc:
        raise DecodeError(f"Session is not valid JSON: {exc}") from exc

    document = _as_object(document, "session")
    _check_version(document)

    distributions = _as_object(_field(document, "distributions", "session"), "distributions")
    records = [_decode_record(key, raw) for key, raw in distributions.items()]
    next_id = _as_int(_field(document, "next_id", "session"), "next_id")

    try:
        store = DistributionStore.from_records(records, next_id)
        store.graph().topological_order()
        settings = DisplaySettings(
            show_shading=_as_bool(_field(document, "show_shading", "session"), "show_shading"),
            shading_opacity=_as_float(
                _field(document, "shading_opacity", "session"), "shading_opacity"
            ),
            show_std_markers=_as_bool(
                _field(document, "show_std_markers", "session"), "show_std_markers"
            ),
        )
    except DecodeError:
        raise
    except (ValueError, DependencyCycleError) as exc:
        raise DecodeError(f"Session is inconsistent: {exc}") from exc

    logger.info("Loaded session with %d distributions", len(store))
    return store, settings
