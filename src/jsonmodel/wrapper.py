"""Normalization of arbitrary Python values into the JSON value model."""

from __future__ import annotations

import logging
import sys
from collections.abc import Collection, Mapping

from .values import JSONString, Null, Value, _NullType

logger = logging.getLogger(__name__)


def _is_host_owned(cls: type) -> bool:
    """True for types defined by the interpreter or the standard library."""
    module = getattr(cls, "__module__", None) or ""
    return module.split(".")[0] in sys.stdlib_module_names


def wrap(value: object) -> Value | None:
    """Return *value* in one of the model's canonical kinds.

    - ``None`` → ``Null``
    - model values, bools, ints, floats and strings are returned as-is
    - mappings → JSONObject, collections → JSONArray (recursively)
    - standard-library objects (``Decimal``, ``datetime``, ``Path`` ...)
      → ``str(value)``
    - anything else → JSONObject built by bean reflection

    Never raises: on any failure the result is ``None``.
    """
    from .array import JSONArray
    from .jsonobject import JSONObject

    try:
        if value is None:
            return Null
        if isinstance(value, (JSONObject, JSONArray, _NullType, bool, int, float, str)):
            return value
        if isinstance(value, JSONString):
            return value
        if isinstance(value, Mapping):
            return JSONObject.from_mapping(value)
        if isinstance(value, Collection):
            return JSONArray(value)
        if _is_host_owned(type(value)):
            return str(value)
        return JSONObject.from_bean(value)
    except Exception:
        logger.debug("Could not wrap %s value", type(value).__name__, exc_info=True)
        return None
