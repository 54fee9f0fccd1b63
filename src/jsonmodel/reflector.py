"""Bean reflection: populate a JSONObject from an arbitrary Python object.

Lookup order for ``populate_from_bean``:

1. a converter registered for the object's type (``register_converter``)
2. the ``JSONExposable`` capability (``json_fields()``)
3. dataclass fields
4. accessor scan over zero-argument ``get*`` / ``is*`` methods
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .errors import JSONModelError
from .wrapper import wrap

if TYPE_CHECKING:
    from .jsonobject import JSONObject

logger = logging.getLogger(__name__)

_EXCLUDED_ACCESSORS = frozenset({"getClass", "get_class"})

Converter = Callable[[object], Mapping[str, object]]


@runtime_checkable
class JSONExposable(Protocol):
    """Objects that list their own JSON members."""

    def json_fields(self) -> Mapping[str, object]:
        ...


# ---------------------------------------------------------------------------
# Converter registry
# ---------------------------------------------------------------------------

@functools.singledispatch
def _convert(obj: object) -> Mapping[str, object] | None:
    return None


def register_converter(cls: type, func: Converter | None = None):
    """Register *func* as the converter for *cls* (and its subclasses).

    Usable as a plain call or as a decorator::

        @register_converter(Point)
        def _point(p):
            return {"x": p.x, "y": p.y}
    """
    if func is None:
        return lambda f: register_converter(cls, f)
    _convert.register(cls, func)
    return func


# ---------------------------------------------------------------------------
# Accessor scan
# ---------------------------------------------------------------------------

def accessor_key(name: str) -> str | None:
    """Derive a key from an accessor name, or None if *name* is not one.

    ``getName`` → ``name``, ``isActive`` → ``active``, ``get_name`` →
    ``name``, ``getURL`` → ``URL`` (a leading acronym keeps its case).
    """
    if name in _EXCLUDED_ACCESSORS:
        return None
    if name.startswith("get"):
        rest = name[3:]
    elif name.startswith("is"):
        rest = name[2:]
    else:
        return None

    if rest.startswith("_"):
        rest = rest[1:]
        if not rest or not rest[0].isalpha():
            return None
    elif not rest or not rest[0].isupper():
        return None

    if len(rest) == 1:
        return rest.lower()
    if not rest[1].isupper():
        return rest[0].lower() + rest[1:]
    return rest


def _takes_no_arguments(member: object) -> bool:
    try:
        return not inspect.signature(member).parameters
    except (TypeError, ValueError):
        return False


def populate_from_accessors(target: "JSONObject", bean: object) -> "JSONObject":
    """Store the result of each public zero-argument accessor of *bean*.

    A failing accessor skips only its own key.
    """
    for name in dir(bean):
        if name.startswith("_"):
            continue
        key = accessor_key(name)
        if key is None:
            continue
        try:
            member = getattr(bean, name)
            if not callable(member) or not _takes_no_arguments(member):
                continue
            result = member()
            if result is not None:
                target.put_opt(key, wrap(result))
        except Exception:
            logger.debug("Skipping accessor %s.%s", type(bean).__name__, name, exc_info=True)
    return target


# ---------------------------------------------------------------------------
# Explicit fields
# ---------------------------------------------------------------------------

def _read_field(obj: object, name: str) -> object:
    if name.startswith("_"):
        raise AttributeError(f"{name!r} is not a public field")
    value = getattr(obj, name)
    if inspect.isroutine(value):
        raise AttributeError(f"{name!r} is a method, not a field")
    return value


def populate_from_fields(target: "JSONObject", obj: object, names: Iterable[str]) -> "JSONObject":
    """Copy the named public fields of *obj*.

    Unreadable names and fields holding ``None`` are skipped.
    """
    for name in names:
        try:
            value = _read_field(obj, name)
            if value is not None:
                target.put_opt(name, wrap(value))
        except Exception:
            logger.debug("Skipping field %s.%s", type(obj).__name__, name, exc_info=True)
    return target


def field_names(obj: object) -> list[str] | None:
    """Public instance field names of *obj*, or None if it has none."""
    if obj is None:
        return None
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        names = [f.name for f in dataclasses.fields(obj)]
    else:
        try:
            names = list(vars(obj))
        except TypeError:
            return None
    names = [name for name in names if not name.startswith("_")]
    return names or None


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _exposed_fields(bean: object) -> Mapping[str, object] | None:
    fields = _convert(bean)
    if fields is not None:
        return fields
    if isinstance(bean, JSONExposable):
        return bean.json_fields()
    if dataclasses.is_dataclass(bean) and not isinstance(bean, type):
        return {
            f.name: getattr(bean, f.name)
            for f in dataclasses.fields(bean)
            if not f.name.startswith("_")
        }
    return None


def populate_from_bean(target: "JSONObject", bean: object) -> "JSONObject":
    fields = _exposed_fields(bean)
    if fields is None:
        return populate_from_accessors(target, bean)

    for key, value in fields.items():
        if value is None:
            continue
        try:
            target.put_opt(str(key), wrap(value))
        except JSONModelError:
            logger.debug("Skipping member %s.%s", type(bean).__name__, key, exc_info=True)
    return target
