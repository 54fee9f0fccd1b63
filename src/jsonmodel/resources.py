"""Flat dotted-key resource tables loaded from ``.properties`` files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from locale import getlocale
from pathlib import Path

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"\s*[=:]\s*")


def parse_properties(lines: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` / ``key: value`` lines.

    Blank lines and lines starting with ``#`` or ``!`` are skipped.  A line
    with no separator maps its text to ``""``.
    """
    table: dict[str, str] = {}
    for raw in lines:
        line = raw.strip()
        if not line or line[0] in "#!":
            continue
        match = _SEPARATOR_RE.search(line)
        if match is None:
            table[line] = ""
            continue
        table[line[:match.start()]] = line[match.end():]
    return table


def _bundle_candidates(base_name: str, locale: str | None) -> list[str]:
    """File names from most general to most specific."""
    names = [f"{base_name}.properties"]
    if locale:
        locale = locale.replace("-", "_")
        language = locale.split("_")[0]
        if language and language != locale:
            names.append(f"{base_name}_{language}.properties")
        names.append(f"{base_name}_{locale}.properties")
    return names


def load_resource_table(
    base_name: str,
    locale: str | None = None,
    search_path: str | Path | None = None,
) -> dict[str, str]:
    """Load and merge the ``.properties`` bundle for *base_name*.

    ``messages.properties`` is read first, then ``messages_en.properties``,
    then ``messages_en_US.properties``; more specific files override.
    *locale* defaults to the process locale.
    """
    if locale is None:
        locale = getlocale()[0]
    root = Path(search_path) if search_path is not None else Path.cwd()

    table: dict[str, str] = {}
    found = False
    for name in _bundle_candidates(base_name, locale):
        path = root / name
        if not path.is_file():
            continue
        logger.debug("Loading resource table %s", path)
        with path.open(encoding="utf-8") as fh:
            table.update(parse_properties(fh))
        found = True

    if not found:
        raise FileNotFoundError(
            f"No resource bundle for base name {base_name!r}, locale {locale!r} in {root}"
        )
    return table
