"""JSONRepl — incremental JSON shell for notebook / interactive use.

Also provides the ``jsonmodel-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .array import JSONArray
from .config import Settings, load_settings
from .errors import JSONModelError
from .jsonobject import JSONObject
from .serializer import dumps
from .values import Null, Value


# ---------------------------------------------------------------------------
# JSONRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class JSONRepl:
    """Stateful shell that merges parsed objects into one working object.

    Usage::

        repl = JSONRepl()
        repl.eval('{"joe": {"name": "Joe Smith", "age": 36}}')
        repl.eval("{tags: [a, b]}")
        repl.lookup("joe.name")   # → "Joe Smith"
        repl.lookup("tags.1")     # → "b"

        repl.doc      # the working JSONObject
        repl.reset()  # clear state
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else Settings()
        self.doc = JSONObject()

    def eval(self, text: str) -> JSONObject:
        """Parse *text* and merge its members into ``doc`` (later wins).

        Returns the parsed object.
        """
        parsed = JSONObject.parse(text)
        for key in parsed.keys():
            self.doc.put(key, parsed.get(key))
        return parsed

    def lookup(self, path: str) -> Value | None:
        """Resolve a dotted path through objects and arrays (0-based)."""
        current: Value | None = self.doc
        for segment in path.split("."):
            if isinstance(current, JSONObject):
                current = current.opt(segment)
            elif isinstance(current, JSONArray):
                try:
                    current = current.opt(int(segment))
                except ValueError:
                    return None
            else:
                return None
            if current is None:
                return None
        return current

    def reset(self) -> None:
        """Clear the working object."""
        self.doc = JSONObject()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value | None) -> str:
    """Format a single value as compact JSON text."""
    return dumps(value)


def _fmt_inspect(value: Value | None, indent_factor: int) -> str:
    """Pretty-print a value with its kind for inspect() / i()."""
    if value is None:
        return "(not found)"
    if value is Null:
        return "Null"
    if isinstance(value, JSONObject):
        return f"JSONObject ({len(value)} keys)\n{value.to_string(indent_factor)}"
    if isinstance(value, JSONArray):
        return f"JSONArray ({len(value)} items)\n{value.to_string(indent_factor)}"
    return f"{type(value).__name__}: {_fmt_inline(value)}"


def _show_keys(repl: JSONRepl, dest: IO[str]) -> None:
    """Print every top-level key with its compact value."""
    if not len(repl.doc):
        print("  (no keys defined)", file=dest)
        return
    width = max(len(k) for k in repl.doc.keys())
    for key in repl.doc.keys():
        print(f"  {key:<{width}} : {_fmt_inline(repl.doc.opt(key))}", file=dest)


def _eval_text(repl: JSONRepl, text: str) -> None:
    try:
        repl.eval(text)
    except JSONModelError as exc:
        print(f"Error: {exc}", file=sys.stderr)


def _run_batch(repl: JSONRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: JSONRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":keys":
        _show_keys(repl, dest)
        return True

    if line == ":show":
        print(repl.doc.to_string(repl.settings.indent_factor), file=dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            path = line[len(prefix):-1].strip()
            print(_fmt_inspect(repl.lookup(path), repl.settings.indent_factor), file=dest)
            return True

    # ── ? path ────────────────────────────────────────────────────────────
    if line.startswith("? "):
        value = repl.lookup(line[2:].strip())
        if value is not None:
            print(_fmt_inline(value), file=dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_batch(repl, line[4:].strip(), dest)
        return True

    # ── Regular JSON input ────────────────────────────────────────────────
    _eval_text(repl, line)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

class _Output:
    """Where shell output goes: stdout, or a file chosen with ``?>>``."""

    def __init__(self) -> None:
        self.dest: IO[str] = sys.stdout
        self._file: IO[str] | None = None

    def redirect(self, filepath: str) -> None:
        self.restore()
        try:
            self._file = open(filepath, "w", encoding="utf-8")
        except OSError as exc:
            print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            return
        self.dest = self._file

    def restore(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self.dest = sys.stdout

    def __enter__(self) -> "_Output":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()


def _handle_redirect(output: _Output, line: str) -> bool:
    """Apply a ``?>> file`` / ``?>>`` line.  Returns False for other input."""
    if line == "?>>":
        output.restore()
        return True
    if line.startswith("?>> "):
        output.redirect(line[4:].strip())
        return True
    return False


def _read_line(prompt: str) -> str | None:
    """One stripped input line; None at end of input."""
    while True:
        try:
            return input(prompt).strip()
        except EOFError:
            print()
            return None
        except KeyboardInterrupt:
            print()


def main() -> None:
    """Interactive JSON shell (``jsonmodel-repl`` / ``python -m jsonmodel.repl``)."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    repl = JSONRepl(settings)

    print("JSON REPL  (:q to quit  |  :keys  :show  :reset  |  ? <path>  inspect(<path>))")

    with _Output() as output:
        while True:
            line = _read_line(settings.prompt)
            if line is None:
                break
            if _handle_redirect(output, line):
                continue
            if not _process_line(repl, line, output.dest):
                break


if __name__ == "__main__":
    main()
