"""Value coercion: text inference, canonical numbers and string quoting."""

from __future__ import annotations

import io
import math
import numbers
from decimal import Decimal
from typing import TextIO

from .errors import InvalidNumberError
from .values import Null, Value

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_SHORT_ESCAPES = {
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


# ---------------------------------------------------------------------------
# Text -> value
# ---------------------------------------------------------------------------

def infer_from_text(text: str) -> Value:
    """Convert a bare word to a boolean, ``Null``, number or string.

    - ``""`` stays a string
    - ``true`` / ``false`` / ``null`` in any case
    - text starting with a digit or ``-`` is tried as a number: floats
      must be finite, integers must round-trip exactly (``"007"`` stays
      text) and fit in 64 bits
    - anything else is returned unchanged
    """
    if text == "":
        return text
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return Null

    lead = text[0]
    if "0" <= lead <= "9" or lead == "-":
        try:
            if "." in text or "e" in text or "E" in text:
                if "_" not in text:
                    number = float(text)
                    if math.isfinite(number):
                        return number
            else:
                integer = int(text)
                if str(integer) == text and INT64_MIN <= integer <= INT64_MAX:
                    return integer
        except ValueError:
            pass
    return text


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def validate_finite(value: object) -> None:
    """Raise InvalidNumberError if *value* is a NaN or infinite float."""
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidNumberError("JSON does not allow non-finite numbers.")
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidNumberError("JSON does not allow non-finite numbers.")


def _shave(text: str) -> str:
    if "." in text and "e" not in text and "E" not in text:
        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
    return text


def canonical_number_text(number: numbers.Number | None) -> str:
    """Render *number* with no redundant trailing zeros.

    >>> canonical_number_text(1.50)
    '1.5'
    >>> canonical_number_text(2.0)
    '2'
    """
    if number is None:
        raise InvalidNumberError("Null pointer")
    if isinstance(number, bool):
        raise InvalidNumberError(f"Not a number: {number!r}")
    validate_finite(number)
    if isinstance(number, int):
        return str(number)
    if isinstance(number, float):
        return _shave(repr(number))
    return _shave(str(number))


def double_to_string(d: float) -> str:
    """Like canonical_number_text, but non-finite values render as ``null``."""
    if not math.isfinite(d):
        return "null"
    return canonical_number_text(d)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def quote_to(text: str | None, writer: TextIO) -> TextIO:
    """Write *text* to *writer* as a JSON string literal."""
    if not text:
        writer.write('""')
        return writer

    previous = ""
    writer.write('"')
    for char in text:
        if char == "\\" or char == '"':
            writer.write("\\")
            writer.write(char)
        elif char == "/":
            if previous == "<":
                writer.write("\\")
            writer.write(char)
        elif char in _SHORT_ESCAPES:
            writer.write(_SHORT_ESCAPES[char])
        elif char < " " or "\x80" <= char < "\xa0" or "\u2000" <= char < "\u2100":
            writer.write(f"\\u{ord(char):04x}")
        else:
            writer.write(char)
        previous = char
    writer.write('"')
    return writer


def quote(text: str | None) -> str:
    """Return *text* as a JSON string literal.

    Backslashes and quotes are escaped, ``</`` becomes ``<\\/``, and control
    characters plus the U+0080..U+009F and U+2000..U+20FF blocks are written
    as ``\\uXXXX``.
    """
    return quote_to(text, io.StringIO()).getvalue()
