"""JSONTokener — character source for the lenient JSON grammar."""

from __future__ import annotations

from typing import TextIO

from .coercion import infer_from_text
from .errors import JSONSyntaxError
from .values import Value

# Characters that end an unquoted bare word.
_BARE_WORD_STOPS = frozenset(',:]}/\\"[{;=#')

_ESCAPES = {
    "b": "\b",
    "t": "\t",
    "n": "\n",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "/": "/",
}


class JSONTokener:
    """Splits JSON text into significant characters and values.

    ``next`` and ``next_clean`` return ``""`` at end of input.  One
    character can be pushed back with ``back``.
    """

    def __init__(self, source: str | TextIO) -> None:
        if not isinstance(source, str):
            source = source.read()
        self._source = source
        self._index = 0
        self._advanced = False
        self._can_back = False

    # -- Characters -----------------------------------------------------

    def next(self) -> str:
        """Consume and return the next character, or ``""`` at end."""
        self._can_back = True
        if self._index >= len(self._source):
            self._advanced = False
            return ""
        char = self._source[self._index]
        self._index += 1
        self._advanced = True
        return char

    def next_n(self, n: int) -> str:
        if n == 0:
            return ""
        if self._index + n > len(self._source):
            self._index = len(self._source)
            raise self.syntax_error("Substring bounds error")
        chunk = self._source[self._index:self._index + n]
        self._index += n
        self._advanced = True
        self._can_back = True
        return chunk

    def next_clean(self) -> str:
        """Next character that is not whitespace or a control character."""
        while True:
            char = self.next()
            if char == "" or char > " ":
                return char

    def back(self) -> None:
        """Un-consume the last character returned by ``next``."""
        if not self._can_back:
            raise self.syntax_error("Stepping back two steps is not supported")
        if self._advanced:
            self._index -= 1
        self._can_back = False

    def more(self) -> bool:
        return self._index < len(self._source)

    # -- Values ---------------------------------------------------------

    def next_string(self, quote: str) -> str:
        """Read the rest of a string literal opened by *quote*."""
        chars: list[str] = []
        while True:
            char = self.next()
            if char in ("", "\n", "\r"):
                raise self.syntax_error("Unterminated string")
            if char == "\\":
                escape = self.next()
                if escape == "u":
                    digits = self.next_n(4)
                    try:
                        chars.append(chr(int(digits, 16)))
                    except ValueError:
                        raise self.syntax_error("Illegal escape.") from None
                elif escape in _ESCAPES:
                    chars.append(_ESCAPES[escape])
                else:
                    raise self.syntax_error("Illegal escape.")
            elif char == quote:
                return "".join(chars)
            else:
                chars.append(char)

    def next_value(self) -> Value:
        """Parse the next complete value: string, object, array or bare word."""
        char = self.next_clean()
        if char in ('"', "'"):
            return self.next_string(char)
        if char == "{":
            from .jsonobject import JSONObject
            self.back()
            return JSONObject.from_tokener(self)
        if char == "[":
            from .array import JSONArray
            self.back()
            return JSONArray.from_tokener(self)

        chars: list[str] = []
        while char >= " " and char not in _BARE_WORD_STOPS:
            chars.append(char)
            char = self.next()
        self.back()

        text = "".join(chars).strip()
        if not text:
            raise self.syntax_error("Missing value")
        return infer_from_text(text)

    # -- Errors ---------------------------------------------------------

    def syntax_error(self, message: str) -> JSONSyntaxError:
        consumed = self._source[:self._index]
        line = consumed.count("\n") + 1
        column = self._index - (consumed.rfind("\n") + 1) + 1
        return JSONSyntaxError(message, position=self._index, line=line, column=column)

    def __str__(self) -> str:
        return f" at {self._index}"
