# json_scanner.py
# Character cursor and error taxonomy for the JSON decoder
#
# =============================================================================
#  SCANNER: BOUNDS-CHECKED CHARACTER CURSOR
# =============================================================================
#
# The input is held as a list of code points, so offsets count characters,
# not bytes, and escape decoding stays correct for non-ASCII text.
#
# Only peek() checks bounds. advance() assumes the caller has already peeked,
# and position never moves past len(text).
#
# =============================================================================

import enum
from typing import List

# Unicode White_Space property. str.isspace() also accepts U+001C..U+001F.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# ---------------------------------------------------------------------------
# ERROR TAXONOMY
# ---------------------------------------------------------------------------
class ErrorKind(enum.Enum):
    END_OF_INPUT         = "unexpected end of input"
    UNEXPECTED_CHARACTER = "unexpected character"
    INVALID_ESCAPE       = "invalid escape"
    INVALID_NUMBER       = "invalid number"
    TRAILING_INPUT       = "extra data after root value"
    DEPTH_EXCEEDED       = "depth limit exceeded"


class ParseError(SyntaxError):
    """
    Raised for any input that is not valid JSON.

    Subclasses SyntaxError so callers that only care about "valid or not"
    can catch the builtin. kind and offset are there for diagnostics.
    """
    def __init__(self, kind: ErrorKind, offset: int, detail: str = ""):
        msg = kind.value
        if detail:
            msg = f"{msg} {detail}"
        super().__init__(f"{msg} at offset {offset}")
        self.kind = kind
        self.offset = offset

# ---------------------------------------------------------------------------
# CURSOR
# ---------------------------------------------------------------------------
class Cursor:
    """
    Immutable character sequence plus a mutable position (0..len).
    """
    def __init__(self, text: str):
        self._chars: List[str] = list(text)
        self.pos = 0

    def __len__(self):
        return len(self._chars)

    def error(self, kind: ErrorKind, detail: str = "") -> ParseError:
        return ParseError(kind, self.pos, detail)

    def peek(self) -> str:
        if self.pos < len(self._chars):
            return self._chars[self.pos]
        raise self.error(ErrorKind.END_OF_INPUT)

    def advance(self):
        self.pos += 1

    def next(self) -> str:
        ch = self.peek()
        self.advance()
        return ch

    def span(self, start: int, end: int) -> str:
        return "".join(self._chars[start:end])

    def done(self) -> bool:
        return self.pos == len(self._chars)

    def skip_whitespace(self):
        chars = self._chars
        while self.pos < len(chars) and chars[self.pos] in WHITESPACE:
            self.pos += 1

    def expect_char(self, expected: str):
        start = self.pos
        ch = self.next()
        if ch != expected:
            raise ParseError(ErrorKind.UNEXPECTED_CHARACTER, start,
                             f"{ch!r} - expected {expected!r}")

    def expect_literal(self, literal: str):
        """
        Match literal one character at a time. Running out of input counts
        as a mismatch here, not as END_OF_INPUT.
        """
        for expected in literal:
            if self.done():
                raise self.error(ErrorKind.UNEXPECTED_CHARACTER,
                                 f"end of input - expected {literal!r}")
            ch = self._chars[self.pos]
            if ch != expected:
                raise self.error(ErrorKind.UNEXPECTED_CHARACTER,
                                 f"{ch!r} - expected {literal!r}")
            self.advance()
