# json_decoder.py
# Hand-rolled character-level JSON decoder
#
# =============================================================================
#  PARSER IMPLEMENTATION: RECURSIVE DESCENT OVER A CHARACTER CURSOR
# =============================================================================
#
# One method per grammar production (value, object, array, string, number,
# true, false, null). Each method consumes exactly the characters of its
# value and leaves the cursor just past them. Nesting depth maps onto Python
# call depth; max_depth puts an explicit bound on it when the caller asks.
#
# The parser is strict fail-fast: the first ParseError propagates out of
# parse_document() and no partial Value is returned.
#
# Accepted language:
# 1. An object needs at least one member - "{}" is rejected, "[]" is not.
# 2. Duplicate object keys are allowed; the last one wins.
# 3. Any run of Unicode White_Space characters is allowed around tokens.
#
# =============================================================================

import argparse
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from json_scanner import Cursor, ErrorKind, ParseError

__all__ = [
    "String", "Number", "Object", "Array", "Bool", "Null", "Value",
    "Parser", "ParseError", "ErrorKind", "parse_document", "to_python",
]

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = None    # No explicit nesting limit - stack depth is the bound

_HEX_DIGITS = "0123456789abcdefABCDEF"
_DIGITS     = "0123456789"

# \b and \f are the standard U+0008 / U+000C.
_SHORT_ESCAPES = {
    '"':  '"',
    "\\": "\\",
    "/":  "/",
    "n":  "\n",
    "r":  "\r",
    "t":  "\t",
    "b":  "\b",
    "f":  "\f",
}

# ---------------------------------------------------------------------------
# VALUE MODEL
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class String:
    text: str


@dataclass(frozen=True)
class Number:
    value: float


@dataclass
class Object:
    members: Dict[str, "Value"] = field(default_factory=dict)


@dataclass
class Array:
    items: List["Value"] = field(default_factory=list)


@dataclass(frozen=True)
class Bool:
    value: bool


@dataclass(frozen=True)
class Null:
    pass


Value = Union[String, Number, Object, Array, Bool, Null]


def to_python(value: Value):
    """
    Convert a Value tree into plain Python data (str, float, dict, list,
    bool, None).
    """
    if isinstance(value, String):
        return value.text
    if isinstance(value, Number):
        return value.value
    if isinstance(value, Object):
        return {k: to_python(v) for k, v in value.members.items()}
    if isinstance(value, Array):
        return [to_python(v) for v in value.items]
    if isinstance(value, Bool):
        return value.value
    if isinstance(value, Null):
        return None
    raise TypeError(f"not a JSON value: {value!r}")

# ---------------------------------------------------------------------------
# PARSER
# ---------------------------------------------------------------------------
class Parser:
    """
    Recursive-descent JSON parser. Holds no state beyond the cursor and
    the current nesting depth.
    """
    def __init__(self, text: str, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT):
        self._cursor = Cursor(text)
        self._max_depth = max_depth
        self._depth = 0

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    def _lookahead(self, chars: str) -> bool:
        """True if the next character exists and is one of chars."""
        cur = self._cursor
        return not cur.done() and cur.peek() in chars

    def _enter(self):
        if self._max_depth is not None and self._depth >= self._max_depth:
            raise self._cursor.error(ErrorKind.DEPTH_EXCEEDED,
                                     f"(max {self._max_depth})")
        self._depth += 1

    def _leave(self):
        self._depth -= 1

    # -- dispatch ------------------------------------------------------------
    def parse_value(self) -> Value:
        cur = self._cursor
        cur.skip_whitespace()
        ch = cur.peek()
        if ch == '"':
            return self.parse_string()
        if ch == "{":
            return self.parse_object()
        if ch == "[":
            return self.parse_array()
        if ch == "t":
            return self.parse_true()
        if ch == "f":
            return self.parse_false()
        if ch == "n":
            return self.parse_null()
        if ch == "-" or ch in _DIGITS:
            return self.parse_number()
        raise cur.error(ErrorKind.UNEXPECTED_CHARACTER, f"{ch!r} - value expected")

    # -- strings -------------------------------------------------------------
    def parse_string(self) -> String:
        cur = self._cursor
        cur.expect_char('"')

        out: List[str] = []
        while True:
            ch = cur.next()
            if ch == '"':
                break
            if ch != "\\":
                out.append(ch)
                continue

            esc_pos = cur.pos
            esc = cur.next()
            if esc == "u":
                out.append(self._parse_unicode_escape())
            elif esc in _SHORT_ESCAPES:
                out.append(_SHORT_ESCAPES[esc])
            else:
                raise ParseError(ErrorKind.INVALID_ESCAPE, esc_pos, f"\\{esc}")
        return String("".join(out))

    def _parse_unicode_escape(self) -> str:
        """
        Decode the XXXX of a \\uXXXX escape. Surrogate code points are not
        scalar values and are rejected.
        """
        cur = self._cursor
        start = cur.pos
        code = 0
        for shift in (12, 8, 4, 0):
            digit = cur.peek()
            if digit not in _HEX_DIGITS:
                raise cur.error(ErrorKind.INVALID_ESCAPE,
                                f"{digit!r} is not a hex digit")
            cur.advance()
            code |= int(digit, 16) << shift
        if 0xD800 <= code <= 0xDFFF:
            raise ParseError(ErrorKind.INVALID_ESCAPE, start,
                             f"\\u{code:04x} is a surrogate code point")
        return chr(code)

    # -- numbers -------------------------------------------------------------
    def parse_number(self) -> Number:
        cur = self._cursor
        start = cur.pos
        buf: List[str] = []

        if cur.peek() == "-":
            buf.append("-")
            cur.advance()

        # A single '0' or a run of digits starting 1-9.
        if cur.peek() == "0":
            buf.append("0")
            cur.advance()
        else:
            buf.append(self._parse_digits())

        if self._lookahead("."):
            buf.append(".")
            cur.advance()
            buf.append(self._parse_digits())

        if self._lookahead("eE"):
            buf.append("e")
            cur.advance()
            if cur.peek() in "+-":
                buf.append(cur.next())
            buf.append(self._parse_digits())

        text = "".join(buf)
        try:
            return Number(float(text))
        except ValueError:
            raise ParseError(ErrorKind.INVALID_NUMBER, start, repr(text)) from None

    def _parse_digits(self) -> str:
        """Consume one or more ASCII digits."""
        cur = self._cursor
        ch = cur.peek()
        if ch not in _DIGITS:
            raise cur.error(ErrorKind.UNEXPECTED_CHARACTER, f"{ch!r} - digit expected")
        start = cur.pos
        while self._lookahead(_DIGITS):
            cur.advance()
        return cur.span(start, cur.pos)

    # -- containers ----------------------------------------------------------
    def parse_object(self) -> Object:
        """
        Parse an object with one or more members. Duplicate keys overwrite.
        """
        self._cursor.expect_char("{")
        self._enter()
        try:
            return Object(self._parse_members())
        finally:
            self._leave()

    def _parse_members(self) -> Dict[str, Value]:
        cur = self._cursor
        members: Dict[str, Value] = {}
        while True:
            cur.skip_whitespace()
            key = self.parse_string().text

            cur.skip_whitespace()
            cur.expect_char(":")

            cur.skip_whitespace()
            members[key] = self.parse_value()

            cur.skip_whitespace()
            sep_pos = cur.pos
            sep = cur.next()
            if sep == "}":
                return members
            if sep != ",":
                raise ParseError(ErrorKind.UNEXPECTED_CHARACTER, sep_pos,
                                 f"{sep!r} - expected ',' or '}}'")

    def parse_array(self) -> Array:
        self._cursor.expect_char("[")
        self._enter()
        try:
            return Array(self._parse_elements())
        finally:
            self._leave()

    def _parse_elements(self) -> List[Value]:
        cur = self._cursor
        items: List[Value] = []
        cur.skip_whitespace()
        if cur.peek() == "]":
            cur.advance()
            return items

        while True:
            items.append(self.parse_value())
            cur.skip_whitespace()
            sep_pos = cur.pos
            sep = cur.next()
            if sep == "]":
                return items
            if sep != ",":
                raise ParseError(ErrorKind.UNEXPECTED_CHARACTER, sep_pos,
                                 f"{sep!r} - expected ',' or ']'")

    # -- literals ------------------------------------------------------------
    def parse_true(self) -> Bool:
        self._cursor.expect_literal("true")
        return Bool(True)

    def parse_false(self) -> Bool:
        self._cursor.expect_literal("false")
        return Bool(False)

    def parse_null(self) -> Null:
        self._cursor.expect_literal("null")
        return Null()

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def parse_document(text: str, *, max_depth: Optional[int] = DEPTH_LIMIT_DEFAULT) -> Value:
    """
    Parse exactly one JSON value from text.

    Surrounding whitespace is ignored. Anything else after the value raises
    ParseError(TRAILING_INPUT). Any failure raises ParseError; there is no
    partial result.
    """
    parser = Parser(text, max_depth=max_depth)
    value = parser.parse_value()
    cur = parser.cursor
    cur.skip_whitespace()
    if not cur.done():
        raise cur.error(ErrorKind.TRAILING_INPUT, f"{cur.peek()!r}")
    return value

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Validate one JSON file. Exit 0 silently on success, 1 on any read or
    parse failure.
    """
    ap = argparse.ArgumentParser(description="JSON validator")
    ap.add_argument("file", help="JSON file to verify")
    ap.add_argument("--debug", action="store_true", help="print the decoded value tree")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    args = ap.parse_args(argv)

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            data = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    try:
        value = parse_document(data, max_depth=args.max_depth)
    except ParseError as exc:
        print(f"SyntaxError: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("RecursionError: nesting too deep", file=sys.stderr)
        return 1

    if args.debug:
        print(repr(value))
    return 0


def main():
    sys.exit(_cli(sys.argv[1:]))

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
