"""
Date-pattern mini-language.

Patterns use the conventional letter syntax: a run of the same ASCII letter is
one field, everything else is copied verbatim, text between single quotes is
literal and a doubled quote ('') stands for one quote character.

| Letter | Field                      | Example (2001-07-04 12:08:56.000) |
|--------|----------------------------|-----------------------------------|
| G      | era                        | AD                                |
| y      | year (yy = two digits)     | 2001, 01                          |
| Y      | week-based year            | 2001                              |
| M, L   | month (MMM text, MMMM full)| 07, Jul, July                     |
| w, W   | week of year / month       | 27, 1                             |
| D      | day of year                | 185                               |
| d      | day of month               | 04                                |
| F      | day of week in month       | 1                                 |
| E      | day name (EEEE full)       | Wed, Wednesday                    |
| u      | ISO day number (1=Monday)  | 3                                 |
| a      | AM/PM marker               | PM                                |
| H, k   | hour 0-23, 1-24            | 12                                |
| K, h   | hour 0-11, 1-12            | 0, 12                             |
| m, s   | minute, second             | 08, 56                            |
| S      | millisecond count          | 000                               |
| z      | zone name                  | PDT                               |
| Z      | RFC 822 offset             | -0700                             |
| X      | ISO 8601 offset (X..XXX)   | -07, -0700, -07:00                |

Examples show the reading 2001-07-04 12:08:56.000 in America/Los_Angeles with
an English locale. Textual fields come from Babel's CLDR data for the requested
locale. z names the zone only when the value carries an IANA zone (a ZoneInfo);
otherwise it shows the zone offset.
"""

from datetime import datetime
from typing import List, Tuple

from babel import Locale
from babel.dates import DateTimeFormat

PATTERN_LETTERS = frozenset("GyYMLwWDdFEuaHkKhmsSzZX")

LITERAL = "literal"
FIELD = "field"

Token = Tuple[str, str]


class InvalidPatternError(ValueError):
    """Raised when a date pattern cannot be compiled."""


def tokenize_pattern(pattern: str) -> List[Token]:
    """
    Split a pattern into literal and field tokens.

    Adjacent literal characters are merged into one token; a field token is a
    run of one repeated pattern letter.

    Raises:
        InvalidPatternError: For an unquoted letter that is not a pattern
            letter, or for a quote that is never closed.
    """
    tokens: List[Token] = []
    literal: List[str] = []
    in_quote = False
    i = 0
    length = len(pattern)

    while i < length:
        char = pattern[i]
        if char == "'":
            if i + 1 < length and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            in_quote = not in_quote
            i += 1
            continue

        if in_quote or not _is_ascii_letter(char):
            literal.append(char)
            i += 1
            continue

        if char not in PATTERN_LETTERS:
            raise InvalidPatternError(f"Illegal pattern character '{char}'")

        run_end = i
        while run_end < length and pattern[run_end] == char:
            run_end += 1
        if literal:
            tokens.append((LITERAL, "".join(literal)))
            literal = []
        tokens.append((FIELD, pattern[i:run_end]))
        i = run_end

    if in_quote:
        raise InvalidPatternError("Unterminated quote")
    if literal:
        tokens.append((LITERAL, "".join(literal)))
    return tokens


def format_pattern(value: datetime, pattern: str, locale: Locale) -> str:
    """
    Render an aware datetime with a date pattern.

    Args:
        value: Aware datetime already projected into the display zone.
        pattern: Date pattern (see module docstring).
        locale: Locale for textual fields.

    Returns:
        The formatted string.

    Raises:
        InvalidPatternError: If the pattern is malformed.
    """
    tokens = tokenize_pattern(pattern)
    fields = DateTimeFormat(value, locale)
    return "".join(
        text if kind == LITERAL else _format_field(value, text, fields)
        for kind, text in tokens
    )


def _format_field(value: datetime, field: str, fields: DateTimeFormat) -> str:
    letter = field[0]
    count = len(field)

    if letter == "S":
        return str(value.microsecond // 1000).zfill(count)
    if letter == "u":
        return str(value.isoweekday()).zfill(count)
    if letter == "F":
        return str((value.day - 1) // 7 + 1).zfill(count)
    if letter == "a":
        return fields["a"]
    if letter == "Z":
        return fields["Z"]
    if letter == "X":
        if count > 3:
            raise InvalidPatternError(f"Invalid ISO 8601 offset length: {count}")
        return fields[field]
    if letter == "G":
        return fields["G" * min(count, 3)]
    if letter in "MLEz":
        # four or more letters select the full form
        return fields[letter * min(count, 4)]
    return fields[field]


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")
