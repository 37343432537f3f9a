"""NMEA field access utilities.

NMEA fields are comma-separated and addressed purely by position. Fields may
be empty (consecutive commas indicate missing data) and the last field carries
the ``*<checksum>`` suffix. These helpers never assume an index exists and
never raise for malformed input; they return None so the parsers can map each
case to its own failure kind.
"""

import re

# Standard NMEA numeric field: optional sign, digits, optional fraction.
# Python's float() also accepts "nan", "inf", "1e3", "1_0" and surrounding
# whitespace, none of which a receiver legitimately emits. re.ASCII keeps
# \d from matching non-ASCII digits, which float() would also accept.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)

_CHECKSUM_DELIMITER = "*"


def split_fields(sentence: str) -> list[str]:
    """Split a sentence into its comma-separated tokens.

    Trailing whitespace (``\\r\\n`` line endings) is removed first. Leading
    characters are kept so that prefix checks stay exact.

    Example:
        >>> split_fields("$GPGSA,A,3,,3.1*38\\r\\n")
        ['$GPGSA', 'A', '3', '', '3.1*38']
    """
    return sentence.rstrip().split(",")


def field_at(fields: list[str], index: int) -> str | None:
    """Return the token at ``index``, or None if the sentence is too short."""
    if 0 <= index < len(fields):
        return fields[index]
    return None


def strip_checksum(value: str) -> str:
    """Drop a trailing ``*<hex>`` checksum suffix from a field.

    Only the text before the first ``*`` is kept. A field without ``*`` is
    returned unchanged, so stripping twice is the same as stripping once.

    Example:
        >>> strip_checksum("3.1*38")
        '3.1'
        >>> strip_checksum("3.1")
        '3.1'
    """
    return value.split(_CHECKSUM_DELIMITER, 1)[0]


def parse_decimal(value: str) -> float | None:
    """Parse an NMEA decimal field, returning None if it is not well formed.

    Empty strings also return None; callers that must distinguish "empty"
    from "garbage" check for the empty string first.

    Example:
        >>> parse_decimal("-24.0")
        -24.0
        >>> parse_decimal("1e3") is None
        True
    """
    if _DECIMAL_PATTERN.fullmatch(value) is None:
        return None
    return float(value)


def sentence_type(sentence: str) -> str | None:
    """Return the 3-letter sentence type of ``$<talker><type>,...``.

    Only the first six characters are inspected, so ``$GPGSAX,...`` is a
    GSA sentence just as ``parse_dop`` treats it.

    Example:
        >>> sentence_type("$GNGSA,A,3,...")
        'GSA'
        >>> sentence_type("garbage") is None
        True
    """
    # "$" + 2-character talker ID + 3-character sentence type, matched as a
    # prefix the same way the parsers match it
    prefix = sentence[:6]
    if len(prefix) != 6 or not prefix.startswith("$"):
        return None
    if not (prefix[1:].isascii() and prefix[1:].isalnum()):
        return None
    return prefix[3:]
