"""Parsers for the textual number encodings embedded in node snapshots.

Both parsers are total: malformed input yields ``math.nan`` instead of
raising, so callers can treat "unparseable" uniformly with ``math.isfinite``.
"""

import math
import re

ABBREVIATE_UNITS = {
    "K": 1_000,
    "M": 1_000_000,
    "G": 1_000_000_000,
    "T": 1_000_000_000_000,
}

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")

_MICROSECOND_UNITS = ("us", "µs", "μs")

# unit -> (multiplier, divisor) into milliseconds
_UNIT_SCALE = {
    "ns": (1, 1_000_000),
    "us": (1, 1_000),
    "ms": (1, 1),
    "s": (1_000, 1),
    "m": (60_000, 1),
    "h": (3_600_000, 1),
}


def _parse_decimal(text: str) -> float:
    """Parse a plain decimal literal, returning NaN when it is not one."""
    if not _DECIMAL_LITERAL.fullmatch(text):
        return math.nan
    return float(text)


def parse_abbreviated_number(token: str) -> float:
    """Parse a number optionally suffixed with a K/M/G/T magnitude unit.

    Args:
        token: Text such as "1.5K", "2M" or "3".

    Returns:
        The scaled value, or NaN if the remainder is not a decimal literal.
    """
    rest = token
    factor = 1
    unit_factor = ABBREVIATE_UNITS.get(token[-1:])
    if unit_factor is not None:
        rest = token[:-1]
        factor = unit_factor
    return _parse_decimal(rest) * factor


def _scan_mantissa(text: str, start: int) -> int:
    """Return the end index of the digit run (with at most one dot) at start."""
    pos = start
    seen_dot = False
    while pos < len(text):
        char = text[pos]
        if char == ".":
            if seen_dot:
                break
            seen_dot = True
        elif not ("0" <= char <= "9"):
            break
        pos += 1
    return pos


def _scan_unit(text: str, start: int) -> tuple[str, int] | None:
    """Match the duration unit at start.

    Returns:
        (canonical unit, length consumed), or None for an unknown unit.
    """
    pair = text[start : start + 2]
    if pair == "ns":
        return "ns", 2
    if pair in _MICROSECOND_UNITS:
        return "us", 2
    if pair == "ms":
        return "ms", 2
    single = text[start : start + 1]
    if single in ("s", "m", "h"):
        return single, 1
    return None


def duration_string_to_ms(text: str) -> float:
    """Parse a Go-formatted duration string into milliseconds.

    The grammar is a sequence of decimal numbers each followed by a unit
    (ns, us/µs/μs, ms, s, m, h) with an optional leading sign, e.g.
    "-1h2m3.4ms". A number without a unit is invalid.

    Args:
        text: The duration string.

    Returns:
        Duration in milliseconds, or NaN if the string is malformed.
    """
    pos = 0
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        pos = 1
    if pos == len(text):
        return math.nan

    millis = 0.0
    while pos < len(text):
        end = _scan_mantissa(text, pos)
        if end == pos:
            return math.nan
        mantissa = _parse_decimal(text[pos:end])
        if math.isnan(mantissa):
            return math.nan
        unit = _scan_unit(text, end)
        if unit is None:
            return math.nan
        name, length = unit
        multiplier, divisor = _UNIT_SCALE[name]
        millis += mantissa * multiplier / divisor
        pos = end + length
    return -millis if negative else millis
