"""String helpers: checks, padding, case conversion, parsing and escaping."""

from __future__ import annotations

import base64
import math
import random
import re
from typing import Iterable

_CHARSET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_INF_RE = re.compile(r"[+-]?(?:inf|infinity)", re.IGNORECASE)
_HTML_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def is_blank(s: str) -> bool:
    """Return True when s is empty or holds only whitespace."""
    return not s.strip()


def truncate(s: str, max_len: int, suffix: str) -> str:
    """Cut s to max_len characters and append suffix when it was longer."""
    if max_len < 0:
        raise ValueError("max_len must not be negative")
    if len(s) <= max_len:
        return s
    return s[:max_len] + suffix


def reverse(s: str) -> str:
    """Return s with its characters in reverse order."""
    return s[::-1]


def capitalize(s: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return s[:1].upper() + s[1:]


def random_string(length: int) -> str:
    """Return a random string of ASCII letters and digits."""
    return "".join(random.choices(_CHARSET, k=length))


def pad_left(s: str, pad_char: str, total_length: int) -> str:
    """Prefix s with pad_char until it is total_length characters long."""
    count = total_length - len(s)
    return pad_char * count + s if count > 0 else s


def pad_right(s: str, pad_char: str, total_length: int) -> str:
    """Suffix s with pad_char until it is total_length characters long."""
    count = total_length - len(s)
    return s + pad_char * count if count > 0 else s


def is_numeric(s: str) -> bool:
    """Return True when s is non-empty and every character is a decimal digit."""
    return bool(s) and all(ch.isdecimal() for ch in s)


def is_alpha(s: str) -> bool:
    """Return True when s is non-empty and every character is a letter."""
    return bool(s) and all(ch.isalpha() for ch in s)


def is_alphanumeric(s: str) -> bool:
    """Return True when s is non-empty and holds only letters and digits."""
    return bool(s) and all(ch.isalpha() or ch.isdecimal() for ch in s)


def to_snake_case(s: str) -> str:
    """Convert camelCase to snake_case."""
    parts = []
    for i, ch in enumerate(s):
        if i > 0 and ch.isupper():
            parts.append("_")
        parts.append(ch.lower())
    return "".join(parts)


def to_camel_case(s: str) -> str:
    """Convert snake_case to camelCase."""
    parts = []
    upper = False
    for ch in s:
        if ch == "_":
            upper = True
        elif upper:
            parts.append(ch.upper())
            upper = False
        else:
            parts.append(ch)
    return "".join(parts)


def to_base64(s: str) -> str:
    """Encode the UTF-8 bytes of s as standard Base64."""
    return base64.b64encode(s.encode("utf-8")).decode("ascii")


def from_base64(s: str) -> str:
    """Decode standard Base64 to text; raises ValueError on malformed input."""
    data = base64.b64decode(s, validate=True)
    return data.decode("utf-8", errors="replace")


def parse_int(s: str, default: int) -> int:
    """Parse a decimal 64-bit integer, or return default."""
    if not _INT_RE.fullmatch(s):
        return default
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return default
    return value


def parse_float(s: str, default: float) -> float:
    """Parse a floating-point number, or return default."""
    if not s or s != s.strip() or "_" in s:
        return default
    try:
        value = float(s)
    except ValueError:
        if not _HEX_FLOAT_RE.fullmatch(s):
            return default
        try:
            value = float.fromhex(s)
        except (ValueError, OverflowError):
            return default
    if math.isinf(value) and not _INF_RE.fullmatch(s):
        return default
    return value


def is_valid_email(email: str) -> bool:
    """Return True when email looks like a valid address."""
    return _EMAIL_RE.fullmatch(email) is not None


def contains_any(s: str, *args: str) -> bool:
    """Return True when s contains at least one of the given substrings."""
    return any(sub in s for sub in args)


def escape_html(s: str) -> str:
    """Escape the HTML special characters & < > " and '."""
    return s.translate(_HTML_ESCAPES)


def join_ints(values: Iterable[int], separator: str) -> str:
    """Join integers as decimal text with separator between them."""
    return separator.join(str(v) for v in values)


def remove_non_printable(s: str) -> str:
    """Drop every character that is not printable."""
    return "".join(ch for ch in s if ch.isprintable())