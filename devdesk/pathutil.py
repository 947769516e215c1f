"""Path helpers: lexical cleaning, extensions, safety checks and glob matching."""

from __future__ import annotations

import os
import re

_SEP = os.sep
_SEPS = tuple(s for s in (os.sep, os.altsep) if s)
_ESCAPES = os.sep != "\\"
_NOT_SEP = f"[^{re.escape(_SEP)}]"
_SUSPICIOUS = ("..", "~", "$", "|", ">", "<", "&", "`")


def clean(path: str) -> str:
    """Return the shortest lexically equivalent path."""
    if _SEP != "/":
        return os.path.normpath(path) if path else "."
    rooted = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(segment)
    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def ext(path: str) -> str:
    """Return the extension of the last path element, including the dot."""
    cut = max(path.rfind(s) for s in _SEPS)
    tail = path[cut + 1:]
    dot = tail.rfind(".")
    return tail[dot:] if dot >= 0 else ""


def is_valid(path: str) -> bool:
    """Return False when the cleaned path holds traversal or shell characters."""
    cleaned = clean(path)
    return not any(pattern in cleaned for pattern in _SUSPICIOUS)


def change_ext(path: str, new_ext: str) -> str:
    """Replace the extension of path, or add one if there is none."""
    return remove_ext(path) + new_ext


def remove_ext(path: str) -> str:
    """Strip the extension of path."""
    suffix = ext(path)
    return path[: len(path) - len(suffix)] if suffix else path


def ensure_trailing_slash(path: str) -> str:
    """Make sure path ends with a separator; an empty path becomes "/"."""
    if not path:
        return "/"
    if path[-1] not in "/\\":
        return path + _SEP
    return path


def remove_trailing_slash(path: str) -> str:
    """Drop one trailing separator, leaving a bare root untouched."""
    if path in ("", "/", "\\"):
        return path
    if path[-1] in "/\\":
        return path[:-1]
    return path


def is_sub_path(parent_path: str, child_path: str) -> bool:
    """Return True when child_path lies strictly inside parent_path."""
    parent = ensure_trailing_slash(clean(os.path.abspath(parent_path)))
    child = clean(os.path.abspath(child_path))
    return child.startswith(parent)


def _bad_pattern() -> ValueError:
    return ValueError("syntax error in pattern")


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern) or pattern[i] in "-]":
        raise _bad_pattern()
    if pattern[i] == "\\" and _ESCAPES:
        i += 1
        if i >= len(pattern):
            raise _bad_pattern()
    return pattern[i], i + 1


def _parse_class(pattern: str, i: int) -> tuple[str, int]:
    negated = i < len(pattern) and pattern[i] == "^"
    if negated:
        i += 1
    ranges: list[tuple[str, str]] = []
    while True:
        if i < len(pattern) and pattern[i] == "]" and ranges:
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            hi, i = _class_char(pattern, i + 1)
        ranges.append((lo, hi))
    usable = [(lo, hi) for lo, hi in ranges if lo <= hi]
    if not usable:
        return ("." if negated else "(?!)"), i
    body = "".join(
        re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}" for lo, hi in usable
    )
    return f"[{'^' if negated else ''}{body}]", i


def _translate(pattern: str) -> str:
    parts: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "*":
            parts.append(_NOT_SEP + "*")
            i += 1
        elif ch == "?":
            parts.append(_NOT_SEP)
            i += 1
        elif ch == "[":
            cls, i = _parse_class(pattern, i + 1)
            parts.append(cls)
        elif ch == "\\" and _ESCAPES:
            if i + 1 >= len(pattern):
                raise _bad_pattern()
            parts.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            parts.append(re.escape(ch))
            i += 1
    return "".join(parts)


def match(pattern: str, name: str) -> bool:
    """Shell-style match where * and ? never cross a separator.

    Raises ValueError when the pattern is malformed.
    """
    return re.fullmatch(_translate(pattern), name, re.DOTALL) is not None