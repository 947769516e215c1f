"""File helpers: existence checks, reading, writing, copying and deleting."""

from __future__ import annotations

import json
import os
import shutil
from typing import Any

_CHUNK = 64 * 1024
_JSON_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def exists(path: str) -> bool:
    """Return True unless the path is known not to exist."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except NotADirectoryError:
        return False
    except OSError:
        return True
    return True


def is_dir(path: str) -> bool:
    """Return True when path is an existing directory."""
    try:
        return os.path.isdir(path) and os.stat(path) is not None
    except OSError:
        return False


def is_file(path: str) -> bool:
    """Return True when path exists and is not a directory."""
    try:
        os.stat(path)
    except OSError:
        return False
    return not os.path.isdir(path)


def create_dir(path: str) -> None:
    """Create a directory together with any missing parents."""
    os.makedirs(path, 0o755, exist_ok=True)


def read_text(path: str) -> str:
    """Return the whole content of a file as UTF-8 text."""
    with open(path, "rb") as fh:
        return fh.read().decode("utf-8")


def write_bytes(path: str, data: bytes) -> None:
    """Write bytes to a file, creating its directory when missing."""
    directory = os.path.dirname(path) or "."
    if not exists(directory):
        create_dir(directory)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)


def write_text(path: str, content: str) -> None:
    """Write text to a file as UTF-8, creating its directory when missing."""
    write_bytes(path, content.encode("utf-8"))


def append_bytes(path: str, data: bytes) -> None:
    """Append bytes to a file, creating the file when missing."""
    fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o644)
    with os.fdopen(fd, "ab") as fh:
        fh.write(data)


def append_text(path: str, content: str) -> None:
    """Append UTF-8 text to a file, creating the file when missing."""
    append_bytes(path, content.encode("utf-8"))


def read_lines(path: str) -> list[str]:
    """Return the lines of a file without their line endings."""
    lines = read_text(path).split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_json(path: str) -> Any:
    """Load a JSON document from a file."""
    return json.loads(read_text(path))


def write_json(path: str, value: Any, indent: bool = False) -> None:
    """Write a value as JSON, indented by four spaces when indent is true."""
    if indent:
        text = json.dumps(value, ensure_ascii=False, indent=4)
    else:
        text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    text = "".join(_JSON_HTML_ESCAPES.get(ch, ch) for ch in text)
    write_text(path, text)


def copy_file(src: str, dst: str) -> None:
    """Copy the content of src into dst and flush it to disk."""
    with open(src, "rb") as source, open(dst, "wb") as target:
        shutil.copyfileobj(source, target, _CHUNK)
        target.flush()
        os.fsync(target.fileno())


def move_file(src: str, dst: str) -> None:
    """Rename src to dst, replacing dst when it exists."""
    os.replace(src, dst)


def delete_file(path: str) -> None:
    """Remove a file; raise when the path is missing or is a directory."""
    if not is_file(path):
        if exists(path):
            raise IsADirectoryError(f"path is not a file: {path}")
        raise FileNotFoundError(f"path is not a file: {path}")
    os.remove(path)


def safe_delete(path: str) -> None:
    """Remove a file or a whole directory tree if it exists."""
    if not exists(path) and not os.path.islink(path):
        return
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def file_size(path: str) -> int:
    """Return the size of a file in bytes."""
    return os.stat(path).st_size


def mod_time(path: str) -> int:
    """Return the modification time of a file as Unix seconds."""
    return int(os.stat(path).st_mtime)