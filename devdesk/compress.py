"""Gzip and zlib helpers plus zip and tar.gz archiving of directories."""

from __future__ import annotations

import gzip
import os
import shutil
import tarfile
import zipfile
import zlib
from typing import Iterator

_CHUNK = 64 * 1024


class UnsafeArchivePathError(ValueError):
    """Raised when an archive entry would land outside the target directory."""


def gzip_compress(data: bytes) -> bytes:
    """Compress bytes in gzip format."""
    return gzip.compress(data)


def gzip_decompress(data: bytes) -> bytes:
    """Decompress gzip data."""
    return gzip.decompress(data)


def zlib_compress(data: bytes) -> bytes:
    """Compress bytes in zlib format."""
    return zlib.compress(data)


def zlib_decompress(data: bytes) -> bytes:
    """Decompress zlib data."""
    return zlib.decompress(data)


def _walk(top: str) -> Iterator[tuple[str, bool]]:
    """Yield (path, is_dir) below top in lexical, depth-first order."""
    with os.scandir(top) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        is_dir = entry.is_dir(follow_symlinks=False)
        yield entry.path, is_dir
        if is_dir:
            yield from _walk(entry.path)


def _archive_name(source_dir: str, path: str) -> str:
    return os.path.relpath(path, source_dir).replace(os.sep, "/")


def _safe_path(target_dir: str, name: str, kind: str) -> str:
    base = os.path.normpath(target_dir)
    path = os.path.normpath(base + os.sep + name)
    if not path.startswith(base + os.sep):
        raise UnsafeArchivePathError(f"illegal {kind} file path: {name}")
    return path


def _write_stream(path: str, src, mode: int) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as dst:
        shutil.copyfileobj(src, dst, _CHUNK)


def zip_directory(source_dir: str, target_file: str) -> None:
    """Write the contents of source_dir into a zip archive."""
    os.stat(source_dir)
    with zipfile.ZipFile(target_file, "w") as zf:
        if not os.path.isdir(source_dir):
            return
        for path, is_dir in _walk(source_dir):
            name = _archive_name(source_dir, path)
            if is_dir:
                zf.write(path, name + "/")
            else:
                zf.write(path, name, compress_type=zipfile.ZIP_DEFLATED)


def unzip_file(zip_file: str, target_dir: str) -> None:
    """Extract a zip archive into target_dir, refusing paths that escape it."""
    with zipfile.ZipFile(zip_file) as zf:
        os.makedirs(target_dir, exist_ok=True)
        for info in zf.infolist():
            path = _safe_path(target_dir, info.filename, "zip")
            if info.is_dir():
                os.makedirs(path, exist_ok=True)
                continue
            os.makedirs(os.path.dirname(path), exist_ok=True)
            mode = (info.external_attr >> 16) & 0o777 or 0o666
            with zf.open(info) as src:
                _write_stream(path, src, mode)


def create_tar_gz(source_dir: str, target_file: str) -> None:
    """Write the contents of source_dir into a gzip-compressed tar archive."""
    os.stat(source_dir)
    with tarfile.open(target_file, "w:gz") as tar:
        if not os.path.isdir(source_dir):
            return
        for path, _ in _walk(source_dir):
            tar.add(path, arcname=_archive_name(source_dir, path), recursive=False)


def extract_tar_gz(archive: str, target_dir: str) -> None:
    """Extract directories and regular files of a tar.gz archive into target_dir."""
    with tarfile.open(archive, "r:gz") as tar:
        os.makedirs(target_dir, exist_ok=True)
        for member in tar:
            path = _safe_path(target_dir, member.name, "tar")
            if member.isdir():
                os.makedirs(path, 0o755, exist_ok=True)
            elif member.isreg():
                os.makedirs(os.path.dirname(path), 0o755, exist_ok=True)
                src = tar.extractfile(member)
                if src is None:
                    continue
                with src:
                    _write_stream(path, src, member.mode & 0o7777)


def gzip_compress_file(source_file: str, target_file: str) -> None:
    """Compress a file into a gzip file."""
    with open(source_file, "rb") as src, open(target_file, "wb") as raw:
        with gzip.GzipFile(fileobj=raw, mode="wb") as dst:
            shutil.copyfileobj(src, dst, _CHUNK)


def gzip_decompress_file(source_file: str, target_file: str) -> None:
    """Decompress a gzip file; the target is created only once the header is valid."""
    with open(source_file, "rb") as raw:
        with gzip.GzipFile(fileobj=raw, mode="rb") as src:
            first = src.read(_CHUNK)
            with open(target_file, "wb") as dst:
                dst.write(first)
                shutil.copyfileobj(src, dst, _CHUNK)