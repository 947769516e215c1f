"""Everyday helpers and small in-memory data services.

Covers containers, threads, crypto, compression, math, strings, paths, files,
dates, translations, parameters, bug tracking and dictionaries.
"""

__version__ = "0.1.0"

__all__ = [
    "bugtracker",
    "collections",
    "compress",
    "concurrency",
    "cryptoutil",
    "dictionary",
    "fileutil",
    "localization",
    "mathutil",
    "parameter",
    "pathutil",
    "strutil",
    "timeutil",
]