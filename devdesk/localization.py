"""Translation tables loaded from JSON or YAML files, with language fallback."""

from __future__ import annotations

import json
import os

import yaml


class LocalizationError(ValueError):
    """Raised when a language file cannot be read or parsed."""


def _as_translations(data: object, kind: str) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise LocalizationError(f"failed to parse {kind}: document is not a mapping")
    result: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise LocalizationError(f"failed to parse {kind}: value of {key!r} is not a string")
        result[key] = value
    return result


class Localization:
    """Holds translations per language and falls back to a default language."""

    def __init__(self, default_lang: str) -> None:
        self.default_lang = default_lang
        self._lang_data: dict[str, dict[str, str]] = {}

    def load_language_file(self, lang: str, file_path: str) -> None:
        """Load the translations of one language from a .json, .yaml or .yml file."""
        try:
            with open(file_path, "rb") as fh:
                raw = fh.read()
        except OSError as exc:
            raise LocalizationError(f"failed to read language file: {exc}") from exc

        ext = os.path.splitext(file_path)[1].lower()
        if ext == ".json":
            try:
                data = json.loads(raw)
            except ValueError as exc:
                raise LocalizationError(f"failed to parse JSON: {exc}") from exc
            translations = _as_translations(data, "JSON")
        elif ext in (".yaml", ".yml"):
            try:
                data = yaml.load(raw, Loader=yaml.BaseLoader)
            except yaml.YAMLError as exc:
                raise LocalizationError(f"failed to parse YAML: {exc}") from exc
            translations = _as_translations(data, "YAML")
        else:
            raise LocalizationError(f"unsupported file format: {ext}")

        self._lang_data[lang] = translations

    def get_text(self, lang: str, key: str) -> str:
        """Return the translation of key, trying lang, then the default, then key itself."""
        for candidate in (lang, self.default_lang):
            text = self._lang_data.get(candidate, {}).get(key)
            if text is not None:
                return text
        return key

    def resolve_language(self, query_lang: str | None = None,
                         accept_language: str | None = None) -> str:
        """Pick a language from a query value, else an Accept-Language header, else the default."""
        lang = query_lang or ""
        if not lang and accept_language:
            lang = accept_language.split(",")[0].split("-")[0]
        return lang or self.default_lang