import json

import pytest

from devdesk.localization import Localization, LocalizationError


@pytest.fixture
def loc(tmp_path):
    en = tmp_path / "en.json"
    en.write_text(json.dumps({"hello": "Hello", "bye": "Goodbye"}), encoding="utf-8")
    zh = tmp_path / "zh.yaml"
    zh.write_text("hello: 你好\n", encoding="utf-8")
    result = Localization("en")
    result.load_language_file("en", str(en))
    result.load_language_file("zh", str(zh))
    return result


def test_get_text_in_requested_language(loc):
    assert loc.get_text("zh", "hello") == "你好"
    assert loc.get_text("en", "hello") == "Hello"


def test_get_text_falls_back_to_default(loc):
    assert loc.get_text("zh", "bye") == "Goodbye"
    assert loc.get_text("fr", "bye") == "Goodbye"


def test_get_text_returns_key_when_missing(loc):
    assert loc.get_text("zh", "unknown.key") == "unknown.key"


def test_yaml_scalars_keep_their_text(tmp_path):
    path = tmp_path / "de.yml"
    path.write_text("count: 42\nflag: yes\n", encoding="utf-8")
    loc = Localization("de")
    loc.load_language_file("de", str(path))
    assert loc.get_text("de", "count") == "42"
    assert loc.get_text("de", "flag") == "yes"


def test_extension_is_case_insensitive(tmp_path):
    path = tmp_path / "en.JSON"
    path.write_text(json.dumps({"k": "v"}), encoding="utf-8")
    loc = Localization("en")
    loc.load_language_file("en", str(path))
    assert loc.get_text("en", "k") == "v"


def test_reload_replaces_language(tmp_path):
    path = tmp_path / "en.json"
    path.write_text(json.dumps({"a": "first"}), encoding="utf-8")
    loc = Localization("en")
    loc.load_language_file("en", str(path))
    path.write_text(json.dumps({"b": "second"}), encoding="utf-8")
    loc.load_language_file("en", str(path))
    assert loc.get_text("en", "a") == "a"
    assert loc.get_text("en", "b") == "second"


def test_unsupported_format_raises(tmp_path):
    path = tmp_path / "en.txt"
    path.write_text("hello=Hello", encoding="utf-8")
    with pytest.raises(LocalizationError, match="unsupported file format"):
        Localization("en").load_language_file("en", str(path))


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "en.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LocalizationError, match="JSON"):
        Localization("en").load_language_file("en", str(path))


def test_non_string_json_value_raises(tmp_path):
    path = tmp_path / "en.json"
    path.write_text(json.dumps({"n": 1}), encoding="utf-8")
    with pytest.raises(LocalizationError):
        Localization("en").load_language_file("en", str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(LocalizationError, match="failed to read language file"):
        Localization("en").load_language_file("en", str(tmp_path / "missing.json"))


def test_resolve_language_prefers_query(loc):
    assert loc.resolve_language("zh", "fr-FR,en;q=0.8") == "zh"


def test_resolve_language_uses_accept_header(loc):
    assert loc.resolve_language("", "fr-FR,en;q=0.8") == "fr"
    assert loc.resolve_language(None, "de") == "de"


def test_resolve_language_defaults(loc):
    assert loc.resolve_language() == "en"
    assert loc.resolve_language("", "") == "en"
    assert loc.resolve_language(None, ",de") == "en"