from pathlib import Path

import pytest

from inireader.config.settings import ScannerSettings, is_text_encoding, load_scanner_settings
from inireader.errors import SettingsError

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"


def test_defaults_without_path():
    settings = load_scanner_settings(None)
    assert settings == ScannerSettings()
    assert settings.comment_prefixes == (";", "#")
    assert settings.encoding == "utf-8-sig"


def test_load_fixture_settings():
    settings = load_scanner_settings(FIXTURES / "settings.yml")
    assert settings.comment_prefixes == (";",)
    assert settings.encoding == "utf-8-sig"


def test_missing_file_strict_and_lenient(tmp_path):
    missing = tmp_path / "settings.yml"
    with pytest.raises(SettingsError):
        load_scanner_settings(missing)
    assert load_scanner_settings(missing, strict=False) == ScannerSettings()


def test_single_prefix_string_and_empty_document(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("comment_prefixes: '//'\n", encoding="utf-8")
    assert load_scanner_settings(path).comment_prefixes == ("//",)

    path.write_text("", encoding="utf-8")
    assert load_scanner_settings(path) == ScannerSettings()


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "unknown: 1\n",
        "comment_prefixes: [1, 2]\n",
        "comment_prefixes: []\n",
        "encoding: 12\n",
        "encoding: no-such-codec\n",
        "encoding: rot13\n",
        "comment_prefixes: [unclosed\n",
    ],
)
def test_invalid_settings_raise(tmp_path, content):
    path = tmp_path / "settings.yml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsError) as excinfo:
        load_scanner_settings(path)
    assert excinfo.value.path == path


def test_unreadable_settings_raise(tmp_path):
    with pytest.raises(SettingsError) as excinfo:
        load_scanner_settings(tmp_path)
    assert excinfo.value.path == tmp_path

    binary = tmp_path / "settings.yml"
    binary.write_bytes(b"encoding: \xff\xfe\n")
    with pytest.raises(SettingsError):
        load_scanner_settings(binary)


def test_is_text_encoding():
    assert is_text_encoding("utf-8")
    assert is_text_encoding("latin-1")
    assert not is_text_encoding("rot13")
    assert not is_text_encoding("hex")
    assert not is_text_encoding("no-such-codec")
