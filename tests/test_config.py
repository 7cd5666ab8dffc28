"""Tests for environment-driven decoder settings."""
import logging

import pytest

from ippdecode.config import DecoderSettings

_ENV_VARS = [
    "IPPDECODE_OCTET_PREVIEW_BYTES",
    "IPPDECODE_INDENT_WIDTH",
    "IPPDECODE_NAMES_FILE",
    "IPPDECODE_LOG_LEVEL",
    "IPPDECODE_LOG_RING_SIZE",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults(clean_env):
    settings = DecoderSettings()
    assert settings.octet_preview_bytes == 16
    assert settings.indent_width == 4
    assert settings.names_file is None
    assert settings.log_level == "WARNING"
    assert settings.log_ring_size == 200


def test_environment_overrides(clean_env):
    clean_env.setenv("IPPDECODE_OCTET_PREVIEW_BYTES", "8")
    clean_env.setenv("IPPDECODE_NAMES_FILE", "/etc/ippdecode/names.json")
    settings = DecoderSettings()
    assert settings.octet_preview_bytes == 8
    assert settings.names_file == "/etc/ippdecode/names.json"


def test_dotenv_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("IPPDECODE_INDENT_WIDTH=2\n", encoding="utf-8")
    assert DecoderSettings().indent_width == 2


def test_invalid_preview_rejected(clean_env):
    clean_env.setenv("IPPDECODE_OCTET_PREVIEW_BYTES", "0")
    with pytest.raises(ValueError):
        DecoderSettings()


def test_log_level_is_normalised(clean_env):
    clean_env.setenv("IPPDECODE_LOG_LEVEL", " debug ")
    settings = DecoderSettings()
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == logging.DEBUG


def test_unknown_log_level_rejected(clean_env):
    clean_env.setenv("IPPDECODE_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError):
        DecoderSettings()


def test_overrides_are_validated(clean_env):
    settings = DecoderSettings()
    assert settings.with_overrides(octet_preview_bytes=4).octet_preview_bytes == 4
    assert settings.octet_preview_bytes == 16
    with pytest.raises(ValueError):
        settings.with_overrides(octet_preview_bytes=0)
    with pytest.raises(ValueError):
        settings.with_overrides(log_level="loud")


def test_overrides_win_over_environment(clean_env):
    clean_env.setenv("IPPDECODE_OCTET_PREVIEW_BYTES", "8")
    assert DecoderSettings().with_overrides(octet_preview_bytes=2).octet_preview_bytes == 2
