"""Tests for the ippdecode command line entry point."""
import io
import json

import pytest

from ippdecode import cli
from ippdecode.config import get_settings
from ippdecode.parsing import tags


def _record(tag: int, name: str, value: bytes = b"") -> bytes:
    encoded = name.encode()
    return bytes([tag]) + len(encoded).to_bytes(2, "big") + encoded + len(value).to_bytes(2, "big") + value


def _request(group: int = 0x01) -> bytes:
    return (
        bytes([1, 1, 0x00, 0x0B, 0x00, 0x00, 0x00, 0x01, group])
        + _record(tags.CHARSET, "attributes-charset", b"utf-8")
        + _record(tags.ENUM, "printer-state", b"\x00\x00\x00\x03")
        + _record(tags.OCTET_STRING, "printer-uuid-raw", bytes(20))
        + bytes([tags.END_OF_ATTRIBUTES])
    )


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    for name in ("IPPDECODE_OCTET_PREVIEW_BYTES", "IPPDECODE_NAMES_FILE", "IPPDECODE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _write(tmp_path, data: bytes):
    path = tmp_path / "message.bin"
    path.write_bytes(data)
    return str(path)


def test_text_output(tmp_path, capsys):
    assert cli.main([_write(tmp_path, _request())]) == cli.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["IPP Version: 1.1", "Operation: 0x000B (Get-Printer-Attributes)", "Request ID: 1"]
    assert "    printer-state (enum): 3 (idle)" in out
    assert "    printer-uuid-raw (octetString): <octetString: 0x" + "00" * 16 + "... (20 bytes)>" in out


def test_preview_bytes_flag(tmp_path, capsys):
    cli.main([_write(tmp_path, _request()), "--preview-bytes", "2"])
    assert "<octetString: 0x0000... (20 bytes)>" in capsys.readouterr().out


def test_names_flag(tmp_path, capsys):
    names = tmp_path / "names.json"
    names.write_text(json.dumps({"enums": {"printer-state": {"3": "ready"}}}), encoding="utf-8")
    assert cli.main([_write(tmp_path, _request()), "--names", str(names)]) == cli.EXIT_OK
    assert "    printer-state (enum): 3 (ready)" in capsys.readouterr().out


def test_missing_names_file(tmp_path, capsys):
    code = cli.main([_write(tmp_path, _request()), "--names", str(tmp_path / "nope.json")])
    assert code == cli.EXIT_NOT_FOUND


def test_json_output_with_diagnostics(tmp_path, capsys):
    assert cli.main([_write(tmp_path, _request(group=0x0E)), "--format", "json"]) == cli.EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["message"]["request_id"] == 1
    assert payload["message"]["groups"][0]["heading"] == "Unknown Group (0x0E)"
    assert "unrecognized_group_tag" in [e["event"] for e in payload["diagnostics"]]


def test_stdin_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(_request())))
    assert cli.main(["-"]) == cli.EXIT_OK
    assert "Request ID: 1" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.bin")]) == cli.EXIT_NOT_FOUND
    assert "File not found" in capsys.readouterr().err


def test_malformed_message(tmp_path, capsys):
    data = bytes([1, 1, 0, 0x0B, 0, 0, 0, 1]) + _record(tags.INTEGER, "copies", b"\x00\x00\x00\x01")
    assert cli.main([_write(tmp_path, data)]) == cli.EXIT_MALFORMED
    err = capsys.readouterr().err
    assert err.startswith("Error parsing IPP message: unexpected tag 0x21")
    assert "(offset 8)" in err


@pytest.mark.parametrize("preview", ["0", "-1"])
def test_preview_bytes_below_one_rejected(tmp_path, capsys, preview):
    assert cli.main([_write(tmp_path, _request()), "--preview-bytes", preview]) == cli.EXIT_MALFORMED
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Invalid settings:")


def test_unknown_log_level_in_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("IPPDECODE_LOG_LEVEL", "verbose")
    assert cli.main([_write(tmp_path, _request())]) == cli.EXIT_MALFORMED
    assert "Invalid settings:" in capsys.readouterr().err


def test_directory_input(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == cli.EXIT_NOT_FOUND
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"Cannot read {tmp_path}:")
