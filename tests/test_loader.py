"""Tests for loading .necl files."""

import logging

import pytest

from necl_core import InvalidFileExtension, IOFailure, ParseOptions, load
from necl_core.loader import check_extension, read_lines


def test_load(tmp_path):
    path = tmp_path / "app.necl"
    path.write_text('name = "app"\nport = 8080\n', encoding="utf-8")
    doc = load(path)
    assert doc.value("name") == "app"
    assert doc.value("port") == 8080


def test_load_accepts_str_path(tmp_path):
    path = tmp_path / "app.necl"
    path.write_text("a = 1\n", encoding="utf-8")
    assert load(str(path)).value("a") == 1


def test_wrong_extension(tmp_path):
    path = tmp_path / "app.hcl"
    path.write_text("a = 1\n", encoding="utf-8")
    with pytest.raises(InvalidFileExtension):
        load(path)


def test_extension_checked_before_reading(tmp_path):
    with pytest.raises(InvalidFileExtension):
        read_lines(tmp_path / "missing.txt")


def test_missing_file(tmp_path):
    with pytest.raises(IOFailure) as info:
        load(tmp_path / "missing.necl")
    assert isinstance(info.value.__cause__, OSError)


def test_undecodable_file(tmp_path):
    path = tmp_path / "bad.necl"
    path.write_bytes(b"a = '\xff\xfe'\n")
    with pytest.raises(IOFailure):
        load(path)


def test_custom_extension(tmp_path):
    options = ParseOptions(extension=".conf")
    path = tmp_path / "x.conf"
    path.write_text("a = true\n", encoding="utf-8")
    assert check_extension(path, options) == path
    assert load(path, options).value("a") is True


def test_load_logs(tmp_path, caplog):
    path = tmp_path / "app.necl"
    path.write_text("a = 1\n", encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="necl_core.loader"):
        load(path)
    assert "Loaded" in caplog.text
