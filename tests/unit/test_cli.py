"""Tests for the docschema command-line entrypoint."""

from __future__ import annotations

import json

import pytest

from docschema.cli import build_parser, main, settings_from_args


@pytest.fixture
def samples(tmp_path):
    path = tmp_path / "samples.json"
    path.write_text(json.dumps([
        {"_id": "1", "name": "Ann", "age": 30},
        {"_id": "2", "name": "Bo"},
    ]))
    return path


def test_prints_schema(samples, capsys):
    code = main(["--json-file", str(samples), "--base-class", "person", "--language", "yaml"])

    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("- Person:\n")
    assert "        age: int?\n" in out


def test_unsupported_language_fails(samples, capsys):
    code = main(["--json-file", str(samples), "--language", "cobol"])
    assert code == 1
    assert capsys.readouterr().out == ""


def test_missing_connection_fails(monkeypatch, capsys):
    for var in ("DOCSCHEMA_MONGO_URI", "DOCSCHEMA_MONGO_DB", "DOCSCHEMA_MONGO_COLL", "DOCSCHEMA_JSON_FILE"):
        monkeypatch.delenv(var, raising=False)
    assert main(["--db", "shop", "--coll", "orders"]) == 1
    assert capsys.readouterr().out == ""


def test_nested_arrays_fail_without_output(tmp_path, capsys):
    path = tmp_path / "grid.json"
    path.write_text('[{"grid": [[1, 2]]}]')
    assert main(["--json-file", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_flags_override_settings():
    args = build_parser().parse_args(
        ["--mongo-uri", "mongodb://h", "-d", "shop", "-c", "orders", "-s", "20", "--language", "java"],
    )
    settings = settings_from_args(args)
    assert settings.mongo.uri == "mongodb://h"
    assert settings.mongo.db == "shop"
    assert settings.mongo.coll == "orders"
    assert settings.sample_size == 20
    assert settings.language == "java"


def test_malformed_sample_file_fails_without_output(tmp_path, capsys):
    path = tmp_path / "bad_oid.json"
    path.write_text('[{"_id": {"$oid": "zz"}}]')
    assert main(["--json-file", str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_unknown_log_level_fails(samples, capsys):
    assert main(["--json-file", str(samples), "--log-level", "chatty"]) == 1
    assert capsys.readouterr().out == ""


def test_invalid_env_setting_fails(samples, monkeypatch, capsys):
    monkeypatch.setenv("DOCSCHEMA_SAMPLE_SIZE", "many")
    assert main(["--json-file", str(samples)]) == 1
    assert capsys.readouterr().out == ""
