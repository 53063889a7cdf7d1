from __future__ import annotations

import json

from app.deps import Settings
from cli.chronodate_cli import main


def run(capsys, *argv):
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured


def test_resolve_year(capsys):
    code, out = run(capsys, "resolve", '{"year": 2005}')
    assert code == 0
    assert json.loads(out.out)["local"] == "2005-01-01T00:00:00"


def test_resolve_ignore_offset(capsys):
    value = '{"year": 2005, "month": 1, "day": 1, "hour": 1, "minute": 0, "offset_minutes": 120}'
    _, out = run(capsys, "resolve", value, "--ignore-offset")
    assert json.loads(out.out)["local"] == "2005-01-01T01:00:00"


def test_best_with_null(capsys):
    _, out = run(capsys, "best", "null", '{"year": 2005, "month": 3}')
    payload = json.loads(out.out)
    assert payload["outcome"] == "RESOLVED"
    assert payload["value"] == {"year": 2005, "month": 3}


def test_contained(capsys):
    _, out = run(capsys, "contained", '{"year": 2005}', '{"year": 2006}')
    assert json.loads(out.out) == {"result": False}


def test_invalid_value_exits_with_error(capsys):
    code, out = run(capsys, "contained", '{"year": 2005, "month": 13}', "null")
    assert code == 2
    assert "invalid value" in out.err


def test_non_object_json_is_rejected(capsys):
    code, out = run(capsys, "best", "[2005]", "null")
    assert code == 2


def test_offset_flag_overrides_configured_default(capsys, monkeypatch):
    monkeypatch.setattr("cli.chronodate_cli.get_settings", lambda: Settings(ignore_offset_default=True))
    value = '{"year": 2005, "month": 1, "day": 1, "hour": 1, "minute": 0, "offset_minutes": 120}'

    _, out = run(capsys, "resolve", value)
    assert json.loads(out.out)["local"] == "2005-01-01T01:00:00"

    _, out = run(capsys, "resolve", value, "--no-ignore-offset")
    assert json.loads(out.out)["local"] == "2004-12-31T23:00:00"


def test_misspelled_field_is_rejected(capsys):
    code, out = run(capsys, "best", '{"year": 2005, "mnth": 3}', '{"year": 2005, "month": 4}')
    assert code == 2
    assert "invalid value" in out.err
