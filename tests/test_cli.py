import json
from pathlib import Path

import pytest

import textscrape.cli as cli
from textscrape.pipeline.schemas import ExtractionResult


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_outputs_json(monkeypatch, tmp_path, capsys):
    sample = _write(tmp_path, "people.csv", "k1,v1\nk2,v2,extra\n")
    monkeypatch.setattr("sys.argv", ["textscrape", "extract", str(sample), "--log-dir", str(tmp_path / "logs")])

    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert data[0]["format"] == "csv"
    assert data[0]["record"] == {"k1": "v1", "k2": "v2,extra"}
    assert data[0]["ok"] is True
    assert (tmp_path / "logs" / "textscrape.log").exists()


def test_cli_bare_path_shorthand(monkeypatch, tmp_path, capsys):
    sample = _write(tmp_path, "doc.xml", "<name>Alice</name>")
    monkeypatch.setattr("sys.argv", ["textscrape", str(sample), "--log-dir", str(tmp_path / "logs")])

    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert data[0]["record"] == {"name": "Alice"}


def test_cli_writes_output_summary_and_csv(monkeypatch, tmp_path):
    json_in = _write(tmp_path, "a.json", '{"a": 1}')
    xml_in = _write(tmp_path, "b.xml", "<tag>x</tag>")
    out_path = tmp_path / "out.json"
    summary_path = tmp_path / "summary.txt"
    csv_path = tmp_path / "merged.csv"

    monkeypatch.setattr(
        "sys.argv",
        [
            "textscrape",
            "extract",
            str(json_in),
            str(xml_in),
            "--output",
            str(out_path),
            "--summary",
            str(summary_path),
            "--csv-out",
            str(csv_path),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    cli.main()
    data = json.loads(out_path.read_text())
    assert [item["format"] for item in data] == ["json", "xml"]
    summary = summary_path.read_text()
    assert "Key: a, Value: 1" in summary
    assert "Tag: tag, Value: x" in summary
    lines = csv_path.read_text().splitlines()
    assert lines[0] == "key,value"
    assert set(lines[1:]) == {"a,1", "tag,x"}


def test_cli_forced_format(monkeypatch, tmp_path, capsys):
    calls = []

    def fake_extract_file(path, fmt=None, *, encoding=None, extensions=None, rules=None):
        calls.append((path, fmt, encoding))
        return ExtractionResult(format=fmt, record={"ok": "yes"}, source=str(path))

    monkeypatch.setattr(cli, "extract_file", fake_extract_file)
    monkeypatch.setattr(
        "sys.argv",
        ["textscrape", "extract", "whatever.dat", "--format", "csv", "--log-dir", str(tmp_path / "logs")],
    )

    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert data[0]["record"] == {"ok": "yes"}
    assert calls == [(Path("whatever.dat"), "csv", "utf-8")]


def test_cli_missing_file_exits(monkeypatch, tmp_path):
    monkeypatch.setattr(
        "sys.argv",
        ["textscrape", "extract", str(tmp_path / "missing.json"), "--log-dir", str(tmp_path / "logs")],
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert "File not found" in str(excinfo.value)


def test_cli_requires_path(monkeypatch):
    monkeypatch.setattr("sys.argv", ["textscrape", "extract"])
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert "Provide at least one file path" in str(excinfo.value)


def test_cli_extra_rules(monkeypatch, tmp_path, capsys):
    sample = _write(tmp_path, "settings.csv", "a,1\nport=8080\n")
    rules_path = _write(
        tmp_path,
        "rules.yaml",
        """
- name: ini_pair
  pattern: '^(\\w+)=(.*)$'
  flags: M
""",
    )
    monkeypatch.setattr(
        "sys.argv",
        ["textscrape", "extract", str(sample), "--rules", str(rules_path), "--log-dir", str(tmp_path / "logs")],
    )

    cli.main()
    data = json.loads(capsys.readouterr().out)
    assert data[0]["record"] == {"a": "1", "port": "8080"}
