from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from pytest import MonkeyPatch

from jscompat import __version__, cli
from jscompat.exceptions import NetworkError


def test_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--help"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "--max-snippets" in result.output


def test_version() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_stdin_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--json"], input="const x = 1;\n")

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [feature["key"] for feature in payload["features"]] == ["const-declaration"]
    assert payload["summary"]["totalFeatures"] == 1
    assert payload["minimumVersions"]["chrome"] == "49+"


def test_file_argument_renders_report(tmp_path: Path) -> None:
    script = tmp_path / "app.js"
    script.write_text("const f = async () => { await load(); };\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(cli.main, [str(script)])

    assert result.exit_code == 0
    assert "Browser Support Summary" in result.output
    assert "Minimum Browser Versions Required" in result.output
    assert "Arrow Functions" in result.output
    assert "Async/Await" in result.output


def test_no_snippets_hides_source_lines(tmp_path: Path) -> None:
    script = tmp_path / "app.js"
    script.write_text("const uniqueIdentifierName = 1;\n", encoding="utf-8")

    runner = CliRunner()
    shown = runner.invoke(cli.main, [str(script)])
    hidden = runner.invoke(cli.main, [str(script), "--no-snippets"])

    assert shown.exit_code == 0
    assert hidden.exit_code == 0
    assert "uniqueIdentifierName" in shown.output
    assert "uniqueIdentifierName" not in hidden.output


def test_plain_source_reports_no_features() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["-"], input="var x = 1;\n")

    assert result.exit_code == 0
    assert "No modern JavaScript features detected." in result.output


def test_parse_error_exit_nonzero() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--json"], input="function f() {\n")

    assert result.exit_code == 1
    assert "Failed to parse JavaScript code" in result.output


def test_empty_input_exit_nonzero() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, [], input="   \n")

    assert result.exit_code == 1
    assert "No JavaScript source to analyze." in result.output


def test_missing_file_exit_nonzero(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, [str(tmp_path / "missing.js")])

    assert result.exit_code != 0
    assert "missing.js" in result.output


def test_invalid_max_snippets() -> None:
    runner = CliRunner()
    result = runner.invoke(cli.main, ["--max-snippets", "0"], input="let a = 1;")

    assert result.exit_code == 2


def test_url_source_is_fetched(monkeypatch: MonkeyPatch) -> None:
    seen: list[str] = []

    def _fake_fetch(url: str) -> str:
        seen.append(url)
        return "const x = 1n;\n"

    monkeypatch.setattr(cli, "fetch_script", _fake_fetch)
    runner = CliRunner()
    result = runner.invoke(cli.main, ["https://example.com/app.js", "--json"])

    assert result.exit_code == 0
    assert seen == ["https://example.com/app.js"]
    keys = [feature["key"] for feature in json.loads(result.output)["features"]]
    assert "bigint" in keys


def test_url_fetch_failure_exit_nonzero(monkeypatch: MonkeyPatch) -> None:
    def _boom(url: str) -> str:
        raise NetworkError(url, cause="ConnectError")

    monkeypatch.setattr(cli, "fetch_script", _boom)
    runner = CliRunner()
    result = runner.invoke(cli.main, ["https://example.com/app.js"])

    assert result.exit_code == 1
    assert "Unable to connect" in result.output
