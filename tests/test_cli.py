"""Tests for CLI entry point."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from webfwk.cli import main


def _run(argv: list[str]) -> int:
    """Run the CLI and return its exit code (0 when it returns normally)."""
    with patch("sys.argv", ["webfwk", *argv]):
        try:
            main()
        except SystemExit as e:
            return int(e.code or 0)
    return 0


class TestCheckSubcommand:
    def test_valid_value(self, capsys: pytest.CaptureFixture[str]):
        code = _run(["check", "foobar", "--min-length", "4", "--regex", "^foo"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"valid": True, "errors": []}

    def test_invalid_value_lists_errors(self, capsys: pytest.CaptureFixture[str]):
        code = _run(["check", "bar", "--min-length", "4", "--regex", "^foo"])
        assert code == 1
        data = json.loads(capsys.readouterr().out)
        assert data["valid"] is False
        assert [e["type"] for e in data["errors"]] == ["length", "regex"]

    def test_max_length_only(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "toolong", "--max-length", "3"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["errors"] == [{"type": "length", "minimum": 0, "maximum": 3}]

    def test_contains_collects_needles(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "a.b", "--contains", "@", "--contains", "."]) == 0

    def test_no_rules_is_valid(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "anything"]) == 0

    def test_json_value(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "[1, 2]", "--json", "--min-length", "0"]) == 1

    def test_json_number_uses_text_form(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "111222.0", "--json", "--min-length", "6", "--max-length", "6"]) == 0

    def test_bad_json_value(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "{nope", "--json"]) == 2
        assert "not valid JSON" in capsys.readouterr().err

    def test_bad_pattern(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["check", "x", "--regex", "[x"]) == 2
        assert "invalid pattern" in capsys.readouterr().err


class TestValidateSubcommand:
    def test_valid_payload(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        payload = json.dumps({"email": "john@doe.com"})
        code = _run(["validate", "contact", payload, "--config", str(config_file)])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["valid"] is True

    def test_invalid_payload(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        payload = json.dumps({"login": "jd", "password": "x"})
        code = _run(["validate", "signup", payload, "--config", str(config_file)])
        assert code == 1
        report = json.loads(capsys.readouterr().out)
        assert sorted(report["errors"]) == ["login", "password"]

    def test_payload_from_file(
        self, config_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        data_file = tmp_path / "payload.json"
        data_file.write_text(json.dumps({"email": "a@b"}))
        code = _run(["validate", "contact", f"@{data_file}", "--config", str(config_file)])
        assert code == 0

    def test_unknown_schema(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        code = _run(["validate", "missing", "{}", "--config", str(config_file)])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_malformed_data(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        code = _run(["validate", "contact", "{broken", "--config", str(config_file)])
        assert code == 2
        assert "invalid data" in capsys.readouterr().err

    def test_non_object_data(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        code = _run(["validate", "contact", "[1]", "--config", str(config_file)])
        assert code == 2

    def test_missing_data_file(
        self, config_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ):
        missing = tmp_path / "missing.json"
        code = _run(["validate", "contact", f"@{missing}", "--config", str(config_file)])
        assert code == 2


class TestSchemasSubcommand:
    def test_lists_schemas(self, config_file: Path, capsys: pytest.CaptureFixture[str]):
        assert _run(["schemas", "--config", str(config_file)]) == 0
        out = capsys.readouterr().out
        assert "signup: login, password" in out
        assert "contact: email" in out

    def test_no_schemas(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]):
        assert _run(["schemas", "--config", str(tmp_path / "none.json")]) == 0
        assert "No schemas configured." in capsys.readouterr().out


class TestServeSubcommand:
    def test_serve_runs_server(self):
        with patch("webfwk.cli.run_server") as run:
            assert _run(["serve"]) == 0
        run.assert_called_once_with()


class TestMisc:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]):
        assert _run([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_version_flag(self, capsys: pytest.CaptureFixture[str]):
        assert _run(["--version"]) == 0
        assert "webfwk" in capsys.readouterr().out

    def test_version_importable(self):
        from webfwk import __version__

        assert isinstance(__version__, str)
