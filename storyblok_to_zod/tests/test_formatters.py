"""
Tests for the prettier formatter, with subprocess.run replaced.
"""

from __future__ import annotations

import subprocess

import pytest

from storyblok_to_zod.pipeline import FormatterConfig
from storyblok_to_zod.pipeline.formatters import PrettierFormatter

CODE = "export const a=z.string()\n"


class RecordedCalls(list):
    """Commands passed to subprocess.run, with the outcome of formatting runs."""

    outcome: dict


@pytest.fixture
def calls(monkeypatch):
    """Records commands; `--version` succeeds, formatting runs use `outcome`."""
    seen = RecordedCalls()
    outcome = {"returncode": 0, "stdout": "export const a = z.string();\n", "stderr": "", "raise": None}

    def fake_run(cmd, **kwargs):
        seen.append((cmd, kwargs))
        if cmd[-1] == "--version":
            return subprocess.CompletedProcess(cmd, 0, "3.3.3\n", "")
        if outcome["raise"] is not None:
            raise outcome["raise"]
        return subprocess.CompletedProcess(cmd, outcome["returncode"], outcome["stdout"], outcome["stderr"])

    monkeypatch.setattr(subprocess, "run", fake_run)
    seen.outcome = outcome
    return seen


@pytest.fixture
def prettier():
    return PrettierFormatter(["prettier"])


class TestPrettierFormatter:
    def test_command_line(self, prettier):
        config = FormatterConfig(line_length=100, tab_width=4, single_quote=True)
        assert prettier.command_line(config) == [
            "prettier",
            "--stdin-filepath",
            "schemas.ts",
            "--print-width",
            "100",
            "--tab-width",
            "4",
            "--single-quote",
        ]

    def test_double_quotes(self, prettier):
        assert "--single-quote" not in prettier.command_line(FormatterConfig(single_quote=False))

    def test_formats_through_stdin(self, prettier, calls):
        assert prettier.format(CODE, FormatterConfig()) == "export const a = z.string();\n"
        cmd, kwargs = calls[-1]
        assert cmd[:3] == ["prettier", "--stdin-filepath", "schemas.ts"]
        assert kwargs["input"] == CODE

    def test_availability_is_checked_once(self, prettier, calls):
        prettier.format(CODE, FormatterConfig())
        prettier.format(CODE, FormatterConfig())
        assert [cmd for cmd, _ in calls].count(["prettier", "--version"]) == 1

    def test_non_zero_exit_keeps_code(self, prettier, calls):
        calls.outcome.update(returncode=2, stdout="", stderr="SyntaxError")
        assert prettier.format(CODE, FormatterConfig()) == CODE

    def test_empty_output_keeps_code(self, prettier, calls):
        calls.outcome.update(stdout="")
        assert prettier.format(CODE, FormatterConfig()) == CODE

    @pytest.mark.parametrize(
        "error",
        [FileNotFoundError("prettier"), PermissionError("prettier"), subprocess.TimeoutExpired("prettier", 60)],
    )
    def test_run_errors_keep_code(self, prettier, calls, error):
        calls.outcome.update({"raise": error})
        assert prettier.format(CODE, FormatterConfig()) == CODE

    def test_unavailable_tool_keeps_code(self, monkeypatch, prettier):
        seen = []

        def fake_run(cmd, **kwargs):
            seen.append(cmd)
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert not prettier.is_available()
        assert prettier.format(CODE, FormatterConfig()) == CODE
        assert seen == [["prettier", "--version"]]

    def test_missing_command_is_unavailable(self):
        assert not PrettierFormatter(["storyblok-to-zod-no-such-command"]).is_available()
