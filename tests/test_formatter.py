"""Tests for output formatters."""

import json
from io import StringIO

import pytest
from guidelint.models import Finding, Location, OutputFormat, Report, RuleCrashed, Severity
from guidelint.output.formatter import (
  GitHubFormatter,
  JsonFormatter,
  TerminalFormatter,
  TextFormatter,
  get_formatter,
)
from rich.console import Console


@pytest.fixture
def report() -> Report:
  return Report(
    findings=(
      Finding(
        path="src/app.js",
        rule_id="JS001",
        severity=Severity.MUST,
        location=Location(1, 1),
        message="Unexpected var, use let or const instead",
        suggestion="Use const",
      ),
      Finding(
        path="src/app.js",
        rule_id="JS005",
        severity=Severity.SHOULD,
        location=Location(4, 10),
        message="Nested ternary expression",
      ),
    ),
    crashes=(
      RuleCrashed(
        path="src/app.js",
        rule_id="JS004",
        location=Location(2, 3),
        cause="KeyError: 'x'",
      ),
    ),
    files_scanned=1,
  )


class TestTextFormatter:
  def test_line_format(self, report: Report) -> None:
    output = TextFormatter().format(report)

    assert output.split("\n") == [
      "src/app.js:1:1: [MUST] JS001: Unexpected var, use let or const instead",
      "src/app.js:4:10: [SHOULD] JS005: Nested ternary expression",
      "src/app.js:2:3: [CRASH] JS004: KeyError: 'x'",
    ]

  def test_empty_report(self) -> None:
    assert TextFormatter().format(Report(findings=())) == ""


class TestJsonFormatter:
  def test_structure(self, report: Report) -> None:
    data = json.loads(JsonFormatter().format(report))

    assert data["exit_code"] == 2
    assert data["errors"] == 1
    assert data["warnings"] == 1
    assert data["findings"][0] == {
      "path": "src/app.js",
      "line": 1,
      "column": 1,
      "severity": "must",
      "rule_id": "JS001",
      "message": "Unexpected var, use let or const instead",
      "suggestion": "Use const",
    }
    assert data["crashes"][0]["rule_id"] == "JS004"


class TestGitHubFormatter:
  def test_annotations(self, report: Report) -> None:
    lines = GitHubFormatter().format(report).split("\n")

    assert lines[0] == (
      "::error file=src/app.js,line=1,col=1,title=JS001::"
      "Unexpected var, use let or const instead"
    )
    assert lines[1].startswith("::warning file=src/app.js,line=4,col=10")
    assert lines[2].startswith("::error file=src/app.js,line=2,col=3,title=JS004::rule crashed")


class TestTerminalFormatter:
  def test_prints_table(self, report: Report) -> None:
    buffer = StringIO()
    formatter = TerminalFormatter(Console(file=buffer, width=120))

    assert formatter.format(report) == ""

    output = buffer.getvalue()
    assert "src/app.js" in output
    assert "JS001" in output
    assert "MUST" in output
    assert "Rule crashes" in output

  def test_clean_report(self) -> None:
    buffer = StringIO()
    TerminalFormatter(Console(file=buffer, width=120)).format(Report(findings=(), files_scanned=2))

    assert "No issues found." in buffer.getvalue()


class TestGetFormatter:
  @pytest.mark.parametrize("name,cls", [
    ("text", TextFormatter),
    ("json", JsonFormatter),
    ("github", GitHubFormatter),
    (OutputFormat.TERMINAL, TerminalFormatter),
  ])
  def test_known(self, name, cls) -> None:
    assert isinstance(get_formatter(name), cls)

  def test_unknown(self) -> None:
    with pytest.raises(ValueError, match="Unknown format"):
      get_formatter("xml")
