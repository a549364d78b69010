"""Output formatting for scan reports."""

import json
from abc import ABC, abstractmethod

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from guidelint.models import OutputFormat, Report, Severity


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, report: Report) -> str:
    """Format a report for output."""
    ...


class TextFormatter(OutputFormatter):
  """One line per finding: `path:line:column: [SEVERITY] ruleId: message`."""

  def format(self, report: Report) -> str:
    lines = [
      f"{f.path}:{f.line}:{f.column}: [{f.severity.value.upper()}] {f.rule_id}: {f.message}"
      for f in report.findings
    ]
    lines.extend(
      f"{c.path}:{c.location.line}:{c.location.column}: [CRASH] {c.rule_id}: {c.cause}"
      for c in report.crashes
    )
    return "\n".join(lines)


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SEVERITY_STYLES = {
    Severity.MUST: "bold red",
    Severity.SHOULD: "yellow",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, report: Report) -> str:
    self._print_summary(report)
    self._print_findings(report)
    self._print_crashes(report)
    return ""

  def _print_summary(self, report: Report) -> None:
    border = "red" if report.exit_code else "green"
    self.console.print()
    self.console.print(Panel(
      report.summary,
      title="[bold]Style Conformance[/bold]",
      border_style=border,
    ))

  def _print_findings(self, report: Report) -> None:
    if not report.findings:
      if not report.crashes:
        self.console.print("\n[green]No issues found.[/green]")
      return

    for path, findings in report.by_file().items():
      table = Table(title=escape(path), title_justify="left", show_header=True, header_style="bold")
      table.add_column("Line", width=6, justify="right")
      table.add_column("Col", width=4, justify="right")
      table.add_column("Severity", width=8)
      table.add_column("Rule", width=10)
      table.add_column("Issue", min_width=40)

      for finding in findings:
        style = self.SEVERITY_STYLES.get(finding.severity, "")
        message = escape(finding.message)
        if finding.suggestion:
          message += f"\n[dim]Suggestion: {escape(finding.suggestion)}[/dim]"
        table.add_row(
          str(finding.line),
          str(finding.column),
          Text(finding.severity.value.upper(), style=style),
          finding.rule_id,
          message,
        )

      self.console.print()
      self.console.print(table)

  def _print_crashes(self, report: Report) -> None:
    if not report.crashes:
      return
    self.console.print("\n[bold red]Rule crashes (results are incomplete):[/bold red]")
    for crash in report.crashes:
      location = f"{crash.path}:{crash.location.line}:{crash.location.column}"
      self.console.print(f"  {escape(location)} [bold]{crash.rule_id}[/bold] {escape(crash.cause)}")


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, report: Report) -> str:
    data = {
      "summary": report.summary,
      "exit_code": report.exit_code,
      "files_scanned": report.files_scanned,
      "errors": report.error_count,
      "warnings": report.warning_count,
      "findings": [
        {
          "path": f.path,
          "line": f.line,
          "column": f.column,
          "severity": f.severity.value,
          "rule_id": f.rule_id,
          "message": f.message,
          "suggestion": f.suggestion,
        }
        for f in report.findings
      ],
      "crashes": [
        {
          "path": c.path,
          "line": c.location.line,
          "column": c.location.column,
          "rule_id": c.rule_id,
          "cause": c.cause,
        }
        for c in report.crashes
      ],
      "skipped": list(report.skipped),
    }
    return json.dumps(data, indent=2)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions workflow command formatter for PR annotations."""

  def format(self, report: Report) -> str:
    lines = []
    for f in report.findings:
      level = "error" if f.severity == Severity.MUST else "warning"
      location = f"file={f.path},line={f.line},col={f.column}"
      lines.append(f"::{level} {location},title={f.rule_id}::{_escape_data(f.message)}")
    for c in report.crashes:
      location = f"file={c.path},line={c.location.line},col={c.location.column}"
      message = _escape_data(f"rule crashed: {c.cause}")
      lines.append(f"::error {location},title={c.rule_id}::{message}")
    return "\n".join(lines)


def _escape_data(message: str) -> str:
  return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def get_formatter(format_type: OutputFormat | str) -> OutputFormatter:
  """Get formatter by type name."""
  try:
    format_type = OutputFormat(format_type)
  except ValueError:
    raise ValueError(f"Unknown format: {format_type}") from None

  formatters = {
    OutputFormat.TEXT: TextFormatter,
    OutputFormat.TERMINAL: TerminalFormatter,
    OutputFormat.JSON: JsonFormatter,
    OutputFormat.GITHUB: GitHubFormatter,
  }
  return formatters[format_type]()
