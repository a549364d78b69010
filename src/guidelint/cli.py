"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from guidelint import __version__
from guidelint.config import ConfigError
from guidelint.models import OutputFormat, Report
from guidelint.output import get_formatter
from guidelint.rules import DuplicateRuleError, RuleRegistry, build_registry
from guidelint.scan import resolve_settings, run_scan
from guidelint.sources import FileError

# Exit status when no report could be produced (bad config, no files)
EXIT_USAGE = 3

app = typer.Typer(
  name="guidelint",
  help="Check JavaScript and SQL sources against the team style guides",
  no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("GUIDELINT_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"guidelint {__version__}")
    raise typer.Exit()


@app.command()
def main(
  files: Optional[list[str]] = typer.Argument(
    None,
    help="Files, directories or glob patterns to check (default: current directory)",
  ),
  config: Path = typer.Option(None, "--config", "-c", help="Config file path"),
  format_type: str = typer.Option(
    None, "--format", help="Output format: text, terminal, json, github"
  ),
  jobs: int = typer.Option(None, "--jobs", "-j", min=1, help="Files to scan in parallel"),
  timeout: float = typer.Option(
    None, "--timeout", help="Seconds after which unstarted files are abandoned"
  ),
  no_ignore: bool = typer.Option(False, "--no-ignore", help="Do not respect .gitignore"),
  list_rules: bool = typer.Option(False, "--list-rules", help="List available rules and exit"),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show tracebacks for crashes and errors"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Check sources against the style guides.

  Exit status: 0 when clean (warnings allowed), 1 when a MUST rule is
  violated, 2 when a rule crashed, 3 when the run could not start.
  """
  show_traceback = debug or _is_debug()

  try:
    registry = build_registry()
    if list_rules:
      _print_rules(registry)
      raise typer.Exit()

    settings = resolve_settings(
      config_path=config,
      format_type=_parse_format(format_type) if format_type else None,
      jobs=jobs,
      timeout=timeout,
    )
    report = run_scan(files=files, settings=settings, registry=registry, no_ignore=no_ignore)

  except (ConfigError, DuplicateRuleError, FileError) as e:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}")
    raise typer.Exit(EXIT_USAGE) from None
  except typer.Exit:
    raise
  except Exception as e:
    err_console.print(f"[red]Error:[/red] {escape(str(e))}")
    if show_traceback:
      err_console.print("\n[dim]Traceback:[/dim]")
      err_console.print(escape(traceback.format_exc()))
    raise typer.Exit(EXIT_USAGE) from None

  output = get_formatter(settings.format).format(report)
  if output:
    console.print(output, markup=False, highlight=False, soft_wrap=True)

  _print_diagnostics(report, settings.format, show_traceback)
  raise typer.Exit(report.exit_code)


def _parse_format(format_str: str) -> OutputFormat:
  try:
    return OutputFormat(format_str.strip().lower())
  except ValueError:
    choices = ", ".join(f.value for f in OutputFormat)
    raise ConfigError(f"Unknown format '{format_str}' (choose from {choices})") from None


def _print_diagnostics(report: Report, format_type: OutputFormat, show_traceback: bool) -> None:
  """Write warnings, crash tracebacks and the summary to stderr."""
  for path in report.skipped:
    err_console.print(f"[yellow]Warning:[/yellow] timed out before scanning {escape(path)}")

  if show_traceback:
    for crash in report.crashes:
      err_console.print(f"\n[dim]{escape(crash.rule_id)} crashed in {escape(crash.path)}:[/dim]")
      err_console.print(escape(crash.traceback))

  # terminal prints its own summary; json must stay machine-readable
  if format_type in (OutputFormat.TEXT, OutputFormat.GITHUB):
    style = "red" if report.exit_code else "green"
    err_console.print(f"[{style}]{escape(report.summary)}[/{style}]")


def _print_rules(registry: RuleRegistry) -> None:
  table = Table(show_header=True, header_style="bold")
  table.add_column("Id", width=8)
  table.add_column("Name", min_width=20)
  table.add_column("Severity", width=8)
  table.add_column("Language", width=10)
  table.add_column("Applies to")

  for rule in registry.all():
    table.add_row(
      rule.id,
      rule.name,
      rule.severity.value.upper(),
      rule.language.value if rule.language else "any",
      ", ".join(sorted(rule.applies_to)),
    )
  console.print(table)


if __name__ == "__main__":
  app()
