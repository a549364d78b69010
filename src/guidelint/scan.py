"""Core scan orchestration."""

import time
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from guidelint.config import ConfigError, Settings, load_config
from guidelint.models import (
  FileResult,
  Finding,
  Location,
  OutputFormat,
  Report,
  Severity,
)
from guidelint.report import PARSE_ERROR_ID, Reporter
from guidelint.rules import RuleRegistry, WalkContext, Walker, build_registry
from guidelint.rules.registry import for_language
from guidelint.sources import SourceFile, collect_sources
from guidelint.syntax import ParseError, parse_source

_console = Console(stderr=True)


def unparseable(path: str, location: Location) -> FileResult:
  """Result for a file the syntax provider could not handle."""
  return FileResult(
    path=path,
    findings=(Finding(
      path=path,
      rule_id=PARSE_ERROR_ID,
      severity=Severity.MUST,
      location=location,
      message="unparseable",
    ),),
  )


class Scanner:
  """Scans source files with the configured rules.

  Configuration is validated on construction, so a bad rule id fails
  before any file is read. Each file gets its own Walker and
  WalkContext; nothing mutable is shared between files, which lets
  them run on a thread pool.
  """

  def __init__(self, registry: RuleRegistry, settings: Settings | None = None):
    self.registry = registry
    self.settings = settings or Settings()
    self._rules = registry.configure(self.settings.rules)

  def scan_file(self, source: SourceFile) -> FileResult:
    """Parse and walk one file. Never raises for bad input."""
    try:
      text = source.read()
      root = parse_source(source.language, text)
    except ParseError as e:
      return unparseable(source.path, e.location)
    except (OSError, UnicodeDecodeError):
      return unparseable(source.path, Location(1, 1))

    context = WalkContext(source.path, text, root, source.language)
    walker = Walker(for_language(self._rules, source.language))
    return walker.walk(context)

  def scan(self, sources: list[SourceFile]) -> Report:
    """Scan files and build the report.

    With a timeout, files that have not started when it expires are
    abandoned and listed as skipped; files already running finish.
    """
    reporter = Reporter(self.registry.order())
    if self.settings.jobs <= 1:
      self._scan_sequential(sources, reporter)
    else:
      self._scan_parallel(sources, reporter)
    return reporter.build()

  def _scan_sequential(self, sources: list[SourceFile], reporter: Reporter) -> None:
    deadline = self._deadline()
    for source in sources:
      if deadline is not None and time.monotonic() >= deadline:
        reporter.skip(source.path)
        continue
      reporter.add(self.scan_file(source))

  def _scan_parallel(self, sources: list[SourceFile], reporter: Reporter) -> None:
    with ThreadPoolExecutor(max_workers=self.settings.jobs) as pool:
      futures = [(source, pool.submit(self.scan_file, source)) for source in sources]
      _, pending = wait([f for _, f in futures], timeout=self.settings.timeout)
      for source, future in futures:
        if future in pending and future.cancel():
          reporter.skip(source.path)
      for _, future in futures:
        if not future.cancelled():
          reporter.add(future.result())

  def _deadline(self) -> float | None:
    if self.settings.timeout is None:
      return None
    return time.monotonic() + self.settings.timeout


def resolve_settings(
  config_path: Path | None = None,
  format_type: OutputFormat | None = None,
  jobs: int | None = None,
  timeout: float | None = None,
) -> Settings:
  """Load the config file and apply command-line overrides.

  Overrides are validated like file values, so `--timeout -1` fails the
  same way `timeout: -1` does.

  Raises:
    ConfigError: If the file or an override is invalid.
  """
  settings = load_config(config_path)
  overrides = {
    key: value
    for key, value in (("format", format_type), ("jobs", jobs), ("timeout", timeout))
    if value is not None
  }
  if not overrides:
    return settings

  try:
    return Settings.model_validate({**settings.model_dump(), **overrides})
  except ValidationError as e:
    raise ConfigError(f"Invalid option: {e}") from e


def run_scan(
  files: list[str] | None = None,
  settings: Settings | None = None,
  registry: RuleRegistry | None = None,
  cwd: Path | None = None,
  no_ignore: bool = False,
) -> Report:
  """Run a scan with the given options.

  Raises:
    ConfigError: Before any file is read, if settings name unknown rules.
    DuplicateRuleError: If the built-in rules are inconsistent.
    FileError: If no lintable files matched.
  """
  registry = registry or build_registry()
  scanner = Scanner(registry, settings)
  sources = collect_sources(files or ["."], cwd=cwd, no_ignore=no_ignore)

  with _console.status(f"Scanning {len(sources)} file{'s' if len(sources) != 1 else ''}..."):
    return scanner.scan(sources)
