"""Core domain models for style conformance checking."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence


class Severity(Enum):
  """Finding severity, carried over from the guides' modal language."""

  MUST = "must"
  SHOULD = "should"


class Language(Enum):
  """Source languages with a syntax provider."""

  JAVASCRIPT = "javascript"
  SQL = "sql"


class OutputFormat(Enum):
  """Report rendering formats."""

  TEXT = "text"
  TERMINAL = "terminal"
  JSON = "json"
  GITHUB = "github"


@dataclass(frozen=True, order=True)
class Location:
  """1-indexed line and column in a source file."""

  line: int
  column: int


@dataclass(frozen=True)
class Finding:
  """A single violation of one rule at one source location."""

  path: str
  rule_id: str
  severity: Severity
  location: Location
  message: str
  suggestion: str | None = None

  @property
  def line(self) -> int:
    return self.location.line

  @property
  def column(self) -> int:
    return self.location.column


@dataclass(frozen=True)
class RuleCrashed:
  """A rule raised while evaluating a node.

  This is an engine fault, not a style violation: it makes the scan of
  the file untrustworthy and is reported separately from findings.
  """

  path: str
  rule_id: str
  location: Location
  cause: str
  traceback: str = ""


@dataclass(frozen=True)
class FileResult:
  """Everything one file's scan produced."""

  path: str
  findings: Sequence[Finding] = ()
  crashes: Sequence[RuleCrashed] = ()


@dataclass(frozen=True)
class Report:
  """Sorted, immutable outcome of one run."""

  findings: Sequence[Finding]
  crashes: Sequence[RuleCrashed] = ()
  files_scanned: int = 0
  skipped: Sequence[str] = field(default_factory=tuple)

  @property
  def error_count(self) -> int:
    return sum(1 for f in self.findings if f.severity == Severity.MUST)

  @property
  def warning_count(self) -> int:
    return sum(1 for f in self.findings if f.severity == Severity.SHOULD)

  @property
  def exit_code(self) -> int:
    """0 when clean or SHOULD-only, 1 on MUST findings, 2 on rule crashes."""
    if self.crashes:
      return 2
    if self.error_count:
      return 1
    return 0

  def by_file(self) -> dict[str, list[Finding]]:
    """Group findings by path, preserving report order."""
    grouped: dict[str, list[Finding]] = {}
    for finding in self.findings:
      grouped.setdefault(finding.path, []).append(finding)
    return grouped

  @property
  def summary(self) -> str:
    files = _plural(self.files_scanned, "file")
    if not self.findings and not self.crashes:
      summary = f"No issues found in {files}"
    else:
      parts = [
        _plural(self.error_count, "error"),
        _plural(self.warning_count, "warning"),
      ]
      if self.crashes:
        parts.append(_plural(len(self.crashes), "rule crash", "rule crashes"))
      summary = f"{', '.join(parts)} in {files}"
    if self.skipped:
      summary += f" ({len(self.skipped)} skipped)"
    return summary + "."


def _plural(count: int, singular: str, plural: str | None = None) -> str:
  word = singular if count == 1 else (plural or f"{singular}s")
  return f"{count} {word}"
