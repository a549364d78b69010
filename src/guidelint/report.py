"""Aggregation of per-file results into a sorted report."""

from typing import Iterable, Mapping

from guidelint.models import FileResult, Finding, Report, RuleCrashed

PARSE_ERROR_ID = "parse-error"


class Reporter:
  """Collects per-file results and builds one deterministic Report.

  Results are kept as separate per-file partitions and only merged in
  build(), so producers on other threads never share a list being
  sorted or mutated in place.
  """

  def __init__(self, rule_order: Mapping[str, int] | None = None):
    self._rule_order = dict(rule_order or {})
    self._results: list[FileResult] = []
    self._skipped: list[str] = []

  def add(self, result: FileResult) -> None:
    self._results.append(result)

  def add_all(self, results: Iterable[FileResult]) -> None:
    for result in results:
      self.add(result)

  def skip(self, path: str) -> None:
    """Record a file that was abandoned before its scan started."""
    self._skipped.append(path)

  def build(self) -> Report:
    # duplicate paths (same file passed twice) are reported once
    results: dict[str, FileResult] = {}
    for result in self._results:
      results.setdefault(result.path, result)

    findings = [f for r in results.values() for f in r.findings]
    crashes = [c for r in results.values() for c in r.crashes]

    return Report(
      findings=tuple(sorted(findings, key=self._finding_key)),
      crashes=tuple(sorted(crashes, key=_crash_key)),
      files_scanned=len(results),
      skipped=tuple(sorted(set(self._skipped))),
    )

  def _finding_key(self, finding: Finding) -> tuple:
    order = -1 if finding.rule_id == PARSE_ERROR_ID else self._rule_order.get(
      finding.rule_id, len(self._rule_order),
    )
    return (
      finding.path,
      finding.location,
      order,
      finding.rule_id,
      finding.message,
    )


def _crash_key(crash: RuleCrashed) -> tuple:
  return (crash.path, crash.location, crash.rule_id, crash.cause)
