"""Walker that drives rules over a syntax tree."""

import traceback
from typing import Sequence

from guidelint.models import Finding, FileResult, Location, RuleCrashed
from guidelint.rules.base import Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import ConfiguredRule
from guidelint.syntax.tree import SyntaxNode


class Walker:
  """Single-pass, pre-order traversal that applies rules to nodes.

  At each node, the rules whose applies_to contains the node kind run
  in registration order. A rule that raises is recorded as RuleCrashed
  and the walk continues, so one faulty rule never hides findings from
  the others. A rule can prune the node's subtree by returning
  Visit.skip(); the remaining rules at that node still run.

  Example:
    walker = Walker(registry.configure(settings.rules))
    result = walker.walk(context)
  """

  def __init__(self, rules: Sequence[ConfiguredRule]):
    self._dispatch: dict[str, list[ConfiguredRule]] = {}
    for configured in sorted(rules, key=lambda r: r.order):
      for kind in configured.rule.applies_to:
        self._dispatch.setdefault(kind, []).append(configured)

  def walk(self, context: WalkContext) -> FileResult:
    """Traverse context.root once and collect findings and crashes.

    Findings come back sorted by (line, column, rule order), which is
    the order the report uses within a file.
    """
    findings: list[tuple[int, Finding]] = []
    crashes: list[RuleCrashed] = []

    stack: list[SyntaxNode] = [context.root]
    while stack:
      node = stack.pop()
      skip_children = False

      for configured in self._dispatch.get(node.kind, ()):
        try:
          visit = configured.rule.evaluate(node, context)
          if not isinstance(visit, Visit):
            raise TypeError(
              f"evaluate() returned {type(visit).__name__}, expected Visit"
            )
        except Exception as e:
          crashes.append(RuleCrashed(
            path=context.path,
            rule_id=configured.id,
            location=node.location,
            cause=f"{type(e).__name__}: {e}",
            traceback=traceback.format_exc(),
          ))
          continue

        for match in visit.matches:
          findings.append((configured.order, Finding(
            path=context.path,
            rule_id=configured.id,
            severity=configured.severity,
            location=Location(match.line, match.column),
            message=match.message,
            suggestion=match.suggestion,
          )))
        skip_children = skip_children or visit.skip_children

      if not skip_children:
        stack.extend(reversed(node.children))

    # sort is stable: equal keys keep traversal order
    findings.sort(key=lambda pair: (pair[1].location, pair[0]))
    return FileResult(
      path=context.path,
      findings=tuple(f for _, f in findings),
      crashes=tuple(crashes),
    )
