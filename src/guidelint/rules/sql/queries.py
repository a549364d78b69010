"""SQL003: Explicit column lists."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode


class NoSelectStarRule:
  """Detects `SELECT *` and `table.*` column lists.

  `COUNT(*)` and multiplication are not column lists.
  """

  @property
  def id(self) -> str:
    return "SQL003"

  @property
  def name(self) -> str:
    return "no-select-star"

  @property
  def severity(self) -> Severity:
    return Severity.SHOULD

  @property
  def language(self) -> Language | None:
    return Language.SQL

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["Wildcard"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    parent = context.parent(node)
    if parent is not None and parent.kind == "Operation":
      return CONTINUE
    if context.has_ancestor(node, "Function"):
      return CONTINUE
    return Visit.proceed(RuleMatch.at(
      node,
      "Avoid SELECT *, list the columns explicitly",
    ))


def _create_no_select_star() -> NoSelectStarRule:
  return NoSelectStarRule()


register_rule(_create_no_select_star)
