"""JS003: Strict equality."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode


class PreferStrictEqualityRule:
  """Detects loose equality operators.

  `==` and `!=` coerce their operands; `===` and `!==` do not.
  """

  LOOSE_OPERATORS = {"==": "===", "!=": "!=="}

  @property
  def id(self) -> str:
    return "JS003"

  @property
  def name(self) -> str:
    return "strict-equality"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["BinaryExpression"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    operator = node.attr("operator")
    strict = self.LOOSE_OPERATORS.get(operator or "")
    if strict is None:
      return CONTINUE
    return Visit.proceed(RuleMatch.at(
      node,
      f"Expected '{strict}' and instead saw '{operator}'",
      suggestion=f"Use {strict}",
    ))


def _create_strict_equality() -> PreferStrictEqualityRule:
  return PreferStrictEqualityRule()


register_rule(_create_strict_equality)
