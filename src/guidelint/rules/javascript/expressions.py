"""JS005/JS006: Expression conventions."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode


def _unwrap(node: SyntaxNode | None) -> SyntaxNode | None:
  while node is not None and node.kind == "ParenthesizedExpression" and node.children:
    node = node.children[0]
  return node


class NoNestedTernaryRule:
  """Detects conditional expressions nested in other conditionals.

  Reported once, at the outermost conditional of a nested group.
  """

  @property
  def id(self) -> str:
    return "JS005"

  @property
  def name(self) -> str:
    return "no-nested-ternary"

  @property
  def severity(self) -> Severity:
    return Severity.SHOULD

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["ConditionalExpression"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    nested = any(
      _unwrap(child).kind == "ConditionalExpression"
      for child in node.children
    )
    if not nested:
      return CONTINUE

    parent = context.parent(node)
    while parent is not None and parent.kind == "ParenthesizedExpression":
      parent = context.parent(parent)
    if parent is not None and parent.kind == "ConditionalExpression":
      return CONTINUE

    return Visit.proceed(RuleMatch.at(
      node,
      "Nested ternary expression",
      suggestion="Split into separate statements or an if/else chain",
    ))


class LiteralConstructionRule:
  """Detects `new Object()` and `new Array()`."""

  LITERALS = {"Object": "{}", "Array": "[]"}

  @property
  def id(self) -> str:
    return "JS006"

  @property
  def name(self) -> str:
    return "literal-construction"

  @property
  def severity(self) -> Severity:
    return Severity.SHOULD

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["NewExpression"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    callee = node.child("constructor")
    if callee is None or callee.kind != "Identifier":
      return CONTINUE
    literal = self.LITERALS.get(callee.text)
    if literal is None:
      return CONTINUE
    return Visit.proceed(RuleMatch.at(
      node,
      f"Use literal syntax {literal} instead of new {callee.text}()",
      suggestion=f"Replace with {literal}",
    ))


def _create_no_nested_ternary() -> NoNestedTernaryRule:
  return NoNestedTernaryRule()


def _create_literal_construction() -> LiteralConstructionRule:
  return LiteralConstructionRule()


register_rule(_create_no_nested_ternary)
register_rule(_create_literal_construction)
