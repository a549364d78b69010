"""JS001/JS002: Variable declaration conventions."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode


class NoVarDeclarationRule:
  """Detects `var` declarations.

  `var` is function-scoped and hoisted; the guide requires `const` for
  bindings that are never reassigned and `let` otherwise.
  """

  @property
  def id(self) -> str:
    return "JS001"

  @property
  def name(self) -> str:
    return "no-var"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["VariableDeclaration"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    if node.attr("keyword") != "var":
      return CONTINUE
    return Visit.proceed(RuleMatch.at(
      node,
      "Unexpected var, use let or const instead",
      suggestion="Use const, or let if the binding is reassigned",
    ))


class SingleBindingPerDeclarationRule:
  """Detects declarations introducing more than one binding.

  One declaration per variable makes it easy to add, remove and
  reorder declarations without touching punctuation.
  """

  @property
  def id(self) -> str:
    return "JS002"

  @property
  def name(self) -> str:
    return "one-binding-per-declaration"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["VariableDeclaration"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    declarators = node.children_of_kind("VariableDeclarator")
    if len(declarators) <= 1:
      return CONTINUE
    keyword = node.attr("keyword") or "const"
    return Visit.proceed(RuleMatch.at(
      node,
      f"Declaration introduces {len(declarators)} bindings, expected one",
      suggestion=f"Split into one '{keyword}' declaration per variable",
    ))


def _create_no_var() -> NoVarDeclarationRule:
  return NoVarDeclarationRule()


def _create_single_binding() -> SingleBindingPerDeclarationRule:
  return SingleBindingPerDeclarationRule()


register_rule(_create_no_var)
register_rule(_create_single_binding)
