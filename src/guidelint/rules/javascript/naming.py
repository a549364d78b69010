"""JS004: Identifier casing by role."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.rules.roles import ROLE_CASING, IdentifierRole
from guidelint.syntax.tree import SyntaxNode

_ROLE_LABELS = {
  IdentifierRole.BINDING: "Identifier",
  IdentifierRole.CONSTRUCTOR: "Constructor",
  IdentifierRole.CONSTANT: "Constant",
  IdentifierRole.PRIVATE: "Private member",
}


class CasingConventionRule:
  """Checks declared identifiers against the casing for their role.

  - bindings, functions and methods: camelCase
  - classes and functions called with `new`: PascalCase
  - `const` primitives named in capitals: UPPER_SNAKE_CASE
  - class members with a leading underscore: _camelCase

  Only declarations are checked; references to names declared
  elsewhere (imports, globals, properties of other objects) are not.
  """

  @property
  def id(self) -> str:
    return "JS004"

  @property
  def name(self) -> str:
    return "identifier-casing"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.JAVASCRIPT

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["Identifier"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    role = context.role(node)
    if role is None:
      return CONTINUE

    pattern, casing = ROLE_CASING[role]
    if pattern.match(node.text):
      return CONTINUE

    return Visit.proceed(RuleMatch.at(
      node,
      f"{_ROLE_LABELS[role]} '{node.text}' should be {casing}",
    ))


def _create_casing() -> CasingConventionRule:
  return CasingConventionRule()


register_rule(_create_casing)
