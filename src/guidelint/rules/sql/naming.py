"""SQL002: snake_case identifiers."""

import re

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.rules.sql.keywords import POSTGRES_TYPES
from guidelint.syntax.tree import SyntaxNode


class SnakeCaseIdentifiersRule:
  """Detects unquoted table, column and alias names not in snake_case.

  Function names (`COUNT`, `now`) are not identifiers the author chose
  and are skipped, as are PostgreSQL type names sqlparse does not
  recognise (`TIMESTAMPTZ`, `JSONB`). Quoted identifiers are a
  deliberate opt-out.
  """

  SNAKE_CASE = re.compile(r"^[a-z_][a-z0-9_]*$")

  @property
  def id(self) -> str:
    return "SQL002"

  @property
  def name(self) -> str:
    return "snake-case-identifiers"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.SQL

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["Name"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    if self.SNAKE_CASE.match(node.text) or node.text.upper() in POSTGRES_TYPES:
      return CONTINUE
    if _is_function_name(node, context):
      return CONTINUE
    return Visit.proceed(RuleMatch.at(
      node,
      f"Identifier '{node.text}' should be snake_case",
    ))


def _is_function_name(node: SyntaxNode, context: WalkContext) -> bool:
  parent = context.parent(node)
  owner = parent if parent is not None and parent.kind == "Identifier" else node
  function = context.parent(owner)
  return (
    function is not None
    and function.kind == "Function"
    and bool(function.children)
    and function.children[0] is owner
  )


def _create_snake_case() -> SnakeCaseIdentifiersRule:
  return SnakeCaseIdentifiersRule()


register_rule(_create_snake_case)
