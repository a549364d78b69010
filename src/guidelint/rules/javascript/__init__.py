"""JavaScript style rules."""

from guidelint.rules.javascript.declarations import (
  NoVarDeclarationRule,
  SingleBindingPerDeclarationRule,
)
from guidelint.rules.javascript.equality import PreferStrictEqualityRule
from guidelint.rules.javascript.naming import CasingConventionRule
from guidelint.rules.javascript.expressions import (  # isort: skip
  LiteralConstructionRule,
  NoNestedTernaryRule,
)

__all__ = [
  "CasingConventionRule",
  "LiteralConstructionRule",
  "NoNestedTernaryRule",
  "NoVarDeclarationRule",
  "PreferStrictEqualityRule",
  "SingleBindingPerDeclarationRule",
]
