"""Rule engine: rule protocol, registry and walker."""

from guidelint.rules.base import CONTINUE, Rule, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.engine import Walker
from guidelint.rules.registry import (
  ConfiguredRule,
  DuplicateRuleError,
  RuleRegistry,
  build_registry,
  register_rule,
)

# Built-in rules register at import time; import order is registration order
from guidelint.rules import common, javascript, sql  # noqa: E402,F401  isort: skip

__all__ = [
  "CONTINUE",
  "ConfiguredRule",
  "DuplicateRuleError",
  "Rule",
  "RuleMatch",
  "RuleRegistry",
  "Visit",
  "WalkContext",
  "Walker",
  "build_registry",
  "register_rule",
]
