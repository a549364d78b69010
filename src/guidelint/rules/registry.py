"""Rule registration and configuration."""

from dataclasses import dataclass
from typing import Callable, Iterator, Mapping

from guidelint.config.loader import ConfigError
from guidelint.config.settings import RuleSettings
from guidelint.models import Language, Severity
from guidelint.rules.base import Rule

RuleFactory = Callable[[], Rule]

# Built-in rule factories, appended at import time by each rule module
_factories: list[RuleFactory] = []


class DuplicateRuleError(Exception):
  """A rule id or name was registered twice."""


@dataclass(frozen=True)
class ConfiguredRule:
  """A registered rule with its effective severity and priority."""

  rule: Rule
  severity: Severity
  order: int

  @property
  def id(self) -> str:
    return self.rule.id


class RuleRegistry:
  """Ordered collection of rules keyed by id.

  Registration order is significant: the Walker invokes rules at a node
  in that order and the report uses it to break ties between findings
  at the same location.
  """

  def __init__(self) -> None:
    self._rules: dict[str, Rule] = {}
    self._names: dict[str, str] = {}

  def register(self, rule: Rule) -> None:
    """Add a rule.

    Raises:
      DuplicateRuleError: If the id or name is already registered.
    """
    if rule.id in self._rules or rule.id in self._names:
      raise DuplicateRuleError(f"Rule '{rule.id}' is already registered")
    if rule.name in self._names or rule.name in self._rules:
      raise DuplicateRuleError(
        f"Rule name '{rule.name}' is already registered "
        f"(by {self._names.get(rule.name, rule.name)})"
      )
    self._rules[rule.id] = rule
    self._names[rule.name] = rule.id

  def all(self) -> list[Rule]:
    """All rules in registration order."""
    return list(self._rules.values())

  def get(self, key: str) -> Rule | None:
    """Look up a rule by id or name."""
    rule_id = self._names.get(key, key)
    return self._rules.get(rule_id)

  def ids(self) -> list[str]:
    return list(self._rules.keys())

  def order(self) -> dict[str, int]:
    """Map rule id to registration index."""
    return {rule_id: index for index, rule_id in enumerate(self._rules)}

  def configure(
    self,
    overrides: Mapping[str, RuleSettings] | None = None,
  ) -> list[ConfiguredRule]:
    """Apply per-rule settings and return the enabled rules.

    Args:
      overrides: Settings keyed by rule id or rule name.

    Raises:
      ConfigError: If a key names no registered rule, or two keys name
        the same rule.
    """
    resolved: dict[str, RuleSettings] = {}
    for key, settings in (overrides or {}).items():
      rule = self.get(key)
      if rule is None:
        raise ConfigError(f"Unknown rule '{key}' in configuration")
      if rule.id in resolved:
        raise ConfigError(f"Rule '{rule.id}' is configured more than once")
      resolved[rule.id] = settings

    configured: list[ConfiguredRule] = []
    for order, rule in enumerate(self._rules.values()):
      settings = resolved.get(rule.id, RuleSettings())
      if not settings.enabled:
        continue
      configured.append(ConfiguredRule(
        rule=rule,
        severity=settings.severity or rule.severity,
        order=order,
      ))
    return configured

  def __contains__(self, key: object) -> bool:
    return isinstance(key, str) and self.get(key) is not None

  def __iter__(self) -> Iterator[Rule]:
    return iter(self.all())

  def __len__(self) -> int:
    return len(self._rules)


def for_language(
  rules: list[ConfiguredRule],
  language: Language,
) -> list[ConfiguredRule]:
  """Filter configured rules down to those checking a language."""
  return [
    r for r in rules
    if r.rule.language is None or r.rule.language == language
  ]


def register_rule(factory: RuleFactory) -> None:
  """Register a built-in rule factory.

  Args:
    factory: Callable that returns a Rule instance.
  """
  _factories.append(factory)


def build_registry() -> RuleRegistry:
  """Create a registry holding every built-in rule.

  The rule subpackages register their factories when guidelint.rules is
  imported, always in the order common, javascript, sql; within a
  subpackage its __init__ fixes the order.

  Raises:
    DuplicateRuleError: If two built-in rules share an id or name.
  """
  registry = RuleRegistry()
  for factory in _factories:
    registry.register(factory())
  return registry
