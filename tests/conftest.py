"""Pytest fixtures."""

from typing import Callable

import pytest
from guidelint.models import FileResult, Language, Severity
from guidelint.rules import RuleMatch, RuleRegistry, Visit, WalkContext, Walker, build_registry
from guidelint.rules.registry import for_language
from guidelint.syntax import SyntaxNode, parse_source

Lint = Callable[..., FileResult]


@pytest.fixture(scope="session")
def registry() -> RuleRegistry:
  return build_registry()


@pytest.fixture
def lint(registry: RuleRegistry) -> Lint:
  """Parse source and walk it with every built-in rule for its language."""

  def _lint(
    source: str,
    language: Language = Language.JAVASCRIPT,
    path: str | None = None,
  ) -> FileResult:
    path = path or ("test.sql" if language == Language.SQL else "test.js")
    root = parse_source(language, source)
    context = WalkContext(path, source, root, language)
    return Walker(for_language(registry.configure(), language)).walk(context)

  return _lint


def node(
  kind: str,
  line: int = 1,
  column: int = 1,
  *children: SyntaxNode,
  text: str = "",
  **attrs: str,
) -> SyntaxNode:
  """Build a hand-made syntax node for engine tests."""
  return SyntaxNode(kind=kind, line=line, column=column, text=text, children=children, attrs=attrs)


def make_context(root: SyntaxNode, path: str = "test.js", source: str = "") -> WalkContext:
  return WalkContext(path, source, root, Language.JAVASCRIPT, roles={})


class MockRule:
  """Configurable rule double that records the nodes it visits."""

  def __init__(
    self,
    rule_id: str = "TEST001",
    name: str | None = None,
    kinds: tuple[str, ...] = ("Leaf",),
    severity: Severity = Severity.MUST,
    language: Language | None = None,
    skip: bool = False,
    fail: bool = False,
  ):
    self._id = rule_id
    self._name = name or rule_id.lower()
    self._kinds = frozenset(kinds)
    self._severity = severity
    self._language = language
    self._skip = skip
    self._fail = fail
    self.visited: list[SyntaxNode] = []

  @property
  def id(self) -> str:
    return self._id

  @property
  def name(self) -> str:
    return self._name

  @property
  def severity(self) -> Severity:
    return self._severity

  @property
  def language(self) -> Language | None:
    return self._language

  @property
  def applies_to(self) -> frozenset[str]:
    return self._kinds

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    self.visited.append(node)
    if self._fail:
      raise RuntimeError("boom")
    match = RuleMatch.at(node, f"{self._id} at {node.text or node.kind}")
    return Visit.skip(match) if self._skip else Visit.proceed(match)
