"""Rule abstractions for style conformance checking."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from guidelint.models import Language, Severity
from guidelint.syntax.tree import SyntaxNode

if TYPE_CHECKING:
  from guidelint.rules.context import WalkContext


@dataclass(frozen=True)
class RuleMatch:
  """A single rule match found at a node.

  This is an intermediate representation that the Walker turns into a
  Finding, stamping the rule id, the configured severity and the path.
  Keeping it separate lets severity overrides live outside the rules.
  """

  line: int
  column: int
  message: str
  suggestion: str | None = None

  @classmethod
  def at(
    cls,
    node: SyntaxNode,
    message: str,
    suggestion: str | None = None,
  ) -> "RuleMatch":
    return cls(node.line, node.column, message, suggestion)


@dataclass(frozen=True)
class Visit:
  """Result of evaluating one rule at one node.

  Besides its matches, a rule can ask the Walker not to descend into
  the node's children. That request is part of the return value so a
  rule stays a plain function of (node, context).
  """

  matches: tuple[RuleMatch, ...] = ()
  skip_children: bool = False

  @classmethod
  def proceed(cls, *matches: RuleMatch) -> "Visit":
    return cls(matches=tuple(matches))

  @classmethod
  def skip(cls, *matches: RuleMatch) -> "Visit":
    return cls(matches=tuple(matches), skip_children=True)


CONTINUE = Visit()


class Rule(Protocol):
  """Protocol for style rules.

  Each rule encodes one documented convention. Rules are stateless and
  must not mutate the tree; the same (node, context) always produces
  the same Visit.

  Example:
    class MyRule:
      @property
      def id(self) -> str:
        return "JS999"

      @property
      def name(self) -> str:
        return "my-rule"

      @property
      def severity(self) -> Severity:
        return Severity.SHOULD

      @property
      def language(self) -> Language | None:
        return Language.JAVASCRIPT

      @property
      def applies_to(self) -> frozenset[str]:
        return frozenset(["Identifier"])

      def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
        return CONTINUE
  """

  @property
  def id(self) -> str:
    """Unique identifier for this rule (e.g., 'JS001')."""
    ...

  @property
  def name(self) -> str:
    """Human-readable rule name (e.g., 'no-var')."""
    ...

  @property
  def severity(self) -> Severity:
    """Default severity, before configuration overrides."""
    ...

  @property
  def language(self) -> Language | None:
    """Language this rule checks, or None for every language."""
    ...

  @property
  def applies_to(self) -> frozenset[str]:
    """Node kinds the Walker should invoke this rule on."""
    ...

  def evaluate(self, node: SyntaxNode, context: "WalkContext") -> Visit:
    """Evaluate a node.

    Args:
      node: A node whose kind is in applies_to.
      context: Read-only per-file state (source, parents, roles).

    Returns:
      A Visit with zero or more matches.
    """
    ...
