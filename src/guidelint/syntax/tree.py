"""Language-neutral syntax tree consumed by the rule engine."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

from guidelint.models import Location


class ParseError(Exception):
  """The syntax provider could not produce a tree for a source."""

  def __init__(self, message: str, line: int = 1, column: int = 1):
    super().__init__(message)
    self.line = line
    self.column = column

  @property
  def location(self) -> Location:
    return Location(self.line, self.column)


@dataclass(frozen=True, eq=False)
class SyntaxNode:
  """An immutable node produced by a syntax provider.

  Nodes compare and hash by identity, so they can key per-file lookup
  tables (parents, identifier roles) even when two subtrees are equal.

  Attributes:
    kind: Neutral node kind (e.g. 'VariableDeclaration', 'Keyword').
    line: 1-indexed start line.
    column: 1-indexed start column.
    text: Source text for leaves and literals, empty otherwise.
    children: Named children in source order.
    fields: Children addressable by grammar field name ('name', 'value').
    attrs: Anonymous tokens worth keeping ('operator', 'keyword').
    native: The provider's own node type, for diagnostics.
  """

  kind: str
  line: int
  column: int
  text: str = ""
  children: tuple["SyntaxNode", ...] = ()
  fields: Mapping[str, "SyntaxNode"] = field(default_factory=dict)
  attrs: Mapping[str, str] = field(default_factory=dict)
  native: str = ""

  def __post_init__(self) -> None:
    if not isinstance(self.fields, MappingProxyType):
      object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
    if not isinstance(self.attrs, MappingProxyType):
      object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))
    if not isinstance(self.children, tuple):
      object.__setattr__(self, "children", tuple(self.children))

  @property
  def location(self) -> Location:
    return Location(self.line, self.column)

  def child(self, name: str) -> "SyntaxNode | None":
    """Return the child stored under a grammar field name."""
    return self.fields.get(name)

  def attr(self, name: str, default: str | None = None) -> str | None:
    return self.attrs.get(name, default)

  def children_of_kind(self, *kinds: str) -> list["SyntaxNode"]:
    return [c for c in self.children if c.kind in kinds]

  def walk(self) -> Iterator["SyntaxNode"]:
    """Yield this node and its descendants in pre-order."""
    stack: list[SyntaxNode] = [self]
    while stack:
      node = stack.pop()
      yield node
      stack.extend(reversed(node.children))

  def __repr__(self) -> str:
    label = f" {self.text!r}" if self.text else ""
    return f"<{self.kind}{label} at {self.line}:{self.column}>"
