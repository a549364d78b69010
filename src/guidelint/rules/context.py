"""Per-file read-only state shared by rules during one walk."""

from typing import Iterator

from guidelint.models import Language
from guidelint.rules.roles import IdentifierRole, classify_roles
from guidelint.syntax.tree import SyntaxNode


class WalkContext:
  """Read-only view of one file for the duration of its traversal.

  Holds the source, the tree, parent links and identifier roles. A
  context is owned by a single Walker run and never shared between
  files.
  """

  def __init__(
    self,
    path: str,
    source: str,
    root: SyntaxNode,
    language: Language,
    roles: dict[SyntaxNode, IdentifierRole] | None = None,
  ):
    self._path = path
    self._source = source
    self._root = root
    self._language = language
    self._lines = tuple(source.split("\n"))
    self._parents: dict[SyntaxNode, SyntaxNode] = {}
    for node in root.walk():
      for child in node.children:
        self._parents[child] = node
    self._roles = dict(roles) if roles is not None else classify_roles(root)

  @property
  def path(self) -> str:
    return self._path

  @property
  def source(self) -> str:
    return self._source

  @property
  def root(self) -> SyntaxNode:
    return self._root

  @property
  def language(self) -> Language:
    return self._language

  @property
  def lines(self) -> tuple[str, ...]:
    return self._lines

  def line_text(self, line: int) -> str:
    """Return a 1-indexed source line, or '' when out of range."""
    if 1 <= line <= len(self._lines):
      return self._lines[line - 1]
    return ""

  def parent(self, node: SyntaxNode) -> SyntaxNode | None:
    return self._parents.get(node)

  def ancestors(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield parents from the nearest up to the root."""
    current = self._parents.get(node)
    while current is not None:
      yield current
      current = self._parents.get(current)

  def has_ancestor(self, node: SyntaxNode, *kinds: str) -> bool:
    return any(a.kind in kinds for a in self.ancestors(node))

  def siblings(self, node: SyntaxNode) -> tuple[SyntaxNode, ...]:
    """Children of node's parent, excluding node itself."""
    parent = self._parents.get(node)
    if parent is None:
      return ()
    return tuple(c for c in parent.children if c is not node)

  def role(self, node: SyntaxNode) -> IdentifierRole | None:
    """Role of a declaring identifier, or None for references."""
    return self._roles.get(node)
