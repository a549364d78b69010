"""JavaScript syntax provider backed by tree-sitter."""

from functools import lru_cache

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from guidelint.syntax.tree import ParseError, SyntaxNode

# tree-sitter node types whose neutral kind is not simply the PascalCase name
_KIND_OVERRIDES: dict[str, str] = {
  "lexical_declaration": "VariableDeclaration",
  "variable_declaration": "VariableDeclaration",
  "ternary_expression": "ConditionalExpression",
  "class": "ClassExpression",
  "field_definition": "PropertyDefinition",
  "identifier": "Identifier",
  "property_identifier": "Identifier",
  "shorthand_property_identifier": "Identifier",
  "shorthand_property_identifier_pattern": "Identifier",
  "private_property_identifier": "Identifier",
  "string": "Literal",
  "number": "Literal",
  "regex": "Literal",
  "true": "Literal",
  "false": "Literal",
  "null": "Literal",
  "undefined": "Literal",
  "template_string": "TemplateLiteral",
}

# Kinds that keep their full source text even when they have named children
_TEXT_KINDS = frozenset(["Literal", "TemplateLiteral", "Comment"])


@lru_cache(maxsize=1)
def _language() -> Language:
  return Language(tree_sitter_javascript.language())


def parse_javascript(source: str) -> SyntaxNode:
  """Parse JavaScript source into a neutral syntax tree.

  Raises:
    ParseError: If tree-sitter recovered from any syntax error.
  """
  data = source.encode("utf-8")
  tree = Parser(_language()).parse(data)
  lines = data.split(b"\n")
  root = tree.root_node

  if root.has_error:
    line, column = _error_position(root, lines)
    raise ParseError("unparseable", line, column)

  try:
    return _convert(root, lines)
  except RecursionError as e:
    raise ParseError("unparseable") from e


def node_kind(node_type: str) -> str:
  """Map a tree-sitter node type to its neutral kind."""
  override = _KIND_OVERRIDES.get(node_type)
  if override:
    return override
  return "".join(part.capitalize() for part in node_type.split("_"))


def _convert(node: Node, lines: list[bytes]) -> SyntaxNode:
  children: list[SyntaxNode] = []
  fields: dict[str, SyntaxNode] = {}
  attrs: dict[str, str] = {}

  cursor = node.walk()
  if cursor.goto_first_child():
    while True:
      child = cursor.node
      field_name = cursor.field_name
      if child.is_named:
        converted = _convert(child, lines)
        children.append(converted)
        if field_name and field_name not in fields:
          fields[field_name] = converted
      elif field_name:
        attrs[field_name] = _text(child)
      if not cursor.goto_next_sibling():
        break

  kind = node_kind(node.type)
  if kind == "VariableDeclaration" and node.child_count:
    attrs["keyword"] = _text(node.children[0])

  text = ""
  if not children or kind in _TEXT_KINDS:
    text = _text(node)

  row, byte_column = node.start_point
  return SyntaxNode(
    kind=kind,
    line=row + 1,
    column=_column(lines, row, byte_column),
    text=text,
    children=tuple(children),
    fields=fields,
    attrs=attrs,
    native=node.type,
  )


def _text(node: Node) -> str:
  raw = node.text
  return raw.decode("utf-8", errors="replace") if raw else ""


def _column(lines: list[bytes], row: int, byte_column: int) -> int:
  """Convert a byte offset within a line to a 1-indexed character column."""
  if row >= len(lines):
    return byte_column + 1
  prefix = lines[row][:byte_column]
  return len(prefix.decode("utf-8", errors="replace")) + 1


def _error_position(root: Node, lines: list[bytes]) -> tuple[int, int]:
  """Locate the first ERROR or MISSING node in source order."""
  stack = [root]
  while stack:
    node = stack.pop()
    if node.type == "ERROR" or node.is_missing:
      row, byte_column = node.start_point
      return row + 1, _column(lines, row, byte_column)
    if node.has_error:
      stack.extend(reversed(node.children))
  return 1, 1
