"""Identifier role classification for JavaScript declarations.

Casing conventions depend on what an identifier names: a constructor is
PascalCase, a magic constant is UPPER_SNAKE_CASE, and so on. Roles are
inferred once per file from declaration context and shared through the
WalkContext, so no rule re-derives them.
"""

import re
from enum import Enum
from typing import Iterator

from guidelint.syntax.tree import SyntaxNode


class IdentifierRole(Enum):
  """What a declared identifier names."""

  BINDING = "binding"
  CONSTRUCTOR = "constructor"
  CONSTANT = "constant"
  PRIVATE = "private"


# role -> (pattern, human-readable casing)
ROLE_CASING: dict[IdentifierRole, tuple[re.Pattern[str], str]] = {
  IdentifierRole.BINDING: (re.compile(r"^(?:_|[a-z$][a-zA-Z0-9$]*)$"), "camelCase"),
  IdentifierRole.CONSTRUCTOR: (re.compile(r"^[A-Z][a-zA-Z0-9]*$"), "PascalCase"),
  IdentifierRole.CONSTANT: (re.compile(r"^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$"), "UPPER_SNAKE_CASE"),
  IdentifierRole.PRIVATE: (re.compile(r"^_[a-z][a-zA-Z0-9]*$"), "_camelCase"),
}

_UPPER_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")
_CONSTANT_VALUES = frozenset(["Literal", "TemplateLiteral"])
# Operators that keep a value constant when every operand is constant
_CONSTANT_OPERATORS = frozenset(["UnaryExpression", "BinaryExpression", "ParenthesizedExpression"])
_CLASS_KINDS = frozenset(["ClassDeclaration", "ClassExpression"])
_FUNCTION_KINDS = frozenset(["FunctionDeclaration", "GeneratorFunctionDeclaration"])
_MEMBER_KINDS = frozenset(["MethodDefinition", "PropertyDefinition"])


def classify_roles(root: SyntaxNode) -> dict[SyntaxNode, IdentifierRole]:
  """Assign a role to every declaring identifier under root.

  Identifiers that only reference a binding (calls, member access,
  imports) get no role.
  """
  constructed = _constructed_names(root)
  roles: dict[SyntaxNode, IdentifierRole] = {}

  for node in root.walk():
    if node.kind in _CLASS_KINDS:
      name = node.child("name")
      if _is_identifier(name):
        roles[name] = IdentifierRole.CONSTRUCTOR

    elif node.kind in _FUNCTION_KINDS:
      name = node.child("name")
      if _is_identifier(name):
        roles[name] = (
          IdentifierRole.CONSTRUCTOR if name.text in constructed else IdentifierRole.BINDING
        )

    elif node.kind == "VariableDeclaration":
      keyword = node.attr("keyword", "")
      for declarator in node.children_of_kind("VariableDeclarator"):
        _classify_declarator(declarator, keyword, constructed, roles)

    elif node.kind in _MEMBER_KINDS:
      name = node.child("name") or node.child("property")
      if _is_identifier(name) and name.native != "private_property_identifier":
        roles[name] = _member_role(node, name)

    elif node.kind == "FormalParameters":
      for param in node.children:
        for binding in _pattern_bindings(param):
          roles[binding] = IdentifierRole.BINDING

    elif node.kind in ("ArrowFunction", "CatchClause"):
      param = node.child("parameter")
      if param is not None:
        for binding in _pattern_bindings(param):
          roles[binding] = IdentifierRole.BINDING

  return roles


def _classify_declarator(
  declarator: SyntaxNode,
  keyword: str,
  constructed: set[str],
  roles: dict[SyntaxNode, IdentifierRole],
) -> None:
  name = declarator.child("name")
  value = declarator.child("value")
  if name is None:
    return

  if not _is_identifier(name):
    for binding in _pattern_bindings(name):
      roles[binding] = IdentifierRole.BINDING
    return

  if value is not None and value.kind == "ClassExpression":
    roles[name] = IdentifierRole.CONSTRUCTOR
  elif name.text in constructed:
    roles[name] = IdentifierRole.CONSTRUCTOR
  elif (
    keyword == "const"
    and _is_constant_value(value)
    and _UPPER_NAME.match(name.text)
  ):
    roles[name] = IdentifierRole.CONSTANT
  else:
    roles[name] = IdentifierRole.BINDING


def _member_role(member: SyntaxNode, name: SyntaxNode) -> IdentifierRole:
  if name.text.startswith("_"):
    return IdentifierRole.PRIVATE
  value = member.child("value")
  if (
    member.kind == "PropertyDefinition"
    and _is_constant_value(value)
    and _UPPER_NAME.match(name.text)
  ):
    return IdentifierRole.CONSTANT
  return IdentifierRole.BINDING


def _constructed_names(root: SyntaxNode) -> set[str]:
  """Names used as the callee of a `new` expression."""
  names: set[str] = set()
  for node in root.walk():
    if node.kind == "NewExpression":
      callee = node.child("constructor")
      if _is_identifier(callee):
        names.add(callee.text)
  return names


def _pattern_bindings(node: SyntaxNode) -> Iterator[SyntaxNode]:
  """Yield identifiers bound by a parameter or destructuring pattern."""
  if node.kind == "Identifier":
    yield node
  elif node.kind == "PairPattern":
    value = node.child("value")
    if value is not None:
      yield from _pattern_bindings(value)
  elif node.kind in ("AssignmentPattern", "ObjectAssignmentPattern"):
    left = node.child("left")
    if left is not None:
      yield from _pattern_bindings(left)
  elif node.kind in ("ObjectPattern", "ArrayPattern", "RestPattern"):
    for child in node.children:
      yield from _pattern_bindings(child)


def _is_identifier(node: SyntaxNode | None) -> bool:
  return node is not None and node.kind == "Identifier"


def _is_constant_value(node: SyntaxNode | None) -> bool:
  """True for literals and expressions built only from literals (`60 * 1000`, `-1`)."""
  if node is None:
    return False
  if node.kind in _CONSTANT_VALUES:
    return True
  if node.kind in _CONSTANT_OPERATORS:
    return bool(node.children) and all(_is_constant_value(c) for c in node.children)
  return False
