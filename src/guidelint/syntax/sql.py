"""SQL syntax provider backed by sqlparse's token stream."""

import sqlparse
from sqlparse import tokens as T
from sqlparse.exceptions import SQLParseError
from sqlparse.sql import Token

from guidelint.syntax.tree import ParseError, SyntaxNode


class _Position:
  """Tracks line/column while walking tokens in source order."""

  def __init__(self) -> None:
    self.line = 1
    self.column = 1

  def advance(self, text: str) -> None:
    newlines = text.count("\n")
    if newlines:
      self.line += newlines
      self.column = len(text) - text.rfind("\n")
    else:
      self.column += len(text)


def parse_sql(source: str) -> SyntaxNode:
  """Parse SQL source into a neutral tree of statements and tokens.

  sqlparse is non-validating, so it only fails on an error token (e.g.
  an unterminated quote) or when a statement exceeds its grouping
  limits on token count and nesting depth.

  Raises:
    ParseError: If the source cannot be turned into a tree.
  """
  position = _Position()
  statements = []
  try:
    for statement in sqlparse.parse(source):
      node = _convert(statement, position)
      if node is not None:
        statements.append(node)
  except (SQLParseError, RecursionError) as e:
    raise ParseError("unparseable", position.line, position.column) from e

  return SyntaxNode(
    kind="Script",
    line=1,
    column=1,
    children=tuple(statements),
    native="script",
  )


def leaf_kind(ttype: object) -> str:
  """Map a sqlparse token type to a neutral leaf kind."""
  if ttype in T.Keyword:
    return "Keyword"
  if ttype in T.Name.Builtin:
    return "Builtin"
  if ttype in T.Name.Placeholder:
    return "Placeholder"
  if ttype in T.Name:
    return "Name"
  if ttype in T.Wildcard:
    return "Wildcard"
  if ttype in T.Comment:
    return "Comment"
  if ttype in T.Literal.String.Symbol:
    return "QuotedName"
  if ttype in T.Literal:
    return "Literal"
  if ttype in T.Operator:
    return "Operator"
  if ttype in T.Punctuation:
    return "Punctuation"
  return "Token"


def _convert(token: Token, position: _Position) -> SyntaxNode | None:
  if token.is_group:
    children = []
    for sub in token.tokens:
      node = _convert(sub, position)
      if node is not None:
        children.append(node)
    if not children:
      return None
    # Groups start at their first non-whitespace token
    return SyntaxNode(
      kind=type(token).__name__,
      line=children[0].line,
      column=children[0].column,
      children=tuple(children),
      native=type(token).__name__,
    )

  line, column = position.line, position.column
  position.advance(token.value)

  if token.ttype in T.Error:
    raise ParseError("unparseable", line, column)
  if token.is_whitespace:
    return None

  return SyntaxNode(
    kind=leaf_kind(token.ttype),
    line=line,
    column=column,
    text=token.value,
    attrs={"ttype": str(token.ttype)},
    native=str(token.ttype),
  )
