"""Syntax provider selection by file extension."""

import os
from typing import Callable

from guidelint.models import Language
from guidelint.syntax.javascript import parse_javascript
from guidelint.syntax.sql import parse_sql
from guidelint.syntax.tree import SyntaxNode

Provider = Callable[[str], SyntaxNode]

LANGUAGE_EXTENSIONS: dict[Language, list[str]] = {
  Language.JAVASCRIPT: ["js", "jsx", "mjs", "cjs"],
  Language.SQL: ["sql", "pgsql"],
}

_PROVIDERS: dict[Language, Provider] = {
  Language.JAVASCRIPT: parse_javascript,
  Language.SQL: parse_sql,
}


def language_for(path: str) -> Language | None:
  """Detect the source language from a file extension."""
  _, ext = os.path.splitext(path)
  ext = ext.lstrip(".").lower()
  for language, extensions in LANGUAGE_EXTENSIONS.items():
    if ext in extensions:
      return language
  return None


def parse_source(language: Language, source: str) -> SyntaxNode:
  """Parse source text with the provider registered for a language.

  Raises:
    ParseError: If the provider cannot produce a tree.
  """
  return _PROVIDERS[language](source)
