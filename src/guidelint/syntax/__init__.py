"""Syntax providers and the neutral tree they produce."""

from guidelint.syntax.provider import LANGUAGE_EXTENSIONS, language_for, parse_source
from guidelint.syntax.tree import ParseError, SyntaxNode

__all__ = [
  "LANGUAGE_EXTENSIONS",
  "ParseError",
  "SyntaxNode",
  "language_for",
  "parse_source",
]
