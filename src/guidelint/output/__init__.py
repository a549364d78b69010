"""Output formatting."""

from guidelint.output.formatter import (
  GitHubFormatter,
  JsonFormatter,
  OutputFormatter,
  TerminalFormatter,
  TextFormatter,
  get_formatter,
)

__all__ = [
  "GitHubFormatter",
  "JsonFormatter",
  "OutputFormatter",
  "TerminalFormatter",
  "TextFormatter",
  "get_formatter",
]
