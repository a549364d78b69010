"""GEN001: Skip generated files."""

import re

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode


class GeneratedFileRule:
  """Excludes files marked `@generated` from every other rule.

  The marker must appear in the first HEADER_LINES lines. The rule
  never reports; it prunes the whole tree at the root, so other rules
  still see the root node but nothing below it.
  """

  HEADER_LINES = 5
  MARKER = re.compile(r"@generated\b")

  @property
  def id(self) -> str:
    return "GEN001"

  @property
  def name(self) -> str:
    return "generated-file"

  @property
  def severity(self) -> Severity:
    return Severity.SHOULD

  @property
  def language(self) -> Language | None:
    return None

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["Program", "Script"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    if node is not context.root:
      return CONTINUE
    header = context.lines[:self.HEADER_LINES]
    if any(self.MARKER.search(line) for line in header):
      return Visit.skip()
    return CONTINUE


def _create_generated_file() -> GeneratedFileRule:
  return GeneratedFileRule()


register_rule(_create_generated_file)
