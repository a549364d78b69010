"""PostgreSQL style rules."""

from guidelint.rules.sql.keywords import UppercaseKeywordsRule
from guidelint.rules.sql.naming import SnakeCaseIdentifiersRule
from guidelint.rules.sql.queries import NoSelectStarRule

__all__ = [
  "NoSelectStarRule",
  "SnakeCaseIdentifiersRule",
  "UppercaseKeywordsRule",
]
