"""SQL001: Uppercase reserved keywords."""

from guidelint.models import Language, Severity
from guidelint.rules.base import CONTINUE, RuleMatch, Visit
from guidelint.rules.context import WalkContext
from guidelint.rules.registry import register_rule
from guidelint.syntax.tree import SyntaxNode

# PostgreSQL type names sqlparse does not know and lexes as plain names
POSTGRES_TYPES = frozenset("""
  BIGSERIAL BIT BOX BYTEA CIDR CIRCLE CITEXT DATERANGE FLOAT4 FLOAT8 HSTORE
  INET INT2 INT4 INT4RANGE INT8 INT8RANGE JSON JSONB LINE LSEG MACADDR
  MACADDR8 MONEY NUMRANGE OID PATH POINT POLYGON REGCLASS SERIAL SERIAL2
  SERIAL4 SERIAL8 SMALLSERIAL TIMESTAMPTZ TIMETZ TSQUERY TSRANGE
  TSTZRANGE TSVECTOR UUID VARBIT XML
""".split())


class UppercaseKeywordsRule:
  """Detects reserved words not written in uppercase.

  sqlparse classifies many non-reserved PostgreSQL words (`name`,
  `user`, `date`) as keywords; those are frequently column names, so
  only the reserved words below are checked.
  """

  RESERVED = frozenset("""
    ADD ALL ALTER AND AS ASC BEGIN BETWEEN BY CASCADE CASE CHECK COLUMN
    COMMIT CONSTRAINT CREATE CROSS DEFAULT DELETE DESC DISTINCT DROP ELSE
    END EXISTS FALSE FOREIGN FROM FULL GROUP HAVING ILIKE IN INDEX INNER
    INSERT INTO IS JOIN KEY LEFT LIKE LIMIT NOT NULL OFFSET ON OR ORDER
    OUTER PRIMARY REFERENCES RETURNING RIGHT ROLLBACK SELECT SET TABLE
    THEN TRUE UNION UNIQUE UPDATE USING VALUES VIEW WHEN WHERE WITH
  """.split())

  @property
  def id(self) -> str:
    return "SQL001"

  @property
  def name(self) -> str:
    return "uppercase-keywords"

  @property
  def severity(self) -> Severity:
    return Severity.MUST

  @property
  def language(self) -> Language | None:
    return Language.SQL

  @property
  def applies_to(self) -> frozenset[str]:
    return frozenset(["Keyword"])

  def evaluate(self, node: SyntaxNode, context: WalkContext) -> Visit:
    text = node.text
    if text == text.upper():
      return CONTINUE
    if not any(word.upper() in self.RESERVED for word in text.split()):
      return CONTINUE
    expected = " ".join(text.upper().split())
    return Visit.proceed(RuleMatch.at(
      node,
      f"Keyword '{text}' should be uppercase",
      suggestion=f"Write {expected}",
    ))


def _create_uppercase_keywords() -> UppercaseKeywordsRule:
  return UppercaseKeywordsRule()


register_rule(_create_uppercase_keywords)
