"""Tests for syntax providers."""

import pytest
from guidelint.models import Language
from guidelint.syntax import ParseError, SyntaxNode, language_for, parse_source
from guidelint.syntax.javascript import node_kind
from sqlparse.exceptions import SQLParseError


def _find(root: SyntaxNode, kind: str) -> list[SyntaxNode]:
  return [n for n in root.walk() if n.kind == kind]


class TestLanguageDetection:
  @pytest.mark.parametrize("path,language", [
    ("app.js", Language.JAVASCRIPT),
    ("src/view.jsx", Language.JAVASCRIPT),
    ("lib/index.MJS", Language.JAVASCRIPT),
    ("db/001_init.sql", Language.SQL),
    ("schema.pgsql", Language.SQL),
  ])
  def test_supported(self, path: str, language: Language) -> None:
    assert language_for(path) == language

  def test_unsupported(self) -> None:
    assert language_for("README.md") is None
    assert language_for("Makefile") is None


class TestJavaScriptProvider:
  def test_node_kind_mapping(self) -> None:
    assert node_kind("program") == "Program"
    assert node_kind("lexical_declaration") == "VariableDeclaration"
    assert node_kind("binary_expression") == "BinaryExpression"
    assert node_kind("property_identifier") == "Identifier"
    assert node_kind("ternary_expression") == "ConditionalExpression"

  def test_declaration_keyword_and_declarators(self) -> None:
    root = parse_source(Language.JAVASCRIPT, "var x = 1, y = 2;\nconst z = 3;\n")

    declarations = _find(root, "VariableDeclaration")
    assert [d.attr("keyword") for d in declarations] == ["var", "const"]
    assert len(declarations[0].children_of_kind("VariableDeclarator")) == 2
    assert declarations[1].location.line == 2

  def test_fields_and_operator(self) -> None:
    root = parse_source(Language.JAVASCRIPT, "const same = a != b;\n")

    declarator = _find(root, "VariableDeclarator")[0]
    assert declarator.child("name").text == "same"
    value = declarator.child("value")
    assert value.kind == "BinaryExpression"
    assert value.attr("operator") == "!="
    assert value.child("left").text == "a"

  def test_columns_count_characters_not_bytes(self) -> None:
    root = parse_source(Language.JAVASCRIPT, "const s = 'héllo'; const t = 1;\n")

    second = _find(root, "VariableDeclaration")[1]
    assert second.column == 20

  def test_syntax_error_raises_with_location(self) -> None:
    with pytest.raises(ParseError) as excinfo:
      parse_source(Language.JAVASCRIPT, "const ok = 1;\nconst = ;\n")

    assert str(excinfo.value) == "unparseable"
    assert excinfo.value.line == 2

  def test_nodes_are_immutable(self) -> None:
    root = parse_source(Language.JAVASCRIPT, "let a = 1;\n")

    with pytest.raises(AttributeError):
      root.kind = "Other"  # type: ignore[misc]
    with pytest.raises(TypeError):
      root.attrs["x"] = "y"  # type: ignore[index]


class TestSqlProvider:
  def test_statements_and_tokens(self) -> None:
    root = parse_source(Language.SQL, "SELECT id FROM users;\nDELETE FROM logs;\n")

    assert root.kind == "Script"
    assert len(root.children) == 2
    keywords = [n.text for n in _find(root, "Keyword")]
    assert keywords == ["SELECT", "FROM", "DELETE", "FROM"]

  def test_token_positions(self) -> None:
    root = parse_source(Language.SQL, "SELECT id\nFROM  users;\n")

    names = {n.text: (n.line, n.column) for n in _find(root, "Name")}
    assert names["id"] == (1, 8)
    assert names["users"] == (2, 7)

  def test_whitespace_is_dropped(self) -> None:
    root = parse_source(Language.SQL, "SELECT 1;\n")

    assert all(n.text.strip() == n.text for n in root.walk() if n.text)

  def test_grouping_limit_is_a_parse_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
    def _too_many_tokens(source: str) -> tuple:
      raise SQLParseError("Maximum number of tokens exceeded (10000)")

    monkeypatch.setattr("guidelint.syntax.sql.sqlparse.parse", _too_many_tokens)

    with pytest.raises(ParseError, match="unparseable"):
      parse_source(Language.SQL, "INSERT INTO t VALUES (1);\n")

  def test_deep_tree_is_a_parse_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
    def _overflow(token, position):
      raise RecursionError("maximum recursion depth exceeded")

    monkeypatch.setattr("guidelint.syntax.sql._convert", _overflow)

    with pytest.raises(ParseError):
      parse_source(Language.SQL, "SELECT 1;\n")


class TestSyntaxNode:
  def test_default_mappings_are_read_only_and_separate(self) -> None:
    first = SyntaxNode(kind="Leaf", line=1, column=1)
    second = SyntaxNode(kind="Leaf", line=2, column=1)

    assert first.fields == {} and first.attrs == {}
    assert first.attrs is not second.attrs
    with pytest.raises(TypeError):
      first.fields["x"] = second  # type: ignore[index]

  def test_mappings_are_copied(self) -> None:
    attrs = {"operator": "=="}
    node = SyntaxNode(kind="BinaryExpression", line=1, column=1, attrs=attrs)
    attrs["operator"] = "!="

    assert node.attr("operator") == "=="
