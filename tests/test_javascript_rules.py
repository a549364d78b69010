"""Tests for JavaScript rules."""

import pytest
from conftest import Lint
from guidelint.models import Severity
from guidelint.rules.javascript import (
  CasingConventionRule,
  LiteralConstructionRule,
  NoNestedTernaryRule,
  NoVarDeclarationRule,
  PreferStrictEqualityRule,
  SingleBindingPerDeclarationRule,
)


def _ids(result) -> list[str]:
  return [f.rule_id for f in result.findings]


class TestNoVarDeclarationRule:
  def test_properties(self) -> None:
    rule = NoVarDeclarationRule()
    assert rule.id == "JS001"
    assert rule.name == "no-var"
    assert rule.severity == Severity.MUST
    assert rule.applies_to == frozenset(["VariableDeclaration"])

  def test_single_var_reports_once_at_declaration(self, lint: Lint) -> None:
    result = lint("function main() {\n  var count = 0;\n  return count;\n}\n")

    assert _ids(result) == ["JS001"]
    finding = result.findings[0]
    assert finding.severity == Severity.MUST
    assert (finding.line, finding.column) == (2, 3)

  def test_let_and_const_are_allowed(self, lint: Lint) -> None:
    result = lint("let count = 0;\nconst total = 1;\ncount += total;\n")

    assert "JS001" not in _ids(result)

  def test_for_loop_var(self, lint: Lint) -> None:
    result = lint("for (var i = 0; i < 3; i++) {}\n")

    assert "JS001" in _ids(result)


class TestSingleBindingPerDeclarationRule:
  def test_properties(self) -> None:
    rule = SingleBindingPerDeclarationRule()
    assert rule.id == "JS002"
    assert rule.name == "one-binding-per-declaration"
    assert rule.severity == Severity.MUST

  def test_multiple_bindings(self, lint: Lint) -> None:
    result = lint("let a = 1, b = 2, c = 3;\n")

    assert _ids(result) == ["JS002"]
    assert "3 bindings" in result.findings[0].message
    assert "'let'" in result.findings[0].suggestion

  def test_single_binding_is_fine(self, lint: Lint) -> None:
    result = lint("const a = 1;\nconst b = 2;\n")

    assert result.findings == ()


class TestVarWithMultipleBindings:
  def test_both_rules_fire_at_same_location(self, lint: Lint) -> None:
    result = lint("var x = 1, y = 2;\n")

    assert _ids(result) == ["JS001", "JS002"]
    assert all(f.severity == Severity.MUST for f in result.findings)
    assert {(f.line, f.column) for f in result.findings} == {(1, 1)}


class TestPreferStrictEqualityRule:
  def test_properties(self) -> None:
    rule = PreferStrictEqualityRule()
    assert rule.id == "JS003"
    assert rule.applies_to == frozenset(["BinaryExpression"])

  @pytest.mark.parametrize("operator,strict", [("==", "==="), ("!=", "!==")])
  def test_loose_operators(self, lint: Lint, operator: str, strict: str) -> None:
    result = lint(f"const same = left {operator} right;\n")

    assert _ids(result) == ["JS003"]
    assert f"'{strict}'" in result.findings[0].message
    assert result.findings[0].column == 14

  def test_strict_operators_are_fine(self, lint: Lint) -> None:
    result = lint("const same = left === right && left !== other;\n")

    assert result.findings == ()

  def test_nested_comparisons_each_reported(self, lint: Lint) -> None:
    result = lint("if (a == b) {\n  run(c != d);\n}\n")

    assert [(f.rule_id, f.line) for f in result.findings] == [("JS003", 1), ("JS003", 2)]


class TestCasingConventionRule:
  def test_properties(self) -> None:
    rule = CasingConventionRule()
    assert rule.id == "JS004"
    assert rule.name == "identifier-casing"
    assert rule.applies_to == frozenset(["Identifier"])

  def test_conforming_file(self, lint: Lint) -> None:
    source = (
      "const MAX_ITEMS = 10;\n"
      "class ShoppingCart {\n"
      "  constructor(owner) {\n"
      "    this.owner = owner;\n"
      "  }\n"
      "  _recalculate() {}\n"
      "  addItem(item) {}\n"
      "}\n"
      "function Widget() {}\n"
      "const widget = new Widget();\n"
      "const cart = new ShoppingCart(widget);\n"
    )

    result = lint(source)

    assert result.findings == ()

  def test_snake_case_binding(self, lint: Lint) -> None:
    result = lint("const user_name = 'x';\n")

    assert _ids(result) == ["JS004"]
    assert result.findings[0].message == "Identifier 'user_name' should be camelCase"
    assert result.findings[0].column == 7

  def test_lowercase_class(self, lint: Lint) -> None:
    result = lint("class shoppingCart {}\n")

    assert _ids(result) == ["JS004"]
    assert "PascalCase" in result.findings[0].message

  def test_constants_built_from_literals(self, lint: Lint) -> None:
    result = lint(
      "const TIMEOUT_MS = 60 * 1000;\n"
      "const OFFSET = -1;\n"
      "const RATIO = (1 + 2) / 3;\n"
    )

    assert result.findings == ()

  def test_uppercase_const_from_call_is_a_binding(self, lint: Lint) -> None:
    result = lint("const LIMIT = compute() * 2;\n")

    assert _ids(result) == ["JS004"]
    assert "camelCase" in result.findings[0].message

  def test_uppercase_let_is_not_a_constant(self, lint: Lint) -> None:
    result = lint("let MAX_ITEMS = 10;\n")

    assert _ids(result) == ["JS004"]
    assert "camelCase" in result.findings[0].message

  def test_pascal_function_without_new(self, lint: Lint) -> None:
    result = lint("function Helper() {}\nHelper();\n")

    assert _ids(result) == ["JS004"]

  def test_private_member(self, lint: Lint) -> None:
    result = lint("class Cart {\n  _Reset() {}\n}\n")

    assert _ids(result) == ["JS004"]
    assert "_camelCase" in result.findings[0].message
    assert result.findings[0].line == 2

  def test_parameters(self, lint: Lint) -> None:
    result = lint("function load(file_name, { max_size }) {}\n")

    messages = [f.message for f in result.findings]
    assert messages == [
      "Identifier 'file_name' should be camelCase",
      "Identifier 'max_size' should be camelCase",
    ]

  def test_references_are_not_checked(self, lint: Lint) -> None:
    result = lint("process_data(SOME_GLOBAL.inner_field);\n")

    assert result.findings == ()


class TestNoNestedTernaryRule:
  def test_properties(self) -> None:
    rule = NoNestedTernaryRule()
    assert rule.id == "JS005"
    assert rule.severity == Severity.SHOULD

  def test_nested_reported_once(self, lint: Lint) -> None:
    result = lint("const size = a ? 1 : b ? 2 : c ? 3 : 4;\n")

    assert _ids(result) == ["JS005"]
    assert result.findings[0].column == 14

  def test_parenthesized_nesting(self, lint: Lint) -> None:
    result = lint("const size = a ? (b ? 1 : 2) : 3;\n")

    assert _ids(result) == ["JS005"]

  def test_flat_ternary_is_fine(self, lint: Lint) -> None:
    result = lint("const size = big ? 2 : 1;\n")

    assert result.findings == ()


class TestLiteralConstructionRule:
  def test_properties(self) -> None:
    rule = LiteralConstructionRule()
    assert rule.id == "JS006"
    assert rule.severity == Severity.SHOULD

  def test_new_object_and_array(self, lint: Lint) -> None:
    result = lint("const item = new Object();\nconst items = new Array();\n")

    assert _ids(result) == ["JS006", "JS006"]
    assert "{}" in result.findings[0].message
    assert "[]" in result.findings[1].message

  def test_other_constructors_are_fine(self, lint: Lint) -> None:
    result = lint("const seen = new Map();\n")

    assert result.findings == ()


class TestGeneratedFiles:
  def test_generated_marker_skips_file(self, lint: Lint) -> None:
    result = lint("// @generated by protoc\nvar x = 1, y = 2;\n")

    assert result.findings == ()

  def test_marker_after_header_is_ignored(self, lint: Lint) -> None:
    source = "\n" * 10 + "// @generated\nvar x = 1;\n"

    result = lint(source)

    assert _ids(result) == ["JS001"]


class TestCleanFile:
  def test_no_findings(self, lint: Lint) -> None:
    source = (
      "import { readFile } from 'fs';\n"
      "\n"
      "const DEFAULT_LIMIT = 20;\n"
      "\n"
      "export function paginate(items, limit = DEFAULT_LIMIT) {\n"
      "  const pages = [];\n"
      "  for (let start = 0; start < items.length; start += limit) {\n"
      "    pages.push(items.slice(start, start + limit));\n"
      "  }\n"
      "  return pages.length === 0 ? [[]] : pages;\n"
      "}\n"
    )

    result = lint(source)

    assert result.findings == ()
    assert result.crashes == ()
