"""
Unit Tests for the operator table and Term helpers
"""

import numpy as np
import pytest

from core import (
    Operators, OperatorKind, Associativity, OPERATOR_DEFINITIONS,
    TermHelpers, NumberTerm, BinaryOpTerm, format_expression, evaluate,
)


class TestOperatorTable:
    """Tests for OPERATOR_DEFINITIONS."""

    def test_precedence_values(self):
        precedence = {kind.value: spec.precedence for kind, spec in OPERATOR_DEFINITIONS.items()}
        assert precedence == {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2}

    def test_all_left_associative(self):
        assert all(spec.associativity == Associativity.LEFT for spec in OPERATOR_DEFINITIONS.values())

    @pytest.mark.parametrize("kind, a, b, expected", [
        (OperatorKind.ADD, 1, 2, 3),
        (OperatorKind.SUB, 1, 2, -1),
        (OperatorKind.MUL, 1.5, 2, 3),
        (OperatorKind.DIV, 1, 8, 0.125),
        (OperatorKind.MOD, -9, 4, -1),
    ])
    def test_apply_looks_up_by_kind(self, kind, a, b, expected):
        assert Operators.apply(kind, a, b) == expected

    def test_overflow_is_not_an_error(self):
        assert Operators.apply(OperatorKind.MUL, 1e308, 10) == np.inf

    @pytest.mark.filterwarnings("error")
    @pytest.mark.parametrize("kind", list(OperatorKind))
    def test_overflow_emits_no_warning(self, kind):
        result = Operators.apply(kind, 1.5e308, 1.5e308)
        assert isinstance(result, float)

    @pytest.mark.filterwarnings("error")
    def test_large_literals_evaluate_without_warnings(self):
        big = "9" * 308
        assert evaluate(f"{big} + {big}").value == np.inf
        assert evaluate(f"-{big} - {big}").value == -np.inf
        assert np.isnan(evaluate(f"{big} * 10 % 3").value)


class TestTermHelpers:
    """Tests for Term construction."""

    def test_binary_operator_carries_table_entry(self):
        term = TermHelpers.binary_operator("*", position=4)
        assert term == BinaryOpTerm(OperatorKind.MUL, 2, Associativity.LEFT)
        assert term.position == 4

    def test_from_text(self):
        assert TermHelpers.from_text("2.5") == NumberTerm(2.5)
        assert TermHelpers.from_text("%").kind == OperatorKind.MOD
        assert TermHelpers.from_text("^") is None
        assert TermHelpers.from_text("nan") is None

    def test_position_excluded_from_equality(self):
        assert NumberTerm(1.0, 0) == NumberTerm(1.0, 9)

    def test_format_expression(self):
        expression = tuple(TermHelpers.from_text(t) for t in ["3", "0.5", "+", "2", "*"])
        assert format_expression(expression) == "3 0.5 + 2 *"
