"""Tests for the line driver.

Coverage:
- Ok/Err rendering per line
- Line terminator stripping
- Continuing after recoverable errors
- Fatal fault propagation
- Read failure stops the run
- LineOutcome model validation
"""

import io

import pytest
from pydantic import ValidationError

from src.core.domain.rational import Rational
from src.driver.line_driver import (
    LineOutcome,
    evaluate_line,
    run_driver,
    strip_terminator,
)
from src.evaluator.expression import ExpressionEvaluator


class FailingStream(io.StringIO):
    """Stream that raises after the buffered lines are consumed."""

    def readline(self, *args) -> str:  # type: ignore[override]
        line = super().readline(*args)
        if not line:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return line


class FaultingEvaluator(ExpressionEvaluator):
    """Evaluator whose evaluation hits the raw-division fault."""

    def evaluate(self, expr: str) -> Rational:
        return Rational(1, 1) / 0


class TestEvaluateLine:
    """Tests for evaluate_line"""

    def test_ok(self) -> None:
        outcome = evaluate_line("23+4", 1)
        assert outcome.is_ok
        assert outcome.value == "9"
        assert outcome.render() == "Ok(9)"

    def test_ok_fraction(self) -> None:
        assert evaluate_line("7/2").render() == "Ok(31/2)"

    def test_division_by_zero(self) -> None:
        outcome = evaluate_line("1/0", 3)
        assert not outcome.is_ok
        assert outcome.line_number == 3
        assert outcome.render() == "Err(DivisionByZero)"

    def test_invalid_syntax(self) -> None:
        assert evaluate_line("1+x").render() == "Err(InvalidSyntax(2))"

    def test_invalid_expr(self) -> None:
        assert evaluate_line("").render() == "Err(InvalidExpr)"
        assert evaluate_line("   ").render() == "Err(InvalidExpr)"

    def test_fatal_fault_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            evaluate_line("1", 1, FaultingEvaluator())


class TestRunDriver:
    """Tests for run_driver"""

    def test_one_result_per_line(self) -> None:
        stdin = io.StringIO("23+4\n6/3*2\n1/0\n1+x\n\n7/2\n")
        stdout = io.StringIO()

        count = run_driver(stdin, stdout)

        assert count == 6
        assert stdout.getvalue().splitlines() == [
            "Ok(9)",
            "Ok(4)",
            "Err(DivisionByZero)",
            "Err(InvalidSyntax(2))",
            "Err(InvalidExpr)",
            "Ok(31/2)",
        ]

    def test_last_line_without_terminator(self) -> None:
        stdout = io.StringIO()
        assert run_driver(io.StringIO("1+1\n2*3"), stdout) == 2
        assert stdout.getvalue() == "Ok(2)\nOk(6)\n"

    def test_crlf_terminators(self) -> None:
        stdout = io.StringIO()
        run_driver(io.StringIO("1+2\r\n3-1\r\n"), stdout)
        assert stdout.getvalue() == "Ok(3)\nOk(2)\n"

    def test_empty_input(self) -> None:
        stdout = io.StringIO()
        assert run_driver(io.StringIO(""), stdout) == 0
        assert stdout.getvalue() == ""

    def test_read_failure_stops(self) -> None:
        stdout = io.StringIO()
        assert run_driver(FailingStream("1+1\n"), stdout) == 1
        assert stdout.getvalue() == "Ok(2)\n"

    def test_fatal_fault_aborts_run(self) -> None:
        stdout = io.StringIO()
        with pytest.raises(ZeroDivisionError):
            run_driver(io.StringIO("1\n2\n"), stdout, FaultingEvaluator())
        assert stdout.getvalue() == ""


class TestStripTerminator:
    """Tests for strip_terminator"""

    def test_variants(self) -> None:
        assert strip_terminator("1+1\n") == "1+1"
        assert strip_terminator("1+1\r\n") == "1+1"
        assert strip_terminator("1+1") == "1+1"
        assert strip_terminator("1+1 \n") == "1+1 "

    def test_lone_carriage_return_kept(self) -> None:
        assert strip_terminator("1+1\r") == "1+1\r"


class TestLineOutcome:
    """Tests for LineOutcome"""

    def test_requires_value_or_error(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            LineOutcome(line_number=1, source="")

    def test_rejects_both(self) -> None:
        with pytest.raises(ValidationError, match="exactly one"):
            LineOutcome(line_number=1, source="1", value="1", error="InvalidExpr")

    def test_line_number_positive(self) -> None:
        with pytest.raises(ValidationError):
            LineOutcome(line_number=0, source="1", value="1")

    def test_frozen(self) -> None:
        outcome = LineOutcome(line_number=1, source="1", value="1")
        with pytest.raises(ValidationError):
            outcome.value = "2"  # type: ignore[misc]
