"""Line Driver — one evaluation per input line.

Reads text lines until end of stream (or a read failure), strips the line
terminator, evaluates each line independently and writes one result line:

    Ok(<display>)      e.g. Ok(9), Ok(31/2)
    Err(<variant>)     e.g. Err(DivisionByZero), Err(InvalidSyntax(2)), Err(InvalidExpr)

Recoverable CalcError values are rendered and the driver moves on to the next
line. The fatal ZeroDivisionError fault is not caught here: it terminates the
run.
"""

import sys
from typing import Optional, TextIO

from pydantic import BaseModel, Field, field_validator

from src.core.config import CalcSettings
from src.core.errors import CalcError
from src.core.logging_config import get_logger, setup_logging
from src.evaluator.expression import ExpressionEvaluator

logger = get_logger(__name__)


class LineOutcome(BaseModel):
    """Outcome of evaluating one input line: a value or an error variant."""

    line_number: int = Field(..., ge=1, description="1-based input line number")
    source: str = Field(..., description="Line text without terminator")
    value: Optional[str] = Field(None, description="Display form of the result")
    error: Optional[str] = Field(
        None, validate_default=True, description="Error variant name"
    )

    model_config = {"frozen": True}

    @field_validator("error")
    @classmethod
    def validate_exactly_one(cls, v: Optional[str], info) -> Optional[str]:
        """Exactly one of value / error must be set"""
        value = info.data.get("value")
        if (value is None) == (v is None):
            raise ValueError("exactly one of value and error must be set")
        return v

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.is_ok:
            return f"Ok({self.value})"
        return f"Err({self.error})"


def strip_terminator(raw: str) -> str:
    """Remove a trailing "\\n" or "\\r\\n"."""
    if raw.endswith("\n"):
        raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
    return raw


def evaluate_line(
    line: str,
    line_number: int = 1,
    evaluator: ExpressionEvaluator | None = None,
) -> LineOutcome:
    """
    Evaluate one line and capture recoverable errors.

    Args:
        line: Line text without terminator
        line_number: 1-based position in the input
        evaluator: Evaluator to use (default configuration if None)

    Returns:
        LineOutcome with either value or error set

    Raises:
        ZeroDivisionError: Fatal fault from raw division (never recoverable)
    """
    evaluator = evaluator or ExpressionEvaluator()
    try:
        result = evaluator.evaluate(line)
    except CalcError as e:
        logger.debug("line %d: %s", line_number, e)
        return LineOutcome(line_number=line_number, source=line, error=e.variant())
    return LineOutcome(line_number=line_number, source=line, value=result.display())


def run_driver(
    stream_in: TextIO,
    stream_out: TextIO,
    evaluator: ExpressionEvaluator | None = None,
) -> int:
    """
    Evaluate every line of ``stream_in`` and write results to ``stream_out``.

    Stops at end of stream or on the first read failure.

    Returns:
        Number of lines processed
    """
    evaluator = evaluator or ExpressionEvaluator()
    line_number = 0
    logger.info("driver started")

    while True:
        try:
            raw = stream_in.readline()
        except (UnicodeDecodeError, OSError) as e:
            logger.warning("read failed after line %d: %s", line_number, e)
            break
        if not raw:
            break

        line_number += 1
        outcome = evaluate_line(strip_terminator(raw), line_number, evaluator)
        stream_out.write(outcome.render() + "\n")
        stream_out.flush()

    logger.info("driver finished: %d lines", line_number)
    return line_number


def main() -> None:
    """Console entry point: stdin → stdout, no flags."""
    settings = CalcSettings.from_env()
    setup_logging(settings.log_level)
    run_driver(sys.stdin, sys.stdout)
