"""Line driver — reads expression lines, prints Ok(...) / Err(...) per line."""

from .line_driver import (
    LineOutcome,
    evaluate_line,
    main,
    run_driver,
)

__all__ = [
    "LineOutcome",
    "evaluate_line",
    "main",
    "run_driver",
]
