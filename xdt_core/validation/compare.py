"""
Log Comparison
==============

Line-by-line comparison of a captured log against an expected baseline.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class LogLineMismatch:
    """A baseline line that the result did not reproduce."""
    line: int
    expected: str
    actual: Optional[str]

    def __str__(self) -> str:
        if self.actual is None:
            return f"line {self.line} missing from result, expected {self.expected!r}"
        return f"line {self.line} at baseline is not matched: expected {self.expected!r}, got {self.actual!r}"


def compare_log_lines(baseline: str, result: str) -> List[LogLineMismatch]:
    """
    Compare ``result`` against ``baseline`` one line at a time.

    Line endings are normalized, so a baseline stored with '\\r\\n'
    matches a log captured with '\\n'. Lines the result has beyond the
    end of the baseline are ignored.

    Returns:
        Mismatches in line order; empty if the result matches
    """
    base_lines = baseline.splitlines()
    result_lines = result.splitlines()

    mismatches = []
    for i, expected in enumerate(base_lines):
        actual = result_lines[i] if i < len(result_lines) else None
        if actual != expected:
            mismatches.append(LogLineMismatch(i, expected, actual))
    return mismatches
