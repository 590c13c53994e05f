"""
Validation Result
=================

Snapshot of one transformation validation run.
"""

from dataclasses import dataclass
from typing import List


def _lines(text: str) -> List[str]:
    return text.splitlines()


@dataclass(frozen=True)
class TransformValidationResult:
    """
    Container for the outcome of a validation run.

    Attributes:
        passed: Whether the transform applied without errors
        source: Path of the source document
        transformation: Path of the transform specification
        error_log: Errors (and escalated warnings), one per line
        warning_log: Warnings that were not escalated, one per line
        verbose_log: Every logged line in emission order
    """
    passed: bool
    source: str
    transformation: str
    error_log: str = ""
    warning_log: str = ""
    verbose_log: str = ""

    def error_lines(self) -> List[str]:
        return _lines(self.error_log)

    def warning_lines(self) -> List[str]:
        return _lines(self.warning_log)

    def verbose_lines(self) -> List[str]:
        return _lines(self.verbose_log)

    def summary(self) -> str:
        """Generate a text summary of the run."""
        errors = self.error_lines()
        warnings = self.warning_lines()

        if self.passed:
            head = f"Transformation PASSED - {self.transformation} on {self.source}"
        else:
            head = f"Transformation FAILED - {self.transformation} on {self.source}"

        lines = [head, f"{len(errors)} error(s), {len(warnings)} warning(s)"]
        if errors:
            lines.extend(["", "Errors:"])
            lines.extend(f"  {line}" for line in errors)
        if warnings:
            lines.extend(["", "Warnings:"])
            lines.extend(f"  {line}" for line in warnings)
        return "\n".join(lines)
