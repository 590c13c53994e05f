"""
Validation Framework
====================

Runs a transformation engine against a source document and turns what
it logged into a pass/fail verdict.

Components:
- TransformValidator: Drives one engine run per validate() call
- TransformValidationResult: Snapshot of a completed run
- compare_log_lines: Line-by-line comparison against a baseline log
"""

from xdt_core.validation.base import TransformValidationResult

from xdt_core.validation.compare import (
    LogLineMismatch,
    compare_log_lines,
)

from xdt_core.validation.transform_validator import TransformValidator

__all__ = [
    "TransformValidator",
    "TransformValidationResult",
    "LogLineMismatch",
    "compare_log_lines",
]
