"""
Transformation Logger
=====================

Collects everything a transformation engine reports during one run into
three text streams:

- errors:   every error, plus warnings when they are treated as errors
- warnings: warnings, when they are not treated as errors
- verbose:  every message, error and warning in emission order

The escalation policy is applied when a warning is logged, so the error
stream alone answers "did this run fail".
"""

from typing import Any, List, Optional
import logging
import os
import traceback

from xdt_core.transform.base import MessageType, TransformationLogger
from xdt_core.xml.utils import file_basename

logger = logging.getLogger(__name__)

DEFAULT_INDENT_UNIT = "  "

ERROR_FORMAT = "{0} ({1}, {2}) error: {3}"
WARNING_FORMAT = "{0} ({1}, {2}) warning: {3}"


def _render(message: str, args: tuple) -> str:
    return message.format(*args)


def _next_exception(exception: BaseException) -> Optional[BaseException]:
    if exception.__cause__ is not None:
        return exception.__cause__
    if exception.__suppress_context__:
        return None
    return exception.__context__


class TransformLogger(TransformationLogger):
    """
    TransformationLogger that accumulates error, warning and verbose streams.

    A logger belongs to a single run; its escalation policy is fixed at
    construction.

    Example:
        log = TransformLogger(treat_warnings_as_errors=False)
        log.start_section("Executing Insert")
        log.log_warning("No element matched", file="web.Release.config",
                        line_number=7, line_position=4)
        log.end_section("Done")
        log.warning_log  # 'web.Release.config (7, 4) warning: No element matched\\n'
    """

    def __init__(self, include_stack_trace: bool = False,
                 treat_warnings_as_errors: bool = True,
                 indent_unit: str = DEFAULT_INDENT_UNIT):
        """
        Args:
            include_stack_trace: Log exception types, chained causes and
                tracebacks in log_error_from_exception
            treat_warnings_as_errors: Record warnings in the error stream
            indent_unit: String repeated once per open section
        """
        self._include_stack_trace = include_stack_trace
        self._treat_warnings_as_errors = treat_warnings_as_errors
        self._indent_unit = indent_unit

        self._errors: List[str] = []
        self._warnings: List[str] = []
        self._verbose: List[str] = []
        self._indent_level = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def include_stack_trace(self) -> bool:
        return self._include_stack_trace

    @property
    def treat_warnings_as_errors(self) -> bool:
        return self._treat_warnings_as_errors

    @property
    def indent_level(self) -> int:
        return self._indent_level

    @property
    def error_log(self) -> str:
        """All logged errors, one per line."""
        return self._join(self._errors)

    @property
    def warning_log(self) -> str:
        """All logged warnings, one per line."""
        return self._join(self._warnings)

    @property
    def verbose_log(self) -> str:
        """Every message, error and warning in emission order."""
        return self._join(self._verbose)

    @property
    def has_logged_errors(self) -> bool:
        return len(self._errors) > 0

    def reset(self) -> None:
        """Clear all streams and the indentation; the policy is unchanged."""
        self._errors.clear()
        self._warnings.clear()
        self._verbose.clear()
        self._indent_level = 0

    # ------------------------------------------------------------------
    # TransformationLogger
    # ------------------------------------------------------------------

    def log_message(self, message: str, *args: Any,
                    message_type: MessageType = MessageType.NORMAL) -> None:
        text = _render(message, args)
        self._verbose.append(self._indent_unit * self._indent_level + text)

    def log_error(self, message: str, *args: Any,
                  file: Optional[str] = None,
                  line_number: int = 0,
                  line_position: int = 0) -> None:
        text = self._locate(ERROR_FORMAT, file, line_number, line_position,
                            _render(message, args))
        logger.debug(f"Transformation error: {text}")
        self._errors.append(text)
        self._verbose.append(text)

    def log_warning(self, message: str, *args: Any,
                    file: Optional[str] = None,
                    line_number: int = 0,
                    line_position: int = 0) -> None:
        if self._treat_warnings_as_errors:
            self.log_error(message, *args, file=file,
                           line_number=line_number, line_position=line_position)
            return

        text = self._locate(WARNING_FORMAT, file, line_number, line_position,
                            _render(message, args))
        logger.debug(f"Transformation warning: {text}")
        self._warnings.append(text)
        self._verbose.append(text)

    def log_error_from_exception(self, exception: BaseException,
                                 file: Optional[str] = None,
                                 line_number: int = 0,
                                 line_position: int = 0) -> None:
        if self._include_stack_trace:
            parts = []
            current: Optional[BaseException] = exception
            while current is not None:
                parts.append(f"{type(current).__name__}: {current}")
                stack = "".join(traceback.format_tb(current.__traceback__))
                parts.extend(stack.splitlines())
                current = _next_exception(current)
            text = os.linesep.join(parts)
        else:
            text = str(exception)

        # Passed as an argument so braces in exception text are not parsed
        self.log_error("{0}", text, file=file,
                       line_number=line_number, line_position=line_position)

    def start_section(self, message: str, *args: Any,
                      message_type: MessageType = MessageType.NORMAL) -> None:
        self.log_message(message, *args, message_type=message_type)
        self._indent_level += 1

    def end_section(self, message: str, *args: Any,
                    message_type: MessageType = MessageType.NORMAL) -> None:
        self.log_message(message, *args, message_type=message_type)
        if self._indent_level > 0:
            self._indent_level -= 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _locate(fmt: str, file: Optional[str], line_number: int,
                line_position: int, text: str) -> str:
        if line_number and line_number > 0:
            return fmt.format(file_basename(file), line_number, line_position, text)
        return text

    @staticmethod
    def _join(lines: List[str]) -> str:
        return "".join(line + os.linesep for line in lines)
