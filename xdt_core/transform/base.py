"""
Base Transformation Classes
===========================

Abstract interfaces shared by transformation engines and the loggers
they report into. An engine receives a TransformationLogger when it is
constructed and calls it while applying a transform; the logger never
calls back into the engine.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional
import importlib
import logging

logger = logging.getLogger(__name__)


class MessageType(Enum):
    """Verbosity of a plain log message."""

    NORMAL = "normal"
    VERBOSE = "verbose"


class EngineConfigurationError(ValueError):
    """Raised when no usable transformation engine can be resolved."""


class TransformationLogger(ABC):
    """
    Logging sink a transformation engine reports into.

    Every method accepts a str.format template plus positional arguments.
    Location-aware methods take optional ``file``, ``line_number`` and
    ``line_position`` keywords; a ``line_number`` of zero means
    "no location".
    """

    @abstractmethod
    def log_message(self, message: str, *args: Any,
                    message_type: MessageType = MessageType.NORMAL) -> None:
        pass

    @abstractmethod
    def log_error(self, message: str, *args: Any,
                  file: Optional[str] = None,
                  line_number: int = 0,
                  line_position: int = 0) -> None:
        pass

    @abstractmethod
    def log_warning(self, message: str, *args: Any,
                    file: Optional[str] = None,
                    line_number: int = 0,
                    line_position: int = 0) -> None:
        pass

    @abstractmethod
    def log_error_from_exception(self, exception: BaseException,
                                 file: Optional[str] = None,
                                 line_number: int = 0,
                                 line_position: int = 0) -> None:
        pass

    @abstractmethod
    def start_section(self, message: str, *args: Any,
                      message_type: MessageType = MessageType.NORMAL) -> None:
        pass

    @abstractmethod
    def end_section(self, message: str, *args: Any,
                    message_type: MessageType = MessageType.NORMAL) -> None:
        pass


class BaseTransformEngine(ABC):
    """
    Abstract base class for transformation engines.

    Example:
        class MyEngine(BaseTransformEngine):
            def apply(self, document) -> bool:
                self.logger.start_section("Executing transforms")
                # ... mutate document, report through self.logger ...
                self.logger.end_section("Done")
                return True
    """

    def __init__(self, transform_text: str, logger: TransformationLogger):
        """
        Args:
            transform_text: Raw text of the transform specification
            logger: Sink for events emitted while applying
        """
        self.transform_text = transform_text
        self.logger = logger

    @abstractmethod
    def apply(self, document: Any) -> bool:
        """
        Apply the transform to ``document`` in place.

        Returns:
            True if the transform applied cleanly
        """
        pass


EngineFactory = Callable[[str, TransformationLogger], Any]


def load_engine_factory(import_path: str) -> EngineFactory:
    """
    Resolve an engine class or factory from a ``"module:attribute"`` path.

    Raises:
        EngineConfigurationError: If the path is empty, malformed or
            cannot be resolved to a callable
    """
    if not import_path:
        raise EngineConfigurationError(
            "No transformation engine configured. "
            "Pass engine_factory or set engine.engine in the config."
        )

    module_name, sep, attr_path = import_path.partition(":")
    if not sep or not module_name or not attr_path:
        raise EngineConfigurationError(
            f"Engine path must look like 'package.module:Name', got {import_path!r}"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineConfigurationError(f"Cannot import engine module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise EngineConfigurationError(
                f"Module {module_name!r} has no attribute {attr_path!r}"
            ) from e

    if not callable(target):
        raise EngineConfigurationError(f"Engine {import_path!r} is not callable")

    logger.debug(f"Resolved transformation engine: {import_path}")
    return target
