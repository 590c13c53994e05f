"""
Transformation Validator
========================

Applies a transform specification to a source document and reports
whether it applied cleanly, keeping the logs of the run for inspection.
"""

from pathlib import Path, PurePath
from typing import Optional, Union
import logging
import os

from xdt_core.config.settings import ValidatorConfig, get_default_config
from xdt_core.transform.base import EngineFactory, MessageType, load_engine_factory
from xdt_core.transform.logger import TransformLogger
from xdt_core.validation.base import TransformValidationResult
from xdt_core.xml.utils import file_basename, load_document, read_transform_text

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _require_path(value: Optional[PathLike], name: str) -> str:
    if value is None:
        raise ValueError(f"{name} must be a non-empty path")
    text = os.fspath(value)
    # Path("") normalizes to "."
    if text == "" or (isinstance(value, PurePath) and text == "."):
        raise ValueError(f"{name} must be a non-empty path")
    return text


class TransformValidator:
    """
    Validates transformations for testing purposes.

    Each call to validate() runs against a brand-new TransformLogger. The
    logger is published through error_log, warning_log and verbose_log
    once the engine has returned, replacing the previous run's logger.
    An instance must not run two validations at the same time; use one
    validator per thread.

    Example:
        validator = TransformValidator(engine_factory=XdtEngine)
        if not validator.validate("web.config", "web.Release.config"):
            print(validator.error_log)
    """

    def __init__(self, engine_factory: Optional[EngineFactory] = None,
                 config: Optional[ValidatorConfig] = None):
        """
        Args:
            engine_factory: Callable building an engine from
                (transform_text, logger). Defaults to the engine named in
                the config, resolved when a run needs it.
            config: Validator configuration (defaults apply if omitted)
        """
        self.config = config or get_default_config()
        self._engine_factory = engine_factory
        self._logger: Optional[TransformLogger] = None
        self._last_result: Optional[TransformValidationResult] = None

    @property
    def error_log(self) -> str:
        """Errors logged during the last completed run."""
        return self._logger.error_log if self._logger else ""

    @property
    def warning_log(self) -> str:
        """Warnings logged during the last completed run."""
        return self._logger.warning_log if self._logger else ""

    @property
    def verbose_log(self) -> str:
        """Everything logged during the last completed run."""
        return self._logger.verbose_log if self._logger else ""

    @property
    def last_result(self) -> Optional[TransformValidationResult]:
        return self._last_result

    def validate(self, source: PathLike, transformation: PathLike,
                 treat_warnings_as_errors: Optional[bool] = None) -> bool:
        """
        Validate ``transformation`` against ``source``.

        Args:
            source: Source document to apply the transformation to
            transformation: Transform specification to apply
            treat_warnings_as_errors: Record warnings as errors. Defaults
                to the configured value (True unless changed).

        Returns:
            True if the transform applied and nothing was logged as an error

        Raises:
            ValueError: If source or transformation is empty
            FileNotFoundError: If either file doesn't exist
            lxml.etree.XMLSyntaxError: If the source is not well-formed
            EngineConfigurationError: If no engine is available
        """
        source = _require_path(source, "source")
        transformation = _require_path(transformation, "transformation")

        if treat_warnings_as_errors is None:
            treat_warnings_as_errors = self.config.treat_warnings_as_errors

        run_logger = TransformLogger(
            include_stack_trace=self.config.logger.include_stack_trace,
            treat_warnings_as_errors=treat_warnings_as_errors,
            indent_unit=self.config.logger.indent_unit,
        )
        run_logger.log_message(
            "Applying transformations '{0}' on file '{1}'...",
            file_basename(transformation), file_basename(source),
            message_type=MessageType.VERBOSE,
        )
        logger.info(f"Applying {transformation} on {source}")

        document = load_document(source, preserve_whitespace=self.config.preserve_whitespace)
        transform_text = read_transform_text(transformation)

        engine = self._resolve_engine_factory()(transform_text, run_logger)
        applied = engine.apply(document)

        passed = bool(applied) and not run_logger.has_logged_errors
        if not passed:
            run_logger.log_message(
                "Error while applying transformations '{0}'.",
                file_basename(transformation),
            )
            logger.warning(f"Transformation {transformation} failed on {source}")

        self._logger = run_logger
        self._last_result = TransformValidationResult(
            passed=passed,
            source=source,
            transformation=transformation,
            error_log=run_logger.error_log,
            warning_log=run_logger.warning_log,
            verbose_log=run_logger.verbose_log,
        )
        return passed

    def _resolve_engine_factory(self) -> EngineFactory:
        if self._engine_factory is None:
            self._engine_factory = load_engine_factory(self.config.engine.engine)
        return self._engine_factory
