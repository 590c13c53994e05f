"""
XDT Core Library
================

A small library for testing declarative XML transformations (XDT-style
config transforms) that provides:

- A logger that separates errors, warnings and verbose output
- A validator that applies a transform and reports pass/fail
- Document and transform loading on top of lxml
- Configuration loading (JSON / YAML)

Architecture
------------

    xdt_core/
    ├── transform/     - Engine and logger interfaces, TransformLogger
    ├── validation/    - TransformValidator, results, log comparison
    ├── xml/           - Document loading utilities
    └── config/        - Configuration management

The transformation engine itself is supplied by the caller, either as
a factory passed to TransformValidator or as a "module:Name" path in
the configuration.

Usage
-----

    from xdt_core import TransformValidator

    validator = TransformValidator(engine_factory=MyEngine)
    assert validator.validate("web.config", "web.Release.config")
    assert validator.error_log == ""

    # Keep warnings out of the error log
    validator.validate("web.config", "web.Debug.config", treat_warnings_as_errors=False)
    print(validator.warning_log)
"""

__version__ = "1.0.0"

from xdt_core.config.settings import (
    ValidatorConfig,
    LoggerConfig,
    EngineConfig,
    load_config,
    save_config,
)

from xdt_core.transform.base import (
    MessageType,
    TransformationLogger,
    BaseTransformEngine,
    EngineConfigurationError,
    load_engine_factory,
)

from xdt_core.transform.logger import TransformLogger

from xdt_core.validation.base import TransformValidationResult

from xdt_core.validation.compare import (
    LogLineMismatch,
    compare_log_lines,
)

from xdt_core.validation.transform_validator import TransformValidator

__all__ = [
    # Version
    "__version__",
    # Config
    "ValidatorConfig",
    "LoggerConfig",
    "EngineConfig",
    "load_config",
    "save_config",
    # Transform
    "MessageType",
    "TransformationLogger",
    "BaseTransformEngine",
    "EngineConfigurationError",
    "load_engine_factory",
    "TransformLogger",
    # Validation
    "TransformValidator",
    "TransformValidationResult",
    "LogLineMismatch",
    "compare_log_lines",
]
