"""
Transformation Framework
========================

Interfaces between transformation engines and the loggers they report to.

Components:
- TransformationLogger: Abstract logging sink engines call into
- TransformLogger: Stream-accumulating logger used by the validator
- BaseTransformEngine: Abstract base for engines
- load_engine_factory: Resolve an engine from a "module:Name" path
"""

from xdt_core.transform.base import (
    MessageType,
    TransformationLogger,
    BaseTransformEngine,
    EngineConfigurationError,
    EngineFactory,
    load_engine_factory,
)

from xdt_core.transform.logger import TransformLogger

__all__ = [
    "MessageType",
    "TransformationLogger",
    "BaseTransformEngine",
    "EngineConfigurationError",
    "EngineFactory",
    "load_engine_factory",
    "TransformLogger",
]
