"""
Configuration Settings
======================

Configuration dataclasses for transformation validation runs.
"""

from dataclasses import dataclass, field, asdict
from pathlib import Path
import json
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass
class LoggerConfig:
    """Transformation logger configuration."""

    indent_unit: str = "  "
    include_stack_trace: bool = False


@dataclass
class EngineConfig:
    """Transformation engine configuration."""

    # Import path of the engine class or factory, e.g. "mypkg.engine:XdtEngine"
    engine: str = ""


@dataclass
class ValidatorConfig:
    """
    Complete validator configuration.

    Example:
        config = ValidatorConfig()
        config.engine.engine = "mypkg.engine:XdtEngine"
        config.treat_warnings_as_errors = False
        save_config(config, Path("validator.yaml"))
    """

    logger: LoggerConfig = field(default_factory=LoggerConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)

    treat_warnings_as_errors: bool = True
    preserve_whitespace: bool = True
    log_level: str = "INFO"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'logger': asdict(self.logger),
            'engine': asdict(self.engine),
            'treat_warnings_as_errors': self.treat_warnings_as_errors,
            'preserve_whitespace': self.preserve_whitespace,
            'log_level': self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ValidatorConfig':
        """Create from dictionary."""
        config = cls()

        if 'logger' in data:
            config.logger = LoggerConfig(**data['logger'])
        if 'engine' in data:
            config.engine = EngineConfig(**data['engine'])

        if 'treat_warnings_as_errors' in data:
            config.treat_warnings_as_errors = bool(data['treat_warnings_as_errors'])
        if 'preserve_whitespace' in data:
            config.preserve_whitespace = bool(data['preserve_whitespace'])
        if 'log_level' in data:
            config.log_level = data['log_level']

        return config


def load_config(config_path: Path) -> ValidatorConfig:
    """
    Load configuration from file.

    Supports JSON and YAML formats based on file extension.

    Args:
        config_path: Path to config file

    Returns:
        ValidatorConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, 'r', encoding='utf-8') as f:
        if suffix in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        elif suffix == '.json':
            data = json.load(f) or {}
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    logger.info(f"Loaded configuration from {config_path}")
    return ValidatorConfig.from_dict(data)


def save_config(config: ValidatorConfig, config_path: Path) -> None:
    """
    Save configuration to file.

    Supports JSON and YAML formats based on file extension.

    Raises:
        ValueError: If file format is not supported
    """
    suffix = config_path.suffix.lower()
    if suffix not in ['.yaml', '.yml', '.json']:
        raise ValueError(f"Unsupported config format: {suffix}")

    data = config.to_dict()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        if suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")


def get_default_config() -> ValidatorConfig:
    """Get default configuration."""
    return ValidatorConfig()
