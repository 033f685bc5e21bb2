"""Configuration classes for the fluent XML builder.

The pure builder operations take no configuration. These objects control the
``XMLBuilder`` wrapper: which declaration a document starts from and whether
each builder step is logged.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

DEFAULT_VERSION = "1.0"
DEFAULT_ENCODING = "UTF-8"

_VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_COMPONENTS = ["declaration", "logging"]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class DeclarationConfig:
    """Version and encoding written into the XML declaration."""

    version: str = DEFAULT_VERSION
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Validate declaration values."""
        if not isinstance(self.version, str) or not self.version:
            raise ValueError("version must be a non-empty string")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError("encoding must be a non-empty string")

    @property
    def is_default(self) -> bool:
        """Check whether this is the fixed UTF-8 / 1.0 declaration."""
        return self.version == DEFAULT_VERSION and self.encoding == DEFAULT_ENCODING


@dataclass(frozen=True)
class LoggingConfig:
    """Configuration for per-operation builder logging."""

    enable_operation_logging: bool = False
    logging_level: str = "DEBUG"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    enable_correlation_tracking: bool = True

    def __post_init__(self) -> None:
        """Validate logging configuration."""
        if self.logging_level not in _VALID_LEVELS:
            raise ValueError(f"logging_level must be one of {_VALID_LEVELS}")

    @property
    def numeric_level(self) -> int:
        """Get the ``logging`` module level for ``logging_level``."""
        level: int = getattr(logging, self.logging_level)
        return level


@dataclass(frozen=True)
class BuilderConfig:
    """Immutable configuration for ``XMLBuilder``.

    Thread-safe due to frozen dataclass implementation; derive variants with
    ``override`` rather than mutating.
    """

    declaration: DeclarationConfig = field(default_factory=DeclarationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    correlation_id: Optional[str] = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete builder configuration."""
        try:
            self.declaration.__post_init__()
            self.logging.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

        if self.correlation_id is not None and not self.correlation_id:
            raise ConfigValidationError(
                "correlation_id must be a non-empty string or None",
                field_name="correlation_id",
                suggestions=["Pass None to disable correlation tracking"],
            )

    @property
    def effective_correlation_id(self) -> Optional[str]:
        """Correlation ID to attach to log records, if tracking is enabled."""
        if not self.logging.enable_correlation_tracking:
            return None
        return self.correlation_id

    def override(self, **kwargs: Any) -> "BuilderConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Configuration fields to override; nested fields use
                ``component__field`` notation

        Returns:
            New BuilderConfig instance with overrides applied

        Example:
            >>> config = BuilderConfig()
            >>> new_config = config.override(
            ...     declaration__encoding="ISO-8859-1",
            ...     logging__enable_operation_logging=True,
            ... )
        """
        nested_overrides: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                        suggestions=[f"Use one of {_COMPONENTS}"],
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                nested_overrides[key] = value

        new_fields: Dict[str, Any] = {}
        for key, value in nested_overrides.items():
            if key in _COMPONENTS and isinstance(value, dict):
                try:
                    new_fields[key] = replace(getattr(self, key), **value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            else:
                new_fields[key] = value

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "declaration": {
                "version": self.declaration.version,
                "encoding": self.declaration.encoding,
            },
            "logging": {
                "enable_operation_logging": self.logging.enable_operation_logging,
                "logging_level": self.logging.logging_level,
                "enable_correlation_tracking": (
                    self.logging.enable_correlation_tracking
                ),
            },
            "correlation_id": self.correlation_id,
            "name": self.name,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary in the shape produced by ``to_dict``

        Returns:
            BuilderConfig instance created from dictionary
        """
        unknown = set(data) - {"declaration", "logging", "correlation_id", "name"}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration keys: {sorted(unknown)}"
            )

        try:
            declaration = DeclarationConfig(**data.get("declaration", {}))
            logging_config = LoggingConfig(**data.get("logging", {}))
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        return cls(
            declaration=declaration,
            logging=logging_config,
            correlation_id=data.get("correlation_id"),
            name=data.get("name"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "BuilderConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def default(cls) -> "BuilderConfig":
        """Create the default configuration: UTF-8 1.0 declaration, no logging."""
        return cls(name="default")

    @classmethod
    def verbose(cls, correlation_id: Optional[str] = None) -> "BuilderConfig":
        """Create configuration that logs every builder step at DEBUG."""
        return cls(
            logging=LoggingConfig(
                enable_operation_logging=True,
                logging_level="DEBUG",
            ),
            correlation_id=correlation_id,
            name="verbose",
        )
