"""Configuration classes for document validation.

The scanner itself takes no options; configuration only covers what happens
around it: how input is read and prepared, and what is recorded about a run.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Configuration validation error with field context."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass
class ValidatorConfig:
    """Configuration for validation runs.

    Attributes:
        trim_input: Strip surrounding whitespace of the whole input before
            scanning, as the command line does
        encoding: Text encoding used for file input
        max_input_size_bytes: Reject larger inputs without scanning them
        correlation_id: Optional correlation ID attached to log records
        enable_metrics: Record timing figures in results
    """

    trim_input: bool = True
    encoding: str = "utf-8"
    max_input_size_bytes: Optional[int] = None
    correlation_id: Optional[str] = None
    enable_metrics: bool = True

    def __post_init__(self) -> None:
        """Validate validator configuration."""
        if not isinstance(self.encoding, str):
            raise ValueError("encoding must be a string")
        if not self.encoding:
            raise ValueError("encoding cannot be empty")
        try:
            "".encode(self.encoding)
        except LookupError:
            raise ValueError(f"unknown encoding: {self.encoding}") from None
        if self.max_input_size_bytes is not None and self.max_input_size_bytes <= 0:
            raise ValueError("max_input_size_bytes must be > 0 or None")

    @classmethod
    def default(cls) -> "ValidatorConfig":
        """Create the default configuration."""
        return cls()

    @classmethod
    def strict(cls) -> "ValidatorConfig":
        """Create a configuration that scans the input exactly as given."""
        return cls(trim_input=False)

    def override(self, **kwargs: Any) -> "ValidatorConfig":
        """Create a copy with some fields replaced.

        Raises:
            ConfigValidationError: If a field is unknown or a value is invalid
        """
        known = {f.name for f in fields(self)}
        for name in kwargs:
            if name not in known:
                raise ConfigValidationError(f"Unknown configuration field: {name}", name)
        try:
            return replace(self, **kwargs)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ValidatorConfig":
        """Create configuration from dictionary.

        Unknown keys are ignored.

        Raises:
            ConfigValidationError: If a value is invalid
        """
        known = {f.name for f in fields(cls)}
        try:
            return cls(**{key: value for key, value in data.items() if key in known})
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def from_json(cls, json_str: str) -> "ValidatorConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)
