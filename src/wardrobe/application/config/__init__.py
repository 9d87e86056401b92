"""Configuration schema and loading system for wardrobe spaces.

This package provides JSON-based configuration loading and validation.
It includes Pydantic models for schema validation, a configuration loader
with comprehensive error handling, and layout advisory checks.

Public API:
    - WardrobeConfiguration: Root configuration model
    - SpaceConfigSchema: Space dimensions and installation context
    - SoffitConfigSchema: Soffit configuration model
    - OutputConfig: Output format configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full configuration validation
    - config_to_space_config: Convert a configuration to a domain SpaceConfig
    - merge_config_with_cli: Apply command-line overrides

Example:
    >>> from pathlib import Path
    >>> from wardrobe.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("hallway.json"))
    ...     print(f"Space: {config.space.width}x{config.space.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from wardrobe.application.config.adapter import (
    config_to_space_config,
    space_config_from_schema,
)
from wardrobe.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from wardrobe.application.config.merger import merge_config_with_cli
from wardrobe.application.config.schema import (
    OUTPUT_FORMATS,
    SUPPORTED_VERSIONS,
    OutputConfig,
    SoffitConfigSchema,
    SpaceConfigSchema,
    WardrobeConfiguration,
)
from wardrobe.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_layout_advisories,
    validate_config,
)

__all__ = [
    # Schema models
    "WardrobeConfiguration",
    "SpaceConfigSchema",
    "SoffitConfigSchema",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "OUTPUT_FORMATS",
    # Loader
    "load_config",
    "load_config_from_dict",
    "ConfigError",
    # Validator
    "ValidationResult",
    "ValidationError",
    "ValidationWarning",
    "check_layout_advisories",
    "validate_config",
    # Adapter
    "config_to_space_config",
    "space_config_from_schema",
    # Merger
    "merge_config_with_cli",
]
