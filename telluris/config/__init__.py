"""
Configuration management for telluris.

This module provides:
- TellurisConfig: Data class grouping ellipsoid, sampling and logging settings
- load_config / create_default_config: YAML and JSON persistence
- build_spatial_reference: ECEF transform built from a configuration
"""

from telluris.config.settings import (
    EllipsoidConfig,
    SamplingConfig,
    LoggingConfig,
    TellurisConfig,
    load_config,
    create_default_config,
    validate_config,
    build_spatial_reference,
    configure_logging,
)

__all__ = [
    "EllipsoidConfig",
    "SamplingConfig",
    "LoggingConfig",
    "TellurisConfig",
    "load_config",
    "create_default_config",
    "validate_config",
    "build_spatial_reference",
    "configure_logging",
]
