"""
Configuration file support for telluris.

Provides YAML and JSON configuration loading and validation for the
reference ellipsoid, default sampling parameters and logging.

Usage
-----
>>> from telluris.config import load_config, build_spatial_reference
>>> config = load_config("telluris.yaml")
>>> reference = build_spatial_reference(config)
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Any, Union

import yaml

from telluris.spatial.transformations.ecef import ECEF, Ellipsoid
from telluris.utils.constants import (
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
    DEFAULT_EPSILON,
)
from telluris.utils.log import DEFAULT_FORMAT, setup_logging

logger = logging.getLogger(__name__)


@dataclass
class EllipsoidConfig:
    """Reference ellipsoid configuration."""

    name: str = "WGS84"
    semi_major_axis: float = WGS84_SEMI_MAJOR_AXIS  # meters
    semi_minor_axis: float = WGS84_SEMI_MINOR_AXIS  # meters


@dataclass
class SamplingConfig:
    """Default sampling parameters for tile grids."""

    grid_x_count: int = 16
    grid_y_count: int = 16
    epsilon: float = DEFAULT_EPSILON  # tolerance for approximate comparisons


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = DEFAULT_FORMAT


@dataclass
class TellurisConfig:
    """Complete telluris configuration."""

    name: str = "default"
    description: str = ""

    ellipsoid: EllipsoidConfig = field(default_factory=EllipsoidConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_json(self, path: Union[str, Path], indent: int = 2) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TellurisConfig":
        """Create a configuration from a dictionary.

        Missing sections keep their defaults; unknown keys inside a section
        raise ``TypeError``.
        """
        data = data or {}
        config = cls(
            name=data.get('name', 'default'),
            description=data.get('description', ''),
        )

        if 'ellipsoid' in data:
            config.ellipsoid = EllipsoidConfig(**data['ellipsoid'])
        if 'sampling' in data:
            config.sampling = SamplingConfig(**data['sampling'])
        if 'logging' in data:
            config.logging = LoggingConfig(**data['logging'])

        return config


def load_config(path: Union[str, Path]) -> TellurisConfig:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    config : TellurisConfig
        Loaded configuration

    Raises
    ------
    FileNotFoundError
        If configuration file doesn't exist
    ValueError
        If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in ('.yaml', '.yml'):
        with open(path) as f:
            data = yaml.safe_load(f)
    elif suffix == '.json':
        with open(path) as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")

    logger.info(f"Loaded configuration from {path}")
    config = TellurisConfig.from_dict(data)

    for issue in validate_config(config):
        logger.warning(f"Configuration validation error: {issue}")

    return config


def create_default_config(path: Union[str, Path] = "telluris.yaml") -> TellurisConfig:
    """
    Create and save a default configuration file.

    Parameters
    ----------
    path : str or Path
        Output path; YAML unless the suffix is .json

    Returns
    -------
    config : TellurisConfig
        Default configuration
    """
    config = TellurisConfig(
        name="default",
        description="Default telluris configuration (WGS84)",
    )

    path = Path(path)
    if path.suffix.lower() == '.json':
        config.to_json(path)
    else:
        config.to_yaml(path)

    logger.info(f"Saved default configuration to {path}")
    return config


def validate_config(config: TellurisConfig) -> List[str]:
    """
    Validate configuration and return list of issues.

    Parameters
    ----------
    config : TellurisConfig
        Configuration to validate

    Returns
    -------
    issues : list of str
        Validation issues (empty if valid)
    """
    issues = []

    # Ellipsoid validation
    if config.ellipsoid.semi_minor_axis <= 0:
        issues.append("Semi-minor axis must be positive")
    if config.ellipsoid.semi_major_axis < config.ellipsoid.semi_minor_axis:
        issues.append("Semi-major axis must not be shorter than the semi-minor axis")

    # Sampling validation
    if config.sampling.grid_x_count < 2:
        issues.append("Grid x count must be at least 2")
    if config.sampling.grid_y_count < 2:
        issues.append("Grid y count must be at least 2")
    if config.sampling.epsilon <= 0:
        issues.append("Epsilon must be positive")

    # Logging validation
    if not isinstance(logging.getLevelName(config.logging.level.upper()), int):
        issues.append(f"Unknown logging level: {config.logging.level}")

    return issues


def build_spatial_reference(config: TellurisConfig) -> ECEF:
    """
    Build the ECEF spatial reference described by ``config``.

    Raises
    ------
    ValueError
        If the configuration does not validate
    """
    issues = validate_config(config)
    if issues:
        raise ValueError("Invalid configuration: " + "; ".join(issues))

    ellipsoid = Ellipsoid(
        semi_major_axis=config.ellipsoid.semi_major_axis,
        semi_minor_axis=config.ellipsoid.semi_minor_axis,
        name=config.ellipsoid.name,
    )
    return ECEF(ellipsoid)


def configure_logging(config: TellurisConfig) -> None:
    """Apply the logging section of ``config``."""
    setup_logging(level=config.logging.level, fmt=config.logging.format)
