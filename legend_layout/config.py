"""Central configuration management for legend layout.

Implements environment-backed configuration objects for the layout constants
and the text measurement backend, and a manager with validation and a
summarized environment view.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()

MEASURE_BACKENDS: frozenset[str] = frozenset({"reportlab", "heuristic"})


def env_int(name: str, default: int) -> int:
    """Read integer env var with clear error messages.

    Returns default when unset; raises ConfigurationError with the env name
    and raw value when parsing fails.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid integer for {name}={raw!r}") from e


def env_float(name: str, default: float) -> float:
    """Read float env var with clear error messages.

    Returns default when unset; raises ConfigurationError with the env name
    and raw value when parsing fails.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid float for {name}={raw!r}") from e


@dataclass
class LegendLayoutConfig:
    """Fixed pixel constants composing a single legend entry's footprint.

    ``checkbox_width`` is only applied when the legend options enable
    checkboxes; the engine resolves that once per legend.
    """

    checkbox_width: float = field(
        default_factory=lambda: env_float("LEGEND_CHECKBOX_WIDTH", 10)
    )
    marker_width: float = field(
        default_factory=lambda: env_float("LEGEND_MARKER_WIDTH", 12)
    )
    label_left_padding: float = field(
        default_factory=lambda: env_float("LEGEND_LABEL_LEFT_PADDING", 5)
    )
    area_padding: float = field(
        default_factory=lambda: env_float("LEGEND_AREA_PADDING", 10)
    )

    def __post_init__(self) -> None:
        """Validate layout constants on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate that every constant is within 0..200 pixels."""
        constants = {
            "LEGEND_CHECKBOX_WIDTH": self.checkbox_width,
            "LEGEND_MARKER_WIDTH": self.marker_width,
            "LEGEND_LABEL_LEFT_PADDING": self.label_left_padding,
            "LEGEND_AREA_PADDING": self.area_padding,
        }
        for name, value in constants.items():
            if not 0 <= value <= 200:
                raise ConfigurationError(f"{name} must be between 0 and 200 pixels")


@dataclass
class MeasurementConfig:
    """Text measurement backend configuration with environment defaults."""

    backend: str = field(
        default_factory=lambda: os.getenv("LEGEND_MEASURE_BACKEND", "reportlab")
    )
    average_char_width_em: float = field(
        default_factory=lambda: env_float("LEGEND_AVERAGE_CHAR_WIDTH_EM", 0.5)
    )
    line_height_factor: float = field(
        default_factory=lambda: env_float("LEGEND_LINE_HEIGHT_FACTOR", 1.2)
    )
    cache_size: int = field(
        default_factory=lambda: env_int("LEGEND_MEASURE_CACHE_SIZE", 1024)
    )

    def __post_init__(self) -> None:
        """Normalize the backend name and validate on creation."""
        self.backend = (self.backend or "").strip().lower()
        self.validate()

    def validate(self) -> None:
        """Validate backend choice and metric ranges."""
        if self.backend not in MEASURE_BACKENDS:
            raise ConfigurationError(
                "LEGEND_MEASURE_BACKEND must be one of: "
                + ", ".join(sorted(MEASURE_BACKENDS))
            )
        if not 0.1 <= self.average_char_width_em <= 2.0:
            raise ConfigurationError(
                "LEGEND_AVERAGE_CHAR_WIDTH_EM must be between 0.1 and 2.0"
            )
        if not 0.5 <= self.line_height_factor <= 3.0:
            raise ConfigurationError(
                "LEGEND_LINE_HEIGHT_FACTOR must be between 0.5 and 3.0"
            )
        if self.cache_size < 0 or self.cache_size > 100_000:
            raise ConfigurationError(
                "LEGEND_MEASURE_CACHE_SIZE must be between 0 and 100000"
            )


class ConfigurationManager:
    """Centralized configuration with validation and environment loading."""

    def __init__(self) -> None:
        """Create a configuration manager and load sections."""
        self.layout = LegendLayoutConfig()
        self.measurement = MeasurementConfig()

    def validate_all(self) -> None:
        """Validate all configuration sections."""
        self.layout.validate()
        self.measurement.validate()

    def get_environment_summary(self) -> dict[str, Any]:
        """Return a summarized view of effective configuration."""
        return {
            "checkbox_width": self.layout.checkbox_width,
            "marker_width": self.layout.marker_width,
            "label_left_padding": self.layout.label_left_padding,
            "area_padding": self.layout.area_padding,
            "measure_backend": self.measurement.backend,
            "average_char_width_em": self.measurement.average_char_width_em,
            "line_height_factor": self.measurement.line_height_factor,
            "measure_cache_size": self.measurement.cache_size,
        }
