"""Legend layout core package.

Exposes the legend dimension engine, its input/output models, text
measurement adapters, configuration, standardized errors, and logging setup
utilities.
"""

from __future__ import annotations

from .config import ConfigurationManager, LegendLayoutConfig, MeasurementConfig
from .errors import LegendError
from .layout import LegendLayoutEngine, compute_dimension
from .logging_config import get_logger, setup_logging
from .measurement import create_text_measurer
from .models import (
    Dimension,
    LabelTheme,
    LegendAlign,
    LegendOptions,
    LegendSpec,
    LegendTheme,
)

__all__: list[str] = [
    "ConfigurationManager",
    "LegendLayoutConfig",
    "MeasurementConfig",
    "LegendError",
    "LegendLayoutEngine",
    "compute_dimension",
    "create_text_measurer",
    "Dimension",
    "LabelTheme",
    "LegendAlign",
    "LegendOptions",
    "LegendSpec",
    "LegendTheme",
    "setup_logging",
    "get_logger",
]
