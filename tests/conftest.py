from __future__ import annotations

from collections.abc import Sequence

import pytest

from legend_layout.config import LegendLayoutConfig
from legend_layout.models import LabelTheme

_LEGEND_ENV_VARS = (
    "LEGEND_CHECKBOX_WIDTH",
    "LEGEND_MARKER_WIDTH",
    "LEGEND_LABEL_LEFT_PADDING",
    "LEGEND_AREA_PADDING",
    "LEGEND_MEASURE_BACKEND",
    "LEGEND_AVERAGE_CHAR_WIDTH_EM",
    "LEGEND_LINE_HEIGHT_FACTOR",
    "LEGEND_MEASURE_CACHE_SIZE",
)


@pytest.fixture(autouse=True)
def legend_env_defaults(monkeypatch):
    """Start every test from built-in defaults, not the developer's shell."""
    for name in _LEGEND_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


class StubMeasurer:
    """Measurer with fixed per-label widths and a fixed line height."""

    def __init__(self, widths: dict[str, float], line_height: float = 10.0) -> None:
        self.widths = widths
        self.line_height = line_height
        self.width_calls = 0

    def measure_width(self, label: str, theme: LabelTheme) -> float:
        self.width_calls += 1
        return self.widths[label]

    def measure_max_height(self, labels: Sequence[str], theme: LabelTheme) -> float:
        return self.line_height if labels else 0.0


@pytest.fixture
def stub_measurer_factory():
    return StubMeasurer


@pytest.fixture
def zero_config():
    """Layout constants that add nothing, so footprints equal text widths."""
    return LegendLayoutConfig(
        checkbox_width=0, marker_width=0, label_left_padding=0, area_padding=0
    )


@pytest.fixture
def default_config():
    return LegendLayoutConfig(
        checkbox_width=10, marker_width=12, label_left_padding=5, area_padding=10
    )
