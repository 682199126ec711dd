"""Legend specification and result models.

Inputs are frozen dataclasses so one ``LegendSpec`` can be shared across
threads and reused for repeated layout passes. Chart-type and alignment
classification helpers live here too, since both the skip policy and the
orientation dispatch read them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import InvalidLegendSpecError


class LegendAlign(str, Enum):
    """Legend placement relative to the plot area."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    OUTER = "outer"  # pie charts: labels outside the pie
    CENTER = "center"  # pie charts: labels inside the slices


HORIZONTAL_ALIGNS: frozenset[LegendAlign] = frozenset(
    {LegendAlign.TOP, LegendAlign.BOTTOM}
)
PIE_LEGEND_ALIGNS: frozenset[LegendAlign] = frozenset(
    {LegendAlign.OUTER, LegendAlign.CENTER}
)
PIE_CHART_TYPES: frozenset[str] = frozenset({"pie", "donut"})


def is_pie_type_chart(chart_type: str) -> bool:
    return chart_type in PIE_CHART_TYPES


def is_pie_legend_align(align: LegendAlign) -> bool:
    return align in PIE_LEGEND_ALIGNS


def is_horizontal_legend(align: LegendAlign) -> bool:
    return align in HORIZONTAL_ALIGNS


def _parse_align(value: Any) -> LegendAlign:
    if isinstance(value, LegendAlign):
        return value
    try:
        return LegendAlign(str(value).strip().lower())
    except ValueError as e:
        raise InvalidLegendSpecError(
            f"Unsupported legend align {value!r}",
            context={"align": value},
        ) from e


@dataclass(frozen=True)
class LabelTheme:
    """Font settings used to measure legend labels."""

    font_family: str = "Helvetica"
    font_size: float = 11.0
    font_weight: str = "normal"  # "normal" | "bold"


@dataclass(frozen=True)
class LegendTheme:
    label: LabelTheme = field(default_factory=LabelTheme)


@dataclass(frozen=True)
class LegendOptions:
    """Legend options with defaults resolved at construction."""

    has_checkbox: bool = True
    align: LegendAlign = LegendAlign.RIGHT
    hidden: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "align", _parse_align(self.align))


@dataclass(frozen=True)
class LegendSpec:
    """Everything one legend sizing pass reads.

    ``chart_types`` defaults to ``(chart_type,)`` for single-type charts.
    Labels are stored as a tuple so the caller's sequence is never mutated.
    """

    chart_type: str
    labels: tuple[str, ...] = ()
    options: LegendOptions = field(default_factory=LegendOptions)
    theme: LegendTheme = field(default_factory=LegendTheme)
    chart_types: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        labels = (self.labels,) if isinstance(self.labels, str) else self.labels
        object.__setattr__(self, "labels", tuple(labels))
        chart_types = self.chart_types
        if isinstance(chart_types, str):
            chart_types = (chart_types,)
        chart_types = tuple(chart_types) or (self.chart_type,)
        object.__setattr__(self, "chart_types", chart_types)

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "LegendSpec":
        """Build a spec from the camelCase parameter mapping used by chart
        configuration payloads (``chartType``, ``chartTypes``, ``options``,
        ``theme``, ``legendLabels``).

        Missing option keys take their defaults; numeric labels become
        strings. Raises InvalidLegendSpecError for an unknown ``align`` or a
        missing ``chartType``.
        """
        chart_type = params.get("chartType")
        if not chart_type:
            raise InvalidLegendSpecError("chartType is required")

        raw_options = params.get("options") or {}
        options = LegendOptions(
            has_checkbox=raw_options.get("hasCheckbox", True) is not False,
            align=raw_options.get("align", LegendAlign.RIGHT),
            hidden=bool(raw_options.get("hidden", False)),
        )

        raw_label_theme = (params.get("theme") or {}).get("label") or {}
        defaults = LabelTheme()
        label_theme = LabelTheme(
            font_family=raw_label_theme.get("fontFamily", defaults.font_family),
            font_size=float(raw_label_theme.get("fontSize", defaults.font_size)),
            font_weight=raw_label_theme.get("fontWeight", defaults.font_weight),
        )

        labels: Iterable[Any] = params.get("legendLabels") or ()
        chart_types: Sequence[str] = params.get("chartTypes") or ()
        return cls(
            chart_type=str(chart_type),
            labels=tuple(str(label) for label in labels),
            options=options,
            theme=LegendTheme(label=label_theme),
            chart_types=tuple(chart_types),
        )


@dataclass(frozen=True)
class Dimension:
    """Legend footprint. ``height`` is None when legend sizing was skipped."""

    width: float
    height: float | None = None

    def as_dict(self) -> dict[str, float]:
        if self.height is None:
            return {"width": self.width}
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class LinePartition:
    """Labels grouped into visual lines, with the widest line's footprint."""

    divided_labels: tuple[tuple[str, ...], ...]
    max_line_width: float

    @property
    def line_count(self) -> int:
        return len(self.divided_labels)
