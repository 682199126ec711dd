"""Legend dimension engine.

Computes the width and height a chart legend needs from its labels, font
theme and alignment. Horizontal legends wrap labels into lines by dividing
the label sequence into ``k`` equally sized contiguous groups (by count, not
by width) and increasing ``k`` until the widest line fits the chart width or
stops getting narrower. Vertical legends are as wide as their widest entry.

The engine is a pure function of its inputs: it performs no I/O and keeps no
state between calls, so one instance may be used from several threads as
long as the injected measurer is reentrant.
"""

from __future__ import annotations

from collections.abc import Sequence
from math import floor

from .config import LegendLayoutConfig
from .logging_config import get_logger
from .measurement import TextMeasurer, create_text_measurer
from .models import (
    Dimension,
    LabelTheme,
    LegendSpec,
    LinePartition,
    is_horizontal_legend,
    is_pie_legend_align,
    is_pie_type_chart,
)

logger = get_logger("layout")


def divide_labels(labels: Sequence[str], count: int) -> tuple[tuple[str, ...], ...]:
    """Split ``labels`` into contiguous groups of ``round(len / count)``.

    Rounding is half-up, with at least one label per group. Any remainder
    forms a shorter final group. An empty sequence yields a single empty
    group. Raises ValueError when ``count`` is less than 1.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if not labels:
        return ((),)

    limit = max(1, floor(len(labels) / count + 0.5))
    groups: list[tuple[str, ...]] = []
    current: list[str] = []
    for label in labels:
        if len(current) < limit:
            current.append(label)
        else:
            groups.append(tuple(current))
            current = [label]

    if current:
        groups.append(tuple(current))

    return tuple(groups)


class LegendLayoutEngine:
    """Size one legend.

    Parameters
    - spec: Labels, options, theme and chart types for the legend.
    - measurer: Text measurement capability; built from environment
      configuration when omitted.
    - config: Footprint constants; environment defaults when omitted.
    """

    def __init__(
        self,
        spec: LegendSpec,
        *,
        measurer: TextMeasurer | None = None,
        config: LegendLayoutConfig | None = None,
    ) -> None:
        self.spec = spec
        self.measurer = measurer if measurer is not None else create_text_measurer()
        self.config = config if config is not None else LegendLayoutConfig()
        self.checkbox_width = (
            self.config.checkbox_width if spec.options.has_checkbox else 0
        )

    # -------------------------- Footprint --------------------------
    def make_legend_width(self, label_width: float) -> float:
        """Total horizontal space of one entry whose text is ``label_width``."""
        return (
            label_width
            + self.checkbox_width
            + self.config.marker_width
            + self.config.label_left_padding
            + self.config.area_padding
        )

    def _line_width(self, labels: Sequence[str], theme: LabelTheme) -> float:
        return sum(
            self.make_legend_width(self.measurer.measure_width(label, theme))
            for label in labels
        )

    def _max_line_width(
        self, divided_labels: Sequence[Sequence[str]], theme: LabelTheme
    ) -> float:
        return max(self._line_width(group, theme) for group in divided_labels)

    # ------------------------- Partitioning -------------------------
    def partition_labels(
        self, labels: Sequence[str], chart_width: float, theme: LabelTheme
    ) -> LinePartition:
        """Find the line grouping for a horizontal legend.

        Starting at one line, the division count grows while the widest line
        is at least ``chart_width``. When a larger count leaves the widest
        line unchanged, the previous grouping is the fixed point and is
        returned even if it still does not fit.
        """
        previous: LinePartition | None = None
        count = 1
        while True:
            divided = divide_labels(labels, count)
            current = LinePartition(
                divided_labels=divided,
                max_line_width=self._max_line_width(divided, theme),
            )
            logger.debug(
                "Division %d: %d line(s), max line width %.2f",
                count,
                current.line_count,
                current.max_line_width,
            )

            if previous is not None and current.max_line_width == previous.max_line_width:
                return previous
            if current.max_line_width < chart_width:
                return current

            previous = current
            count += 1

    # --------------------------- Policies ---------------------------
    def make_horizontal_dimension(self, chart_width: float) -> Dimension:
        theme = self.spec.theme.label
        partition = self.partition_labels(self.spec.labels, chart_width, theme)
        lines_height = sum(
            self.measurer.measure_max_height(group, theme)
            for group in partition.divided_labels
        )
        return Dimension(
            width=partition.max_line_width,
            height=lines_height + self.config.area_padding * 2,
        )

    def make_vertical_dimension(self) -> Dimension:
        theme = self.spec.theme.label
        max_label_width = max(
            (self.measurer.measure_width(label, theme) for label in self.spec.labels),
            default=0.0,
        )
        return Dimension(width=self.make_legend_width(max_label_width), height=0)

    def is_skip_legend(self) -> bool:
        """Whether legend sizing is bypassed for this spec."""
        options = self.spec.options
        is_pie_type_charts = all(
            is_pie_type_chart(chart_type) for chart_type in self.spec.chart_types
        )
        return (is_pie_type_charts and is_pie_legend_align(options.align)) or (
            options.hidden
        )

    # -------------------------- Public API --------------------------
    def compute_dimension(self, chart_width: float) -> Dimension:
        """Return the legend dimension for a chart ``chart_width`` wide.

        A skipped legend returns ``width=0`` with ``height`` left as None.
        """
        if self.is_skip_legend():
            logger.debug(
                "Skipping legend sizing (chart_types=%s, align=%s, hidden=%s)",
                self.spec.chart_types,
                self.spec.options.align,
                self.spec.options.hidden,
            )
            return Dimension(width=0)
        if is_horizontal_legend(self.spec.options.align):
            return self.make_horizontal_dimension(chart_width)
        return self.make_vertical_dimension()


def compute_dimension(
    spec: LegendSpec,
    chart_width: float,
    *,
    measurer: TextMeasurer | None = None,
    config: LegendLayoutConfig | None = None,
) -> Dimension:
    """Convenience wrapper: size ``spec`` for a chart ``chart_width`` wide."""
    engine = LegendLayoutEngine(spec, measurer=measurer, config=config)
    return engine.compute_dimension(chart_width)
