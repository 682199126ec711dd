"""Text measurement adapters used by the legend layout engine.

The engine only needs two queries: the rendered width of one label and the
tallest rendered height within a group of labels. Both are treated as pure
functions of ``(labels, theme)``, which is what makes memoization safe.

- ``HeuristicTextMeasurer`` uses an average character width model that is
  deterministic for unit testing and needs no font files.
- ``ReportLabTextMeasurer`` uses real Type 1 / TrueType metrics from
  ReportLab's ``pdfmetrics`` module.
- ``CachedTextMeasurer`` memoizes any measurer with ``functools.lru_cache``.
"""

from __future__ import annotations

import importlib
import threading
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, Protocol

from .config import MeasurementConfig
from .errors import MeasurementError
from .logging_config import get_logger
from .models import LabelTheme

logger = get_logger("measurement")


class TextMeasurer(Protocol):
    """Protocol for the text measurement capability.

    Implementations must be deterministic and side-effect-free for a given
    font context so layout results are reproducible.
    """

    def measure_width(
        self, label: str, theme: LabelTheme
    ) -> float:  # pragma: no cover
        ...

    def measure_max_height(
        self, labels: Sequence[str], theme: LabelTheme
    ) -> float:  # pragma: no cover
        ...


class HeuristicTextMeasurer:
    """Estimate text extents from font size alone.

    width = font_size * average_char_width_em * len(label)
    height = font_size * line_height_factor (0 for an empty group)
    """

    def __init__(
        self,
        *,
        average_char_width_em: float = 0.5,
        line_height_factor: float = 1.2,
    ) -> None:
        if average_char_width_em <= 0:
            raise ValueError("average_char_width_em must be positive")
        if line_height_factor <= 0:
            raise ValueError("line_height_factor must be positive")
        self.average_char_width_em = float(average_char_width_em)
        self.line_height_factor = float(line_height_factor)

    def measure_width(self, label: str, theme: LabelTheme) -> float:
        return theme.font_size * self.average_char_width_em * len(label)

    def measure_max_height(self, labels: Sequence[str], theme: LabelTheme) -> float:
        if not labels:
            return 0.0
        return theme.font_size * self.line_height_factor


class ReportLabTextMeasurer:
    """Measure labels with ReportLab font metrics.

    ``LabelTheme.font_family`` may be a single font name or a CSS-style
    family list (``"Verdana, Helvetica, sans-serif"``); the first name
    ReportLab knows is used. Unknown families fall back to the Helvetica
    standard font, bold when the theme asks for it.
    """

    def __init__(self) -> None:
        try:
            self._pdfmetrics = importlib.import_module("reportlab.pdfbase.pdfmetrics")
        except ImportError as e:
            raise MeasurementError(
                "ReportLab is required for the reportlab measurement backend"
            ) from e
        self._lock = threading.Lock()
        self._warned_families: set[str] = set()

    def _fallback_font_name(self, theme: LabelTheme) -> str:
        if (theme.font_weight or "normal").lower() == "bold":
            return "Helvetica-Bold"
        return "Helvetica"

    def resolve_font_name(self, theme: LabelTheme) -> str:
        """Return the ReportLab font name used for ``theme``."""
        for candidate in (theme.font_family or "").split(","):
            name = candidate.strip().strip("'\"")
            if not name:
                continue
            try:
                self._pdfmetrics.getFont(name)
            except KeyError:
                continue
            return name

        fallback = self._fallback_font_name(theme)
        with self._lock:
            first_time = theme.font_family not in self._warned_families
            self._warned_families.add(theme.font_family)
        if first_time:
            logger.warning(
                "Font family %r not registered with ReportLab; using %s",
                theme.font_family,
                fallback,
            )
        return fallback

    def measure_width(self, label: str, theme: LabelTheme) -> float:
        font_name = self.resolve_font_name(theme)
        return float(self._pdfmetrics.stringWidth(label, font_name, theme.font_size))

    def measure_max_height(self, labels: Sequence[str], theme: LabelTheme) -> float:
        if not labels:
            return 0.0
        # Every label in a group shares one font, so the extent is uniform
        font_name = self.resolve_font_name(theme)
        ascent, descent = self._pdfmetrics.getAscentDescent(font_name, theme.font_size)
        return float(ascent - descent)


class CachedTextMeasurer:
    """LRU memoization around another measurer.

    Widths are cached per ``(label, theme)`` and heights per
    ``(tuple(labels), theme)``, each holding up to ``max_entries`` results.
    """

    def __init__(self, inner: TextMeasurer, *, max_entries: int = 1024) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.inner = inner
        self.max_entries = max_entries
        self._cached_width = lru_cache(maxsize=max_entries)(inner.measure_width)
        self._cached_height = lru_cache(maxsize=max_entries)(self._height_uncached)

    def _height_uncached(self, labels: tuple[str, ...], theme: LabelTheme) -> float:
        return self.inner.measure_max_height(labels, theme)

    def cache_info(self) -> dict[str, Any]:
        """Return ``functools`` cache statistics for widths and heights."""
        return {
            "width": self._cached_width.cache_info(),
            "height": self._cached_height.cache_info(),
        }

    def cache_clear(self) -> None:
        self._cached_width.cache_clear()
        self._cached_height.cache_clear()

    def measure_width(self, label: str, theme: LabelTheme) -> float:
        return self._cached_width(label, theme)

    def measure_max_height(self, labels: Sequence[str], theme: LabelTheme) -> float:
        return self._cached_height(tuple(labels), theme)


def create_text_measurer(config: MeasurementConfig | None = None) -> TextMeasurer:
    """Build the measurer named by ``config.backend``, cached if enabled."""
    config = config or MeasurementConfig()
    measurer: TextMeasurer
    if config.backend == "heuristic":
        measurer = HeuristicTextMeasurer(
            average_char_width_em=config.average_char_width_em,
            line_height_factor=config.line_height_factor,
        )
    else:
        measurer = ReportLabTextMeasurer()

    if config.cache_size > 0:
        measurer = CachedTextMeasurer(measurer, max_entries=config.cache_size)
    logger.debug(
        "Created %s text measurer (cache_size=%d)", config.backend, config.cache_size
    )
    return measurer
