import logging

from legend_layout.layout import compute_dimension
from legend_layout.logging_config import get_logger, setup_logging
from legend_layout.models import LegendAlign, LegendOptions, LegendSpec


def _read_log(logger: logging.Logger, path) -> str:
    for h in logger.handlers:
        h.flush()
    return path.read_text()


def test_engine_debug_output_reaches_log_file(tmp_path, stub_measurer_factory, zero_config):
    log_file = tmp_path / "logs" / "legend.log"
    logger = setup_logging(level="debug", log_file=log_file)
    assert logger.level == logging.DEBUG

    hidden = LegendSpec(
        chart_type="bar", labels=("a",), options=LegendOptions(hidden=True)
    )
    compute_dimension(
        hidden, 100, measurer=stub_measurer_factory({"a": 5}), config=zero_config
    )
    wrapped = LegendSpec(
        chart_type="bar",
        labels=("a", "b"),
        options=LegendOptions(align=LegendAlign.TOP),
    )
    compute_dimension(
        wrapped, 8, measurer=stub_measurer_factory({"a": 5, "b": 5}), config=zero_config
    )

    content = _read_log(logger, log_file)
    assert "legend_layout.layout" in content
    assert "Skipping legend sizing" in content
    assert "Division 2: 2 line(s), max line width 5.00" in content


def test_get_logger_is_namespaced():
    assert get_logger("measurement").name == "legend_layout.measurement"
    assert get_logger("measurement").parent is logging.getLogger("legend_layout")


def test_setup_logging_does_not_stack_handlers():
    logger = setup_logging(log_file=None)
    before = len(logger.handlers)
    setup_logging(log_file=None)
    setup_logging(log_file=None)
    assert len(logger.handlers) == before
