"""Demonstration of legend sizing for horizontal and vertical layouts."""

import os
import sys

# Add parent directory to path for imports (if not already present)
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from legend_layout import (  # noqa: E402
    ConfigurationManager,
    LegendSpec,
    compute_dimension,
    create_text_measurer,
    setup_logging,
)


def main() -> None:
    setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))
    manager = ConfigurationManager()
    manager.validate_all()
    measurer = create_text_measurer(manager.measurement)

    labels = ["Revenue", "Operating cost", "Net profit", "Headcount", "Churn"]
    for align in ("bottom", "right"):
        spec = LegendSpec.from_dict(
            {
                "chartType": "line",
                "options": {"align": align},
                "theme": {"label": {"fontFamily": "Helvetica", "fontSize": 11}},
                "legendLabels": labels,
            }
        )
        for chart_width in (600, 300, 120):
            dim = compute_dimension(
                spec, chart_width, measurer=measurer, config=manager.layout
            )
            print(f"align={align:<6} chart_width={chart_width:<4} -> {dim.as_dict()}")

    pie = LegendSpec.from_dict(
        {"chartType": "pie", "options": {"align": "outer"}, "legendLabels": labels}
    )
    print(f"pie/outer -> {compute_dimension(pie, 600, measurer=measurer).as_dict()}")


if __name__ == "__main__":
    main()
