from __future__ import annotations

import pytest

from legend_layout.layout import LegendLayoutEngine, divide_labels
from legend_layout.models import LegendAlign, LegendOptions, LegendSpec

LABELS = tuple(f"series-{i}" for i in range(10))


@pytest.mark.parametrize("count", [1, 2, 3, 4, 7, 10, 11])
def test_divide_labels_preserves_order_and_membership(count):
    groups = divide_labels(LABELS, count)
    assert sum(len(group) for group in groups) == len(LABELS)
    assert tuple(label for group in groups for label in group) == LABELS


def test_divide_labels_single_division_is_one_group():
    assert divide_labels(LABELS, 1) == (LABELS,)


def test_divide_labels_remainder_forms_shorter_last_group():
    # round(10 / 3) == 3 -> 3, 3, 3, 1
    groups = divide_labels(LABELS, 3)
    assert [len(group) for group in groups] == [3, 3, 3, 1]


def test_divide_labels_rounds_half_up():
    # round(3 / 2) == 2
    assert [len(g) for g in divide_labels(("a", "b", "c"), 2)] == [2, 1]
    # round(1 / 2) == 1 keeps the single label in one group
    assert divide_labels(("a",), 2) == (("a",),)
    # round(5 / 2) == 3
    assert [len(g) for g in divide_labels(tuple("abcde"), 2)] == [3, 2]


def test_divide_labels_empty_sequence():
    assert divide_labels((), 1) == ((),)
    assert divide_labels((), 5) == ((),)


def test_partition_grows_division_until_line_fits(stub_measurer_factory, zero_config):
    widths = {label: 10 for label in LABELS}
    spec = LegendSpec(
        chart_type="line",
        labels=LABELS,
        options=LegendOptions(align=LegendAlign.TOP),
    )
    engine = LegendLayoutEngine(
        spec, measurer=stub_measurer_factory(widths), config=zero_config
    )
    # k=1 -> 100, k=2 -> 50, k=3 -> 30 < 35
    partition = engine.partition_labels(LABELS, 35, spec.theme.label)
    assert partition.line_count == 4
    assert partition.max_line_width == 30


@pytest.mark.parametrize("chart_width", [0, -10, 1])
def test_partition_terminates_when_nothing_fits(
    stub_measurer_factory, zero_config, chart_width
):
    widths = {label: 10 + i for i, label in enumerate(LABELS)}
    spec = LegendSpec(chart_type="line", labels=LABELS)
    engine = LegendLayoutEngine(
        spec, measurer=stub_measurer_factory(widths), config=zero_config
    )
    partition = engine.partition_labels(LABELS, chart_width, spec.theme.label)
    assert tuple(label for g in partition.divided_labels for label in g) == LABELS
    # round(10 / 4) == round(10 / 3), so k=4 repeats k=3 and the loop stops
    assert partition.line_count == 4
    assert partition.max_line_width == 16 + 17 + 18


def test_partition_with_zero_footprints_returns_a_partition(
    stub_measurer_factory, zero_config
):
    labels = ("", "")
    spec = LegendSpec(chart_type="line", labels=labels)
    engine = LegendLayoutEngine(
        spec, measurer=stub_measurer_factory({"": 0}), config=zero_config
    )
    partition = engine.partition_labels(labels, 0, spec.theme.label)
    assert partition.divided_labels == (labels,)
    assert partition.max_line_width == 0


@pytest.mark.parametrize("count", [0, -1])
def test_divide_labels_rejects_non_positive_count(count):
    with pytest.raises(ValueError, match="count must be at least 1"):
        divide_labels(LABELS, count)


def test_divide_labels_large_count_never_yields_empty_groups():
    # round(3 / 7) would be 0 without the one-label minimum
    groups = divide_labels(("a", "b", "c"), 7)
    assert groups == (("a",), ("b",), ("c",))
