"""Unit tests for canvas geometry utilities."""

import pytest

from laylder.geometry import (
    bucket_components_by_spanned_row,
    filter_components_with_canvas_layout,
    find_overlapping_pairs,
    get_canvas_layout,
    group_components_by_row,
    has_canvas_layout,
    has_explicit_canvas_layout,
    iter_declared_layouts,
    layouts_overlap,
    ranges_overlap,
    rows_spanned,
    sort_component_ids_by_canvas,
    sort_components_by_canvas,
)
from laylder.schema import CanvasLayout


def rect(x, y, width, height):
    return CanvasLayout(x=x, y=y, width=width, height=height)


class TestPlacementLookup:
    """Tests for effective placement resolution."""

    @pytest.mark.unit
    def test_responsive_entry_wins(self, make_component):
        """A breakpoint entry overrides the default placement."""
        component = make_component(
            "c1", canvas=(0, 0, 12, 1), responsive={"mobile": (0, 0, 4, 1)}
        )
        assert get_canvas_layout(component, "mobile") == rect(0, 0, 4, 1)
        assert get_canvas_layout(component, "desktop") == rect(0, 0, 12, 1)

    @pytest.mark.unit
    def test_unplaced(self, make_component):
        """A component without any placement resolves to None."""
        component = make_component("c1", responsive={"desktop": (0, 1, 3, 6)})
        assert get_canvas_layout(component, "mobile") is None
        assert has_canvas_layout(component, "mobile") is False
        assert has_canvas_layout(component, "desktop") is True
        assert has_canvas_layout(component) is True
        assert has_canvas_layout(make_component("c2")) is False

    @pytest.mark.unit
    def test_explicit_entry(self, make_component):
        """Only breakpoint entries count as explicit."""
        component = make_component(
            "c1", canvas=(0, 0, 12, 1), responsive={"mobile": (0, 0, 4, 1)}
        )
        assert has_explicit_canvas_layout(component, "mobile") is True
        assert has_explicit_canvas_layout(component, "desktop") is False

    @pytest.mark.unit
    def test_iter_declared_layouts(self, sample_schema):
        """Default placement comes first, keyed None."""
        header = sample_schema.get_component("c1")
        assert [name for name, _ in iter_declared_layouts(header)] == [None, "mobile"]
        sidebar = sample_schema.get_component("c2")
        assert [name for name, _ in iter_declared_layouts(sidebar)] == ["desktop"]

    @pytest.mark.unit
    def test_filter(self, sample_schema):
        """Filtering keeps input order."""
        placed = filter_components_with_canvas_layout(sample_schema.components, "mobile")
        assert [c.id for c in placed] == ["c1", "c3", "c4"]


class TestVisualOrdering:
    """Tests for top-to-bottom, left-to-right ordering."""

    @pytest.mark.unit
    def test_sort_ids(self, sample_schema):
        """Ids sort by (y, x) of the breakpoint placement."""
        ids = sort_component_ids_by_canvas(
            ["c4", "c3", "c2", "c1"], sample_schema.components, "desktop"
        )
        assert ids == ["c1", "c2", "c3", "c4"]

    @pytest.mark.unit
    def test_unplaced_and_unknown_ids_last(self, sample_schema):
        """Ids without a placement keep their order after placed ids."""
        ids = sort_component_ids_by_canvas(
            ["c2", "c99", "c4", "c1"], sample_schema.components, "mobile"
        )
        assert ids == ["c1", "c4", "c2", "c99"]

    @pytest.mark.unit
    def test_stable_for_ties(self, make_component):
        """Equal positions keep their input order."""
        components = [
            make_component("c1", canvas=(0, 0, 2, 1)),
            make_component("c2", canvas=(0, 0, 2, 1)),
        ]
        assert sort_component_ids_by_canvas(["c2", "c1"], components, "desktop") == [
            "c2",
            "c1",
        ]

    @pytest.mark.unit
    def test_sort_components_skips_unplaced(self, make_component):
        """Component sorting drops unplaced components."""
        components = [
            make_component("c1", canvas=(4, 2, 2, 1)),
            make_component("c2"),
            make_component("c3", canvas=(0, 2, 2, 1)),
        ]
        ordered = sort_components_by_canvas(components, "desktop")
        assert [c.id for c in ordered] == ["c3", "c1"]


class TestRowsAndOverlap:
    """Tests for row spans and rectangle intersection."""

    @pytest.mark.unit
    def test_rows_spanned(self):
        """Rows are floored at the top and ceiled at the bottom."""
        assert list(rows_spanned(rect(0, 1, 1, 3))) == [1, 2, 3]
        assert list(rows_spanned(rect(0, 0.5, 1, 1))) == [0, 1]
        assert list(rows_spanned(rect(0, 2, 1, 0))) == []

    @pytest.mark.unit
    def test_ranges_touching_do_not_overlap(self):
        """Half-open ranges that only touch are disjoint."""
        assert ranges_overlap(0, 3, 3, 2) is False
        assert ranges_overlap(0, 4, 3, 2) is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (rect(0, 0, 6, 2), rect(4, 1, 6, 2), True),
            (rect(0, 0, 6, 2), rect(6, 0, 6, 2), False),
            (rect(0, 0, 12, 1), rect(0, 1, 12, 1), False),
            (rect(0, 0, 3, 6), rect(1, 2, 1, 1), True),
            (rect(0, 0, 0, 2), rect(0, 0, 4, 2), False),
        ],
    )
    def test_layouts_overlap(self, a, b, expected):
        """Rectangles overlap only when both axes intersect."""
        assert layouts_overlap(a, b) is expected
        assert layouts_overlap(b, a) is expected

    @pytest.mark.unit
    def test_group_by_row(self, sample_schema):
        """Components starting on one row are grouped left to right."""
        groups = group_components_by_row(sample_schema.components, "desktop")
        assert [[c.id for c in g.components] for g in groups] == [
            ["c1"],
            ["c2", "c3"],
            ["c4"],
        ]
        assert groups[1].row_range == [1, 2, 3, 4, 5, 6]

    @pytest.mark.unit
    def test_bucket_by_spanned_row(self, sample_schema):
        """Tall components appear in every row they cover."""
        buckets = bucket_components_by_spanned_row(sample_schema.components, "desktop")
        assert list(buckets) == list(range(8))
        assert [c.id for c in buckets[3]] == ["c2", "c3"]
        assert [c.id for c in buckets[7]] == ["c4"]

    @pytest.mark.unit
    def test_overlapping_pairs_reported_once(self, make_component):
        """A pair sharing several rows is reported a single time."""
        components = [
            make_component("c1", canvas=(0, 0, 6, 4)),
            make_component("c2", canvas=(4, 1, 6, 3)),
            make_component("c3", canvas=(10, 0, 2, 4)),
        ]
        pairs = find_overlapping_pairs(components, "desktop")
        assert [(a.id, b.id) for a, b in pairs] == [("c1", "c2")]

    @pytest.mark.unit
    def test_no_overlap_in_sample(self, sample_schema):
        """Adjacent sidebar and main do not overlap."""
        assert find_overlapping_pairs(sample_schema.components, "desktop") == []
