"""Unit tests for grid conversion, complexity and resize constraints."""

import pytest

from laylder.grid import (
    MinimumGridSize,
    Recommendation,
    analyze_grid_complexity,
    calculate_minimum_grid_size,
    canvas_to_grid_positions,
    get_affected_component_ids,
    grid_position_to_canvas,
    is_component_out_of_bounds,
    is_grid_resize_safe,
    suggest_grid_compaction,
)
from laylder.schema import CanvasLayout


class TestCanvasToGridPositions:
    """Tests for canvas to CSS grid conversion."""

    @pytest.mark.unit
    def test_full_width_row(self, make_component):
        """(0, 0, 12, 1) on a 12x8 grid spans rows 1-2 and cols 1-13."""
        layout = canvas_to_grid_positions(
            [make_component("c1", canvas=(0, 0, 12, 1))], "desktop", 12, 8
        )
        position = layout.positions[0]
        assert (position.row_start, position.row_end) == (1, 2)
        assert (position.col_start, position.col_end) == (1, 13)
        assert position.grid_area == "1 / 1 / 2 / 13"
        assert position.grid_row == "1 / 2"
        assert position.grid_column == "1 / 13"
        assert (layout.grid_cols, layout.grid_rows) == (12, 8)

    @pytest.mark.unit
    def test_visual_order(self, sample_schema):
        """Positions come back top-to-bottom, left-to-right."""
        layout = canvas_to_grid_positions(sample_schema.components, "desktop", 12, 8)
        assert [p.component_id for p in layout.positions] == ["c1", "c2", "c3", "c4"]
        assert layout.get_position("c2").grid_area == "2 / 1 / 8 / 4"

    @pytest.mark.unit
    def test_uses_breakpoint_placement(self, sample_schema):
        """Responsive placements win over the default placement."""
        layout = canvas_to_grid_positions(sample_schema.components, "mobile", 4, 8)
        assert [p.component_id for p in layout.positions] == ["c1", "c3", "c4"]
        assert layout.get_position("c1").grid_column == "1 / 5"
        assert layout.get_position("c2") is None

    @pytest.mark.unit
    def test_reversible(self, sample_schema):
        """Converting back yields the source placement."""
        layout = canvas_to_grid_positions(sample_schema.components, "desktop", 12, 8)
        for position in layout.positions:
            assert grid_position_to_canvas(position) == position.canvas_layout

    @pytest.mark.unit
    def test_to_dict(self, make_component):
        """Serialized positions use camelCase keys."""
        layout = canvas_to_grid_positions(
            [make_component("c1", canvas=(2, 1, 3, 2))], "desktop", 12, 8
        )
        data = layout.to_dict()
        assert data["gridCols"] == 12
        assert data["positions"][0]["gridArea"] == "2 / 3 / 4 / 6"
        assert data["positions"][0]["canvasLayout"] == {"x": 2, "y": 1, "width": 3, "height": 2}


class TestAnalyzeGridComplexity:
    """Tests for complexity classification."""

    @pytest.mark.unit
    def test_stacked_rows_prefer_flexbox(self, make_component):
        """One component per row recommends flexbox."""
        complexity = analyze_grid_complexity(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c2", canvas=(0, 1, 12, 3)),
            ],
            "desktop",
        )
        assert complexity.total_components == 2
        assert complexity.max_per_row == 1
        assert complexity.has_side_by_side is False
        assert complexity.recommendation == Recommendation.FLEXBOX

    @pytest.mark.unit
    def test_side_by_side_prefers_grid(self, sample_schema):
        """Sidebar next to main recommends grid."""
        complexity = analyze_grid_complexity(sample_schema.components, "desktop")
        assert complexity.max_per_row == 2
        assert complexity.has_side_by_side is True
        assert complexity.has_overlap is False
        assert complexity.recommendation == "grid"

    @pytest.mark.unit
    def test_spanned_rows_counted(self, make_component):
        """A tall component meets one that starts on a later row."""
        complexity = analyze_grid_complexity(
            [
                make_component("c1", canvas=(0, 0, 3, 3)),
                make_component("c2", canvas=(3, 2, 9, 1)),
            ],
            "desktop",
        )
        assert complexity.has_side_by_side is True

    @pytest.mark.unit
    def test_overlap_detected(self, make_component):
        """Intersecting placements are flagged."""
        complexity = analyze_grid_complexity(
            [
                make_component("c1", canvas=(0, 0, 6, 2)),
                make_component("c2", canvas=(4, 0, 6, 2)),
            ],
            "desktop",
        )
        assert complexity.has_overlap is True

    @pytest.mark.unit
    def test_empty(self, make_component):
        """Nothing placed means nothing complex."""
        complexity = analyze_grid_complexity([make_component("c1")], "desktop")
        assert complexity.total_components == 0
        assert complexity.max_per_row == 0
        assert complexity.recommendation == Recommendation.FLEXBOX


class TestGridConstraints:
    """Tests for grid resize constraints."""

    @pytest.mark.unit
    def test_minimum_grid_size(self, make_component):
        """Minimum size covers the furthest placement."""
        footer = make_component("c1", canvas=(0, 10, 12, 1))
        assert calculate_minimum_grid_size([footer], "mobile") == MinimumGridSize(
            rows=11, cols=12
        )

    @pytest.mark.unit
    def test_minimum_grid_size_empty(self):
        """An empty canvas needs the smallest allowed grid."""
        assert calculate_minimum_grid_size([], "desktop") == MinimumGridSize(2, 2)

    @pytest.mark.unit
    def test_shrinking_rows_clips(self, sample_schema):
        """Removing occupied rows reports the clipped components."""
        validation = is_grid_resize_safe(6, 12, sample_schema.components, "desktop")
        assert validation.safe is False
        assert validation.minimum_required == MinimumGridSize(rows=8, cols=12)
        assert [a.id for a in validation.affected_components] == ["c2", "c3", "c4"]
        assert "Minimum required: 8 rows" in validation.reason

    @pytest.mark.unit
    def test_shrinking_cols_clips(self, sample_schema):
        """Removing occupied columns reports the clipped components."""
        ids = get_affected_component_ids(8, 10, sample_schema.components, "desktop")
        assert ids == ["c1", "c3", "c4"]

    @pytest.mark.unit
    def test_safe_resize(self, sample_schema):
        """Growing the grid is safe."""
        validation = is_grid_resize_safe(10, 12, sample_schema.components, "desktop")
        assert validation.safe is True
        assert validation.affected_components == []

    @pytest.mark.unit
    def test_resize_outside_allowed_range(self):
        """Grids are limited to 2..24 in each direction."""
        assert is_grid_resize_safe(25, 12, [], "desktop").safe is False
        assert is_grid_resize_safe(1, 12, [], "desktop").safe is False

    @pytest.mark.unit
    def test_compaction(self, sample_schema):
        """Unused trailing rows and columns can be trimmed."""
        assert suggest_grid_compaction(sample_schema.components, 12, 16, "desktop") == (4, 4)
        assert suggest_grid_compaction(sample_schema.components, 8, 12, "desktop") == (0, 0)

    @pytest.mark.unit
    def test_out_of_bounds(self, make_component):
        """Placements leaving the grid are out of bounds."""
        inside = make_component("c1", canvas=(0, 0, 4, 1))
        outside = make_component("c2", canvas=(2, 0, 4, 1))
        unplaced = make_component("c3")
        assert is_component_out_of_bounds(inside, 8, 4, "mobile") is False
        assert is_component_out_of_bounds(outside, 8, 4, "mobile") is True
        assert is_component_out_of_bounds(unplaced, 8, 4, "mobile") is False

    @pytest.mark.unit
    def test_grid_position_round_trip_values(self):
        """grid_position_to_canvas undoes the one-line shift."""
        from laylder.grid import GridPosition

        source = CanvasLayout(x=3, y=1, width=9, height=6)
        position = GridPosition("c3", "Main", 2, 4, 8, 13, source)
        assert grid_position_to_canvas(position) == source
