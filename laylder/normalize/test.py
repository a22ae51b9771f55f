"""Unit tests for schema normalization."""

import pytest

from laylder.normalize import NormalizationMode, normalize_schema
from laylder.schema import LayoutSchema, dump_schema


class TestNormalizeBasics:
    """Tests for purity, idempotence and breakpoint ordering."""

    @pytest.mark.unit
    def test_sample_is_already_normalized(self, sample_schema):
        """A schema in canonical form comes back equal."""
        assert normalize_schema(sample_schema) == sample_schema

    @pytest.mark.unit
    def test_input_not_mutated(self, sample_schema):
        """Normalization works on a copy."""
        sample_schema.breakpoints.reverse()
        before = dump_schema(sample_schema)
        normalize_schema(sample_schema)
        assert dump_schema(sample_schema) == before

    @pytest.mark.unit
    def test_idempotent(self, make_component, make_schema):
        """normalize(normalize(s)) == normalize(s)."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 4, 12, 1)),
                make_component("c2", responsive={"mobile": (0, 0, 4, 1)}),
                make_component("c3", canvas=(0, 0, 12, 2)),
                make_component("c4"),
            ],
            breakpoints=[("desktop", 1024, 12, 8), ("mobile", 0, 4, 8)],
            layouts={"desktop": {"structure": "vertical", "components": ["c4", "c1", "c3"]}},
        )
        once = normalize_schema(schema)
        assert normalize_schema(once) == once

    @pytest.mark.unit
    def test_breakpoints_sorted_by_min_width_then_name(self, make_component, make_schema):
        """Breakpoints are ordered by (min_width, name)."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 1, 1))],
            breakpoints=[
                ("desktop", 1024, 12, 8),
                ("watch", 0, 2, 4),
                ("mobile", 0, 4, 8),
            ],
        )
        names = [bp.name for bp in normalize_schema(schema).breakpoints]
        assert names == ["mobile", "watch", "desktop"]

    @pytest.mark.unit
    def test_unknown_mode_raises(self, sample_schema):
        """An unknown mode is a programmer error."""
        with pytest.raises(ValueError):
            normalize_schema(sample_schema, mode="cascade")


class TestLayoutSynchronization:
    """Tests for layout creation, membership and document order."""

    @pytest.mark.unit
    def test_missing_layout_created(self, make_component, make_schema):
        """A breakpoint without a layout gets an empty vertical one."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 12, 1))],
            breakpoints=[("mobile", 0, 4, 8), ("desktop", 1024, 12, 8)],
            layouts={"desktop": {"structure": "vertical", "components": ["c1"]}},
        )
        layout = normalize_schema(schema).layouts["mobile"]
        assert layout.structure == "vertical"
        assert layout.components == []

    @pytest.mark.unit
    def test_explicit_empty_layout_preserved(self, make_component, make_schema):
        """An empty layout stays empty even when another breakpoint is not."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c2", responsive={"desktop": (0, 1, 12, 1)}),
            ],
            breakpoints=[("mobile", 0, 4, 8), ("desktop", 1024, 12, 8)],
            layouts={
                "mobile": {"structure": "vertical", "components": []},
                "desktop": {"structure": "vertical", "components": ["c1", "c2"]},
            },
        )
        normalized = normalize_schema(schema)
        assert normalized.layouts["mobile"].components == []
        assert normalized.layouts["desktop"].components == ["c1", "c2"]

    @pytest.mark.unit
    def test_responsive_placement_registers_component(self, make_component, make_schema):
        """Placing a component on a breakpoint adds it to that layout."""
        schema = make_schema(
            [
                make_component("c1", responsive={"mobile": (0, 1, 4, 1)}),
                make_component("c2", responsive={"mobile": (0, 0, 4, 1)}),
            ],
            breakpoints=[("mobile", 0, 4, 8)],
            layouts={"mobile": {"structure": "vertical", "components": ["c1"]}},
        )
        assert normalize_schema(schema).layouts["mobile"].components == ["c2", "c1"]

    @pytest.mark.unit
    def test_default_placement_does_not_register(self, make_component, make_schema):
        """A default canvas placement alone never joins a layout."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 4, 1)),
                make_component("c2", canvas=(0, 1, 4, 1)),
            ],
            breakpoints=[("mobile", 0, 4, 8)],
            layouts={"mobile": {"structure": "vertical", "components": ["c2"]}},
        )
        assert normalize_schema(schema).layouts["mobile"].components == ["c2"]

    @pytest.mark.unit
    def test_sorted_by_y_then_x(self, make_component, make_schema):
        """Placed ids are ordered top-to-bottom, then left-to-right."""
        schema = make_schema(
            [
                make_component("c1", canvas=(6, 1, 6, 1)),
                make_component("c2", canvas=(0, 1, 6, 1)),
                make_component("c3", canvas=(0, 0, 12, 1)),
            ],
        )
        assert normalize_schema(schema).layouts["desktop"].components == [
            "c3",
            "c2",
            "c1",
        ]

    @pytest.mark.unit
    def test_unplaced_ids_sort_last_in_original_order(self, make_component, make_schema):
        """Ids without a placement keep their order after placed ids."""
        schema = make_schema(
            [
                make_component("c1"),
                make_component("c2", canvas=(0, 2, 12, 1)),
                make_component("c3"),
                make_component("c4", canvas=(0, 0, 12, 1)),
            ],
            layouts={
                "desktop": {
                    "structure": "vertical",
                    "components": ["c3", "c2", "c1", "ghost", "c4"],
                }
            },
        )
        assert normalize_schema(schema).layouts["desktop"].components == [
            "c4",
            "c2",
            "c3",
            "c1",
            "ghost",
        ]

    @pytest.mark.unit
    def test_duplicate_ids_collapsed(self, make_component, make_schema):
        """Repeated ids in a layout appear once."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 12, 1))],
            layouts={"desktop": {"structure": "vertical", "components": ["c1", "c1"]}},
        )
        assert normalize_schema(schema).layouts["desktop"].components == ["c1"]


class TestInheritMode:
    """Tests for the mobile-first inheritance mode."""

    @pytest.fixture
    def cascading_schema(self, make_component, make_schema) -> LayoutSchema:
        return make_schema(
            [
                make_component("c1", responsive={"mobile": (0, 0, 4, 1)}),
                make_component(
                    "c2",
                    responsive={"mobile": (0, 1, 4, 2), "desktop": (0, 3, 12, 2)},
                ),
            ],
            breakpoints=[
                ("mobile", 0, 4, 8),
                ("tablet", 768, 8, 8),
                ("desktop", 1024, 12, 8),
            ],
            layouts={
                "mobile": {"structure": "vertical", "components": ["c2", "c1"]},
                "desktop": {"structure": "horizontal", "components": []},
            },
        )

    @pytest.mark.unit
    def test_layouts_cascade(self, cascading_schema):
        """Missing and empty layouts copy the previous breakpoint."""
        normalized = normalize_schema(cascading_schema, mode=NormalizationMode.INHERIT)
        assert normalized.layouts["tablet"].components == ["c1", "c2"]
        assert normalized.layouts["desktop"].components == ["c1", "c2"]
        assert normalized.layouts["desktop"].structure == "vertical"

    @pytest.mark.unit
    def test_placements_cascade(self, cascading_schema):
        """Missing responsive placements copy the previous breakpoint."""
        normalized = normalize_schema(cascading_schema, mode="inherit")
        c1, c2 = normalized.components
        assert c1.responsive_canvas_layout["desktop"] == c1.responsive_canvas_layout["mobile"]
        assert c2.responsive_canvas_layout["tablet"].y == 1
        assert c2.responsive_canvas_layout["desktop"].y == 3

    @pytest.mark.unit
    def test_independent_mode_does_not_cascade(self, cascading_schema):
        """Without inheritance tablet stays empty."""
        normalized = normalize_schema(cascading_schema, mode="independent")
        assert normalized.layouts["tablet"].components == []
        assert "tablet" not in normalized.components[0].responsive_canvas_layout

    @pytest.mark.unit
    def test_inherit_idempotent(self, cascading_schema):
        """Inheritance mode is idempotent too."""
        once = normalize_schema(cascading_schema, mode="inherit")
        assert normalize_schema(once, mode="inherit") == once

    @pytest.mark.unit
    def test_mode_from_environment(self, cascading_schema, monkeypatch):
        """LAYLDER_NORMALIZATION_MODE selects the default mode."""
        monkeypatch.setenv("LAYLDER_NORMALIZATION_MODE", "inherit")
        normalized = normalize_schema(cascading_schema)
        assert normalized.layouts["tablet"].components == ["c1", "c2"]
