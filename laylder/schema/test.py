"""Unit tests for the schema module."""

import dataclasses

import pytest
from pydantic import ValidationError

from laylder.schema import (
    COMPONENT_TEMPLATES,
    DEFAULT_GRID_CONFIG,
    DEFAULT_MIN_WIDTHS,
    GRID_CONSTRAINTS,
    SCHEMA_VERSION,
    CanvasLayout,
    Component,
    LayoutSchema,
    LayoutStructure,
    SemanticTag,
    create_component,
    create_empty_schema,
    create_schema_with_breakpoint,
    dump_schema,
    export_json_schema,
    generate_component_id,
    get_component_template,
    is_schema_dict,
    load_schema,
)


class TestEnums:
    """Tests for schema vocabularies."""

    @pytest.mark.unit
    def test_semantic_tags(self):
        """All nine HTML5 tags are known."""
        assert {t.value for t in SemanticTag} == {
            "header", "nav", "main", "aside", "footer",
            "section", "article", "div", "form",
        }

    @pytest.mark.unit
    def test_layout_structures(self):
        """Wire values use kebab-case."""
        assert LayoutStructure("sidebar-main") == LayoutStructure.SIDEBAR_MAIN
        assert LayoutStructure.VERTICAL.value == "vertical"


class TestDefaultTables:
    """Tests for immutable default tables."""

    @pytest.mark.unit
    def test_grid_defaults(self):
        """Standard breakpoint kinds have fixed grid sizes."""
        assert DEFAULT_GRID_CONFIG["mobile"].grid_cols == 4
        assert DEFAULT_GRID_CONFIG["tablet"].grid_cols == 8
        assert DEFAULT_GRID_CONFIG["desktop"].grid_cols == 12
        assert DEFAULT_GRID_CONFIG["custom"].grid_cols == 6
        assert all(size.grid_rows == 8 for size in DEFAULT_GRID_CONFIG.values())
        assert dict(DEFAULT_MIN_WIDTHS) == {"mobile": 0, "tablet": 768, "desktop": 1024}
        assert GRID_CONSTRAINTS["max_cols"] == 24

    @pytest.mark.unit
    def test_tables_are_read_only(self):
        """Default tables reject mutation."""
        with pytest.raises(TypeError):
            DEFAULT_GRID_CONFIG["wide"] = DEFAULT_GRID_CONFIG["desktop"]
        with pytest.raises(TypeError):
            GRID_CONSTRAINTS["max_cols"] = 48
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_GRID_CONFIG["mobile"].grid_cols = 6

    @pytest.mark.unit
    def test_templates_are_read_only(self):
        """Nested template payloads reject mutation."""
        header = COMPONENT_TEMPLATES[SemanticTag.HEADER]
        with pytest.raises(TypeError):
            header.positioning["type"] = "fixed"
        with pytest.raises(TypeError):
            header.positioning["position"]["zIndex"] = 10
        with pytest.raises(TypeError):
            COMPONENT_TEMPLATES[SemanticTag.DIV] = header

    @pytest.mark.unit
    def test_every_tag_has_template(self):
        """Each semantic tag maps to a template with a PascalCase name."""
        for tag in SemanticTag:
            template = get_component_template(tag)
            assert template.semantic_tag == tag
            assert template.name[0].isupper()


class TestTemplates:
    """Tests for template lookup and contents."""

    @pytest.mark.unit
    def test_header_template(self):
        """Header is sticky at the top with a full-width container."""
        data = get_component_template("header").to_dict()
        assert data["positioning"] == {"type": "sticky", "position": {"top": 0, "zIndex": 50}}
        assert data["layout"]["type"] == "container"
        assert data["layout"]["container"]["maxWidth"] == "full"

    @pytest.mark.unit
    def test_nav_template_hidden_below_desktop(self):
        """Sidebar navigation is hidden on mobile and tablet."""
        template = get_component_template(SemanticTag.NAV)
        assert template.name == "Sidebar"
        assert template.responsive["mobile"]["hidden"] is True
        assert template.responsive["desktop"]["hidden"] is False

    @pytest.mark.unit
    def test_to_dict_returns_mutable_copy(self):
        """Mutating exported data leaves the template untouched."""
        data = get_component_template("main").to_dict()
        data["layout"]["container"]["maxWidth"] = "sm"
        assert COMPONENT_TEMPLATES[SemanticTag.MAIN].layout["container"]["maxWidth"] == "7xl"

    @pytest.mark.unit
    def test_unknown_tag(self):
        """Unknown tags raise ValueError."""
        with pytest.raises(ValueError):
            get_component_template("marquee")


class TestComponentCreation:
    """Tests for id generation and component creation."""

    @pytest.mark.unit
    def test_generate_first_id(self):
        """An empty schema starts at c1."""
        assert generate_component_id([]) == "c1"

    @pytest.mark.unit
    def test_generate_skips_nonconforming_ids(self, make_component):
        """Only c<number> ids count towards the next id."""
        existing = [
            make_component("c1"),
            make_component("c5"),
            make_component("header", name="Header"),
        ]
        assert generate_component_id(existing) == "c6"

    @pytest.mark.unit
    def test_generate_ignores_trailing_newline_id(self, make_component):
        """An id with a trailing newline is not a c<number> id."""
        existing = [make_component("c1"), make_component("c9\n")]
        assert generate_component_id(existing) == "c2"

    @pytest.mark.unit
    def test_create_from_template(self):
        """Created components carry template defaults."""
        component = create_component("header")
        assert component.id == "c1"
        assert component.name == "Header"
        assert component.semantic_tag == "header"
        assert component.positioning.type == "sticky"
        assert component.positioning.position.z_index == 50

    @pytest.mark.unit
    def test_create_with_overrides(self, make_component):
        """Overrides replace defaults and ids follow existing components."""
        component = create_component(
            "section",
            existing=[make_component("c3")],
            name="Hero",
            canvas_layout={"x": 0, "y": 1, "width": 12, "height": 2},
        )
        assert component.id == "c4"
        assert component.name == "Hero"
        assert component.canvas_layout == CanvasLayout(x=0, y=1, width=12, height=2)

    @pytest.mark.unit
    def test_create_with_explicit_id(self):
        """An explicit id wins over generation."""
        assert create_component("footer", component_id="c9").id == "c9"


class TestSchemaConstruction:
    """Tests for empty schema factories."""

    @pytest.mark.unit
    def test_empty_schema(self):
        """Empty schema has three standard breakpoints and empty layouts."""
        schema = create_empty_schema()
        assert schema.schema_version == SCHEMA_VERSION
        assert [b.name for b in schema.breakpoints] == ["mobile", "tablet", "desktop"]
        assert [b.min_width for b in schema.breakpoints] == [0, 768, 1024]
        assert schema.components == []
        assert all(layout.components == [] for layout in schema.layouts.values())
        assert schema.layouts["tablet"].structure == "vertical"

    @pytest.mark.unit
    def test_single_breakpoint_schema(self):
        """A single standard breakpoint uses its default grid."""
        schema = create_schema_with_breakpoint("tablet")
        breakpoint = schema.get_breakpoint("tablet")
        assert (breakpoint.grid_cols, breakpoint.grid_rows) == (8, 8)
        assert list(schema.layouts) == ["tablet"]

    @pytest.mark.unit
    def test_unknown_breakpoint_type(self):
        """Non-standard kinds are rejected."""
        with pytest.raises(ValueError, match="Unknown breakpoint type"):
            create_schema_with_breakpoint("watch")


class TestSerialization:
    """Tests for loading and dumping wire documents."""

    @pytest.mark.unit
    def test_load_uses_snake_case_attributes(self, sample_schema):
        """Wire camelCase maps to snake_case attributes."""
        header = sample_schema.get_component("c1")
        assert header.semantic_tag == "header"
        assert header.responsive_canvas_layout["mobile"].width == 4
        assert sample_schema.get_breakpoint("desktop").min_width == 1024
        assert sample_schema.layouts["desktop"].roles["sidebar"] == "c2"

    @pytest.mark.unit
    def test_round_trip(self, sample_schema_dict):
        """Dumping a loaded document reproduces it."""
        assert dump_schema(load_schema(sample_schema_dict)) == sample_schema_dict

    @pytest.mark.unit
    def test_integers_preserved(self, sample_schema):
        """Integral coordinates stay integers on the wire."""
        rect = dump_schema(sample_schema)["components"][0]["canvasLayout"]
        assert all(type(value) is int for value in rect.values())

    @pytest.mark.unit
    def test_fractional_coordinates_accepted(self):
        """Fractional coordinates load; the validator reports them."""
        rect = CanvasLayout.model_validate({"x": 0.5, "y": 0, "width": 2, "height": 1})
        assert rect.x == 0.5
        assert rect.right == 2.5

    @pytest.mark.unit
    def test_unknown_fields_kept(self, sample_schema_dict):
        """Unknown keys survive a round trip."""
        sample_schema_dict["components"][0]["dataTestId"] = "site-header"
        dumped = dump_schema(load_schema(sample_schema_dict))
        assert dumped["components"][0]["dataTestId"] == "site-header"

    @pytest.mark.unit
    def test_missing_required_field(self, sample_schema_dict):
        """Components without a name are rejected at parse time."""
        del sample_schema_dict["components"][0]["name"]
        with pytest.raises(ValidationError):
            load_schema(sample_schema_dict)

    @pytest.mark.unit
    def test_get_component_missing(self, sample_schema):
        """Lookups of unknown ids return None."""
        assert sample_schema.get_component("c99") is None
        assert sample_schema.get_breakpoint("watch") is None

    @pytest.mark.unit
    def test_is_schema_dict(self, sample_schema_dict):
        """Shape check accepts documents and rejects everything else."""
        assert is_schema_dict(sample_schema_dict) is True
        assert is_schema_dict({"schemaVersion": "1.0", "components": []}) is False
        assert is_schema_dict(["components"]) is False

    @pytest.mark.unit
    def test_export_json_schema(self):
        """JSON Schema export uses wire field names."""
        exported = export_json_schema()
        assert "schemaVersion" in exported["properties"]
        assert "Component" in exported["$defs"]

    @pytest.mark.unit
    def test_models_accept_snake_case(self):
        """Python callers may populate by field name."""
        component = Component(id="c1", name="Card", semantic_tag="div")
        schema = LayoutSchema(components=[component])
        assert dump_schema(schema)["components"][0]["semanticTag"] == "div"
