"""Unit tests for validation module."""

import pytest

from laylder.validation import (
    IssueCode,
    Severity,
    format_validation_result,
    is_valid,
    validate_schema,
)


def codes_of(issues):
    return [issue.code.value for issue in issues]


class TestValidateSchema:
    """Tests for schema-level checks."""

    @pytest.mark.unit
    def test_sample_schema_valid(self, sample_schema):
        """The sample schema is valid; side-by-side rows only warn."""
        result = validate_schema(sample_schema)
        assert result.valid is True
        assert result.errors == []
        assert codes_of(result.warnings) == ["COMPLEX_GRID_LAYOUT_DETECTED"]
        assert is_valid(sample_schema)

    @pytest.mark.unit
    def test_no_components(self, make_schema):
        """An empty component list is invalid."""
        result = validate_schema(make_schema([]))
        assert result.valid is False
        assert "NO_COMPONENTS" in codes_of(result.errors)

    @pytest.mark.unit
    def test_invalid_version(self, sample_schema):
        """Only schema version 2.0 is accepted."""
        sample_schema.schema_version = "1.0"
        result = validate_schema(sample_schema)
        assert codes_of(result.errors) == ["INVALID_VERSION"]

    @pytest.mark.unit
    def test_duplicate_component_ids_single_error(self, make_component, make_schema):
        """Duplicate ids produce one error naming each duplicate once."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c1", canvas=(0, 1, 12, 1)),
                make_component("c1", canvas=(0, 2, 12, 1)),
            ],
            layouts={"desktop": {"structure": "vertical", "components": ["c1"]}},
        )
        duplicates = [
            e for e in validate_schema(schema).errors
            if e.code == IssueCode.DUPLICATE_COMPONENT_ID
        ]
        assert len(duplicates) == 1
        assert duplicates[0].message.endswith(": c1")

    @pytest.mark.unit
    def test_invalid_component_name(self, make_component, make_schema):
        """Component names must be PascalCase."""
        schema = make_schema([make_component("c1", canvas=(0, 0, 1, 1), name="header")])
        result = validate_schema(schema)
        assert codes_of(result.errors) == ["INVALID_COMPONENT_NAME"]
        assert result.errors[0].component_id == "c1"
        assert result.errors[0].field == "name"

    @pytest.mark.unit
    def test_trailing_newline_in_name(self, make_component, make_schema):
        """A trailing newline does not pass as PascalCase."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 1, 1), name="Header\n")]
        )
        assert codes_of(validate_schema(schema).errors) == ["INVALID_COMPONENT_NAME"]

    @pytest.mark.unit
    def test_blank_component_id(self, make_component, make_schema):
        """Blank component ids are invalid."""
        schema = make_schema([make_component(" ", canvas=(0, 0, 1, 1), name="Blank")])
        assert "INVALID_COMPONENT_ID" in codes_of(validate_schema(schema).errors)


class TestBreakpointsAndLayouts:
    """Tests for breakpoint and per-breakpoint layout checks."""

    @pytest.mark.unit
    def test_no_breakpoints(self, sample_schema):
        """A schema needs at least one breakpoint."""
        sample_schema.breakpoints = []
        assert codes_of(validate_schema(sample_schema).errors) == ["NO_BREAKPOINTS"]

    @pytest.mark.unit
    def test_duplicate_breakpoint_name(self, make_component, make_schema):
        """Repeated breakpoint names are reported once."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            breakpoints=[("mobile", 0, 4, 8), ("mobile", 768, 8, 8)],
        )
        result = validate_schema(schema)
        assert codes_of(result.errors) == ["DUPLICATE_BREAKPOINT_NAME"]

    @pytest.mark.unit
    def test_negative_min_width(self, make_component, make_schema):
        """minWidth must not be negative."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            breakpoints=[("mobile", -1, 4, 8)],
        )
        result = validate_schema(schema)
        assert codes_of(result.errors) == ["INVALID_MIN_WIDTH"]
        assert result.errors[0].breakpoint == "mobile"

    @pytest.mark.unit
    def test_unsorted_breakpoints_warn(self, make_component, make_schema):
        """Breakpoints out of minWidth order produce a warning only."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            breakpoints=[("desktop", 1024, 12, 8), ("mobile", 0, 4, 8)],
        )
        result = validate_schema(schema)
        assert result.valid is True
        assert "BREAKPOINTS_NOT_SORTED" in codes_of(result.warnings)

    @pytest.mark.unit
    def test_missing_layout(self, make_component, make_schema):
        """Every breakpoint needs a layout configuration."""
        schema = make_schema([make_component("c1", canvas=(0, 0, 4, 1))], layouts={})
        result = validate_schema(schema)
        assert "MISSING_LAYOUT" in codes_of(result.errors)

    @pytest.mark.unit
    def test_empty_layout(self, make_component, make_schema):
        """A present but empty layout is an error."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            layouts={"desktop": {"structure": "vertical", "components": []}},
        )
        assert "EMPTY_LAYOUT" in codes_of(validate_schema(schema).errors)

    @pytest.mark.unit
    def test_unknown_component_reference(self, make_component, make_schema):
        """Layouts may only reference existing components."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            layouts={"desktop": {"structure": "vertical", "components": ["c1", "ghost"]}},
        )
        result = validate_schema(schema)
        assert codes_of(result.errors) == ["INVALID_COMPONENT_REFERENCE"]
        assert result.errors[0].component_id == "ghost"

    @pytest.mark.unit
    def test_role_not_in_layout(self, make_component, make_schema):
        """Role targets must be listed in the layout."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 4, 1)),
                make_component("c2", canvas=(0, 1, 4, 1)),
            ],
            layouts={
                "desktop": {
                    "structure": "vertical",
                    "components": ["c1"],
                    "roles": {"main": "c2"},
                }
            },
        )
        assert codes_of(validate_schema(schema).errors) == ["ROLE_COMPONENT_NOT_IN_LAYOUT"]

    @pytest.mark.unit
    def test_sidebar_main_without_roles(self, sample_schema):
        """sidebar-main layouts should name sidebar and main roles."""
        sample_schema.layouts["desktop"].roles = None
        result = validate_schema(sample_schema)
        assert "SIDEBAR_MAIN_WITHOUT_ROLES" in codes_of(result.warnings)

    @pytest.mark.unit
    def test_vertical_structure_with_row_container(self, make_component, make_schema):
        """Vertical structure with a row flex container warns."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 4, 1))],
            layouts={
                "desktop": {
                    "structure": "vertical",
                    "components": ["c1"],
                    "containerLayout": {"type": "flex", "flex": {"direction": "row"}},
                }
            },
        )
        assert codes_of(validate_schema(schema).warnings) == [
            "VERTICAL_STRUCTURE_NOT_COLUMN"
        ]


class TestComponentRecommendations:
    """Tests for positioning, layout and semantic-tag warnings."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fields, expected",
        [
            ({"positioning": {"type": "fixed"}}, "MISSING_POSITION_VALUES"),
            (
                {"positioning": {"type": "fixed", "position": {"left": 0}}},
                "FIXED_WITHOUT_VERTICAL_POSITION",
            ),
            (
                {"positioning": {"type": "sticky", "position": {"top": 0, "zIndex": 10000}}},
                "UNUSUAL_ZINDEX",
            ),
            ({"layout": {"type": "flex"}}, "FLEX_WITHOUT_CONFIG"),
            ({"layout": {"type": "grid"}}, "GRID_WITHOUT_CONFIG"),
            ({"layout": {"type": "grid", "grid": {"gap": 4}}}, "GRID_WITHOUT_COLS_OR_ROWS"),
            ({"layout": {"type": "container"}}, "CONTAINER_WITHOUT_CONFIG"),
            ({"semanticTag": "header"}, "HEADER_NOT_FIXED_OR_STICKY"),
            ({"semanticTag": "footer", "positioning": {"type": "relative"}}, "FOOTER_NOT_STATIC"),
            ({"semanticTag": "nav", "layout": {"type": "none"}}, "NAV_NOT_FLEX"),
            ({"semanticTag": "main"}, "MAIN_WITHOUT_FLEX1_OR_CONTAINER"),
        ],
    )
    def test_recommendation_warnings(self, make_component, make_schema, fields, expected):
        """Each recommendation produces exactly its warning and stays valid."""
        component = make_component("c1", canvas=(0, 0, 4, 1), **fields)
        result = validate_schema(make_schema([component]))
        assert result.valid is True
        assert codes_of(result.warnings) == [expected]
        assert result.warnings[0].component_id == "c1"

    @pytest.mark.unit
    def test_main_with_flex1_class(self, make_component, make_schema):
        """A flex-1 class satisfies the main recommendation."""
        component = make_component(
            "c1",
            canvas=(0, 0, 4, 1),
            semanticTag="main",
            styling={"className": "flex-1 p-4"},
        )
        assert validate_schema(make_schema([component])).warnings == []


class TestCanvasChecks:
    """Tests for canvas geometry checks."""

    @pytest.mark.unit
    def test_overlap_detected(self, make_component, make_schema):
        """Intersecting x ranges on a shared row overlap."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 6, 2)),
                make_component("c2", canvas=(4, 0, 6, 2)),
            ]
        )
        result = validate_schema(schema)
        overlaps = [w for w in result.warnings if w.code == IssueCode.CANVAS_COMPONENTS_OVERLAP]
        assert len(overlaps) == 1
        assert overlaps[0].breakpoint == "desktop"
        assert result.valid is True

    @pytest.mark.unit
    def test_touching_is_not_overlap(self, make_component, make_schema):
        """Touching edges do not overlap."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 6, 2)),
                make_component("c2", canvas=(6, 0, 6, 2)),
            ]
        )
        result = validate_schema(schema)
        assert "CANVAS_COMPONENTS_OVERLAP" not in codes_of(result.warnings)
        assert "COMPLEX_GRID_LAYOUT_DETECTED" in codes_of(result.warnings)

    @pytest.mark.unit
    def test_overlap_across_rows(self, make_component, make_schema):
        """A tall component overlaps one starting on a later row."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 6, 3)),
                make_component("c2", canvas=(2, 2, 6, 1)),
            ]
        )
        assert "CANVAS_COMPONENTS_OVERLAP" in codes_of(validate_schema(schema).warnings)

    @pytest.mark.unit
    def test_out_of_bounds(self, make_component, make_schema):
        """8 + 8 exceeds a 12 column grid."""
        schema = make_schema([make_component("c1", canvas=(8, 0, 8, 2))])
        result = validate_schema(schema)
        assert codes_of(result.warnings) == ["CANVAS_OUT_OF_BOUNDS"]
        assert "16 > 12" in result.warnings[0].message
        assert result.valid is True

    @pytest.mark.unit
    def test_default_placement_checked_per_breakpoint(self, make_component, make_schema):
        """A default placement is bounded by each breakpoint that lists it."""
        schema = make_schema(
            [make_component("c1", canvas=(0, 0, 12, 1))],
            breakpoints=[("mobile", 0, 4, 8), ("desktop", 1024, 12, 8)],
        )
        result = validate_schema(schema)
        assert codes_of(result.warnings) == ["CANVAS_OUT_OF_BOUNDS"]
        assert result.warnings[0].breakpoint == "mobile"
        assert result.warnings[0].field == "canvasLayout"

    @pytest.mark.unit
    def test_negative_coordinate(self, make_component, make_schema):
        """Negative coordinates make the schema invalid."""
        schema = make_schema([make_component("c1", canvas=(-1, 0, 6, 2))])
        result = validate_schema(schema)
        assert result.valid is False
        assert codes_of(result.errors) == ["CANVAS_NEGATIVE_COORDINATE"]

    @pytest.mark.unit
    def test_negative_responsive_coordinate(self, make_component, make_schema):
        """Responsive placements are checked with their breakpoint as context."""
        schema = make_schema([make_component("c1", responsive={"desktop": (0, -2, 6, 2)})])
        error = validate_schema(schema).errors[0]
        assert error.code == IssueCode.CANVAS_NEGATIVE_COORDINATE
        assert error.field == "responsiveCanvasLayout.desktop"
        assert error.breakpoint == "desktop"

    @pytest.mark.unit
    def test_zero_size(self, make_component, make_schema):
        """Zero width or height only warns."""
        schema = make_schema([make_component("c1", canvas=(0, 0, 0, 1))])
        result = validate_schema(schema)
        assert result.valid is True
        assert codes_of(result.warnings) == ["CANVAS_ZERO_SIZE"]

    @pytest.mark.unit
    def test_fractional_coordinate(self, make_component, make_schema):
        """Non-integer coordinates warn; integral floats do not."""
        fractional = make_schema([make_component("c1", canvas=(0.5, 0, 6, 1))])
        integral = make_schema([make_component("c1", canvas=(2.0, 0, 6, 1))])
        assert codes_of(validate_schema(fractional).warnings) == [
            "CANVAS_FRACTIONAL_COORDINATE"
        ]
        assert validate_schema(integral).warnings == []

    @pytest.mark.unit
    def test_placed_component_not_in_any_layout(self, make_component, make_schema):
        """Placed components absent from every layout warn."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c2", canvas=(0, 1, 12, 1)),
            ],
            layouts={"desktop": {"structure": "vertical", "components": ["c1"]}},
        )
        result = validate_schema(schema)
        assert codes_of(result.warnings) == ["CANVAS_COMPONENT_NOT_IN_LAYOUT"]
        assert result.warnings[0].component_id == "c2"

    @pytest.mark.unit
    def test_order_mismatch(self, make_component, make_schema):
        """Declared order that disagrees with visual order warns."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c2", canvas=(0, 1, 12, 1)),
            ],
            layouts={"desktop": {"structure": "vertical", "components": ["c2", "c1"]}},
        )
        result = validate_schema(schema)
        assert codes_of(result.warnings) == ["CANVAS_LAYOUT_ORDER_MISMATCH"]
        assert "Canvas order: [c1, c2]" in result.warnings[0].message

    @pytest.mark.unit
    def test_missing_canvas_layout(self, make_component, make_schema):
        """Listed components without a placement are reported."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 12, 1)),
                make_component("c2"),
            ]
        )
        result = validate_schema(schema)
        assert codes_of(result.warnings) == ["MISSING_CANVAS_LAYOUT"]
        assert "c2" in result.warnings[0].message

    @pytest.mark.unit
    def test_complex_layout_reported_once_per_breakpoint(self, make_component, make_schema):
        """Several busy rows still yield a single warning."""
        schema = make_schema(
            [
                make_component("c1", canvas=(0, 0, 3, 4)),
                make_component("c2", canvas=(3, 0, 9, 4)),
            ]
        )
        warnings = validate_schema(schema).warnings
        assert codes_of(warnings) == ["COMPLEX_GRID_LAYOUT_DETECTED"]
        assert "Row 3" in warnings[0].message


class TestFormatting:
    """Tests for result formatting and serialization."""

    @pytest.mark.unit
    def test_format_passed(self, sample_schema):
        """A valid result reports success and lists warnings."""
        report = format_validation_result(validate_schema(sample_schema))
        assert report.startswith("Schema validation passed")
        assert "Warnings:" in report
        assert "[COMPLEX_GRID_LAYOUT_DETECTED]" in report

    @pytest.mark.unit
    def test_format_failed(self, make_schema):
        """An invalid result reports failure and numbered errors."""
        report = format_validation_result(validate_schema(make_schema([])))
        assert report.startswith("Schema validation failed")
        assert "  1. [NO_COMPONENTS]" in report

    @pytest.mark.unit
    def test_to_dict(self, make_component, make_schema):
        """Results serialize with code strings and no empty context."""
        schema = make_schema([make_component("c1", canvas=(-1, 0, 6, 2))])
        data = validate_schema(schema).to_dict()
        assert data["valid"] is False
        assert data["errors"][0] == {
            "code": "CANVAS_NEGATIVE_COORDINATE",
            "message": data["errors"][0]["message"],
            "severity": Severity.ERROR.value,
            "field": "canvasLayout",
            "component_id": "c1",
        }
