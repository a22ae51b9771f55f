"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Sample layout documents in wire (camelCase) form
- Factories for components and schemas used across unit tests
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable

import pytest
from dotenv import load_dotenv

from laylder.schema import Component, LayoutSchema, load_schema

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Sample Documents
# =============================================================================

SAMPLE_SCHEMA: dict[str, Any] = {
    "schemaVersion": "2.0",
    "components": [
        {
            "id": "c1",
            "name": "Header",
            "semanticTag": "header",
            "positioning": {"type": "sticky", "position": {"top": 0, "zIndex": 50}},
            "layout": {"type": "container", "container": {"maxWidth": "full"}},
            "canvasLayout": {"x": 0, "y": 0, "width": 12, "height": 1},
            "responsiveCanvasLayout": {
                "mobile": {"x": 0, "y": 0, "width": 4, "height": 1},
            },
        },
        {
            "id": "c2",
            "name": "Sidebar",
            "semanticTag": "nav",
            "positioning": {"type": "sticky", "position": {"top": "4rem"}},
            "layout": {"type": "flex", "flex": {"direction": "column"}},
            "responsiveCanvasLayout": {
                "desktop": {"x": 0, "y": 1, "width": 3, "height": 6},
            },
        },
        {
            "id": "c3",
            "name": "Main",
            "semanticTag": "main",
            "positioning": {"type": "static"},
            "layout": {"type": "container", "container": {"maxWidth": "7xl"}},
            "canvasLayout": {"x": 3, "y": 1, "width": 9, "height": 6},
            "responsiveCanvasLayout": {
                "mobile": {"x": 0, "y": 1, "width": 4, "height": 6},
            },
        },
        {
            "id": "c4",
            "name": "Footer",
            "semanticTag": "footer",
            "positioning": {"type": "static"},
            "layout": {"type": "container", "container": {"maxWidth": "full"}},
            "canvasLayout": {"x": 0, "y": 7, "width": 12, "height": 1},
            "responsiveCanvasLayout": {
                "mobile": {"x": 0, "y": 7, "width": 4, "height": 1},
            },
        },
    ],
    "breakpoints": [
        {"name": "mobile", "minWidth": 0, "gridCols": 4, "gridRows": 8},
        {"name": "desktop", "minWidth": 1024, "gridCols": 12, "gridRows": 8},
    ],
    "layouts": {
        "mobile": {"structure": "vertical", "components": ["c1", "c3", "c4"]},
        "desktop": {
            "structure": "sidebar-main",
            "components": ["c1", "c2", "c3", "c4"],
            "roles": {"header": "c1", "sidebar": "c2", "main": "c3", "footer": "c4"},
        },
    },
}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def sample_schema_dict() -> dict[str, Any]:
    """A valid header/sidebar/main/footer document in wire form.

    Returns:
        A fresh deep copy, safe to mutate.
    """
    return copy.deepcopy(SAMPLE_SCHEMA)


@pytest.fixture
def sample_schema(sample_schema_dict: dict[str, Any]) -> LayoutSchema:
    """The sample document parsed into a LayoutSchema."""
    return load_schema(sample_schema_dict)


@pytest.fixture
def sample_schema_file(tmp_path: Path, sample_schema_dict: dict[str, Any]) -> Path:
    """The sample document written to a temporary JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(sample_schema_dict, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def make_component() -> Callable[..., Component]:
    """Factory for placed components.

    Usage:
        make_component("c1", canvas=(0, 0, 6, 2))
        make_component("c2", responsive={"mobile": (0, 0, 4, 1)})
    """

    def _make(
        component_id: str,
        canvas: tuple | None = None,
        responsive: dict[str, tuple] | None = None,
        name: str | None = None,
        semantic_tag: str = "div",
        **fields: Any,
    ) -> Component:
        data: dict[str, Any] = {
            "id": component_id,
            "name": name or f"Block{component_id.upper()}",
            "semanticTag": semantic_tag,
            "layout": {"type": "flex", "flex": {"direction": "column"}},
        }
        if canvas is not None:
            data["canvasLayout"] = _rect(canvas)
        if responsive is not None:
            data["responsiveCanvasLayout"] = {
                bp: _rect(rect) for bp, rect in responsive.items()
            }
        data.update(fields)
        return Component.model_validate(data)

    return _make


@pytest.fixture
def make_schema() -> Callable[..., LayoutSchema]:
    """Factory for single- or multi-breakpoint schemas.

    Usage:
        make_schema([comp_a, comp_b])  # one "desktop" breakpoint, 12x8
        make_schema(comps, breakpoints=[("mobile", 0, 4, 8)], layouts={...})

    When `layouts` is omitted every breakpoint lists all component ids in
    input order.
    """

    def _make(
        components: list[Component],
        breakpoints: list[tuple[str, int, int, int]] | None = None,
        layouts: dict[str, Any] | None = None,
    ) -> LayoutSchema:
        breakpoints = breakpoints or [("desktop", 1024, 12, 8)]
        if layouts is None:
            layouts = {
                name: {"structure": "vertical", "components": [c.id for c in components]}
                for name, *_ in breakpoints
            }
        return LayoutSchema.model_validate(
            {
                "schemaVersion": "2.0",
                "components": [c.model_dump(by_alias=True, exclude_none=True) for c in components],
                "breakpoints": [
                    {"name": n, "minWidth": w, "gridCols": cols, "gridRows": rows}
                    for n, w, cols, rows in breakpoints
                ],
                "layouts": layouts,
            }
        )

    return _make


def _rect(values: tuple) -> dict[str, Any]:
    x, y, width, height = values
    return {"x": x, "y": y, "width": width, "height": height}
