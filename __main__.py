"""CLI entry point for laylder.

This module acts as the central entry point for the project's CLI tools.
Each command reads a layout document (or link list) as JSON, runs one
engine operation and writes JSON or a text report to stdout. Logs go to
stderr.
"""

import argparse
import json
import subprocess
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from laylder.config import get_log_level, get_normalization_mode, get_strict_links
from laylder.core import get_logger, setup_logging
from laylder.grid import (
    analyze_grid_complexity,
    canvas_to_grid_positions,
    is_grid_resize_safe,
)
from laylder.links import (
    calculate_link_groups,
    get_component_group,
    validate_component_links,
)
from laylder.normalize import NormalizationMode, normalize_schema
from laylder.schema import LayoutSchema, dump_schema, export_json_schema, load_schema
from laylder.validation import format_validation_result, validate_schema

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


class InputError(Exception):
    """Raised when a CLI input file cannot be read or parsed."""


# =============================================================================
# Input / Output Helpers
# =============================================================================


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InputError(f"schema_validation: invalid JSON in {path}: {e}") from e


def _read_schema(path: Path) -> LayoutSchema:
    try:
        return load_schema(_read_json(path))
    except ValidationError as e:
        raise InputError(
            f"schema_validation: {path} is not a layout document "
            f"({e.error_count()} error(s))\n{e}"
        ) from e


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        logger.info(f"Output saved to {output}")
    else:
        print(text)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2)


# =============================================================================
# Normalize Command
# =============================================================================


def cmd_normalize(args: argparse.Namespace) -> int:
    """Handle the normalize command."""
    try:
        schema = _read_schema(args.schema)
        normalized = normalize_schema(schema, mode=args.mode)
    except InputError as e:
        logger.error(str(e))
        return 1

    _write_output(_to_json(dump_schema(normalized)), args.output)
    return 0


def handle_normalize_command(argv: list[str]) -> int:
    """Handle normalize-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . normalize",
        description="Normalize a layout document (sort breakpoints, sync layouts)",
    )
    parser.add_argument(
        "schema",
        type=Path,
        help="Layout document (JSON)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--mode",
        "-m",
        type=str,
        default=None,
        choices=[mode.value for mode in NormalizationMode],
        help=f"Breakpoint policy (default: {get_normalization_mode()})",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_normalize(args)


# =============================================================================
# Validate Command
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command.

    Exit code is 0 for a valid document (warnings allowed), 1 otherwise.
    """
    try:
        schema = _read_schema(args.schema)
    except InputError as e:
        logger.error(str(e))
        return 1

    if args.normalize:
        schema = normalize_schema(schema)

    result = validate_schema(schema)
    if args.json:
        print(_to_json(result.to_dict()))
    else:
        print(format_validation_result(result))

    logger.info(
        f"Validated {args.schema}: {len(result.errors)} error(s), "
        f"{len(result.warnings)} warning(s)"
    )
    return 0 if result.valid else 1


def handle_validate_command(argv: list[str]) -> int:
    """Handle validate-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . validate",
        description="Validate a layout document",
    )
    parser.add_argument(
        "schema",
        type=Path,
        help="Layout document (JSON)",
    )
    parser.add_argument(
        "--normalize",
        "-n",
        action="store_true",
        help="Normalize before validating",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a text report",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_validate(args)


# =============================================================================
# Grid Command
# =============================================================================


def cmd_grid(args: argparse.Namespace) -> int:
    """Handle the grid command."""
    try:
        schema = _read_schema(args.schema)
    except InputError as e:
        logger.error(str(e))
        return 1

    breakpoint = schema.get_breakpoint(args.breakpoint)
    if breakpoint is None:
        known = ", ".join(bp.name for bp in schema.breakpoints) or "none"
        logger.error(f"Unknown breakpoint: {args.breakpoint} (available: {known})")
        return 1

    layout = canvas_to_grid_positions(
        schema.components, breakpoint.name, breakpoint.grid_cols, breakpoint.grid_rows
    )
    complexity = analyze_grid_complexity(schema.components, breakpoint.name)

    if args.json:
        data = {
            "breakpoint": breakpoint.name,
            "layout": layout.to_dict(),
            "complexity": complexity.to_dict(),
        }
        if args.resize:
            rows, cols = args.resize
            check = is_grid_resize_safe(rows, cols, schema.components, breakpoint.name)
            data["resize"] = {
                "safe": check.safe,
                "reason": check.reason,
                "minimumRequired": {
                    "rows": check.minimum_required.rows,
                    "cols": check.minimum_required.cols,
                },
                "affectedComponents": [a.id for a in check.affected_components],
            }
        print(_to_json(data))
        return 0

    print(f"Breakpoint: {breakpoint.name} ({layout.grid_cols}x{layout.grid_rows})")
    print("=" * 40)
    for position in layout.positions:
        print(
            f"  {position.component_id:<6} {position.component_name:<20} "
            f"grid-area: {position.grid_area}"
        )
    print(
        f"\nComponents: {complexity.total_components}, "
        f"max per row: {complexity.max_per_row}, "
        f"overlap: {'yes' if complexity.has_overlap else 'no'}"
    )
    print(f"Recommendation: {complexity.recommendation.value}")

    if args.resize:
        rows, cols = args.resize
        check = is_grid_resize_safe(rows, cols, schema.components, breakpoint.name)
        status = "safe" if check.safe else f"unsafe: {check.reason}"
        print(f"Resize to {rows}x{cols}: {status}")
    return 0


def handle_grid_command(argv: list[str]) -> int:
    """Handle grid-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . grid",
        description="Convert a breakpoint's canvas placements to CSS grid positions",
    )
    parser.add_argument(
        "schema",
        type=Path,
        help="Layout document (JSON)",
    )
    parser.add_argument(
        "--breakpoint",
        "-b",
        type=str,
        required=True,
        help="Breakpoint name",
    )
    parser.add_argument(
        "--resize",
        type=int,
        nargs=2,
        metavar=("ROWS", "COLS"),
        default=None,
        help="Also check whether resizing the grid would clip components",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_grid(args)


# =============================================================================
# Links Command
# =============================================================================


def cmd_links(args: argparse.Namespace) -> int:
    """Handle the links command.

    The links file is a JSON list of `{"source", "target"}` objects, or an
    object with such a list under "links".
    """
    try:
        data = _read_json(args.links)
        links = data.get("links", []) if isinstance(data, dict) else data
        schema = _read_schema(args.schema) if args.schema else None
    except InputError as e:
        logger.error(str(e))
        return 1

    if not isinstance(links, list):
        logger.error(f"Expected a list of links in {args.links}")
        return 1

    try:
        groups = calculate_link_groups(links)
    except (ValidationError, TypeError, ValueError) as e:
        logger.error(f"Malformed link in {args.links}: {e}")
        return 1

    result: dict[str, Any] = {"groups": groups}
    exit_code = 0

    if schema is not None:
        validation = validate_component_links(links, [c.id for c in schema.components])
        result["valid"] = validation.valid
        result["errors"] = [str(error) for error in validation.errors]
        if not validation.valid:
            exit_code = 1

    if args.component:
        result["component"] = args.component
        result["group"] = get_component_group(
            args.component, links, strict=get_strict_links(args.strict)
        )

    print(_to_json(result))
    return exit_code


def handle_links_command(argv: list[str]) -> int:
    """Handle links-specific commands."""
    parser = argparse.ArgumentParser(
        prog="python . links",
        description="Compute linked component groups",
    )
    parser.add_argument(
        "links",
        type=Path,
        help="Link list (JSON)",
    )
    parser.add_argument(
        "--schema",
        "-s",
        type=Path,
        default=None,
        help="Layout document to validate link endpoints against",
    )
    parser.add_argument(
        "--component",
        "-c",
        type=str,
        default=None,
        help="Show the group of this component",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Report unlinked components as not found (default: LAYLDER_STRICT_LINKS)",
    )

    if not argv:
        parser.print_help()
        return 1

    args = parser.parse_args(argv)
    return cmd_links(args)


# =============================================================================
# Export Command
# =============================================================================


def handle_export_schema_command(argv: list[str]) -> int:
    """Print the JSON Schema of the layout document."""
    parser = argparse.ArgumentParser(
        prog="python . export-schema",
        description="Export the layout document JSON Schema",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file path (prints to stdout if not specified)",
    )
    args = parser.parse_args(argv)
    _write_output(_to_json(export_json_schema()), args.output)
    return 0


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests
        python . test --cli          # Run only CLI tests
        python . test -k "links"     # Run tests matching pattern
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--cli": ["-m", "cli"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\n=== Layout Documents ===")
    print("  normalize      Sort breakpoints and sync per-breakpoint layouts")
    print("  validate       Check a layout document for errors and warnings")
    print("  grid           Show CSS grid positions for a breakpoint")
    print("  links          Compute linked component groups")
    print("  export-schema  Print the layout document JSON Schema")
    print("\n=== Development ===")
    print("  test           Run the test suite (--unit, --cli, --all)")
    print("\nExamples:")
    print("  python . normalize layout.json -o layout.normalized.json")
    print("  python . validate layout.json --normalize")
    print("  python . grid layout.json -b desktop --resize 6 12")
    print("  python . links links.json --schema layout.json -c c2")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "normalize": lambda: handle_normalize_command(rest_args),
        "validate": lambda: handle_validate_command(rest_args),
        "grid": lambda: handle_grid_command(rest_args),
        "links": lambda: handle_links_command(rest_args),
        "export-schema": lambda: handle_export_schema_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
