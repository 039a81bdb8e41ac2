"""CLI entry point for cosmo.

Inspect the constraints table and run candidates from files (or stdin)
through validate, sanitize or the self-correction orchestrator.

Exit codes: 0 on success, 1 when a candidate is invalid or rejected, 2 on
usage, input or configuration errors.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from cosmo.config import get_id_strategy, get_log_level
from cosmo.core import get_logger, setup_logging
from cosmo.schema import UnknownComponentError, export_constraints, get_record_spec, list_component_kinds

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


class InputError(Exception):
    """Raised when a candidate file cannot be read or parsed."""


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def _read_json(source: str) -> Any:
    text = _read_text(source)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON in {source}: {e}") from e
    if data is None:
        raise InputError(f"{source} contains null, expected a JSON object")
    return data


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


# =============================================================================
# Schema Commands
# =============================================================================


def cmd_kinds(_args: argparse.Namespace) -> int:
    """Handle the kinds command."""
    for kind in list_component_kinds():
        spec = get_record_spec(kind)
        print(f"{kind.value:<18} {spec.name:<18} {spec.id_prefix}-*  {spec.description}")
    return EXIT_OK


def cmd_schema(args: argparse.Namespace) -> int:
    """Handle the schema command."""
    if args.json_schema:
        from cosmo.records import export_json_schema

        _print_json(export_json_schema(args.kind))
    else:
        _print_json(export_constraints(args.kind))
    return EXIT_OK


# =============================================================================
# Candidate Commands
# =============================================================================


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    from cosmo.correction import format_diagnostic, hints
    from cosmo.validation import get_validator

    candidate = _read_json(args.input)
    result = get_validator(args.kind).validate(candidate)

    if args.json:
        _print_json(result.to_dict())
    else:
        print(format_diagnostic(result))
        suggestions = hints(result, args.kind)
        if suggestions:
            print("\nHints:")
            for hint in suggestions:
                print(f"  - {hint}")
    return EXIT_OK if result.valid else EXIT_INVALID


def cmd_sanitize(args: argparse.Namespace) -> int:
    """Handle the sanitize command."""
    from cosmo.validation import get_validator

    candidate = _read_json(args.input)
    record = get_validator(args.kind).sanitize(candidate)
    _print_json(record.to_wire())
    return EXIT_OK


def cmd_correct(args: argparse.Namespace) -> int:
    """Handle the correct command.

    Reads raw model output, so fenced or slightly malformed JSON is accepted
    unless --no-repair is given.
    """
    from cosmo.correction import SelfCorrector, format_diagnostic

    raw = _read_text(args.input)
    corrector = SelfCorrector(args.kind)
    outcome = corrector.correct_text(raw, repair=False if args.no_repair else None)

    if args.json:
        _print_json(outcome.to_dict())
    else:
        print(format_diagnostic(outcome))
        if outcome.record is not None:
            print("\nRecord:")
            _print_json(outcome.record.to_wire())
    return EXIT_OK if outcome.is_safe else EXIT_INVALID


# =============================================================================
# Argument Parsing
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(
        prog="cosmo",
        description="Validate and sanitize AI-generated Cosmo UI components",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    kinds_parser = subparsers.add_parser("kinds", help="List component kinds")
    kinds_parser.set_defaults(func=cmd_kinds)

    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the constraints of a component kind",
    )
    schema_parser.add_argument("kind", type=str, help="Component kind or alias (e.g. HUDCard, badge)")
    schema_parser.add_argument(
        "--json-schema",
        action="store_true",
        help="Print the JSON Schema of the typed record instead",
    )
    schema_parser.set_defaults(func=cmd_schema)

    for name, func, help_text in (
        ("validate", cmd_validate, "Diagnose a candidate without modifying it"),
        ("sanitize", cmd_sanitize, "Repair a candidate into a conforming record"),
        ("correct", cmd_correct, "Run raw model output through self-correction"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("kind", type=str, help="Component kind or alias")
        sub.add_argument("input", type=str, help="Candidate file, or - for stdin")
        if name != "sanitize":
            sub.add_argument("--json", action="store_true", help="Print the result as JSON")
        if name == "correct":
            sub.add_argument(
                "--no-repair",
                action="store_true",
                help="Do not repair malformed JSON (fences, trailing commas)",
            )
        sub.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        parser.print_help()
        return EXIT_USAGE

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return EXIT_OK if e.code == 0 else EXIT_USAGE

    setup_logging(get_log_level())

    try:
        get_id_strategy()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    try:
        return args.func(args)
    except UnknownComponentError as e:
        logger.error(str(e))
        return EXIT_USAGE
    except InputError as e:
        logger.error(str(e))
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
