"""
dynarray CLI — Replay Operation Scripts Against a DynamicArray.

Commands:
    dynarray apply OP [OP ...]   — Apply operations to a fresh container
    dynarray demo                — Replay the built-in walkthrough

Each step prints the operation, what it returned, and the container
state afterwards.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from ..log import get_logger, set_verbose
from ..sequence import DynamicArray
from ..validation import ConfigurationError, UnderflowPolicy
from .script import (
    DEMO_SCRIPT,
    ScriptError,
    ScriptResult,
    ScriptStep,
    parse_script,
    parse_value,
    run_script,
)

logger = get_logger("cli")


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_step(number: int, step: ScriptStep) -> str:
    """Format a single replayed step."""
    return f"{number:>3}. {step.operation.source:<20} -> {step.format_result():<10} {step.state}"


def print_result(result: ScriptResult) -> int:
    """Print every step, then the error if replay stopped early."""
    for number, step in enumerate(result.steps, start=1):
        print(format_step(number, step))

    print()
    print(f"Final: {result.sequence.describe()}")
    print(f"Length: {result.sequence.length}  Occupancy: {result.sequence.occupancy}")

    if not result.succeeded:
        print()
        print("ERROR: Replay stopped")
        print(f"Reason: {result.error}")
        return 1
    return 0


def build_initial(args: argparse.Namespace) -> DynamicArray:
    """Create the starting container from --from / --underflow / --default."""
    elements = []
    if getattr(args, "initial", None):
        elements = [parse_value(token.strip()) for token in args.initial.split(",")]
    default = parse_value(args.default) if getattr(args, "default", None) is not None else None
    return DynamicArray(
        elements,
        default=default,
        underflow=getattr(args, "underflow", None),
    )


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_apply(args: argparse.Namespace) -> int:
    """Apply operations given on the command line."""
    try:
        operations = parse_script(args.operations)
        sequence = build_initial(args)
    except (ScriptError, ConfigurationError) as e:
        print("ERROR: Invalid input")
        print(f"Reason: {e}")
        return 1

    logger.debug("applying %d operation(s) to %s", len(operations), sequence.describe())
    return print_result(run_script(operations, sequence))


def cmd_demo(args: argparse.Namespace) -> int:
    """Replay the built-in walkthrough."""
    print("dynarray walkthrough")
    print("=" * 50)
    print()
    result = run_script(parse_script(DEMO_SCRIPT.splitlines()))
    return print_result(result)


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dynarray",
        description="dynarray — replay operations on a hand-built dynamic array",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Apply command
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply operations to a fresh container",
    )
    apply_parser.add_argument(
        "operations",
        nargs="+",
        help="Operations such as 'push_back 3' or 'set_at 5 x'",
    )
    apply_parser.add_argument(
        "--from",
        dest="initial",
        default=None,
        help="Comma-separated initial elements",
    )
    apply_parser.add_argument(
        "--default",
        default=None,
        help="Value read back for unset slots (default: None)",
    )
    apply_parser.add_argument(
        "--underflow",
        choices=[policy.value for policy in UnderflowPolicy],
        default=UnderflowPolicy.RAISE.value,
        help="Behaviour of pop_back/pop_front on an empty container",
    )
    apply_parser.set_defaults(func=cmd_apply)

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Replay the built-in walkthrough",
    )
    demo_parser.set_defaults(func=cmd_demo)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
