"""
Command-line interface.

Usage:
    python -m physics_equations LAW [name=value ...]

Examples:
    python -m physics_equations ohms_law voltage=12 resistance=4
    python -m physics_equations mass_energy_equivalence mass=1 speed_of_light=c
    python -m physics_equations --strict ohms_law voltage=0 resistance=4
    python -m physics_equations --list

Without --strict a quantity that is left out or set to 0 is solved for, exactly
like calling the evaluator. With --strict only left-out quantities are solved
for and 0 is an ordinary value.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, List, Optional

from physics_equations.config import NAMED_CONSTANTS
from physics_equations.errors import FormulaError
from physics_equations.logging_config import setup_logging
from physics_equations.registry import UnknownPolicy, evaluate, get_law, list_laws, solve

logger = logging.getLogger("physics_equations.cli")


def _parse_assignments(parser: argparse.ArgumentParser, assignments: List[str]) -> Dict[str, float]:
    values: Dict[str, float] = {}
    for item in assignments:
        name, sep, raw = item.partition("=")
        if not sep or not name:
            parser.error(f"expected name=value, got '{item}'")
        if name in values:
            parser.error(f"quantity '{name}' given more than once")
        if raw in NAMED_CONSTANTS:
            values[name] = NAMED_CONSTANTS[raw]
            continue
        try:
            values[name] = float(raw)
        except ValueError:
            parser.error(f"'{raw}' is not a number or a known constant ({', '.join(NAMED_CONSTANTS)})")
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="physics_equations",
        description="Solve a physical law for the quantity that is left out.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("law", nargs="?", help="Law to evaluate (see --list)")
    parser.add_argument("assignments", nargs="*", metavar="name=value", help="Known quantities")
    parser.add_argument("--list", action="store_true", help="List laws and their quantities")
    parser.add_argument("--strict", action="store_true",
                        help="Only left-out quantities are unknown; 0 is a value")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write the log to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    if args.list:
        for name in list_laws():
            law = get_law(name)
            print(f"{name}: {', '.join(law.quantities)}")
        return 0

    if not args.law:
        parser.error("a law is required unless --list is given")

    values = _parse_assignments(parser, args.assignments)
    try:
        if args.strict:
            result = solve(args.law, values, policy=UnknownPolicy.STRICT)
        else:
            result = evaluate(args.law, values)
    except FormulaError as e:
        logger.debug("Evaluation of '%s' failed", args.law, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
