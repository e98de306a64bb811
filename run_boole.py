#!/usr/bin/env python3
# run_boole.py
# This file is part of Boole-RPN - A Propositional Logic Toolkit
#
# Command-line interface for reverse-Polish formula tools

import sys
import argparse

from formula import parse_symbolic, parse_evaluation, parse_and_nnf, parse_and_cnf
from formula.exceptions import ParseError
from logic import evaluate, generate_truth_table
from utils.logger import configure_logging, get_logger


def run_command(command: str, formula: str) -> str:
    """Run one subcommand and return the text to print.

    Args:
        command: One of ``eval``, ``nnf``, ``cnf``, ``table``
        formula: Reverse-Polish formula string

    Returns:
        Output text for the console

    Raises:
        ParseError: The formula is not well-formed for the command's grammar
    """
    if command == "eval":
        return "true" if evaluate(parse_evaluation(formula)) else "false"
    if command == "nnf":
        return str(parse_and_nnf(formula))
    if command == "cnf":
        return str(parse_and_cnf(formula))
    if command == "table":
        return generate_truth_table(parse_symbolic(formula)).render().rstrip("\n")
    raise ValueError(f"Unknown command: {command}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Reverse-Polish propositional logic tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_boole.py eval "01&1|"
  python run_boole.py nnf "AB>"
  python run_boole.py cnf "AB|!C!&"
  python run_boole.py table "AB&C|" --debug

Grammars:
  eval     constants 0 1, operators ! & | ^ > =
  nnf/cnf/table   variables A-Z, operators ! & | > =
        """,
    )

    parser.add_argument(
        "command",
        choices=["eval", "nnf", "cnf", "table"],
        help="Operation to perform",
    )

    parser.add_argument("formula", help="Formula in reverse-Polish notation")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 2 for an invalid formula, 1 for other errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        logger.info(f"{args.command}: {args.formula}")
        print(run_command(args.command, args.formula))
        return 0

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        print("Invalid expression")
        return 2

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 1

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
