#!/usr/bin/env python3
# run_solver.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Command-line interface and interactive loop for the satisfiability solver

import sys
import time
import argparse
from pathlib import Path
from typing import Callable, Optional

from parser import parse
from parser.exceptions import ParseError
from core.solver import SearchInterrupted, SolutionSet, solve
from utils.formula_printer import FormulaPrinter, Notation
from utils.logger import configure_logging, get_logger

DEFAULT_MAX_VARIABLES = 20

EXIT_COMMANDS = ("exit", "quit")
NOTATION_COMMANDS = tuple(n.value for n in Notation)

# Exit codes for single-formula runs
EXIT_SATISFIABLE = 0
EXIT_UNSATISFIABLE = 1
EXIT_PARSE_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_TOO_MANY_VARIABLES = 5


class VariableLimitError(ValueError):
    """Raised when a formula has more variables than the session allows."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} variables, more than the limit of {limit} "
            f"({2 ** count} assignments to search)"
        )


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


class SolverSession:
    """State of one interactive session: notation and search limits.

    Every formula is parsed and solved independently; the session only keeps
    the display notation between lines.

    Attributes:
        printer: Formatter holding the active notation
        max_variables: Largest variable count a formula may have
        timeout: Seconds a single search may run, or None for no limit
    """

    def __init__(
        self,
        notation: Notation = Notation.NORMAL,
        max_variables: int = DEFAULT_MAX_VARIABLES,
        timeout: Optional[float] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.printer = FormulaPrinter(notation)
        self.max_variables = max_variables
        self.timeout = timeout
        self._output = output if output is not None else get_logger().info

    def _stop_check(self) -> Optional[Callable[[], bool]]:
        if self.timeout is None:
            return None
        deadline = time.monotonic() + self.timeout
        return lambda: time.monotonic() > deadline

    def solve_text(self, text: str) -> SolutionSet:
        """Parse, echo, solve and report one formula.

        Raises:
            ParseError: The formula does not parse
            VariableLimitError: The formula exceeds ``max_variables``
            SearchInterrupted: The search ran past ``timeout``
        """
        logger = get_logger()

        expr, variables = parse(text)
        logger.formula_parsed(expr, variables.names)

        self._output(f"Formula: {self.printer.format_formula(expr, variables)}")

        if len(variables) > self.max_variables:
            raise VariableLimitError(len(variables), self.max_variables)

        solutions = solve(expr, len(variables), should_stop=self._stop_check())
        for line in self.printer.format_report(solutions, variables):
            self._output(line)
        return solutions

    def handle_line(self, line: str) -> bool:
        """Process one line of REPL input.

        Args:
            line: Raw input line

        Returns:
            False when the session should end, True otherwise
        """
        command = line.strip()
        if not command:
            return True

        if command.lower() in EXIT_COMMANDS:
            return False

        if command.lower() in NOTATION_COMMANDS:
            self.printer.notation = Notation.from_command(command)
            self._output(f"Notation: {self.printer.notation.value}")
            return True

        try:
            self.solve_text(command)
        except ParseError as e:
            self._output(f"Error: {e}")
        except VariableLimitError as e:
            self._output(f"Error: {e}")
        except SearchInterrupted as e:
            self._output(f"Timeout: {e}")
        except KeyboardInterrupt:
            self._output("Search interrupted by user")

        self._output("")
        return True


def run_repl(session: SolverSession, read_line: Callable[[str], str] = input) -> int:
    """Run the interactive read-solve-print loop until exit or end of input.

    Returns:
        Exit code (always 0)
    """
    logger = get_logger()
    logger.info("Welcome to the SAT Solver!")
    logger.info(
        "Enter a formula such as (x1 OR x2) AND -x1, "
        "'normal', 'prog' or 'math' to change notation, 'exit' to quit."
    )

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            break
        except KeyboardInterrupt:
            break

        if not session.handle_line(line):
            break

    return 0


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Boolsat brute-force Boolean satisfiability solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py
  python run_solver.py "(x1 OR x2) AND -x1"
  python run_solver.py -f formula.txt --notation math
  python run_solver.py "x1 & !x2" --validate-only

Formula syntax:
  variables  x1, x2, ... or x₁, x₂, ...
  and        AND  &  ∧
  or         OR   |  ∨
  not        NOT  -  !  ¬

  Put -- before a formula that starts with "-", e.g. run_solver.py -- "-x1"
        """,
    )

    parser.add_argument(
        "formula", nargs="?", help="Formula to solve; starts the REPL when omitted"
    )

    parser.add_argument(
        "-f", "--formula-file", type=Path, help="Path to a file holding the formula"
    )

    parser.add_argument(
        "-n",
        "--notation",
        choices=[n.value for n in Notation],
        default=Notation.NORMAL.value,
        help="Display notation (default: normal)",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse formulas with more variables (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Abandon a search after this many seconds",
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only parse the formula"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Report search statistics"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the solver application.

    Returns:
        Exit code (see the EXIT_* constants)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(debug=args.debug)
    logger = get_logger()

    session = SolverSession(
        notation=Notation(args.notation),
        max_variables=args.max_variables,
        timeout=args.timeout,
    )

    try:
        if args.formula_file is not None:
            formula = read_formula_file(args.formula_file)
        elif args.formula is not None:
            formula = args.formula
        else:
            return run_repl(session)

        if args.validate_only:
            expr, variables = parse(formula)
            logger.info(f"Formula: {session.printer.format_formula(expr, variables)}")
            logger.info(f"Variables: {', '.join(variables.names)}")
            logger.info("Formula syntax is well-formed")
            return EXIT_SATISFIABLE

        solutions = session.solve_text(formula)

        if args.verbose:
            logger.info(
                f"Examined {solutions.examined} assignment(s) "
                f"over {solutions.variable_count} variable(s)"
            )

        if solutions.is_satisfiable():
            return EXIT_SATISFIABLE
        return EXIT_UNSATISFIABLE

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return EXIT_PARSE_ERROR

    except VariableLimitError as e:
        logger.error(f"Formula too large: {e}")
        return EXIT_TOO_MANY_VARIABLES

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_FILE_ERROR

    except SearchInterrupted as e:
        logger.error(f"Search timed out: {e}")
        return EXIT_INTERRUPTED

    except KeyboardInterrupt:
        logger.error("Search interrupted by user")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
