"""Interactive console for the calculator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from longcalc import __version__
from longcalc.core import Calculator, Evaluation
from longcalc.logging_config import LOG_LEVEL_ENV, configure_logging, get_logger
from longcalc.operations import EXPONENT_WARNING_THRESHOLD, MAX_EXPONENT

logger = get_logger(__name__)

PROMPT = "Enter an expression or command: "

BANNER = f"""\
              -=-=-=-=-=-=-=
                 longcalc
              -=-=-=-=-=-=-=
                              version {__version__}
        Exact integer arithmetic, any size
          Type 'usage' for instructions
-------------------------------------------
"""

USAGE = """\
Usage
###########################################
# Format:  <number><operator><number>     #
# Example: 1234+5678                      #
###########################################
# Operators:                              #
# +  addition         -  subtraction      #
# *  multiplication   /  division         #
# ^  power                                #
# Division prints quotient......remainder #
###########################################
# Commands:                               #
# exit      quit the calculator           #
# usage     show this help                #
# log       show the changelog            #
# history   list previous results         #
# clear     forget history, redraw screen #
###########################################
"""

CHANGELOG = f"""\
Changelog
###########################################
# {__version__:<40}#
# - Addition, subtraction, multiplication #
# - Division with quotient and remainder  #
# - Power by repeated squaring            #
# - Exponent limit and large-exponent     #
#   warning                               #
# - Session history                       #
###########################################
"""


class Session:
    """
    Read-evaluate-print loop around a Calculator.

    Input and output streams are injected so the loop can be driven by
    tests as well as by a terminal.
    """

    def __init__(
        self,
        calculator: Calculator | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.calculator = calculator or Calculator()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._commands = {
            "usage": self.show_usage,
            "log": self.show_changelog,
            "history": self.show_history,
            "clear": self.clear,
        }

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def show_banner(self) -> None:
        self.write(BANNER + "\n")

    def show_usage(self) -> None:
        self.write(USAGE + "\n")

    def show_changelog(self) -> None:
        self.write(CHANGELOG + "\n")

    def show_history(self) -> None:
        history = self.calculator.history
        if not history:
            self.write("No history yet\n")
            return
        for index, evaluation in enumerate(history, start=1):
            self.write(f"{index}. {evaluation}\n")

    def clear(self) -> None:
        self.calculator.clear()
        self.show_banner()

    def report(self, evaluation: Evaluation) -> None:
        """Print warnings, the result, and any error for one evaluation."""
        for message in evaluation.warnings:
            self.write(f"Warning: {message}\n")
        if evaluation.error is not None:
            self.write(f"Error: {evaluation.error}\n")
        if evaluation.result is not None:
            self.write(evaluation.text)

    def handle(self, line: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the session should end, True otherwise
        """
        line = line.strip()
        if not line:
            return True
        if line == "exit":
            self.write("\nExiting...\n")
            return False

        command = self._commands.get(line)
        if command is not None:
            command()
            return True

        self.report(self.calculator.evaluate(line))
        return True

    def run(self) -> None:
        self.show_banner()
        while True:
            self.write(PROMPT)
            line = self.stdin.readline()
            if not line:
                # End of input behaves like exit
                self.write("\n")
                break
            if not self.handle(line):
                break
        logger.debug("Session ended after %d evaluations", len(self.calculator.history))


def evaluate_all(calculator: Calculator, expressions: Iterable[str], stdout: TextIO) -> int:
    """Evaluate expressions non-interactively; return the exit status."""
    session = Session(calculator, stdout=stdout)
    status = 0
    for expression in expressions:
        evaluation = calculator.evaluate(expression)
        session.report(evaluation)
        if not evaluation.ok:
            status = 1
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="longcalc",
        description="Exact arbitrary-precision integer calculator.",
    )
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        default=[],
        metavar="EXPR",
        help="Evaluate EXPR and exit (repeatable)",
    )
    parser.add_argument(
        "--max-exponent",
        type=int,
        default=MAX_EXPONENT,
        help=f"Largest exponent accepted by ^ (default: {MAX_EXPONENT})",
    )
    parser.add_argument(
        "--warn-exponent",
        type=int,
        default=EXPONENT_WARNING_THRESHOLD,
        help=f"Warn above this exponent (default: {EXPONENT_WARNING_THRESHOLD})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    calculator = Calculator(max_exponent=args.max_exponent, warn_threshold=args.warn_exponent)
    if args.expression:
        return evaluate_all(calculator, args.expression, sys.stdout)

    try:
        Session(calculator).run()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
