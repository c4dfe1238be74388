# tests/integration_tests/test_solver_cli.py
# This file is part of Boolsat - A Brute-Force Boolean Satisfiability Solver
#
# Integration tests for the interactive loop and the command-line entry point

"""Integration tests running formulas end to end.

These tests drive the same code paths a user reaches from the terminal:
text goes through the parser, the solver and the printer, and the session
output or process exit code is checked.
"""

import itertools
import pytest
import run_solver
from run_solver import SolverSession, VariableLimitError, main, run_repl
from parser.exceptions import FormulaSyntaxError, LexicalError
from core.solver import SearchInterrupted
from utils.formula_printer import Notation


class TestSolverSession:
    """Test cases for line handling in the interactive loop."""

    def setup_method(self):
        """Create a session that records its output lines."""
        self.lines = []
        self.session = SolverSession(output=self.lines.append)

    def test_single_solution_session(self, single_solution_formula):
        """Test echo and report of the documented single-solution formula."""
        assert self.session.handle_line(single_solution_formula) is True

        assert self.lines == [
            "Formula: (x2 OR x4) AND (x1 OR x2) AND -x2",
            "Satisfiable: x1 = T, x2 = F, x4 = T",
            "",
        ]

    def test_multiple_solution_session(self):
        """Test the multi-solution banner for (x2 OR x4) AND (x1 OR x2)."""
        self.session.handle_line("(x2 OR x4) AND (x1 OR x2)")

        assert self.lines[1] == "Satisfiable (5 solutions):"
        assert self.lines[2:7] == [
            "  x1 = F, x2 = T, x4 = F",
            "  x1 = F, x2 = T, x4 = T",
            "  x1 = T, x2 = T, x4 = F",
            "  x1 = T, x2 = F, x4 = T",
            "  x1 = T, x2 = T, x4 = T",
        ]

    def test_tautology_and_contradiction(self, tautology_formula, contradiction_formula):
        """Test the banners of the two extreme cases."""
        self.session.handle_line(tautology_formula)
        self.session.handle_line(contradiction_formula)

        assert "Satisfiable (4 solutions):" in self.lines
        assert "Unsatisfiable" in self.lines

    def test_notation_commands(self):
        """Test that math, prog and normal switch the display notation."""
        self.session.handle_line("math")
        self.session.handle_line("x1 AND -x2")

        assert self.session.printer.notation == Notation.MATHEMATICAL
        assert "Formula: x₁ ∧ ¬x₂" in self.lines
        assert "Satisfiable: x₁ = ⊤, x₂ = ⊥" in self.lines

        self.session.handle_line("prog")
        assert self.session.printer.notation == Notation.PROGRAMMATIC
        self.session.handle_line("normal")
        assert self.session.printer.notation == Notation.NORMAL

    @pytest.mark.parametrize("command", ["exit", "quit", "  EXIT  "])
    def test_exit_commands_end_session(self, command):
        """Test that exit commands stop the loop."""
        assert self.session.handle_line(command) is False
        assert self.lines == []

    def test_blank_line_ignored(self):
        """Test that empty input produces no output."""
        assert self.session.handle_line("   ") is True
        assert self.lines == []

    def test_errors_reported_and_session_continues(self):
        """Test that parse errors are printed without ending the session."""
        assert self.session.handle_line("(x1") is True
        assert self.session.handle_line("x1 $ x2") is True

        assert "Error: Syntax error: unexpected end of input, expected ')'" in self.lines
        assert "Error: Illegal character '$' at position 3" in self.lines

        self.session.handle_line("x1")
        assert "Satisfiable: x1 = T" in self.lines

    def test_solve_text_raises_parse_errors(self):
        """Test that solve_text leaves error handling to its caller."""
        with pytest.raises(FormulaSyntaxError):
            self.session.solve_text("x1 x2")
        with pytest.raises(LexicalError):
            self.session.solve_text("x1 % x2")

    def test_variable_ceiling(self):
        """Test that formulas above the ceiling are refused before searching."""
        session = SolverSession(max_variables=2, output=self.lines.append)

        with pytest.raises(VariableLimitError) as exc_info:
            session.solve_text("x1 OR x2 OR x3")

        assert exc_info.value.count == 3
        assert exc_info.value.limit == 2

        session.handle_line("x1 OR x2 OR x3")
        assert any(line.startswith("Error: Formula has 3 variables") for line in self.lines)

    def test_timeout_interrupts_search(self, monkeypatch):
        """Test that an expired deadline ends the search."""
        readings = itertools.chain([0.0], itertools.repeat(10.0))
        monkeypatch.setattr(run_solver.time, "monotonic", lambda: next(readings))
        session = SolverSession(timeout=1.0, output=self.lines.append)

        with pytest.raises(SearchInterrupted):
            session.solve_text("x1 OR x2")

    def test_large_formula_session(self, large_formula):
        """Test that a deep formula is echoed, solved and the session continues."""
        text, expected_count = large_formula

        assert self.session.handle_line(text) is True

        assert self.lines[0] == f"Formula: {text}"
        if expected_count == 1:
            assert self.lines[1].startswith("Satisfiable: ")
            assert len(self.lines) == 3
        else:
            assert self.lines[1] == f"Satisfiable ({expected_count} solutions):"
            assert len(self.lines) == expected_count + 3

        self.session.handle_line("x1 AND -x1")
        assert self.lines[-2:] == ["Unsatisfiable", ""]

    def test_large_formula_in_math_notation(self):
        """Test echoing a long disjunction in mathematical notation."""
        self.session.handle_line("math")
        self.session.handle_line(" OR ".join(["x1"] * 600))

        assert f"Formula: {' ∨ '.join(['x₁'] * 600)}" in self.lines
        assert "Satisfiable: x₁ = ⊤" in self.lines


class TestRepl:
    """Test cases for the read-solve-print loop."""

    def test_repl_runs_until_exit(self):
        """Test that the loop processes lines in order and stops at exit."""
        lines = []
        session = SolverSession(output=lines.append)
        inputs = iter(["x1 AND x2", "exit", "x3"])

        assert run_repl(session, lambda prompt: next(inputs)) == 0

        assert "Satisfiable: x1 = T, x2 = T" in lines
        assert not any("x3" in line for line in lines)

    def test_repl_stops_at_end_of_input(self):
        """Test that end of input ends the loop cleanly."""
        lines = []
        session = SolverSession(output=lines.append)
        inputs = iter(["x1 AND -x1"])

        def read_line(prompt):
            try:
                return next(inputs)
            except StopIteration:
                raise EOFError

        assert run_repl(session, read_line) == 0
        assert "Unsatisfiable" in lines


class TestCommandLine:
    """Test cases for exit codes of single-formula runs."""

    def test_satisfiable_formula(self):
        assert main(["(x2 OR x4) AND (x1 OR x2) AND (-x2)"]) == run_solver.EXIT_SATISFIABLE

    def test_unsatisfiable_formula(self):
        assert main(["x1 AND -x1"]) == run_solver.EXIT_UNSATISFIABLE

    @pytest.mark.parametrize("formula", ["(x1", "x1 $ x2", "x1 x2"])
    def test_parse_errors(self, formula):
        assert main([formula]) == run_solver.EXIT_PARSE_ERROR

    def test_formula_file(self, tmp_path):
        """Test reading the formula from a file."""
        formula_file = tmp_path / "formula.txt"
        formula_file.write_text("(x₁ ∨ x₂) ∧ ¬x₁\n", encoding="utf-8")

        assert main(["-f", str(formula_file), "--notation", "math"]) == 0

    def test_missing_formula_file(self, tmp_path):
        assert main(["-f", str(tmp_path / "absent.txt")]) == run_solver.EXIT_FILE_ERROR

    def test_empty_formula_file(self, tmp_path):
        formula_file = tmp_path / "empty.txt"
        formula_file.write_text("  \n", encoding="utf-8")

        assert main(["-f", str(formula_file)]) == run_solver.EXIT_FILE_ERROR

    def test_validate_only(self):
        """Test that --validate-only parses without solving."""
        assert main(["x1 AND -x1", "--validate-only"]) == 0
        assert main(["x1 AND", "--validate-only"]) == run_solver.EXIT_PARSE_ERROR

    def test_variable_ceiling(self):
        assert (
            main(["x1 OR x2 OR x3", "--max-variables", "2"])
            == run_solver.EXIT_TOO_MANY_VARIABLES
        )

    def test_large_formula_exit_code(self, large_formula):
        text, _ = large_formula
        assert main(["--", text]) == run_solver.EXIT_SATISFIABLE
