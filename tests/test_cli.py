"""Tests for the single-board command-line entry point."""

from contextlib import redirect_stdout
from pathlib import Path
import io
import sys
import unittest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from linequeens.cli import UsageError, main, parse_positionals


def run_cli(argv):
    out = io.StringIO()
    with redirect_stdout(out):
        status = main(argv)
    return status, out.getvalue()


class ParsePositionalsTests(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(parse_positionals([]), (True, 8))

    def test_single_argument(self):
        self.assertEqual(parse_positionals(["no-line-constraint"]), (False, 8))
        self.assertEqual(parse_positionals(["10"]), (True, 10))

    def test_two_arguments(self):
        self.assertEqual(parse_positionals(["no-line-constraint", "5"]), (False, 5))

    def test_rejected_arguments(self):
        for args in (["x"], ["0"], ["8", "6"], ["no-line-constraint", "x"], ["no-line-constraint", "4", "5"]):
            with self.assertRaises(UsageError, msg=str(args)):
                parse_positionals(args)


class MainTests(unittest.TestCase):
    def test_default_run_assumes_eight_queens(self):
        status, out = run_cli([])
        lines = out.splitlines()
        self.assertEqual(status, 0)
        self.assertEqual(lines[0], "Assuming 8 Queens -- rerun with an integer argument to specify.")
        self.assertEqual(len(lines), 9)
        self.assertTrue(all(line.count("@") == 1 for line in lines[1:]))

    def test_prints_board(self):
        status, out = run_cli(["4"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["  1 . @ . . ", "  3 . . . @ ", "  0 @ . . . ", "  2 . . @ . "])

    def test_no_line_constraint_flag(self):
        status, out = run_cli(["no-line-constraint", "6"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines()[0], "  1 . @ . . . . ")

    def test_no_solution_message(self):
        status, out = run_cli(["6"])
        self.assertEqual(status, 0)
        self.assertEqual(out.strip(), "No solution found for 6 queens.")

    def test_bad_number(self):
        status, out = run_cli(["abc"])
        self.assertEqual(status, 1)
        self.assertIn("Unable to convert argument 'abc' to a number.", out)
        self.assertIn("Usage:", out)

    def test_bad_argument_combinations(self):
        for argv in (["8", "6"], ["no-line-constraint", "4", "5"], ["0"]):
            status, out = run_cli(argv)
            self.assertEqual(status, 1, argv)
            self.assertIn("Usage:", out)

    def test_validate_flag(self):
        status, out = run_cli(["--validate", "no-line-constraint", "5"])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines()[-1], "Validation passed.")

    def test_validate_flag_after_positionals(self):
        status, out = run_cli(["no-line-constraint", "--validate", "5"])
        self.assertEqual(status, 0)
        self.assertIn("Validation passed.", out)


if __name__ == "__main__":
    unittest.main()
