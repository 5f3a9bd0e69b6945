import io
import json
import unittest
import sys
from contextlib import redirect_stderr, redirect_stdout

from truthtable.cli import PROMPT, main, render, run_loop
from truthtable.core import generate_table
from truthtable.export import table2text
from truthtable.utils import get_logger, use_sink


class TestRender(unittest.TestCase):
    def test_table(self):
        text, accepted = render("p ^ q")
        self.assertTrue(accepted)
        self.assertEqual(text, table2text(generate_table("p ^ q")))

    def test_detailed_error(self):
        text, accepted = render("p ^")
        self.assertFalse(accepted)
        self.assertTrue(text.startswith("Invalid expression: DanglingOperator:"))

    def test_coarse_error(self):
        self.assertEqual(render("p ^", coarse=True), ("Invalid expression!\n", False))

    def test_strict_and_legacy_multi_char(self):
        text, _ = render("p - q")
        self.assertTrue(text.startswith("Invalid expression: MalformedMultiCharOperator:"))
        # legacy drops the '-' and then rejects 'p q' without detail
        self.assertEqual(render("p - q", strict=False, coarse=True), ("Invalid expression!\n", False))

    def test_tokens(self):
        text, _ = render("p", show_tokens=True)
        self.assertTrue(text.startswith("1. Type: VARIABLE, Lexeme: p\n"))


class TestLoop(unittest.TestCase):
    def test_loop_until_quit(self):
        stdin = io.StringIO("p ^ q\n\nquit\np v q\n")
        stdout = io.StringIO()
        run_loop(stdin, stdout)
        expected = PROMPT + table2text(generate_table("p ^ q")) + PROMPT + PROMPT
        self.assertEqual(stdout.getvalue(), expected)

    def test_loop_stops_at_eof(self):
        stdout = io.StringIO()
        run_loop(io.StringIO("p ^\n"), stdout, coarse=True)
        self.assertEqual(stdout.getvalue(), PROMPT + "Invalid expression!\n" + PROMPT)

    def test_rejection_does_not_stop_loop(self):
        stdout = io.StringIO()
        run_loop(io.StringIO("((p\np\nquit\n"), stdout, coarse=True)
        self.assertIn("Invalid expression!\n", stdout.getvalue())
        self.assertIn(table2text(generate_table("p")), stdout.getvalue())


class TestMain(unittest.TestCase):
    def run_main(self, argv):
        self.addCleanup(use_sink, sys.stdout)
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_one_shot(self):
        code, out = self.run_main(["-e", "p -> q"])
        self.assertEqual(code, 0)
        self.assertEqual(out, table2text(generate_table("p -> q")))

    def test_one_shot_invalid(self):
        code, out = self.run_main(["-e", "p ^", "--legacy"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "Invalid expression!\n")

    def test_json_format(self):
        code, out = self.run_main(["-e", "~p", "--format", "json"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["rows"][0], {"values": {"p": True}, "result": False})

    def test_logs_go_to_stderr(self):
        self.addCleanup(use_sink, sys.stdout)
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(["-e", "~p", "--format", "json"])
            get_logger("cli test").warning("table written")
        self.assertEqual(code, 0)
        self.assertNotIn("table written", out.getvalue())
        self.assertIn("table written", err.getvalue())
        json.loads(out.getvalue())


if __name__ == "__main__":
    unittest.main()
