# tests/python/test_console.py
import io
import unittest
from unittest import mock

from rich.console import Console

from bootstrap_tool import console


def terminal_console():
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, color_system="standard", no_color=False, width=200), buf


class ConsoleMessagesTest(unittest.TestCase):
    def test_error_is_red(self):
        con, buf = terminal_console()
        console.error("Error: boom", con)
        self.assertIn("\x1b[31mError: boom\x1b[0m", buf.getvalue())

    def test_warning_is_yellow(self):
        con, buf = terminal_console()
        console.warn("Warning: careful", con)
        self.assertIn("\x1b[33mWarning: careful\x1b[0m", buf.getvalue())

    def test_success_is_green(self):
        con, buf = terminal_console()
        console.success("done", con)
        self.assertIn("\x1b[32mdone\x1b[0m", buf.getvalue())

    def test_markup_is_printed_verbatim(self):
        con, buf = terminal_console()
        console.error("Error: unknown package [bold]x[/bold]", con)
        self.assertIn("[bold]x[/bold]", buf.getvalue())

    def test_default_streams(self):
        err, err_buf = terminal_console()
        out, out_buf = terminal_console()
        with mock.patch.object(console, "stderr_console", err), \
                mock.patch.object(console, "stdout_console", out):
            console.error("bad")
            console.warn("meh")
            console.success("good")
        self.assertIn("bad", err_buf.getvalue())
        self.assertIn("meh", err_buf.getvalue())
        self.assertNotIn("good", err_buf.getvalue())
        self.assertIn("good", out_buf.getvalue())

    def test_ask_reads_through_stdout_console(self):
        with mock.patch.object(console.stdout_console, "input", return_value="module") as read:
            self.assertEqual(console.ask("Pick one (a or b) "), "module")
        read.assert_called_once_with("Pick one (a or b) ", markup=False)


if __name__ == "__main__":
    unittest.main()
