# tests/python/test_preflight.py
import os
import tempfile
import unittest
from pathlib import Path

from bootstrap_tool import preflight
from bootstrap_tool.errors import (
    MissingDirectoryArgumentError,
    MissingProgramError,
    TargetDirectoryError,
)

from fakes import FakeRunner, make_console


class RequiredProgramsTest(unittest.TestCase):
    def test_all_programs_resolve(self):
        looked_up = []

        def which(name):
            looked_up.append(name)
            return f"/usr/bin/{name}"

        self.assertIsNone(preflight.check_required_programs(["git", "node", "npx"], which=which))
        self.assertEqual(looked_up, ["git", "node", "npx"])

    def test_stops_at_first_missing_program(self):
        looked_up = []

        def which(name):
            looked_up.append(name)
            return None if name in {"node", "npx"} else f"/usr/bin/{name}"

        with self.assertRaises(MissingProgramError) as ctx:
            preflight.check_required_programs(["git", "node", "npx"], which=which)

        self.assertEqual(ctx.exception.program, "node")
        self.assertEqual(str(ctx.exception), "Error: Required command not found: node")
        self.assertEqual(looked_up, ["git", "node"])


class TargetDirectoryTest(unittest.TestCase):
    def test_missing_argument(self):
        for value in (None, ""):
            with self.assertRaises(MissingDirectoryArgumentError):
                preflight.resolve_target_directory(value)

    def test_relative_path_is_resolved(self):
        with tempfile.TemporaryDirectory() as tmp:
            cwd = os.getcwd()
            os.chdir(tmp)
            try:
                (Path(tmp) / "proj").mkdir()
                resolved = preflight.resolve_target_directory("proj")
            finally:
                os.chdir(cwd)
            self.assertTrue(resolved.is_absolute())
            self.assertEqual(resolved, (Path(tmp) / "proj").resolve())

    def test_nonexistent_directory_is_not_created(self):
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "nope"
            with self.assertRaises(TargetDirectoryError) as ctx:
                preflight.resolve_target_directory(str(target))
            self.assertIn("does not exist", str(ctx.exception))
            self.assertIn(str(target.resolve()), str(ctx.exception))
            self.assertFalse(target.exists())

    def test_regular_file_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "file.txt"
            path.write_text("x")
            with self.assertRaises(TargetDirectoryError):
                preflight.resolve_target_directory(str(path))


class GlobalGitSettingsTest(unittest.TestCase):
    def test_unset_settings_warn_and_continue(self):
        with tempfile.TemporaryDirectory() as tmp:
            runner = FakeRunner(tmp, git_settings={"user.name": "Ada", "user.email": ""})
            err, buf = make_console()

            results = preflight.check_global_git_settings(
                runner, ["user.name", "user.email", "init.defaultBranch"], err
            )

        self.assertEqual([r.is_set for r in results], [True, False, False])
        self.assertEqual(results[0].value, "Ada")
        output = buf.getvalue()
        self.assertNotIn("'user.name'", output)
        self.assertIn("Warning: Global git setting 'user.email' is not set.", output)
        self.assertIn("Warning: Global git setting 'init.defaultBranch' is not set.", output)
        self.assertEqual(
            runner.commands("git", "config"),
            [
                ("git", "config", "--global", "--get", "user.name"),
                ("git", "config", "--global", "--get", "user.email"),
                ("git", "config", "--global", "--get", "init.defaultBranch"),
            ],
        )

    def test_all_set_prints_nothing(self):
        with tempfile.TemporaryDirectory() as tmp:
            runner = FakeRunner(tmp, git_settings={"user.name": "Ada", "user.email": "a@b.c"})
            err, buf = make_console()
            preflight.check_global_git_settings(runner, ["user.name", "user.email"], err)
        self.assertEqual(buf.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
