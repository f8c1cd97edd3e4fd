"""Command-line front end: argument parsing, exit codes and status line."""
from __future__ import annotations

import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from typing import List
from unittest.mock import patch

from specdoc import cli
from specdoc.constants import ExitCode

from tests.fakes import FixedEstimator, ResponsesClient, responses_payload


class CliBase(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.dir = Path(self._td.name)
        self.out = self.dir / "out.md"
        spec = self.dir / "spec" / "models"
        spec.mkdir(parents=True)
        (spec / "user_spec.rb").write_text("RSpec.describe User do; end", encoding="utf-8")
        self.client = ResponsesClient(responses_payload("User docs"))

    def tearDown(self) -> None:
        self._td.cleanup()

    def run_cli(self, argv: List[str], env: dict) -> str:
        stdout = io.StringIO()
        with patch.dict(os.environ, env, clear=True), \
                patch("specdoc.runtime.generator.build_openai_client", return_value=self.client), \
                patch("specdoc.cli.TokenBudgetEstimator", return_value=FixedEstimator(tokens=10)), \
                contextlib.redirect_stdout(stdout):
            cli.SpecDoc.run(argv)
        return stdout.getvalue()


# --------------------------------------------------------------------------- #
#  1. Successful runs                                                         #
# --------------------------------------------------------------------------- #
class CliRunTests(CliBase):
    def test_writes_document_and_status_line(self) -> None:
        printed = self.run_cli([str(self.dir / "spec"), "-o", str(self.out)], {"OPENAI_API_KEY": "k"})
        self.assertEqual(printed.strip(), f"Done. Combined documentation written to {self.out}")
        md = self.out.read_text(encoding="utf-8")
        self.assertIn("## Batch 1", md)
        self.assertIn("User docs", md)

    def test_options_reach_the_backend(self) -> None:
        self.run_cli(
            [str(self.dir / "spec"), "-o", str(self.out), "-m", "o3", "-r", "medium", "-c", "5000"],
            {"OPENAI_API_KEY": "k"},
        )
        call = self.client.responses.calls[0]
        self.assertEqual(call["model"], "o3")
        self.assertEqual(call["reasoning"], {"effort": "medium"})
        self.assertIn("5000 chars", self.out.read_text(encoding="utf-8"))

    def test_environment_out(self) -> None:
        self.run_cli([str(self.dir / "spec")], {"OPENAI_API_KEY": "k", "SPECDOC_OUT": str(self.out)})
        self.assertTrue(self.out.exists())

    def test_report_flag_prints_json(self) -> None:
        printed = self.run_cli([str(self.dir / "spec"), "-o", str(self.out), "--report"], {"OPENAI_API_KEY": "k"})
        self.assertIn('"batches_written": [', printed)

    def test_json_logs_flag(self) -> None:
        printed = self.run_cli([str(self.dir / "spec"), "-o", str(self.out), "--json-logs"], {"OPENAI_API_KEY": "k"})
        self.assertIn("Done.", printed)


# --------------------------------------------------------------------------- #
#  2. Pre-flight failures                                                     #
# --------------------------------------------------------------------------- #
class CliFailureTests(CliBase):
    def assertExit(self, argv: List[str], env: dict, code: int) -> None:
        with self.assertRaises(SystemExit) as cm:
            self.run_cli(argv, env)
        self.assertEqual(cm.exception.code, code)
        self.assertFalse(self.out.exists())
        self.assertEqual(self.client.responses.calls, [])

    def test_missing_api_key(self) -> None:
        self.assertExit([str(self.dir / "spec"), "-o", str(self.out)], {}, ExitCode.MISSING_CREDENTIAL)

    def test_missing_path(self) -> None:
        self.assertExit(["-o", str(self.out)], {"OPENAI_API_KEY": "k"}, ExitCode.MISSING_PATH)

    def test_blank_path(self) -> None:
        self.assertExit(["   ", "-o", str(self.out)], {"OPENAI_API_KEY": "k"}, ExitCode.MISSING_PATH)

    def test_nonexistent_path(self) -> None:
        self.assertExit(["/no/such/path", "-o", str(self.out)], {"OPENAI_API_KEY": "k"}, ExitCode.PATH_NOT_FOUND)

    def test_no_spec_files(self) -> None:
        empty = self.dir / "empty"
        empty.mkdir()
        self.assertExit([str(empty), "-o", str(self.out)], {"OPENAI_API_KEY": "k"}, ExitCode.NO_INPUT)

    def test_invalid_limit(self) -> None:
        self.assertExit(
            [str(self.dir / "spec"), "-o", str(self.out), "-f", "0"], {"OPENAI_API_KEY": "k"}, ExitCode.INVALID_OPTION
        )


# --------------------------------------------------------------------------- #
#  3. main() exit handling                                                    #
# --------------------------------------------------------------------------- #
class MainTests(CliBase):
    def test_main_exits_zero(self) -> None:
        with self.assertRaises(SystemExit) as cm:
            self.run_main([str(self.dir / "spec"), "-o", str(self.out)])
        self.assertEqual(cm.exception.code, ExitCode.OK)

    def test_backend_error_maps_to_failure_code(self) -> None:
        self.client = ResponsesClient(ConnectionError("unreachable"))
        with self.assertRaises(SystemExit) as cm:
            self.run_main([str(self.dir / "spec"), "-o", str(self.out)])
        self.assertEqual(cm.exception.code, ExitCode.BACKEND_FAILURE)
        self.assertTrue(self.out.exists())

    def run_main(self, argv: List[str]) -> None:
        with patch.dict(os.environ, {"OPENAI_API_KEY": "k"}, clear=True), \
                patch("specdoc.runtime.generator.build_openai_client", return_value=self.client), \
                patch("specdoc.cli.TokenBudgetEstimator", return_value=FixedEstimator(tokens=10)), \
                contextlib.redirect_stdout(io.StringIO()):
            cli.main(argv)


if __name__ == "__main__":
    unittest.main()
