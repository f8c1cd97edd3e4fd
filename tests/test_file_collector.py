from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from specdoc.discovery.file_collector import FileCollector


class FileCollectorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name)
        for rel in (
            "spec/models/user_spec.rb",
            "spec/models/account_spec.rb",
            "spec/requests/api/v1/orders_spec.rb",
            "spec/spec_helper.rb",
            "spec/support/factories.rb",
            "spec/.cache/ghost_spec.rb",
            "spec/models/.tmp_spec.rb",
            "README.md",
        ):
            p = self.root / rel
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("# " + rel, encoding="utf-8")

    def tearDown(self) -> None:
        self._td.cleanup()

    def test_recursive_matching_sorted(self) -> None:
        found = FileCollector().collect(str(self.root / "spec"))
        expected = [
            os.path.join(str(self.root / "spec"), rel)
            for rel in ("models/account_spec.rb", "models/user_spec.rb", "requests/api/v1/orders_spec.rb")
        ]
        self.assertEqual(found, expected)

    def test_hidden_directories_skipped(self) -> None:
        found = FileCollector().collect(self.root)
        self.assertFalse(any("ghost_spec.rb" in p for p in found))

    def test_hidden_files_skipped(self) -> None:
        found = FileCollector().collect(self.root)
        self.assertFalse(any(os.path.basename(p).startswith(".") for p in found))

    def test_hidden_file_given_directly_is_kept(self) -> None:
        hidden = str(self.root / "spec" / "models" / ".tmp_spec.rb")
        self.assertEqual(FileCollector().collect(hidden), [hidden])

    def test_single_file_is_sole_input(self) -> None:
        readme = str(self.root / "README.md")
        self.assertEqual(FileCollector().collect(readme), [readme])

    def test_custom_pattern(self) -> None:
        found = FileCollector(pattern="*.md").collect(str(self.root))
        self.assertEqual(found, [os.path.join(str(self.root), "README.md")])

    def test_no_matches(self) -> None:
        self.assertEqual(FileCollector().collect(str(self.root / "spec" / "support")), [])


if __name__ == "__main__":
    unittest.main()
