import subprocess
import sys
import unittest
from pathlib import Path

import dayview

REPO_ROOT = Path(__file__).resolve().parent.parent

CHECK = """
import sys

import dayview

loaded = [
    name
    for name in ("dayview.terminal.app", "dayview.initialize", "typer", "rich")
    if name in sys.modules
]
print(",".join(loaded))
"""


class TestPackageImportContract(unittest.TestCase):
    def test_engine_import_leaves_cli_unloaded(self) -> None:
        p = subprocess.run(
            [sys.executable, "-c", CHECK],
            cwd=str(REPO_ROOT),
            capture_output=True,
            text=True,
        )
        self.assertEqual(p.returncode, 0, p.stderr)
        self.assertEqual(p.stdout.strip(), "")

    def test_main_is_exported(self) -> None:
        self.assertTrue(callable(dayview.main))
        self.assertIn("layout_events", dayview.__all__)


if __name__ == "__main__":
    unittest.main()
