"""Tests for what importing the package pulls in."""

from __future__ import annotations

import subprocess
import sys


def test_package_import_does_not_load_pygame():
    script = "import sys, geovec; geovec.Vector3(1, 2, 3).normalize(); sys.exit('pygame' in sys.modules)"
    result = subprocess.run([sys.executable, "-c", script], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
