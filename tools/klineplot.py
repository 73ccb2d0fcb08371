#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from klineplot.cli import app  # noqa: E402

if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] not in {
        "render",
        "describe",
        "-v",
        "--verbose",
        "-h",
        "--help",
    }:
        sys.argv.insert(1, "render")
    app(prog_name="klineplot")
