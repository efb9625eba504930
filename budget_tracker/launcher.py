"""Launch the Streamlit dashboard with the package directory as app root.

Running from the package directory lets Streamlit discover pages/.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

APP_DIR = Path(__file__).parent.resolve()


def build_command(extra_args: Optional[List[str]] = None) -> List[str]:
    return [sys.executable, "-m", "streamlit", "run", "Home.py", *(extra_args or [])]


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    os.chdir(APP_DIR)
    return subprocess.run(build_command(args)).returncode
