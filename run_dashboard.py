#!/usr/bin/env python3
"""Direct launcher for the Budget Tracker dashboard.

This script launches Streamlit with the budget_tracker directory as the app root,
enabling automatic page discovery from the pages/ subdirectory.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.resolve()))

from budget_tracker.launcher import main

if __name__ == "__main__":
    sys.exit(main())
