"""Top‑level package for the Budget Tracker.

The primary modules are:

* ``store`` – the transaction store and its session persistence
* ``derivations`` – filtering, time bucketing and budget aggregation
* ``visualization`` – functions that generate Plotly figures
* ``i18n`` – English/Spanish string tables

To run the dashboard from the command line you can execute:

```bash
streamlit run budget_tracker/Home.py
```

or use ``run_dashboard.py`` / the ``budget-tracker`` console script.
"""

from . import derivations  # noqa: F401  # re-exported for convenience
from . import i18n  # noqa: F401  # re-exported for convenience
from . import store  # noqa: F401  # re-exported for convenience
from . import visualization  # noqa: F401  # re-exported for convenience
from .models import Expense, Income  # noqa: F401
from .store import TransactionStore  # noqa: F401

__all__ = ["derivations", "i18n", "store", "visualization", "Expense", "Income", "TransactionStore"]
