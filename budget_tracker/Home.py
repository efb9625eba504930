"""Main entry point for the Streamlit multi-page app.

Renders the dashboard: add expense/income forms, summary cards, the
period chart, this month's category breakdown and recent transactions.
Pages in the pages/ directory automatically appear in the sidebar.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from budget_tracker import derivations as dv
from budget_tracker.shared_sidebar import _rerun, render_shared_sidebar
from budget_tracker.ui import BudgetTrackerUI

RECENT_LIMIT = 5


def main() -> None:
    """Render the dashboard page."""
    BudgetTrackerUI.setup_page_config("Budget Tracker", "💰")

    sidebar_data = render_shared_sidebar()
    store = sidebar_data['store']
    t = sidebar_data['t']
    ui = BudgetTrackerUI(t, sidebar_data['language'])

    ui.render_header("home.title", "home.subtitle")

    col1, col2 = st.columns(2)
    with col1:
        with st.expander(f"➕ {t('home.addExpense')}"):
            added_expense = ui.render_add_expense_form(store)
    with col2:
        with st.expander(f"💵 {t('home.addIncome')}"):
            added_income = ui.render_add_income_form(store)
    if added_expense or added_income:
        _rerun()

    expenses, incomes = store.expenses, store.incomes
    ui.render_summary_cards(dv.summarize(expenses, incomes))
    ui.render_period_chart(expenses, incomes)
    ui.render_category_breakdown(expenses)

    st.subheader(t("home.recentTransactions"))
    st.caption(t("home.latestFinancialActivities"))
    if not len(store):
        st.info(f"{t('home.noTransactionsYet')}. {t('home.startTrackingFinances')}")
        return
    ui.render_transaction_list(dv.recent_transactions(expenses, incomes, RECENT_LIMIT), store, key_prefix="home")
    if hasattr(st, 'page_link'):
        st.page_link("pages/2_📜_History.py", label=t("home.viewAllTransactions"))


if __name__ == "__main__":
    main()
