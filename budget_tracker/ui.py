"""Budget tracker UI components.

Streamlit renderers shared by the pages: summary cards, the add
expense/income forms, charts, budget progress and transaction lists.
Components read from a :class:`TransactionStore` and send mutations back
to it; all derived numbers come from :mod:`derivations`.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

import pandas as pd
import streamlit as st
from streamlit.errors import StreamlitAPIException

from . import derivations as dv
from . import visualization as viz
from .config import DEFAULT_CHART_PERIOD, EXPENSE_CATEGORIES
from .exceptions import InvalidTransactionError
from .formatting import escape_dollar_for_markdown, format_currency, format_percentage
from .i18n import category_label
from .models import EXPENSE, INCOME, Expense, Income, Transaction
from .store import TransactionStore

PERIOD_LABEL_KEYS = {
    "today": "stats.today",
    "week": "stats.thisWeek",
    "month": "stats.thisMonth",
    "lastMonth": "stats.lastMonth",
    "year": "stats.thisYear",
    "6months": "stats.sixMonths",
    "5years": "stats.fiveYears",
    "10years": "stats.tenYears",
}


def records_frame(records: Sequence[Transaction], t: Callable[[str], str], language: str) -> pd.DataFrame:
    """Display table for a list of records, newest first as given."""
    rows = []
    for record in records:
        is_expense = record.kind == EXPENSE
        rows.append(
            {
                t("history.date"): record.date,
                t("stats.type"): t("profile.expense") if is_expense else t("profile.income"),
                t("history.category"): category_label(record.category, language) if is_expense else "",
                t("history.transactionTitle"): record.title if is_expense else "",
                t("history.amount"): -record.amount if is_expense else record.amount,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            t("history.date"),
            t("stats.type"),
            t("history.category"),
            t("history.transactionTitle"),
            t("history.amount"),
        ],
    )


def budget_progress_text(status: dv.BudgetStatus, t: Callable[[str], str]) -> str:
    """Markdown line such as ``\\$450 / \\$600 · 75% used``."""
    return (
        f"{escape_dollar_for_markdown(status.spent)} / {escape_dollar_for_markdown(status.limit)}"
        f" · {format_percentage(status.percent_used)} {t('stats.used')}"
    )


class BudgetTrackerUI:
    """UI components bound to one language."""

    def __init__(self, t: Callable[[str], str], language: str = "en"):
        self.t = t
        self.language = language

    @staticmethod
    def setup_page_config(page_title: str = "Budget Tracker", page_icon: str = "💰") -> None:
        """Configure Streamlit page settings once per run."""
        try:
            st.set_page_config(
                page_title=page_title,
                page_icon=page_icon,
                layout="wide",
                initial_sidebar_state="expanded",
            )
        except StreamlitAPIException:
            # Already configured on this run
            pass

    def category(self, category: str) -> str:
        return category_label(category, self.language)

    def render_header(self, title_key: str, subtitle_key: str) -> None:
        st.title(self.t(title_key))
        st.markdown(self.t(subtitle_key))

    def render_summary_cards(self, summary: dv.TransactionSummary) -> None:
        """Expense, income and net balance metrics."""
        t = self.t
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric(t("home.totalExpenses"), format_currency(summary.total_expense))
            st.caption(f"{summary.expense_count} {t('home.transactions')}")
        with col2:
            st.metric(t("home.totalIncome"), format_currency(summary.total_income))
            st.caption(f"{summary.income_count} {t('home.transactions')}")
        with col3:
            st.metric(
                t("home.netBalance"),
                format_currency(summary.net_balance),
                delta=t("home.positiveBalance") if summary.is_positive else t("home.negativeBalance"),
                delta_color="normal" if summary.is_positive else "inverse",
            )
            st.caption(f"{summary.transaction_count} {t('home.transactions')} {t('profile.total')}")

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def render_add_expense_form(self, store: TransactionStore) -> Optional[Expense]:
        t = self.t
        with st.form("add_expense_form", clear_on_submit=True):
            st.markdown(f"**{t('home.addExpense')}**")
            title = st.text_input(t("home.formTitle"), placeholder=t("home.enterExpenseTitle"))
            expense_date = st.date_input(t("home.formDate"), value=date.today(), key="expense_date")
            category = st.selectbox(
                t("home.formCategory"),
                options=list(EXPENSE_CATEGORIES),
                format_func=self.category,
                placeholder=t("home.selectCategory"),
            )
            amount = st.number_input(t("home.formAmount"), min_value=0.0, step=1.0, key="expense_amount")
            submitted = st.form_submit_button(t("home.addExpense"), type="primary")

        if not submitted:
            return None
        if not title.strip():
            st.error(f"{t('common.error')}: {t('home.formTitle')}")
            return None
        try:
            record = Expense(date=expense_date, category=category, amount=amount, title=title)
        except InvalidTransactionError as exc:
            st.error(f"{t('common.error')}: {exc}")
            return None
        return store.add(EXPENSE, record)

    def render_add_income_form(self, store: TransactionStore) -> Optional[Income]:
        t = self.t
        with st.form("add_income_form", clear_on_submit=True):
            st.markdown(f"**{t('home.addIncome')}**")
            income_date = st.date_input(t("home.formDate"), value=date.today(), key="income_date")
            amount = st.number_input(t("home.formAmount"), min_value=0.0, step=1.0, key="income_amount")
            submitted = st.form_submit_button(t("home.addIncome"), type="primary")

        if not submitted:
            return None
        try:
            record = Income(date=income_date, amount=amount)
        except InvalidTransactionError as exc:
            st.error(f"{t('common.error')}: {exc}")
            return None
        return store.add(INCOME, record)

    # ------------------------------------------------------------------
    # Charts
    # ------------------------------------------------------------------

    def render_period_chart(self, expenses: Sequence[Expense], incomes: Sequence[Income]) -> None:
        """Stacked expense/income bars for a selectable period."""
        t = self.t
        col1, col2 = st.columns([3, 1])
        with col1:
            st.subheader(t("stats.financialOverview"))
        with col2:
            periods = list(dv.PERIODS)
            period = st.selectbox(
                t("home.period"),
                options=periods,
                index=periods.index(DEFAULT_CHART_PERIOD),
                format_func=lambda p: t(PERIOD_LABEL_KEYS[p]),
                key="overview_period",
            )
        start, end = dv.period_range(period)
        buckets = dv.bucket_transactions(expenses, incomes, start, end)
        fig = viz.create_period_bar_chart(buckets, t("profile.expense"), t("profile.income"))
        st.plotly_chart(fig, use_container_width=True)

    def render_category_breakdown(self, expenses: Sequence[Expense], today: Optional[date] = None) -> None:
        """This month's spend per category as a share of the month's total."""
        t = self.t
        st.subheader(t("home.categoryBreakdown"))
        shares = dv.current_month_breakdown(expenses, today)
        for share in shares:
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"**{self.category(share.category)}**")
            with col2:
                st.markdown(f"{escape_dollar_for_markdown(share.spent)} ({format_percentage(share.percentage)})")
            st.progress(min(share.percentage, 100.0) / 100.0)
        month_total = sum(share.spent for share in shares)
        st.markdown(f"**{t('home.totalMonthlyExpenses')}:** {escape_dollar_for_markdown(month_total)}")

    def render_budget_progress(self, statuses: Sequence[dv.BudgetStatus]) -> None:
        """Per-category spend against its income-derived limit."""
        t = self.t
        for status in statuses:
            col1, col2 = st.columns([3, 2])
            with col1:
                st.markdown(f"**{self.category(status.category)}**")
            with col2:
                st.markdown(budget_progress_text(status, t))
            st.progress(min(status.percent_used, 100.0) / 100.0)
            if status.over_budget:
                st.caption(f"🔴 {escape_dollar_for_markdown(abs(status.remaining))} {t('stats.overBudget')}")
            else:
                st.caption(f"{escape_dollar_for_markdown(status.remaining)} {t('stats.left')}")

    def render_budget_ring(self, status: dv.BudgetStatus) -> None:
        """This month's expenses against income, with limit warnings."""
        t = self.t
        col1, col2 = st.columns([1, 2])
        with col1:
            st.plotly_chart(viz.create_budget_ring(status), use_container_width=True)
        with col2:
            st.metric(t("profile.dueAmount"), format_currency(status.spent))
            st.metric(t("profile.budgetLimitLeft"), format_currency(status.remaining))
        if status.over_budget:
            st.error(t("profile.warningExceeded"))
        elif status.at_limit:
            st.warning(t("profile.warningReached"))

    # ------------------------------------------------------------------
    # Transaction lists
    # ------------------------------------------------------------------

    def render_transaction_list(
        self,
        records: Sequence[Transaction],
        store: Optional[TransactionStore] = None,
        key_prefix: str = "txn",
    ) -> None:
        """One row per record with an optional delete button.

        Deletion goes through the record id, so the order of ``records``
        does not need to match the store's.
        """
        t = self.t
        if not records:
            st.info(t("history.noTransactions"))
            return
        for record in records:
            is_expense = record.kind == EXPENSE
            cols = st.columns([2, 3, 2, 1] if store is not None else [2, 3, 2])
            with cols[0]:
                st.text(record.date.isoformat())
            with cols[1]:
                if is_expense:
                    title = (record.title or self.category(record.category)).replace("$", "\\$")
                    st.markdown(f"**{title}** · {self.category(record.category)}")
                else:
                    st.markdown(f"**{t('profile.income')}**")
            with cols[2]:
                amount = escape_dollar_for_markdown(record.amount)
                st.markdown(f"🔴 -{amount}" if is_expense else f"🟢 +{amount}")
            if store is not None:
                with cols[3]:
                    st.button(
                        "🗑️",
                        key=f"{key_prefix}_delete_{record.id}",
                        help=t("home.deleteTransaction"),
                        on_click=store.remove,
                        args=(record.kind, record.id),
                    )

    def render_transaction_table(self, records: Sequence[Transaction]) -> None:
        if not records:
            st.info(self.t("stats.tryAdjustingFilters"))
            return
        st.dataframe(records_frame(records, self.t, self.language), use_container_width=True, hide_index=True)
