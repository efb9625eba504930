import importlib.util
from datetime import date
from pathlib import Path

from budget_tracker import derivations as dv
from budget_tracker.config import AMOUNT_SLIDER_MAX
from budget_tracker.models import Expense, Income, UserProfile

PAGES_DIR = Path(__file__).resolve().parents[1] / 'budget_tracker' / 'pages'


def _load_page_module(filename, name):
    spec = importlib.util.spec_from_file_location(name, PAGES_DIR / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _stats_page():
    return _load_page_module('1_📊_Stats.py', 'stats_page_test')


def _profile_page():
    return _load_page_module('3_👤_Profile.py', 'profile_page_test')


def test_untouched_filter_panel_means_no_filters():
    module = _stats_page()
    assert module.filters_from_state({}) == dv.TransactionFilters()


def test_full_amount_range_imposes_no_constraint():
    module = _stats_page()
    filters = module.filters_from_state({module.AMOUNT_KEY: (0.0, AMOUNT_SLIDER_MAX)})

    assert filters.min_amount is None
    assert filters.max_amount is None
    assert filters.matches(Income(date='2024-01-01', amount=AMOUNT_SLIDER_MAX * 5))


def test_filter_state_is_translated():
    module = _stats_page()
    state = {
        module.DATE_FROM_KEY: date(2024, 1, 1),
        module.DATE_TO_KEY: date(2024, 1, 31),
        module.CATEGORY_KEY: 'food',
        module.AMOUNT_KEY: (10.0, 500.0),
        module.TYPE_KEY: 'expense',
    }
    filters = module.filters_from_state(state)

    assert filters == dv.TransactionFilters(
        date_from=date(2024, 1, 1),
        date_to=date(2024, 1, 31),
        category='food',
        min_amount=10.0,
        max_amount=500.0,
        type='expense',
    )


def test_reset_filters_clears_only_filter_keys():
    module = _stats_page()
    state = {key: 'x' for key in module.FILTER_KEYS}
    state['language'] = 'es'

    module.reset_filters(state)

    assert state == {'language': 'es'}


def test_this_month_budget_without_data_is_none():
    module = _profile_page()
    expenses = [Expense(date='2024-05-10', category='food', amount=20)]
    assert module.this_month_budget(expenses, [], today=date(2024, 6, 1)) is None


def test_this_month_budget_only_counts_current_month():
    module = _profile_page()
    expenses = [
        Expense(date='2024-06-10', category='food', amount=250),
        Expense(date='2023-06-10', category='rent', amount=900),
    ]
    incomes = [Income(date='2024-06-01', amount=1000), Income(date='2024-05-01', amount=5000)]

    status = module.this_month_budget(expenses, incomes, today=date(2024, 6, 20))

    assert status.spent == 250
    assert status.limit == 1000
    assert status.percent_used == 25
    assert not status.over_budget


def test_submit_profile_saves_then_reruns(monkeypatch):
    module = _profile_page()
    state = {}
    events = []
    monkeypatch.setattr(
        module, '_rerun', lambda: events.append(module.get_profile(state).name), raising=False
    )

    current = UserProfile.default()
    saved = module.submit_profile('  Ana ', 31, 'ana@example.com ', current, state)

    assert saved == UserProfile(name='Ana', age=31, email='ana@example.com')
    # Saved before the rerun so the next run draws the new card
    assert events == ['Ana']
    assert state[module.PROFILE_SAVED_KEY] is True


def test_submit_profile_keeps_name_when_blank(monkeypatch):
    module = _profile_page()
    state = {}
    monkeypatch.setattr(module, '_rerun', lambda: None, raising=False)

    saved = module.submit_profile('   ', 40, 'x@example.com', UserProfile(name='Ana', age=31, email='a@b.c'), state)

    assert saved.name == 'Ana'
    assert module.get_profile(state).age == 40
