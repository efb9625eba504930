import types

from budget_tracker import shared_sidebar
from budget_tracker.models import EXPENSE, Expense, UserProfile


def test_language_defaults_to_english(monkeypatch):
    monkeypatch.setattr(shared_sidebar, 'st', types.SimpleNamespace(session_state={}))
    assert shared_sidebar.get_language() == 'en'


def test_set_language_normalizes_code():
    state = {}
    assert shared_sidebar.set_language('ES', state) == 'es'
    assert shared_sidebar.get_language(state) == 'es'

    shared_sidebar.set_language('fr', state)
    assert shared_sidebar.get_language(state) == 'en'


def test_store_survives_reruns_within_a_session():
    state = {}
    store = shared_sidebar.get_store(state)
    record = store.add(EXPENSE, Expense(date='2024-06-12', category='rent', amount=600, title='Rent'))

    assert shared_sidebar.get_store(state).expenses == (record,)
    assert shared_sidebar.get_store({}).expenses == ()


def test_profile_round_trip():
    state = {}
    assert shared_sidebar.get_profile(state) == UserProfile.default()

    shared_sidebar.save_profile(UserProfile(name='Ana', age=31, email='ana@example.com'), state)
    assert shared_sidebar.get_profile(state).name == 'Ana'


def test_invalid_profile_falls_back_to_default():
    state = {shared_sidebar.PROFILE_STATE_KEY: {'age': 'thirty'}}
    assert shared_sidebar.get_profile(state) == UserProfile.default()


def test_rerun_prefers_streamlit_rerun(monkeypatch):
    called = {}
    monkeypatch.setattr(shared_sidebar, 'st', types.SimpleNamespace(rerun=lambda: called.setdefault('method', 'rerun')))
    shared_sidebar._rerun()
    assert called['method'] == 'rerun'


def test_rerun_falls_back_to_experimental(monkeypatch):
    called = {}
    monkeypatch.setattr(
        shared_sidebar,
        'st',
        types.SimpleNamespace(experimental_rerun=lambda: called.setdefault('method', 'experimental')),
    )
    shared_sidebar._rerun()
    assert called['method'] == 'experimental'
