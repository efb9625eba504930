"""Tests for record validation in budget_tracker.models."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from budget_tracker.exceptions import BudgetTrackerError, InvalidTransactionError
from budget_tracker.models import (
    EXPENSE,
    INCOME,
    Expense,
    Income,
    UserProfile,
    record_type,
)


def test_expense_normalizes_fields() -> None:
    expense = Expense(date='2024-06-12T18:45:00.000Z', category=' Rent ', amount='600', title='  June rent ')

    assert expense.date == date(2024, 6, 12)
    assert expense.category == 'rent'
    assert expense.amount == 600.0
    assert expense.title == 'June rent'
    assert expense.kind == EXPENSE


def test_datetime_is_truncated_to_date() -> None:
    income = Income(date=datetime(2024, 6, 1, 23, 59), amount=10)
    assert income.date == date(2024, 6, 1)
    assert income.kind == INCOME


@pytest.mark.parametrize('amount', [-1, float('nan'), float('inf'), True, 'ten', None])
def test_invalid_amounts_are_rejected(amount) -> None:
    with pytest.raises(InvalidTransactionError):
        Income(date='2024-06-01', amount=amount)


def test_zero_amount_is_allowed() -> None:
    assert Income(date='2024-06-01', amount=0).amount == 0


def test_unknown_category_is_rejected() -> None:
    with pytest.raises(InvalidTransactionError, match='Unknown category'):
        Expense(date='2024-06-01', category='groceries', amount=5)


@pytest.mark.parametrize('value', ['2024-06-12garbage', '2024-06-1x', '12/06/2024', '2024-13-01'])
def test_malformed_date_strings_are_rejected(value) -> None:
    with pytest.raises(InvalidTransactionError):
        Income(date=value, amount=5)


def test_iso_timestamp_with_offset_keeps_its_date() -> None:
    assert Income(date='2024-06-12T23:30:00+02:00', amount=5).date == date(2024, 6, 12)


def test_invalid_date_is_rejected() -> None:
    with pytest.raises(InvalidTransactionError):
        Expense(date='12/06/2024', category='food', amount=5)
    with pytest.raises(InvalidTransactionError):
        Income(date=None, amount=5)


def test_validation_errors_are_value_errors() -> None:
    assert issubclass(InvalidTransactionError, ValueError)
    assert issubclass(InvalidTransactionError, BudgetTrackerError)


def test_each_record_gets_its_own_id() -> None:
    first = Income(date='2024-06-01', amount=5)
    second = Income(date='2024-06-01', amount=5)
    assert first.id and second.id
    assert first.id != second.id


def test_records_are_immutable() -> None:
    expense = Expense(date='2024-06-01', category='food', amount=5)
    with pytest.raises(AttributeError):
        expense.amount = 10


def test_from_dict_keeps_persisted_id() -> None:
    expense = Expense.from_dict(
        {'id': 'abc', 'date': '2024-06-01', 'category': 'travel', 'amount': 120, 'title': 'Bus'}
    )
    assert expense.id == 'abc'
    assert expense.to_dict() == {
        'id': 'abc',
        'date': '2024-06-01',
        'category': 'travel',
        'amount': 120.0,
        'title': 'Bus',
    }


def test_from_dict_rejects_non_objects() -> None:
    with pytest.raises(InvalidTransactionError):
        Income.from_dict(['2024-06-01', 5])


def test_record_type_lookup() -> None:
    assert record_type(EXPENSE) is Expense
    assert record_type(INCOME) is Income
    with pytest.raises(ValueError):
        record_type('transfer')


def test_profile_from_partial_dict_uses_defaults() -> None:
    profile = UserProfile.from_dict({'name': 'Ana', 'unknown': 'ignored'})

    assert profile.name == 'Ana'
    assert profile.age == UserProfile.default().age
    assert profile.to_dict() == {'name': 'Ana', 'age': profile.age, 'email': profile.email}
