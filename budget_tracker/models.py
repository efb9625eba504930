"""Transaction records and their validation.

Records are immutable.  Each carries a stable ``id`` generated when the
record is created (or when a persisted record without one is loaded),
so views that sort or filter a collection can still delete the right
entry from the backing store.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar, Dict, Mapping, Union

from .config import DEFAULT_PROFILE, EXPENSE_CATEGORIES
from .exceptions import InvalidTransactionError

EXPENSE = "expense"
INCOME = "income"
TRANSACTION_KINDS = (EXPENSE, INCOME)


def new_record_id() -> str:
    return uuid.uuid4().hex


def parse_date(value: Any) -> date:
    """Coerce ``value`` to a calendar date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings and full
    ISO timestamps, which are truncated to their date part.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise InvalidTransactionError(f"Invalid date: {value!r}") from exc
    raise InvalidTransactionError(f"Invalid date: {value!r}")


def parse_amount(value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidTransactionError(f"Invalid amount: {value!r}")
    try:
        amount = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidTransactionError(f"Invalid amount: {value!r}") from exc
    if not math.isfinite(amount):
        raise InvalidTransactionError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidTransactionError(f"Amount must be non-negative, got {amount}")
    return amount


def normalize_category(value: Any) -> str:
    category = str(value or "").strip().lower()
    if category not in EXPENSE_CATEGORIES:
        raise InvalidTransactionError(
            f"Unknown category {value!r}; expected one of {', '.join(EXPENSE_CATEGORIES)}"
        )
    return category


@dataclass(frozen=True)
class Expense:
    date: date
    category: str
    amount: float
    title: str = ""
    id: str = field(default_factory=new_record_id)

    kind: ClassVar[str] = EXPENSE

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", parse_date(self.date))
        object.__setattr__(self, "category", normalize_category(self.category))
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "title", str(self.title or "").strip())
        object.__setattr__(self, "id", str(self.id or new_record_id()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Expense":
        if not isinstance(data, Mapping):
            raise InvalidTransactionError(f"Expense must be an object, got {type(data).__name__}")
        return cls(
            date=data.get("date"),
            category=data.get("category"),
            amount=data.get("amount"),
            title=data.get("title", ""),
            id=data.get("id") or new_record_id(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "category": self.category,
            "amount": self.amount,
            "title": self.title,
        }


@dataclass(frozen=True)
class Income:
    date: date
    amount: float
    id: str = field(default_factory=new_record_id)

    kind: ClassVar[str] = INCOME

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", parse_date(self.date))
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "id", str(self.id or new_record_id()))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Income":
        if not isinstance(data, Mapping):
            raise InvalidTransactionError(f"Income must be an object, got {type(data).__name__}")
        return cls(
            date=data.get("date"),
            amount=data.get("amount"),
            id=data.get("id") or new_record_id(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "amount": self.amount,
        }


Transaction = Union[Expense, Income]

RECORD_TYPES = {EXPENSE: Expense, INCOME: Income}


def record_type(kind: str):
    """Return the record class for ``kind`` or raise ``ValueError``."""
    try:
        return RECORD_TYPES[kind]
    except KeyError:
        raise ValueError(f"Unknown transaction kind: {kind!r}") from None


@dataclass
class UserProfile:
    name: str
    age: int
    email: str

    @classmethod
    def default(cls) -> "UserProfile":
        return cls(**DEFAULT_PROFILE)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserProfile":
        merged = dict(DEFAULT_PROFILE)
        merged.update({k: v for k, v in data.items() if k in DEFAULT_PROFILE})
        return cls(name=str(merged["name"]), age=int(merged["age"]), email=str(merged["email"]))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
