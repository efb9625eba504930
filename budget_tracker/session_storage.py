"""Session-scoped key/value storage backends.

The store persists each collection as a JSON string under its own key.
Backends only move strings; serialization lives in :mod:`store`.
"""

from __future__ import annotations

from typing import Any, Dict, MutableMapping, Optional

from .exceptions import StorageUnavailableError

SESSION_PREFIX = "_budget_tracker_storage:"


class SessionStorage:
    """Minimal storage interface: string keys to string values."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(SessionStorage):
    """Plain dictionary storage, used for tests and headless runs."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class StreamlitSessionStorage(SessionStorage):
    """Storage backed by ``st.session_state`` for the current browser session.

    Args:
        state: Mapping to use instead of ``st.session_state``.  Streamlit
            is imported lazily so the core can run without it.
    """

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None):
        self._state = state

    @property
    def state(self) -> MutableMapping[str, Any]:
        if self._state is None:
            try:
                import streamlit as st
            except ModuleNotFoundError as exc:
                raise StorageUnavailableError("streamlit is not installed") from exc
            self._state = st.session_state
        return self._state

    def get_item(self, key: str) -> Optional[str]:
        try:
            value = self.state.get(SESSION_PREFIX + key)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError(f"Cannot read {key!r} from session state") from exc
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            self.state[SESSION_PREFIX + key] = value
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError(f"Cannot write {key!r} to session state") from exc

    def remove_item(self, key: str) -> None:
        try:
            self.state.pop(SESSION_PREFIX + key, None)
        except StorageUnavailableError:
            raise
        except Exception as exc:
            raise StorageUnavailableError(f"Cannot remove {key!r} from session state") from exc
