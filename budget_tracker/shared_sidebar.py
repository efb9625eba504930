"""Shared sidebar components for the multi-page dashboard.

Every page calls :func:`render_shared_sidebar` first.  It renders the
language toggle and loads the transaction store from the session, which
is the equivalent of a page mount: collections are re-read from session
storage on every run.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from .config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, configure_logging
from .i18n import LANGUAGE_NAMES, normalize_language, translator
from .models import UserProfile
from .session_storage import StreamlitSessionStorage
from .store import TransactionStore

log = logging.getLogger(__name__)

LANGUAGE_STATE_KEY = "language"
PROFILE_STATE_KEY = "user_profile"


def render_shared_sidebar() -> Dict[str, Any]:
    """Render shared sidebar elements available on all pages.

    Returns:
        Dict with keys: 'store', 'language', 't'
    """
    configure_logging()
    language = get_language()

    st.sidebar.subheader(f"🌐 {translator(language)('common.language')}")
    options = list(SUPPORTED_LANGUAGES)
    selected = st.sidebar.selectbox(
        translator(language)("common.language"),
        options=options,
        index=options.index(language),
        format_func=lambda code: LANGUAGE_NAMES.get(code, code),
        label_visibility="collapsed",
    )
    if selected != language:
        set_language(selected)
        _rerun()

    store = get_store()
    t = translator(language)
    st.sidebar.caption(f"{len(store)} {t('home.transactions')}")

    return {
        'store': store,
        'language': language,
        't': t,
    }


def get_language(state: Optional[MutableMapping[str, Any]] = None) -> str:
    state = st.session_state if state is None else state
    return normalize_language(state.get(LANGUAGE_STATE_KEY, DEFAULT_LANGUAGE))


def set_language(language: str, state: Optional[MutableMapping[str, Any]] = None) -> str:
    state = st.session_state if state is None else state
    code = normalize_language(language)
    state[LANGUAGE_STATE_KEY] = code
    return code


def get_store(state: Optional[MutableMapping[str, Any]] = None) -> TransactionStore:
    """Build a store over the session and load both collections."""
    return TransactionStore(StreamlitSessionStorage(state)).load()


def get_profile(state: Optional[MutableMapping[str, Any]] = None) -> UserProfile:
    state = st.session_state if state is None else state
    raw = state.get(PROFILE_STATE_KEY)
    if isinstance(raw, dict):
        try:
            return UserProfile.from_dict(raw)
        except (TypeError, ValueError) as exc:
            log.warning("Ignoring invalid profile in session state: %s", exc)
    return UserProfile.default()


def save_profile(profile: UserProfile, state: Optional[MutableMapping[str, Any]] = None) -> None:
    state = st.session_state if state is None else state
    state[PROFILE_STATE_KEY] = profile.to_dict()


def _rerun() -> None:
    if hasattr(st, 'rerun'):
        st.rerun()
    else:  # pragma: no cover - older Streamlit
        st.experimental_rerun()
