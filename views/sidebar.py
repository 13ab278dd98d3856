import streamlit as st

from app_state import AppState
from constants import QUOTE, TABS, TAB_KEYS


def render_sidebar(state: AppState) -> None:
    """
    Renders the brand header, the view switcher and the footer quote.
    The radio only reports a choice; the state object owns which tab is active.
    """
    st.sidebar.markdown("## ✨ Productivity")
    st.sidebar.caption("WINDOWS 10 OS")

    labels = {t.key: f"{t.icon} {t.label}" for t in TABS}
    st.session_state.setdefault("nav_tab", state.active_tab)
    choice = st.sidebar.radio(
        "Navigate",
        options=list(TAB_KEYS),
        key="nav_tab",
        format_func=labels.get,
        label_visibility="collapsed",
    )
    if choice != state.active_tab:
        state.select_tab(choice)

    st.sidebar.divider()
    st.sidebar.caption(f"_\"{QUOTE}\"_")
