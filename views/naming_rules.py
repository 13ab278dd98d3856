from datetime import date

import streamlit as st

from app_state import AppState
from constants import NAMING_SCENARIOS
from naming import build_example_filename


def render_naming(state: AppState) -> None:
    st.title("Naming Convention")
    st.markdown("Standardized naming makes searching instant. No more 'Final_Final_2.doc'.")

    # seed widgets from state once; afterwards the widgets drive the state
    st.session_state.setdefault("naming_date", date.fromisoformat(state.naming.date))
    st.session_state.setdefault("naming_subject", state.naming.subject)
    st.session_state.setdefault("naming_topic", state.naming.topic)

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            st.subheader("Rule: ISO Date + Subject + Topic")
            picked = st.date_input("Date", key="naming_date")
            subject = st.text_input("Subject", key="naming_subject", placeholder="e.g. Physics")
            topic = st.text_input("Topic", key="naming_topic", placeholder="e.g. Thermodynamics")
            state.edit_naming(date=picked.isoformat(), subject=subject, topic=topic)

    example = build_example_filename(state.naming)
    with right:
        with st.container(border=True):
            st.caption("RESULTING FILENAME")
            st.code(example, language=None)
            st.caption("Use the copy icon on the filename to copy it.")

    st.subheader("Example Scenarios")
    cols = st.columns(len(NAMING_SCENARIOS))
    for col, ex in zip(cols, NAMING_SCENARIOS):
        with col.container(border=True):
            st.caption(ex['title'].upper())
            st.markdown(f"`{ex['name']}`")
