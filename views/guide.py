import streamlit as st

from constants import SETUP_STEPS, STEP_BADGES


def render_guide() -> None:
    st.title("Step-by-Step Setup")
    st.markdown("Follow these instructions exactly to overhaul your PC in 15 minutes.")

    for step in SETUP_STEPS:
        with st.container(border=True):
            badge, body = st.columns([1, 11])
            badge.markdown(f"## {STEP_BADGES.get(step.category, '')}")
            with body:
                st.subheader(f"{step.title}  `{step.category.value.upper()}`")
                st.caption(step.description)
                for detail in step.details:
                    st.markdown(f"✅ {detail}")
