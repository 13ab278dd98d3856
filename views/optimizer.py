import streamlit as st
import pandas as pd

from app_state import AppState
from constants import FILE_LIST_COMMAND, FILE_LIST_PLACEHOLDER
from models import AnalysisResult
from views.charts import render_category_rows

FILE_LIST_KEY = "file_list_input"


def _start_over(state: AppState) -> None:
    state.reset_analysis()
    st.session_state[FILE_LIST_KEY] = ""


def render_input_form(state: AppState) -> None:
    st.session_state.setdefault(FILE_LIST_KEY, state.file_list)
    with st.container(border=True):
        st.subheader("① Get your file list")
        st.markdown("Open Command Prompt (CMD) in Windows, go to your messy folder, and run:")
        st.code(FILE_LIST_COMMAND, language=None)

        st.subheader("② Paste the contents of files.txt below")
        text = st.text_area(
            "File list",
            key=FILE_LIST_KEY,
            height=200,
            placeholder=FILE_LIST_PLACEHOLDER,
            label_visibility="collapsed",
        )
        state.set_file_list(text)

        if st.button(
            "✨ Generate Custom Plan",
            key="run_analysis",
            disabled=not state.can_submit,
            type="primary",
            width="stretch",
        ):
            with st.spinner("Analyzing your digital mess…"):
                state.submit_analysis()
            st.rerun()


def render_result(state: AppState, result: AnalysisResult) -> None:
    left, right = st.columns([2, 1])
    with left.container(border=True):
        st.subheader("🔄 Detected Categories")
        render_category_rows(result)
    with right.container(border=True):
        st.subheader("ℹ️ Pain Points")
        for problem in result.problems:
            st.markdown(f"- {problem}")

    with st.container(border=True):
        st.subheader("Proposed Custom Structure")
        st.code(result.proposed_structure, language=None)

    if result.naming_examples:
        with st.container(border=True):
            st.subheader("Suggested Renames")
            st.table(pd.DataFrame(
                [{'Current name': n.old, 'Suggested name': n.new} for n in result.naming_examples]
            ))

    with st.container(border=True):
        st.subheader("💻 Custom PowerShell Deployment Script")
        st.caption("Use **PowerShell** (not CMD) to run this. It provides feedback while moving files.")
        st.code(result.powershell_script, language="powershell")
        if st.download_button(
            "Download Script",
            result.powershell_script,
            file_name="OrganizeFiles.ps1",
            key="dl_ai_script",
        ):
            st.toast("Script saved!")

    st.button("← Start Over with new file list", key="start_over", on_click=_start_over, args=(state,))


def render_optimizer(state: AppState) -> None:
    st.title("🧠 AI File Optimizer")
    st.markdown("_Paste your messy file list and let the AI design your custom system._")

    if state.phase == "result":
        render_result(state, state.result)
        return

    if state.phase == "error":
        st.error(f"Analysis failed: {state.error.message}")
    render_input_form(state)
