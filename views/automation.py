import streamlit as st

from constants import CLEAN_DOWNLOADS_SCRIPT


def render_automation() -> None:
    st.title("Beginner-Friendly Automation")
    st.markdown("Let the computer do the boring work for you using PowerShell.")

    with st.container(border=True):
        st.subheader("💻 Script: Auto-Delete Old Downloads")
        st.markdown(
            "This simple one-line script deletes files in your Downloads folder that are older than 30 days. "
            "Keep it in a text file named `CleanDownloads.ps1`."
        )
        st.code(CLEAN_DOWNLOADS_SCRIPT, language="powershell")
        st.download_button(
            "Download CleanDownloads.ps1",
            CLEAN_DOWNLOADS_SCRIPT,
            file_name="CleanDownloads.ps1",
            key="dl_clean_downloads",
        )

    st.subheader("How to use:")
    col1, col2 = st.columns(2)
    with col1.container(border=True):
        st.markdown("**Step 1: Test**")
        st.caption("Open 'PowerShell' from Start menu, paste the code, and hit Enter to clean immediately.")
    with col2.container(border=True):
        st.markdown("**Step 2: Automate**")
        st.caption("Open 'Task Scheduler', create a new task to run this script every Sunday morning.")
