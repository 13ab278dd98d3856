import streamlit as st

from app_state import AppState
from constants import FOLDER_STRUCTURE
from setup_script import generate_baseline_script

INDENT = "\u2003\u2003"  # em spaces survive markdown whitespace folding


def _row_label(row) -> str:
    chevron = "▾" if row.expanded else "▸"
    name = f"**{row.node.name}**" if row.node.is_top_level else row.node.name
    return f"{INDENT * row.depth}{chevron} 📁 {name}"


def render_tree(state: AppState) -> None:
    """
    One row per visible folder. Rows with children are buttons that flip their
    own expanded flag; leaves are plain text with no chevron.
    """
    for row in state.tree.visible_rows(FOLDER_STRUCTURE):
        key = "tree_" + "_".join(map(str, row.path))
        if row.has_children:
            st.button(
                _row_label(row),
                key=key,
                on_click=state.toggle_folder,
                args=(row.path,),
                type="tertiary",
            )
        else:
            icon = "📁" if row.node.is_top_level else "📂"
            name = f"**{row.node.name}**" if row.node.is_top_level else row.node.name
            st.markdown(f"{INDENT * row.depth}{INDENT} {icon} {name}")
        if row.depth == 0 and row.node.description:
            st.caption(f"{INDENT}{row.node.description}")


def render_structure(state: AppState) -> None:
    st.title("Top-Level Folder Structure")
    st.markdown("Recreate this tree inside your **Documents** folder.")

    with st.container(border=True):
        render_tree(state)

    script = generate_baseline_script()
    st.subheader("🛠️ Copy Setup Script")
    st.code(script, language="powershell")
    col1, col2 = st.columns(2)
    if col1.download_button(
        "Download Setup Script",
        script,
        file_name="CreateFolders.ps1",
        key="dl_setup_script",
    ):
        st.toast("PowerShell script saved. Run it in a PowerShell window to create your folders.")
    col2.download_button(
        "Download Tree as Text",
        state.tree.render_text(FOLDER_STRUCTURE),
        file_name="folder_structure.txt",
        key="dl_tree_text",
    )

    st.info(
        "**How to use the script:**\n\n"
        "1. Copy the **Setup Script** above (copy icon on the code block).\n"
        "2. Open **PowerShell** (search Start for it).\n"
        "3. Right-click in the PowerShell window to paste and hit Enter."
    )
