import os
import logging

import streamlit as st
from dotenv import load_dotenv

from app_state import AppState
from views.sidebar import render_sidebar
from views.structure import render_structure
from views.naming_rules import render_naming
from views.guide import render_guide
from views.optimizer import render_optimizer
from views.automation import render_automation

load_dotenv()
logging.basicConfig(
    level=os.getenv("DESKPLAN_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# --- Page Configuration ---
st.set_page_config(
    page_title="Study Desk Organizer",
    page_icon="🗂️",
    layout='wide'
)

# --- Session State ---
if 'app' not in st.session_state:
    st.session_state.app = AppState()
state: AppState = st.session_state.app

# --- Sidebar Navigation ---
render_sidebar(state)

# --- Active View ---
VIEWS = {
    "structure":  lambda: render_structure(state),
    "naming":     lambda: render_naming(state),
    "guide":      render_guide,
    "ai":         lambda: render_optimizer(state),
    "automation": render_automation,
}
VIEWS[state.active_tab]()
