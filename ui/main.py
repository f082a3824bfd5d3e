import asyncio
import logging

import streamlit as st

from server.models.learning_path import ModuleStatus
from ui import api
from ui.auth import AuthContext
from ui.config import settings
from ui.notifications import Severity, notify
from ui.path_view import render_path
from ui.persistence import HttpPathStore
from ui.status_sync import StatusSyncController

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Learning Path Creator", layout="wide")

# Initialize session state
if "path" not in st.session_state:
    st.session_state.path = None

auth = AuthContext()


def on_module_status_change(module_id: str, status: ModuleStatus):
    # Replace by id so overlapping changes to different modules all stick
    st.session_state.path = st.session_state.path.replace_module_status(module_id, status)


controller = StatusSyncController(on_module_status_change, HttpPathStore(), notify)


def handle_status_change(module_id: str, status: ModuleStatus):
    asyncio.run(controller.change_status(module_id, status, st.session_state.path))


def open_template(template_id: str):
    try:
        st.session_state.path = api.get_template(template_id)
    except Exception as e:
        logger.error(f"Error loading template {template_id}: {str(e)}")
        st.error(f"Error loading learning path: {str(e)}")


def open_saved_path(path_id: str):
    try:
        st.session_state.path = api.get_path(path_id)
    except Exception as e:
        logger.error(f"Error loading path {path_id}: {str(e)}")
        st.error(f"Error loading learning path: {str(e)}")


def save_current_path():
    try:
        st.session_state.path = api.save_path(auth.user.id, st.session_state.path)
        notify("Path saved", "Your learning path has been saved. Track your progress below.")
    except Exception as e:
        logger.error(f"Error saving path: {str(e)}")
        notify("Error", "Failed to save your learning path. Please try again.", Severity.DESTRUCTIVE)


# Sidebar with account and paths
with st.sidebar:
    st.title("✨ Learning Path Creator")

    if auth.user:
        st.caption(auth.user.email)
        if st.button("Sign out"):
            auth.sign_out()
            st.session_state.path = None
            st.rerun()
    else:
        email = st.text_input("Email")
        if st.button("Sign in") and email.strip():
            auth.sign_in(email)
            st.rerun()

    st.subheader("Start a path")
    try:
        templates = api.list_templates()
        template_options = {template["title"]: template["id"] for template in templates}
        if template_options:
            selected_title = st.selectbox("Select a learning path:", options=list(template_options.keys()))
            if st.button("Open"):
                open_template(template_options[selected_title])
    except Exception as e:
        logger.error(f"Error loading templates: {str(e)}")
        st.error(f"Error loading learning paths: {str(e)}")

    if auth.user:
        st.subheader("My Paths")
        try:
            for summary in api.list_user_paths(auth.user.id):
                label = f"{summary.title} ({summary.completed_count}/{summary.module_count})"
                if st.button(label, key=f"open-{summary.path_id}"):
                    open_saved_path(summary.path_id)
        except Exception as e:
            logger.error(f"Error loading saved paths: {str(e)}")
            st.error(f"Error loading your paths: {str(e)}")

# Main view
path = st.session_state.path
if path is None:
    st.title("Learning Path Creator")
    st.info("Pick a learning path from the sidebar to get started.")
else:
    if not path.is_saved:
        if auth.user:
            st.button("Save path to track progress", on_click=save_current_path)
        else:
            st.info("Sign in and save this path to track your progress.")
    render_path(path, handle_status_change)
