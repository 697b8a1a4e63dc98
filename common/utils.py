"""
Streamlit glue shared by the pages.

This module wires the controllers to Streamlit:
    - `get_client()` builds the Apps Script storage client once per server
        process (`st.cache_resource`), so the underlying `requests.Session` is
        reused across reruns. Results are never cached; every load is a fresh
        read from the sheet.
    - `get_view_controller()` / `get_form_controller()` keep controller state
        in `st.session_state` so it survives reruns of the script.
    - `queue_toast()` / `flush_toasts()` hold notifications raised inside
        widget callbacks until the page renders, where they are shown with
        `st.toast`.
    - `selectbox_with_placeholder` renders a selectbox that can start empty.
"""

# Import libraries
from __future__ import annotations
from typing import List, Optional
import streamlit as st

from common.config import get_script_url, get_timeout
from common.storage import AppsScriptClient
from controllers.form_controller import FormController, FormState
from controllers.view_controller import ViewController, ViewState

TOAST_ICONS = {"success": "✅", "error": "❌"}

@st.cache_resource(show_spinner=False)
def get_client() -> AppsScriptClient:
    return AppsScriptClient(get_script_url(), timeout=get_timeout())

def queue_toast(kind: str, message: str) -> None:
    st.session_state.setdefault("pending_toasts", []).append((kind, message))

def flush_toasts() -> None:
    for kind, message in st.session_state.pop("pending_toasts", []):
        st.toast(message, icon=TOAST_ICONS.get(kind))

def get_view_controller() -> ViewController:
    """Return the session's ViewController, loading the records on first use."""
    first_run = "view_state" not in st.session_state
    if first_run:
        st.session_state["view_state"] = ViewState()
    view = ViewController(get_client(), notify=queue_toast, state=st.session_state["view_state"])
    if first_run:
        with st.spinner("Loading saved matches..."):
            view.load()
    return view

def get_form_controller() -> FormController:
    if "form_state" not in st.session_state:
        st.session_state["form_state"] = FormState()
    return FormController(state=st.session_state["form_state"])

def selectbox_with_placeholder(
    label: str,
    options: List[str],
    key: Optional[str] = None,
):
    """A selectbox that starts empty (placeholder) and returns None until something is picked."""
    return st.selectbox(
        label,
        options=options,
        index=None,
        placeholder=f"All {label.lower()}s",
        key=key,
    )
