"""
Main application entry for the MTG match log Streamlit app.

This module renders the home page, where a match result is recorded. It
handles:
    - application configuration (`st.set_page_config`) and logging setup
        (which loads `.env` via `python-dotenv`),
    - loading the saved matches once per session (delegated to
        `controllers.view_controller` through `common.utils`),
    - rendering the form: name and deck fields are dropdowns of known values
        with a "+ Add New" switch to free text; format, score, play/draw and
        sideboard stage follow,
    - handing the submit to `controllers.form_controller`, which validates the
        input and passes the record to the view controller for saving.

Widget values live under `f_<field>` keys in `st.session_state`. Submission
runs in a button callback, before the widgets of the next run exist, so the
callback may write the reset values back into those keys.
"""

# Import libraries
import streamlit as st
from typing import List

from common.config import setup_logging
from common.constants import FORMATS, MANUAL_FIELDS, PLAY_DRAW, SIDEBOARD_STAGES
from common.ui import sidebar_header
from common.utils import flush_toasts, get_form_controller, get_view_controller
from controllers.form_controller import FormController, default_values
from controllers.view_controller import ViewController

# Configure Streamlit page; `setup_logging` also loads `.env`.
st.set_page_config(page_title="MTG Pro Testing", page_icon="🃏", layout="centered")
setup_logging()

LABELS = {
    "player": ("Your Name", "player", "+ Add New Name", "Your name"),
    "opponent": ("Opponent", "opponent", "+ Add New Name", "Opponent name"),
    "player_deck": ("Your Deck", "deck", "+ Add New Deck", "Deck name"),
    "opponent_deck": ("Opp Deck", "deck", "+ Add New Deck", "Opponent deck"),
}


def _key(name: str, suffix: str = "") -> str:
    return f"f_{name}{suffix}"


def _pool_for(view: ViewController, name: str) -> List[str]:
    return view.name_pool if name in ("player", "opponent") else view.deck_pool


def _widget_value(form: FormController, view: ViewController, name: str):
    if name in MANUAL_FIELDS:
        suffix = "_select" if form.use_dropdown(name, _pool_for(view, name)) else "_text"
        return st.session_state.get(_key(name, suffix), "")
    return st.session_state.get(_key(name), default_values()[name])


def _write_widgets(form: FormController) -> None:
    """Copy the controller's field values into the widget keys."""
    for name, value in form.state.values.items():
        if name in MANUAL_FIELDS:
            st.session_state[_key(name, "_select")] = value
            st.session_state[_key(name, "_text")] = value
        else:
            st.session_state[_key(name)] = value


def _on_submit(form: FormController, view: ViewController) -> None:
    for name in form.state.values:
        form.set_value(name, _widget_value(form, view, name))
    record = form.submit(view.submit)
    if record is not None:
        # Reset happened inside submit(); push the cleared values to the widgets.
        _write_widgets(form)


def _field_error(form: FormController, name: str) -> None:
    msg = form.error_for(name)
    if msg:
        st.markdown(f":red[{msg}]")


def _name_or_deck_field(form: FormController, view: ViewController, name: str) -> None:
    label, noun, add_label, placeholder = LABELS[name]
    pool = _pool_for(view, name)
    if form.use_dropdown(name, pool):
        st.selectbox(
            label,
            options=[""] + pool,
            format_func=lambda v: v or f"Select {noun}...",
            key=_key(name, "_select"),
        )
        st.button(add_label, key=f"{name}_manual_on", on_click=form.set_manual, args=(name, True),
                  use_container_width=True)
    else:
        st.text_input(label, key=_key(name, "_text"), placeholder=placeholder)
        if pool:
            st.button("Use Dropdown", key=f"{name}_manual_off", on_click=form.set_manual, args=(name, False),
                      use_container_width=True)
    _field_error(form, name)


def _ensure_widget_keys(form: FormController) -> None:
    if not st.session_state.get("form_widgets_ready"):
        _write_widgets(form)
        st.session_state["form_widgets_ready"] = True


def main():
    view = get_view_controller()
    form = get_form_controller()
    sidebar_header(view)
    _ensure_widget_keys(form)
    flush_toasts()

    st.title("🃏 MTG Pro Testing")
    st.caption("Record a match result. It is saved to the shared Google Sheet.")

    # Row 1: names
    c1, c2 = st.columns(2)
    with c1:
        _name_or_deck_field(form, view, "player")
    with c2:
        _name_or_deck_field(form, view, "opponent")

    # Row 2: format
    st.selectbox(
        "Format",
        options=[""] + FORMATS,
        format_func=lambda v: v or "Select format...",
        key=_key("format"),
    )
    _field_error(form, "format")

    # Row 3: decks
    c1, c2 = st.columns(2)
    with c1:
        _name_or_deck_field(form, view, "player_deck")
    with c2:
        _name_or_deck_field(form, view, "opponent_deck")

    # Row 4: games and optional details
    st.markdown("**Games**")
    c1, c2 = st.columns(2)
    with c1:
        st.number_input("Wins", min_value=0, step=1, key=_key("wins"))
    with c2:
        st.number_input("Losses", min_value=0, step=1, key=_key("losses"))
    msg = form.error_for("wins") or form.error_for("losses")
    if msg:
        st.markdown(f":red[{msg}]")

    c1, c2 = st.columns(2)
    with c1:
        st.selectbox(
            "Play/Draw",
            options=[""] + list(PLAY_DRAW),
            format_func=lambda v: PLAY_DRAW.get(v, "Select..."),
            key=_key("play_draw"),
        )
    with c2:
        st.selectbox(
            "Sideboard",
            options=[""] + SIDEBOARD_STAGES,
            format_func=lambda v: v or "Select...",
            key=_key("sideboard_status"),
        )

    # Row 5: submit
    busy = view.busy or form.state.submitting
    st.button(
        "Saving..." if busy else "Save Match to Google Sheets",
        type="primary",
        disabled=busy,
        use_container_width=True,
        on_click=_on_submit,
        args=(form, view),
        key="submit_btn",
    )

if __name__ == "__main__":
    main()
