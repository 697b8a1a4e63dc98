"""
Form controller for the match result form.

The controller owns everything about the form that is not rendering:
    - the current field values and per-field error messages,
    - the four "manual entry" toggles that switch a name/deck field from a
        dropdown of known values to a free-text input,
    - the `submitting` flag used to disable the submit button,
    - validation (through `models.form_schema`) and normalization of the
        validated values into a `MatchRecord`.

`FormState` is a plain dataclass so the page can keep it in
`st.session_state` between Streamlit reruns.

Note: `submit` resets the form after the handler returns even when the save
failed, so a failed save discards what the user typed.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from common.constants import MANUAL_FIELDS
from models.form_schema import MatchResultForm, field_errors
from models.match_model import MatchRecord

logger = logging.getLogger("mtglog.form")

SubmitHandler = Callable[[MatchRecord], Any]


def default_values() -> Dict[str, Any]:
    return {
        "player": "",
        "opponent": "",
        "format": "",
        "player_deck": "",
        "opponent_deck": "",
        "wins": 0,
        "losses": 0,
        "play_draw": "",
        "sideboard_status": "",
    }


@dataclass(frozen=True)
class FormValid:
    form: MatchResultForm

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FormInvalid:
    errors: Dict[str, str]

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[FormValid, FormInvalid]


def validate(values: Mapping[str, Any]) -> ValidationResult:
    try:
        return FormValid(MatchResultForm.model_validate(dict(values)))
    except ValidationError as exc:
        return FormInvalid(field_errors(exc))


def normalize_optional(value: Optional[str]) -> Optional[str]:
    """Blank or whitespace-only input means the field is absent."""
    if value is None or not str(value).strip():
        return None
    return value


def build_record(form: MatchResultForm, today: Optional[date] = None) -> MatchRecord:
    today = today or date.today()
    return MatchRecord(
        player=form.player,
        opponent=form.opponent,
        format=form.format,
        player_deck=form.player_deck,
        opponent_deck=form.opponent_deck,
        games=f"{form.wins}-{form.losses}",
        play_draw=normalize_optional(form.play_draw),
        sideboard_status=normalize_optional(form.sideboard_status),
        date=today.isoformat(),
    )


@dataclass
class FormState:
    values: Dict[str, Any] = field(default_factory=default_values)
    errors: Dict[str, str] = field(default_factory=dict)
    manual: Dict[str, bool] = field(default_factory=lambda: {f: False for f in MANUAL_FIELDS})
    submitting: bool = False


class FormController:
    def __init__(self, state: Optional[FormState] = None, today: Optional[Callable[[], date]] = None):
        self.state = state or FormState()
        self._today = today or date.today

    # ----- field state -----
    def set_value(self, name: str, value: Any) -> None:
        if name not in self.state.values:
            raise KeyError(name)
        self.state.values[name] = value

    def set_manual(self, name: str, manual: bool) -> None:
        if name not in self.state.manual:
            raise KeyError(name)
        self.state.manual[name] = manual

    def use_dropdown(self, name: str, pool: Sequence[str]) -> bool:
        """Dropdown mode needs known values; free text is the only mode without them."""
        return bool(pool) and not self.state.manual.get(name, False)

    def error_for(self, name: str) -> Optional[str]:
        return self.state.errors.get(name)

    def reset(self) -> None:
        self.state.values = default_values()
        self.state.errors = {}
        self.state.manual = {f: False for f in MANUAL_FIELDS}

    # ----- submission -----
    def submit(self, handler: SubmitHandler) -> Optional[MatchRecord]:
        """Validate, build the record and hand it to `handler`.

        Returns the record passed to the handler, or None when nothing was
        submitted (validation failed or a submission is already running).
        """
        if self.state.submitting:
            logger.debug("Ignoring submit while a submission is in progress")
            return None

        result = validate(self.state.values)
        if not result.ok:
            self.state.errors = result.errors
            logger.debug("Form has errors: %s", result.errors)
            return None

        self.state.errors = {}
        record = build_record(result.form, today=self._today())
        logger.debug("Form data before submission: %s", record)
        self.state.submitting = True
        try:
            handler(record)
        finally:
            self.state.submitting = False
            self.reset()
        return record
