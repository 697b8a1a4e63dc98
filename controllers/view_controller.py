"""
View controller: owns the list of saved matches and the busy flag.

The record list is always replaced by a full re-fetch from storage; a
successful save never inserts the record locally. The name and deck pools
used by the form dropdowns are derived from the list on every access.

State lives in a `ViewState` passed in by the caller (the home page keeps it
in `st.session_state`), and user-facing messages go through the injected
`notify(kind, message)` callable, where `kind` is "success" or "error".
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional, Sequence

from models.match_model import MatchRecord, deck_pool, name_pool

logger = logging.getLogger("mtglog.view")

Notifier = Callable[[str, str], None]

MSG_SAVED = "Match result saved successfully!"
MSG_SAVE_FAILED = "Failed to save match result - check logs for details"
MSG_LOAD_FAILED = "Failed to load results"


@dataclass
class ViewState:
    records: List[MatchRecord] = field(default_factory=list)
    busy: bool = False


def _to_record(row: Any) -> Optional[MatchRecord]:
    if isinstance(row, MatchRecord):
        return row
    try:
        return MatchRecord.from_payload(row)
    except ValueError as exc:
        logger.warning("Skipping malformed row %r: %s", row, exc)
        return None


def coerce_records(data: Any) -> List[MatchRecord]:
    """Accept a sequence of rows, or an envelope dict with a `data` sequence; anything else is [].

    Rows may be `MatchRecord`s or sheet dicts; rows that cannot be read are skipped.
    """
    if isinstance(data, Mapping):
        data = data.get("data")
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        logger.warning("Data is not in expected format, using an empty list")
        return []
    records = [_to_record(row) for row in data]
    return [r for r in records if r is not None]


class ViewController:
    def __init__(self, client, notify: Notifier, state: Optional[ViewState] = None):
        self.client = client
        self.notify = notify
        self.state = state or ViewState()

    @property
    def records(self) -> List[MatchRecord]:
        return self.state.records

    @property
    def busy(self) -> bool:
        return self.state.busy

    @property
    def name_pool(self) -> List[str]:
        return name_pool(self.state.records)

    @property
    def deck_pool(self) -> List[str]:
        return deck_pool(self.state.records)

    def load(self) -> List[MatchRecord]:
        logger.info("Loading results")
        try:
            data = self.client.fetch_all()
        except Exception as exc:
            logger.exception("Error loading results: %s", exc)
            self.state.records = []
            self.notify("error", MSG_LOAD_FAILED)
            return self.state.records
        self.state.records = coerce_records(data)
        logger.info("Loaded %d results", len(self.state.records))
        return self.state.records

    def submit(self, record: MatchRecord) -> bool:
        """Save `record` and refresh the list on success. Returns the save outcome."""
        self.state.busy = True
        try:
            ok = self.client.append(record)
            if ok:
                self.notify("success", MSG_SAVED)
                self.load()
            else:
                logger.error("Storage rejected match %s", record)
                self.notify("error", MSG_SAVE_FAILED)
            return bool(ok)
        except Exception as exc:
            logger.exception("Error saving result: %s", exc)
            self.notify("error", f"Failed to save: {str(exc) or 'Unknown error'}")
            return False
        finally:
            self.state.busy = False
