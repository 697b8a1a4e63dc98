"""
Validation schema for the match result form.

Every user-facing error message lives on the field definitions below
(`json_schema_extra={"error": ...}`); `field_errors` only translates pydantic's
error list into one message per field.
"""

from __future__ import annotations
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from common.constants import FORMATS

_NUMBER_ERRORS = {"int_parsing", "int_type", "int_from_float", "float_parsing"}


class MatchResultForm(BaseModel):
    player: str = Field(..., min_length=1, title="Player", json_schema_extra={"error": "Player name is required"})
    opponent: str = Field(..., min_length=1, title="Opponent", json_schema_extra={"error": "Opponent name is required"})
    format: str = Field(..., min_length=1, title="Format", json_schema_extra={"error": "Format is required"})
    player_deck: str = Field(..., min_length=1, title="Player deck", json_schema_extra={"error": "Player deck is required"})
    opponent_deck: str = Field(..., min_length=1, title="Opponent deck", json_schema_extra={"error": "Opponent deck is required"})
    wins: int = Field(..., ge=0, title="Wins", json_schema_extra={"error": "Wins must be 0 or greater"})
    losses: int = Field(..., ge=0, title="Losses", json_schema_extra={"error": "Losses must be 0 or greater"})
    play_draw: Optional[str] = Field(None, title="Play/Draw")
    sideboard_status: Optional[str] = Field(None, title="Sideboard")

    @field_validator("format")
    @classmethod
    def known_format(cls, value: str) -> str:
        if value and value not in FORMATS:
            raise ValueError(f"Unknown format '{value}'")
        return value


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Map a ValidationError to {field: message}, keeping the first error per field."""
    fields = MatchResultForm.model_fields
    out: Dict[str, str] = {}
    for err in exc.errors():
        name = str(err["loc"][0]) if err.get("loc") else ""
        if name in out or name not in fields:
            continue
        info = fields[name]
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
        if err["type"] in _NUMBER_ERRORS:
            out[name] = f"{info.title} must be a number"
        elif err["type"] == "value_error":
            out[name] = str(err.get("ctx", {}).get("error", err["msg"]))
        else:
            out[name] = str(extra.get("error", err["msg"]))
    return out
