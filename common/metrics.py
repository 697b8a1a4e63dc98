"""
Tabular view of saved match records for the History and Statistics pages.

`records_frame` flattens a list of `MatchRecord` into a DataFrame with
display-friendly column names and the game score split into numeric
`Wins` / `Losses` columns. Scores that were edited by hand in the sheet and
no longer look like "2-1" become NaN rather than failing the page.
"""

#Import libraries
from __future__ import annotations
from typing import Iterable
import numpy as np
import pandas as pd

from models.match_model import MatchRecord

COLUMNS = [
    "Date", "Player", "Opponent", "Format", "PlayerDeck", "OpponentDeck",
    "Games", "Wins", "Losses", "PlayDraw", "Sideboard",
]


def records_frame(records: Iterable[MatchRecord]) -> pd.DataFrame:
    rows = []
    for r in records:
        score = r.score()
        rows.append({
            "Date": r.date,
            "Player": r.player,
            "Opponent": r.opponent,
            "Format": r.format,
            "PlayerDeck": r.player_deck,
            "OpponentDeck": r.opponent_deck,
            "Games": r.games,
            "Wins": score[0] if score else np.nan,
            "Losses": score[1] if score else np.nan,
            "PlayDraw": r.play_draw or "",
            "Sideboard": r.sideboard_status or "",
        })

    df = pd.DataFrame(rows, columns=COLUMNS)
    # Invalid/empty dates become NaT so sorting still works.
    df["Date"] = pd.to_datetime(df["Date"], errors="coerce")
    df["Wins"] = pd.to_numeric(df["Wins"], errors="coerce")
    df["Losses"] = pd.to_numeric(df["Losses"], errors="coerce")
    return df
