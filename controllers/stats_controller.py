
import numpy as np
import pandas as pd

SUMMARY_COLUMNS = ["Matches", "GameWins", "GameLosses", "WinRate"]


def filter_records(df: pd.DataFrame, player: str | None = None, fmt: str | None = None) -> pd.DataFrame:
    """Keep matches where `player` sat on either side, and/or of format `fmt`."""
    out = df
    if player:
        out = out[(out["Player"] == player) | (out["Opponent"] == player)]
    if fmt:
        out = out[out["Format"] == fmt]
    return out


def _summary(df: pd.DataFrame, key: str) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=[key] + SUMMARY_COLUMNS)

    # Rows without a parseable score still count as matches but add no games.
    summary = (
        df.groupby(key, dropna=False)
        .agg(Matches=("Games", "size"), GameWins=("Wins", "sum"), GameLosses=("Losses", "sum"))
        .reset_index()
    )
    summary[["GameWins", "GameLosses"]] = summary[["GameWins", "GameLosses"]].fillna(0).astype(int)
    played = summary["GameWins"] + summary["GameLosses"]
    summary["WinRate"] = np.where(played > 0, (100.0 * summary["GameWins"] / played.where(played > 0, 1)).round(1), np.nan)
    return summary.sort_values(["Matches", key], ascending=[False, True], kind="mergesort").reset_index(drop=True)


def deck_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Per player deck: matches, game wins, game losses and game win rate (%)."""
    return _summary(df, "PlayerDeck")


def player_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Per player (the player side of each record)."""
    return _summary(df, "Player")
