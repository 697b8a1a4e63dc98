import math

import pandas as pd

from common.metrics import COLUMNS, records_frame
from controllers.stats_controller import deck_summary, filter_records, player_summary
from tests.factories import make_record

RECORDS = [
    make_record(player="Ann", opponent="Bo", player_deck="Burn", games="2-1", date="2024-05-01"),
    make_record(player="Ann", opponent="Cy", player_deck="Burn", games="0-2", date="2024-05-03"),
    make_record(player="Bo", opponent="Ann", player_deck="Tron", games="2-0", format="Pioneer",
                date="2024-05-02"),
    make_record(player="Cy", opponent="Bo", player_deck="Tron", games="ID", date="not a date"),
]


def test_records_frame_columns_and_scores():
    df = records_frame(RECORDS)
    assert list(df.columns) == COLUMNS
    assert df.loc[0, "Wins"] == 2 and df.loc[0, "Losses"] == 1
    assert math.isnan(df.loc[3, "Wins"])
    assert pd.isna(df.loc[3, "Date"])
    assert df.loc[0, "Date"] == pd.Timestamp("2024-05-01")


def test_records_frame_empty():
    df = records_frame([])
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_filter_records_matches_either_side():
    df = records_frame(RECORDS)
    assert len(filter_records(df, player="Ann")) == 3
    assert len(filter_records(df, player="Ann", fmt="Pioneer")) == 1
    assert len(filter_records(df)) == 4


def test_deck_summary():
    summary = deck_summary(records_frame(RECORDS)).set_index("PlayerDeck")
    assert summary.loc["Burn", "Matches"] == 2
    assert summary.loc["Burn", "GameWins"] == 2
    assert summary.loc["Burn", "GameLosses"] == 3
    assert summary.loc["Burn", "WinRate"] == 40.0
    # The unscored "ID" row counts as a match but adds no games.
    assert summary.loc["Tron", "Matches"] == 2
    assert summary.loc["Tron", "WinRate"] == 100.0


def test_player_summary_without_games_has_no_rate():
    df = records_frame([make_record(player="Dee", games="")])
    summary = player_summary(df)
    assert summary.loc[0, "Player"] == "Dee"
    assert summary.loc[0, "Matches"] == 1
    assert math.isnan(summary.loc[0, "WinRate"])


def test_summary_of_empty_frame():
    assert deck_summary(records_frame([])).empty
