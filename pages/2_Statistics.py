import streamlit as st
import matplotlib.pyplot as plt

from common.config import setup_logging
from common.constants import FORMATS
from common.metrics import records_frame
from common.plots import plot_deck_winrate, TOP_N_DECKS
from common.ui import sidebar_header
from common.utils import flush_toasts, get_view_controller, selectbox_with_placeholder
from controllers.stats_controller import deck_summary, filter_records, player_summary

# ------------------------------------------------------------
# Page setup & consistent sidebar
# ------------------------------------------------------------
SMALL_FIGSIZE = (5.2, 2.8)

st.set_page_config(page_title="Statistics", layout="wide")
setup_logging()


def main():
    view = get_view_controller()
    sidebar_header(view)
    flush_toasts()

    st.header("Statistics")
    st.caption("Game record from the player's side of each saved match.")

    df = records_frame(view.records)
    if df.empty:
        st.info("No saved matches yet.")
        st.stop()

    c1, c2 = st.columns(2)
    with c1:
        player = selectbox_with_placeholder("Player", view.name_pool, key="stats_player")
    with c2:
        fmt = selectbox_with_placeholder("Format", FORMATS, key="stats_format")

    # Statistics count the player's own side, so filter on the Player column only.
    df = filter_records(df, fmt=fmt)
    if player:
        df = df[df["Player"] == player]
    if df.empty:
        st.info("No matches for this selection.")
        st.stop()

    # ------------------------------------------------------------
    # TABLE + BAR: decks
    # ------------------------------------------------------------
    decks = deck_summary(df)
    st.subheader("By deck")
    st.dataframe(decks, use_container_width=True, hide_index=True,
                 column_config={"WinRate": st.column_config.NumberColumn("Win rate", format="%.1f%%")})

    st.subheader(f"Game win rate, top {TOP_N_DECKS} decks")
    fig, ax = plt.subplots(figsize=SMALL_FIGSIZE)
    plot_deck_winrate(decks, ax=ax)
    st.pyplot(fig, use_container_width=False)
    plt.close(fig)

    # ------------------------------------------------------------
    # TABLE: players
    # ------------------------------------------------------------
    if not player:
        st.subheader("By player")
        st.dataframe(player_summary(df), use_container_width=True, hide_index=True,
                     column_config={"WinRate": st.column_config.NumberColumn("Win rate", format="%.1f%%")})


if __name__ == "__main__":
    main()
