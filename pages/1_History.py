import streamlit as st

from common.config import setup_logging
from common.constants import FORMATS
from common.metrics import records_frame
from common.ui import sidebar_header
from common.utils import flush_toasts, get_view_controller, selectbox_with_placeholder
from controllers.stats_controller import filter_records

st.set_page_config(page_title="History", layout="wide")
setup_logging()


def main():
    view = get_view_controller()
    sidebar_header(view)
    flush_toasts()

    st.header("Saved matches")
    df = records_frame(view.records)
    if df.empty:
        st.info("No saved matches yet. Record one on the **Record a match** page.")
        st.stop()

    c1, c2 = st.columns(2)
    with c1:
        player = selectbox_with_placeholder("Player", view.name_pool, key="history_player")
    with c2:
        fmt = selectbox_with_placeholder("Format", FORMATS, key="history_format")

    shown = filter_records(df, player, fmt).sort_values("Date", ascending=False, na_position="last")
    st.caption(f"{len(shown)} of {len(df)} matches")
    st.dataframe(
        shown.drop(columns=["Wins", "Losses"]),
        use_container_width=True,
        hide_index=True,
        column_config={"Date": st.column_config.DateColumn("Date", format="YYYY-MM-DD")},
    )

if __name__ == "__main__":
    main()
