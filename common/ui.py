# common/ui.py
from __future__ import annotations
import streamlit as st

def sidebar_header(view=None):
    """Sidebar with custom page links and a manual refresh of the saved matches."""
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("#### Pages")
        st.page_link("main.py", label="Record a match", icon="📝")
        st.page_link("pages/1_History.py", label="History", icon="📜")
        st.page_link("pages/2_Statistics.py", label="Statistics", icon="📊")

        if view is not None:
            st.divider()
            st.caption(f"{len(view.records)} saved matches")
            if st.button("Refresh", key="refresh_btn", disabled=view.busy):
                with st.spinner("Loading saved matches..."):
                    view.load()
