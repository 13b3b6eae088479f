# This file wraps table rendering so empty states and sizing are consistent across pages.

from __future__ import annotations

import pandas as pd
import streamlit as st


def render_table(
    dataframe: pd.DataFrame,
    *,
    title: str,
    empty_message: str,
    help_text: str | None = None,
    height: int | None = None,
) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info(empty_message)
        return
    if height is None:
        st.dataframe(dataframe, use_container_width=True, hide_index=True)
    else:
        st.dataframe(dataframe, use_container_width=True, hide_index=True, height=height)
