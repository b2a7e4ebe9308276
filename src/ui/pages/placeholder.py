from __future__ import annotations

import streamlit as st

from src.ui.components.formatting import title_from_id
from src.ui.pages.context import PageContext


def render(ctx: PageContext) -> None:
    st.header(title_from_id(ctx.shell.active_tab))
    st.info("This section is under development.")
