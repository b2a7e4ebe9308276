from __future__ import annotations

import streamlit as st

from src.config import Role
from src.data import sample
from src.ui.components.cards import render_stat_cards, render_welcome_card
from src.ui.components.charts import render_sales_chart
from src.ui.components.tables import render_active_members, render_top_coaches
from src.ui.pages.context import PageContext


def render(ctx: PageContext) -> None:
    render_welcome_card(ctx.identity.name, ctx.role)

    render_stat_cards(sample.overview_stats(ctx.role))

    if ctx.role is Role.ADMIN:
        left, right = st.columns([3, 2])
        with left:
            render_top_coaches(sample.top_coaches())
        with right:
            render_sales_chart(sample.SALES_TARGET_PERCENTAGE)
        render_active_members(sample.active_members(), title="Active Members")
    else:
        render_active_members(sample.active_members(), title="Most Active Members")
