"""
Reusable helpers for rendering member tables and the coach leaderboard.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from src.data.filters import filter_by_name

AVATAR_COLORS = ["#1A1363", "#6F00D0", "#E7B900"]
STATUS_LABELS: Dict[str, str] = {
    "active": "🟢 Active",
    "expired": "🔴 Expired",
    "no-contract": "⚪ No contract",
}


def status_label(status: Optional[str]) -> str:
    return STATUS_LABELS.get(status or "", "–")


def render_table(
    df: pd.DataFrame,
    column_labels: Optional[Dict[str, str]] = None,
    height: Optional[int] = None,
    empty_message: str = "No records to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    formatted_df = df.copy()
    if "status" in formatted_df.columns:
        formatted_df["status"] = formatted_df["status"].map(status_label)
    if column_labels:
        keep: List[str] = [col for col in column_labels if col in formatted_df.columns]
        formatted_df = formatted_df[keep].rename(columns=column_labels)

    kwargs = {"height": height} if height else {}
    st.dataframe(
        formatted_df,
        width="stretch",
        hide_index=True,
        **kwargs,
    )


def render_active_members(members: pd.DataFrame, title: str = "Active Members", key: str = "active_members") -> None:
    with st.container(border=True):
        st.markdown(f"#### {title}")
        query = st.text_input(
            "Search",
            key=f"{key}_search",
            placeholder="Search",
            label_visibility="collapsed",
            icon=":material/search:",
        )
        render_table(
            filter_by_name(members, query),
            column_labels={
                "name": "Member",
                "date_paid": "Date paid",
                "date_expiry": "Date Expiry",
                "status": "Status",
            },
        )


def render_top_coaches(coaches: pd.DataFrame) -> None:
    with st.container(border=True):
        st.markdown("#### Top Coaches")
        if coaches.empty:
            st.info("No coaches to rank yet.")
            return
        for index, coach in enumerate(coaches.itertuples(index=False)):
            color = AVATAR_COLORS[index % len(AVATAR_COLORS)]
            st.markdown(
                f"<span style='background:{color};color:#fff;border-radius:50%;"
                f"padding:4px 10px;margin-right:8px'>{coach.name[:1]}</span>"
                f"**{coach.name}** · {coach.client_count} clients · ⭐ {coach.rating}",
                unsafe_allow_html=True,
            )
