from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union

import streamlit as st

from src.config import Role
from src.ui.components.formatting import format_stat

ICON_COLORS: Dict[str, str] = {
    "purple": "violet",
    "blue": "blue",
    "yellow": "orange",
    "green": "green",
}

DEFAULT_SUBTITLES: Dict[Role, str] = {
    Role.ADMIN: (
        "Here's what's happening with your gym today. Track your members, "
        "monitor performance, and manage operations all in one place."
    ),
    Role.PERSONAL_TRAINER: "You have 4 sessions scheduled for today.",
}


@dataclass
class StatCard:
    label: str
    value: Union[str, int, float]
    icon: str
    color: str = "purple"

    def __post_init__(self) -> None:
        if self.color not in ICON_COLORS:
            raise ValueError(f"Unsupported stat card color: {self.color!r}")

    @property
    def value_display(self) -> str:
        return format_stat(self.value)

    @property
    def icon_markdown(self) -> str:
        return f":{ICON_COLORS[self.color]}-background[{self.icon}]"


def welcome_subtitle(role: Role | str, subtitle: Optional[str] = None) -> str:
    return subtitle or DEFAULT_SUBTITLES[Role.parse(role)]


def render_stat_cards(cards: Sequence[StatCard], columns: int = 4) -> None:
    """
    Render stat cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col, st.container(border=True):
                st.markdown(card.icon_markdown)
                st.metric(label=card.label, value=card.value_display)


def render_welcome_card(user_name: str, role: Role | str, subtitle: Optional[str] = None) -> None:
    with st.container(border=True):
        text_col, icon_col = st.columns([8, 1], vertical_alignment="center")
        with text_col:
            st.subheader(f"Welcome Back, :violet[{user_name}]")
            st.write(welcome_subtitle(role, subtitle))
        with icon_col:
            st.markdown("## :material/group:")
