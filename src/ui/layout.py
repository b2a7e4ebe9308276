"""
Layout helpers for the Streamlit application (page setup, header, sidebar).
"""

from __future__ import annotations

import os
from typing import Callable, Optional

import streamlit as st

from src.config import BRAND_NAME, LOGO_PATH, PAGE_TITLE, UserIdentity
from src.shell.navigation import NavigationModel


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title=PAGE_TITLE,
        layout="wide",
        page_icon=":material/fitness_center:",
        initial_sidebar_state="expanded",
    )
    _inject_sidebar_menu_style()


def render_header(actions: Optional[Callable[[], None]] = None) -> None:
    """Brand block on the left, icon actions on the right."""
    brand_col, actions_col = st.columns([4, 1], vertical_alignment="center")
    with brand_col:
        if os.path.exists(LOGO_PATH):
            st.image(LOGO_PATH, width=48)
        first, second = BRAND_NAME
        st.markdown(f"### {first} :violet[{second}]")
    with actions_col:
        cols = st.columns(3 if actions else 2)
        if actions:
            with cols[0]:
                actions()
        cols[-2].button(":material/settings:", key="header_settings", type="tertiary", help="Settings")
        cols[-1].button(":material/notifications:", key="header_notifications", type="tertiary", help="Notifications")


def render_sidebar(nav: NavigationModel, identity: UserIdentity) -> None:
    """Profile block, one button per menu entry, then Logout.

    The active entry is drawn as a primary button; clicks go through the
    model's callbacks so the shell stays the only writer of the active tab.
    """
    with st.sidebar:
        if identity.avatar:
            st.image(identity.avatar, width=72)
        else:
            st.markdown("## :material/account_circle:")
        st.markdown(f"**{nav.role_label}**")
        st.caption(identity.email)
        st.divider()

        for item, is_active in nav.entries():
            st.button(
                item.label,
                key=f"nav_{item.id}",
                icon=item.icon,
                type="primary" if is_active else "secondary",
                on_click=nav.click,
                args=(item.id,),
                width="stretch",
            )

        st.divider()
        st.button(
            "Logout",
            key="nav_logout",
            icon=":material/logout:",
            on_click=nav.click_logout,
            width="stretch",
        )


def _inject_sidebar_menu_style() -> None:
    """Left-align sidebar menu buttons and tint the active (primary) one.

    Scoped to the sidebar container to avoid impacting primary buttons in the main content.
    """
    st.markdown(
        """
        <style>
        div[data-testid="stSidebar"] button {
            justify-content: flex-start;
        }
        div[data-testid="stSidebar"] button[kind="primary"],
        div[data-testid="stSidebar"] button[data-testid="stBaseButton-primary"] {
            background-color: #6F00D0 !important;
            border-color: #6F00D0 !important;
            color: #ffffff !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
