"""
Demo records for the dashboard widgets.

The shell does not own business data; these frames stand in for whatever
data service feeds the stat widgets and tables in a deployment.
"""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from src.config import Role
from src.ui.components.cards import StatCard
from src.ui.components.formatting import format_money

MEMBER_STATUSES = ["active", "expired", "no-contract"]
MONTHLY_REVENUE = 17_800
MONTHLY_TRAINER_EARNINGS = 7_800


@st.cache_data(show_spinner=False)
def top_coaches() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": 1, "name": "Juan Dela Cruz", "client_count": 12, "rating": 4.5},
            {"id": 2, "name": "Sarah Martinez", "client_count": 12, "rating": 4.5},
            {"id": 3, "name": "Peter J. Johnson", "client_count": 12, "rating": 4.5},
        ]
    )


@st.cache_data(show_spinner=False)
def active_members() -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"id": 1, "name": "James Medalla", "date_paid": "Jan 15", "date_expiry": "Feb 15", "status": "active"},
            {"id": 2, "name": "Kent Charl Mabutas", "date_paid": "Jan 10", "date_expiry": "Jul 10", "status": "active"},
            {"id": 3, "name": "John Elmar Rodrigo", "date_paid": "Jan 2", "date_expiry": "Feb 2", "status": "expired"},
        ]
    )


def gym_members() -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "id": "SFM2301N1", "name": "Johnny Sins", "email": "johnny@gmail.com",
                "phone": "0923346529", "gender": "male", "date_joined": "11/01/2026",
                "date_expiration": "11/02/2026", "status": "active", "trainer_id": "pt-1",
            },
            {
                "id": "SFM2301N2", "name": "Juan Dela Cruz", "email": "juan@gmail.com",
                "phone": "0912345678", "gender": "male", "date_joined": "11/01/2026",
                "date_expiration": "11/02/2026", "status": "active", "trainer_id": "pt-2",
            },
            {
                "id": "SFM2301N3", "name": "Jen Velasquez", "email": "jen@gmail.com",
                "phone": "0987654321", "gender": "female", "date_joined": "20/01/2026",
                "date_expiration": None, "status": "no-contract", "trainer_id": None,
            },
            {
                "id": "SFM2301N4", "name": "Tom Hall", "email": "tom@gmail.com",
                "phone": "0956789012", "gender": "male", "date_joined": "15/01/2025",
                "date_expiration": "15/07/2025", "status": "expired", "trainer_id": "pt-1",
            },
        ]
    )
    df["date_joined"] = pd.to_datetime(df["date_joined"], format="%d/%m/%Y")
    df["date_expiration"] = pd.to_datetime(df["date_expiration"], format="%d/%m/%Y")
    return df


def overview_stats(role: Role) -> List[StatCard]:
    if role is Role.ADMIN:
        return [
            StatCard("Total members", 156, ":material/group:", "purple"),
            StatCard("Check-ins today", 67, ":material/how_to_reg:", "blue"),
            StatCard("Active contracts", 14, ":material/description:", "yellow"),
            StatCard("Monthly revenue", format_money(MONTHLY_REVENUE), ":material/attach_money:", "green"),
        ]
    return [
        StatCard("Active clients", 12, ":material/group:", "purple"),
        StatCard("Active packages", 3, ":material/package_2:", "blue"),
        StatCard("Diet plans", 8, ":material/nutrition:", "yellow"),
        StatCard("Monthly earnings", format_money(MONTHLY_TRAINER_EARNINGS), ":material/attach_money:", "green"),
    ]


SALES_TARGET_PERCENTAGE = 84
