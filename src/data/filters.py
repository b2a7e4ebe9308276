"""
Filter utilities for the member tables shown in the dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from src.config import Role


@dataclass
class MemberFilters:
    search: str = ""
    status: str = "all"
    sort: str = "newest"  # newest | oldest
    trainer_id: Optional[str] = None


def scope_for_role(role: Role, user_id: Optional[str]) -> MemberFilters:
    """Trainers only ever see members whose contract names them."""
    if role is Role.PERSONAL_TRAINER and user_id:
        return MemberFilters(trainer_id=user_id)
    return MemberFilters()


def filter_by_name(df: pd.DataFrame, query: str) -> pd.DataFrame:
    if df.empty or not query:
        return df
    mask = df["name"].str.lower().str.contains(query.lower(), regex=False)
    return df[mask]


def apply_member_filters(df: pd.DataFrame, filters: MemberFilters) -> pd.DataFrame:
    if df.empty:
        return df
    filtered = df.copy()

    if filters.trainer_id:
        filtered = filtered[filtered["trainer_id"] == filters.trainer_id]

    if filters.search:
        needle = filters.search.lower()
        mask = filtered["name"].str.lower().str.contains(needle, regex=False) | filtered[
            "id"
        ].str.lower().str.contains(needle, regex=False)
        filtered = filtered[mask]

    if filters.status != "all":
        filtered = filtered[filtered["status"] == filters.status]

    return filtered.sort_values(
        "date_joined",
        ascending=filters.sort == "oldest",
        kind="stable",
    )
