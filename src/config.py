"""
Application-wide configuration: roles, role menus and session settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Role(str, Enum):
    ADMIN = "admin"
    PERSONAL_TRAINER = "personal_trainer"

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        if isinstance(value, Role):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        normalized = ROLE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown role: {value!r}") from None


ROLE_ALIASES: Dict[str, str] = {
    "pt": "personal_trainer",
    "trainer": "personal_trainer",
}


@dataclass(frozen=True)
class MenuItem:
    id: str
    label: str
    icon: str


MenuDefinition = Tuple[MenuItem, ...]


def build_menu(*items: MenuItem) -> MenuDefinition:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"Duplicate menu id: {item.id!r}")
        seen.add(item.id)
    return tuple(items)


# Ordered sidebar menus, one per role
ADMIN_MENU: MenuDefinition = build_menu(
    MenuItem("dashboard", "Dashboard", ":material/dashboard:"),
    MenuItem("service-packages", "Service Packages", ":material/package_2:"),
    MenuItem("bookings", "Bookings", ":material/calendar_month:"),
    MenuItem("time-slots", "Time Slots", ":material/schedule:"),
    MenuItem("contracts", "Contracts", ":material/description:"),
    MenuItem("customers", "Customers", ":material/group:"),
    MenuItem("personal-trainers", "Personal Trainers", ":material/manage_accounts:"),
    MenuItem("workouts", "Workouts", ":material/fitness_center:"),
    MenuItem("diets", "Diets", ":material/nutrition:"),
    MenuItem("additional-services", "Additional Services", ":material/auto_awesome:"),
    MenuItem("payments", "Payments", ":material/credit_card:"),
    MenuItem("inventory", "Inventory", ":material/inventory_2:"),
    MenuItem("report", "Report", ":material/bar_chart:"),
)

TRAINER_MENU: MenuDefinition = build_menu(
    MenuItem("dashboard", "Dashboard", ":material/home:"),
    MenuItem("bookings", "Bookings", ":material/calendar_month:"),
    MenuItem("slots", "Slots", ":material/schedule:"),
    MenuItem("service-packages", "Service Packages", ":material/package_2:"),
    MenuItem("contracts", "Contracts", ":material/description:"),
    MenuItem("members", "Members", ":material/group:"),
    MenuItem("workouts", "Workouts", ":material/fitness_center:"),
    MenuItem("diets", "Diets", ":material/nutrition:"),
    MenuItem("report", "Report", ":material/bar_chart:"),
)

MENUS: Dict[Role, MenuDefinition] = {
    Role.ADMIN: ADMIN_MENU,
    Role.PERSONAL_TRAINER: TRAINER_MENU,
}

ROLE_LABELS: Dict[Role, str] = {
    Role.ADMIN: "Administrator",
    Role.PERSONAL_TRAINER: "Personal Trainer",
}

BRAND_NAME = ("STAMINA", "FITNESS")
PAGE_TITLE = "Stamina Fitness Dashboard"
LOGO_PATH = os.getenv("STAMINA_LOGO_PATH", "static/images/Main_Logo.png")
IDENTITY_KEY = "session_identity"


@dataclass(frozen=True)
class UserIdentity:
    role: Role
    name: str
    email: str
    avatar: Optional[str] = None
    user_id: Optional[str] = None


DEFAULT_IDENTITIES: Dict[Role, UserIdentity] = {
    Role.ADMIN: UserIdentity(
        role=Role.ADMIN,
        name="Administrator",
        email="juan.delacruz@gmail.com",
        user_id="admin-1",
    ),
    Role.PERSONAL_TRAINER: UserIdentity(
        role=Role.PERSONAL_TRAINER,
        name="Personal Trainer",
        email="juan.delacruz@gmail.com",
        user_id="pt-1",
    ),
}


def load_identity() -> UserIdentity:
    """Build the session identity from STAMINA_USER_* environment variables.

    Missing values fall back to the per-role defaults above.
    """
    role = Role.parse(os.getenv("STAMINA_USER_ROLE", Role.ADMIN.value))
    default = DEFAULT_IDENTITIES[role]
    return UserIdentity(
        role=role,
        name=os.getenv("STAMINA_USER_NAME") or default.name,
        email=os.getenv("STAMINA_USER_EMAIL") or default.email,
        avatar=os.getenv("STAMINA_USER_AVATAR") or default.avatar,
        user_id=os.getenv("STAMINA_USER_ID") or default.user_id,
    )


def log_level() -> str:
    return os.getenv("STAMINA_LOG_LEVEL", "INFO")
