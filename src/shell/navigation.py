"""
Role-scoped sidebar navigation.

The model resolves a role to its menu and reports which entry is active. It
never mutates the active tab itself: clicks are forwarded to the owner through
``on_tab_change`` and ``on_logout``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Tuple

from src.config import MENUS, ROLE_LABELS, MenuDefinition, MenuItem, Role


def resolve_menu(role: Role | str, menus: Mapping[Role, MenuDefinition] = MENUS) -> MenuDefinition:
    return menus[Role.parse(role)]


def role_label(role: Role | str) -> str:
    return ROLE_LABELS[Role.parse(role)]


def find_item(menu: MenuDefinition, item_id: str) -> Optional[MenuItem]:
    return next((item for item in menu if item.id == item_id), None)


@dataclass
class NavigationModel:
    role: Role
    active_tab: str
    on_tab_change: Callable[[str], None]
    on_logout: Callable[[], None]

    def __post_init__(self) -> None:
        self.role = Role.parse(self.role)

    @property
    def menu(self) -> MenuDefinition:
        return resolve_menu(self.role)

    @property
    def role_label(self) -> str:
        return role_label(self.role)

    def items(self) -> List[MenuItem]:
        return list(self.menu)

    def entries(self) -> List[Tuple[MenuItem, bool]]:
        """Menu items in definition order paired with their active flag.

        An ``active_tab`` outside the menu leaves every entry inactive.
        """
        return [(item, item.id == self.active_tab) for item in self.menu]

    def active_item(self) -> Optional[MenuItem]:
        return find_item(self.menu, self.active_tab)

    def click(self, item_id: str) -> None:
        if find_item(self.menu, item_id) is None:
            raise KeyError(f"{item_id!r} is not in the {self.role.value} menu")
        self.on_tab_change(item_id)

    def click_logout(self) -> None:
        self.on_logout()
