"""Tests for role menus and the sidebar navigation model."""

import pytest

from src.config import ADMIN_MENU, MENUS, TRAINER_MENU, MenuItem, Role, build_menu
from src.shell.navigation import NavigationModel, resolve_menu, role_label


def _model(role, active_tab, calls=None):
    calls = calls if calls is not None else []
    return NavigationModel(
        role=role,
        active_tab=active_tab,
        on_tab_change=lambda tab_id: calls.append(("tab", tab_id)),
        on_logout=lambda: calls.append(("logout",)),
    )


@pytest.mark.parametrize("role", list(Role))
def test_menu_renders_role_items_in_order(role):
    model = _model(role, MENUS[role][0].id)
    assert model.items() == list(MENUS[role])
    assert [item.id for item, _ in model.entries()] == [item.id for item in MENUS[role]]


@pytest.mark.parametrize("role", list(Role))
def test_menu_ids_are_unique(role):
    ids = [item.id for item in MENUS[role]]
    assert len(ids) == len(set(ids))


def test_admin_bookings_scenario():
    model = _model(Role.ADMIN, "bookings")
    active = [item.label for item, is_active in model.entries() if is_active]
    assert active == ["Bookings"]
    inactive = {item.label for item, is_active in model.entries() if not is_active}
    assert {"Dashboard", "Customers", "Report"} <= inactive


def test_unknown_active_tab_highlights_nothing():
    model = _model(Role.PERSONAL_TRAINER, "time-slots")
    assert not any(is_active for _, is_active in model.entries())
    assert model.active_item() is None


def test_resolve_menu_accepts_short_trainer_role():
    assert resolve_menu("pt") is TRAINER_MENU
    assert resolve_menu(Role.ADMIN) is ADMIN_MENU
    assert role_label("pt") == "Personal Trainer"
    assert role_label("admin") == "Administrator"


def test_unknown_role_is_rejected():
    with pytest.raises(ValueError):
        resolve_menu("owner")


def test_click_emits_tab_change_once_per_click():
    calls = []
    model = _model(Role.ADMIN, "dashboard", calls)
    model.click("payments")
    model.click("payments")
    assert calls == [("tab", "payments"), ("tab", "payments")]


def test_click_does_not_mutate_active_tab():
    model = _model(Role.ADMIN, "dashboard")
    model.click("inventory")
    assert model.active_tab == "dashboard"


def test_click_outside_menu_raises():
    model = _model(Role.PERSONAL_TRAINER, "dashboard")
    with pytest.raises(KeyError):
        model.click("inventory")


def test_logout_click_emits_intent_without_arguments():
    calls = []
    model = _model(Role.ADMIN, "dashboard", calls)
    model.click_logout()
    assert calls == [("logout",)]


def test_build_menu_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        build_menu(MenuItem("a", "A", ":material/home:"), MenuItem("a", "Again", ":material/home:"))
