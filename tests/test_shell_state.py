"""Tests for the dashboard shell: active tab ownership and the overlay slot."""

import pytest

from src.shell.state import ACTIVE_TAB_KEY, LOGOUT_OVERLAY, DashboardShell
from src.shell.overlay import CLOSED, OverlayKind


def test_mount_defaults_to_first_menu_item(session):
    shell = DashboardShell(session, "admin")
    assert shell.mount() == "dashboard"
    assert session[ACTIVE_TAB_KEY] == "dashboard"
    assert shell.overlay == CLOSED


def test_mount_keeps_existing_tab_across_reruns(admin_shell, session):
    admin_shell.change_tab("bookings")
    rerun = DashboardShell(session, "admin")
    assert rerun.mount() == "bookings"


def test_change_tab_to_active_id_is_idempotent(admin_shell):
    admin_shell.request_logout()
    overlay_before = admin_shell.overlay
    assert admin_shell.change_tab("dashboard") is False
    assert admin_shell.active_tab == "dashboard"
    assert admin_shell.overlay is overlay_before


def test_change_tab_updates_navigation(admin_shell):
    assert admin_shell.change_tab("contracts") is True
    active = [item.id for item, is_active in admin_shell.navigation().entries() if is_active]
    assert active == ["contracts"]


def test_change_tab_accepts_id_outside_menu(trainer_shell, caplog):
    with caplog.at_level("WARNING"):
        assert trainer_shell.change_tab("inventory") is True
    assert trainer_shell.active_tab == "inventory"
    assert not any(is_active for _, is_active in trainer_shell.navigation().entries())
    assert "inventory" in caplog.text


def test_navigation_click_goes_through_shell(admin_shell):
    admin_shell.navigation().click("report")
    assert admin_shell.active_tab == "report"


def test_resolve_content_selects_one_region(admin_shell):
    registry = {"dashboard": "overview", "customers": "members"}
    assert admin_shell.resolve_content(registry, "placeholder") == "overview"
    admin_shell.change_tab("customers")
    assert admin_shell.resolve_content(registry, "placeholder") == "members"
    admin_shell.change_tab("payments")
    assert admin_shell.resolve_content(registry, "placeholder") == "placeholder"


def test_opening_replaces_previous_overlay(admin_shell, session):
    admin_shell.open_modal("members:add", "Add Member")
    session[admin_shell.field_key("email")] = "old@example.com"
    admin_shell.open_confirm("members:delete", "Delete", "Sure?")
    assert admin_shell.overlay.kind is OverlayKind.CONFIRM
    assert admin_shell.overlay.name == "members:delete"
    assert not any(key.endswith("email") for key in session)


def test_close_discards_overlay_fields(admin_shell, session):
    admin_shell.open_modal("members:add", "Add Member")
    first_key = admin_shell.field_key("email")
    session[first_key] = "jen@example.com"
    session[f"{first_key}__show_password"] = True

    admin_shell.close_overlay()
    assert first_key not in session
    assert f"{first_key}__show_password" not in session
    assert not admin_shell.overlay.is_open
    assert admin_shell.overlay.props == {}

    admin_shell.open_modal("members:add", "Add Member")
    assert admin_shell.field_key("email") != first_key
    assert admin_shell.field_key("email") not in session


def test_tab_change_closes_region_overlay_only(admin_shell):
    admin_shell.open_modal("members:add", "Add Member")
    admin_shell.change_tab("report")
    assert not admin_shell.overlay.is_open

    admin_shell.request_logout()
    admin_shell.change_tab("dashboard")
    assert admin_shell.overlay.is_named(LOGOUT_OVERLAY)


def test_logout_confirm_runs_collaborator_then_closes_and_navigates(admin_shell):
    events = []
    admin_shell.navigation().click_logout()
    assert admin_shell.overlay.is_named(LOGOUT_OVERLAY)

    def logout():
        events.append(("logout", admin_shell.overlay.props["is_loading"]))

    def navigate():
        events.append(("navigate", admin_shell.overlay.is_open))

    assert admin_shell.confirm_logout(logout, navigate) is True
    assert events == [("logout", True), ("navigate", False)]


def test_logout_cancel_has_no_side_effect(admin_shell):
    calls = []
    admin_shell.request_logout()
    admin_shell.close_overlay()
    assert admin_shell.confirm_logout(lambda: calls.append("logout")) is False
    assert calls == []
    assert admin_shell.active_tab == "dashboard"


def test_logout_confirm_ignored_while_loading(admin_shell):
    calls = []
    admin_shell.request_logout()
    admin_shell.set_overlay_loading(True)
    assert admin_shell.confirm_logout(lambda: calls.append("logout")) is False
    assert calls == []


def test_failed_logout_keeps_dialog_open(admin_shell):
    admin_shell.request_logout()

    def logout():
        raise RuntimeError("session service unavailable")

    with pytest.raises(RuntimeError):
        admin_shell.confirm_logout(logout)
    assert admin_shell.overlay.is_named(LOGOUT_OVERLAY)
    assert admin_shell.overlay.props["is_loading"] is False
