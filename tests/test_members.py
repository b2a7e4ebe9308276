"""Tests for member filtering, validation and the add/delete overlay flows."""

import pandas as pd

from src.config import Role
from src.data.filters import MemberFilters, apply_member_filters, filter_by_name, scope_for_role
from src.data.sample import active_members, gym_members
from src.data.validation import validate_member_form
from src.ui.components.toast import pending_toasts
from src.ui.pages import members

VALID_FORM = {
    "email": "jen@example.com",
    "password": "secret1",
    "name": "Jen Velasquez",
    "gender": "female",
    "phone": "0987654321",
}


def _fill_form(shell, values):
    for name, value in values.items():
        shell.session[shell.field_key(name)] = value


def test_trainer_scope_only_shows_assigned_members():
    scope = scope_for_role(Role.PERSONAL_TRAINER, "pt-1")
    visible = apply_member_filters(gym_members(), scope)
    assert set(visible["id"]) == {"SFM2301N1", "SFM2301N4"}


def test_admin_scope_shows_everyone():
    visible = apply_member_filters(gym_members(), scope_for_role(Role.ADMIN, "admin-1"))
    assert len(visible) == 4


def test_search_matches_name_or_id():
    df = gym_members()
    assert list(apply_member_filters(df, MemberFilters(search="jen"))["name"]) == ["Jen Velasquez"]
    assert list(apply_member_filters(df, MemberFilters(search="n4"))["id"]) == ["SFM2301N4"]


def test_status_filter_and_sort_order():
    df = gym_members()
    expired = apply_member_filters(df, MemberFilters(status="expired"))
    assert list(expired["id"]) == ["SFM2301N4"]

    newest = apply_member_filters(df, MemberFilters(sort="newest"))
    oldest = apply_member_filters(df, MemberFilters(sort="oldest"))
    assert newest["id"].iloc[0] == "SFM2301N3"
    assert oldest["id"].iloc[0] == "SFM2301N4"


def test_filter_by_name_is_case_insensitive():
    assert list(filter_by_name(active_members(), "KENT")["name"]) == ["Kent Charl Mabutas"]
    assert len(filter_by_name(active_members(), "")) == 3


def test_validation_reports_display_messages():
    errors = validate_member_form({"email": "not-an-email", "password": "123", "phone": "12"})
    assert errors["email"] == "Invalid email address"
    assert errors["password"].startswith("Password must be at least")
    assert errors["name"] == "Full name is required"
    assert errors["gender"] == "Please select a gender"
    assert "phone" in errors
    assert validate_member_form(VALID_FORM) == {}


def test_add_and_remove_member_records():
    records = gym_members()
    added = members.add_member(records, VALID_FORM, trainer_id="pt-1", joined=pd.Timestamp("2026-02-01"))
    assert len(added) == 5
    row = added.iloc[-1]
    assert row["id"] == "SFM2301N5"
    assert row["status"] == "no-contract"
    assert len(members.remove_member(added, "SFM2301N5")) == 4


def test_invalid_submit_keeps_modal_open_with_errors(admin_context):
    shell = admin_context.shell
    shell.open_modal(members.ADD_OVERLAY, "Add Member")
    _fill_form(shell, {**VALID_FORM, "email": ""})

    assert members.submit_member_form(admin_context) is False
    assert shell.overlay.is_named(members.ADD_OVERLAY)
    assert shell.overlay.props["errors"] == {"email": "Email is required"}


def test_untouched_gender_select_counts_as_missing(admin_context):
    shell = admin_context.shell
    shell.open_modal(members.ADD_OVERLAY, "Add Member")
    _fill_form(shell, {**VALID_FORM, "gender": None})

    assert members.submit_member_form(admin_context) is False
    assert "gender" in shell.overlay.props["errors"]


def test_valid_submit_adds_member_and_closes(trainer_context):
    shell = trainer_context.shell
    shell.open_modal(members.ADD_OVERLAY, "Add Member")
    _fill_form(shell, VALID_FORM)
    form_key = shell.field_key("email")

    assert members.submit_member_form(trainer_context) is True
    assert not shell.overlay.is_open
    assert form_key not in shell.session

    records = members.load_records(shell.session)
    assert records.iloc[-1]["trainer_id"] == "pt-1"
    assert [toast.title for toast in pending_toasts(shell.session)] == ["Member added"]


def test_delete_confirmation_removes_member(admin_context):
    shell = admin_context.shell
    before = len(members.load_records(shell.session))
    shell.open_confirm(
        members.DELETE_OVERLAY,
        title="Delete member",
        message="Delete Tom Hall?",
        member_id="SFM2301N4",
        member_name="Tom Hall",
    )

    members.delete_selected_member(admin_context)

    records = members.load_records(shell.session)
    assert len(records) == before - 1
    assert "SFM2301N4" not in set(records["id"])
    assert not shell.overlay.is_open
    assert [toast.title for toast in pending_toasts(shell.session)] == ["Member deleted"]


def test_form_field_state_carries_value_error_and_loading(admin_context):
    shell = admin_context.shell
    shell.open_modal(members.ADD_OVERLAY, "Add Member")
    _fill_form(shell, {"email": "bad", "gender": None})
    shell.update_overlay(errors={"email": "Invalid email address"})

    email = members.form_field_state(shell, "email")
    assert (email.value, email.error, email.disabled) == ("bad", "Invalid email address", False)
    assert members.form_field_state(shell, "gender").value == ""

    shell.set_overlay_loading(True)
    name = members.form_field_state(shell, "name")
    assert name.disabled and name.loading
    assert name.error is None
