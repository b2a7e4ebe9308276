"""
Customers (admin) / Members (trainer) region: member table, add-member modal
and delete confirmation.
"""

from __future__ import annotations

from typing import Any, Dict, MutableMapping, Optional

import pandas as pd
import streamlit as st

from src.config import Role
from src.data.filters import MemberFilters, apply_member_filters, scope_for_role
from src.data.sample import MEMBER_STATUSES, gym_members
from src.data.validation import validate_member_form
from src.shell.overlay import ConfirmModal, ConfirmVariant, Modal, ModalSize
from src.shell.state import DashboardShell
from src.ui.components.fields import (
    PLACEHOLDER_VALUE,
    ButtonSpec,
    CheckboxField,
    FieldState,
    InputField,
    SelectField,
    SelectOption,
    render_button,
    render_checkbox,
    render_input,
    render_select,
)
from src.ui.components.formatting import title_from_id
from src.ui.components.overlays import render_confirm, render_modal
from src.ui.components.tables import render_table
from src.ui.components.toast import show_toast
from src.ui.pages.context import PageContext
from src.utils.logging import get_logger

logger = get_logger(__name__)

RECORDS_KEY = "members_records"
ADD_OVERLAY = "members:add"
DELETE_OVERLAY = "members:delete"
FORM_FIELDS = ["email", "password", "name", "gender", "phone"]

GENDER_OPTIONS = [
    SelectOption("male", "Male"),
    SelectOption("female", "Female"),
    SelectOption("other", "Other"),
]
STATUS_FILTER_OPTIONS = ["all"] + MEMBER_STATUSES
SORT_OPTIONS = {"newest": "Newest first", "oldest": "Oldest first"}


def load_records(session: MutableMapping[str, Any]) -> pd.DataFrame:
    if RECORDS_KEY not in session:
        session[RECORDS_KEY] = gym_members()
    return session[RECORDS_KEY]


def next_member_id(records: pd.DataFrame) -> str:
    return f"SFM2301N{len(records) + 1}"


def add_member(
    records: pd.DataFrame,
    values: Dict[str, str],
    trainer_id: Optional[str] = None,
    joined: Optional[pd.Timestamp] = None,
) -> pd.DataFrame:
    row = {
        "id": next_member_id(records),
        "name": values["name"].strip(),
        "email": values["email"].strip(),
        "phone": values["phone"].strip(),
        "gender": values["gender"],
        "date_joined": joined if joined is not None else pd.Timestamp.today().normalize(),
        "date_expiration": pd.NaT,
        "status": "no-contract",
        "trainer_id": trainer_id,
    }
    return pd.concat([records, pd.DataFrame([row])], ignore_index=True)


def remove_member(records: pd.DataFrame, member_id: str) -> pd.DataFrame:
    return records[records["id"] != member_id].reset_index(drop=True)


def form_field_state(shell: DashboardShell, field_name: str) -> FieldState:
    props = shell.overlay.props
    raw = shell.session.get(shell.field_key(field_name))
    loading = bool(props.get("is_loading"))
    return FieldState(
        value=PLACEHOLDER_VALUE if raw is None else str(raw),
        error=props.get("errors", {}).get(field_name),
        disabled=loading,
        loading=loading,
    )


def collect_form_values(shell: DashboardShell) -> Dict[str, str]:
    return {name: form_field_state(shell, name).value for name in FORM_FIELDS}


def submit_member_form(ctx: PageContext) -> bool:
    """Validate the open add-member form; on success store the member and close."""
    shell = ctx.shell
    values = collect_form_values(shell)
    errors = validate_member_form(values)
    if errors:
        shell.update_overlay(errors=errors)
        return False

    trainer_id = None
    if ctx.role is Role.PERSONAL_TRAINER and shell.session.get(shell.field_key("assign_me"), True):
        trainer_id = ctx.identity.user_id
    ctx.session[RECORDS_KEY] = add_member(load_records(ctx.session), values, trainer_id)
    shell.close_overlay()
    show_toast(ctx.session, "success", "Member added", f"{values['name'].strip()} was added.")
    logger.info("Member added by %s", ctx.role.value)
    return True


def delete_selected_member(ctx: PageContext) -> None:
    shell = ctx.shell
    member_id = shell.overlay.props.get("member_id")
    member_name = shell.overlay.props.get("member_name", member_id)
    ctx.session[RECORDS_KEY] = remove_member(load_records(ctx.session), member_id)
    ctx.session.pop("members_selected", None)
    shell.close_overlay()
    show_toast(ctx.session, "success", "Member deleted", f"{member_name} was removed.")
    logger.info("Member %s deleted", member_id)


def _member_form(ctx: PageContext) -> None:
    shell = ctx.shell
    email, password, name, gender, phone = (form_field_state(shell, field) for field in FORM_FIELDS)

    render_input(InputField(key=shell.field_key("email"), label="Email", required=True, value=email.value,
                            placeholder="name@example.com", error=email.error, disabled=email.disabled))
    render_input(InputField(key=shell.field_key("password"), label="Password", required=True, value=password.value,
                            password_toggle=True, error=password.error, disabled=password.disabled))
    render_input(InputField(key=shell.field_key("name"), label="Full name", required=True, value=name.value,
                            error=name.error, disabled=name.disabled))
    render_select(SelectField(key=shell.field_key("gender"), options=GENDER_OPTIONS, label="Gender",
                              required=True, value=gender.value, placeholder="Select gender",
                              error=gender.error, disabled=gender.disabled))
    render_input(InputField(key=shell.field_key("phone"), label="Phone", required=True, value=phone.value,
                            placeholder="09xxxxxxxx", error=phone.error, disabled=phone.disabled))
    if ctx.role is Role.PERSONAL_TRAINER:
        render_checkbox(CheckboxField(key=shell.field_key("assign_me"), label="Assign to me",
                                      checked=True, disabled=email.loading))


def _member_form_footer(ctx: PageContext) -> None:
    shell = ctx.shell
    loading = bool(shell.overlay.props.get("is_loading"))
    cancel_col, save_col = st.columns(2)
    with cancel_col:
        if render_button(ButtonSpec("Cancel", key=shell.field_key("cancel"), variant="outline",
                                    full_width=True, disabled=loading)):
            shell.close_overlay()
            st.rerun()
    with save_col:
        if render_button(ButtonSpec("Save", key=shell.field_key("save"), full_width=True, is_loading=loading)):
            # a failed submit leaves the dialog open with its errors in the overlay props
            submit_member_form(ctx)
            st.rerun()


def _render_overlays(ctx: PageContext) -> None:
    shell = ctx.shell
    overlay = shell.overlay
    if overlay.is_named(ADD_OVERLAY):
        modal = Modal(
            is_open=True,
            on_close=shell.close_overlay,
            title=overlay.props["title"],
            size=overlay.props.get("size", ModalSize.LG),
            footer=lambda: _member_form_footer(ctx),
        )
        render_modal(modal, body=lambda: _member_form(ctx))
    elif overlay.is_named(DELETE_OVERLAY):
        confirm = ConfirmModal.from_state(
            overlay,
            on_close=shell.close_overlay,
            on_confirm=lambda: delete_selected_member(ctx),
        )
        render_confirm(confirm, key=shell.field_key("delete"))


def render(ctx: PageContext) -> None:
    shell = ctx.shell
    st.header(title_from_id(shell.active_tab))

    records = load_records(ctx.session)
    scope = scope_for_role(ctx.role, ctx.identity.user_id)

    search_col, status_col, sort_col, add_col = st.columns([3, 2, 2, 1], vertical_alignment="bottom")
    with search_col:
        search = st.text_input("Search by name or ID", key="members_search", icon=":material/search:")
    with status_col:
        status = st.selectbox(
            "Status",
            options=STATUS_FILTER_OPTIONS,
            format_func=lambda v: "All" if v == "all" else title_from_id(v),
            key="members_status",
        )
    with sort_col:
        sort = st.selectbox(
            "Sort by",
            options=list(SORT_OPTIONS),
            format_func=SORT_OPTIONS.get,
            key="members_sort",
        )
    with add_col:
        st.button(
            "Add",
            key="members_add",
            icon=":material/person_add:",
            type="primary",
            on_click=shell.open_modal,
            args=(ADD_OVERLAY, "Add Member", ModalSize.LG),
        )

    filters = MemberFilters(search=search, status=status, sort=sort, trainer_id=scope.trainer_id)
    visible = apply_member_filters(records, filters)
    render_table(
        visible.assign(
            date_joined=visible["date_joined"].dt.strftime("%d/%m/%Y"),
            date_expiration=visible["date_expiration"].dt.strftime("%d/%m/%Y"),
        ) if not visible.empty else visible,
        column_labels={
            "id": "ID",
            "name": "Name",
            "email": "Email",
            "phone": "Phone",
            "date_joined": "Joined",
            "date_expiration": "Expires",
            "status": "Status",
        },
        empty_message="No members match the current filters.",
    )

    if not visible.empty:
        pick_col, delete_col = st.columns([3, 1], vertical_alignment="bottom")
        with pick_col:
            selected = render_select(
                SelectField(
                    key="members_selected",
                    label="Member",
                    options=[SelectOption(row.id, f"{row.name} ({row.id})") for row in visible.itertuples()],
                    placeholder="Select a member",
                )
            )
        with delete_col:
            if render_button(ButtonSpec("Delete", key="members_delete", variant="secondary",
                                        disabled=selected == PLACEHOLDER_VALUE, icon=":material/delete:")):
                name = visible.loc[visible["id"] == selected, "name"].iloc[0]
                shell.open_confirm(
                    DELETE_OVERLAY,
                    title="Delete member",
                    message=f"Delete {name}? This cannot be undone.",
                    confirm_text="Delete",
                    variant=ConfirmVariant.DANGER,
                    member_id=selected,
                    member_name=name,
                )

    _render_overlays(ctx)
