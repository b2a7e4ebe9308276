"""
Streamlit rendering for the overlay surfaces.

Dismissing a dialog (outside click, Escape or its close icon) is reported as a
backdrop click. Buttons drawn inside the dialog body are body clicks unless
they are the dialog's own actions.
"""

from __future__ import annotations

from typing import Callable, Dict

import streamlit as st

from src.shell.overlay import ClickTarget, ConfirmModal, Modal, ModalSize

DIALOG_WIDTHS: Dict[ModalSize, str] = {
    ModalSize.SM: "small",
    ModalSize.MD: "medium",
    ModalSize.LG: "large",
}


def render_modal(modal: Modal, body: Callable[[], None]) -> None:
    if not modal.is_open:
        return

    def _dismiss() -> None:
        modal.handle_click(ClickTarget.BACKDROP)

    @st.dialog(modal.title, width=DIALOG_WIDTHS[modal.size], on_dismiss=_dismiss)
    def _dialog() -> None:
        body()
        if modal.footer is not None:
            st.divider()
            modal.footer()

    _dialog()


def render_confirm(confirm: ConfirmModal, key: str) -> None:
    if not confirm.is_open:
        return

    def _dismiss() -> None:
        confirm.handle_click(ClickTarget.BACKDROP)

    @st.dialog(confirm.title, width="small", dismissible=confirm.dismissible, on_dismiss=_dismiss)
    def _dialog() -> None:
        st.markdown(f"## {confirm.icon}")
        st.write(confirm.message)
        cancel_col, confirm_col = st.columns(2)
        with cancel_col:
            cancelled = st.button(
                confirm.cancel_text,
                key=f"{key}_cancel",
                disabled=confirm.actions_disabled,
                width="stretch",
            )
        with confirm_col:
            confirmed = st.button(
                confirm.confirm_label,
                key=f"{key}_confirm",
                type=confirm.confirm_button_type,
                disabled=confirm.actions_disabled,
                width="stretch",
            )
        if cancelled and confirm.handle_click(ClickTarget.CANCEL):
            st.rerun()
        if confirmed and confirm.handle_click(ClickTarget.CONFIRM):
            st.rerun()

    _dialog()
