import src.bootstrap_env  # must be first to set env/secrets
import streamlit as st

from src.config import IDENTITY_KEY, Role, UserIdentity, load_identity
from src.shell.overlay import ConfirmModal
from src.shell.state import LOGOUT_OVERLAY, DashboardShell, clear_state_prefixes
from src.ui.components.overlays import render_confirm
from src.ui.components.toast import flush_toasts, show_toast
from src.ui.layout import render_header, render_sidebar, setup_page
from src.ui.pages import members, overview, placeholder
from src.ui.pages.context import PageContext
from src.utils.logging import get_logger

logger = get_logger("app")

SIGNED_OUT_KEY = "signed_out"

# Content region per menu id; ids without an entry get the placeholder
CONTENT_REGIONS = {
    Role.ADMIN: {
        "dashboard": overview.render,
        "customers": members.render,
    },
    Role.PERSONAL_TRAINER: {
        "dashboard": overview.render,
        "members": members.render,
    },
}


def _session_identity() -> UserIdentity:
    # Role is fixed for the lifetime of the browser session
    if IDENTITY_KEY not in st.session_state:
        st.session_state[IDENTITY_KEY] = load_identity()
    return st.session_state[IDENTITY_KEY]


def _end_session() -> None:
    clear_state_prefixes(st.session_state, ["members_", "overlay_", IDENTITY_KEY])


def _navigate_to_login() -> None:
    st.session_state[SIGNED_OUT_KEY] = True


def _confirm_logout(shell: DashboardShell) -> None:
    try:
        shell.confirm_logout(logout=_end_session, navigate=_navigate_to_login)
    except Exception as exc:
        show_toast(st.session_state, "error", "Logout failed", str(exc))


def _render_logout_dialog(shell: DashboardShell) -> None:
    overlay = shell.overlay
    if not overlay.is_named(LOGOUT_OVERLAY):
        return
    confirm = ConfirmModal.from_state(
        overlay,
        on_close=shell.close_overlay,
        on_confirm=lambda: _confirm_logout(shell),
    )
    render_confirm(confirm, key="shell_logout")


def _render_signed_out() -> None:
    st.title("You have been signed out")
    st.write("Sign in again to return to the dashboard.")
    if st.button("Sign in", type="primary"):
        clear_state_prefixes(st.session_state, [SIGNED_OUT_KEY, "shell_"])
        st.rerun()


def main() -> None:
    setup_page()

    if st.session_state.get(SIGNED_OUT_KEY):
        flush_toasts()
        _render_signed_out()
        return

    identity = _session_identity()
    shell = DashboardShell(st.session_state, identity.role)
    shell.mount()

    render_sidebar(shell.navigation(), identity)
    render_header()

    context = PageContext(identity=identity, shell=shell)
    renderer = shell.resolve_content(CONTENT_REGIONS[identity.role], placeholder.render)
    renderer(context)

    _render_logout_dialog(shell)
    flush_toasts()


if __name__ == "__main__":
    main()
