"""
Dashboard shell state: the active tab and the single overlay slot.

The shell is the only writer of both values. It stores them in a mutable
mapping (``st.session_state`` at runtime) so they survive Streamlit reruns for
the lifetime of the browser session and nothing more.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, MutableMapping, Optional, TypeVar

from src.config import MENUS, MenuDefinition, Role
from src.shell.navigation import NavigationModel, find_item
from src.shell.overlay import CLOSED, ConfirmVariant, ModalSize, OverlayKind, OverlayState
from src.utils.logging import get_logger

logger = get_logger(__name__)

ACTIVE_TAB_KEY = "shell_active_tab"
OVERLAY_KEY = "shell_overlay"

LOGOUT_OVERLAY = "shell:logout"
SHELL_OVERLAY_PREFIX = "shell:"

T = TypeVar("T")


def clear_state_prefixes(session: MutableMapping[str, Any], prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(session.keys()):
            if key.startswith(prefix):
                del session[key]


class DashboardShell:
    def __init__(
        self,
        session: MutableMapping[str, Any],
        role: Role | str,
        menus: Mapping[Role, MenuDefinition] = MENUS,
    ) -> None:
        self.session = session
        self.role = Role.parse(role)
        self.menu = menus[self.role]

    # ----- active tab -------------------------------------------------

    def mount(self) -> str:
        """Initialise the active tab on first render; later reruns keep it."""
        if ACTIVE_TAB_KEY not in self.session:
            self.session[ACTIVE_TAB_KEY] = self.menu[0].id
            logger.debug("Shell mounted for %s on %r", self.role.value, self.menu[0].id)
        if OVERLAY_KEY not in self.session:
            self.session[OVERLAY_KEY] = CLOSED
        return self.active_tab

    @property
    def active_tab(self) -> str:
        return self.session.get(ACTIVE_TAB_KEY, self.menu[0].id)

    def change_tab(self, tab_id: str) -> bool:
        """Single entry point for tab changes; returns False when nothing changed.

        Ids outside the menu are accepted and leave the sidebar with nothing
        highlighted. Overlays opened by the previous content region are closed.
        """
        if tab_id == self.active_tab:
            return False
        if find_item(self.menu, tab_id) is None:
            logger.warning("Tab %r is not in the %s menu", tab_id, self.role.value)
        overlay = self.overlay
        if overlay.is_open and not (overlay.name or "").startswith(SHELL_OVERLAY_PREFIX):
            self.close_overlay()
        self.session[ACTIVE_TAB_KEY] = tab_id
        logger.info("Active tab: %s", tab_id)
        return True

    def navigation(self) -> NavigationModel:
        return NavigationModel(
            role=self.role,
            active_tab=self.active_tab,
            on_tab_change=self.change_tab,
            on_logout=self.request_logout,
        )

    def resolve_content(self, registry: Mapping[str, T], fallback: T) -> T:
        """Pick the one content region for the active tab."""
        return registry.get(self.active_tab, fallback)

    # ----- overlay slot -----------------------------------------------

    @property
    def overlay(self) -> OverlayState:
        return self.session.get(OVERLAY_KEY, CLOSED)

    def _open(self, kind: OverlayKind, name: str, props: dict) -> OverlayState:
        current = self.overlay
        if current.is_open:
            # Replacing an overlay drops its local fields like a close would
            clear_state_prefixes(self.session, [current.key_prefix])
        state = current.opened(kind, name, props)
        self.session[OVERLAY_KEY] = state
        logger.debug("Overlay opened: %s (%s)", name, kind.value)
        return state

    def open_modal(self, name: str, title: str, size: ModalSize | str = ModalSize.MD, **props: Any) -> OverlayState:
        return self._open(OverlayKind.MODAL, name, {"title": title, "size": ModalSize(size), **props})

    def open_confirm(
        self,
        name: str,
        title: str,
        message: str,
        confirm_text: str = "Confirm",
        cancel_text: str = "Cancel",
        variant: ConfirmVariant | str = ConfirmVariant.DANGER,
        **props: Any,
    ) -> OverlayState:
        return self._open(
            OverlayKind.CONFIRM,
            name,
            {
                "title": title,
                "message": message,
                "confirm_text": confirm_text,
                "cancel_text": cancel_text,
                "variant": ConfirmVariant(variant),
                "is_loading": False,
                **props,
            },
        )

    def close_overlay(self) -> None:
        current = self.overlay
        if not current.is_open:
            return
        clear_state_prefixes(self.session, [current.key_prefix])
        self.session[OVERLAY_KEY] = current.closed()
        logger.debug("Overlay closed: %s", current.name)

    def update_overlay(self, **props: Any) -> None:
        self.session[OVERLAY_KEY] = self.overlay.with_props(**props)

    def set_overlay_loading(self, is_loading: bool) -> None:
        self.update_overlay(is_loading=is_loading)

    def field_key(self, name: str) -> str:
        """Widget key scoped to the currently open overlay."""
        return f"{self.overlay.key_prefix}{name}"

    # ----- logout -----------------------------------------------------

    def request_logout(self) -> None:
        self.open_confirm(
            LOGOUT_OVERLAY,
            title="Logout",
            message="Are you sure you want to log out?",
            confirm_text="Logout",
            variant=ConfirmVariant.WARNING,
        )

    def confirm_logout(
        self,
        logout: Callable[[], None],
        navigate: Optional[Callable[[], None]] = None,
    ) -> bool:
        """Run the external logout, then close the dialog and navigate away.

        Returns False when the logout dialog is not open or is already busy.
        If ``logout`` raises, the dialog stays open with loading cleared.
        """
        overlay = self.overlay
        if not overlay.is_named(LOGOUT_OVERLAY) or overlay.props.get("is_loading"):
            return False
        self.set_overlay_loading(True)
        try:
            logout()
        except Exception:
            self.set_overlay_loading(False)
            logger.exception("Logout failed")
            raise
        self.close_overlay()
        logger.info("Logged out %s session", self.role.value)
        if navigate is not None:
            navigate()
        return True
