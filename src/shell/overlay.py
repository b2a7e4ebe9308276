"""
Overlay surfaces (modal and confirmation dialog) and the single overlay slot.

Both surfaces are fully controlled: they report intents through their
callbacks and never flip ``is_open`` themselves. The owner closes the overlay
by storing ``CLOSED`` in its slot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Optional


class OverlayKind(str, Enum):
    MODAL = "modal"
    CONFIRM = "confirm"


class ModalSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"


class ConfirmVariant(str, Enum):
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"


class ClickTarget(str, Enum):
    BACKDROP = "backdrop"
    BODY = "body"
    CLOSE_BUTTON = "close"
    CANCEL = "cancel"
    CONFIRM = "confirm"


VARIANT_ICONS: Dict[ConfirmVariant, str] = {
    ConfirmVariant.DANGER: ":material/delete:",
    ConfirmVariant.WARNING: ":material/warning:",
    ConfirmVariant.INFO: ":material/warning:",
}

# Streamlit button type per variant; only styling differs
VARIANT_BUTTON_TYPES: Dict[ConfirmVariant, str] = {
    ConfirmVariant.DANGER: "primary",
    ConfirmVariant.WARNING: "primary",
    ConfirmVariant.INFO: "secondary",
}

LOADING_LABEL = "Loading..."


@dataclass(frozen=True)
class OverlayState:
    """Closed, or open with a kind, the name of its opener and its props.

    ``generation`` increases on every open so overlay-local widget keys never
    survive a close/open cycle.
    """

    kind: Optional[OverlayKind] = None
    name: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)
    generation: int = 0

    @property
    def is_open(self) -> bool:
        return self.kind is not None

    def is_named(self, name: str) -> bool:
        return self.is_open and self.name == name

    def opened(self, kind: OverlayKind | str, name: str, props: Dict[str, Any]) -> "OverlayState":
        return OverlayState(
            kind=OverlayKind(kind),
            name=name,
            props=dict(props),
            generation=self.generation + 1,
        )

    def closed(self) -> "OverlayState":
        return OverlayState(generation=self.generation)

    def with_props(self, **changes: Any) -> "OverlayState":
        if not self.is_open:
            return self
        return replace(self, props={**self.props, **changes})

    @property
    def key_prefix(self) -> str:
        return f"overlay_{self.generation}_"


CLOSED = OverlayState()


@dataclass
class Modal:
    is_open: bool
    on_close: Callable[[], None]
    title: str
    size: ModalSize = ModalSize.MD
    footer: Optional[Callable[[], None]] = None

    def __post_init__(self) -> None:
        self.size = ModalSize(self.size)

    def handle_click(self, target: ClickTarget) -> bool:
        """Dispatch a click; return True when ``on_close`` was invoked.

        Clicks inside the body never reach the backdrop handler.
        """
        if not self.is_open:
            return False
        if target in (ClickTarget.BACKDROP, ClickTarget.CLOSE_BUTTON):
            self.on_close()
            return True
        return False


@dataclass
class ConfirmModal:
    is_open: bool
    on_close: Callable[[], None]
    on_confirm: Callable[[], None]
    title: str
    message: str
    confirm_text: str = "Confirm"
    cancel_text: str = "Cancel"
    variant: ConfirmVariant = ConfirmVariant.DANGER
    is_loading: bool = False

    def __post_init__(self) -> None:
        self.variant = ConfirmVariant(self.variant)

    @property
    def icon(self) -> str:
        return VARIANT_ICONS[self.variant]

    @property
    def confirm_button_type(self) -> str:
        return VARIANT_BUTTON_TYPES[self.variant]

    @property
    def confirm_label(self) -> str:
        return LOADING_LABEL if self.is_loading else self.confirm_text

    @property
    def actions_disabled(self) -> bool:
        return self.is_loading

    @property
    def dismissible(self) -> bool:
        return not self.is_loading

    def handle_click(self, target: ClickTarget) -> bool:
        """Dispatch a click; return True when a callback was invoked.

        While loading every target is ignored, the backdrop included.
        """
        if not self.is_open or self.is_loading:
            return False
        if target is ClickTarget.CONFIRM:
            self.on_confirm()
            return True
        if target in (ClickTarget.BACKDROP, ClickTarget.CLOSE_BUTTON, ClickTarget.CANCEL):
            self.on_close()
            return True
        return False

    @classmethod
    def from_state(
        cls,
        state: OverlayState,
        on_close: Callable[[], None],
        on_confirm: Callable[[], None],
    ) -> "ConfirmModal":
        props = state.props
        return cls(
            is_open=state.is_open and state.kind is OverlayKind.CONFIRM,
            on_close=on_close,
            on_confirm=on_confirm,
            title=props.get("title", ""),
            message=props.get("message", ""),
            confirm_text=props.get("confirm_text", "Confirm"),
            cancel_text=props.get("cancel_text", "Cancel"),
            variant=props.get("variant", ConfirmVariant.DANGER),
            is_loading=bool(props.get("is_loading", False)),
        )
