"""
Controlled form fields: input, select, checkbox and button.

Callers own value, error, required and disabled. The only state a field keeps
for itself is the password visibility of an input, stored under that input's
own widget key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, MutableMapping, Optional, Sequence

import streamlit as st

PLACEHOLDER_VALUE = ""
LOADING_TEXT = "Loading..."

BUTTON_TYPES = {
    "primary": "primary",
    "secondary": "secondary",
    "outline": "secondary",
    "ghost": "tertiary",
}


@dataclass
class FieldState:
    """What a form owner hands each field: current value, display error, flags."""

    value: Any = PLACEHOLDER_VALUE
    error: Optional[str] = None
    disabled: bool = False
    loading: bool = False


def label_text(label: Optional[str], required: bool = False) -> str:
    if not label:
        return ""
    return f"{label} *" if required else label


def render_error(error: Optional[str]) -> None:
    if error:
        st.caption(f":red[{error}]")


class PasswordVisibility:
    """Show/hide flag for one password input, hidden until toggled."""

    def __init__(self, session: MutableMapping[str, Any], input_key: str) -> None:
        self.session = session
        self.state_key = f"{input_key}__show_password"

    @property
    def visible(self) -> bool:
        return bool(self.session.get(self.state_key, False))

    def toggle(self) -> None:
        self.session[self.state_key] = not self.visible


@dataclass
class InputField:
    key: str
    label: Optional[str] = None
    value: str = ""
    error: Optional[str] = None
    required: bool = False
    disabled: bool = False
    password_toggle: bool = False
    input_type: str = "default"
    placeholder: Optional[str] = None
    icon: Optional[str] = None

    def effective_type(self, show_password: bool = False) -> str:
        if self.password_toggle:
            return "default" if show_password else "password"
        return self.input_type

    @property
    def has_error(self) -> bool:
        return bool(self.error)


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


@dataclass
class SelectField:
    key: str
    options: Sequence[SelectOption]
    label: Optional[str] = None
    value: str = PLACEHOLDER_VALUE
    placeholder: str = "Select an option"
    error: Optional[str] = None
    required: bool = False
    disabled: bool = False

    def __post_init__(self) -> None:
        if any(option.value == PLACEHOLDER_VALUE for option in self.options):
            raise ValueError("Select options must not reuse the placeholder value")

    @property
    def values(self) -> List[str]:
        return [option.value for option in self.options]

    @property
    def is_filled(self) -> bool:
        return self.value in self.values

    def label_for(self, value: str) -> str:
        if value == PLACEHOLDER_VALUE:
            return self.placeholder
        return next((o.label for o in self.options if o.value == value), value)

    def index(self) -> Optional[int]:
        return self.values.index(self.value) if self.is_filled else None


@dataclass
class CheckboxField:
    key: str
    label: Optional[str] = None
    checked: bool = False
    disabled: bool = False


@dataclass
class ButtonSpec:
    label: str
    key: Optional[str] = None
    variant: str = "primary"
    size: str = "md"
    full_width: bool = False
    disabled: bool = False
    is_loading: bool = False
    help: Optional[str] = None
    icon: Optional[str] = None

    @property
    def effective_disabled(self) -> bool:
        return self.disabled or self.is_loading

    @property
    def display_label(self) -> str:
        return LOADING_TEXT if self.is_loading else self.label

    @property
    def streamlit_type(self) -> str:
        return BUTTON_TYPES.get(self.variant, "secondary")


def render_input(
    spec: InputField,
    on_change: Optional[Callable[[], None]] = None,
    session: Optional[MutableMapping[str, Any]] = None,
) -> str:
    session = st.session_state if session is None else session
    visibility = PasswordVisibility(session, spec.key)

    kwargs = {}
    if spec.key not in session:
        kwargs["value"] = spec.value

    if spec.password_toggle:
        col_input, col_toggle = st.columns([6, 1], vertical_alignment="bottom")
    else:
        col_input, col_toggle = st.container(), None

    with col_input:
        value = st.text_input(
            label_text(spec.label, spec.required) or spec.key,
            key=spec.key,
            label_visibility="visible" if spec.label else "collapsed",
            type=spec.effective_type(visibility.visible),
            disabled=spec.disabled,
            placeholder=spec.placeholder,
            icon=None if spec.password_toggle else spec.icon,
            on_change=on_change,
            **kwargs,
        )
    if col_toggle is not None:
        with col_toggle:
            st.button(
                ":material/visibility_off:" if visibility.visible else ":material/visibility:",
                key=f"{spec.key}__toggle",
                on_click=visibility.toggle,
                type="tertiary",
            )
    render_error(spec.error)
    return value


def render_select(spec: SelectField, on_change: Optional[Callable[[], None]] = None) -> str:
    """Render a select whose empty state is Streamlit's own placeholder.

    The placeholder cannot be picked back once a real option is chosen, and an
    untouched select returns ``PLACEHOLDER_VALUE``.
    """
    selection = st.selectbox(
        label_text(spec.label, spec.required),
        options=spec.values,
        index=spec.index(),
        format_func=spec.label_for,
        placeholder=spec.placeholder,
        key=spec.key,
        disabled=spec.disabled,
        on_change=on_change,
    )
    render_error(spec.error)
    return PLACEHOLDER_VALUE if selection is None else selection


def render_checkbox(spec: CheckboxField, on_change: Optional[Callable[[], None]] = None) -> bool:
    return st.checkbox(
        spec.label or spec.key,
        value=spec.checked,
        key=spec.key,
        disabled=spec.disabled,
        on_change=on_change,
        label_visibility="visible" if spec.label else "collapsed",
    )


def render_button(spec: ButtonSpec, on_click: Optional[Callable[[], None]] = None) -> bool:
    return st.button(
        spec.display_label,
        key=spec.key,
        type=spec.streamlit_type,
        disabled=spec.effective_disabled,
        on_click=on_click,
        help=spec.help,
        icon=None if spec.is_loading else spec.icon,
        width="stretch" if spec.full_width else "content",
    )
