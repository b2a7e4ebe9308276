"""
Toast notifications queued in session state and shown on the next render.

Handlers that change state (button callbacks, overlay confirmations) run before
the page is drawn, so they queue a toast instead of drawing it directly.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Dict, List, MutableMapping, Optional

import streamlit as st

TOAST_QUEUE_KEY = "toast_queue"
DEFAULT_DURATION_MS = 5000

TOAST_ICONS: Dict[str, str] = {
    "success": ":material/check_circle:",
    "error": ":material/error:",
    "warning": ":material/warning:",
    "info": ":material/info:",
}

_ids = itertools.count(1)


@dataclass(frozen=True)
class ToastMessage:
    id: str
    type: str
    title: str
    message: Optional[str] = None
    duration: int = DEFAULT_DURATION_MS

    @property
    def body(self) -> str:
        return f"**{self.title}**  \n{self.message}" if self.message else f"**{self.title}**"

    @property
    def streamlit_duration(self) -> Any:
        # st.toast only knows short/long/infinite or whole seconds
        if self.duration <= 0:
            return "infinite"
        return max(1, round(self.duration / 1000))


def show_toast(
    session: MutableMapping[str, Any],
    type: str,
    title: str,
    message: Optional[str] = None,
    duration: Optional[int] = None,
) -> ToastMessage:
    if type not in TOAST_ICONS:
        raise ValueError(f"Unknown toast type: {type!r}")
    toast = ToastMessage(
        id=f"toast-{next(_ids)}",
        type=type,
        title=title,
        message=message,
        duration=DEFAULT_DURATION_MS if duration is None else duration,
    )
    session.setdefault(TOAST_QUEUE_KEY, []).append(toast)
    return toast


def hide_toast(session: MutableMapping[str, Any], toast_id: str) -> None:
    queue: List[ToastMessage] = session.get(TOAST_QUEUE_KEY, [])
    session[TOAST_QUEUE_KEY] = [toast for toast in queue if toast.id != toast_id]


def pending_toasts(session: MutableMapping[str, Any]) -> List[ToastMessage]:
    return list(session.get(TOAST_QUEUE_KEY, []))


def flush_toasts(session: Optional[MutableMapping[str, Any]] = None) -> None:
    session = st.session_state if session is None else session
    for toast in pending_toasts(session):
        st.toast(toast.body, icon=TOAST_ICONS[toast.type], duration=toast.streamlit_duration)
        hide_toast(session, toast.id)
