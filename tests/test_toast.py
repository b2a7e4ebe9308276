"""Tests for the toast queue."""

import pytest

from src.ui.components.toast import DEFAULT_DURATION_MS, hide_toast, pending_toasts, show_toast


def test_toasts_queue_in_order_with_default_duration():
    session = {}
    first = show_toast(session, "success", "Saved")
    second = show_toast(session, "error", "Logout failed", "Try again")
    assert pending_toasts(session) == [first, second]
    assert first.duration == DEFAULT_DURATION_MS
    assert first.id != second.id
    assert second.body == "**Logout failed**  \nTry again"


def test_hide_toast_removes_only_that_toast():
    session = {}
    first = show_toast(session, "info", "One")
    second = show_toast(session, "warning", "Two")
    hide_toast(session, first.id)
    assert pending_toasts(session) == [second]


def test_duration_maps_to_streamlit_values():
    session = {}
    assert show_toast(session, "info", "Sticky", duration=0).streamlit_duration == "infinite"
    assert show_toast(session, "info", "Quick", duration=1200).streamlit_duration == 1


def test_unknown_toast_type_is_rejected():
    with pytest.raises(ValueError):
        show_toast({}, "fatal", "Nope")
