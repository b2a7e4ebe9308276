"""Shared fixtures: a dict stands in for st.session_state."""

import pytest

from src.config import Role, UserIdentity
from src.shell.state import DashboardShell
from src.ui.pages.context import PageContext


@pytest.fixture
def session():
    return {}


@pytest.fixture
def admin_shell(session):
    shell = DashboardShell(session, Role.ADMIN)
    shell.mount()
    return shell


@pytest.fixture
def trainer_shell(session):
    shell = DashboardShell(session, "pt")
    shell.mount()
    return shell


@pytest.fixture
def admin_context(admin_shell):
    identity = UserIdentity(role=Role.ADMIN, name="Administrator", email="admin@example.com", user_id="admin-1")
    return PageContext(identity=identity, shell=admin_shell)


@pytest.fixture
def trainer_context(trainer_shell):
    identity = UserIdentity(role=Role.PERSONAL_TRAINER, name="Coach", email="pt@example.com", user_id="pt-1")
    return PageContext(identity=identity, shell=trainer_shell)
