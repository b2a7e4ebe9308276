from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableMapping

from src.config import Role, UserIdentity
from src.shell.state import DashboardShell


@dataclass
class PageContext:
    identity: UserIdentity
    shell: DashboardShell

    @property
    def role(self) -> Role:
        return self.identity.role

    @property
    def session(self) -> MutableMapping[str, Any]:
        return self.shell.session
