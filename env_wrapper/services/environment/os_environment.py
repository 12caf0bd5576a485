from __future__ import annotations

import os

from env_wrapper.services.environment.interface import EnvironmentInterface


class OsEnvironment(EnvironmentInterface):
    """Live view of ``os.environ``. Every lookup hits the process table, nothing is cached."""

    def lookup(self, name: str) -> str | None:
        return os.environ.get(name)
