from __future__ import annotations

from env_wrapper.services.environment.interface import EnvironmentInterface


class MemoryEnvironment(EnvironmentInterface):
    """In-memory environment for unit testing without touching ``os.environ``."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def lookup(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def unset(self, name: str) -> None:
        self._values.pop(name, None)
