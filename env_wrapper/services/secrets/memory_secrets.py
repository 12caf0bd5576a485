from __future__ import annotations

from env_wrapper.services.secrets.interface import SecretsInterface


class MemorySecrets(SecretsInterface):
    """Fixed in-memory secrets for unit testing."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def keys(self) -> list[str]:
        return sorted(self._values)
