from abc import ABC, abstractmethod


class SecretsInterface(ABC):
    """Provides access to secret values keyed by normalized (uppercase) name."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get a secret value by key. Returns None if not found."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """Sorted names of all known secrets."""
        ...
