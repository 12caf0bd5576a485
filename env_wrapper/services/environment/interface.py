from abc import ABC, abstractmethod


class EnvironmentInterface(ABC):
    """Read access to a process-style environment variable table."""

    @abstractmethod
    def lookup(self, name: str) -> str | None:
        """Return the value stored under exactly *name*, or None if unset."""
        ...
