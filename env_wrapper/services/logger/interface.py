from abc import ABC, abstractmethod
from typing import Any


class LoggingInterface(ABC):
    """Receives diagnostics from the secrets scan. Context goes in keywords, never secret values."""

    @abstractmethod
    def debug(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def info(self, msg: str, **ctx: Any) -> None: ...

    @abstractmethod
    def warn(self, msg: str, **ctx: Any) -> None: ...
