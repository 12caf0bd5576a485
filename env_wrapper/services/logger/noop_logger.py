from typing import Any

from env_wrapper.services.logger.interface import LoggingInterface


class NoopLogger(LoggingInterface):
    """Discards everything. Default for library use so imports stay quiet."""

    def debug(self, msg: str, **ctx: Any) -> None:
        pass

    def info(self, msg: str, **ctx: Any) -> None:
        pass

    def warn(self, msg: str, **ctx: Any) -> None:
        pass
