from env_wrapper.services.logger.interface import LoggingInterface
from env_wrapper.services.logger.memory_logger import MemoryLogger
from env_wrapper.services.logger.noop_logger import NoopLogger
from env_wrapper.services.logger.pretty_logger import PrettyLogger

LOGGERS: dict[str, type[LoggingInterface]] = {
    "noop": NoopLogger,
    "pretty": PrettyLogger,
    "memory": MemoryLogger,
}


def create_logger(impl: str) -> LoggingInterface:
    """Build a fresh logger by implementation name (see ``LOGGERS``)."""
    cls = LOGGERS.get(impl)
    if cls is None:
        raise ValueError(f"Unknown logger implementation: '{impl}' (available: {', '.join(LOGGERS)})")
    return cls()
