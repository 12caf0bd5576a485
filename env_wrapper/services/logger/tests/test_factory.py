import pytest

from env_wrapper.services.logger.factory import LOGGERS, create_logger
from env_wrapper.services.logger.memory_logger import MemoryLogger
from env_wrapper.services.logger.noop_logger import NoopLogger
from env_wrapper.services.logger.pretty_logger import PrettyLogger


def test_create_by_name():
    assert isinstance(create_logger("noop"), NoopLogger)
    assert isinstance(create_logger("pretty"), PrettyLogger)
    assert isinstance(create_logger("memory"), MemoryLogger)


def test_each_call_builds_a_new_logger():
    assert create_logger("memory") is not create_logger("memory")


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="Unknown logger implementation: 'loki' \\(available: noop, pretty, memory\\)"):
        create_logger("loki")


def test_registry_names():
    assert list(LOGGERS) == ["noop", "pretty", "memory"]
