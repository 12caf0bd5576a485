"""Root-level pytest fixtures: in-memory environment, file tree and logger."""

from __future__ import annotations

import pytest


@pytest.fixture
def memory_env():
    from env_wrapper.services.environment.memory_environment import MemoryEnvironment

    return MemoryEnvironment()


@pytest.fixture
def memory_fs():
    from env_wrapper.services.filesystem.memory_filesystem import MemoryFileSystem

    return MemoryFileSystem()


@pytest.fixture
def memory_logger():
    from env_wrapper.services.logger.memory_logger import MemoryLogger

    return MemoryLogger()


@pytest.fixture
def make_wrapper(memory_env, memory_fs, memory_logger):
    """Build an accessor over the memory fakes, scanning ``/run/secrets`` by default."""
    from env_wrapper.wrapper import EnvWrapper

    def _make(secrets_dir: str = "/run/secrets") -> EnvWrapper:
        return EnvWrapper.new(
            secrets_dir,
            environment=memory_env,
            filesystem=memory_fs,
            logger=memory_logger,
        )

    return _make
