"""Typed access to configuration stored in environment variables or secret files.

A value is looked up first in the secrets snapshot, then in the live process
environment, then the caller's default is returned. Names are case-insensitive
and uppercased before either lookup. Empty values count as missing at every
step, and no read ever raises for a missing or malformed value.
"""

from __future__ import annotations

import re

from env_wrapper.config.settings import resolve_log_impl, resolve_secrets_dir
from env_wrapper.services.environment.interface import EnvironmentInterface
from env_wrapper.services.environment.os_environment import OsEnvironment
from env_wrapper.services.filesystem.interface import FileSystemInterface
from env_wrapper.services.filesystem.local_filesystem import LocalFileSystem
from env_wrapper.services.logger.factory import create_logger
from env_wrapper.services.logger.interface import LoggingInterface
from env_wrapper.services.secrets.directory_secrets import DirectorySecrets
from env_wrapper.services.secrets.interface import SecretsInterface

# Go ParseBool literals, but matched case-insensitively ("tRuE" is accepted).
_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class EnvWrapper:
    """Reads configuration values from a secrets snapshot and the environment."""

    def __init__(
        self,
        secrets: SecretsInterface,
        environment: EnvironmentInterface,
        secrets_dir: str = "",
    ) -> None:
        self._secrets = secrets
        self._environment = environment
        self._secrets_dir = secrets_dir

    @classmethod
    def new(
        cls,
        secrets_dir: str = "",
        environment: EnvironmentInterface | None = None,
        filesystem: FileSystemInterface | None = None,
        logger: LoggingInterface | None = None,
    ) -> EnvWrapper:
        """Scan *secrets_dir* (or the default directory when empty) and return a ready accessor."""
        environment = environment or OsEnvironment()
        if logger is None:
            logger = create_logger(resolve_log_impl(environment))
        directory = resolve_secrets_dir(secrets_dir, environment)
        secrets = DirectorySecrets(directory, filesystem or LocalFileSystem(), logger)
        return cls(secrets, environment, directory)

    @property
    def secrets_dir(self) -> str:
        return self._secrets_dir

    def secret_keys(self) -> list[str]:
        """Names loaded from the secrets directory. Values are not exposed here."""
        return self._secrets.keys()

    def get_string(self, name: str) -> str:
        return self.get_string_with_default(name, "")

    def get_string_with_default(self, name: str, default: str) -> str:
        key = name.upper()
        secret = self._secrets.get(key)
        if secret is not None and secret.strip():
            return secret.strip()
        value = self._environment.lookup(key)
        if value is not None and value.strip():
            return value.strip()
        return default

    def get_bool(self, name: str) -> bool:
        return self.get_bool_with_default(name, False)

    def get_bool_with_default(self, name: str, default: bool) -> bool:
        value = self.get_string(name).lower()
        if value in _TRUE_LITERALS:
            return True
        if value in _FALSE_LITERALS:
            return False
        return default

    def get_int(self, name: str) -> int:
        return self.get_int_with_default(name, 0)

    def get_int_with_default(self, name: str, default: int) -> int:
        value = self.get_string(name)
        if not _INT_PATTERN.fullmatch(value):
            return default
        try:
            return int(value)
        except ValueError:
            # past the interpreter's int digit limit
            return default

    def get_string_array(self, name: str) -> list[str]:
        return self.get_string_array_separated_by(name, " ")

    def get_string_array_separated_by(self, name: str, separator: str) -> list[str]:
        """Split the value on the literal *separator*, trimming parts and dropping empty ones."""
        value = self.get_string(name)
        if not value:
            return []
        # an empty separator splits into single characters
        pieces = value.split(separator) if separator else list(value)
        parts = (part.strip() for part in pieces)
        return [part for part in parts if part]


def default() -> EnvWrapper:
    """Accessor over the default secrets directory."""
    return EnvWrapper.new("")


def new(secrets_dir: str) -> EnvWrapper:
    """Accessor over a custom secrets directory."""
    return EnvWrapper.new(secrets_dir)
