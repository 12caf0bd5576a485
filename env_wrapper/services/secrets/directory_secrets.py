"""Secrets loaded once from a directory of ``ENV_<NAME>`` files.

This is the layout Docker and Kubernetes use for mounted secrets: one file per
value, the file name carrying the variable name. Only regular, non-empty files
whose name starts with ``ENV_`` are picked up; directories, FIFOs and sockets
are skipped. The prefix is stripped and the remainder uppercased to form the
key; the file content, trimmed, is the value.

The scan never fails. A missing directory yields no secrets, and unreadable
entries are skipped with a warning.
"""

from __future__ import annotations

from types import MappingProxyType

from env_wrapper.config.settings import SECRET_PREFIX
from env_wrapper.services.filesystem.interface import FileSystemInterface
from env_wrapper.services.logger.interface import LoggingInterface
from env_wrapper.services.secrets.interface import SecretsInterface


class DirectorySecrets(SecretsInterface):
    """Immutable snapshot of the secret files found in *directory* at construction."""

    def __init__(
        self,
        directory: str,
        filesystem: FileSystemInterface,
        logger: LoggingInterface,
    ) -> None:
        self._directory = directory
        self._fs = filesystem
        self._log = logger
        self._snapshot = MappingProxyType(self._scan())

    @property
    def directory(self) -> str:
        return self._directory

    def get(self, key: str) -> str | None:
        return self._snapshot.get(key)

    def keys(self) -> list[str]:
        return sorted(self._snapshot)

    def _scan(self) -> dict[str, str]:
        try:
            if not self._fs.exists(self._directory):
                self._log.debug("Secrets directory not found", path=self._directory)
                return {}
            names = self._fs.list_directory(self._directory)
        except OSError as exc:
            self._log.warn("Cannot list secrets directory", path=self._directory, error=str(exc))
            return {}

        snapshot: dict[str, str] = {}
        for name in names:
            key = name[len(SECRET_PREFIX):].upper()
            if not name.startswith(SECRET_PREFIX) or not key:
                self._log.debug("Skipping entry without secret prefix", name=name)
                continue
            value = self._read_entry(f"{self._directory}/{name}")
            if value is not None:
                snapshot[key] = value
                self._log.debug("Loaded secret", key=key)

        self._log.info("Secrets loaded", path=self._directory, count=len(snapshot))
        return snapshot

    def _read_entry(self, path: str) -> str | None:
        """Trimmed content of a regular non-empty file, else None."""
        try:
            if not self._fs.is_file(path):
                self._log.debug("Skipping entry that is not a regular file", path=path)
                return None
            if self._fs.size(path) == 0:
                self._log.debug("Skipping empty secret file", path=path)
                return None
            return self._fs.read_text(path).strip()
        except (OSError, UnicodeDecodeError) as exc:
            self._log.warn("Cannot read secret file", path=path, error=str(exc))
            return None
