import os
from pathlib import Path

from env_wrapper.services.filesystem.interface import FileSystemInterface


class LocalFileSystem(FileSystemInterface):
    """File system implementation backed by local disk."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def list_directory(self, path: str) -> list[str]:
        return sorted(os.listdir(path))

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def size(self, path: str) -> int:
        return Path(path).stat().st_size

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
