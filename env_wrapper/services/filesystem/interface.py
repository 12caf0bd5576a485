from abc import ABC, abstractmethod


class FileSystemInterface(ABC):
    """Read-only view of a directory tree, as needed by the secrets scan."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Whether *path* exists. May raise OSError when it cannot be checked."""
        ...

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """Return the sorted entry names directly under *path*. Raises OSError on failure."""
        ...

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """True only for regular files (symlinks followed). False for directories, FIFOs and sockets."""
        ...

    @abstractmethod
    def size(self, path: str) -> int:
        """Size of the file at *path* in bytes. Raises OSError on failure."""
        ...

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read the whole file as UTF-8. Raises OSError if missing or unreadable."""
        ...
