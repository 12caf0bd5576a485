from __future__ import annotations

import posixpath

from env_wrapper.services.filesystem.interface import FileSystemInterface


def _normalize(path: str) -> str:
    return posixpath.normpath(path)


class MemoryFileSystem(FileSystemInterface):
    """In-memory file tree for unit testing.

    Directories are created implicitly for every written file. Paths passed to
    :meth:`deny` raise ``PermissionError`` on read or listing, to exercise the
    error paths of callers. Denied paths also raise from :meth:`exists`, like an
    unreachable path on disk.
    """

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        self._denied: set[str] = set()

    def write(self, path: str, data: bytes | str) -> None:
        path = _normalize(path)
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._files[path] = data
        self._add_parents(path)

    def mkdir(self, path: str) -> None:
        path = _normalize(path)
        self._dirs.add(path)
        self._add_parents(path)

    def deny(self, path: str) -> None:
        self._denied.add(_normalize(path))

    def exists(self, path: str) -> bool:
        path = _normalize(path)
        self._check_access(path)
        return path in self._files or path in self._dirs

    def list_directory(self, path: str) -> list[str]:
        path = _normalize(path)
        self._check_access(path)
        if path in self._files:
            raise NotADirectoryError(f"Not a directory: {path}")
        if path not in self._dirs:
            raise FileNotFoundError(f"Directory not found: {path}")
        entries = [p for p in (*self._files, *self._dirs) if p != path and posixpath.dirname(p) == path]
        return sorted(posixpath.basename(p) for p in entries)

    def is_file(self, path: str) -> bool:
        return _normalize(path) in self._files

    def size(self, path: str) -> int:
        path = _normalize(path)
        if path in self._dirs:
            return 0
        if path not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return len(self._files[path])

    def read_text(self, path: str) -> str:
        path = _normalize(path)
        self._check_access(path)
        if path in self._dirs:
            raise IsADirectoryError(f"Is a directory: {path}")
        if path not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[path].decode("utf-8")

    def _check_access(self, path: str) -> None:
        if path in self._denied:
            raise PermissionError(f"Permission denied: {path}")

    def _add_parents(self, path: str) -> None:
        parent = posixpath.dirname(path)
        while parent and parent not in self._dirs:
            self._dirs.add(parent)
            parent = posixpath.dirname(parent)
