"""Temporary files and directories for exercising the completion engine."""

from __future__ import annotations

import os
import shutil
import tempfile
import threading
import weakref
from pathlib import Path


def tmpname() -> str:
    """A temporary-file name prefix derived from the current thread's name."""
    name = threading.current_thread().name.replace("::", "-")
    return f"rustsense-{name}"


def _remove_file(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass


class TmpFile:
    """A file holding ``src`` that is removed when closed or collected.

    By default it lives in the system temporary directory under :func:`tmpname`.
    """

    def __init__(self, src: str, *, path: str | os.PathLike[str] | None = None) -> None:
        target = Path(tempfile.gettempdir()) / tmpname() if path is None else Path(path)
        with open(target, "xb") as fh:
            fh.write(src.encode("utf-8"))
        self._path = target
        self._finalizer = weakref.finalize(self, _remove_file, target)

    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Remove the file."""
        self._finalizer()

    def __enter__(self) -> TmpFile:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"TmpFile: {self._path!s}"


class TmpDir:
    """A temporary directory, or a view of an existing one.

    A directory this object created is removed when cleaned up or collected;
    a directory that already existed is left alone.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            self._path = Path(tempfile.mkdtemp(prefix=tmpname()))
            self._finalizer: weakref.finalize | None = weakref.finalize(
                self, shutil.rmtree, self._path, True
            )
        else:
            self._path = Path(path)
            self._finalizer = None

    @classmethod
    def _owning(cls, path: Path) -> TmpDir:
        path.mkdir()
        tmp = cls(path)
        tmp._finalizer = weakref.finalize(tmp, shutil.rmtree, path, True)
        return tmp

    def nested_dir(self, dir_name: str) -> TmpDir:
        """A directory ``dir_name`` inside this one, created if missing."""
        new_path = self._path / dir_name
        if new_path.exists():
            return TmpDir(new_path)
        return TmpDir._owning(new_path)

    def write_file(self, file_name: str, src: str) -> TmpFile:
        """Create ``file_name`` in this directory holding ``src``."""
        return TmpFile(src, path=self._path / file_name)

    def path(self) -> Path:
        return self._path

    def cleanup(self) -> None:
        """Remove the directory if this object created it."""
        if self._finalizer is not None:
            self._finalizer()

    def __enter__(self) -> TmpDir:
        return self

    def __exit__(self, *exc: object) -> None:
        self.cleanup()

    def __fspath__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"TmpDir: {self._path!s}"


def get_pos_and_source(src: str) -> tuple[int, str]:
    """Split a source marked with ``~`` into the mark's byte offset and clean text."""
    index = src.find("~")
    if index == -1:
        raise ValueError("source has no '~' marker")
    point = len(src[:index].encode("utf-8"))
    return point, src.replace("~", "")