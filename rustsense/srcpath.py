"""Locating the source tree of the Rust standard library."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

PATH_SEP = os.pathsep

_DEFAULT_PATHS = ("/usr/local/src/rust/src", "/usr/src/rust/src")

_EXAMPLE_PATHS = (
    '"/home/foouser/src/rust/library" '
    '(or  "/home/foouser/src/rust/src" in older toolchains)'
)


class RustSrcPathError(Exception):
    """The standard library source tree could not be found."""

    path: Path | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RustSrcPathError):
            return NotImplemented
        return type(self) is type(other) and self.path == other.path

    def __hash__(self) -> int:
        return hash((type(self), self.path))


class RustSrcPathMissing(RustSrcPathError):
    """No candidate location was found at all."""

    def __str__(self) -> str:
        return (
            "RUST_SRC_PATH environment variable must be set to point to the "
            f"src directory of a rust checkout. E.g. {_EXAMPLE_PATHS}"
        )


class RustSrcPathDoesNotExist(RustSrcPathError):
    """The candidate directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.path = Path(path)

    def __str__(self) -> str:
        return (
            "can't find the directory pointed to by the RUST_SRC_PATH "
            f'variable "{self.path}". Try using an absolute fully qualified '
            "path and make sure it points to the src directory of a rust "
            f"checkout - e.g. {_EXAMPLE_PATHS}."
        )


class NotRustSourceTree(RustSrcPathError):
    """The candidate directory exists but holds no standard library."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.path = Path(path)

    def __str__(self) -> str:
        return (
            "Unable to find libstd under RUST_SRC_PATH. N.B. RUST_SRC_PATH "
            "variable needs to point to the *src* directory inside a rust "
            f'checkout e.g. {_EXAMPLE_PATHS}. Current value "{self.path}"'
        )


def check_rust_sysroot() -> Path | None:
    """Ask ``rustc`` for its sysroot and return the bundled source tree, if any."""
    try:
        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
    except OSError:
        return None
    try:
        text = output.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None
    sysroot = Path(text.strip())
    for sub in ("lib/rustlib/src/rust/library", "lib/rustlib/src/rust/src"):
        candidate = sysroot / sub
        if candidate.exists():
            return candidate
    return None


def validate_rust_src_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` if it holds the standard library source, else raise."""
    path = Path(path)
    if not path.exists():
        raise RustSrcPathDoesNotExist(path)
    if (path / "libstd").exists() or (path / "std" / "src").exists():
        return path
    raise NotRustSourceTree(path / "libstd")


def get_rust_src_path() -> Path:
    """Find the standard library source tree.

    ``RUST_SRC_PATH`` is tried first, then the ``rustc`` sysroot, then a few
    well-known default locations.
    """
    log.debug("Getting rust source path. Trying env var RUST_SRC_PATH.")
    srcpaths = os.environ.get("RUST_SRC_PATH", "")
    if srcpaths:
        return validate_rust_src_path(srcpaths.split(PATH_SEP)[0])

    log.debug("Trying rustc --print sysroot.")
    sysroot_path = check_rust_sysroot()
    if sysroot_path is not None:
        return validate_rust_src_path(sysroot_path)

    log.debug("Trying default paths.")
    for default in _DEFAULT_PATHS:
        try:
            return validate_rust_src_path(default)
        except RustSrcPathError:
            continue

    log.warning("Rust stdlib source path not found!")
    raise RustSrcPathMissing()