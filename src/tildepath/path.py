"""The path module contains utilities for expanding a leading tilde in OS paths."""

from pathlib import Path, PurePath
import typing as t

from .home import homedir
from .types import StrPath


TILDE = "~"

P = t.TypeVar("P", bound=PurePath)


@t.overload
def expand_with(path: P, home: StrPath) -> P:
    ...  # pragma: no cover


@t.overload
def expand_with(path: StrPath, home: StrPath) -> Path:
    ...  # pragma: no cover


def expand_with(path, home):
    """
    Return `path` with a leading ``~`` component replaced by `home`.

    Only a whole ``~`` component is expanded. Paths like ``~user/dir`` are returned unchanged since
    ``~user`` is a different component. No I/O is performed.

    Args:
        path: Path to expand. When it is a ``PurePath``, it is returned as-is if there is nothing to
            expand, otherwise a new path of the same class is returned.
        home: Home directory to substitute for ``~``.
    """
    if not isinstance(path, PurePath):
        path = Path(path)

    parts = path.parts
    if not parts or parts[0] != TILDE:
        return path

    return type(path)(home, *parts[1:])


@t.overload
def expand(path: P) -> P:
    ...  # pragma: no cover


@t.overload
def expand(path: StrPath) -> Path:
    ...  # pragma: no cover


def expand(path):
    """
    Return `path` with a leading ``~`` component replaced by the current user's home directory.

    The home directory is resolved on every call, even when `path` has no leading ``~``. When
    expanding several paths, call :func:`.homedir` once and pass it to :func:`.expand_with`
    instead.

    Args:
        path: Path to expand.

    Raises:
        HomeDirNotFoundError: When no home directory is available.
        HomeDirEmptyError: When the home directory is the empty path.
    """
    return expand_with(path, homedir())


class TildePath(type(Path())):  # type: ignore
    """``Path`` with methods for expanding a leading ``~`` component."""

    def expand_with(self, home: StrPath) -> "TildePath":
        """Return path with a leading ``~`` replaced by `home`. See :func:`.expand_with`."""
        return expand_with(self, home)

    def expand(self) -> "TildePath":
        """Return path with a leading ``~`` replaced by the current user's home directory. See
        :func:`.expand`."""
        return expand(self)
