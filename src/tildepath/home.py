"""The home module contains utilities for resolving the current user's home directory."""

import os
from pathlib import Path
import typing as t

from .types import HOMEDIR_STRATEGIES, HomedirLookupFn, HomedirStrategy


try:
    from pwd import getpwuid
except ImportError:  # pragma: no cover
    getpwuid = None  # type: ignore


HOMEDIR_STRATEGY_ENVVAR = "TILDEPATH_HOMEDIR"
DEFAULT_HOMEDIR_STRATEGY: HomedirStrategy = "os"

# Environment variable the interpreter reads first for the home directory.
OS_HOMEDIR_ENVVAR = "USERPROFILE" if os.name == "nt" else "HOME"

# Environment variables checked, in order, by the compat lookup.
COMPAT_HOMEDIR_ENVVARS = ("HOME", "USERPROFILE")


class HomeDirError(Exception):
    """General home directory error."""

    default_message = "home directory could not be resolved"

    def __init__(self, *args: t.Any):
        super().__init__(*(args or (self.default_message,)))


class HomeDirNotFoundError(HomeDirError):
    """Raised when the operating system does not provide any home directory for the current
    user."""

    default_message = "home directory not found"


class HomeDirEmptyError(HomeDirError):
    """Raised when the operating system provides a home directory that is the empty path."""

    default_message = "home directory is empty"


def homedir() -> Path:
    """
    Return current user's home directory as ``Path`` object.

    The lookup used is fixed at import time by the ``TILDEPATH_HOMEDIR`` environment variable
    (see :data:`HOMEDIR_STRATEGY`).

    Raises:
        HomeDirNotFoundError: When no home directory is available.
        HomeDirEmptyError: When the home directory is the empty path.
    """
    home = _lookup_homedir()

    if home is None:
        raise HomeDirNotFoundError()

    # Checked before conversion since Path("") is the same as Path(".").
    if not home:
        raise HomeDirEmptyError()

    return Path(home)


def _os_homedir() -> t.Optional[str]:
    """Return the home directory the way ``Path.home()`` finds it or ``None`` if not found.

    The environment value is returned verbatim since ``os.path.expanduser`` rewrites an empty
    ``HOME`` to the root directory.
    """
    if OS_HOMEDIR_ENVVAR in os.environ:
        return os.environ[OS_HOMEDIR_ENVVAR]

    home = os.path.expanduser("~")
    if home == "~":
        return None
    return home


def _compat_homedir() -> t.Optional[str]:
    """Return the home directory from the environment first, falling back to the user database, or
    ``None`` if not found.

    Environment values are returned verbatim so that an empty ``HOME`` is reported as empty.
    """
    for envvar in COMPAT_HOMEDIR_ENVVARS:
        if envvar in os.environ:
            return os.environ[envvar]

    if getpwuid is None:  # pragma: no cover
        return None

    try:
        return getpwuid(os.getuid()).pw_dir
    except KeyError:
        return None


def _get_homedir_strategy() -> HomedirStrategy:
    strategy = os.environ.get(HOMEDIR_STRATEGY_ENVVAR) or DEFAULT_HOMEDIR_STRATEGY
    if strategy not in HOMEDIR_STRATEGIES:
        raise ValueError(
            f"{HOMEDIR_STRATEGY_ENVVAR} must be one of {', '.join(HOMEDIR_STRATEGIES)},"
            f" not {strategy!r}"
        )
    return t.cast(HomedirStrategy, strategy)


HOMEDIR_LOOKUPS: t.Dict[str, HomedirLookupFn] = {
    "os": _os_homedir,
    "compat": _compat_homedir,
}

HOMEDIR_STRATEGY: HomedirStrategy = _get_homedir_strategy()
_lookup_homedir: HomedirLookupFn = HOMEDIR_LOOKUPS[HOMEDIR_STRATEGY]
