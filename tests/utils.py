from contextlib import contextmanager
import os
import typing as t
from unittest import mock

import pytest


try:
    import pwd
except ImportError:  # pragma: no cover
    pwd = None  # type: ignore


requires_pwd = pytest.mark.skipif(pwd is None, reason="requires the pwd user database")


@contextmanager
def environ(
    env: t.Optional[t.Dict[str, str]] = None, *, unset: t.Iterable[str] = ()
) -> t.Iterator[t.Dict[str, str]]:
    """Context manager that sets `env` and removes `unset` environment variables on enter and
    restores the original environment on exit."""
    orig_env = os.environ.copy()

    for name in unset:
        os.environ.pop(name, None)

    if env:
        os.environ.update(env)

    try:
        yield os.environ.copy()
    finally:
        os.environ.clear()
        os.environ.update(orig_env)


@contextmanager
def patch_homedir_lookup(
    return_value: t.Optional[str] = None, *, new: t.Optional[t.Callable] = None
) -> t.Iterator[mock.MagicMock]:
    if new is not None:
        patched_lookup = mock.patch("tildepath.home._lookup_homedir", new)
    else:
        patched_lookup = mock.patch("tildepath.home._lookup_homedir", return_value=return_value)

    with patched_lookup as mocked_lookup:
        yield mocked_lookup


@contextmanager
def patch_user_database_missing() -> t.Iterator[None]:
    """Make the current uid missing from the user database for both the interpreter's lookup and the
    compat lookup."""
    missing = KeyError("getpwuid(): uid not found")

    with mock.patch("pwd.getpwuid", side_effect=missing), mock.patch(
        "tildepath.home.getpwuid", side_effect=missing
    ):
        yield


@contextmanager
def no_home_signal() -> t.Iterator[None]:
    """Remove every source of a home directory from the environment."""
    with environ(unset=("HOME", "USERPROFILE", "HOMEDRIVE", "HOMEPATH")):
        with patch_user_database_missing():
            yield
