"""
The tildepath package.

Expand a leading ``~`` in file system paths into the current user's home directory.
"""

__version__ = "0.1.0"

from .home import (
    HOMEDIR_STRATEGY,
    HomeDirEmptyError,
    HomeDirError,
    HomeDirNotFoundError,
    homedir,
)
from .path import TildePath, expand, expand_with
