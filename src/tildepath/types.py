"""The types module contains common type annotation definitions."""

import os
from pathlib import PurePath
import typing as t

from typing_extensions import Literal


StrPath = t.Union[str, PurePath, "os.PathLike[str]"]
HomedirStrategy = Literal["os", "compat"]
HomedirLookupFn = t.Callable[[], t.Optional[str]]

HOMEDIR_STRATEGIES: t.Tuple[str, ...] = t.get_args(HomedirStrategy)
