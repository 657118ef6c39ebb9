"""Machine-specific helpers used to find the netrc file."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from . import constants


class Machine:
    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def home_directory(self) -> str:
        return str(Path.home())

    def netrc_override(self) -> Optional[str]:
        return self._environ.get(constants.NETRC_ENV) or None
