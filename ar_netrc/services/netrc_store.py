"""Locate, read and persist the user's netrc file."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from . import constants
from .errors import StoreLoadError, StoreLocateError, StorePersistError
from .machine import Machine

logger = logging.getLogger(__name__)


class NetrcStore:
    """Stores the netrc content at ``path`` and keeps one backup beside it."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @classmethod
    def locate(cls, machine: Optional[Machine] = None) -> "NetrcStore":
        """Find the netrc file from ``$NETRC`` or the home directory.

        ``$NETRC`` may name the directory holding ``.netrc`` or the file
        itself. The directory has to exist; the file does not.
        """
        machine = machine or Machine()
        base = machine.netrc_override()
        if base is None:
            try:
                base = machine.home_directory()
            except (RuntimeError, KeyError) as exc:
                raise StoreLocateError("cannot determine the home directory") from exc

        path = Path(base)
        if not base.endswith(constants.NETRC_FILENAME):
            path = path / constants.NETRC_FILENAME

        if not path.parent.is_dir():
            raise StoreLocateError(
                f".netrc directory does not exist: {path.parent}",
                metadata={"path": str(path)},
            )
        return cls(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def backup_path(self) -> Path:
        return self._path.with_name(self._path.name + constants.BACKUP_SUFFIX)

    def load(self) -> str:
        """Return the file content, or an empty string if there is no file yet.

        Bytes that are not valid UTF-8 are carried through as surrogate escapes
        so that :meth:`persist` writes them back unchanged.
        """
        try:
            with self._path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as handle:
                return handle.read()
        except FileNotFoundError:
            logger.debug("%s does not exist, starting from an empty file", self._path)
            return ""
        except OSError as exc:
            raise StoreLoadError(
                f"cannot load .netrc file {self._path}",
                metadata={"error": str(exc)},
            ) from exc

    def persist(self, content: str) -> None:
        """Move the current file to the backup name, then write ``content``.

        The previous backup is removed first. The rename happens before the
        new content is written so the old content always survives on disk.
        """
        backup = self.backup_path
        try:
            backup.unlink(missing_ok=True)
        except OSError as exc:
            raise StorePersistError(f"cannot delete {backup}", metadata={"error": str(exc)}) from exc

        if self._path.exists():
            try:
                os.replace(self._path, backup)
            except OSError as exc:
                raise StorePersistError(
                    f"rename {self._path.name} to {backup.name}",
                    metadata={"error": str(exc)},
                ) from exc
            logger.debug("backed up %s to %s", self._path, backup)

        try:
            fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, constants.NETRC_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise StorePersistError(
                f"write new {self._path.name}",
                metadata={"error": str(exc)},
            ) from exc
