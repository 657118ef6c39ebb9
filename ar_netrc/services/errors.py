"""Exception hierarchy for the netrc service layer."""

from __future__ import annotations

from typing import Any, Optional


class NetrcError(RuntimeError):
    """Base error that carries optional metadata about the failure."""

    def __init__(self, message: str, *, metadata: Optional[Any] = None) -> None:
        super().__init__(message)
        self.metadata = metadata


class CredentialResolutionError(NetrcError):
    """Neither Application Default Credentials nor gcloud produced a token."""


class KeyFileUnreadableError(NetrcError):
    pass


class StoreLocateError(NetrcError):
    pass


class StoreLoadError(NetrcError):
    pass


class StorePersistError(NetrcError):
    pass


class InvalidHostPatternError(NetrcError):
    pass


class InvalidLocationError(NetrcError):
    pass


class MissingLocationsError(NetrcError):
    pass
