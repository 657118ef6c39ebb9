"""Service-layer exports."""
from . import auth, codec, goauth, reconcile
from .errors import (
    CredentialResolutionError,
    InvalidHostPatternError,
    InvalidLocationError,
    KeyFileUnreadableError,
    MissingLocationsError,
    NetrcError,
    StoreLoadError,
    StoreLocateError,
    StorePersistError,
)
from .machine import Machine
from .models import Entry, EntryKind, HostPattern
from .netrc_store import NetrcStore

__all__ = [
    "CredentialResolutionError",
    "Entry",
    "EntryKind",
    "HostPattern",
    "InvalidHostPatternError",
    "InvalidLocationError",
    "KeyFileUnreadableError",
    "Machine",
    "MissingLocationsError",
    "NetrcError",
    "NetrcStore",
    "StoreLoadError",
    "StoreLocateError",
    "StorePersistError",
    "auth",
    "codec",
    "goauth",
    "reconcile",
]
