"""Domain models for the netrc service layer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from . import constants
from .errors import InvalidHostPatternError, InvalidLocationError, MissingLocationsError


class EntryKind(str, Enum):
    TOKEN = "token"
    KEY = "key"


@dataclass(frozen=True, slots=True)
class Entry:
    """One ``machine``/``login``/``password`` stanza of a netrc file."""

    host: str
    login: str
    secret: str

    @classmethod
    def token(cls, host: str, secret: str = constants.TOKEN_PLACEHOLDER) -> "Entry":
        return cls(host=host, login=constants.TOKEN_LOGIN, secret=secret)

    @classmethod
    def json_key(cls, host: str, base64_key: str) -> "Entry":
        return cls(host=host, login=constants.KEY_LOGIN, secret=base64_key)

    @property
    def kind(self) -> Optional[EntryKind]:
        if self.login == constants.TOKEN_LOGIN:
            return EntryKind.TOKEN
        if self.login == constants.KEY_LOGIN:
            return EntryKind.KEY
        return None

    @property
    def is_placeholder(self) -> bool:
        return self.kind is EntryKind.TOKEN and self.secret == constants.TOKEN_PLACEHOLDER


@dataclass(frozen=True, slots=True)
class HostPattern:
    """Template turning a location such as ``us-west1`` into a hostname."""

    template: str = constants.DEFAULT_HOST_PATTERN

    @classmethod
    def parse(cls, template: str) -> "HostPattern":
        count = template.count(constants.HOST_PLACEHOLDER)
        if count != 1:
            raise InvalidHostPatternError(
                f"host pattern must have one and only one {constants.HOST_PLACEHOLDER} in it",
                metadata={"host_pattern": template, "placeholders": count},
            )
        return cls(template=template)

    def host_for(self, location: str) -> str:
        # Plain replacement so stray "%" characters in a pattern are kept as-is.
        return self.template.replace(constants.HOST_PLACEHOLDER, location, 1)


def validate_location(location: str) -> str:
    if "://" in location:
        raise InvalidLocationError(
            "location has to be a Google Cloud region, e.g. 'us-central1'",
            metadata={"location": location},
        )
    return location


def parse_locations(raw: str | Iterable[str]) -> List[str]:
    """Split a comma-separated location list, dropping blanks.

    Accepts either the raw command line value or an already split iterable.
    Order is preserved and every location is validated.
    """
    items = raw.split(",") if isinstance(raw, str) else list(raw)
    locations = [validate_location(item.strip()) for item in items if item and item.strip()]
    if not locations:
        raise MissingLocationsError("at least one location is required")
    return locations
