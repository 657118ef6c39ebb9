"""Merge and refresh Artifact Registry entries in netrc file content.

Both operations take the whole file as a string and return the new string.
They never touch the filesystem beyond reading a JSON key, so a failure
leaves the caller with the content it started from.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from . import auth, codec, constants
from .models import Entry, HostPattern, parse_locations

logger = logging.getLogger(__name__)


def refresh(netrc: str, token: str) -> str:
    """Update the OAuth token of every Artifact Registry Go token entry.

    JSON key entries and entries for other hosts are left untouched.
    """
    token = token.strip()
    count = 0
    placeholders = 0

    def _replace(match) -> str:
        nonlocal count, placeholders
        entry = codec.entry_from_match(match)
        count += 1
        if entry.is_placeholder:
            placeholders += 1
        # Render without the trailing newline; the match stops at end of line.
        return codec.render_entry(Entry.token(entry.host, token))[:-1]

    refreshed = codec.TOKEN_ENTRY_RE.sub(_replace, netrc)
    logger.info("refreshed %d token entries (%d placeholders filled)", count, placeholders)
    return refreshed


def append_entry(netrc: str, block: str) -> str:
    """Append ``block`` so that exactly one blank line precedes it."""
    body = netrc.rstrip("\n")
    if not body:
        return block
    return body + "\n\n" + block


def add_configs(
    netrc: str,
    locations: Iterable[str],
    host_pattern: str = constants.DEFAULT_HOST_PATTERN,
    json_key_path: Optional[str | Path] = None,
) -> str:
    """Add a config for every new location in ``locations``.

    Without ``json_key_path`` the new entries carry the OAuth token
    placeholder that :func:`refresh` fills in later. A location whose machine
    line already exists is skipped with a warning.
    """
    pattern = HostPattern.parse(host_pattern)
    wanted = parse_locations(locations)
    encoded_key: Optional[str] = None

    for location in wanted:
        host = pattern.host_for(location)
        if codec.has_machine(netrc, host):
            logger.warning("machine %s is already in the .netrc file, skipping", host)
            continue

        if json_key_path:
            if encoded_key is None:
                encoded_key = auth.encode_json_key(json_key_path)
            block = codec.json_key_entry(host, encoded_key)
        else:
            block = codec.token_placeholder(host)
        netrc = append_entry(netrc, block)
        logger.info("added machine %s", host)

    return netrc
