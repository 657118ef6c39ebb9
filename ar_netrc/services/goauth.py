"""Authentication responses for Go's ``GOAUTH`` command protocol.

Go runs the configured command and reads blocks of
``<url>\\n\\n<header lines>\\n\\n`` from its stdout. Nothing here writes to
the netrc file.
"""
from __future__ import annotations

import base64
from pathlib import Path
from typing import Optional

from . import auth, constants
from .models import HostPattern, validate_location


def location_url(location: str, host_pattern: str = constants.DEFAULT_HOST_PATTERN) -> str:
    return f"https://{HostPattern.parse(host_pattern).host_for(location)}"


def basic_auth_header(username: str, password: str) -> str:
    encoded = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {encoded}"


def key_auth_header(
    json_key_path: Optional[str | Path] = None,
    timeout: float = constants.DEFAULT_TIMEOUT,
) -> str:
    if json_key_path:
        return basic_auth_header(constants.KEY_LOGIN, auth.encode_json_key(json_key_path))
    return basic_auth_header(constants.TOKEN_LOGIN, auth.token(timeout))


def goauth_response(
    location: str,
    host_pattern: str = constants.DEFAULT_HOST_PATTERN,
    json_key_path: Optional[str | Path] = None,
    timeout: float = constants.DEFAULT_TIMEOUT,
) -> str:
    validate_location(location)
    url = location_url(location, host_pattern)
    header = key_auth_header(json_key_path, timeout)
    return f"{url}\n\nAuthorization: {header}\n\n"
