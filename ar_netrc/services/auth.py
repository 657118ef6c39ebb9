"""Ways to retrieve Google Cloud credentials for Artifact Registry."""
from __future__ import annotations

import base64
import logging
import subprocess
import sys
import time
from pathlib import Path
from typing import Optional

import google.auth
import google.auth.exceptions
import requests
from google.auth.transport.requests import Request

from . import constants
from .errors import CredentialResolutionError, KeyFileUnreadableError

logger = logging.getLogger(__name__)


class _TimeoutRequest(Request):
    """``google-auth`` transport that applies a default timeout to every call."""

    def __init__(self, timeout: float, session: Optional[requests.Session] = None) -> None:
        super().__init__(session=session)
        self._timeout = timeout

    def __call__(self, url, method="GET", body=None, headers=None, timeout=None, **kwargs):
        return super().__call__(
            url,
            method=method,
            body=body,
            headers=headers,
            timeout=timeout if timeout is not None else self._timeout,
            **kwargs,
        )


def application_default_token(timeout: float = constants.DEFAULT_TIMEOUT) -> str:
    """Return an access token minted from Application Default Credentials."""
    credentials, project = google.auth.default(scopes=[constants.CLOUD_PLATFORM_SCOPE])
    logger.debug("found application default credentials (project=%s)", project)
    credentials.refresh(_TimeoutRequest(timeout))
    if not credentials.token:
        raise google.auth.exceptions.RefreshError("application default credentials returned no token")
    return credentials.token


def gcloud_command() -> str:
    if sys.platform.startswith("win"):
        return constants.GCLOUD_COMMAND_WINDOWS
    return constants.GCLOUD_COMMAND


def gcloud_token(timeout: float = constants.DEFAULT_TIMEOUT) -> str:
    """Return the token of the user logged into gcloud.

    Runs ``gcloud auth print-access-token`` in a separate process.
    """
    result = subprocess.run(
        [gcloud_command(), "auth", "print-access-token"],
        capture_output=True,
        text=True,
        timeout=timeout,
        check=True,
    )
    token = result.stdout.strip()
    if not token:
        raise ValueError("gcloud printed an empty access token")
    return token


def token(timeout: float = constants.DEFAULT_TIMEOUT) -> str:
    """Return an OAuth2 access token from the environment.

    Application Default Credentials are tried first; if they are missing or
    cannot be refreshed, the credentials of the user logged into gcloud are
    used. Both attempts share one deadline.
    """
    deadline = time.monotonic() + timeout
    try:
        return application_default_token(timeout)
    except (google.auth.exceptions.GoogleAuthError, requests.RequestException) as adc_exc:
        adc_error = adc_exc
        logger.debug("application default credentials unavailable: %s", adc_exc)

    remaining = max(deadline - time.monotonic(), 0.0)
    try:
        return gcloud_token(remaining)
    except (OSError, subprocess.SubprocessError, ValueError) as gcloud_exc:
        gcloud_message = _gcloud_error_message(gcloud_exc)
        raise CredentialResolutionError(
            f"can't find either Application Default Credentials: {adc_error} "
            f"or gcloud credentials: {gcloud_message}",
            metadata={
                "application_default": str(adc_error),
                "gcloud": gcloud_message,
            },
        ) from gcloud_exc


def _gcloud_error_message(exc: Exception) -> str:
    stderr = getattr(exc, "stderr", None) or ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip() or str(exc)


def encode_json_key(key_path: str | Path) -> str:
    """Base64 encode a service account JSON key file."""
    try:
        data = Path(key_path).read_bytes()
    except OSError as exc:
        raise KeyFileUnreadableError(
            f"cannot read JSON key file {key_path}",
            metadata={"path": str(key_path), "error": str(exc)},
        ) from exc
    return base64.b64encode(data).decode("ascii")
