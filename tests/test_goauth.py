"""Tests for the GOAUTH helper."""

from __future__ import annotations

import base64
from unittest.mock import patch

import pytest

from ar_netrc.services import goauth
from ar_netrc.services.errors import InvalidLocationError


def _decode(header: str) -> str:
    assert header.startswith("Basic ")
    return base64.b64decode(header[len("Basic "):]).decode("utf-8")


class TestGoauth:
    def test_location_url(self):
        assert goauth.location_url("us-central1") == "https://us-central1-go.pkg.dev"

    def test_basic_auth_header(self):
        assert _decode(goauth.basic_auth_header("user", "pass")) == "user:pass"

    @patch("ar_netrc.services.goauth.auth.token", return_value="a-token")
    def test_default_credentials(self, mock_token):
        header = goauth.key_auth_header(timeout=7)

        assert _decode(header) == "oauth2accesstoken:a-token"
        mock_token.assert_called_once_with(7)

    def test_json_key(self, key_path):
        header = goauth.key_auth_header(key_path)

        assert _decode(header) == "_json_key_base64:ewogICAgInRlc3Qta2V5IjogInRlc3QtdmFsdWUiCn0="

    @patch("ar_netrc.services.goauth.auth.token", return_value="a-token")
    def test_response(self, mock_token):
        response = goauth.goauth_response("us-central1")

        assert response == (
            "https://us-central1-go.pkg.dev\n\nAuthorization: "
            + goauth.basic_auth_header("oauth2accesstoken", "a-token")
            + "\n\n"
        )

    @patch("ar_netrc.services.goauth.auth.token")
    def test_url_location_rejected(self, mock_token):
        with pytest.raises(InvalidLocationError):
            goauth.goauth_response("https://us-central1-go.pkg.dev")

        mock_token.assert_not_called()
