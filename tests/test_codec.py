"""Tests for rendering and matching netrc entries."""

from __future__ import annotations

import pytest

from ar_netrc.services import codec
from ar_netrc.services.models import Entry, EntryKind


class TestRender:
    def test_render_three_lines(self):
        assert codec.render("us-west1-go.pkg.dev", "oauth2accesstoken", "tok") == (
            "machine us-west1-go.pkg.dev\nlogin oauth2accesstoken\npassword tok\n"
        )

    def test_token_placeholder(self):
        assert codec.token_placeholder("us-west1-go.pkg.dev") == (
            "machine us-west1-go.pkg.dev\nlogin oauth2accesstoken\npassword <oauth2accesstoken>\n"
        )

    def test_json_key_entry(self):
        assert codec.json_key_entry("us-west1-go.pkg.dev", "a2V5") == (
            "machine us-west1-go.pkg.dev\nlogin _json_key_base64\npassword a2V5\n"
        )


class TestFindTokenEntries:
    def test_round_trip(self):
        text = codec.render("europe-west4-go.pkg.dev", "oauth2accesstoken", "ya29.secret")

        entries = codec.find_token_entries(text)

        assert entries == [Entry.token("europe-west4-go.pkg.dev", "ya29.secret")]
        assert entries[0].kind is EntryKind.TOKEN

    def test_finds_every_service_entry_in_order(self):
        text = (
            codec.token_placeholder("us-west1-go.pkg.dev")
            + "\n"
            + codec.json_key_entry("asia-east1-go.pkg.dev", "a2V5")
            + "\n"
            + codec.render("another-env-us-east1-go.pkg.dev", "oauth2accesstoken", "old")
        )

        entries = codec.find_token_entries(text)

        assert [e.host for e in entries] == ["us-west1-go.pkg.dev", "another-env-us-east1-go.pkg.dev"]
        assert entries[0].is_placeholder
        assert not entries[1].is_placeholder

    @pytest.mark.parametrize(
        "text",
        [
            "machine example.com\nlogin oauth2accesstoken\npassword tok\n",
            "machine us-west1-go.pkg.dev\nlogin _json_key_base64\npassword a2V5\n",
            "machine us-west1-go.pkg.dev.example.com\nlogin oauth2accesstoken\npassword tok\n",
            "# machine us-west1-go.pkg.dev\nlogin oauth2accesstoken\npassword tok\n",
        ],
    )
    def test_ignores_foreign_entries(self, text):
        assert codec.find_token_entries(text) == []

    def test_password_without_trailing_newline(self):
        text = "machine us-west1-go.pkg.dev\nlogin oauth2accesstoken\npassword tok"

        assert codec.find_token_entries(text) == [Entry.token("us-west1-go.pkg.dev", "tok")]


class TestHasMachine:
    def test_exact_line(self):
        assert codec.has_machine(codec.token_placeholder("us-west1-go.pkg.dev"), "us-west1-go.pkg.dev")

    def test_host_that_is_a_substring_of_another(self):
        text = codec.token_placeholder("another-us-west1-go.pkg.dev")

        assert not codec.has_machine(text, "us-west1-go.pkg.dev")

    def test_host_prefix_of_another(self):
        text = codec.token_placeholder("us-west1-go.pkg.dev.internal")

        assert not codec.has_machine(text, "us-west1-go.pkg.dev")

    def test_dots_are_literal(self):
        text = codec.token_placeholder("us-west1-goXpkgXdev")

        assert not codec.has_machine(text, "us-west1-go.pkg.dev")
