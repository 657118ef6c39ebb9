"""Text form of netrc entries and pattern based discovery of token entries."""
from __future__ import annotations

import re
from typing import List

from . import constants
from .models import Entry

# A token stanza for any host under the service domain. Hosts are a single
# whitespace-free token; the password is the rest of its line.
TOKEN_ENTRY_RE = re.compile(
    r"^machine (?P<host>\S*"
    + re.escape(constants.SERVICE_DOMAIN)
    + r")\nlogin "
    + re.escape(constants.TOKEN_LOGIN)
    + r"\npassword (?P<secret>.*)$",
    re.MULTILINE,
)


def render(host: str, login: str, secret: str) -> str:
    return f"machine {host}\nlogin {login}\npassword {secret}\n"


def render_entry(entry: Entry) -> str:
    return render(entry.host, entry.login, entry.secret)


def token_placeholder(host: str) -> str:
    return render_entry(Entry.token(host))


def json_key_entry(host: str, base64_key: str) -> str:
    return render_entry(Entry.json_key(host, base64_key))


def entry_from_match(match: re.Match[str]) -> Entry:
    return Entry.token(match.group("host"), match.group("secret"))


def find_token_entries(text: str) -> List[Entry]:
    """Return every token entry for the service domain, in file order."""
    return [entry_from_match(match) for match in TOKEN_ENTRY_RE.finditer(text)]


def has_machine(text: str, host: str) -> bool:
    """True if ``text`` holds a ``machine <host>`` line for exactly this host."""
    pattern = re.compile(r"^machine " + re.escape(host) + r"$", re.MULTILINE)
    return pattern.search(text) is not None
