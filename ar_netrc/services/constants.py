"""Constants shared by the netrc service layer."""
from __future__ import annotations

TOKEN_LOGIN = "oauth2accesstoken"
KEY_LOGIN = "_json_key_base64"
TOKEN_PLACEHOLDER = "<oauth2accesstoken>"

SERVICE_DOMAIN = "go.pkg.dev"
DEFAULT_HOST_PATTERN = "%s-go.pkg.dev"
HOST_PLACEHOLDER = "%s"

NETRC_FILENAME = ".netrc"
NETRC_ENV = "NETRC"
BACKUP_SUFFIX = "-old"
NETRC_FILE_MODE = 0o600

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"
GCLOUD_COMMAND = "gcloud"
GCLOUD_COMMAND_WINDOWS = "gcloud.cmd"
DEFAULT_TIMEOUT = 30.0
