"""Keep a .netrc file working with Artifact Registry Go repositories."""
from .services import NetrcError, NetrcStore

__all__ = ["NetrcError", "NetrcStore"]
__version__ = "0.1.0"
