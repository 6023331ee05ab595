"""Feed API client and session bootstrap."""

from .api import FeedAPIError, FeedClient
from .bootstrap import LoginRedirect, SessionController
from .credential import CredentialStore, FileCredentialStore, InMemoryCredentialStore
from .factory import create_session
from .session import SessionContext, SessionState, SessionStatus

__all__ = [
    "FeedAPIError",
    "FeedClient",
    "LoginRedirect",
    "SessionController",
    "CredentialStore",
    "FileCredentialStore",
    "InMemoryCredentialStore",
    "create_session",
    "SessionContext",
    "SessionState",
    "SessionStatus",
]
