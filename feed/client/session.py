"""Client session state.

``SessionContext`` is the one place the current session lives. Readers take
immutable ``SessionState`` snapshots or subscribe to changes; only the
session controller publishes.
"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from feed.util.jwt import SessionClaims


class SessionStatus(str, Enum):
    """Session bootstrap states."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


class SessionState(BaseModel):
    """Immutable snapshot of the client session."""

    model_config = ConfigDict(frozen=True)

    status: SessionStatus = SessionStatus.UNAUTHENTICATED
    is_authenticated: bool = False
    user: SessionClaims | None = None

    @classmethod
    def unauthenticated(cls) -> "SessionState":
        return cls(status=SessionStatus.UNAUTHENTICATED)

    @classmethod
    def authenticated(cls, user: SessionClaims) -> "SessionState":
        return cls(
            status=SessionStatus.AUTHENTICATED, is_authenticated=True, user=user
        )


SessionListener = Callable[[SessionState], None]


class SessionContext:
    """Holds the current session state and notifies subscribers.

    Readers take snapshots or subscribe. State changes only through the
    writer handle returned by ``bind_writer``.
    """

    def __init__(self) -> None:
        self._state = SessionState.unauthenticated()
        self._listeners: list[SessionListener] = []
        self._writer_bound = False

    @property
    def state(self) -> SessionState:
        """Current session snapshot."""
        return self._state

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener called with every published state.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def bind_writer(self) -> Callable[[SessionState], None]:
        """Claim the single writer handle of this context.

        Returns:
            Function that publishes a state to the context and its listeners

        Raises:
            RuntimeError: If a writer is already bound
        """
        if self._writer_bound:
            raise RuntimeError("Session context already has a writer")
        self._writer_bound = True

        def publish(state: SessionState) -> None:
            self._state = state
            for listener in list(self._listeners):
                listener(state)

        return publish
