"""Session bootstrap.

Runs once on process start and again whenever the stored credential changes.
The credential is decoded locally, without signature verification, to learn
who is logged in and whether the credential has expired. Authorization is
attached to outbound requests only after that check passes.

State transitions::

    (no credential)        -> UNAUTHENTICATED
    credential present     -> AUTHENTICATING
    AUTHENTICATING         -> UNAUTHENTICATED  (malformed; credential removed)
    AUTHENTICATING         -> EXPIRED -> UNAUTHENTICATED  (credential removed,
                                                          login navigation)
    AUTHENTICATING         -> AUTHENTICATED
"""

import time
from collections.abc import Callable, Iterable
from typing import Protocol

import logfire

from feed.client.credential import CredentialStore
from feed.client.session import SessionContext, SessionState, SessionStatus
from feed.util.jwt import InvalidCredentialError, SessionClaims, decode_claims

BEARER_PREFIX = "Bearer "


class Navigator(Protocol):
    """Sends the user to the login entry point."""

    def redirect_to_login(self) -> None: ...


class ProfileCache(Protocol):
    """Client-side cache of user-specific data, cleared on session end."""

    def clear(self) -> None: ...


AuthSink = Callable[[str | None], None]


class LoginRedirect:
    """Navigator that records the requested login location.

    Front ends read ``location`` (or pass ``on_redirect``) to perform the
    actual navigation.
    """

    def __init__(
        self, login_path: str = "/login", on_redirect: Callable[[str], None] | None = None
    ) -> None:
        self.login_path = login_path
        self.on_redirect = on_redirect
        self.location: str | None = None

    def redirect_to_login(self) -> None:
        self.location = self.login_path
        logfire.info("Redirecting to login", location=self.login_path)
        if self.on_redirect is not None:
            self.on_redirect(self.login_path)


def strip_bearer(credential: str) -> str:
    """Remove a leading ``Bearer`` scheme from a stored credential."""
    if credential.startswith(BEARER_PREFIX):
        return credential[len(BEARER_PREFIX) :].strip()
    return credential.strip()


class SessionController:
    """Single writer of the session context."""

    def __init__(
        self,
        store: CredentialStore,
        context: SessionContext,
        auth_sink: AuthSink,
        navigator: Navigator,
        profile_caches: Iterable[ProfileCache] = (),
        decoder: Callable[[str], SessionClaims] = decode_claims,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize controller.

        Args:
            store: Persistent credential slot
            context: Session context; the controller binds its writer
            auth_sink: Attaches (token) or detaches (None) outbound authorization
            navigator: Performs the login redirect on expiry
            profile_caches: Caches cleared when the session ends
            decoder: Local claims decoder
            clock: Current time in epoch seconds
        """
        self.store = store
        self.context = context
        self.auth_sink = auth_sink
        self.navigator = navigator
        self.profile_caches = list(profile_caches)
        self.decoder = decoder
        self.clock = clock
        self._write = context.bind_writer()

    def bootstrap(self) -> SessionState:
        """Derive the session from the stored credential.

        Never raises for a bad or expired credential; those end in
        ``UNAUTHENTICATED``.

        Returns:
            Published session state
        """
        with logfire.span("session_bootstrap"):
            credential = self.store.get()
            if not credential:
                self.auth_sink(None)
                return self._publish(SessionState.unauthenticated())

            self._publish(SessionState(status=SessionStatus.AUTHENTICATING))
            token = strip_bearer(credential)

            try:
                claims = self.decoder(token)
            except InvalidCredentialError as e:
                logfire.warn("Stored credential is malformed, discarding it", error=str(e))
                self.store.remove()
                self.auth_sink(None)
                return self._publish(SessionState.unauthenticated())

            now = self.clock()
            if claims.is_expired(now):
                logfire.info(
                    "Stored credential expired",
                    user_id=claims.user_id,
                    exp=claims.exp,
                    now=now,
                )
                self._publish(SessionState(status=SessionStatus.EXPIRED))
                self._end_session()
                self.navigator.redirect_to_login()
                return self.context.state

            self.auth_sink(token)
            logfire.info("Session authenticated", user_id=claims.user_id)
            return self._publish(SessionState.authenticated(claims))

    def set_credential(self, credential: str) -> SessionState:
        """Store a newly issued credential and bootstrap from it."""
        self.store.set(credential)
        return self.bootstrap()

    def logout(self) -> SessionState:
        """End the session. Navigation is left to the caller."""
        with logfire.span("session_logout"):
            self._end_session()
            logfire.info("Logged out")
            return self.context.state

    def _end_session(self) -> None:
        self.store.remove()
        self.auth_sink(None)
        for cache in self.profile_caches:
            cache.clear()
        self._publish(SessionState.unauthenticated())

    def _publish(self, state: SessionState) -> SessionState:
        self._write(state)
        return state
