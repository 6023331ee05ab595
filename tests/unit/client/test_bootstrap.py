"""Unit tests for SessionController."""

import jwt
import pytest

from feed.client.bootstrap import LoginRedirect, SessionController, strip_bearer
from feed.client.credential import InMemoryCredentialStore
from feed.client.session import SessionContext, SessionState, SessionStatus

NOW = 1_700_000_000


def encode(user_id: str = "u1", exp: float = NOW + 3600) -> str:
    return jwt.encode(
        {"user_id": user_id, "name": "Ada", "avatar": None, "exp": exp},
        "client-does-not-know-this",
        algorithm="HS256",
    )


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[str | None] = []

    def __call__(self, token: str | None) -> None:
        self.calls.append(token)

    @property
    def current(self) -> str | None:
        return self.calls[-1] if self.calls else None


class FakeCache:
    def __init__(self) -> None:
        self.cleared = 0

    def clear(self) -> None:
        self.cleared += 1


def make_controller(credential: str | None = None):
    store = InMemoryCredentialStore(credential)
    context = SessionContext()
    sink = RecordingSink()
    navigator = LoginRedirect("/login")
    cache = FakeCache()
    controller = SessionController(
        store=store,
        context=context,
        auth_sink=sink,
        navigator=navigator,
        profile_caches=[cache],
        clock=lambda: NOW,
    )
    return controller, store, sink, navigator, cache


def test_no_credential_is_unauthenticated():
    controller, _, sink, navigator, _ = make_controller()

    state = controller.bootstrap()

    assert state.status == SessionStatus.UNAUTHENTICATED
    assert state.is_authenticated is False
    assert state.user is None
    assert sink.current is None
    assert navigator.location is None


def test_valid_credential_authenticates():
    token = encode("u1")
    controller, store, sink, navigator, cache = make_controller(token)

    state = controller.bootstrap()

    assert state.is_authenticated is True
    assert state.status == SessionStatus.AUTHENTICATED
    assert state.user.user_id == "u1"
    assert sink.current == token
    assert store.get() == token
    assert cache.cleared == 0
    assert navigator.location is None
    assert controller.context.state == state


def test_bearer_prefixed_credential_is_stripped_before_use():
    token = encode("u1")
    controller, _, sink, _, _ = make_controller(f"Bearer {token}")

    state = controller.bootstrap()

    assert state.is_authenticated is True
    assert sink.current == token


def test_expired_credential_clears_session_and_redirects():
    controller, store, sink, navigator, cache = make_controller(encode(exp=NOW - 1))

    state = controller.bootstrap()

    assert state.is_authenticated is False
    assert state.status == SessionStatus.UNAUTHENTICATED
    assert store.get() is None
    assert sink.current is None
    assert cache.cleared == 1
    assert navigator.location == "/login"


def test_credential_expiring_now_counts_as_expired():
    controller, _, _, navigator, _ = make_controller(encode(exp=NOW))

    assert controller.bootstrap().is_authenticated is False
    assert navigator.location == "/login"


def test_fractional_expiry_in_the_future_authenticates():
    """NumericDate expiries may carry fractional seconds."""
    token = encode("u1", exp=NOW + 3600.5)
    controller, store, sink, navigator, _ = make_controller(token)

    state = controller.bootstrap()

    assert state.status == SessionStatus.AUTHENTICATED
    assert state.user.exp == NOW + 3600.5
    assert store.get() == token
    assert sink.current == token
    assert navigator.location is None


def test_fractional_expiry_just_past_is_expired():
    controller, _, _, navigator, _ = make_controller(encode(exp=NOW - 0.5))

    assert controller.bootstrap().status == SessionStatus.UNAUTHENTICATED
    assert navigator.location == "/login"


def test_authorization_never_attached_for_expired_credential():
    """Authorization is attached only after the expiry check passes."""
    controller, _, sink, _, _ = make_controller(encode(exp=NOW - 10))

    controller.bootstrap()

    assert all(call is None for call in sink.calls)


def test_malformed_credential_is_discarded_without_raising():
    controller, store, sink, navigator, _ = make_controller("garbage")

    state = controller.bootstrap()

    assert state.status == SessionStatus.UNAUTHENTICATED
    assert store.get() is None
    assert sink.current is None
    assert navigator.location is None


def test_published_states_follow_the_bootstrap_order():
    controller, _, _, _, _ = make_controller(encode(exp=NOW - 1))
    seen = []
    controller.context.subscribe(lambda s: seen.append(s.status))

    controller.bootstrap()

    assert seen == [
        SessionStatus.AUTHENTICATING,
        SessionStatus.EXPIRED,
        SessionStatus.UNAUTHENTICATED,
    ]


def test_set_credential_reruns_bootstrap():
    controller, store, sink, _, _ = make_controller()
    controller.bootstrap()
    token = encode("u2")

    state = controller.set_credential(token)

    assert state.is_authenticated is True
    assert state.user.user_id == "u2"
    assert store.get() == token
    assert sink.current == token


def test_logout_ends_session():
    controller, store, sink, navigator, cache = make_controller(encode("u1"))
    controller.bootstrap()

    state = controller.logout()

    assert state.is_authenticated is False
    assert store.get() is None
    assert sink.current is None
    assert cache.cleared == 1
    assert navigator.location is None


def test_unsubscribe_stops_notifications():
    controller, _, _, _, _ = make_controller(encode("u1"))
    seen = []
    unsubscribe = controller.context.subscribe(seen.append)

    unsubscribe()
    controller.bootstrap()

    assert seen == []


def test_context_accepts_a_single_writer():
    """Only the controller that bound the context may publish to it."""
    controller, _, _, _, _ = make_controller()

    with pytest.raises(RuntimeError, match="already has a writer"):
        SessionController(
            store=InMemoryCredentialStore(),
            context=controller.context,
            auth_sink=RecordingSink(),
            navigator=LoginRedirect(),
        )


def test_writer_publishes_to_context_and_listeners():
    context = SessionContext()
    seen = []
    context.subscribe(seen.append)
    publish = context.bind_writer()

    publish(SessionState(status=SessionStatus.AUTHENTICATING))

    assert context.state.status == SessionStatus.AUTHENTICATING
    assert [s.status for s in seen] == [SessionStatus.AUTHENTICATING]


def test_strip_bearer():
    assert strip_bearer("Bearer abc") == "abc"
    assert strip_bearer("abc") == "abc"
