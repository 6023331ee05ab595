"""Wire the feed client and its session controller from settings."""

from collections.abc import Callable, Iterable

from feed.client.api import FeedClient
from feed.client.bootstrap import LoginRedirect, ProfileCache, SessionController
from feed.client.credential import FileCredentialStore
from feed.client.session import SessionContext
from feed.config import ClientSettings


def create_session(
    settings: ClientSettings | None = None,
    profile_caches: Iterable[ProfileCache] = (),
    on_redirect: Callable[[str], None] | None = None,
) -> tuple[FeedClient, SessionController]:
    """Build a client and a controller sharing one authorization slot.

    The session is not bootstrapped here; call ``controller.bootstrap()``
    once on start.

    Args:
        settings: Client settings (loaded from environment if omitted)
        profile_caches: Caches cleared when the session ends
        on_redirect: Called with the login path on expiry

    Returns:
        Tuple of (client, controller)
    """
    settings = settings or ClientSettings()
    client = FeedClient(settings.api_base_url, timeout=settings.timeout)
    controller = SessionController(
        store=FileCredentialStore(settings.credential_path, settings.credential_key),
        context=SessionContext(),
        auth_sink=client.set_auth_token,
        navigator=LoginRedirect(settings.login_path, on_redirect),
        profile_caches=profile_caches,
    )
    return client, controller
