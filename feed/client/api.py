"""HTTP client for the feed API."""

import httpx
import logfire

from feed.application.usecase.common import PostResponse


class FeedAPIError(Exception):
    """Non-2xx response from the feed API."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class FeedClient:
    """Async client for the feed API.

    Holds one ``httpx.AsyncClient``; the session controller attaches and
    detaches the credential through ``set_auth_token``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize feed client.

        Args:
            base_url: API base URL, e.g. ``http://localhost:8000``
            timeout: Request timeout in seconds
            transport: Optional transport override (tests use ``httpx.MockTransport``)
        """
        self._http = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @property
    def auth_token(self) -> str | None:
        header = self._http.headers.get("Authorization")
        return header.removeprefix("Bearer ") if header else None

    def set_auth_token(self, token: str | None) -> None:
        """Attach a token to every request, or detach with None."""
        if token is None:
            self._http.headers.pop("Authorization", None)
        else:
            self._http.headers["Authorization"] = f"Bearer {token}"

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "FeedClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, json: dict | None = None):
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logfire.error("Feed API request failed", method=method, path=path, error=str(e))
            raise

        if response.is_success:
            return response.json()

        try:
            detail = response.json().get("detail", response.text)
        except ValueError:
            detail = response.text
        logfire.warn(
            "Feed API returned an error",
            method=method,
            path=path,
            status_code=response.status_code,
            detail=str(detail),
        )
        raise FeedAPIError(response.status_code, str(detail))

    async def create_post(
        self, text: str, name: str, avatar: str | None = None
    ) -> PostResponse:
        data = await self._request(
            "POST", "/api/posts", json={"text": text, "name": name, "avatar": avatar}
        )
        return PostResponse.model_validate(data)

    async def list_posts(self) -> list[PostResponse]:
        data = await self._request("GET", "/api/posts")
        return [PostResponse.model_validate(item) for item in data]

    async def get_post(self, post_id: str) -> PostResponse:
        data = await self._request("GET", f"/api/posts/{post_id}")
        return PostResponse.model_validate(data)

    async def delete_post(self, post_id: str) -> bool:
        data = await self._request("DELETE", f"/api/posts/{post_id}")
        return bool(data.get("success"))

    async def like_post(self, post_id: str) -> PostResponse:
        data = await self._request("POST", f"/api/posts/{post_id}/like")
        return PostResponse.model_validate(data)

    async def unlike_post(self, post_id: str) -> PostResponse:
        data = await self._request("POST", f"/api/posts/{post_id}/unlike")
        return PostResponse.model_validate(data)

    async def add_comment(
        self, post_id: str, text: str, name: str, avatar: str | None = None
    ) -> PostResponse:
        data = await self._request(
            "POST",
            f"/api/posts/{post_id}/comment",
            json={"text": text, "name": name, "avatar": avatar},
        )
        return PostResponse.model_validate(data)

    async def remove_comment(self, post_id: str, comment_id: str) -> PostResponse:
        data = await self._request("DELETE", f"/api/posts/{post_id}/comment/{comment_id}")
        return PostResponse.model_validate(data)
