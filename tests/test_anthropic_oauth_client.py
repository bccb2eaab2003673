try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover
    import _bootstrap  # type: ignore # noqa: F401

import json

import httpx
import pytest

from oauth_setup.clients import AnthropicOAuthClient, OAuthTokenRefreshError
from oauth_setup.core.config import DEFAULT_TOKEN_URL, OAuthSettings


def _client(handler, **settings) -> AnthropicOAuthClient:
    return AnthropicOAuthClient(
        OAuthSettings(**settings), transport=httpx.MockTransport(handler)
    )


@pytest.mark.anyio
async def test_refresh_posts_json_refresh_grant():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            json={"access_token": "A2", "refresh_token": "R2", "expires_in": 3600},
        )

    response = await _client(handler).refresh_token("R1")

    assert response.access_token == "A2"
    assert response.refresh_token == "R2"
    assert response.expires_in == 3600

    (request,) = captured
    assert request.method == "POST"
    assert str(request.url) == DEFAULT_TOKEN_URL
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "grant_type": "refresh_token",
        "refresh_token": "R1",
    }


@pytest.mark.anyio
async def test_refresh_uses_configured_token_url():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(
            201,
            json={"access_token": "A2", "refresh_token": "R2", "expires_in": 60},
        )

    await _client(handler, token_url="https://auth.example.com/token").refresh_token("R1")

    assert seen == ["https://auth.example.com/token"]


@pytest.mark.anyio
@pytest.mark.parametrize("status_code", [400, 401, 500])
async def test_refresh_raises_with_status_and_body(status_code: int):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text='{"error": "invalid_grant"}')

    with pytest.raises(OAuthTokenRefreshError) as exc_info:
        await _client(handler).refresh_token("R1")

    assert exc_info.value.status_code == status_code
    assert str(exc_info.value) == (
        f'Failed to refresh token: {status_code} {{"error": "invalid_grant"}}'
    )


@pytest.mark.anyio
@pytest.mark.parametrize(
    "body",
    [
        "not json",
        json.dumps({"access_token": "A2", "expires_in": 3600}),
        json.dumps({"access_token": "A2", "refresh_token": "R2", "expires_in": "soon"}),
    ],
)
async def test_refresh_rejects_incomplete_payload(body: str):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=body)

    with pytest.raises(OAuthTokenRefreshError, match="Incomplete refresh payload"):
        await _client(handler).refresh_token("R1")
