"""The request context shared by every call made through one client.

A context bundles credentials, default headers and transport settings. It is
immutable and safe to share between concurrent calls.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from httpx import AsyncClient, Client

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = 'ytpartner'


class AuthProvider(ABC):
    """Attaches credentials to an outgoing request."""

    @abstractmethod
    def apply(self, headers: dict[str, str], params: dict[str, Any]) -> None:
        """Add credentials to the request headers or query parameters."""
        ...


class BearerTokenAuth(AuthProvider):
    """OAuth 2.0 access token sent as an ``Authorization`` header."""

    def __init__(self, access_token: str):
        self._access_token = access_token

    def apply(self, headers: dict[str, str], params: dict[str, Any]) -> None:
        headers['Authorization'] = f'Bearer {self._access_token}'

    def __repr__(self) -> str:
        return 'BearerTokenAuth(access_token=***)'


class APIKeyAuth(AuthProvider):
    """API key sent as the ``key`` query parameter."""

    def __init__(self, api_key: str):
        self._api_key = api_key

    def apply(self, headers: dict[str, str], params: dict[str, Any]) -> None:
        params.setdefault('key', self._api_key)

    def __repr__(self) -> str:
        return 'APIKeyAuth(api_key=***)'


@dataclass(frozen=True)
class RequestContext:
    """Read-only settings applied to every request.

    Args:
        auth: Credential hook invoked before each call.
        headers: Default headers for every request. Per-call ``headers``
            options replace these.
        timeout: Default request timeout in seconds.
        user_agent: Value of the ``User-Agent`` header.
        quota_user: Sent as the ``quotaUser`` query parameter unless the
            call sets one.
        http_client: Custom httpx.Client for sync requests.
        async_http_client: Custom httpx.AsyncClient for async requests.
    """

    auth: AuthProvider | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    quota_user: str | None = None
    http_client: Client | None = field(default=None, compare=False)
    async_http_client: AsyncClient | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

    def default_headers(self) -> dict[str, str]:
        return {'User-Agent': self.user_agent, **self.headers}
