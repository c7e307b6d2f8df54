"""Async client for the Nginx Proxy Manager REST API.

Turns method calls into authenticated HTTP requests and decodes the JSON
responses into the models in npm_mcp.api.models. Both the MCP server and the
CLI drive NPM exclusively through this class.

Token lifecycle (per client instance, never shared):
    ABSENT  -> VALID    first authenticated call: POST /api/tokens
    VALID   -> EXPIRED  current time >= expiry returned by the server
    EXPIRED -> VALID    re-authenticate before the next request

Readonly mode:
    Every mutating operation calls _assert_writable() first, so a readonly
    client raises ReadonlyModeError before touching the network. Reads are
    never gated.

Errors (see npm_mcp.exceptions):
    - AuthenticationError: token endpoint answered non-2xx
    - RemoteAPIError: resource endpoint answered non-2xx, or transport failure
    - ReadonlyModeError: mutating call on a readonly client
    Nothing is retried.

Usage:
    async with NpmApiClient(NpmConfig.from_env()) as client:
        hosts = await client.list_proxy_hosts()
"""

from __future__ import annotations

__all__ = [
    "NpmApiClient",
]

import json
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from npm_mcp.api.models import (
    AccessList,
    AccessListCreate,
    AccessListUpdate,
    Certificate,
    DeadHost,
    DeadHostCreate,
    DeadHostUpdate,
    HealthStatus,
    ProxyHost,
    ProxyHostCreate,
    ProxyHostUpdate,
    RedirectionHost,
    RedirectionHostCreate,
    RedirectionHostUpdate,
    Stream,
    StreamCreate,
    StreamUpdate,
    User,
    request_body,
)
from npm_mcp.api.token import SessionToken, TokenState
from npm_mcp.config import NpmConfig
from npm_mcp.constants import (
    ACCESS_LISTS_PATH,
    API_PREFIX,
    CERTIFICATES_PATH,
    DEAD_HOSTS_PATH,
    HEALTH_PATH,
    PROXY_HOSTS_PATH,
    REDIRECTION_HOSTS_PATH,
    STREAMS_PATH,
    TOKEN_PATH,
    USERS_PATH,
)
from npm_mcp.exceptions import AuthenticationError, ReadonlyModeError, RemoteAPIError
from npm_mcp.utils.logging import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

_logger = get_logger("client")


class NpmApiClient:
    """Client for one Nginx Proxy Manager instance.

    Owns the base URL, the credentials, the readonly flag and the cached
    session token. The readonly flag cannot change after construction.
    """

    def __init__(
        self,
        config: NpmConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings.
            http_client: Optional httpx client (for testing). A client passed
                in is not closed by aclose().
        """
        self._base_url = config.url.rstrip("/")
        self._email = config.email
        self._password = config.password
        self._readonly = config.readonly
        self._token: SessionToken | None = None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)
        self._owns_http = http_client is None

    async def __aenter__(self) -> "NpmApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_readonly(self) -> bool:
        return self._readonly

    @property
    def token_state(self) -> TokenState:
        """Current state of the cached session token."""
        if self._token is None:
            return TokenState.ABSENT
        if self._token.is_expired:
            return TokenState.EXPIRED
        return TokenState.VALID

    # =========================================================================
    # Plumbing
    # =========================================================================

    def _assert_writable(self, operation: str) -> None:
        if self._readonly:
            _logger.warning(
                {
                    "event": "readonly_blocked",
                    "message": f"Blocked {operation}: client is in readonly mode",
                    "operation": operation,
                }
            )
            raise ReadonlyModeError(operation)

    async def _ensure_token(self) -> str:
        """Return a valid bearer token, authenticating if needed.

        Raises:
            AuthenticationError: If the token endpoint answers non-2xx or
                returns something that is not a token.
            RemoteAPIError: If the request cannot be sent.
        """
        if self._token is not None and not self._token.is_expired:
            return self._token.token

        previous_state = self.token_state
        url = f"{self._base_url}{API_PREFIX}{TOKEN_PATH}"
        try:
            response = await self._http.post(
                url,
                json={"identity": self._email, "secret": self._password},
            )
        except httpx.HTTPError as e:
            _logger.error(
                {
                    "event": "transport_error",
                    "message": f"Cannot reach {url}: {e}",
                    "error_type": type(e).__name__,
                }
            )
            raise RemoteAPIError(str(e) or type(e).__name__) from e

        if not response.is_success:
            _logger.error(
                {
                    "event": "authentication_failed",
                    "message": f"Authentication failed with status {response.status_code}",
                    "status_code": response.status_code,
                }
            )
            raise AuthenticationError(response.text, response.status_code)

        try:
            self._token = SessionToken.model_validate(response.json())
        except (json.JSONDecodeError, ValidationError) as e:
            raise AuthenticationError(f"unexpected token response: {response.text}", response.status_code) from e

        _logger.info(
            {
                "event": "token_acquired",
                "message": "Acquired NPM session token",
                "previous_state": previous_state.value,
                "expires_at": self._token.expires_at.isoformat(),
                "expires_in_seconds": round(self._token.seconds_until_expiry),
            }
        )
        return self._token.token

    async def _request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """Send one authenticated request and decode the JSON response.

        Args:
            method: HTTP method.
            path: Path below /api (e.g. "/nginx/proxy-hosts/3").
            body: Optional JSON body.

        Returns:
            Decoded JSON, or an empty dict for 204 No Content.

        Raises:
            AuthenticationError: If a token cannot be obtained.
            RemoteAPIError: On non-2xx status, transport failure or invalid JSON.
        """
        token = await self._ensure_token()
        url = f"{self._base_url}{API_PREFIX}{path}"

        _logger.debug(
            {
                "event": "api_request",
                "message": f"{method} {API_PREFIX}{path}",
                "method": method,
                "path": path,
            }
        )
        try:
            response = await self._http.request(
                method,
                url,
                json=body,
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            _logger.error(
                {
                    "event": "transport_error",
                    "message": f"{method} {API_PREFIX}{path} failed: {e}",
                    "error_type": type(e).__name__,
                }
            )
            raise RemoteAPIError(str(e) or type(e).__name__) from e

        if not response.is_success:
            _logger.warning(
                {
                    "event": "api_error",
                    "message": f"{method} {API_PREFIX}{path} returned {response.status_code}",
                    "status_code": response.status_code,
                }
            )
            raise RemoteAPIError(response.text, response.status_code)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise RemoteAPIError(f"invalid JSON in response: {response.text}", response.status_code) from e

    @staticmethod
    def _decode(model: type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise RemoteAPIError(f"unexpected {model.__name__} payload: {e}") from e

    @classmethod
    def _decode_list(cls, model: type[ModelT], data: Any) -> list[ModelT]:
        if not isinstance(data, list):
            raise RemoteAPIError(f"expected a list of {model.__name__}, got {type(data).__name__}")
        return [cls._decode(model, item) for item in data]

    @classmethod
    def _decode_toggle(cls, model: type[ModelT], data: Any) -> ModelT | bool:
        # enable/disable endpoints answer with a bare boolean on current NPM releases
        if isinstance(data, bool):
            return data
        return cls._decode(model, data)

    # =========================================================================
    # Proxy Hosts
    # =========================================================================

    async def list_proxy_hosts(self) -> list[ProxyHost]:
        return self._decode_list(ProxyHost, await self._request("GET", PROXY_HOSTS_PATH))

    async def get_proxy_host(self, host_id: int) -> ProxyHost:
        return self._decode(ProxyHost, await self._request("GET", f"{PROXY_HOSTS_PATH}/{host_id}"))

    async def create_proxy_host(self, data: ProxyHostCreate) -> ProxyHost:
        self._assert_writable("createProxyHost")
        return self._decode(ProxyHost, await self._request("POST", PROXY_HOSTS_PATH, request_body(data)))

    async def update_proxy_host(self, host_id: int, data: ProxyHostUpdate) -> ProxyHost:
        self._assert_writable("updateProxyHost")
        return self._decode(
            ProxyHost, await self._request("PUT", f"{PROXY_HOSTS_PATH}/{host_id}", request_body(data))
        )

    async def delete_proxy_host(self, host_id: int) -> None:
        self._assert_writable("deleteProxyHost")
        await self._request("DELETE", f"{PROXY_HOSTS_PATH}/{host_id}")

    async def enable_proxy_host(self, host_id: int) -> ProxyHost | bool:
        self._assert_writable("enableProxyHost")
        return self._decode_toggle(ProxyHost, await self._request("POST", f"{PROXY_HOSTS_PATH}/{host_id}/enable"))

    async def disable_proxy_host(self, host_id: int) -> ProxyHost | bool:
        self._assert_writable("disableProxyHost")
        return self._decode_toggle(ProxyHost, await self._request("POST", f"{PROXY_HOSTS_PATH}/{host_id}/disable"))

    # =========================================================================
    # Certificates
    # =========================================================================

    async def list_certificates(self) -> list[Certificate]:
        return self._decode_list(Certificate, await self._request("GET", CERTIFICATES_PATH))

    async def get_certificate(self, certificate_id: int) -> Certificate:
        return self._decode(Certificate, await self._request("GET", f"{CERTIFICATES_PATH}/{certificate_id}"))

    async def delete_certificate(self, certificate_id: int) -> None:
        self._assert_writable("deleteCertificate")
        await self._request("DELETE", f"{CERTIFICATES_PATH}/{certificate_id}")

    async def renew_certificate(self, certificate_id: int) -> Certificate:
        self._assert_writable("renewCertificate")
        return self._decode(
            Certificate, await self._request("POST", f"{CERTIFICATES_PATH}/{certificate_id}/renew")
        )

    # =========================================================================
    # Streams
    # =========================================================================

    async def list_streams(self) -> list[Stream]:
        return self._decode_list(Stream, await self._request("GET", STREAMS_PATH))

    async def get_stream(self, stream_id: int) -> Stream:
        return self._decode(Stream, await self._request("GET", f"{STREAMS_PATH}/{stream_id}"))

    async def create_stream(self, data: StreamCreate) -> Stream:
        self._assert_writable("createStream")
        return self._decode(Stream, await self._request("POST", STREAMS_PATH, request_body(data)))

    async def update_stream(self, stream_id: int, data: StreamUpdate) -> Stream:
        self._assert_writable("updateStream")
        return self._decode(Stream, await self._request("PUT", f"{STREAMS_PATH}/{stream_id}", request_body(data)))

    async def delete_stream(self, stream_id: int) -> None:
        self._assert_writable("deleteStream")
        await self._request("DELETE", f"{STREAMS_PATH}/{stream_id}")

    async def enable_stream(self, stream_id: int) -> Stream | bool:
        self._assert_writable("enableStream")
        return self._decode_toggle(Stream, await self._request("POST", f"{STREAMS_PATH}/{stream_id}/enable"))

    async def disable_stream(self, stream_id: int) -> Stream | bool:
        self._assert_writable("disableStream")
        return self._decode_toggle(Stream, await self._request("POST", f"{STREAMS_PATH}/{stream_id}/disable"))

    # =========================================================================
    # Redirection Hosts
    # =========================================================================

    async def list_redirection_hosts(self) -> list[RedirectionHost]:
        return self._decode_list(RedirectionHost, await self._request("GET", REDIRECTION_HOSTS_PATH))

    async def get_redirection_host(self, host_id: int) -> RedirectionHost:
        return self._decode(RedirectionHost, await self._request("GET", f"{REDIRECTION_HOSTS_PATH}/{host_id}"))

    async def create_redirection_host(self, data: RedirectionHostCreate) -> RedirectionHost:
        self._assert_writable("createRedirectionHost")
        return self._decode(
            RedirectionHost, await self._request("POST", REDIRECTION_HOSTS_PATH, request_body(data))
        )

    async def update_redirection_host(self, host_id: int, data: RedirectionHostUpdate) -> RedirectionHost:
        self._assert_writable("updateRedirectionHost")
        return self._decode(
            RedirectionHost,
            await self._request("PUT", f"{REDIRECTION_HOSTS_PATH}/{host_id}", request_body(data)),
        )

    async def delete_redirection_host(self, host_id: int) -> None:
        self._assert_writable("deleteRedirectionHost")
        await self._request("DELETE", f"{REDIRECTION_HOSTS_PATH}/{host_id}")

    async def enable_redirection_host(self, host_id: int) -> RedirectionHost | bool:
        self._assert_writable("enableRedirectionHost")
        return self._decode_toggle(
            RedirectionHost, await self._request("POST", f"{REDIRECTION_HOSTS_PATH}/{host_id}/enable")
        )

    async def disable_redirection_host(self, host_id: int) -> RedirectionHost | bool:
        self._assert_writable("disableRedirectionHost")
        return self._decode_toggle(
            RedirectionHost, await self._request("POST", f"{REDIRECTION_HOSTS_PATH}/{host_id}/disable")
        )

    # =========================================================================
    # Dead Hosts (404 Hosts)
    # =========================================================================

    async def list_dead_hosts(self) -> list[DeadHost]:
        return self._decode_list(DeadHost, await self._request("GET", DEAD_HOSTS_PATH))

    async def get_dead_host(self, host_id: int) -> DeadHost:
        return self._decode(DeadHost, await self._request("GET", f"{DEAD_HOSTS_PATH}/{host_id}"))

    async def create_dead_host(self, data: DeadHostCreate) -> DeadHost:
        self._assert_writable("createDeadHost")
        return self._decode(DeadHost, await self._request("POST", DEAD_HOSTS_PATH, request_body(data)))

    async def update_dead_host(self, host_id: int, data: DeadHostUpdate) -> DeadHost:
        self._assert_writable("updateDeadHost")
        return self._decode(
            DeadHost, await self._request("PUT", f"{DEAD_HOSTS_PATH}/{host_id}", request_body(data))
        )

    async def delete_dead_host(self, host_id: int) -> None:
        self._assert_writable("deleteDeadHost")
        await self._request("DELETE", f"{DEAD_HOSTS_PATH}/{host_id}")

    async def enable_dead_host(self, host_id: int) -> DeadHost | bool:
        self._assert_writable("enableDeadHost")
        return self._decode_toggle(DeadHost, await self._request("POST", f"{DEAD_HOSTS_PATH}/{host_id}/enable"))

    async def disable_dead_host(self, host_id: int) -> DeadHost | bool:
        self._assert_writable("disableDeadHost")
        return self._decode_toggle(DeadHost, await self._request("POST", f"{DEAD_HOSTS_PATH}/{host_id}/disable"))

    # =========================================================================
    # Access Lists
    # =========================================================================

    async def list_access_lists(self) -> list[AccessList]:
        return self._decode_list(AccessList, await self._request("GET", ACCESS_LISTS_PATH))

    async def get_access_list(self, list_id: int) -> AccessList:
        return self._decode(AccessList, await self._request("GET", f"{ACCESS_LISTS_PATH}/{list_id}"))

    async def create_access_list(self, data: AccessListCreate) -> AccessList:
        self._assert_writable("createAccessList")
        return self._decode(AccessList, await self._request("POST", ACCESS_LISTS_PATH, request_body(data)))

    async def update_access_list(self, list_id: int, data: AccessListUpdate) -> AccessList:
        self._assert_writable("updateAccessList")
        return self._decode(
            AccessList, await self._request("PUT", f"{ACCESS_LISTS_PATH}/{list_id}", request_body(data))
        )

    async def delete_access_list(self, list_id: int) -> None:
        self._assert_writable("deleteAccessList")
        await self._request("DELETE", f"{ACCESS_LISTS_PATH}/{list_id}")

    # =========================================================================
    # Users
    # =========================================================================

    async def list_users(self) -> list[User]:
        return self._decode_list(User, await self._request("GET", USERS_PATH))

    async def get_user(self, user_id: int) -> User:
        return self._decode(User, await self._request("GET", f"{USERS_PATH}/{user_id}"))

    # =========================================================================
    # Health
    # =========================================================================

    async def get_health(self) -> HealthStatus:
        """Fetch the NPM health/version object from GET /api/."""
        return self._decode(HealthStatus, await self._request("GET", HEALTH_PATH))
