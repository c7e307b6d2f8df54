"""Pydantic models for Nginx Proxy Manager resources.

Two groups of models:

Resources (returned by the API):
    Mirror the remote objects. Every field is optional and unknown fields are
    kept (extra="allow"), so whatever the server sends passes through intact.
    Dump with to_jsonable() from npm_mcp.utils.output to get back exactly the
    fields the server sent.

Inputs (sent to the API):
    *Create models describe the creation body with the server-side defaults
    the tools and CLI rely on. *Update models are partial patches of the
    create shape: every field optional, only fields given a value are sent.
"""

from __future__ import annotations

__all__ = [
    # Resources
    "AccessList",
    "AccessListClient",
    "AccessListItem",
    "Certificate",
    "DeadHost",
    "HealthStatus",
    "ProxyHost",
    "ProxyLocation",
    "RedirectionHost",
    "Stream",
    "User",
    # Inputs
    "AccessListCreate",
    "AccessListUpdate",
    "DeadHostCreate",
    "DeadHostUpdate",
    "ForwardScheme",
    "PortNumber",
    "ProxyHostCreate",
    "ProxyHostUpdate",
    "RedirectScheme",
    "RedirectionHostCreate",
    "RedirectionHostUpdate",
    "StreamCreate",
    "StreamUpdate",
    "request_body",
]

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ForwardScheme = Literal["http", "https"]
RedirectScheme = Literal["http", "https", "$scheme"]

PortNumber = Annotated[int, Field(ge=1, le=65535)]


# =============================================================================
# Resources
# =============================================================================


class RemoteResource(BaseModel):
    """Common fields of every NPM resource."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    created_on: str | None = None
    modified_on: str | None = None


class OwnedResource(RemoteResource):
    owner_user_id: int | None = None


class ProxyLocation(BaseModel):
    """Custom location block inside a proxy host."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    path: str
    forward_scheme: ForwardScheme
    forward_host: str
    forward_port: PortNumber
    forward_path: str | None = None
    advanced_config: str | None = None


class ProxyHost(OwnedResource):
    """Rule forwarding one or more domain names to a backend host:port."""

    domain_names: list[str] | None = None
    forward_host: str | None = None
    forward_port: int | None = None
    forward_scheme: str | None = None
    access_list_id: int | None = None
    certificate_id: int | str | None = None
    ssl_forced: bool | None = None
    caching_enabled: bool | None = None
    block_exploits: bool | None = None
    advanced_config: str | None = None
    meta: dict[str, Any] | None = None
    allow_websocket_upgrade: bool | None = None
    http2_support: bool | None = None
    enabled: bool | None = None
    locations: list[dict[str, Any]] | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None


class Stream(OwnedResource):
    """Raw TCP/UDP port forwarding rule."""

    incoming_port: int | None = None
    forwarding_host: str | None = None
    forwarding_port: int | None = None
    tcp_forwarding: bool | None = None
    udp_forwarding: bool | None = None
    enabled: bool | None = None
    meta: dict[str, Any] | None = None


class RedirectionHost(OwnedResource):
    """Rule redirecting source domains to a target domain."""

    domain_names: list[str] | None = None
    forward_scheme: str | None = None
    forward_domain_name: str | None = None
    forward_http_code: int | None = None
    preserve_path: bool | None = None
    certificate_id: int | str | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    block_exploits: bool | None = None
    enabled: bool | None = None


class DeadHost(OwnedResource):
    """Rule serving a 404 page for the given domains."""

    domain_names: list[str] | None = None
    certificate_id: int | str | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    enabled: bool | None = None


class AccessListItem(BaseModel):
    """Basic-auth credential in an access list."""

    model_config = ConfigDict(extra="allow")

    username: str
    password: str = Field(repr=False)


class AccessListClient(BaseModel):
    """IP allow/deny rule in an access list."""

    model_config = ConfigDict(extra="allow")

    address: str
    directive: Literal["allow", "deny"]


class AccessList(OwnedResource):
    """Named set of basic-auth credentials and IP rules."""

    name: str | None = None
    meta: dict[str, Any] | None = None
    items: list[dict[str, Any]] | None = None
    clients: list[dict[str, Any]] | None = None


class Certificate(OwnedResource):
    """SSL/TLS certificate record."""

    provider: str | None = None
    nice_name: str | None = None
    domain_names: list[str] | None = None
    expires_on: str | None = None
    meta: dict[str, Any] | None = None


class User(RemoteResource):
    """NPM user account."""

    is_disabled: bool | None = None
    email: str | None = None
    name: str | None = None
    nickname: str | None = None
    avatar: str | None = None
    roles: list[str] | None = None


class HealthStatus(BaseModel):
    """Response of GET /api/."""

    model_config = ConfigDict(extra="allow")

    status: str | None = None
    version: dict[str, Any] | None = None


# =============================================================================
# Inputs
# =============================================================================


class InputModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ProxyHostCreate(InputModel):
    domain_names: list[str] = Field(min_length=1)
    forward_host: str = Field(min_length=1)
    forward_port: PortNumber
    forward_scheme: ForwardScheme = "http"
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    block_exploits: bool | None = None
    caching_enabled: bool | None = None
    allow_websocket_upgrade: bool | None = None
    access_list_id: int | None = None
    advanced_config: str | None = None
    enabled: bool | None = None
    locations: list[ProxyLocation] | None = None


class ProxyHostUpdate(InputModel):
    domain_names: list[str] | None = Field(default=None, min_length=1)
    forward_host: str | None = Field(default=None, min_length=1)
    forward_port: PortNumber | None = None
    forward_scheme: ForwardScheme | None = None
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    block_exploits: bool | None = None
    caching_enabled: bool | None = None
    allow_websocket_upgrade: bool | None = None
    access_list_id: int | None = None
    advanced_config: str | None = None
    enabled: bool | None = None
    locations: list[ProxyLocation] | None = None


class StreamCreate(InputModel):
    incoming_port: PortNumber
    forwarding_host: str = Field(min_length=1)
    forwarding_port: PortNumber
    tcp_forwarding: bool = True
    udp_forwarding: bool = False
    enabled: bool | None = None


class StreamUpdate(InputModel):
    incoming_port: PortNumber | None = None
    forwarding_host: str | None = Field(default=None, min_length=1)
    forwarding_port: PortNumber | None = None
    tcp_forwarding: bool | None = None
    udp_forwarding: bool | None = None
    enabled: bool | None = None


class RedirectionHostCreate(InputModel):
    domain_names: list[str] = Field(min_length=1)
    forward_scheme: RedirectScheme = "$scheme"
    forward_domain_name: str = Field(min_length=1)
    forward_http_code: int = Field(default=301, ge=300, le=308)
    preserve_path: bool = True
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    block_exploits: bool | None = None
    enabled: bool | None = None


class RedirectionHostUpdate(InputModel):
    domain_names: list[str] | None = Field(default=None, min_length=1)
    forward_scheme: RedirectScheme | None = None
    forward_domain_name: str | None = Field(default=None, min_length=1)
    forward_http_code: int | None = Field(default=None, ge=300, le=308)
    preserve_path: bool | None = None
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    block_exploits: bool | None = None
    enabled: bool | None = None


class DeadHostCreate(InputModel):
    domain_names: list[str] = Field(min_length=1)
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    enabled: bool | None = None
    advanced_config: str | None = None


class DeadHostUpdate(InputModel):
    domain_names: list[str] | None = Field(default=None, min_length=1)
    certificate_id: int | None = None
    ssl_forced: bool | None = None
    hsts_enabled: bool | None = None
    hsts_subdomains: bool | None = None
    http2_support: bool | None = None
    enabled: bool | None = None
    advanced_config: str | None = None


class AccessListCreate(InputModel):
    name: str = Field(min_length=1)
    satisfy_any: bool | None = None
    pass_auth: bool | None = None
    items: list[AccessListItem] | None = None
    clients: list[AccessListClient] | None = None


class AccessListUpdate(InputModel):
    name: str | None = Field(default=None, min_length=1)
    satisfy_any: bool | None = None
    pass_auth: bool | None = None
    items: list[AccessListItem] | None = None
    clients: list[AccessListClient] | None = None


def request_body(data: InputModel) -> dict[str, Any]:
    """Serialize an input model into a JSON request body.

    None values are dropped, so create models send their defaults plus any
    optional field that was given, and update models send only the fields
    being patched.
    """
    return data.model_dump(mode="json", exclude_none=True)
