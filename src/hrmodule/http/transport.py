"""Authenticated JSON transport over httpx.

Services describe a request as a ``Call``; ``Transport.send`` turns it
into one HTTP exchange against either the module-scoped or the
admin-scoped base URL.

Every request carries ``Content-Type: application/json`` and, when the
credential provider yields one, ``Authorization: Bearer <token>``.
Per-call headers override both. Non-2xx responses raise
``TransportError`` (``NotFound`` for 404), as does a 2xx body that is not
JSON; nothing is retried. Network-level ``httpx.HTTPError``s pass through.

Concurrency:
    - One ``httpx.AsyncClient`` per request (no shared mutable state)
    - ``Call`` and ``RequestOptions`` are frozen dataclasses
    - Cancellation runs through an ``anyio.CancelScope`` bound to the
      caller's ``CancelToken``
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Literal, TypeAlias

import anyio
import httpx

from hrmodule.cancel import CancelToken
from hrmodule.config import ModuleConfig
from hrmodule.errors import Cancelled, NotFound, TransportError
from hrmodule.http.query import QueryItems

logger = logging.getLogger("hrmodule.transport")

TokenProvider: TypeAlias = Callable[[], str | None]
Scope: TypeAlias = Literal["module", "admin"]

_REDACTED = "[redacted]"


@dataclass(frozen=True, slots=True)
class Call:
    """A fully shaped request, independent of any network state.

    ``path`` is relative to the base URL selected by ``scope``.
    ``body`` is JSON-serialized when not ``None``.
    """

    method: str
    path: str
    query: QueryItems = ()
    body: Any = None
    scope: Scope = "module"


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Per-call overrides supplied by the caller."""

    headers: Mapping[str, str] = field(default_factory=dict)
    cancel: CancelToken | None = None


def _redact(headers: Mapping[str, str]) -> dict[str, str]:
    return {k: (_REDACTED if k.lower() == "authorization" else v) for k, v in headers.items()}


class Transport:
    """Issues ``Call`` objects against the remote HR API.

    Usage::

        transport = Transport(ModuleConfig(), token_provider=lambda: store.access_token)
        data = await transport.send(Call("GET", "/absence-types"))

    ``http_transport`` is handed to ``httpx.AsyncClient`` as-is; tests
    pass an ``httpx.MockTransport``.
    """

    __slots__ = ("_config", "_http_transport", "_token_provider")

    def __init__(
        self,
        config: ModuleConfig | None = None,
        *,
        token_provider: TokenProvider | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ModuleConfig()
        self._token_provider = token_provider
        self._http_transport = http_transport

    @property
    def config(self) -> ModuleConfig:
        return self._config

    def url_for(self, call: Call) -> str:
        base = self._config.admin_url if call.scope == "admin" else self._config.module_url
        return f"{base}{call.path}"

    def headers_for(self, options: RequestOptions | None = None) -> dict[str, str]:
        """Default headers merged with the per-call overrides."""
        headers = {"Content-Type": "application/json"}
        token = self._token_provider() if self._token_provider is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if options is not None:
            headers.update(options.headers)
        return headers

    async def send(self, call: Call, options: RequestOptions | None = None) -> Any:
        """Perform *call* and return the decoded JSON body.

        Returns ``None`` for empty bodies (e.g. ``204 No Content``).

        Raises:
            Cancelled: the call's token was cancelled before or during I/O,
                including while the connection was being closed.
            NotFound: the server answered 404.
            TransportError: any other non-2xx status, or a body that is not JSON.
        """
        token = options.cancel if options is not None else None
        if token is not None:
            token.raise_if_cancelled()

        url = self.url_for(call)
        headers = self.headers_for(options)
        logger.debug(
            "%s %s query=%s headers=%s", call.method, url, call.query, _redact(headers)
        )

        response: httpx.Response | None = None
        with anyio.CancelScope() as scope:
            if token is not None:
                token.attach(scope)
            try:
                async with httpx.AsyncClient(
                    transport=self._http_transport,
                    timeout=self._config.timeout,
                ) as client:
                    response = await client.request(
                        call.method,
                        url,
                        params=list(call.query) or None,
                        json=call.body,
                        headers=headers,
                    )
            finally:
                if token is not None:
                    token.detach(scope)

        if response is None or scope.cancelled_caught:
            logger.debug("%s %s cancelled", call.method, url)
            reason = token.reason if token is not None else ""
            raise Cancelled(reason or f"{call.method} {call.path} cancelled")

        if not response.is_success:
            logger.debug("%s %s -> %d", call.method, url, response.status_code)
            if response.status_code == 404:
                raise NotFound(response.text or "Not Found", method=call.method, url=url)
            raise TransportError(
                status=response.status_code,
                detail=response.text,
                method=call.method,
                url=url,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise TransportError(
                status=response.status_code,
                detail=response.text,
                method=call.method,
                url=url,
            ) from None
