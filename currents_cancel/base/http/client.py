"""Shared HTTP client pool and the PUT-JSON request function.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances and a single ``request`` helper that performs an authenticated
    JSON PUT and returns a :class:`TypedResponse`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Timeout strategy:
    - The client's timeout comes from ``get_timeout_config()`` when the
      client is first created and is cached thereafter. The default is no
      timeout.

Response handling:
    - 404 resolves with ``result=None``; the body is not read.
    - Other responses have their body parsed as JSON when non-empty; an empty
      or unparseable body yields ``result=None``.
    - Status codes above 299 raise :class:`HttpClientError` whose message is
      the body's ``message`` field, else the raw body, else
      ``Failed request: (<status>)``.
    - 2xx codes are not interpreted any further; transport failures
      propagate unchanged.

Lifecycle & cleanup:
    - Clients are cached by ``purpose`` and closed at interpreter
      exit via ``atexit``. Tests may call :func:`close_all_clients`.
"""

from __future__ import annotations

import atexit
import json
import threading
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel

from ...config.defaults import USER_AGENT
from ..errors import HttpClientError
from ..models import TypedResponse
from ..timeouts import get_timeout_config

# Internal cache keyed by purpose
_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()

_NOT_FOUND = 404


def get_httpx_client(purpose: str = "cancel") -> httpx.Client:
    """Return the pooled ``httpx.Client`` for ``purpose``.

    Clients follow redirects: a PUT stays a PUT on 307/308 and the
    ``Authorization`` header is dropped when the redirect changes origin.

    Parameters:
        purpose: A short string discriminating separate pools (e.g.,
            "cancel"). Keep stable to maximize reuse.

    Thread-safety:
        Per-key creation is guarded by a re-entrant lock.
    """
    client = _CLIENTS.get(purpose)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None:
            return client
        timeout = get_timeout_config().http_timeout_seconds
        headers = {"User-Agent": USER_AGENT}
        client = httpx.Client(timeout=timeout, headers=headers, follow_redirects=True)
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)


def _parse_body(text: str) -> Any:
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def _error_message(status_code: int, text: str, parsed: Any) -> str:
    if isinstance(parsed, dict) and parsed.get("message"):
        return str(parsed["message"])
    if text:
        return text
    return f"Failed request: ({status_code})"


def request(
    url: str,
    body: BaseModel | Mapping[str, Any],
    bearer_token: str,
    *,
    client: Optional[httpx.Client] = None,
) -> TypedResponse[Any]:
    """PUT ``body`` as JSON to ``url`` with bearer-token authorization.

    Parameters:
        url: Absolute endpoint URL.
        body: Pydantic model (dumped by alias) or plain mapping.
        bearer_token: Sent as ``Authorization: Bearer <token>``.
        client: Optional client to use instead of the shared pool.

    Returns:
        :class:`TypedResponse` with ``status_code``, lower-cased ``headers``
        and the parsed ``result`` (or ``None``).

    Raises:
        HttpClientError: status code above 299 (other than 404).
        httpx.TransportError: network-level failures.
    """
    payload = body.model_dump(by_alias=True) if isinstance(body, BaseModel) else dict(body)
    http = client if client is not None else get_httpx_client("cancel")
    response = http.put(
        url,
        json=payload,
        headers={
            "Authorization": f"Bearer {bearer_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        },
    )
    headers = {k.lower(): v for k, v in response.headers.items()}
    if response.status_code == _NOT_FOUND:
        return TypedResponse(status_code=response.status_code, headers=headers, result=None)

    text = response.text
    parsed = _parse_body(text)
    if response.status_code > 299:
        raise HttpClientError(
            _error_message(response.status_code, text, parsed),
            status_code=response.status_code,
            result=parsed,
        )
    return TypedResponse(status_code=response.status_code, headers=headers, result=parsed)


__all__ = ["get_httpx_client", "close_all_clients", "request"]
