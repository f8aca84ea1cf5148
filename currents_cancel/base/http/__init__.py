"""HTTP utilities: shared ``httpx`` client pool and the PUT-JSON request helper."""

from .client import close_all_clients, get_httpx_client, request

__all__ = ["get_httpx_client", "close_all_clients", "request"]
