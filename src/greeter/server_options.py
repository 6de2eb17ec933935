"""Helpers for resolving the address the HTTP listener binds to."""
from __future__ import annotations

import os
from typing import Any, Mapping, TypedDict

__all__ = ["ServerOptions", "load_server_options"]

_HOST_VARIABLE = "GREETER_HOST"
_PORT_VARIABLE = "GREETER_PORT"
_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 8080


class ServerOptions(TypedDict):
    """Host and port for the development server."""

    host: str
    port: int


def load_server_options(environ: Mapping[str, Any] | None = None) -> ServerOptions:
    """Read ``GREETER_HOST`` and ``GREETER_PORT`` from ``environ``.

    Args:
        environ: Optional mapping to read from instead of ``os.environ``.

    Returns:
        The resolved listener options.

    Raises:
        ValueError: If the port is not an integer in ``1..65535`` or the host
            is blank.
    """

    source = os.environ if environ is None else environ

    raw_host = source.get(_HOST_VARIABLE)
    host = _DEFAULT_HOST if raw_host is None else str(raw_host).strip()
    if not host:
        raise ValueError(f"{_HOST_VARIABLE} must not be blank.")

    raw_port = source.get(_PORT_VARIABLE, _DEFAULT_PORT)
    if isinstance(raw_port, bool):
        raise ValueError(f"{_PORT_VARIABLE} must be an integer, got {raw_port!r}.")

    try:
        port = int(raw_port)
    except (TypeError, ValueError):
        raise ValueError(
            f"{_PORT_VARIABLE} must be an integer, got {raw_port!r}."
        ) from None

    if not 1 <= port <= 65535:
        raise ValueError(f"{_PORT_VARIABLE} must be between 1 and 65535, got {port}.")

    return ServerOptions(host=host, port=port)
