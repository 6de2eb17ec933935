"""Application package for the Greeter Flask service."""
from __future__ import annotations

from flask import Flask

# WSGI servers, ``flask run`` and the launcher all serve this one instance.
app = Flask(__name__)


def _register_routes() -> None:
    # Deferred so ``routes.index`` can import ``app`` from this module.
    from greeter.routes import index as _index  # noqa: F401


_register_routes()

__all__ = ["app"]
