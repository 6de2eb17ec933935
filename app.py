"""WSGI entry point for the Greeter Flask service (``gunicorn app:app``)."""
from __future__ import annotations

from greeter import app
from greeter.main import main

__all__ = ["app"]


if __name__ == "__main__":
    main()
