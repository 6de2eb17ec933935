"""Route for the root greeting of the Greeter service."""
from __future__ import annotations

from flask import Response

from greeter import app

GREETING = "Hello from our Java DevSecOps Pipeline!"


@app.route("/", methods=["GET"])
def greet() -> Response:
    """Return the fixed greeting as plain text.

    Headers, query string and body of the request are ignored.
    """
    return Response(GREETING, status=200, mimetype="text/plain")
