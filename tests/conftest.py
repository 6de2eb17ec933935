from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from greeter import app as greeter_app


@pytest.fixture()
def app() -> Flask:
    greeter_app.config.update(TESTING=True)
    return greeter_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
