"""Test configuration for the impact report API."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from flask_jwt_extended import create_access_token

from impact_api import create_app
from impact_api.config import TestingConfig
from impact_api.extensions import db
from impact_api.models.user import User

ADMIN_EMAIL = "admin@example.org"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture()
def make_app(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[Callable[..., Flask], None, None]:
    """Build an isolated app on a throwaway SQLite file; config overrides apply before init."""

    monkeypatch.setattr(TestingConfig, "SQLALCHEMY_DATABASE_URI", f"sqlite:///{tmp_path / 'test.db'}")
    built = []

    def _make(**overrides) -> Flask:
        for name, value in overrides.items():
            monkeypatch.setattr(TestingConfig, name, value)
        app = create_app("testing")
        with app.app_context():
            db.create_all()
        built.append(app)
        return app

    yield _make

    for app in built:
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture()
def app(make_app: Callable[..., Flask]) -> Flask:
    return make_app()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def make_token(app: Flask, *, admin: bool = True, email: str = ADMIN_EMAIL, **kwargs) -> str:
    with app.app_context():
        return create_access_token(
            identity=email,
            additional_claims={"firstName": "Ada", "lastName": "Admin", "admin": admin},
            **kwargs,
        )


@pytest.fixture()
def auth_headers(app: Flask) -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token(app)}"}


@pytest.fixture()
def admin_user(app: Flask) -> str:
    with app.app_context():
        user = User()
        user.email = ADMIN_EMAIL
        user.first_name = "Ada"
        user.last_name = "Admin"
        user.is_admin = True
        user.set_password(ADMIN_PASSWORD)
        db.session.add(user)
        db.session.commit()
    return ADMIN_EMAIL
