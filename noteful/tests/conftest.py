from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from noteful.app import create_app
from noteful.container import Container
from noteful.infrastructure.db import init_db
from noteful.shared.config import AppConfig, DatabaseConfig, JwtConfig, SecurityConfig
from noteful.tests.support import FAST_HASH_METHOD, TEST_SECRET


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url="sqlite://"),
        jwt=JwtConfig(secret=TEST_SECRET),
        security=SecurityConfig(password_hash_method=FAST_HASH_METHOD),
    )


@pytest.fixture()
def container(config: AppConfig) -> Iterator[Container]:
    container = Container(config)
    init_db(container.engine)
    yield container
    container.engine.dispose()


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    return create_app(config, container=container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as client:
        yield client
