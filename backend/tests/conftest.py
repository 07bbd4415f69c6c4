import itertools

import pytest

from composer import create_app
from composer.domain.catalog import PACKS
from composer.domain.sections.registry import build_registry
from composer.extensions import db


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(scope="session")
def registry():
    return build_registry(PACKS, duplicate_policy="strict")


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"s_{next(counter)}"
