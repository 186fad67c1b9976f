"""
Pytest configuration and shared fixtures.

Provides test applications for both storage backends, a test client,
a CLI runner, and storage connections loaded with the reference
dataset.  The ``connection`` fixture is parametrized over both backends
so that contract and registry tests run once per backend.
"""

import pytest

from hrdirectory import create_app
from hrdirectory.connections import InMemoryConnection
from hrdirectory.extensions import db
from hrdirectory.services.facade_registry import FacadeRegistry, current_registry


@pytest.fixture()
def app():
    """
    Create a Flask application configured for testing.

    The ``testing`` config uses the in-memory backend seeded with the
    reference dataset, so every test starts from the same data.
    """
    app = create_app("testing")

    # Establish an application context for the duration of the test.
    with app.app_context():
        yield app


@pytest.fixture()
def sql_app(tmp_path):
    """
    Create a testing application backed by a file-based SQLite database.

    A file (rather than ``sqlite://``) is used so that worker threads in
    the concurrency tests each get their own database connection.
    """
    app = create_app(
        "testing",
        {
            "STORAGE_BACKEND": "sql",
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'directory.db'}",
        },
    )
    with app.app_context():
        yield app
        db.engine.dispose()


@pytest.fixture()
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_health(client):
            response = client.get("/health")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def runner(app):  # pylint: disable=redefined-outer-name
    """Provide a runner for the custom ``flask`` CLI commands."""
    return app.test_cli_runner()


@pytest.fixture()
def inmem_connection():
    """In-memory connection loaded with the reference dataset."""
    return InMemoryConnection()


@pytest.fixture()
def sql_connection(sql_app):  # pylint: disable=redefined-outer-name
    """SQL connection over a fresh, seeded SQLite database."""
    return current_registry().connection


@pytest.fixture(params=["memory", "sql"])
def connection(request):
    """Each seeded backend in turn."""
    name = "inmem_connection" if request.param == "memory" else "sql_connection"
    return request.getfixturevalue(name)


@pytest.fixture()
def registry(connection):  # pylint: disable=redefined-outer-name
    """A standalone facade registry over the current backend."""
    return FacadeRegistry(connection)
