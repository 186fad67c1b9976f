"""
Storage connection package.

Two interchangeable backends implement ``StorageConnection``:

  - ``InMemoryConnection`` (``memory``) — reference backend for tests
    and local development.
  - ``SqlConnection`` (``sql``) — persistent backend over SQLAlchemy.
"""

from hrdirectory.connections.base import StorageConnection  # noqa: F401
from hrdirectory.connections.inmem import InMemoryConnection  # noqa: F401
from hrdirectory.connections.sql import SqlConnection  # noqa: F401

# Backend names accepted by the STORAGE_BACKEND setting.
BACKENDS = ("memory", "sql")
