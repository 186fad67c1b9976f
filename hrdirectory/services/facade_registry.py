"""
Facade registry — one ``OrganizationFacade`` per organization ID.

Locking:
    ``_lock`` guards the facade dict, the per-ID lock dict and the
    connection field.  It is only held for dict/field access, never
    across a storage call.

    Each organization ID has its own lock, held across the whole
    check → load → cache sequence in ``get_instance()`` and across
    ``remove_organization()``; an ID's entry is dropped once no thread
    holds or waits on it.  Two threads asking for the same ID
    therefore get the same facade, and a lookup racing a removal either
    completes first (and returns the live facade) or runs after it (and
    raises ``NotFoundError``).  Lookups for other IDs are not blocked
    by a slow backend call.

The application factory creates one registry per Flask app and stores
it in ``app.extensions``; use ``current_registry()`` inside a request or
CLI command.  Tests construct their own instances.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from flask import current_app

from hrdirectory.connections.base import StorageConnection
from hrdirectory.exceptions import ConfigurationError, NotFoundError
from hrdirectory.services.facade import OrganizationFacade

logger = logging.getLogger(__name__)

# Key under ``app.extensions`` where the application's registry lives.
EXTENSION_KEY = "facade_registry"


class _OrgLock:
    """A per-organization lock and the number of threads using it."""

    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.holders = 0


class FacadeRegistry:
    """Creates, caches and removes organization facades."""

    def __init__(self, connection: StorageConnection | None = None) -> None:
        self._lock = threading.Lock()
        self._connection = connection
        self._facades: dict[int, OrganizationFacade] = {}
        self._org_locks: dict[int, _OrgLock] = {}

    # -- Connection --------------------------------------------------------

    @property
    def connection(self) -> StorageConnection | None:
        with self._lock:
            return self._connection

    def set_connection(self, connection: StorageConnection | None) -> None:
        """
        Replace the active storage connection.

        Cached facades are bound to the old connection, so the cache is
        cleared.  ``None`` is accepted and makes later lookups fail with
        ``ConfigurationError``.
        """
        with self._lock:
            self._connection = connection
            self._facades.clear()
        logger.info(
            "Storage connection set to %s",
            connection.backend_name if connection is not None else None,
        )

    # -- Facades -----------------------------------------------------------

    def get_instance(self, org_id: int) -> OrganizationFacade:
        """
        Return the facade for ``org_id``, creating it on first use.

        Raises:
            ConfigurationError: If no storage connection is configured.
            NotFoundError:      If the organization does not exist.
        """
        with self._lock:
            facade = self._facades.get(org_id)
        if facade is not None:
            return facade

        with self._org_lock(org_id):
            with self._lock:
                facade = self._facades.get(org_id)
                connection = self._connection
            if facade is not None:
                return facade

            if connection is None:
                logger.error("Facade requested for org %s with no storage connection", org_id)
                raise ConfigurationError("No storage connection is configured")

            # Backend I/O: only this organization's lock is held.
            if connection.get_organization(org_id) is None:
                raise NotFoundError(f"Organization [{org_id}] not found")

            facade = OrganizationFacade(org_id, connection)
            with self._lock:
                # Don't cache a facade for a connection that was swapped out meanwhile.
                if self._connection is connection:
                    self._facades[org_id] = facade

        logger.debug("Created facade for org %s", org_id)
        return facade

    def remove_organization(self, org_id: int) -> bool:
        """
        Drop the cached facade and delete the organization's data.

        Returns True iff a facade or stored organization was removed.

        Raises:
            ConfigurationError: If no storage connection is configured.
        """
        with self._org_lock(org_id):
            with self._lock:
                connection = self._connection
                if connection is None:
                    raise ConfigurationError("No storage connection is configured")
                facade = self._facades.pop(org_id, None)

            data_removed = connection.remove_organization(org_id)

        removed = facade is not None or data_removed
        if removed:
            logger.info("Removed organization %s", org_id)
        else:
            logger.debug("remove_organization(%s): nothing to remove", org_id)
        return removed

    def cached_organization_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._facades)

    # -- Internal ----------------------------------------------------------

    @contextmanager
    def _org_lock(self, org_id: int) -> Iterator[None]:
        """
        Hold the lock for ``org_id``.

        Entries are reference-counted under ``_lock`` and dropped when the
        last holder or waiter leaves, so the map only contains IDs that
        are in use right now.
        """
        with self._lock:
            entry = self._org_locks.get(org_id)
            if entry is None:
                entry = self._org_locks[org_id] = _OrgLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._org_locks[org_id]


def current_registry() -> FacadeRegistry:
    """Return the registry of the active Flask application."""
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError as exc:
        raise ConfigurationError("Facade registry is not initialized") from exc
