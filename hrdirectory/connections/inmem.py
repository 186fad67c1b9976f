"""
In-memory storage connection — the reference backend.

Holds organization trees in a dict guarded by a single lock.  Every
method copies on the way in and on the way out, so the stored trees are
only ever reachable through this class.
"""

import logging
import threading
from typing import Iterable

from hrdirectory.connections.base import StorageConnection
from hrdirectory.entities import Department, Employee, Organization
from hrdirectory.seed import build_seed_organizations

logger = logging.getLogger(__name__)


class InMemoryConnection(StorageConnection):
    """
    Directory data held in process memory.

    Args:
        organizations: Initial organizations.  Defaults to the reference
                       seed dataset; pass an empty list for an empty store.
    """

    backend_name = "memory"

    def __init__(self, organizations: Iterable[Organization] | None = None) -> None:
        self._lock = threading.Lock()
        self._organizations: dict[int, Organization] = {}
        if organizations is None:
            organizations = build_seed_organizations()
        for organization in organizations:
            self._organizations[organization.id] = organization.copy()
        logger.debug(
            "InMemoryConnection initialized with %d organization(s)",
            len(self._organizations),
        )

    # -- Reads -------------------------------------------------------------

    def get_organization(self, org_id: int) -> Organization | None:
        with self._lock:
            organization = self._organizations.get(org_id)
            return None if organization is None else organization.copy()

    def get_departments(self, org_id: int) -> list[Department]:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return []
            return [department.copy() for department in organization.departments]

    def get_employees(self, org_id: int) -> list[Employee]:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return []
            return [employee.copy() for employee in organization.employees]

    def get_employee(self, org_id: int, employee_id: int) -> Employee | None:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return None
            employee = organization.get_employee(employee_id)
            return None if employee is None else employee.copy()

    def get_department(self, org_id: int, department_id: int) -> Department | None:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return None
            department = organization.get_department(department_id)
            return None if department is None else department.copy()

    # -- Writes ------------------------------------------------------------

    def update_employee(self, org_id: int, employee: Employee) -> bool:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return False
            department = organization.find_department_of(employee.id)
            if department is None:
                return False
            stored = department.get_employee(employee.id)
            # Name and hire date are fixed once the employee exists.
            if (stored.name, stored.hire_date) != (employee.name, employee.hire_date):
                return False
            return department.replace_employee(employee.copy())

    def add_employee_to_department(
        self, org_id: int, department_id: int, employee: Employee
    ) -> bool:
        with self._lock:
            organization = self._organizations.get(org_id)
            if organization is None:
                return False
            return organization.add_employee_to_department(department_id, employee.copy())

    def add_organization(self, organization: Organization) -> bool:
        with self._lock:
            if organization.id in self._organizations:
                return False
            self._organizations[organization.id] = organization.copy()
        logger.info("Added organization %s (%s)", organization.id, organization.name)
        return True

    def remove_organization(self, org_id: int) -> bool:
        with self._lock:
            removed = self._organizations.pop(org_id, None)
        if removed is None:
            return False
        logger.info("Removed organization %s", org_id)
        return True
