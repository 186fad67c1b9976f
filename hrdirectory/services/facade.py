"""
Organization facade — the per-tenant operation surface.

A facade holds nothing but its organization ID and the storage
connection it was built with; every call is forwarded to that
connection with the ID filled in.  Facades are obtained from
``FacadeRegistry.get_instance()`` rather than constructed directly.
"""

from hrdirectory.connections.base import StorageConnection
from hrdirectory.entities import Department, Employee, Organization


class OrganizationFacade:
    """Data access for one organization."""

    def __init__(self, org_id: int, connection: StorageConnection) -> None:
        self._org_id = org_id
        self._connection = connection

    @property
    def org_id(self) -> int:
        return self._org_id

    def get_organization(self) -> Organization | None:
        return self._connection.get_organization(self._org_id)

    def get_departments(self) -> list[Department]:
        return self._connection.get_departments(self._org_id)

    def get_employees(self) -> list[Employee]:
        return self._connection.get_employees(self._org_id)

    def get_employee(self, employee_id: int) -> Employee | None:
        """Return the employee, or None for an unknown (or non-positive) ID."""
        return self._connection.get_employee(self._org_id, employee_id)

    def get_department(self, department_id: int) -> Department | None:
        """Return the department, or None for an unknown (or non-positive) ID."""
        return self._connection.get_department(self._org_id, department_id)

    def update_employee(self, employee: Employee | None) -> bool:
        """
        Write back an employee's values.

        Returns False, with no state change, if ``employee`` is None or
        its ID does not already exist in this organization.
        """
        if employee is None:
            return False
        return self._connection.update_employee(self._org_id, employee)

    def add_employee_to_department(self, department_id: int, employee: Employee) -> bool:
        return self._connection.add_employee_to_department(
            self._org_id, department_id, employee
        )

    def __repr__(self) -> str:
        return f"<OrganizationFacade org={self._org_id}>"
