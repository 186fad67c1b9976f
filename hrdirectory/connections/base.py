"""
Storage connection interface.

A storage connection is the only code that touches directory data.  The
facade registry and the facades delegate every read and write to the
currently configured connection, so all backends must return the same
results for the same logical dataset:

  - Lookups of an unknown organization, department or employee return
    ``None`` (or an empty list), including for zero and negative IDs.
  - Writes report success as a boolean and never raise for a missing
    target.
  - Returned entities are copies; mutating one changes nothing until it
    is passed back through ``update_employee``.
  - Nothing is cached; each call reflects backend state at call time.

Backend failures (e.g. a database driver error) propagate unchanged and
are not retried here.
"""

from abc import ABC, abstractmethod

from hrdirectory.entities import Department, Employee, Organization


class StorageConnection(ABC):
    """Capability set implemented by every directory backend."""

    #: Short name reported by the health check.
    backend_name: str = "abstract"

    # -- Reads -------------------------------------------------------------

    @abstractmethod
    def get_organization(self, org_id: int) -> Organization | None:
        """Return the organization with its departments and employees, or None."""

    @abstractmethod
    def get_departments(self, org_id: int) -> list[Department]:
        """Return the organization's departments ordered by ID (empty if unknown)."""

    @abstractmethod
    def get_employees(self, org_id: int) -> list[Employee]:
        """Return all employees ordered by department ID, then employee ID."""

    @abstractmethod
    def get_employee(self, org_id: int, employee_id: int) -> Employee | None:
        """Return one employee, or None."""

    @abstractmethod
    def get_department(self, org_id: int, department_id: int) -> Department | None:
        """Return one department with its employees, or None."""

    # -- Writes ------------------------------------------------------------

    @abstractmethod
    def update_employee(self, org_id: int, employee: Employee) -> bool:
        """
        Write an existing employee's position, salary and performance.

        Returns True iff the employee already existed under the
        organization with the same name and hire date; those two fields
        are never changed.  Department membership is not changed, and a
        missing employee is never created.
        """

    @abstractmethod
    def add_employee_to_department(
        self, org_id: int, department_id: int, employee: Employee
    ) -> bool:
        """Add a new employee; False if the org/department is missing or the ID is taken."""

    @abstractmethod
    def add_organization(self, organization: Organization) -> bool:
        """Store a new organization tree; False if the ID is already in use."""

    @abstractmethod
    def remove_organization(self, org_id: int) -> bool:
        """Delete an organization and everything it owns; True iff it existed."""
