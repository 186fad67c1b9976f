"""
Organization entity — the tenant root of the composite.

Department IDs are unique within an organization, and so are employee
IDs across all of its departments.  Adds that would break either rule
return False and leave the organization unchanged.
"""

from typing import Any, Iterable

from hrdirectory.entities.component import (
    OrganizationComponent,
    require_id,
    require_name,
)
from hrdirectory.entities.department import Department
from hrdirectory.entities.employee import Employee
from hrdirectory.exceptions import ValidationError


class Organization(OrganizationComponent):
    """A tenant: an externally keyed organization and its departments."""

    def __init__(
        self,
        organization_id: int,
        name: str,
        departments: Iterable[Department] | None = None,
    ) -> None:
        self._id = require_id(organization_id, "Organization")
        self._name = require_name(name, "Organization")
        self._departments: dict[int, Department] = {}
        for department in departments or ():
            if not self.add_department(department):
                raise ValidationError(
                    f"Department {department.id} conflicts with organization {self._id}"
                )

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_name(self) -> str:
        return "Organization"

    @property
    def children(self) -> list[OrganizationComponent]:
        return list(self.departments)

    @property
    def departments(self) -> list[Department]:
        """Departments ordered by ID."""
        return [self._departments[key] for key in sorted(self._departments)]

    @property
    def employees(self) -> list[Employee]:
        """All employees, ordered by department ID then employee ID."""
        return [
            employee
            for department in self.departments
            for employee in department.employees
        ]

    def get_department(self, department_id: int) -> Department | None:
        return self._departments.get(department_id)

    def get_employee(self, employee_id: int) -> Employee | None:
        department = self.find_department_of(employee_id)
        return None if department is None else department.get_employee(employee_id)

    def find_department_of(self, employee_id: int) -> Department | None:
        """Return the department that owns an employee, or None."""
        for department in self._departments.values():
            if department.get_employee(employee_id) is not None:
                return department
        return None

    def add_department(self, department: Department) -> bool:
        """
        Add a department.

        Returns False if the department ID is taken or any of its
        employee IDs is already used elsewhere in the organization.
        """
        if department.id in self._departments:
            return False
        if any(
            self.find_department_of(emp.id) is not None for emp in department.employees
        ):
            return False
        self._departments[department.id] = department
        return True

    def remove_department(self, department_id: int) -> bool:
        return self._departments.pop(department_id, None) is not None

    def add_employee_to_department(self, department_id: int, employee: Employee) -> bool:
        """Add an employee to one of this organization's departments."""
        department = self._departments.get(department_id)
        if department is None or self.find_department_of(employee.id) is not None:
            return False
        return department.add_employee(employee)

    def copy(self) -> "Organization":
        """Return a deep copy of the organization tree."""
        return Organization(
            self._id,
            self._name,
            [department.copy() for department in self._departments.values()],
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "name": self._name,
            "departments": [
                {"id": department.id, "name": department.name}
                for department in self.departments
            ],
            "representation": str(self),
        }

    def __str__(self) -> str:
        return f"Organization: {self._name} (ID: {self._id})"

    def __repr__(self) -> str:
        return f"<Organization {self._id}: {self._name}>"
