"""
Department entity — owns its employees and names one of them as head.
"""

import statistics
from typing import Any, Callable, Iterable

from hrdirectory.entities.component import (
    OrganizationComponent,
    require_id,
    require_name,
)
from hrdirectory.entities.employee import Employee
from hrdirectory.exceptions import ValidationError

# Keys returned by every statistics helper, in display order.
STATISTIC_KEYS = ("count", "mean", "median", "min", "max", "std_dev")


def summarize(values: list[float]) -> dict[str, float | int]:
    """
    Summarize a list of numbers under ``STATISTIC_KEYS``.

    An empty list yields a count of zero and ``0.0`` for everything else.
    """
    if not values:
        return {"count": 0, "mean": 0.0, "median": 0.0, "min": 0.0, "max": 0.0, "std_dev": 0.0}
    return {
        "count": len(values),
        "mean": statistics.fmean(values),
        "median": float(statistics.median(values)),
        "min": min(values),
        "max": max(values),
        "std_dev": statistics.pstdev(values),
    }


class Department(OrganizationComponent):
    """
    A department within one organization.

    The head is stored as an employee ID and resolved on access, so it
    is a lookup into ``employees`` rather than a second owner.
    """

    def __init__(
        self,
        department_id: int,
        name: str,
        employees: Iterable[Employee] | None = None,
        head_id: int | None = None,
    ) -> None:
        self._id = require_id(department_id, "Department")
        self._name = require_name(name, "Department")
        self._employees: dict[int, Employee] = {}
        for employee in employees or ():
            if not self.add_employee(employee):
                raise ValidationError(
                    f"Duplicate employee ID {employee.id} in department {self._id}"
                )
        self._head_id: int | None = None
        if head_id is not None:
            self.set_head(head_id)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_name(self) -> str:
        return "Department"

    @property
    def children(self) -> list[OrganizationComponent]:
        return list(self.employees)

    @property
    def employees(self) -> list[Employee]:
        """Employees ordered by ID."""
        return [self._employees[key] for key in sorted(self._employees)]

    # -- Head of department ------------------------------------------------

    @property
    def head_id(self) -> int | None:
        return self._head_id

    @property
    def head(self) -> Employee | None:
        """The head employee, or None if unset or no longer a member."""
        if self._head_id is None:
            return None
        return self._employees.get(self._head_id)

    def set_head(self, employee_id: int | None) -> None:
        """Name a member of this department as head, or clear it with None."""
        if employee_id is not None and employee_id not in self._employees:
            raise ValidationError(
                f"Employee {employee_id} is not a member of department {self._id}"
            )
        self._head_id = employee_id

    # -- Membership --------------------------------------------------------

    def get_employee(self, employee_id: int) -> Employee | None:
        return self._employees.get(employee_id)

    def add_employee(self, employee: Employee) -> bool:
        """Add an employee; returns False if the ID is already present."""
        if employee.id in self._employees:
            return False
        self._employees[employee.id] = employee
        return True

    def replace_employee(self, employee: Employee) -> bool:
        """Replace an existing member's record; returns False if absent."""
        if employee.id not in self._employees:
            return False
        self._employees[employee.id] = employee
        return True

    def remove_employee(self, employee_id: int) -> bool:
        if self._employees.pop(employee_id, None) is None:
            return False
        if self._head_id == employee_id:
            self._head_id = None
        return True

    # -- Aggregation -------------------------------------------------------

    def _statistics(self, field: Callable[[Employee], float]) -> dict[str, float | int]:
        return summarize([field(employee) for employee in self._employees.values()])

    def get_employee_performance_statistics(self) -> dict[str, float | int]:
        """Performance summary (count, mean, median, min, max, std_dev)."""
        return self._statistics(lambda employee: employee.performance)

    def get_employee_salary_statistics(self) -> dict[str, float | int]:
        """Salary summary (count, mean, median, min, max, std_dev)."""
        return self._statistics(lambda employee: employee.salary)

    # -- Serialization -----------------------------------------------------

    def copy(self) -> "Department":
        """Return a deep copy; employees are copied as well."""
        return Department(
            self._id,
            self._name,
            [employee.copy() for employee in self._employees.values()],
            head_id=self._head_id,
        )

    def to_json(self) -> dict[str, Any]:
        head = self.head
        return {
            "id": self._id,
            "name": self._name,
            "head": None if head is None else {"id": head.id, "name": head.name},
            "employees": [
                {"id": employee.id, "name": employee.name, "position": employee.position}
                for employee in self.employees
            ],
            "representation": str(self),
        }

    def __str__(self) -> str:
        return f"Department: {self._name} (ID: {self._id})"

    def __repr__(self) -> str:
        return f"<Department {self._id}: {self._name} ({len(self._employees)} employees)>"
