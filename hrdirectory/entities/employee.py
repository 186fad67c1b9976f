"""
Employee entity — the leaf of the organization composite.

Salary and performance are validated on construction and on every
setter; an out-of-range value raises ``ValidationError`` and is never
clamped.  ``hire_date`` is a ``datetime.date``, an immutable value, so a
returned handle cannot be used to change the stored record.
"""

import math
from datetime import date, datetime
from numbers import Real
from typing import Any

from hrdirectory.entities.component import (
    OrganizationComponent,
    require_id,
    require_name,
)
from hrdirectory.exceptions import ValidationError

# Sentinel position for employees created without one.
DEFAULT_POSITION = "Other"

# Closed range accepted for performance scores.
PERFORMANCE_MIN = 0.0
PERFORMANCE_MAX = 100.0


def _to_number(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{label} must be a number, got {value!r}")
    number = float(value)
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"{label} must be finite, got {value!r}")
    return number


def _to_date(value: date | datetime | None) -> date:
    if value is None:
        return date.today()
    # datetime is a subclass of date, so check it first.
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise ValidationError(f"Hire date must be a date, got {value!r}")


class Employee(OrganizationComponent):
    """
    A single employee record.

    Args:
        employee_id: External ID, unique within the organization.
        name:        Display name (required).
        hire_date:   Date of hire; defaults to today.
        position:    Job title; empty or missing becomes ``"Other"``.
        salary:      Current salary, never negative.
        performance: Performance score in [0, 100].
    """

    def __init__(
        self,
        employee_id: int,
        name: str,
        hire_date: date | datetime | None = None,
        position: str | None = None,
        salary: float = 0.0,
        performance: float = 0.0,
    ) -> None:
        self._id = require_id(employee_id, "Employee")
        self._name = require_name(name, "Employee")
        self._hire_date = _to_date(hire_date)
        self.position = position
        self.salary = salary
        self.performance = performance

    # -- Composite capability ----------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def type_name(self) -> str:
        return "Employee"

    @property
    def children(self) -> list[OrganizationComponent]:
        return []

    # -- Mutable attributes ------------------------------------------------

    @property
    def hire_date(self) -> date:
        return self._hire_date

    @property
    def position(self) -> str:
        return self._position

    @position.setter
    def position(self, value: str | None) -> None:
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"Position must be a string, got {value!r}")
        self._position = value if value else DEFAULT_POSITION

    @property
    def salary(self) -> float:
        return self._salary

    @salary.setter
    def salary(self, value: float) -> None:
        number = _to_number(value, "Salary")
        if number < 0:
            raise ValidationError(f"Salary must not be negative, got {number}")
        self._salary = number

    @property
    def performance(self) -> float:
        return self._performance

    @performance.setter
    def performance(self, value: float) -> None:
        number = _to_number(value, "Performance")
        if not PERFORMANCE_MIN <= number <= PERFORMANCE_MAX:
            raise ValidationError(
                f"Performance must be between {PERFORMANCE_MIN:g} and "
                f"{PERFORMANCE_MAX:g}, got {number}"
            )
        self._performance = number

    # -- Helpers -----------------------------------------------------------

    def copy(self) -> "Employee":
        """Return an independent copy with the same field values."""
        return Employee(
            self._id,
            self._name,
            self._hire_date,
            self._position,
            self._salary,
            self._performance,
        )

    def to_json(self) -> dict[str, Any]:
        """Return the employee as a JSON-serializable dict."""
        return {
            "id": self._id,
            "name": self._name,
            "hireDate": self._hire_date.isoformat(),
            "position": self._position,
            "salary": self._salary,
            "performance": self._performance,
            "representation": str(self),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return (
            self._id == other._id
            and self._name == other._name
            and self._hire_date == other._hire_date
            and self._position == other._position
            and self._salary == other._salary
            and self._performance == other._performance
        )

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return f"Employee: {self._name} (ID: {self._id}) Hired at: {self._hire_date}"

    def __repr__(self) -> str:
        return f"<Employee {self._id}: {self._name} ({self._position})>"
