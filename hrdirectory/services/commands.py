"""
Command objects — translate one inbound request into facade calls.

Each command is a small dataclass whose ``execute(registry)`` returns a
JSON-serializable result.  Commands turn an absent employee or
department into ``NotFoundError`` and a rejected write into
``OperationFailedError``; the HTTP layer maps those to status codes.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from hrdirectory.entities import Department, Employee
from hrdirectory.exceptions import NotFoundError, OperationFailedError
from hrdirectory.services.facade import OrganizationFacade
from hrdirectory.services.facade_registry import FacadeRegistry

logger = logging.getLogger(__name__)


class Command(ABC):
    """A single unit of work against the directory."""

    @abstractmethod
    def execute(self, registry: FacadeRegistry) -> Any:
        """Run the command and return its JSON-serializable result."""


def _require_employee(facade: OrganizationFacade, employee_id: int) -> Employee:
    employee = facade.get_employee(employee_id)
    if employee is None:
        raise NotFoundError(f"Employee [{employee_id}] not found")
    return employee


def _require_department(facade: OrganizationFacade, department_id: int) -> Department:
    department = facade.get_department(department_id)
    if department is None:
        raise NotFoundError(f"Department [{department_id}] not found")
    return department


def _save(facade: OrganizationFacade, employee: Employee) -> None:
    if not facade.update_employee(employee):
        logger.warning(
            "Update rejected for employee %s in org %s", employee.id, facade.org_id
        )
        raise OperationFailedError(f"Failed to update employee [{employee.id}]")


# =========================================================================
# Read commands
# =========================================================================


@dataclass(frozen=True)
class GetOrgInfoCommand(Command):
    """Return an organization's summary."""

    org_id: int

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        organization = registry.get_instance(self.org_id).get_organization()
        if organization is None:
            # Removed between the registry lookup and this read.
            raise NotFoundError(f"Organization [{self.org_id}] not found")
        return organization.to_json()


@dataclass(frozen=True)
class ListDepartmentsCommand(Command):
    org_id: int

    def execute(self, registry: FacadeRegistry) -> list[dict[str, Any]]:
        departments = registry.get_instance(self.org_id).get_departments()
        return [department.to_json() for department in departments]


@dataclass(frozen=True)
class GetDeptInfoCommand(Command):
    org_id: int
    department_id: int

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        facade = registry.get_instance(self.org_id)
        return _require_department(facade, self.department_id).to_json()


@dataclass(frozen=True)
class GetEmpInfoCommand(Command):
    org_id: int
    employee_id: int

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        facade = registry.get_instance(self.org_id)
        return _require_employee(facade, self.employee_id).to_json()


@dataclass(frozen=True)
class StatDeptPerfCommand(Command):
    """Return performance statistics for one department."""

    org_id: int
    department_id: int

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        facade = registry.get_instance(self.org_id)
        department = _require_department(facade, self.department_id)
        return department.get_employee_performance_statistics()


@dataclass(frozen=True)
class StatDeptSalaryCommand(Command):
    """Return salary statistics for one department."""

    org_id: int
    department_id: int

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        facade = registry.get_instance(self.org_id)
        department = _require_department(facade, self.department_id)
        return department.get_employee_salary_statistics()


# =========================================================================
# Write commands
# =========================================================================


@dataclass(frozen=True)
class SetEmpPosiCommand(Command):
    org_id: int
    employee_id: int
    position: str

    def execute(self, registry: FacadeRegistry) -> str:
        facade = registry.get_instance(self.org_id)
        employee = _require_employee(facade, self.employee_id)
        employee.position = self.position
        _save(facade, employee)
        return (
            f"Successfully set position of employee [{self.employee_id}] "
            f"to {employee.position}"
        )


@dataclass(frozen=True)
class SetEmpSalaryCommand(Command):
    org_id: int
    employee_id: int
    salary: float

    def execute(self, registry: FacadeRegistry) -> str:
        facade = registry.get_instance(self.org_id)
        employee = _require_employee(facade, self.employee_id)
        employee.salary = self.salary
        _save(facade, employee)
        return (
            f"Successfully set salary of employee [{self.employee_id}] "
            f"to {employee.salary:g}"
        )


@dataclass(frozen=True)
class SetEmpPerfCommand(Command):
    org_id: int
    employee_id: int
    performance: float

    def execute(self, registry: FacadeRegistry) -> str:
        facade = registry.get_instance(self.org_id)
        employee = _require_employee(facade, self.employee_id)
        employee.performance = self.performance
        _save(facade, employee)
        return (
            f"Successfully set performance of employee [{self.employee_id}] "
            f"to {employee.performance:g}"
        )


@dataclass(frozen=True)
class RemoveOrgCommand(Command):
    org_id: int

    def execute(self, registry: FacadeRegistry) -> str:
        if not registry.remove_organization(self.org_id):
            raise NotFoundError(f"Organization [{self.org_id}] not found")
        return f"Successfully removed organization [{self.org_id}]"


@dataclass(frozen=True)
class UpdateEmpCommand(Command):
    """
    Apply several field changes to one employee in a single write.

    Fields left as None are unchanged.  All values are validated before
    anything is written, so a bad value leaves the record untouched.
    """

    org_id: int
    employee_id: int
    position: str | None = None
    salary: float | None = None
    performance: float | None = None

    def execute(self, registry: FacadeRegistry) -> dict[str, Any]:
        facade = registry.get_instance(self.org_id)
        employee = _require_employee(facade, self.employee_id)
        if self.position is not None:
            employee.position = self.position
        if self.salary is not None:
            employee.salary = self.salary
        if self.performance is not None:
            employee.performance = self.performance
        _save(facade, employee)
        return employee.to_json()
