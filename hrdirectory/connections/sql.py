"""
SQL storage connection — the persistent backend.

Built on the SQLAlchemy engine owned by Flask-SQLAlchemy, but it opens
its own short-lived ``Session`` per call instead of using the
request-scoped ``db.session``.  That keeps it usable from worker threads
that have no application context, and it means no transaction (and no
database lock) is held between calls.

Employee updates are a single ``UPDATE`` statement, so a concurrent
reader never sees a half-written row and concurrent writers resolve to
last-writer-wins.  In-process writes are additionally serialized with a
lock; SQLite only allows one writer at a time anyway.

``SQLAlchemyError`` is not caught here: a failed or timed-out statement
surfaces to the caller as a failed operation.
"""

import logging
import threading

from sqlalchemy import select, update
from sqlalchemy.engine import Engine
from sqlalchemy.orm import selectinload, sessionmaker

from hrdirectory.connections.base import StorageConnection
from hrdirectory.entities import Department, Employee, Organization
from hrdirectory.models.organization import (
    DepartmentRecord,
    EmployeeRecord,
    OrganizationRecord,
)

logger = logging.getLogger(__name__)


# =========================================================================
# Row <-> entity conversion
# =========================================================================


def _to_employee(record: EmployeeRecord) -> Employee:
    return Employee(
        record.employee_id,
        record.name,
        record.hire_date,
        record.position,
        record.salary,
        record.performance,
    )


def _to_department(record: DepartmentRecord) -> Department:
    employees = [_to_employee(row) for row in record.employees]
    head_id = record.head_employee_id
    # A head that has left the department resolves to no head.
    if head_id is not None and all(emp.id != head_id for emp in employees):
        head_id = None
    return Department(record.department_id, record.name, employees, head_id=head_id)


def _to_organization(record: OrganizationRecord) -> Organization:
    return Organization(
        record.id,
        record.name,
        [_to_department(row) for row in record.departments],
    )


def _employee_record(org_id: int, employee: Employee) -> EmployeeRecord:
    return EmployeeRecord(
        organization_id=org_id,
        employee_id=employee.id,
        name=employee.name,
        hire_date=employee.hire_date,
        position=employee.position,
        salary=employee.salary,
        performance=employee.performance,
    )


def _organization_record(organization: Organization) -> OrganizationRecord:
    record = OrganizationRecord(id=organization.id, name=organization.name)
    for department in organization.departments:
        department_record = DepartmentRecord(
            department_id=department.id,
            name=department.name,
            head_employee_id=department.head_id,
        )
        department_record.employees = [
            _employee_record(organization.id, employee)
            for employee in department.employees
        ]
        record.departments.append(department_record)
    return record


# =========================================================================
# Connection
# =========================================================================


class SqlConnection(StorageConnection):
    """
    Directory data stored in the relational database.

    Args:
        engine: SQLAlchemy engine, usually ``db.engine`` read inside an
                application context.
    """

    backend_name = "sql"

    def __init__(self, engine: Engine) -> None:
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self._write_lock = threading.Lock()
        logger.debug("SqlConnection initialized (url=%s)", engine.url)

    # -- Reads -------------------------------------------------------------

    def get_organization(self, org_id: int) -> Organization | None:
        query = (
            select(OrganizationRecord)
            .where(OrganizationRecord.id == org_id)
            .options(
                selectinload(OrganizationRecord.departments).selectinload(
                    DepartmentRecord.employees
                )
            )
        )
        with self._session_factory() as session:
            record = session.scalars(query).one_or_none()
            return None if record is None else _to_organization(record)

    def get_departments(self, org_id: int) -> list[Department]:
        query = (
            select(DepartmentRecord)
            .where(DepartmentRecord.organization_id == org_id)
            .options(selectinload(DepartmentRecord.employees))
            .order_by(DepartmentRecord.department_id)
        )
        with self._session_factory() as session:
            return [_to_department(row) for row in session.scalars(query)]

    def get_employees(self, org_id: int) -> list[Employee]:
        query = (
            select(EmployeeRecord)
            .join(EmployeeRecord.department)
            .where(EmployeeRecord.organization_id == org_id)
            .order_by(DepartmentRecord.department_id, EmployeeRecord.employee_id)
        )
        with self._session_factory() as session:
            return [_to_employee(row) for row in session.scalars(query)]

    def get_employee(self, org_id: int, employee_id: int) -> Employee | None:
        query = select(EmployeeRecord).where(
            EmployeeRecord.organization_id == org_id,
            EmployeeRecord.employee_id == employee_id,
        )
        with self._session_factory() as session:
            record = session.scalars(query).one_or_none()
            return None if record is None else _to_employee(record)

    def get_department(self, org_id: int, department_id: int) -> Department | None:
        query = (
            select(DepartmentRecord)
            .where(
                DepartmentRecord.organization_id == org_id,
                DepartmentRecord.department_id == department_id,
            )
            .options(selectinload(DepartmentRecord.employees))
        )
        with self._session_factory() as session:
            record = session.scalars(query).one_or_none()
            return None if record is None else _to_department(record)

    # -- Writes ------------------------------------------------------------

    def update_employee(self, org_id: int, employee: Employee) -> bool:
        statement = (
            update(EmployeeRecord)
            .where(
                EmployeeRecord.organization_id == org_id,
                EmployeeRecord.employee_id == employee.id,
                # Name and hire date are fixed once the employee exists.
                EmployeeRecord.name == employee.name,
                EmployeeRecord.hire_date == employee.hire_date,
            )
            .values(
                position=employee.position,
                salary=employee.salary,
                performance=employee.performance,
            )
            .execution_options(synchronize_session=False)
        )
        with self._write_lock, self._session_factory.begin() as session:
            result = session.execute(statement)
            updated = result.rowcount == 1

        logger.debug(
            "update_employee org=%s emp=%s -> %s", org_id, employee.id, updated
        )
        return updated

    def add_employee_to_department(
        self, org_id: int, department_id: int, employee: Employee
    ) -> bool:
        with self._write_lock, self._session_factory.begin() as session:
            department = session.scalars(
                select(DepartmentRecord).where(
                    DepartmentRecord.organization_id == org_id,
                    DepartmentRecord.department_id == department_id,
                )
            ).one_or_none()
            if department is None:
                return False

            taken = session.scalar(
                select(EmployeeRecord.id).where(
                    EmployeeRecord.organization_id == org_id,
                    EmployeeRecord.employee_id == employee.id,
                )
            )
            if taken is not None:
                return False

            department.employees.append(_employee_record(org_id, employee))

        logger.info(
            "Added employee %s to org %s department %s",
            employee.id,
            org_id,
            department_id,
        )
        return True

    def add_organization(self, organization: Organization) -> bool:
        with self._write_lock, self._session_factory.begin() as session:
            if session.get(OrganizationRecord, organization.id) is not None:
                return False
            session.add(_organization_record(organization))

        logger.info("Added organization %s (%s)", organization.id, organization.name)
        return True

    def remove_organization(self, org_id: int) -> bool:
        with self._write_lock, self._session_factory.begin() as session:
            record = session.get(OrganizationRecord, org_id)
            if record is None:
                return False
            # Departments and employees go with it via the delete-orphan cascade.
            session.delete(record)

        logger.info("Removed organization %s", org_id)
        return True
