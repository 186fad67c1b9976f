"""
Storage connection contract tests.

Every test in ``TestConnectionContract`` runs against both backends via
the parametrized ``connection`` fixture.  ``TestBackendEquivalence``
loads the same reference dataset into both and compares results
directly.
"""

from datetime import date

import pytest

from hrdirectory.entities import Department, Employee, Organization
from hrdirectory.seed import build_seed_organizations


class TestConnectionContract:
    """Behaviour every storage connection must share."""

    def test_get_organization(self, connection):
        organization = connection.get_organization(1)
        assert organization.name == "Acme Corporation"
        assert [dept.id for dept in organization.departments] == [1, 2, 3]

    @pytest.mark.parametrize("org_id", [0, -1, 404])
    def test_unknown_organization_is_absent(self, connection, org_id):
        assert connection.get_organization(org_id) is None
        assert connection.get_departments(org_id) == []
        assert connection.get_employees(org_id) == []
        assert connection.get_employee(org_id, 1) is None
        assert connection.get_department(org_id, 1) is None

    @pytest.mark.parametrize("employee_id", [0, -1, 99])
    def test_unknown_employee_is_absent(self, connection, employee_id):
        assert connection.get_employee(1, employee_id) is None

    @pytest.mark.parametrize("department_id", [0, -100, 42])
    def test_unknown_department_is_absent(self, connection, department_id):
        assert connection.get_department(1, department_id) is None

    def test_employee_ids_are_scoped_per_organization(self, connection):
        assert connection.get_employee(1, 1).name == "Alice Chen"
        assert connection.get_employee(2, 1).name == "Frank Moreau"

    def test_get_department_includes_employees_and_head(self, connection):
        department = connection.get_department(1, 2)
        assert department.name == "Sales"
        assert [emp.id for emp in department.employees] == [4, 5]
        assert department.head.name == "Dmitri Volkov"

    def test_get_employees_order(self, connection):
        assert [emp.id for emp in connection.get_employees(1)] == [1, 2, 3, 4, 5]

    def test_department_ids_are_unique(self, connection):
        for org_id in (1, 2):
            ids = [dept.id for dept in connection.get_departments(org_id)]
            assert len(ids) == len(set(ids))

    def test_update_employee_replaces_values(self, connection):
        employee = connection.get_employee(1, 2)
        employee.position = "Senior QA Engineer"
        employee.salary = 1200
        employee.performance = 95

        assert connection.update_employee(1, employee) is True
        assert connection.get_employee(1, 2) == employee
        # Membership is unchanged.
        assert connection.get_department(1, 1).get_employee(2) == employee

    def test_update_unknown_employee_returns_false(self, connection):
        before = connection.get_employees(1)

        assert connection.update_employee(1, Employee(99, "FakeName", salary=9999.99)) is False
        assert connection.update_employee(404, Employee(1, "Nobody")) is False
        assert connection.get_employees(1) == before
        assert connection.get_employee(1, 99) is None

    def test_update_cannot_change_name_or_hire_date(self, connection):
        stored = connection.get_employee(1, 1)
        renamed = Employee(1, "Someone Else", stored.hire_date, "Manager", 2000, 90)
        redated = Employee(1, stored.name, date(1990, 1, 1), "Manager", 2000, 90)

        assert connection.update_employee(1, renamed) is False
        assert connection.update_employee(1, redated) is False
        assert connection.get_employee(1, 1) == stored

    def test_returned_entities_are_copies(self, connection):
        employee = connection.get_employee(1, 1)
        employee.salary = 123456

        assert connection.get_employee(1, 1).salary == 1000.0

    def test_add_employee_to_department(self, connection):
        hire = Employee(6, "Hana Park", date(2024, 6, 1), "Intern", 300, 50)

        assert connection.add_employee_to_department(1, 3, hire) is True
        assert connection.get_employee(1, 6) == hire
        assert [emp.id for emp in connection.get_department(1, 3).employees] == [6]

    def test_add_employee_rejects_missing_targets_and_duplicates(self, connection):
        assert connection.add_employee_to_department(1, 99, Employee(7, "X")) is False
        assert connection.add_employee_to_department(404, 1, Employee(7, "X")) is False
        # ID 4 already exists in another department of org 1.
        assert connection.add_employee_to_department(1, 1, Employee(4, "Dup")) is False
        assert connection.get_employee(1, 7) is None

    def test_add_and_remove_organization(self, connection):
        org = Organization(999, "TestOrg", [Department(1, "Only", [Employee(1, "Solo")])])

        assert connection.add_organization(org) is True
        assert connection.add_organization(org) is False
        assert connection.get_employee(999, 1).name == "Solo"

        assert connection.remove_organization(999) is True
        assert connection.get_organization(999) is None
        assert connection.get_employees(999) == []
        assert connection.remove_organization(999) is False

    def test_remove_does_not_touch_other_organizations(self, connection):
        assert connection.remove_organization(1) is True
        assert connection.get_organization(2).name == "Globex Industries"
        assert len(connection.get_employees(2)) == 2


class TestBackendEquivalence:
    """The same dataset must look identical through both backends."""

    @pytest.fixture(autouse=True)
    def _setup(self, inmem_connection, sql_connection):
        self.memory = inmem_connection
        self.sql = sql_connection

    @pytest.mark.parametrize("org_id", [1, 2])
    def test_organizations_match(self, org_id):
        assert self.sql.get_organization(org_id).to_json() == (
            self.memory.get_organization(org_id).to_json()
        )

    @pytest.mark.parametrize("org_id", [1, 2])
    def test_departments_match(self, org_id):
        memory_departments = self.memory.get_departments(org_id)
        sql_departments = self.sql.get_departments(org_id)

        assert len(sql_departments) == len(memory_departments)
        for sql_dept, memory_dept in zip(sql_departments, memory_departments):
            assert sql_dept.id == memory_dept.id
            assert sql_dept.name == memory_dept.name
            assert sql_dept.head_id == memory_dept.head_id
            assert sql_dept.employees == memory_dept.employees

    def test_every_employee_matches(self):
        for organization in build_seed_organizations():
            for employee in organization.employees:
                assert self.sql.get_employee(organization.id, employee.id) == (
                    self.memory.get_employee(organization.id, employee.id)
                )

    def test_statistics_match(self):
        for department_id in (1, 2, 3):
            assert (
                self.sql.get_department(1, department_id).get_employee_performance_statistics()
                == self.memory.get_department(1, department_id).get_employee_performance_statistics()
            )
