"""
Tests for the Employee entity: composite capability, defaults, and the
salary/performance invariants.
"""

from datetime import date, datetime

import pytest

from hrdirectory.entities import Employee, OrganizationComponent
from hrdirectory.entities.employee import DEFAULT_POSITION
from hrdirectory.exceptions import ValidationError


class TestEmployeeBasics:
    """Identity, type tag, children and string representation."""

    @pytest.fixture(autouse=True)
    def _setup(self):
        self.hired = date(2024, 1, 15)
        self.employee = Employee(1, "Test", self.hired)

    def test_identity(self):
        assert self.employee.id == 1
        assert self.employee.name == "Test"

    def test_type_name(self):
        assert self.employee.type_name == "Employee"

    def test_has_no_children(self):
        assert self.employee.children == []

    def test_hire_date(self):
        assert self.employee.hire_date == self.hired

    def test_str(self):
        assert str(self.employee) == "Employee: Test (ID: 1) Hired at: 2024-01-15"

    def test_is_an_organization_component(self):
        assert isinstance(self.employee, OrganizationComponent)

    def test_to_json(self):
        data = self.employee.to_json()
        assert data["id"] == 1
        assert data["hireDate"] == "2024-01-15"
        assert data["position"] == DEFAULT_POSITION
        assert data["representation"] == str(self.employee)


class TestEmployeeDefaults:
    """Defaults applied when optional fields are missing."""

    def test_missing_hire_date_defaults_to_today(self):
        employee = Employee(1, "TestND", None)
        assert employee.hire_date == date.today()

    def test_datetime_hire_date_is_truncated(self):
        employee = Employee(1, "Test", datetime(2023, 5, 6, 14, 30))
        assert employee.hire_date == date(2023, 5, 6)

    @pytest.mark.parametrize("position", [None, ""])
    def test_missing_position_defaults_to_other(self, position):
        employee = Employee(3, "TestFull", None, position, 0, 0)
        assert employee.position == "Other"

    def test_setting_empty_position_resets_to_other(self):
        employee = Employee(1, "Test", position="Engineer")
        employee.position = ""
        assert employee.position == "Other"

    def test_salary_and_performance_default_to_zero(self):
        employee = Employee(1, "Test")
        assert employee.salary == 0
        assert employee.performance == 0


class TestEmployeeSetters:
    def test_set_position(self):
        employee = Employee(1, "Test")
        employee.position = "SoftwareEngineer"
        assert employee.position == "SoftwareEngineer"

    def test_set_salary(self):
        employee = Employee(1, "Test")
        employee.salary = 100000
        assert employee.salary == 100000

    def test_set_performance(self):
        employee = Employee(1, "Test")
        employee.performance = 50
        assert employee.performance == 50

    @pytest.mark.parametrize("performance", [0, 100, 99.5])
    def test_performance_bounds_are_inclusive(self, performance):
        assert Employee(1, "Test", performance=performance).performance == performance


class TestEmployeeValidation:
    """Invalid values are rejected, never clamped."""

    def test_negative_salary_rejected_on_construction(self):
        with pytest.raises(ValidationError, match="Salary"):
            Employee(1, "Test", salary=-1)

    def test_negative_salary_rejected_by_setter(self):
        employee = Employee(1, "Test", salary=500)
        with pytest.raises(ValidationError):
            employee.salary = -0.01
        assert employee.salary == 500

    @pytest.mark.parametrize("performance", [-1, 100.01, 250])
    def test_out_of_range_performance_rejected(self, performance):
        employee = Employee(1, "Test", performance=40)
        with pytest.raises(ValidationError, match="Performance"):
            employee.performance = performance
        assert employee.performance == 40

    @pytest.mark.parametrize("value", ["1000", None, True, float("nan"), float("inf")])
    def test_non_numeric_salary_rejected(self, value):
        with pytest.raises(ValidationError):
            Employee(1, "Test", salary=value)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name_rejected(self, name):
        with pytest.raises(ValidationError):
            Employee(1, name)

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError, match="string"):
            Employee(1, 12345)

    @pytest.mark.parametrize("position", [12345, ["a", "b"], {"title": "Lead"}, 1.5])
    def test_non_string_position_rejected(self, position):
        employee = Employee(1, "Test", position="Engineer")
        with pytest.raises(ValidationError, match="Position"):
            employee.position = position
        assert employee.position == "Engineer"

    def test_non_string_position_rejected_on_construction(self):
        with pytest.raises(ValidationError):
            Employee(1, "Test", position=42)

    @pytest.mark.parametrize("employee_id", [1.9, "abc", "1", True, None])
    def test_non_integer_id_rejected(self, employee_id):
        with pytest.raises(ValidationError, match="ID"):
            Employee(employee_id, "Test")

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            Employee(1, "Test", salary=-5)


class TestEmployeeCopy:
    def test_copy_is_equal_but_independent(self):
        original = Employee(1, "Test", date(2020, 1, 1), "Engineer", 1000, 80)
        clone = original.copy()

        assert clone == original
        assert clone is not original

        clone.salary = 2000
        assert original.salary == 1000
        assert clone != original

    def test_hire_date_handle_cannot_change_stored_value(self):
        employee = Employee(1, "Test", date(2020, 1, 1))
        handle = employee.hire_date
        # date is immutable; replace() yields a new object.
        handle = handle.replace(year=1999)
        assert employee.hire_date == date(2020, 1, 1)
        assert handle.year == 1999
