"""
Routes for the directory blueprint.

All handlers are thin: they build a command, run it against the app's
facade registry and return the result as JSON.  Directory exceptions
are turned into status codes by the handlers registered in
``create_app``.
"""

from flask import request

from hrdirectory.blueprints.directory import bp
from hrdirectory.exceptions import ValidationError
from hrdirectory.services import commands
from hrdirectory.services.facade_registry import current_registry

# Employee fields a PATCH request may change.
_EDITABLE_FIELDS = ("position", "salary", "performance")


# =========================================================================
# Organizations
# =========================================================================


@bp.route("/organizations/<int:org_id>", methods=["GET"])
def get_organization(org_id):
    """Return the organization summary with its department list."""
    return commands.GetOrgInfoCommand(org_id).execute(current_registry())


@bp.route("/organizations/<int:org_id>", methods=["DELETE"])
def remove_organization(org_id):
    """Remove an organization and all of its data."""
    message = commands.RemoveOrgCommand(org_id).execute(current_registry())
    return {"message": message}


# =========================================================================
# Departments
# =========================================================================


@bp.route("/organizations/<int:org_id>/departments")
def list_departments(org_id):
    departments = commands.ListDepartmentsCommand(org_id).execute(current_registry())
    return {"departments": departments}


@bp.route("/organizations/<int:org_id>/departments/<int:department_id>")
def get_department(org_id, department_id):
    return commands.GetDeptInfoCommand(org_id, department_id).execute(
        current_registry()
    )


@bp.route("/organizations/<int:org_id>/departments/<int:department_id>/performance")
def department_performance(org_id, department_id):
    """Performance statistics for a department's employees."""
    return commands.StatDeptPerfCommand(org_id, department_id).execute(
        current_registry()
    )


@bp.route("/organizations/<int:org_id>/departments/<int:department_id>/salary")
def department_salary(org_id, department_id):
    """Salary statistics for a department's employees."""
    return commands.StatDeptSalaryCommand(org_id, department_id).execute(
        current_registry()
    )


# =========================================================================
# Employees
# =========================================================================


@bp.route("/organizations/<int:org_id>/employees/<int:employee_id>", methods=["GET"])
def get_employee(org_id, employee_id):
    return commands.GetEmpInfoCommand(org_id, employee_id).execute(current_registry())


@bp.route("/organizations/<int:org_id>/employees/<int:employee_id>", methods=["PATCH"])
def update_employee(org_id, employee_id):
    """
    Change an employee's position, salary and/or performance.

    Expects a JSON object with at least one of ``position``, ``salary``
    or ``performance``; other keys are rejected.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict) or not payload:
        raise ValidationError(
            f"Request body must be a JSON object with any of {list(_EDITABLE_FIELDS)}"
        )

    unknown = sorted(set(payload) - set(_EDITABLE_FIELDS))
    if unknown:
        raise ValidationError(f"Unsupported field(s): {', '.join(unknown)}")

    # Value types are checked by the Employee setters.
    return commands.UpdateEmpCommand(org_id, employee_id, **payload).execute(
        current_registry()
    )
