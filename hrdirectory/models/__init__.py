"""
Model package — imports all table models so ``db.create_all()`` can
discover them.

Only the SQL storage connection reads or writes these tables.
"""

from hrdirectory.models.organization import (  # noqa: F401
    DepartmentRecord,
    EmployeeRecord,
    OrganizationRecord,
)
