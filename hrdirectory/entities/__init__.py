"""
Entity package — plain Python objects with no I/O.

Storage connections build these from their own representation and hand
out copies, so callers never hold a reference to stored state.
"""

from hrdirectory.entities.component import OrganizationComponent  # noqa: F401
from hrdirectory.entities.department import Department  # noqa: F401
from hrdirectory.entities.employee import Employee  # noqa: F401
from hrdirectory.entities.organization import Organization  # noqa: F401
