"""
Reference directory dataset.

Both storage backends load this same dataset (the in-memory connection
by default, the SQL connection via ``flask seed-directory``), which is
what makes their results directly comparable in tests.

Layout::

    Org 1  Acme Corporation
        Dept 1  Engineering   head 1   employees 1, 2, 3
        Dept 2  Sales         head 4   employees 4, 5
        Dept 3  Research               (no employees)
    Org 2  Globex Industries
        Dept 1  Operations    head 1   employees 1, 2
"""

from datetime import date

from hrdirectory.entities import Department, Employee, Organization

# (org_id, org_name, [(dept_id, dept_name, head_id, [employee fields...])])
_SEED_DATA = [
    (
        1,
        "Acme Corporation",
        [
            (
                1,
                "Engineering",
                1,
                [
                    (1, "Alice Chen", date(2019, 3, 15), "Software Engineer", 1000.0, 88.0),
                    (2, "Brian Ortiz", date(2020, 7, 1), "QA Engineer", 850.0, 72.0),
                    (3, "Carla Singh", date(2021, 1, 11), None, 700.0, 65.0),
                ],
            ),
            (
                2,
                "Sales",
                4,
                [
                    (4, "Dmitri Volkov", date(2018, 5, 20), "Account Executive", 920.0, 91.0),
                    (5, "Emma Lee", date(2022, 9, 5), "Sales Associate", 600.0, 58.0),
                ],
            ),
            (3, "Research", None, []),
        ],
    ),
    (
        2,
        "Globex Industries",
        [
            (
                1,
                "Operations",
                1,
                [
                    (1, "Frank Moreau", date(2017, 11, 30), "Operations Manager", 1500.0, 80.0),
                    (2, "Grace Kim", date(2023, 2, 14), "Analyst", 750.0, 69.0),
                ],
            ),
        ],
    ),
]


def build_seed_organizations() -> list[Organization]:
    """Return a fresh copy of the reference organizations."""
    organizations = []
    for org_id, org_name, departments in _SEED_DATA:
        organizations.append(
            Organization(
                org_id,
                org_name,
                [
                    Department(
                        dept_id,
                        dept_name,
                        [Employee(*fields) for fields in employees],
                        head_id=head_id,
                    )
                    for dept_id, dept_name, head_id, employees in departments
                ],
            )
        )
    return organizations


def load_seed_data(connection, organizations: list[Organization]) -> int:
    """
    Add each organization to ``connection``, skipping IDs already present.

    Returns:
        Number of organizations actually added.
    """
    added = 0
    for organization in organizations:
        if connection.add_organization(organization):
            added += 1
    return added
