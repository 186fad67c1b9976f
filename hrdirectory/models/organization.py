"""
Directory tables used by the SQL storage connection.

These rows are never handed to callers: ``SqlConnection`` converts them
into ``hrdirectory.entities`` objects inside the session that loaded
them.  Department and employee IDs are external IDs scoped to their
organization, so each table carries a surrogate primary key plus a
unique constraint on ``(organization_id, <external id>)``.
"""

from hrdirectory.extensions import db


class OrganizationRecord(db.Model):
    """
    One tenant.  The primary key is the externally assigned
    organization ID, so it is never autoincremented.
    """

    __tablename__ = "organization"

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(200), nullable=False)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )

    # -- Relationships -----------------------------------------------------
    departments = db.relationship(
        "DepartmentRecord",
        back_populates="organization",
        cascade="all, delete-orphan",
        order_by="DepartmentRecord.department_id",
    )

    def __repr__(self) -> str:
        return f"<OrganizationRecord {self.id}: {self.name}>"


class DepartmentRecord(db.Model):
    """
    Department within an organization.

    ``head_employee_id`` is the external ID of the head employee, not a
    foreign key: the head is resolved by lookup within the department.
    """

    __tablename__ = "department"
    __table_args__ = (
        db.UniqueConstraint(
            "organization_id", "department_id", name="uq_department_org_dept"
        ),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    organization_id = db.Column(
        db.Integer,
        db.ForeignKey("organization.id"),
        nullable=False,
        index=True,
    )
    department_id = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    head_employee_id = db.Column(db.Integer, nullable=True)

    # -- Relationships -----------------------------------------------------
    organization = db.relationship("OrganizationRecord", back_populates="departments")
    employees = db.relationship(
        "EmployeeRecord",
        back_populates="department",
        cascade="all, delete-orphan",
        order_by="EmployeeRecord.employee_id",
    )

    def __repr__(self) -> str:
        return f"<DepartmentRecord {self.organization_id}/{self.department_id}: {self.name}>"


class EmployeeRecord(db.Model):
    """
    Employee row.  ``organization_id`` is denormalized from the
    department so that employee IDs can be kept unique per organization.
    """

    __tablename__ = "employee"
    __table_args__ = (
        db.UniqueConstraint(
            "organization_id", "employee_id", name="uq_employee_org_emp"
        ),
        db.CheckConstraint("salary >= 0", name="ck_employee_salary"),
        db.CheckConstraint(
            "performance >= 0 AND performance <= 100", name="ck_employee_performance"
        ),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    organization_id = db.Column(
        db.Integer,
        db.ForeignKey("organization.id"),
        nullable=False,
        index=True,
    )
    department_pk = db.Column(
        db.Integer,
        db.ForeignKey("department.id"),
        nullable=False,
        index=True,
    )
    employee_id = db.Column(db.Integer, nullable=False)
    name = db.Column(db.String(200), nullable=False)
    hire_date = db.Column(db.Date, nullable=False)
    position = db.Column(db.String(100), nullable=False, default="Other")
    salary = db.Column(db.Float, nullable=False, default=0.0)
    performance = db.Column(db.Float, nullable=False, default=0.0)

    # -- Relationships -----------------------------------------------------
    department = db.relationship("DepartmentRecord", back_populates="employees")

    def __repr__(self) -> str:
        return f"<EmployeeRecord {self.organization_id}/{self.employee_id}: {self.name}>"
