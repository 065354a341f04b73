"""
Organization structure models: departments and their employees.

An employee always belongs to exactly one department and may report
to another employee (``manager``).  The manager link is stored as a
nullable self-referencing foreign key; the "no manager" display value
is produced by the mapper, never stored here.
"""

from onlineshop.extensions import db


class Department(db.Model):
    """
    Organizational unit that employees belong to.

    Departments are referenced, not owned, by employees.  A department
    that still has employees cannot be deleted (``ON DELETE RESTRICT``).
    """

    __tablename__ = "department"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), unique=True, nullable=False)

    # -- Relationships -----------------------------------------------------
    employees = db.relationship("Employee", back_populates="department")

    def __repr__(self) -> str:
        return f"<Department {self.id}: {self.name}>"


class Employee(db.Model):
    """
    Individual employee record.

    ``name``, ``position`` and ``salary`` may change after creation;
    ``department`` and ``manager`` are fixed once the row is persisted.
    Deleting a manager clears ``manager_id`` on their subordinates;
    the ORM nulls the column before the manager row is removed.
    """

    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), nullable=False)
    position = db.Column(db.String(200), nullable=False)
    salary = db.Column(db.BigInteger, nullable=False)
    department_id = db.Column(
        db.Integer,
        db.ForeignKey("department.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    manager_id = db.Column(
        db.Integer,
        db.ForeignKey("employee.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # -- Relationships -----------------------------------------------------
    department = db.relationship("Department", back_populates="employees")
    manager = db.relationship(
        "Employee",
        remote_side=[id],
        back_populates="subordinates",
    )
    subordinates = db.relationship(
        "Employee",
        back_populates="manager",
    )

    def __repr__(self) -> str:
        return f"<Employee {self.id}: {self.name} ({self.position})>"
