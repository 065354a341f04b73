"""
Transfer objects exchanged at the employee service boundary.

``EmployeeRequest`` carries caller input; ``EmployeeResponse`` is what
the service hands back.  Neither is persisted.
"""

from dataclasses import dataclass


@dataclass
class EmployeeRequest:
    """Input for creating or updating an employee."""

    name: str
    position: str
    salary: int
    department_id: int
    manager_id: int | None = None


@dataclass(frozen=True)
class EmployeeResponse:
    """
    Employee as returned to callers.

    Department and manager are denormalized to their display names.
    ``manager_name`` holds the configured "no manager" label when the
    employee reports to nobody.
    """

    id: int
    name: str
    position: str
    salary: int
    department_name: str
    manager_name: str
