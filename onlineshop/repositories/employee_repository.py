"""
Employee repository: lookup, save and delete by employee ID.

``EmployeeRepository`` is the interface the employee service depends
on.  ``SqlAlchemyEmployeeRepository`` implements it on the
Flask-SQLAlchemy session and commits after every write.
"""

import logging
from typing import Protocol

from sqlalchemy.orm import Session

from onlineshop.extensions import db
from onlineshop.models.organization import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository(Protocol):
    """Persistence operations the employee service relies on."""

    def find_all(self) -> list[Employee]:
        ...

    def find_by_id(self, employee_id: int) -> Employee | None:
        ...

    def save(self, employee: Employee) -> Employee:
        ...

    def delete_by_id(self, employee_id: int) -> None:
        ...


class SqlAlchemyEmployeeRepository:
    """
    Employee repository backed by a SQLAlchemy session.

    Args:
        session: Session to use.  Defaults to ``db.session``, the
                 scoped session bound to the current app context.
    """

    def __init__(self, session: Session | None = None):
        self._session = session if session is not None else db.session

    def find_all(self) -> list[Employee]:
        """Return every employee ordered by primary key."""
        return list(
            self._session.scalars(db.select(Employee).order_by(Employee.id))
        )

    def find_by_id(self, employee_id: int) -> Employee | None:
        """Return an employee by primary key, or None if not found."""
        return self._session.get(Employee, employee_id)

    def save(self, employee: Employee) -> Employee:
        """
        Insert or update an employee and commit.

        The session is rolled back if the commit fails.

        Returns:
            The same entity, with ``id`` populated for new rows.
        """
        try:
            self._session.add(employee)
            self._session.commit()
        except Exception:
            # Roll back so the session stays usable for later calls.
            self._session.rollback()
            logger.exception("Failed to save employee")
            raise
        logger.debug("Saved employee ID %d", employee.id)
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        """
        Delete an employee by primary key and commit.

        Subordinates keep their rows with ``manager_id`` cleared.  Does
        nothing if the ID does not exist.
        """
        employee = self._session.get(Employee, employee_id)
        if employee is None:
            return
        try:
            self._session.delete(employee)
            self._session.commit()
        except Exception:
            self._session.rollback()
            logger.exception("Failed to delete employee ID %d", employee_id)
            raise
        logger.debug("Deleted employee ID %d", employee_id)
