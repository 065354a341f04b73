"""
Employee mapper: translates between entities and transfer objects.

``EmployeeMapper`` is the interface the employee service depends on.
``DefaultEmployeeMapper`` is the one concrete implementation; tests
substitute their own implementation of the interface.

The "no manager" display value is applied here, at the response
boundary.  The entity keeps ``manager`` as None.
"""

from typing import Protocol

from sqlalchemy.orm import Session

from onlineshop.config import DEFAULT_NO_MANAGER_LABEL
from onlineshop.exceptions import DepartmentNotFoundError, EmployeeNotFoundError
from onlineshop.extensions import db
from onlineshop.models.organization import Department, Employee
from onlineshop.services.employee_dto import EmployeeRequest, EmployeeResponse


class EmployeeMapper(Protocol):
    """Conversions the employee service relies on."""

    def to_entity(self, request: EmployeeRequest) -> Employee:
        ...

    def to_response(self, employee: Employee) -> EmployeeResponse:
        ...


class DefaultEmployeeMapper:
    """
    Maps requests to new ``Employee`` entities and entities to responses.

    Args:
        no_manager_label: Manager name used in responses for employees
                          without a manager.
        session:          Session used to resolve department and manager
                          IDs.  Defaults to ``db.session``.
    """

    def __init__(
        self,
        no_manager_label: str = DEFAULT_NO_MANAGER_LABEL,
        session: Session | None = None,
    ):
        self.no_manager_label = no_manager_label
        self._session = session if session is not None else db.session

    def to_entity(self, request: EmployeeRequest) -> Employee:
        """
        Build a new, unsaved ``Employee`` from a request.

        Raises:
            DepartmentNotFoundError: If ``department_id`` does not exist.
            EmployeeNotFoundError:   If ``manager_id`` is given but does
                                     not exist.
        """
        department = self._session.get(Department, request.department_id)
        if department is None:
            raise DepartmentNotFoundError(request.department_id)

        manager = None
        if request.manager_id is not None:
            manager = self._session.get(Employee, request.manager_id)
            if manager is None:
                raise EmployeeNotFoundError(request.manager_id)

        return Employee(
            name=request.name,
            position=request.position,
            salary=request.salary,
            department=department,
            manager=manager,
        )

    def to_response(self, employee: Employee) -> EmployeeResponse:
        """Flatten an employee into a response with display names."""
        if employee.manager is not None:
            manager_name = employee.manager.name
        else:
            manager_name = self.no_manager_label

        return EmployeeResponse(
            id=employee.id,
            name=employee.name,
            position=employee.position,
            salary=employee.salary,
            department_name=employee.department.name,
            manager_name=manager_name,
        )
