"""
Employee service: CRUD for employee records.

The service checks that employees exist, maps between ``Employee``
entities and the request/response transfer objects through an
``EmployeeMapper``, and delegates persistence to an
``EmployeeRepository``.

Only ``name``, ``position`` and ``salary`` can be changed after an
employee is created.  Department and manager are set once, at
creation, and updates leave them as they are even when the request
carries different IDs.
"""

import logging

from flask import current_app

from onlineshop.exceptions import EmployeeNotFoundError
from onlineshop.models.organization import Employee
from onlineshop.repositories.employee_repository import (
    EmployeeRepository,
    SqlAlchemyEmployeeRepository,
)
from onlineshop.services.employee_dto import EmployeeRequest, EmployeeResponse
from onlineshop.services.employee_mapper import DefaultEmployeeMapper, EmployeeMapper

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Orchestrates employee CRUD over a repository and a mapper.

    Args:
        repository: Persistence for ``Employee`` entities.
        mapper:     Conversion between entities and transfer objects.
    """

    def __init__(self, repository: EmployeeRepository, mapper: EmployeeMapper):
        self.repository = repository
        self.mapper = mapper

    # -- Queries -----------------------------------------------------------

    def get_all_employees(self) -> list[EmployeeResponse]:
        """Return a response for every stored employee, in repository order."""
        return [
            self.mapper.to_response(employee)
            for employee in self.repository.find_all()
        ]

    def get_employee_by_id(self, employee_id: int) -> EmployeeResponse:
        """
        Return a single employee.

        Raises:
            EmployeeNotFoundError: If no employee has this ID.
        """
        employee = self._require_employee(employee_id)
        return self.mapper.to_response(employee)

    # -- Commands ----------------------------------------------------------

    def create_employee(self, request: EmployeeRequest) -> EmployeeResponse:
        """
        Create a new employee from a request.

        A request without ``manager_id`` produces an employee with no
        manager; the response shows the mapper's "no manager" label.

        Returns:
            The response for the persisted employee.
        """
        employee = self.mapper.to_entity(request)
        saved = self.repository.save(employee)

        logger.info("Created employee ID %d: %s", saved.id, saved.name)
        return self.mapper.to_response(saved)

    def update_employee(
        self, employee_id: int, request: EmployeeRequest
    ) -> EmployeeResponse:
        """
        Overwrite an employee's name, position and salary.

        ``department_id`` and ``manager_id`` in the request are ignored.

        Raises:
            EmployeeNotFoundError: If no employee has this ID.
        """
        employee = self._require_employee(employee_id)

        employee.name = request.name
        employee.position = request.position
        employee.salary = request.salary

        saved = self.repository.save(employee)

        logger.info("Updated employee ID %d", employee_id)
        return self.mapper.to_response(saved)

    def delete_employee(self, employee_id: int) -> None:
        """
        Delete an employee.

        Raises:
            EmployeeNotFoundError: If no employee has this ID.  The
                                   repository delete is not called.
        """
        self._require_employee(employee_id)
        self.repository.delete_by_id(employee_id)

        logger.info("Deleted employee ID %d", employee_id)

    # -- Helpers -----------------------------------------------------------

    def _require_employee(self, employee_id: int) -> Employee:
        """Return the employee or raise ``EmployeeNotFoundError``."""
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            logger.warning("Employee ID %d not found", employee_id)
            raise EmployeeNotFoundError(employee_id)
        return employee


def build_employee_service() -> EmployeeService:
    """
    Build an ``EmployeeService`` wired to the database.

    Must be called inside an application context; the mapper's
    "no manager" label comes from ``NO_MANAGER_LABEL`` in the config.
    """
    mapper = DefaultEmployeeMapper(
        no_manager_label=current_app.config["NO_MANAGER_LABEL"]
    )
    return EmployeeService(SqlAlchemyEmployeeRepository(), mapper)
