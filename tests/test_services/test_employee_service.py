"""
Tests for EmployeeService.

The service is exercised against hand-written fakes of the repository
and mapper interfaces.  Both fakes append to one shared call log so
the tests can assert which collaborator was called, how often, and in
what order.
"""

import pytest

from onlineshop.exceptions import EmployeeNotFoundError
from onlineshop.models.organization import Department, Employee
from onlineshop.services.employee_dto import EmployeeRequest, EmployeeResponse
from onlineshop.services.employee_service import EmployeeService

NO_MANAGER = "Нет менеджера"


class FakeEmployeeRepository:
    """In-memory repository keyed by employee ID, in insertion order."""

    def __init__(self, calls: list, employees: list[Employee] | None = None):
        self.calls = calls
        self.store: dict[int, Employee] = {}
        self._next_id = 1
        for employee in employees or []:
            self.store[employee.id] = employee
            self._next_id = max(self._next_id, employee.id + 1)

    def find_all(self) -> list[Employee]:
        self.calls.append(("find_all",))
        return list(self.store.values())

    def find_by_id(self, employee_id: int) -> Employee | None:
        self.calls.append(("find_by_id", employee_id))
        return self.store.get(employee_id)

    def save(self, employee: Employee) -> Employee:
        self.calls.append(("save", employee))
        if employee.id is None:
            employee.id = self._next_id
            self._next_id += 1
        self.store[employee.id] = employee
        return employee

    def delete_by_id(self, employee_id: int) -> None:
        self.calls.append(("delete_by_id", employee_id))
        self.store.pop(employee_id, None)


class FakeEmployeeMapper:
    """
    Mapper returning canned results.

    ``entity`` is returned from ``to_entity``.  ``to_response`` returns
    the canned ``response`` when one is set, otherwise it flattens the
    entity the same way the real mapper does.
    """

    def __init__(
        self,
        calls: list,
        entity: Employee | None = None,
        response: EmployeeResponse | None = None,
    ):
        self.calls = calls
        self.entity = entity
        self.response = response

    def to_entity(self, request: EmployeeRequest) -> Employee:
        self.calls.append(("to_entity", request))
        return self.entity

    def to_response(self, employee: Employee) -> EmployeeResponse:
        self.calls.append(("to_response", employee))
        if self.response is not None:
            return self.response
        return EmployeeResponse(
            id=employee.id,
            name=employee.name,
            position=employee.position,
            salary=employee.salary,
            department_name=employee.department.name,
            manager_name=employee.manager.name if employee.manager else NO_MANAGER,
        )


def _mapper_calls(calls: list) -> list:
    return [call for call in calls if call[0] in ("to_entity", "to_response")]


class TestEmployeeService:
    """Behavior of the five CRUD operations."""

    @pytest.fixture(autouse=True)
    def _setup(self):
        """Build the department, manager, employee and canned DTOs."""
        self.calls = []

        self.department = Department(id=1, name="IT")
        self.manager = Employee(id=2, name="Jane Manager")

        self.employee = Employee(
            id=1,
            name="Jane Doe",
            position="Developer",
            salary=100000,
            department=self.department,
            manager=self.manager,
        )
        self.response = EmployeeResponse(
            id=1,
            name="Jane Doe",
            position="Developer",
            salary=100000,
            department_name="IT",
            manager_name="Jane Manager",
        )
        self.request = EmployeeRequest(
            name="Jane Doe",
            position="Developer",
            salary=100000,
            department_id=1,
            manager_id=2,
        )

    def _service(self, employees=None, entity=None, response=None):
        self.repository = FakeEmployeeRepository(self.calls, employees)
        self.mapper = FakeEmployeeMapper(self.calls, entity, response)
        return EmployeeService(self.repository, self.mapper)

    # -- get_all_employees -------------------------------------------------

    def test_get_all_returns_list_when_employees_exist(self):
        """One stored employee yields one mapped response."""
        service = self._service(employees=[self.employee], response=self.response)

        result = service.get_all_employees()

        assert result == [self.response]
        assert self.calls == [
            ("find_all",),
            ("to_response", self.employee),
        ]

    def test_get_all_preserves_length_and_order(self):
        """Responses come back one per employee, in repository order."""
        second = Employee(
            id=5,
            name="John Roe",
            position="Tester",
            salary=80000,
            department=self.department,
        )
        service = self._service(employees=[self.employee, second])

        result = service.get_all_employees()

        assert [r.id for r in result] == [1, 5]
        assert result[1].manager_name == NO_MANAGER

    def test_get_all_returns_empty_list_when_no_employees(self):
        """An empty store gives an empty list and never touches the mapper."""
        service = self._service()

        result = service.get_all_employees()

        assert result == []
        assert self.calls == [("find_all",)]

    # -- get_employee_by_id ------------------------------------------------

    def test_get_by_id_returns_response_when_found(self):
        service = self._service(employees=[self.employee], response=self.response)

        result = service.get_employee_by_id(1)

        assert result == self.response
        assert self.calls == [
            ("find_by_id", 1),
            ("to_response", self.employee),
        ]

    def test_get_by_id_raises_when_not_found(self):
        """A missing ID raises and the mapper is never called."""
        service = self._service()

        with pytest.raises(EmployeeNotFoundError, match="not found") as exc_info:
            service.get_employee_by_id(1)

        assert exc_info.value.employee_id == 1
        assert self.calls == [("find_by_id", 1)]

    # -- create_employee ---------------------------------------------------

    def test_create_maps_saves_and_returns_response(self):
        """to_entity, save and to_response run once each, in that order."""
        service = self._service(entity=self.employee, response=self.response)

        result = service.create_employee(self.request)

        assert result == self.response
        assert self.calls == [
            ("to_entity", self.request),
            ("save", self.employee),
            ("to_response", self.employee),
        ]

    def test_create_handles_missing_manager(self):
        """Without a manager ID the response shows the placeholder."""
        self.request.manager_id = None
        self.employee.manager = None
        no_manager_response = EmployeeResponse(
            1, "Jane Doe", "Developer", 100000, "IT", NO_MANAGER
        )
        service = self._service(entity=self.employee, response=no_manager_response)

        result = service.create_employee(self.request)

        assert result.manager_name == NO_MANAGER
        assert [call[0] for call in self.calls] == [
            "to_entity",
            "save",
            "to_response",
        ]

    def test_create_example_request_produces_example_response(self):
        """The saved entity gets ID 1 and maps to the expected response."""
        new_employee = Employee(
            name="Jane Doe",
            position="Developer",
            salary=100000,
            department=self.department,
            manager=self.manager,
        )
        service = self._service(entity=new_employee)

        result = service.create_employee(self.request)

        assert result == self.response

    # -- update_employee ---------------------------------------------------

    def test_update_changes_core_fields_and_returns_response(self):
        existing = Employee(
            id=1,
            name="Old Name",
            position="Old Position",
            salary=50000,
            department=self.department,
            manager=self.manager,
        )
        service = self._service(employees=[existing], response=self.response)

        result = service.update_employee(1, self.request)

        assert result == self.response
        assert existing.name == "Jane Doe"
        assert existing.position == "Developer"
        assert existing.salary == 100000
        assert self.calls == [
            ("find_by_id", 1),
            ("save", existing),
            ("to_response", existing),
        ]

    def test_update_leaves_department_and_manager_unchanged(self):
        """Different department/manager IDs in the request are ignored."""
        existing = Employee(
            id=1, department=self.department, manager=self.manager
        )
        service = self._service(employees=[existing], response=self.response)
        self.request.department_id = 99
        self.request.manager_id = 99

        service.update_employee(1, self.request)

        assert existing.department is self.department
        assert existing.manager is self.manager

    def test_update_sets_new_salary(self):
        existing = Employee(id=1, salary=50000)
        service = self._service(employees=[existing], response=self.response)
        self.request.salary = 120000

        service.update_employee(1, self.request)

        assert existing.salary == 120000

    def test_update_raises_when_not_found(self):
        """A missing ID raises before any save or mapper call."""
        service = self._service()

        with pytest.raises(EmployeeNotFoundError):
            service.update_employee(1, self.request)

        assert self.calls == [("find_by_id", 1)]
        assert _mapper_calls(self.calls) == []

    # -- delete_employee ---------------------------------------------------

    def test_delete_removes_employee_when_found(self):
        service = self._service(employees=[self.employee])

        service.delete_employee(1)

        assert self.calls == [("find_by_id", 1), ("delete_by_id", 1)]
        assert self.repository.store == {}

    def test_delete_raises_without_deleting_when_not_found(self):
        """The existence check runs first; delete_by_id is never called."""
        service = self._service()

        with pytest.raises(EmployeeNotFoundError):
            service.delete_employee(1)

        assert self.calls == [("find_by_id", 1)]

    def test_not_found_error_is_a_value_error(self):
        """Callers catching ValueError for lookups still catch it."""
        service = self._service()

        with pytest.raises(ValueError, match="Employee ID 7 not found"):
            service.delete_employee(7)

    def test_not_found_is_logged_with_the_id(self, caplog):
        service = self._service()

        with caplog.at_level("WARNING", logger="onlineshop.services.employee_service"):
            with pytest.raises(EmployeeNotFoundError):
                service.get_employee_by_id(7)

        assert "Employee ID 7 not found" in caplog.text
