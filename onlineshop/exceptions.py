"""
Domain errors raised by the employee service and its collaborators.

Both errors derive from ``ValueError`` so that callers which already
treat a failed lookup as ``ValueError`` keep working unchanged.
"""


class EmployeeNotFoundError(ValueError):
    """No employee exists with the requested identifier."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee ID {employee_id} not found.")


class DepartmentNotFoundError(ValueError):
    """No department exists with the requested identifier."""

    def __init__(self, department_id: int):
        self.department_id = department_id
        super().__init__(f"Department ID {department_id} not found.")
