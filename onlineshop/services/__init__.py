"""
Service layer package.

Services hold the business rules and never touch the database
directly; persistence goes through a repository and translation
between entities and transfer objects goes through a mapper.

Import services where they are needed::

    from onlineshop.services.employee_service import build_employee_service
"""
