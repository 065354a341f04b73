"""
Model package: imports all models so Alembic and SQLAlchemy can
discover them automatically when ``flask db`` commands are run.
"""

from onlineshop.models.organization import Department, Employee  # noqa: F401
