"""
Flask extension instances.

Extensions are created here without binding to an application so that
the application factory can call ``init_app()`` on each one during
``create_app()``.  Models, repositories and CLI commands import ``db``
from this module at import time without creating a circular import.
"""

import sqlite3

from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

# -- Database ORM ----------------------------------------------------------
# The ``db`` instance is imported by models and repositories.
db = SQLAlchemy()

# -- Schema migrations (Alembic via Flask-Migrate) -------------------------
migrate = Migrate()


# -- SQLite foreign keys ---------------------------------------------------
# SQLite ignores REFERENCES clauses unless the pragma is set on every
# new connection; other databases enforce them already.
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):  # pylint: disable=unused-argument
    """Turn on foreign key enforcement for SQLite connections."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()
