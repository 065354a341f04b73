"""
Pytest configuration and shared fixtures.

Provides a test application, database and per-test session that all
test modules can use.  Uses the ``testing`` configuration, which points
at an in-memory SQLite database unless TEST_DATABASE_URL is set.
"""

import pytest
from sqlalchemy import delete, update

from onlineshop import create_app
from onlineshop.extensions import db as _db
from onlineshop.models.organization import Department, Employee


@pytest.fixture(scope="session")
def app():
    """
    Create a Flask application configured for testing.

    The app is created once per test session and an application
    context stays pushed for the whole session.
    """
    app = create_app("testing")

    with app.app_context():
        yield app


@pytest.fixture(scope="session")
def database(app):  # pylint: disable=redefined-outer-name
    """Create the schema once and provide the SQLAlchemy instance."""
    _db.create_all()
    yield _db
    _db.drop_all()


@pytest.fixture(scope="function")
def db_session(database):  # pylint: disable=redefined-outer-name
    """
    Provide the database session with empty tables for each test.

    Repositories commit, so a rolled-back outer transaction cannot
    isolate tests; every table is emptied after the test instead.
    """
    yield database.session

    database.session.rollback()
    database.session.execute(update(Employee).values(manager_id=None))
    database.session.execute(delete(Employee))
    database.session.execute(delete(Department))
    database.session.commit()
    database.session.remove()


@pytest.fixture
def it_department(db_session):  # pylint: disable=redefined-outer-name
    """A persisted "IT" department."""
    department = Department(name="IT")
    db_session.add(department)
    db_session.commit()
    return department


@pytest.fixture
def manager(db_session, it_department):  # pylint: disable=redefined-outer-name
    """A persisted manager, "Jane Manager", in the IT department."""
    employee = Employee(
        name="Jane Manager",
        position="Head of IT",
        salary=150000,
        department=it_department,
    )
    db_session.add(employee)
    db_session.commit()
    return employee


@pytest.fixture
def cli_runner(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask CLI runner for invoking custom commands.

    Usage in tests::

        def test_db_check(cli_runner):
            result = cli_runner.invoke(args=["db-check"])
            assert result.exit_code == 0
    """
    return app.test_cli_runner()
