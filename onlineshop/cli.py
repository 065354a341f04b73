"""
Custom Flask CLI commands.

These commands are registered with the app by ``register_commands()``
in the application factory.  Run them with ``flask <command_name>``.

Usage::

    flask db-check        # Verify database connectivity and tables
    flask init-db         # Create tables without running migrations
    flask seed-demo-data  # Create a sample department and employees
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect

from onlineshop.extensions import db
from onlineshop.models.organization import Department, Employee
from onlineshop.services.employee_dto import EmployeeRequest
from onlineshop.services.employee_service import build_employee_service

# Tables the application expects to find.
_APPLICATION_TABLES = ("department", "employee")

# -- Demo data -------------------------------------------------------------
_DEMO_DEPARTMENT = "IT"
_DEMO_MANAGER = ("Jane Manager", "Head of IT", 150000)
_DEMO_EMPLOYEE = ("Jane Doe", "Developer", 100000)


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm the expected tables exist.

    Runs a trivial query against the configured database and then
    reports a row count for each application table.
    """
    click.echo("=" * 60)
    click.echo("  Online Shop — Database Connectivity Check")
    click.echo("=" * 60)

    click.echo(
        f"\n  Database: {db.engine.url.render_as_string(hide_password=True)}\n"
    )

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        result = db.session.execute(db.text("SELECT 1 AS connected"))
        row = result.fetchone()
        if row and row[0] == 1:
            click.secho("      ✓ Connected successfully.", fg="green")
        else:
            click.secho("      ✗ Unexpected result from test query.", fg="red")
            return
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Does DATABASE_URL point at a reachable database?")
        click.echo("    - Is the database driver for that URL installed?")
        return

    # -- Step 2: Tables and row counts -------------------------------------
    click.echo("[2/2] Checking tables...\n")
    existing = set(inspect(db.engine).get_table_names())
    missing = [name for name in _APPLICATION_TABLES if name not in existing]
    if missing:
        click.secho(f"      ✗ Missing tables: {', '.join(missing)}", fg="red")
        click.echo("        Run 'flask db upgrade' or 'flask init-db' first.")
        return

    for model in (Department, Employee):
        count = db.session.scalar(db.select(db.func.count()).select_from(model))
        click.echo(f"      {model.__tablename__:>10}  — {count} row(s)")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables directly from the models (no migrations)."""
    db.create_all()
    click.secho(
        f"Tables created in {current_app.config['SQLALCHEMY_DATABASE_URI']}",
        fg="green",
    )


@click.command("seed-demo-data")
@with_appcontext
def seed_demo_data_command():
    """
    Create the demo "IT" department with a manager and one report.

    Safe to run repeatedly: if the department already exists the
    command reports it and exits without creating duplicates.
    """
    department = Department.query.filter_by(name=_DEMO_DEPARTMENT).first()
    if department is not None:
        click.secho(
            f"Department '{_DEMO_DEPARTMENT}' already exists "
            f"(ID {department.id}); nothing to do.",
            fg="yellow",
        )
        return

    department = Department(name=_DEMO_DEPARTMENT)
    db.session.add(department)
    db.session.commit()

    service = build_employee_service()
    manager_name, manager_position, manager_salary = _DEMO_MANAGER
    manager = service.create_employee(
        EmployeeRequest(
            name=manager_name,
            position=manager_position,
            salary=manager_salary,
            department_id=department.id,
        )
    )
    employee_name, employee_position, employee_salary = _DEMO_EMPLOYEE
    employee = service.create_employee(
        EmployeeRequest(
            name=employee_name,
            position=employee_position,
            salary=employee_salary,
            department_id=department.id,
            manager_id=manager.id,
        )
    )

    for response in (manager, employee):
        click.echo(
            f"  #{response.id} {response.name} — {response.position}, "
            f"{response.department_name}, manager: {response.manager_name}"
        )
    click.secho("Demo data created.", fg="green")


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_data_command)
