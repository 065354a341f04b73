"""
Repository package: persistence abstractions keyed by identifier.

Each repository module defines the interface the services depend on
and one implementation backed by the Flask-SQLAlchemy session.
"""
