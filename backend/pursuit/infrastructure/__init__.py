"""Infrastructure Layer — database sessions, SQL-backed ports, logging setup.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - All SQLAlchemy errors surface as core.errors.DatabaseError
"""
