"""Infrastructure — database sessions, repositories and logging setup.

Invariants:
    - Only this package (and api/) imports SQLAlchemy session machinery
"""
