"""Social Media API package — accounts and messages over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
