"""Core Layer — pure domain logic: errors, types, state rules, notification payloads.

Invariants:
    - No IO, no framework imports (no FastAPI, no SQLAlchemy)
    - Everything here is testable without a database
"""
