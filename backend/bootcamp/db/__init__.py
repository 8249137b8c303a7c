"""Database Package — declarative base and shared column mixins.

Invariants:
    - All tables share one metadata (Base.metadata)
    - Every table has created_at and updated_at
"""
