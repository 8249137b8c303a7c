"""Repositories — one thin async function per persistence operation and entity.

Invariants:
    - Every function takes the AsyncSession as its first argument
    - Reads never raise on a missing row: get() returns None, list_all() returns []
    - Writes flush but never commit; the caller owns the transaction
    - update() and delete() return nothing; delete() of a missing id is a no-op

Design Decisions:
    - Module per entity, imported as `from bootcamp.repositories import tracks`
    - User and enrollment reads go through one shared view select per entity
"""
