"""Services — domain operations composed from repository calls.

Invariants:
    - Each write operation runs inside exactly one transaction()
    - Missing referenced rows → NotFoundError (derived from a None read)
    - Services never touch FastAPI; notifications go through a Notifier

Design Decisions:
    - Plain async functions, no controller classes: there is no shared state to hold
"""
