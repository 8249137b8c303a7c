"""Bootcamp Enrollment API — tracks, cohorts, applicants and admission decisions.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
