"""Boundary Protocols — contracts between services and the shell.

Invariants:
    - Services NEVER import the mailer or FastAPI — they receive a Notifier
    - notify() must not block on delivery and must not raise on delivery failure

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - The API layer implements Notifier with BackgroundTasks; tests with a list
"""

from typing import Protocol

from bootcamp.core.notifications import MailMessage


class Notifier(Protocol):
    """Schedules an outbound email."""
    def notify(self, message: MailMessage) -> None: ...
