"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AdminId, TrackId, UserId, CohortId, EnrollmentId wrap database integer ids
    - EnrollmentStatus is derived from (admitted, confirmed), never stored
    - AdminIdentity is the only thing routes know about the authenticated caller

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AdminId = NewType("AdminId", int)
TrackId = NewType("TrackId", int)
UserId = NewType("UserId", int)
CohortId = NewType("CohortId", int)
EnrollmentId = NewType("EnrollmentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EnrollmentStatus(str, Enum):
    """Decision state of an application — computed from the tri-state flags."""
    PENDING = "pending"
    ADMITTED = "admitted"
    REJECTED = "rejected"
    CONFIRMED = "confirmed"


class MailTemplate(str, Enum):
    """Jinja2 templates under bootcamp/templates/."""
    REGISTRATION = "registration.html"
    ADMISSION = "admission.html"
    REJECTION = "rejection.html"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class AdminIdentity:
    """Identity embedded in a bearer token."""
    id: AdminId
    username: str
