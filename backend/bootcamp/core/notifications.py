"""Notification Payloads — pure builders for the three applicant emails.

Invariants:
    - Builders never do IO; the mailer renders and sends
    - Every payload carries applicant_name and track
    - Dates are pre-formatted strings so templates stay logic-free

Design Decisions:
    - Builders take the denormalized views (dicts), not ORM rows: the email
      content is exactly what the enriched read returns
    - Sender address is added by the mailer from configuration
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bootcamp.core.domain_types import EnrollmentId, MailTemplate
from bootcamp.core.enrollment_state import ensure_aware

DATE_FORMAT = "%A, %d %B %Y"
UNSCHEDULED = "to be announced"

REGISTRATION_SUBJECT = "We have received your application"
ADMISSION_SUBJECT = "Congratulations! You have been admitted"
REJECTION_SUBJECT = "An update on your application"


@dataclass(frozen=True)
class MailMessage:
    """One outbound email: recipient, subject, template and its data."""
    to: str
    subject: str
    template: MailTemplate
    data: dict[str, Any] = field(default_factory=dict)


def format_date(value: datetime | None) -> str:
    if value is None:
        return UNSCHEDULED
    return ensure_aware(value).strftime(DATE_FORMAT)


def confirmation_link(frontend_url: str, enrollment_id: EnrollmentId) -> str:
    return f"{frontend_url.rstrip('/')}/enrollments/{enrollment_id}/confirm"


def build_registration_message(user: dict, review_period: str) -> MailMessage:
    """Registration confirmation sent right after a successful register()."""
    return MailMessage(
        to=user["email"],
        subject=REGISTRATION_SUBJECT,
        template=MailTemplate.REGISTRATION,
        data={
            "applicant_name": user["name"],
            "track": user["track"],
            "review_period": review_period,
        },
    )


def build_admission_message(enrollment: dict, frontend_url: str) -> MailMessage:
    """Admission offer with deadline, schedule and confirmation link."""
    return MailMessage(
        to=enrollment["user_email"],
        subject=ADMISSION_SUBJECT,
        template=MailTemplate.ADMISSION,
        data={
            "applicant_name": enrollment["user"],
            "track": enrollment["user_track"],
            "enrollment_deadline": format_date(enrollment["deadline"]),
            "start_date": format_date(enrollment["cohort_start_date"]),
            "orientation_date": format_date(enrollment["orientation_date"]),
            "duration": enrollment["duration"] or UNSCHEDULED,
            "confirmation_link": confirmation_link(
                frontend_url, enrollment["id"],
            ),
        },
    )


def build_rejection_message(enrollment: dict, next_cohort_date: str) -> MailMessage:
    """Rejection notice pointing to the next intake."""
    return MailMessage(
        to=enrollment["user_email"],
        subject=REJECTION_SUBJECT,
        template=MailTemplate.REJECTION,
        data={
            "applicant_name": enrollment["user"],
            "track": enrollment["user_track"],
            "next_cohort_date": next_cohort_date,
        },
    )
