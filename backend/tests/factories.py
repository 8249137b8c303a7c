"""Test helpers — fake notification sinks and applicant payloads."""


class RecordingNotifier:
    """Notifier that keeps every message instead of sending it."""

    def __init__(self):
        self.messages = []

    def notify(self, message):
        self.messages.append(message)


class FakeMailer:
    """Stands in for Mailer on app.state; records what would have been sent."""

    def __init__(self):
        self.sent = []

    def send(self, message):
        self.sent.append(message)
        return True


def applicant(track_id: int, n: int = 1) -> dict:
    """User fields for the n-th distinct applicant."""
    return {
        "name": f"Applicant {n}",
        "location": "Lagos",
        "email": f"applicant{n}@example.com",
        "phone_number": f"+23480000000{n:02d}",
        "track_id": track_id,
    }
