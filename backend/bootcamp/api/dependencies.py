"""FastAPI Dependencies — settings, mailer, notifier and the authenticated admin.

Invariants:
    - require_admin raises AuthenticationError (401) for a missing, malformed,
      expired or forged bearer token
    - The mailer is the one built in the lifespan (app.state.mailer)
    - BackgroundNotifier defers delivery until after the response is produced

Design Decisions:
    - HTTPBearer(auto_error=False): we raise our own error so the body keeps the envelope shape
"""

from fastapi import BackgroundTasks, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bootcamp.config import Settings, get_settings
from bootcamp.core.domain_types import AdminIdentity
from bootcamp.core.errors import AuthenticationError
from bootcamp.core.notifications import MailMessage
from bootcamp.infrastructure.mailer import Mailer
from bootcamp.infrastructure.security import verify_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_mailer(request: Request) -> Mailer:
    mailer: Mailer | None = getattr(request.app.state, "mailer", None)
    if mailer is None:
        raise RuntimeError("Mailer not initialized")
    return mailer


class BackgroundNotifier:
    """Notifier that sends each message in a FastAPI background task."""

    def __init__(self, background_tasks: BackgroundTasks, mailer: Mailer):
        self.background_tasks = background_tasks
        self.mailer = mailer

    def notify(self, message: MailMessage) -> None:
        self.background_tasks.add_task(self.mailer.send, message)


def get_notifier(
    background_tasks: BackgroundTasks,
    mailer: Mailer = Depends(get_mailer),
) -> BackgroundNotifier:
    return BackgroundNotifier(background_tasks, mailer)


def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> AdminIdentity:
    """Decode the bearer token into the admin identity."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Unauthenticated request!")
    return verify_token(
        credentials.credentials, settings.secret_key, settings.token_algorithm,
    )
