"""Mailer — renders Jinja2 email templates and hands them to an SMTP transport.

Invariants:
    - send() never raises: every failure becomes a DeliveryError that is logged and absorbed
    - One SMTP connection per message, closed before send() returns
    - Empty mail_host disables the transport (rendering still runs, nothing leaves the process)

Design Decisions:
    - Constructed once in the lifespan and stored on app.state
    - Synchronous smtplib: FastAPI runs sync background tasks in its threadpool,
      so delivery never blocks the event loop or the response
    - Implicit TLS (SMTP_SSL, port 465) by default; STARTTLS when mail_use_ssl is off
"""

import logging
import smtplib
from email.message import EmailMessage
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from bootcamp.config import Settings
from bootcamp.core.errors import DeliveryError
from bootcamp.core.notifications import MailMessage

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class Mailer:
    """SMTP mail delivery with Jinja2 templates."""

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str = "",
        password: str = "",
        use_ssl: bool = True,
        timeout: int = 30,
        template_dir: Path = TEMPLATE_DIR,
    ):
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_ssl = use_ssl
        self.timeout = timeout
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html"]),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            host=settings.mail_host,
            port=settings.mail_port,
            sender=settings.mail_from,
            username=settings.mail_user,
            password=settings.mail_password,
            use_ssl=settings.mail_use_ssl,
            timeout=settings.mail_timeout_seconds,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.host)

    def render(self, message: MailMessage) -> str:
        try:
            template = self.env.get_template(message.template.value)
            return template.render(**message.data)
        except TemplateError as e:
            raise DeliveryError(str(e), message.template.value)

    def build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["From"] = self.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.subject)
        email.add_alternative(self.render(message), subtype="html")
        return email

    def deliver(self, message: MailMessage) -> bool:
        """Render and send; raises DeliveryError. False when the transport is disabled."""
        email = self.build(message)
        if not self.enabled:
            logger.info(
                "Mail transport disabled, message not sent",
                extra={"template": message.template.value, "recipient": message.to},
            )
            return False
        try:
            if self.use_ssl:
                smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
            else:
                smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            with smtp:
                if not self.use_ssl:
                    smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password)
                smtp.send_message(email)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryError(str(e), message.template.value)
        return True

    def send(self, message: MailMessage) -> bool:
        """Deliver a message, logging the outcome. Never raises."""
        try:
            sent = self.deliver(message)
        except DeliveryError as e:
            logger.error(
                f"Error sending email: {e.message}",
                extra={
                    "error_code": e.code,
                    "template": e.template,
                    "recipient": message.to,
                },
            )
            return False
        if sent:
            logger.info(
                "Email sent",
                extra={"template": message.template.value, "recipient": message.to},
            )
        return sent
