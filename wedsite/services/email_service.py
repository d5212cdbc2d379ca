"""
Email Service

Sends RSVP notification (to the couple) and confirmation (to the guest)
emails. Bodies are Jinja2 templates under ``wedsite/templates/emails``.

Sending is blocking SMTP; callers on the event loop go through the
notification outbox, which runs these in a worker thread.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from wedsite.config import settings

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "emails"


def notification_recipients(template, config) -> list[str]:
    """Owner email first, then the config's recipient list, without duplicates."""
    recipients: list[str] = []
    if template.owner_email:
        recipients.append(template.owner_email)
    for address in config.email.recipients:
        if address and address.lower() not in {r.lower() for r in recipients}:
            recipients.append(address)
    return recipients


class EmailService:
    """Service for sending emails with template support"""

    def __init__(self):
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html", "xml"]),
        )

        self.smtp_host = settings.smtp_host
        self.smtp_port = settings.smtp_port
        self.smtp_user = settings.smtp_user
        self.smtp_password = settings.smtp_password
        self.smtp_from = settings.smtp_from
        self.smtp_use_tls = settings.smtp_use_tls

    @property
    def enabled(self) -> bool:
        return bool(self.smtp_host)

    def _send_email(
        self,
        to_email: str | list[str],
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> bool:
        """
        Send an email using SMTP.

        Returns:
            bool: True if email sent successfully, False otherwise
        """
        if not self.enabled:
            logger.info("SMTP not configured, skipping email '%s' to %s", subject, to_email)
            return False

        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = self.smtp_from
            msg["To"] = to_email if isinstance(to_email, str) else ", ".join(to_email)

            if text_body:
                msg.attach(MIMEText(text_body, "plain", "utf-8"))
            msg.attach(MIMEText(html_body, "html", "utf-8"))

            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)
                server.send_message(msg)

            logger.info("Email sent: '%s' to %s", subject, msg["To"])
            return True

        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email '%s' to %s: %s", subject, to_email, e)
            return False

    def send_rsvp_notification(self, rsvp, template, config) -> bool:
        """Tell the couple a guest responded."""
        recipients = notification_recipients(template, config)
        if not recipients:
            logger.info("No notification recipients for template %s", template.id)
            return False

        html_body = self.env.get_template("rsvp_notification.html").render(
            rsvp=rsvp,
            couple_names=config.couple.combined_names,
            template_name=template.name,
            admin_url=f"{settings.app_url}/{template.slug}/admin",
        )
        text_body = (
            f"New RSVP for {config.couple.combined_names}\n\n"
            f"Name: {rsvp.first_name} {rsvp.last_name}\n"
            f"Email: {rsvp.email}\n"
            f"Attendance: {rsvp.attendance}\n"
            f"Guests: {rsvp.guest_count}\n"
        )
        return self._send_email(
            to_email=recipients,
            subject=f"New RSVP - {rsvp.first_name} {rsvp.last_name}",
            html_body=html_body,
            text_body=text_body,
        )

    def send_rsvp_confirmation(self, rsvp, template, config) -> bool:
        """Confirm receipt to the guest."""
        html_body = self.env.get_template("rsvp_confirmation.html").render(
            rsvp=rsvp,
            couple_names=config.couple.combined_names,
            wedding_date=config.wedding.display_date,
            site_url=f"{settings.app_url}/{template.slug}",
        )
        return self._send_email(
            to_email=rsvp.email,
            subject=f"Your RSVP has been received - {config.couple.combined_names}",
            html_body=html_body,
        )
