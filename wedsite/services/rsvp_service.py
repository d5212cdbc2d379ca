"""
RSVP Service

Validates, deduplicates and persists guest RSVPs for one template.

Each submission moves through ``received -> validated -> dedup_checked``
and ends ``persisted`` or ``rejected``; ``submit_rsvp`` returns an
``RsvpOutcome`` instead of raising so callers can log the final state.
The payload arrives already shape-checked by ``RsvpCreate``; ``validated``
means the service-level checks (maintenance, guest count against the
composed config) passed, so rejections from those report ``received``.

An email may be used once per template, in either the primary or the
alternate field. The query below gives guests a friendly message; the
``rsvp_email_claims`` unique constraint settles concurrent submissions.
"""

import csv
import enum
import logging
from dataclasses import dataclass
from io import StringIO

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wedsite.exceptions import DuplicateRsvpError, MaintenanceModeError, ValidationError, WeddingSiteError
from wedsite.models.rsvp import Rsvp, RsvpEmailClaim
from wedsite.models.template import Template
from wedsite.schemas.rsvp import RsvpCreate
from wedsite.services.config_composer import ConfigComposer
from wedsite.services.email_service import EmailService
from wedsite.services.outbox import NotificationOutbox
from wedsite.services.translation_overlay import TranslationOverlay

logger = logging.getLogger(__name__)

ALREADY_SUBMITTED_KEY = "rsvp.messages.alreadySubmitted"
SUCCESS_KEY = "rsvp.messages.success"
MAINTENANCE_KEY = "rsvp.messages.maintenance"

CSV_COLUMNS = [
    "ID",
    "First Name",
    "Last Name",
    "Email",
    "Guest Email",
    "Attendance",
    "Guest Count",
    "Guest Names",
    "Dietary Restrictions",
    "Message",
    "Submitted At",
]


class RsvpState(str, enum.Enum):
    received = "received"
    validated = "validated"
    dedup_checked = "dedup_checked"
    persisted = "persisted"
    rejected = "rejected"


@dataclass
class RsvpOutcome:
    state: RsvpState
    rsvp: Rsvp | None = None
    error: WeddingSiteError | None = None
    message: str | None = None

    @property
    def accepted(self) -> bool:
        return self.state is RsvpState.persisted


async def find_duplicate(template_id: str, emails: set[str], db: AsyncSession) -> Rsvp | None:
    """First RSVP of the template whose primary or alternate email is in ``emails``."""
    result = await db.execute(
        select(Rsvp)
        .where(
            Rsvp.template_id == template_id,
            or_(
                func.lower(Rsvp.email).in_(emails),
                func.lower(Rsvp.guest_email).in_(emails),
            ),
        )
        .limit(1)
    )
    return result.scalars().first()


def _reject(state: RsvpState, error: WeddingSiteError, template_id: str) -> RsvpOutcome:
    logger.info(
        "RSVP rejected after %s for template %s: %s",
        state.value,
        template_id,
        error.error_code.value,
        extra={"template_id": template_id, "error_code": error.error_code.value},
    )
    return RsvpOutcome(state=RsvpState.rejected, error=error)


async def submit_rsvp(
    template: Template,
    payload: RsvpCreate,
    locale: str,
    db: AsyncSession,
    composer: ConfigComposer,
    overlay: TranslationOverlay,
    outbox: NotificationOutbox | None = None,
    email_service: EmailService | None = None,
) -> RsvpOutcome:
    # Plain id: a rollback below expires the ORM instance
    template_id = template.id
    state = RsvpState.received

    if template.maintenance:
        return _reject(state, MaintenanceModeError(overlay.t(MAINTENANCE_KEY, locale)), template_id)

    config = await composer.compose(template, locale, db)
    max_guests = config.rsvp.max_guests
    if payload.guest_count > max_guests:
        error = ValidationError(
            overlay.t("rsvp.messages.invalid", locale),
            field="guestCount",
            details={"max_guests": max_guests, "guest_count": payload.guest_count},
        )
        return _reject(state, error, template_id)
    state = RsvpState.validated

    emails = payload.emails()
    already_submitted = overlay.t(ALREADY_SUBMITTED_KEY, locale)
    if await find_duplicate(template_id, emails, db) is not None:
        return _reject(state, DuplicateRsvpError(already_submitted), template_id)
    state = RsvpState.dedup_checked

    rsvp = Rsvp(
        template_id=template_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email.strip(),
        guest_email=payload.guest_email.strip() if payload.guest_email else None,
        attendance=payload.attendance.value,
        guest_count=payload.guest_count,
        guest_names=payload.guest_names,
        dietary_restrictions=payload.dietary_restrictions,
        message=payload.message,
    )
    rsvp.claims = [RsvpEmailClaim(template_id=template_id, email=email) for email in sorted(emails)]
    db.add(rsvp)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("RSVP email claim conflict for template %s", template_id)
        return _reject(state, DuplicateRsvpError(already_submitted), template_id)
    await db.refresh(rsvp)

    logger.info(
        "RSVP %s persisted for template %s (%s, %d guests)",
        rsvp.id,
        template_id,
        rsvp.attendance,
        rsvp.guest_count,
        extra={"template_id": template_id},
    )

    if outbox is not None:
        email_service = email_service or EmailService()
        outbox.add("rsvp-notification", email_service.send_rsvp_notification, rsvp, template, config)
        outbox.add("rsvp-confirmation", email_service.send_rsvp_confirmation, rsvp, template, config)

    return RsvpOutcome(state=RsvpState.persisted, rsvp=rsvp, message=overlay.t(SUCCESS_KEY, locale))


async def list_rsvps(template_id: str, db: AsyncSession) -> list[Rsvp]:
    """RSVPs of one template, newest first."""
    result = await db.execute(
        select(Rsvp).where(Rsvp.template_id == template_id).order_by(Rsvp.created_at.desc())
    )
    return list(result.scalars().all())


def csv_cell(value) -> str:
    """Stringify for CSV, quoting leading formula characters so spreadsheets show text."""
    text = str(value) if value is not None else ""
    if text and text[0] in ("=", "+", "-", "@", "\t", "\r"):
        return "'" + text
    return text


def export_rsvps_csv(rsvps: list[Rsvp]) -> str:
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(CSV_COLUMNS)
    for rsvp in rsvps:
        writer.writerow(
            [
                csv_cell(rsvp.id),
                csv_cell(rsvp.first_name),
                csv_cell(rsvp.last_name),
                csv_cell(rsvp.email),
                csv_cell(rsvp.guest_email),
                csv_cell(rsvp.attendance),
                csv_cell(rsvp.guest_count),
                csv_cell(rsvp.guest_names),
                csv_cell(rsvp.dietary_restrictions),
                csv_cell(rsvp.message),
                csv_cell(rsvp.created_at.isoformat() if rsvp.created_at else ""),
            ]
        )
    return output.getvalue()
