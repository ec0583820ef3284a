"""Validate contact-form submissions and hand them to a mail sender.

The contact page posts ``name``, ``email``, ``subject`` and ``message``. This
module checks the fields, composes the notification mail, and passes it to a
:class:`MailSender` supplied by the hosting application; how the mail is
actually delivered (SMTP, an API, a queue) is the sender's business.

Example
-------
>>> from artia_pages.contact import ContactForm, validate_contact_form
>>> validate_contact_form(ContactForm("Ann", "ann@example", "Hi", "Hello"))
'Invalid email format'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ

import structlog
from jinja2 import Environment, StrictUndefined

from artia_pages.errors import MailDeliveryError

logger = structlog.get_logger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DEFAULT_SUBJECT_PREFIX = "[Contact]"
DEFAULT_FROM_NAME = "Contact Form"

MAIL_BODY_TEMPLATE = """\
New contact form message

From:
- Name: {{ form.name }}
- Email: {{ form.email }}

Subject: {{ form.subject }}

Message:
{{ form.message }}

---
Sent automatically by the {{ site_name }} contact form\
"""

_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=False)
_body_template = _env.from_string(MAIL_BODY_TEMPLATE)


@dc.dataclass(frozen=True, slots=True)
class ContactForm:
    """Fields submitted through the contact page."""

    name: str = ""
    email: str = ""
    subject: str = ""
    message: str = ""

    @classmethod
    def from_payload(cls, payload: cabc.Mapping[str, typ.Any]) -> ContactForm:
        """Build a form from a decoded request body, coercing values to text."""

        def _text(key: str) -> str:
            value = payload.get(key)
            return "" if value is None else str(value)

        return cls(
            name=_text("name"),
            email=_text("email"),
            subject=_text("subject"),
            message=_text("message"),
        )


@dc.dataclass(frozen=True, slots=True)
class ContactSettings:
    """Server-side contact configuration."""

    enabled: bool = False
    from_name: str = DEFAULT_FROM_NAME
    from_email: str = ""
    subject_prefix: str = DEFAULT_SUBJECT_PREFIX
    recipient: str = ""
    site_name: str = "Artia"


@dc.dataclass(frozen=True, slots=True)
class MailMessage:
    """A composed notification mail ready for delivery."""

    sender: str | None
    reply_to: str
    to: str
    subject: str
    text: str


@dc.dataclass(frozen=True, slots=True)
class ContactResult:
    """Outcome reported back to the contact page."""

    success: bool
    message: str | None = None
    error: str | None = None


class MailSender(typ.Protocol):
    """Delivers composed mails; raises :class:`MailDeliveryError` on failure."""

    def send(self, message: MailMessage) -> None:
        """Hand ``message`` off for delivery."""
        ...


def validate_contact_form(form: ContactForm) -> str | None:
    """Return the first validation error for ``form``, or None when valid."""
    if not form.name.strip():
        return "Name is required"
    if not form.email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(form.email):
        return "Invalid email format"
    if not form.subject.strip():
        return "Subject is required"
    if not form.message.strip():
        return "Message is required"
    return None


def compose_contact_mail(form: ContactForm, settings: ContactSettings) -> MailMessage:
    """Build the notification mail for a validated submission.

    Parameters
    ----------
    form : ContactForm
        Validated submission.
    settings : ContactSettings
        Sender identity, subject prefix, and recipient.

    Returns
    -------
    MailMessage
        Mail whose reply-to address is the visitor's, so replies reach them.
    """
    prefix = settings.subject_prefix or DEFAULT_SUBJECT_PREFIX
    from_name = settings.from_name or DEFAULT_FROM_NAME
    sender = f'"{from_name}" <{settings.from_email}>' if settings.from_email else None
    text = _body_template.render(form=form, site_name=settings.site_name).strip()
    return MailMessage(
        sender=sender,
        reply_to=form.email,
        to=settings.recipient,
        subject=f"{prefix} {form.subject}",
        text=text,
    )


def submit_contact_form(
    payload: cabc.Mapping[str, typ.Any] | ContactForm,
    settings: ContactSettings,
    sender: MailSender,
) -> ContactResult:
    """Validate a submission and deliver it through ``sender``.

    Parameters
    ----------
    payload : Mapping or ContactForm
        Decoded request body or an already-built form.
    settings : ContactSettings
        Contact configuration; a disabled form rejects every submission.
    sender : MailSender
        Delivery collaborator.

    Returns
    -------
    ContactResult
        ``success`` with a confirmation message, or ``error`` describing why
        the submission was not sent. Delivery failures are reported here
        rather than raised.
    """
    if not settings.enabled:
        return ContactResult(success=False, error="Contact form is not enabled")

    form = payload if isinstance(payload, ContactForm) else ContactForm.from_payload(payload)
    validation_error = validate_contact_form(form)
    if validation_error:
        logger.info("contact.rejected", reason=validation_error)
        return ContactResult(success=False, error=validation_error)

    message = compose_contact_mail(form, settings)
    try:
        sender.send(message)
    except MailDeliveryError as exc:
        logger.error("contact.delivery_failed", error=str(exc), subject=message.subject)
        return ContactResult(success=False, error="Failed to send message")
    logger.info("contact.sent", subject=message.subject)
    return ContactResult(success=True, message="Message sent successfully")


__all__ = [
    "EMAIL_PATTERN",
    "ContactForm",
    "ContactResult",
    "ContactSettings",
    "MailMessage",
    "MailSender",
    "compose_contact_mail",
    "submit_contact_form",
    "validate_contact_form",
]
