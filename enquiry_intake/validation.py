"""Sanitising and validating contact form submissions."""
import re
from typing import Any

from enquiry_intake.models import MESSAGE_MAX_LENGTH

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("firstName", "lastName", "email", "message")

# Hidden form field; humans never see it, bots fill it in
HONEYPOT_FIELD = "website"

# Leading and trailing whitespace, byte order marks included
_TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")


class EnquiryValidationError(Exception):
    """A submission the client must correct. ``message`` is safe to return."""

    message = "Invalid submission."

    def __init__(self, message: str | None = None):
        if message:
            self.message = message
        super().__init__(self.message)


class MissingFieldsError(EnquiryValidationError):
    message = "Missing required fields."

    def __init__(self, fields=()):
        self.fields = tuple(fields)
        super().__init__()


class MessageTooLongError(EnquiryValidationError):
    message = "Message too long."


class InvalidEmailError(EnquiryValidationError):
    message = "Invalid email."


def _to_text(value: Any) -> str:
    """String form of a JSON value, rendered the way browsers stringify it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if v is None else _to_text(v) for v in value)
    return str(value)


def clean(value: Any) -> str:
    """Coerce to a trimmed string; None and other falsy values become ''."""
    return _TRIM_RE.sub("", _to_text(value or ""))


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-le")) // 2


def is_spam(data: dict) -> bool:
    return bool(clean(data.get(HONEYPOT_FIELD)))


def validate_submission(data: dict) -> dict[str, str]:
    """
    Return the cleaned submission fields, or raise an EnquiryValidationError.
    Checks run in order: required fields, message length, email format.
    """
    fields = {
        "firstName": clean(data.get("firstName")),
        "lastName": clean(data.get("lastName")),
        "email": clean(data.get("email")).lower(),
        "message": clean(data.get("message")),
        "pageUrl": clean(data.get("pageUrl")),
        "userAgent": clean(data.get("userAgent")),
        "tz": clean(data.get("tz")),
    }
    missing = [name for name in REQUIRED_FIELDS if not fields[name]]
    if missing:
        raise MissingFieldsError(missing)
    if utf16_length(fields["message"]) > MESSAGE_MAX_LENGTH:
        raise MessageTooLongError()
    if not EMAIL_RE.match(fields["email"]):
        raise InvalidEmailError()
    return fields


def client_ip(forwarded_for: str | None, remote_addr: str | None) -> str:
    """First X-Forwarded-For hop, else the socket address, else 'unknown'."""
    xff = (forwarded_for or "").strip()
    ip = xff.split(",")[0].strip() if xff else ""
    return ip or (remote_addr or "") or "unknown"
