"""SQLAlchemy models."""
from datetime import datetime
from typing import Any

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import JSON, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

# Keep attributes loaded after commit; the handler reads them for logging and the email
db = SQLAlchemy(session_options={"expire_on_commit": False})

MESSAGE_MAX_LENGTH = 5000


class Enquiry(db.Model):
    """A contact form enquiry. Written once on submission, triaged elsewhere."""

    __tablename__ = "contact_enquiries"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Unbounded: only the message has a length limit
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="new")  # 'new' on creation
    # Set by the database, never taken from the client
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    # origin, ip, pageUrl, userAgent, tz
    meta: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    def to_document(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "message": self.message,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "meta": dict(self.meta or {}),
        }

    def __repr__(self) -> str:
        return f"<Enquiry {self.id} {self.email} ({self.status})>"
