from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from core.setup import Base
from util.enum import SubmissionStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContactSubmission(Base):
    """
    A message left by a site visitor through the public contact form.

    Only `status` changes after creation.
    """

    __tablename__ = "contact_submissions"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(254), nullable=False)
    phone = Column(String(50), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(
        Enum(SubmissionStatus, name="submission_status"),
        nullable=False,
        default=SubmissionStatus.new,
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=utc_now, index=True
    )
