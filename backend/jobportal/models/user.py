import enum
import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, String

from jobportal.db.base import Base


class Role(str, enum.Enum):
    """Fixed account category chosen at registration."""

    SEEKER = "seeker"
    RECRUITER = "recruiter"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """Durable identity record for one account, with its profile columns."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String, nullable=False)
    # Unique index: duplicate registrations are rejected by the database itself
    email = Column(String, unique=True, index=True, nullable=False)
    phone_number = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False)  # 'seeker' | 'recruiter'

    # Profile
    profile_photo = Column(String, nullable=True)
    bio = Column(String, nullable=True)
    skills = Column(JSON, default=list)
    resume = Column(String, nullable=True)  # URL of the uploaded file
    resume_original_name = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)
