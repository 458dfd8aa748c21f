"""
Account repository.

The flows only talk to storage through ``AccountRepository``. Duplicate
emails are detected atomically: ``create`` and ``save`` rely on the unique
index on ``users.email`` and surface ``DuplicateKey`` when it fires, so two
concurrent registrations for one email cannot both succeed.
"""

import logging
from typing import Optional, Protocol

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobportal.core.exceptions import DuplicateKey
from jobportal.models import User

logger = logging.getLogger(__name__)


class AccountDraft(BaseModel):
    """Fields of an account that does not exist yet."""

    full_name: str
    email: str
    phone_number: str
    hashed_password: str
    role: str
    profile_photo: Optional[str] = None


class AccountRepository(Protocol):
    def find_by_email(self, email: str) -> Optional[User]: ...

    def find_by_id(self, account_id: str) -> Optional[User]: ...

    def create(self, draft: AccountDraft) -> User: ...

    def save(self, account: User) -> User: ...


class SqlAlchemyAccountRepository:
    """``AccountRepository`` backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.email == email)).first()

    def find_by_id(self, account_id: str) -> Optional[User]:
        return self.db.get(User, account_id)

    def create(self, draft: AccountDraft) -> User:
        account = User(**draft.model_dump(), skills=[])
        self.db.add(account)
        self._commit()
        self.db.refresh(account)
        return account

    def save(self, account: User) -> User:
        self.db.add(account)
        self._commit()
        self.db.refresh(account)
        return account

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.info("Unique constraint rejected account write: %s", exc.orig)
            raise DuplicateKey("email already in use") from exc
