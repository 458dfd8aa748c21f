"""
FastAPI dependencies shared by the routes.

Collaborators are built from settings once per process and can be replaced
in tests through ``app.dependency_overrides``.
"""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from jobportal.core.config import settings
from jobportal.core.exceptions import TokenError, Unauthenticated
from jobportal.core.security import PasswordHasher, SessionTokenCodec
from jobportal.db.session import get_db
from jobportal.repositories.accounts import SqlAlchemyAccountRepository
from jobportal.storage import BlobUploader, make_uploader

logger = logging.getLogger(__name__)


def get_account_repository(db: Session = Depends(get_db)) -> SqlAlchemyAccountRepository:
    return SqlAlchemyAccountRepository(db)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.BCRYPT_ROUNDS)


@lru_cache
def get_token_codec() -> SessionTokenCodec:
    return SessionTokenCodec(
        secret=settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
        ttl=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )


@lru_cache
def get_uploader() -> BlobUploader:
    return make_uploader(settings)


def _extract_token(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    authorization = request.headers.get("Authorization")
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


def require_session(
    request: Request,
    codec: SessionTokenCodec = Depends(get_token_codec),
) -> str:
    """
    Resolve the trusted account id for the current request.

    Reads the session cookie (or a Bearer header), verifies it and stores the
    account id on ``request.state.account_id``. The account itself is not
    loaded here.
    """
    token = _extract_token(request)
    if not token:
        raise Unauthenticated()

    try:
        account_id = codec.verify(token)
    except TokenError as exc:
        logger.info("Rejected session token: %s", exc)
        raise Unauthenticated("Invalid or expired token.")

    request.state.account_id = account_id
    return account_id
