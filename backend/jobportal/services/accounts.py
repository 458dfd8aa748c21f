"""
Account flows: registration, authentication and profile updates.

Each flow takes its collaborators explicitly (repository, hasher, token
codec, uploader) and raises ``AccountError`` subclasses for every outcome a
caller should see. Plain-text passwords are never stored or logged.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from jobportal.core.exceptions import (
    AccountNotFound,
    DuplicateIdentity,
    DuplicateKey,
    InvalidCredentials,
    InvalidPassword,
    InvalidRole,
    MissingProfileImage,
    MissingRequiredField,
    RoleMismatch,
)
from jobportal.core.security import PasswordHasher, SessionTokenCodec
from jobportal.models import Role, User
from jobportal.repositories.accounts import AccountDraft, AccountRepository
from jobportal.storage import BlobUploader

logger = logging.getLogger(__name__)

VALID_ROLES = {role.value for role in Role}


@dataclass
class RegistrationData:
    full_name: Optional[str]
    email: Optional[str]
    phone_number: Optional[str]
    password: Optional[str]
    role: Optional[str]


@dataclass
class UploadedFile:
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass
class ProfileUpdate:
    """
    Partial profile mutation.

    ``None`` means "not provided" and leaves the field untouched. A present
    empty string is written: ``bio=""`` clears the bio and ``skills=""``
    clears the skill set. Name, email and phone are required attributes, so a
    blank value for them is rejected.
    """

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[str] = None  # comma-separated


def normalize_email(email: str) -> str:
    return email.strip().lower()


def parse_skills(skills: str) -> list[str]:
    """Split a comma-separated skill list into unique, trimmed entries."""
    result: list[str] = []
    for item in skills.split(","):
        skill = item.strip()
        if skill and skill not in result:
            result.append(skill)
    return result


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def register_account(
    data: RegistrationData,
    profile_image: Optional[UploadedFile],
    *,
    repo: AccountRepository,
    hasher: PasswordHasher,
    uploader: BlobUploader,
) -> User:
    """
    Register a new account.

    The profile image is uploaded before the duplicate check and is not
    removed if a later step fails.
    """
    required = (data.full_name, data.email, data.phone_number, data.password, data.role)
    if any(_is_blank(value) for value in required):
        raise MissingRequiredField()
    if "\x00" in data.password:
        raise InvalidPassword()
    if data.role not in VALID_ROLES:
        raise InvalidRole()
    if profile_image is None or not profile_image.data:
        raise MissingProfileImage()

    photo_url = uploader.upload(
        profile_image.data,
        filename=profile_image.filename,
        content_type=profile_image.content_type,
    )

    email = normalize_email(data.email)
    if repo.find_by_email(email) is not None:
        raise DuplicateIdentity()

    draft = AccountDraft(
        full_name=data.full_name.strip(),
        email=email,
        phone_number=data.phone_number.strip(),
        hashed_password=hasher.hash(data.password),
        role=data.role,
        profile_photo=photo_url,
    )
    try:
        account = repo.create(draft)
    except DuplicateKey:
        # Lost a race with a concurrent registration for the same email
        raise DuplicateIdentity()

    logger.info("Registered account %s (role=%s)", account.id, account.role)
    return account


def authenticate(
    email: Optional[str],
    password: Optional[str],
    role: Optional[str],
    *,
    repo: AccountRepository,
    hasher: PasswordHasher,
    codec: SessionTokenCodec,
) -> tuple[str, User]:
    """
    Check credentials and role, then issue a session token.

    Returns:
        The signed token and the authenticated account
    """
    if _is_blank(email) or not password or _is_blank(role):
        raise MissingRequiredField()

    account = repo.find_by_email(normalize_email(email))
    if account is None:
        hasher.dummy_verify()
        logger.info("Login rejected: unknown email")
        raise InvalidCredentials()

    if not hasher.verify(password, account.hashed_password):
        logger.info("Login rejected for account %s: bad password", account.id)
        raise InvalidCredentials()

    if role != account.role:
        logger.info("Login rejected for account %s: role mismatch", account.id)
        raise RoleMismatch()

    token = codec.issue(account.id)
    logger.info("Login: %s", account.id)
    return token, account


def update_profile(
    account_id: str,
    changes: ProfileUpdate,
    resume: Optional[UploadedFile] = None,
    *,
    repo: AccountRepository,
    uploader: BlobUploader,
) -> User:
    """Apply a partial update to the account identified by a trusted id."""
    for value in (changes.full_name, changes.email, changes.phone_number):
        if value is not None and not value.strip():
            raise MissingRequiredField()

    resume_url = None
    if resume is not None and resume.data:
        resume_url = uploader.upload(
            resume.data,
            filename=resume.filename,
            content_type=resume.content_type,
        )

    account = repo.find_by_id(account_id)
    if account is None:
        # The token was signed for this id, so storage and tokens disagree
        logger.error("Verified session refers to missing account %s", account_id)
        raise AccountNotFound()

    # Collision check runs before any field is touched
    new_email = None
    if changes.email is not None:
        new_email = normalize_email(changes.email)
        if new_email != account.email:
            other = repo.find_by_email(new_email)
            if other is not None and other.id != account.id:
                raise DuplicateIdentity()

    if changes.full_name is not None:
        account.full_name = changes.full_name.strip()
    if new_email is not None:
        account.email = new_email
    if changes.phone_number is not None:
        account.phone_number = changes.phone_number.strip()
    if changes.bio is not None:
        account.bio = changes.bio
    if changes.skills is not None:
        account.skills = parse_skills(changes.skills)

    if resume_url:
        account.resume = resume_url
        account.resume_original_name = resume.filename

    try:
        account = repo.save(account)
    except DuplicateKey:
        raise DuplicateIdentity()

    logger.info("Updated profile for account %s", account.id)
    return account
