"""
User account API endpoints.

Handles registration, login/logout with a cookie-borne session token, and
profile updates for the signed-in user.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from jobportal.api.deps import (
    get_account_repository,
    get_password_hasher,
    get_token_codec,
    get_uploader,
    require_session,
)
from jobportal.api.errors import failure_boundary
from jobportal.core.config import settings
from jobportal.core.security import PasswordHasher, SessionTokenCodec
from jobportal.models import User
from jobportal.repositories.accounts import AccountRepository
from jobportal.services.accounts import (
    ProfileUpdate,
    RegistrationData,
    UploadedFile,
    authenticate,
    register_account,
    update_profile,
)
from jobportal.storage import BlobUploader

logger = logging.getLogger(__name__)

router = APIRouter()


# ============== Pydantic Schemas ==============


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginRequest(BaseModel):
    """Schema for login. Missing fields are reported by the login flow."""

    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class ProfileOut(CamelModel):
    photo_url: Optional[str] = None
    bio: Optional[str] = None
    skills: list[str] = []
    resume_url: Optional[str] = None
    resume_original_file_name: Optional[str] = None


class AccountOut(CamelModel):
    """Public projection of an account (never includes the password hash)."""

    id: str
    full_name: str
    email: str
    phone_number: str
    role: str
    profile: ProfileOut

    @classmethod
    def from_user(cls, user: User) -> "AccountOut":
        return cls(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            phone_number=user.phone_number,
            role=user.role,
            profile=ProfileOut(
                photo_url=user.profile_photo,
                bio=user.bio,
                skills=list(user.skills or []),
                resume_url=user.resume,
                resume_original_file_name=user.resume_original_name,
            ),
        )


class MessageResponse(BaseModel):
    message: str
    success: bool = True


class RegisterResponse(MessageResponse):
    created: bool = True


class AccountResponse(MessageResponse):
    user: AccountOut


# ============== Helper Functions ==============


def _read_upload(file: Optional[UploadFile]) -> Optional[UploadedFile]:
    if file is None:
        return None
    data = file.file.read()
    return UploadedFile(data=data, filename=file.filename, content_type=file.content_type)


def _set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="strict",
    )


# ============== API Endpoints ==============


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    repo: AccountRepository = Depends(get_account_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    uploader: BlobUploader = Depends(get_uploader),
):
    """
    Register a new account.

    Multipart form with the account fields and a required profile image
    (``file``).
    """
    with failure_boundary("An error occurred while creating the account."):
        image = _read_upload(file)
        register_account(
            RegistrationData(
                full_name=full_name,
                email=email,
                phone_number=phone_number,
                password=password,
                role=role,
            ),
            image,
            repo=repo,
            hasher=hasher,
            uploader=uploader,
        )

    return RegisterResponse(message="Account created successfully.")


@router.post("/login", response_model=AccountResponse)
def login(
    req: LoginRequest,
    response: Response,
    repo: AccountRepository = Depends(get_account_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: SessionTokenCodec = Depends(get_token_codec),
):
    """
    Login with email, password and role.

    On success the session token is set as an HttpOnly, SameSite=strict
    cookie living as long as the token itself.
    """
    with failure_boundary("An error occurred while logging in."):
        token, user = authenticate(
            req.email,
            req.password,
            req.role,
            repo=repo,
            hasher=hasher,
            codec=codec,
        )

    _set_session_cookie(response, token, int(codec.ttl.total_seconds()))
    return AccountResponse(
        message=f"Welcome back {user.full_name}",
        user=AccountOut.from_user(user),
    )


@router.get("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Clear the session cookie. Always succeeds."""
    _set_session_cookie(response, "", 0)
    return MessageResponse(message="Logged out successfully.")


@router.post("/profile/update", response_model=AccountResponse)
def update_profile_endpoint(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    account_id: str = Depends(require_session),
    repo: AccountRepository = Depends(get_account_repository),
    uploader: BlobUploader = Depends(get_uploader),
):
    """
    Update the signed-in user's profile.

    Every field is optional; ``skills`` is a comma-separated list and
    ``file`` an optional resume.
    """
    with failure_boundary("An error occurred while updating the profile."):
        resume = _read_upload(file)
        user = update_profile(
            account_id,
            ProfileUpdate(
                full_name=full_name,
                email=email,
                phone_number=phone_number,
                bio=bio,
                skills=skills,
            ),
            resume,
            repo=repo,
            uploader=uploader,
        )

    return AccountResponse(
        message="Profile updated successfully.",
        user=AccountOut.from_user(user),
    )
