"""
Error taxonomy for the identity service.

Every error a caller may see derives from ``AccountError`` and carries the
HTTP status, a stable machine code, and a short message that is safe to show.
Lower-level errors (hashing, token decoding, repository conflicts) are raised
by their components and translated by the account flows.
"""

from typing import Optional


class AccountError(Exception):
    """Base class for errors rendered into the response envelope."""

    status_code: int = 400
    code: str = "ACCOUNT_ERROR"
    message: str = "Request could not be processed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


# ============== Validation (400) ==============


class AccountValidationError(AccountError):
    code = "VALIDATION_ERROR"
    message = "Invalid input."


class MissingRequiredField(AccountValidationError):
    code = "MISSING_REQUIRED_FIELD"
    message = "Something is missing."


class MissingProfileImage(AccountValidationError):
    code = "MISSING_PROFILE_IMAGE"
    message = "Profile picture is required."


class InvalidRole(AccountValidationError):
    code = "INVALID_ROLE"
    message = "Role must be 'seeker' or 'recruiter'."


class InvalidPassword(AccountValidationError):
    code = "INVALID_PASSWORD"
    message = "Password contains unsupported characters."


# ============== Identity / credentials ==============


class DuplicateIdentity(AccountError):
    code = "DUPLICATE_IDENTITY"
    message = "User already exists with this email."


class InvalidCredentials(AccountError):
    code = "INVALID_CREDENTIALS"
    message = "Incorrect email or password."


class RoleMismatch(AccountError):
    code = "ROLE_MISMATCH"
    message = "Account doesn't exist with current role."


class Unauthenticated(AccountError):
    status_code = 401
    code = "UNAUTHENTICATED"
    message = "User not authenticated."


class AccountNotFound(AccountError):
    code = "ACCOUNT_NOT_FOUND"
    message = "User not found."


# ============== Server side (500) ==============


class UploadFailure(AccountError):
    status_code = 500
    code = "UPLOAD_FAILURE"
    message = "File upload failed."


class InternalFailure(AccountError):
    status_code = 500
    code = "INTERNAL_FAILURE"
    message = "An internal error occurred."


# ============== Component-level errors ==============


class HashingFailure(Exception):
    """The password hashing backend could not produce a hash."""


class TokenError(Exception):
    """A session token could not be trusted."""


class TokenInvalid(TokenError):
    pass


class TokenExpired(TokenError):
    pass


class DuplicateKey(Exception):
    """The storage layer rejected a write that would duplicate a unique key."""
