"""
Security utilities for authentication.

Provides password hashing (bcrypt via passlib) and signed session tokens (JWT).
Both components take their configuration at construction so they can be
built from settings once at startup and tested in isolation.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from passlib.context import CryptContext
from passlib.exc import PasswordValueError

from jobportal.core.exceptions import HashingFailure, InvalidPassword, TokenExpired, TokenInvalid


class PasswordHasher:
    """Salted, adaptive one-way password hashing."""

    def __init__(self, rounds: int = 10):
        # The salt is embedded in the bcrypt output string.
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plain text password.

        Raises:
            InvalidPassword: if bcrypt cannot accept the password (e.g. NUL bytes)
            HashingFailure: if the bcrypt backend fails
        """
        try:
            return self._context.hash(password)
        except PasswordValueError as exc:
            raise InvalidPassword() from exc
        except (ValueError, TypeError, RuntimeError) as exc:
            raise HashingFailure("password hashing failed") from exc

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a stored hash.

        A mismatch, or a stored value that is not a recognised hash,
        is a plain ``False`` rather than an error.
        """
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification (used for unknown accounts)."""
        self._context.dummy_verify()


class SessionTokenCodec:
    """Issues and verifies signed session tokens bound to an account id."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=1),
    ):
        if not secret:
            raise ValueError("SessionTokenCodec requires a non-empty secret")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(self, account_id: str, ttl: Optional[timedelta] = None) -> str:
        """
        Create a signed token for ``account_id``.

        Args:
            account_id: The account the token vouches for
            ttl: Optional override of the configured lifetime

        Returns:
            The encoded JWT string
        """
        now = datetime.now(timezone.utc)
        claims = {
            "sub": account_id,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Decode a token and return the account id it carries.

        Raises:
            TokenExpired: if the token's lifetime has elapsed
            TokenInvalid: for a bad signature, malformed token or missing claims
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpired("token expired") from exc
        except InvalidTokenError as exc:
            raise TokenInvalid("token invalid") from exc

        account_id = payload["sub"]
        if not isinstance(account_id, str) or not account_id:
            raise TokenInvalid("token subject missing")
        return account_id
