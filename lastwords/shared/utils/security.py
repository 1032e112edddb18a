"""
Security Utilities

JWT token management, password hashing and email HMACs.

JWT Tokens:
===========
Uses PyJWT for JSON Web Token creation and validation.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation.

Email HMAC:
===========
Emails are never used as lookup keys directly. A salted HMAC-SHA256 over the
normalized (lower-cased, trimmed) address is stored and compared instead.

Usage:
======
    from lastwords.shared.utils.security import SecurityUtils

    # Create JWT
    token = SecurityUtils.create_access_token(
        data={"sub": "user_abc"},
        secret_key="secret",
        expires_delta=timedelta(hours=1)
    )

    # Decode JWT
    payload = SecurityUtils.decode_access_token(token, "secret")

    # Email HMAC
    hmac_hex, salt = SecurityUtils.generate_email_hmac("User@Example.com")
    SecurityUtils.verify_email_hmac("user@example.com", hmac_hex, salt)  # True
"""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

import jwt
from passlib.context import CryptContext


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=12,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - JWT token creation and validation
    - Password hashing with bcrypt
    - Email HMACs and random tokens
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (e.g., sub, email)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 1 hour)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(hours=1))

        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash password using bcrypt (12 rounds)."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify password against bcrypt hash."""
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # EMAIL HMAC
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def normalize_email(email: str) -> str:
        return email.lower().strip()

    @classmethod
    def generate_email_hmac(
        cls,
        email: str,
        salt: Optional[str] = None,
    ) -> Tuple[str, str]:
        """
        Generate a salted HMAC for an email address.

        Args:
            email: Email address (normalized before hashing)
            salt: HMAC key; a random 32-byte hex salt is generated when omitted

        Returns:
            Tuple of (hmac_hex, salt)
        """
        actual_salt = salt or cls.generate_salt()
        digest = hmac.new(
            actual_salt.encode("utf-8"),
            cls.normalize_email(email).encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return digest, actual_salt

    @classmethod
    def verify_email_hmac(cls, email: str, email_hmac: str, salt: str) -> bool:
        """Verify an email against a stored HMAC in constant time."""
        computed, _ = cls.generate_email_hmac(email, salt)
        return cls.secure_compare(email_hmac, computed)

    # ═══════════════════════════════════════════════════════════════════════════
    # RANDOM VALUES
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def generate_secure_token(length: int = 32) -> str:
        """Generate a hex token from `length` random bytes."""
        return secrets.token_hex(length)

    @staticmethod
    def generate_salt(length: int = 32) -> str:
        """Generate a hex salt from `length` random bytes."""
        return secrets.token_hex(length)

    @staticmethod
    def secure_compare(a: str, b: str) -> bool:
        """Constant-time string comparison."""
        if len(a) != len(b):
            return False
        return hmac.compare_digest(a.encode("utf-8"), b.encode("utf-8"))
