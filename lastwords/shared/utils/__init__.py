"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: JWT management, password hashing, email HMACs
- argon2_hash: Argon2 key derivation

Usage:
======
    from lastwords.shared.utils.security import SecurityUtils
    from lastwords.shared.utils.argon2_hash import argon2_hash, HashOptions
"""

from lastwords.shared.utils.security import SecurityUtils
from lastwords.shared.utils.argon2_hash import (
    ArgonType,
    HashOptions,
    HashResult,
    argon2_hash,
    derive_user_key,
)

__all__ = [
    "SecurityUtils",
    "ArgonType",
    "HashOptions",
    "HashResult",
    "argon2_hash",
    "derive_user_key",
]
