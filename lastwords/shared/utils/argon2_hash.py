"""
Argon2 Hashing

Typed wrapper around argon2-cffi's low-level API, mirroring the option and
result records the web client uses for key derivation.

Records:
========
    HashOptions  ← pass, salt, type, time, mem (KiB), parallelism, hashLen
    HashResult   ← hash (raw bytes), hashHex, encoded ($argon2id$v=19$...)

Usage:
======
    from lastwords.shared.utils.argon2_hash import ArgonType, HashOptions, argon2_hash

    result = argon2_hash(HashOptions(
        pass_="correct horse",
        salt="0123456789abcdef",
        type=ArgonType.Argon2id,
        time=3,
        mem=65536,
        parallelism=1,
        hash_len=32,
    ))
    result.hash_hex

    # Same parameters as the web client's user-key derivation
    key = derive_user_key("correct horse", "0123456789abcdef")
"""

from enum import IntEnum

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret, hash_secret_raw
from pydantic import BaseModel, ConfigDict, Field

from lastwords.shared.core.exceptions import ValidationError


class ArgonType(IntEnum):
    """Argon2 variants, numbered as in the reference implementation."""

    Argon2d = 0
    Argon2i = 1
    Argon2id = 2


_LOW_LEVEL_TYPES = {
    ArgonType.Argon2d: Type.D,
    ArgonType.Argon2i: Type.I,
    ArgonType.Argon2id: Type.ID,
}


class HashOptions(BaseModel):
    """Argon2 hashing parameters."""

    model_config = ConfigDict(populate_by_name=True)

    pass_: str = Field(alias="pass", description="Secret to hash")
    salt: str = Field(description="Salt, at least 8 bytes once UTF-8 encoded")
    type: ArgonType = ArgonType.Argon2id
    time: int = Field(default=3, ge=1, description="Iterations")
    mem: int = Field(default=65536, ge=8, description="Memory cost in KiB")
    parallelism: int = Field(default=1, ge=1)
    hash_len: int = Field(default=32, ge=4, alias="hashLen")


class HashResult(BaseModel):
    """Output of a single argon2 run."""

    model_config = ConfigDict(populate_by_name=True)

    hash: bytes
    hash_hex: str = Field(alias="hashHex")
    encoded: str


def argon2_hash(options: HashOptions) -> HashResult:
    """
    Hash `options.pass_` with the given argon2 parameters.

    Returns both the raw digest and the PHC-encoded string for the same run.

    Raises:
        ValidationError: argon2 rejected the parameters (salt too short,
            memory below 8 * parallelism, ...)
    """
    params = dict(
        secret=options.pass_.encode("utf-8"),
        salt=options.salt.encode("utf-8"),
        time_cost=options.time,
        memory_cost=options.mem,
        parallelism=options.parallelism,
        hash_len=options.hash_len,
        type=_LOW_LEVEL_TYPES[options.type],
        version=ARGON2_VERSION,
    )
    try:
        raw = hash_secret_raw(**params)
        encoded = hash_secret(**params)
    except HashingError as e:
        raise ValidationError(
            "Invalid argon2 parameters",
            details={"reason": str(e)},
        ) from e

    return HashResult(hash=raw, hash_hex=raw.hex(), encoded=encoded.decode("ascii"))


def derive_user_key(password: str, salt: str) -> bytes:
    """Derive a 32-byte user key with Argon2id (t=3, m=64 MiB, p=1)."""
    result = argon2_hash(HashOptions(
        pass_=password,
        salt=salt,
        type=ArgonType.Argon2id,
        time=3,
        mem=65536,
        parallelism=1,
        hash_len=32,
    ))
    return result.hash
