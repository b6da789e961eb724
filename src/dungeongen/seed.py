# Seed helpers: free text -> SHA-256 hex digest -> first 32 bytes as the RNG seed.

import hashlib
import secrets
import string
from typing import Optional

from .errors import SeedError
from .rng import SEED_LEN

_ALPHANUMERIC = string.ascii_letters + string.digits


def create_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def random_text(length: int = SEED_LEN) -> str:
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))


def seed_bytes(text: str) -> bytes:
    raw = text.encode("utf-8")
    if len(raw) < SEED_LEN:
        raise SeedError(
            f"Seed must be at least {SEED_LEN} characters long. "
            "Use --text to create a new seed."
        )
    return raw[:SEED_LEN]


def resolve_seed(seed: Optional[str] = None, text: Optional[str] = None) -> str:
    """Explicit seed wins, then the hash of text, then the hash of random text."""
    if seed is not None:
        seed_bytes(seed)
        return seed
    if text is not None:
        return create_hash(text)
    return create_hash(random_text())
