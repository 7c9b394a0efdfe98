"""Public security API exports."""
from __future__ import annotations

from .passwords import hash_password, is_password_hashed, verify_password

__all__ = [
    "hash_password",
    "is_password_hashed",
    "verify_password",
]
