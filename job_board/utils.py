"""Utility helpers shared across the engine."""

from __future__ import annotations

import hashlib
import uuid


def stable_id(*parts: str) -> str:
    """Create a deterministic identifier from a set of string parts."""
    joined = "|".join(p.strip() for p in parts if p is not None)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


def random_id() -> str:
    """Return a fresh 128-bit random identifier as 32 hex characters."""
    return uuid.uuid4().hex
