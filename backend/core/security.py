# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Central security module.  Password hashing and request attribution live
here.  No other module should touch raw crypto directly.

Responsibilities
----------------
1. Password hashing / verification          (passlib pbkdf2_sha256)
2. Request helpers                          (X-User-Id attribution, client IP)
"""

from typing import Optional

from fastapi import Header, Request
from passlib.hash import pbkdf2_sha256 as _pbkdf2  # pure Python, no binary deps

from core.config import settings

# ---------------------------------------------------------------------------
# 1.  pbkdf2_sha256 – password hashing  (pure Python, no glibc constraint)
# ---------------------------------------------------------------------------
# The hasher is a small stateless object handed to UserDirectory at
# construction time, so tests can pass one with a low round count.
# ---------------------------------------------------------------------------


class PasswordHasher:
    """One-way salted hash + constant-time verify.  No decryption path."""

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds or settings.password_hash_rounds
        self._handler = _pbkdf2.using(rounds=self.rounds)

    def hash(self, plain: str) -> str:
        """
        Hash a plaintext password with PBKDF2-SHA256.

        Returns the full passlib hash string  e.g. "$pbkdf2-sha256$...";
        the salt is embedded inside it (passlib convention).
        """
        return self._handler.hash(plain)

    def verify(self, plain: str, stored_hash: str) -> bool:
        """
        Constant-time verification of *plain* against a hash produced by
        :meth:`hash`.  A malformed stored hash never matches.
        """
        try:
            return _pbkdf2.verify(plain, stored_hash)
        except ValueError:
            return False


def get_password_hasher() -> PasswordHasher:
    """FastAPI dependency – override in tests via ``app.dependency_overrides``."""
    return PasswordHasher()


# ---------------------------------------------------------------------------
# 2.  Request helpers
# ---------------------------------------------------------------------------


def get_acting_user_id(
    x_user_id: Optional[int] = Header(None, alias="X-User-Id"),
) -> Optional[int]:
    """
    Dependency: the caller-supplied ``X-User-Id`` header, or None for an
    anonymous request.  The id is taken as-is; it is not looked up.
    """
    return x_user_id


def get_client_ip(request: Request) -> str:
    """
    Extract the client IP address from the request.
    Checks X-Forwarded-For header first (for proxies), then falls back to client host.
    Returns the IP address as a string (supports both IPv4 and IPv6).
    """
    # X-Forwarded-For can contain multiple IPs, take the first (original client)
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"
