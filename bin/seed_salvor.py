# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Bootstrap script – creates the first salvor account.

Run once after the initial migration:
    python bin/seed_salvor.py

The script reads FIRST_SALVOR_USERNAME, FIRST_SALVOR_EMAIL and
FIRST_SALVOR_PASSWORD from etc/app.conf.  After the row is inserted those
values are no longer used by the application.
"""

import sys
import os

# ---------------------------------------------------------------------------
# Path setup so backend modules are importable
# ---------------------------------------------------------------------------
# bin/seed_salvor.py  →  ../  →  project root
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_BACKEND_DIR  = os.path.join(_PROJECT_ROOT, "backend")
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from core.config import settings                      # noqa: E402
from core.errors import GhostNetError                 # noqa: E402
from core.logger import logger                        # noqa: E402
from core.security import PasswordHasher              # noqa: E402
from database import SessionLocal                     # noqa: E402
from models.user import UserRole                      # noqa: E402
from repositories.user_repository import UserRepository  # noqa: E402
from users.service import UserDirectory               # noqa: E402


def seed(session_factory=SessionLocal, hasher=None) -> bool:
    """Create the salvor from settings.  Returns True if a row was inserted."""
    username = settings.first_salvor_username
    email = settings.first_salvor_email
    password = settings.first_salvor_password
    if not username or not email or not password:
        logger.warning("[seed_salvor] FIRST_SALVOR_* not set in etc/app.conf – nothing to do.")
        return False

    db = session_factory()
    try:
        repository = UserRepository(db)
        if repository.exists_by_username(username.strip()):
            logger.info("[seed_salvor] Salvor '%s' already exists – skipping.", username)
            return False

        directory = UserDirectory(repository, hasher or PasswordHasher())
        try:
            directory.register(username, email, password, password, UserRole.SALVOR)
        except GhostNetError as exc:
            logger.error("[seed_salvor] Could not create '%s': %s", username, exc.message)
            return False
        logger.info("[seed_salvor] Salvor '%s' created successfully.", username)
        return True
    finally:
        db.close()


if __name__ == "__main__":
    seed()
