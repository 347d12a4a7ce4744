# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
User directory – registration, credential check, profile updates.

Normalisation rules
-------------------
* usernames are trimmed, otherwise compared exactly;
* emails are trimmed and lower-cased before every comparison and before
  they are stored, so ``A@X.com `` and ``a@x.com`` are the same address.

Plaintext passwords only ever reach the injected hasher; they are never
stored or logged.
"""

from typing import List, Optional

from core.errors import ConflictError, ConstraintViolationError, NotFoundError, ValidationError
from core.logger import logger
from core.security import PasswordHasher
from models.user import User, UserRole
from repositories.user_repository import UserRepository


class _Unset:
    """Marker for "field not supplied", distinct from an explicit None."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserDirectory:

    def __init__(self, repository: UserRepository, hasher: PasswordHasher):
        self.repository = repository
        self.hasher = hasher

    def list_users(self) -> List[User]:
        return self.repository.find_all()

    def register(
        self,
        username: str,
        email: str,
        password: str,
        password_confirmation: str,
        role: Optional[UserRole] = None,
    ) -> User:
        """
        Create an account.  Raises ValidationError for mismatched passwords,
        blank fields or a taken username/email, and ConflictError if the
        store rejects the insert because a concurrent registration won.
        """
        if password != password_confirmation:
            logger.warning("Registration rejected: password confirmation mismatch")
            raise ValidationError("Field 'confirm' does not match 'password'")

        username = (username or "").strip()
        email = normalize_email(email or "")
        if not username:
            raise ValidationError("Field 'username' must not be blank")
        if not email:
            raise ValidationError("Field 'email' must not be blank")

        if self.repository.exists_by_username(username):
            logger.warning("Registration rejected: username '%s' taken", username)
            raise ValidationError("Field 'username' is already taken")
        if self.repository.exists_by_email(email):
            logger.warning("Registration rejected: email '%s' taken", email)
            raise ValidationError("Field 'email' is already taken")

        user = User(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
            role=role or UserRole.REPORTER,
        )
        try:
            user = self.repository.save(user)
        except ConstraintViolationError as exc:
            logger.warning("Registration of '%s' lost a uniqueness race: %s", username, exc)
            raise ConflictError("Field 'username' or 'email' is already taken") from exc

        logger.info("Registered user id=%d username=%s role=%s", user.id, user.username, user.role.value)
        return user

    def login(self, username: str, password: str) -> Optional[User]:
        """
        Return the user when *username* exists and *password* verifies,
        otherwise None.  Unknown user and wrong password are deliberately the
        same outcome.
        """
        user = self.repository.find_by_username(username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed for username=%s", username)
            return None
        logger.info("Login ok for user id=%d", user.id)
        return user

    def update_profile(self, user_id: int, email=UNSET, phone_number=UNSET) -> User:
        """
        Change the email and/or phone number of an account.

        Omitted arguments are left alone.  A supplied ``phone_number`` is
        stored as given; None or "" clears it.
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User not found: {user_id}")

        if email is not UNSET and email is not None:
            new_email = normalize_email(email)
            if not new_email:
                raise ValidationError("Field 'email' must not be blank")
            if new_email != user.email:
                if self.repository.exists_by_email(new_email):
                    logger.warning("Profile update for user id=%d rejected: email taken", user_id)
                    raise ConflictError("Field 'email' is already in use")
                user.email = new_email

        if phone_number is not UNSET:
            user.phone_number = phone_number or None

        try:
            user = self.repository.save(user)
        except ConstraintViolationError as exc:
            raise ConflictError("Field 'email' is already in use") from exc

        logger.info("Updated profile of user id=%d", user.id)
        return user
