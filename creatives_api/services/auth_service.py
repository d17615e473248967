"""
Account registration, login and identity lookups.
"""

from __future__ import annotations

import logging
from typing import Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError

from creatives_api.core.errors import DuplicateAccount, InvalidCredentials, NotFound, ValidationError
from creatives_api.core.security import hash_password, verify_password
from creatives_api.core.tokens import issue_token
from creatives_api.core.utils import gravatar_url, normalize_email
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.documents import account_document

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid Credentials"


def _email_is_valid(email: str) -> bool:
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class AuthService:
    """Handles registration, login and the current-account lookup."""

    def __init__(self, repository: Optional[SQLRepository] = None) -> None:
        self.repository = repository or SQLRepository()

    # -------------------------------------- registration --------------------------------------
    def register(self, name: str, email: str, password: str) -> str:
        """Create an account and return a token for it.

        Not transactional: if token signing fails after the insert, the
        account stays and a retry will see ``DuplicateAccount``.
        """
        name_value = (name or "").strip()
        email_value = normalize_email(email)
        errors = []
        if not name_value:
            errors.append({"msg": "Name is required", "param": "name"})
        if not _email_is_valid(email_value):
            errors.append({"msg": "Please include a valid email", "param": "email"})
        if len(password or "") < MIN_PASSWORD_LENGTH:
            errors.append({"msg": "Please enter a password with 6 or more characters", "param": "password"})
        if errors:
            raise ValidationError(errors)

        if self.repository.get_account_by_email(email_value):
            raise DuplicateAccount("User already exists")

        try:
            account = self.repository.create_account(
                name=name_value,
                email=email_value,
                password_hash=hash_password(password),
                avatar=gravatar_url(email_value),
            )
        except IntegrityError as exc:
            # Lost a race with a concurrent registration on the unique email index.
            raise DuplicateAccount("User already exists") from exc
        logger.info("Registered account %s", account.id)
        return issue_token(account.id)

    # -------------------------------------- login --------------------------------------
    def login(self, email: str, password: str) -> str:
        email_value = normalize_email(email)
        errors = []
        if not _email_is_valid(email_value):
            errors.append({"msg": "Please include a valid email", "param": "email"})
        if not password:
            errors.append({"msg": "Password is required", "param": "password"})
        if errors:
            raise ValidationError(errors)

        account = self.repository.get_account_by_email(email_value)
        # Same message for unknown email and wrong password.
        if not account or not verify_password(password, account.password_hash):
            logger.info("Rejected login attempt")
            raise InvalidCredentials(INVALID_CREDENTIALS)
        return issue_token(account.id)

    def get_account(self, account_id: str) -> dict:
        account = self.repository.get_account(account_id)
        if not account:
            raise NotFound("User not found")
        return account_document(account)
