from __future__ import annotations

import pytest
from sqlalchemy import func, select

from creatives_api.core.errors import DuplicateAccount, InvalidCredentials, NotFound, ValidationError
from creatives_api.core.tokens import verify_token
from creatives_api.db.models import Account
from creatives_api.db.session import get_session
from creatives_api.repositories.sql_repository import SQLRepository
from creatives_api.services.auth_service import AuthService


def _count_accounts() -> int:
    with get_session() as session:
        return session.execute(select(func.count()).select_from(Account)).scalar_one()


def test_register_returns_token_for_new_account(db_env):
    svc = AuthService()
    token = svc.register("Ada", "Ada@Example.com ", "secret1")

    account = SQLRepository().get_account_by_email("ada@example.com")
    assert account is not None
    assert verify_token(token) == account.id
    assert account.password_hash != "secret1"
    assert account.avatar.startswith("https://www.gravatar.com/avatar/")


def test_register_twice_with_same_email_fails(db_env):
    svc = AuthService()
    svc.register("Ada", "ada@example.com", "secret1")

    with pytest.raises(DuplicateAccount) as exc:
        svc.register("Other", "ada@example.com", "another1")

    assert exc.value.message == "User already exists"
    assert _count_accounts() == 1


def test_register_collects_all_validation_errors(db_env):
    with pytest.raises(ValidationError) as exc:
        AuthService().register("", "not-an-email", "123")

    params = [err["param"] for err in exc.value.errors]
    assert params == ["name", "email", "password"]
    assert _count_accounts() == 0


def test_login_failures_share_one_message(db_env):
    svc = AuthService()
    svc.register("Ada", "ada@example.com", "secret1")

    with pytest.raises(InvalidCredentials) as wrong_password:
        svc.login("ada@example.com", "wrong-pass")
    with pytest.raises(InvalidCredentials) as unknown_email:
        svc.login("nobody@example.com", "secret1")

    assert wrong_password.value.message == unknown_email.value.message == "Invalid Credentials"
    assert wrong_password.value.to_payload() == unknown_email.value.to_payload()


def test_login_returns_token_for_account(db_env):
    svc = AuthService()
    svc.register("Ada", "ada@example.com", "secret1")
    token = svc.login("ADA@example.com", "secret1")
    account = SQLRepository().get_account_by_email("ada@example.com")
    assert verify_token(token) == account.id


def test_get_account_hides_password(db_env):
    svc = AuthService()
    account_id = verify_token(svc.register("Ada", "ada@example.com", "secret1"))
    doc = svc.get_account(account_id)
    assert doc["name"] == "Ada"
    assert "password" not in doc and "password_hash" not in doc

    with pytest.raises(NotFound):
        svc.get_account("missing")


class _StaleLookupRepository(SQLRepository):
    """Misses existing emails, as a concurrent registration would."""

    def get_account_by_email(self, email):
        return None


def test_register_race_on_unique_email_is_duplicate(db_env):
    AuthService().register("Ada", "ada@example.com", "secret1")

    with pytest.raises(DuplicateAccount) as exc:
        AuthService(_StaleLookupRepository()).register("Other", "ada@example.com", "another1")

    assert exc.value.message == "User already exists"
    assert _count_accounts() == 1
