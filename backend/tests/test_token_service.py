"""
Token service tests.

Verifies:
- Issued tokens validate back to their role
- Wrong signature, expired, malformed and role-less tokens are rejected
  with one indistinguishable message
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from pvz.permissions import Role
from pvz.services import token_service
from pvz.services.token_service import InvalidTokenError, INVALID_TOKEN_MESSAGE


SECRET = "test-secret"


class TestIssueAndValidate:

    @pytest.mark.parametrize("role", [Role.EMPLOYEE, Role.MODERATOR])
    def test_round_trip_role(self, role):
        token = token_service.issue_token(role, SECRET)
        assert token
        assert token_service.validate_token(token, SECRET) == role

    def test_claims_carry_issue_and_expiry(self):
        token = token_service.issue_token(Role.EMPLOYEE, SECRET, ttl=timedelta(hours=2))
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert claims["role"] == Role.EMPLOYEE
        assert claims["exp"] - claims["iat"] == 2 * 3600

    def test_empty_secret_cannot_issue(self):
        with pytest.raises(ValueError):
            token_service.issue_token(Role.EMPLOYEE, "")

    def test_unknown_role_cannot_issue(self):
        with pytest.raises(ValueError):
            token_service.issue_token("admin", SECRET)


class TestRejection:

    def _message(self, token, secret=SECRET):
        with pytest.raises(InvalidTokenError) as exc_info:
            token_service.validate_token(token, secret)
        return str(exc_info.value)

    def test_wrong_signature_and_expired_are_indistinguishable(self):
        forged = token_service.issue_token(Role.MODERATOR, "other-secret")
        expired = token_service.issue_token(Role.MODERATOR, SECRET, ttl=timedelta(seconds=-1))

        assert self._message(forged) == INVALID_TOKEN_MESSAGE
        assert self._message(expired) == INVALID_TOKEN_MESSAGE

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_malformed(self, token):
        assert self._message(token) == INVALID_TOKEN_MESSAGE

    def test_unknown_role_claim(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"role": "admin", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        assert self._message(token) == INVALID_TOKEN_MESSAGE

    def test_missing_expiry(self):
        token = jwt.encode({"role": Role.EMPLOYEE, "iat": datetime.now(timezone.utc)}, SECRET, algorithm="HS256")
        assert self._message(token) == INVALID_TOKEN_MESSAGE

    def test_other_algorithm_rejected(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"role": Role.EMPLOYEE, "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS512",
        )
        assert self._message(token) == INVALID_TOKEN_MESSAGE
