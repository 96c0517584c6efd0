"""Tests for bearer token authentication.

Run with: pytest tests/test_authentication.py -v
"""

import uuid

import pytest
from django.core import signing
from rest_framework.exceptions import AuthenticationFailed

from common.authentication import issue_principal_token, resolve_principal
from common.config import BookingConfig


@pytest.fixture
def config() -> BookingConfig:
    return BookingConfig(principal_token_salt="tests.principal", principal_token_max_age=60)


class TestPrincipalTokens:
    def test_round_trip(self, config):
        principal_id = str(uuid.uuid4())
        principal = resolve_principal(issue_principal_token(principal_id, config), config)
        assert principal.id == principal_id
        assert principal.is_authenticated

    def test_wrong_salt_is_rejected(self, config):
        token = issue_principal_token(str(uuid.uuid4()), BookingConfig(principal_token_salt="other"))
        with pytest.raises(AuthenticationFailed):
            resolve_principal(token, config)

    def test_subject_must_be_a_principal_id(self, config):
        token = signing.dumps({"sub": "admin"}, salt=config.principal_token_salt)
        with pytest.raises(AuthenticationFailed, match="Invalid or expired token"):
            resolve_principal(token, config)

    def test_expired_token_is_rejected(self, config):
        token = issue_principal_token(str(uuid.uuid4()), config)
        expired = BookingConfig(principal_token_salt="tests.principal", principal_token_max_age=-1)
        with pytest.raises(AuthenticationFailed):
            resolve_principal(token, expired)
