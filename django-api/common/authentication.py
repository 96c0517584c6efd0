"""Bearer-token authentication that yields an opaque principal id.

Tokens are issued by the identity provider. The default provider signs
``{"sub": "<principal uuid>"}`` with ``django.core.signing``; views only ever
see ``request.user.id``. ``issue_principal_token`` is the signing side the
provider (and the test suite) calls; this service only verifies.
"""

from dataclasses import dataclass
from typing import ClassVar

from django.core import signing
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from common.config import BookingConfig, get_booking_config
from common.identifiers import is_valid_uuid


@dataclass(frozen=True)
class Principal:
    """The authenticated caller."""

    id: str

    is_authenticated: ClassVar[bool] = True


def issue_principal_token(principal_id: str, config: BookingConfig) -> str:
    """Identity-provider hook: sign a bearer token for ``principal_id``."""
    return signing.dumps({"sub": str(principal_id)}, salt=config.principal_token_salt)


def resolve_principal(token: str, config: BookingConfig) -> Principal:
    """Verify a token and return its principal.

    Raises:
        AuthenticationFailed: If the token is forged, expired or carries no usable subject.
    """
    try:
        payload = signing.loads(
            token,
            salt=config.principal_token_salt,
            max_age=config.principal_token_max_age,
        )
    except signing.BadSignature as exc:
        raise AuthenticationFailed("Invalid or expired token") from exc

    subject = payload.get("sub") if isinstance(payload, dict) else None
    if not is_valid_uuid(subject):
        raise AuthenticationFailed("Invalid or expired token")
    return Principal(id=subject.lower())


class BearerPrincipalAuthentication(BaseAuthentication):
    keyword = "Bearer"

    def authenticate(self, request: Request) -> tuple[Principal, str] | None:
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword.lower().encode():
            return None
        if len(parts) != 2:
            raise AuthenticationFailed("Invalid bearer token header")
        try:
            token = parts[1].decode()
        except UnicodeError as exc:
            raise AuthenticationFailed("Invalid bearer token header") from exc
        return resolve_principal(token, get_booking_config()), token

    def authenticate_header(self, request: Request) -> str:
        return f'{self.keyword} realm="api"'
