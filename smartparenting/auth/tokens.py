"""Signed bearer tokens (JWT).

Claims carried by every token: ``id``, ``email``, ``role``, ``name``, ``iat``
and ``exp``. Tokens issued to roster administrators also carry
``isFixedAdmin: true``.
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from smartparenting.core.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

ADMIN_FLAG_CLAIM = "isFixedAdmin"


@dataclass(frozen=True)
class TokenClaims:
    """Decoded and verified token claims."""

    id: str
    email: str
    role: str
    name: str | None
    expires_at: datetime
    is_fixed_admin: bool = False


class TokenIssuer:
    """Issues and verifies HMAC-signed JWTs with a fixed lifetime."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
    ) -> None:
        if not secret:
            raise RuntimeError("JWT_SECRET is not configured.")
        if secret == "change-me":
            logger.warning(
                "JWT_SECRET is using the default value. Set a strong secret in production."
            )
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in

    def issue(
        self,
        *,
        user_id: str,
        email: str,
        role: str,
        name: str | None,
        is_fixed_admin: bool = False,
    ) -> str:
        now = datetime.now(tz=UTC)
        payload: dict[str, object] = {
            "id": user_id,
            "email": email,
            "role": role,
            "name": name,
            "iat": now,
            "exp": now + self._expires_in,
        }
        if is_fixed_admin:
            payload[ADMIN_FLAG_CLAIM] = True
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Check signature and expiry and return the claims.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with,
                expired, or lacks the identity claims.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id", "email", "role"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token has expired") from exc
        except jwt.PyJWTError as exc:
            raise InvalidTokenError() from exc

        return TokenClaims(
            id=str(payload["id"]),
            email=str(payload["email"]),
            role=str(payload["role"]),
            name=payload.get("name"),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            is_fixed_admin=payload.get(ADMIN_FLAG_CLAIM) is True,
        )
