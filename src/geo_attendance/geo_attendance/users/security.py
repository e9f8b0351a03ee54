from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from ..core.constants import DEFAULT_TOKEN_HOURS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    """What the bearer token carries about the caller."""

    user_id: int
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenService:
    """Issue and verify signed, time-limited bearer tokens."""

    def __init__(self, secret: str, *, expires_hours: int = DEFAULT_TOKEN_HOURS):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expires = timedelta(hours=int(expires_hours))

    def issue(self, *, user_id: int, email: str, role: Role, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "user_id": int(user_id),
            "email": email,
            "role": role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError:
            raise AuthenticationError("Token expired") from None
        except JWTError:
            raise AuthenticationError("Invalid token") from None

        try:
            return TokenClaims(
                user_id=int(payload["user_id"]),
                email=str(payload["email"]),
                role=Role(payload["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token") from None
