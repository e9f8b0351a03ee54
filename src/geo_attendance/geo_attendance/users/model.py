from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object (no DB access code).
    """

    user_id: int
    email: str
    name: str
    password_hash: str
    role: Role
    is_active: bool = True
    department: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        """Profile view, without the password hash."""

        return {
            "id": self.user_id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "is_active": self.is_active,
            "department": self.department,
            "phone_number": self.phone_number,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
