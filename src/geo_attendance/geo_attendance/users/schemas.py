from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import require_bool, require_email, require_min_length, require_non_empty, require_object
from ..core.constants import MIN_NAME_LENGTH, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_payload(cls, data: Any) -> "LoginRequest":
        data = require_object(data)
        return cls(
            email=require_email(data.get("email")),
            password=require_min_length(data.get("password"), "password", MIN_PASSWORD_LENGTH),
        )


@dataclass(frozen=True)
class CreateUserRequest:
    name: str
    email: str
    password: str
    role: Role
    department: Optional[str] = None
    phone_number: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Any) -> "CreateUserRequest":
        data = require_object(data)
        name = require_non_empty(data.get("name"), "name")
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationError(f"name must be at least {MIN_NAME_LENGTH} characters")

        role_value = data.get("role", Role.EMPLOYEE.value)
        try:
            role = Role(role_value)
        except ValueError:
            raise ValidationError("role must be 'employee' or 'admin'") from None

        department = data.get("department")
        phone_number = data.get("phone_number")
        return cls(
            name=name,
            email=require_email(data.get("email")),
            password=require_min_length(data.get("password"), "password", MIN_PASSWORD_LENGTH),
            role=role,
            department=department.strip() if isinstance(department, str) and department.strip() else None,
            phone_number=phone_number.strip() if isinstance(phone_number, str) and phone_number.strip() else None,
        )


@dataclass(frozen=True)
class UserStatusRequest:
    is_active: bool

    @classmethod
    def from_payload(cls, data: Any) -> "UserStatusRequest":
        data = require_object(data)
        return cls(is_active=require_bool(data.get("is_active"), "is_active"))
