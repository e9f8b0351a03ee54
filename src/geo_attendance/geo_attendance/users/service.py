from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, ConflictError, DuplicateRecordError, NotFoundError
from .model import User
from .repository import UserRepository
from .schemas import CreateUserRequest, LoginRequest, UserStatusRequest
from .security import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Use case: authenticate user (login) and resolve profiles."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, request: LoginRequest) -> LoginResult:
        user = self._users.get_by_email(request.email)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, request.password)
        except (TypeError, ValueError):
            # unrecognised hash format in the users table
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        token = self._tokens.issue(user_id=user.user_id, email=user.email, role=user.role)
        logger.info("User %s logged in", user.user_id)
        return LoginResult(token=token, user=user)

    def profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def create_user(self, request: CreateUserRequest) -> User:
        if self._users.get_by_email(request.email):
            raise ConflictError("Email already registered")

        try:
            user_id = self._users.create_user(
                name=request.name,
                email=request.email,
                password_hash=generate_password_hash(request.password),
                role=request.role,
                department=request.department,
                phone_number=request.phone_number,
            )
        except DuplicateRecordError:
            raise ConflictError("Email already registered") from None

        logger.info("Created %s account %s (%s)", request.role.value, user_id, request.email)
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def set_active(self, user_id: int, request: UserStatusRequest) -> User:
        if not self._users.get_by_id(user_id):
            raise NotFoundError("User not found")

        # rowcount is 0 when the flag already has the requested value
        self._users.set_active(user_id, is_active=request.is_active)
        logger.info("User %s %s", user_id, "activated" if request.is_active else "deactivated")
        return self._users.get_by_id(user_id)
