from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import auth_decorators, json_body
from ..container import Container
from .schemas import CreateUserRequest, LoginRequest, UserStatusRequest


def register(app: Flask, container: Container) -> None:
    token_required, admin_required = auth_decorators(container.token_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        payload = LoginRequest.from_payload(json_body())
        result = container.auth_service.authenticate(payload)
        return jsonify({"token": result.token, "user": result.user.to_public_dict()})

    @app.route("/api/auth/profile", methods=["GET"], endpoint="auth_profile")
    @token_required
    def profile():
        user = container.auth_service.profile(g.current_user.user_id)
        return jsonify({"user": user.to_public_dict()})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    @token_required
    def logout():
        # Tokens are stateless; the client discards its copy.
        return jsonify({"message": "Logged out"})

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @admin_required
    def list_users():
        users = container.user_service.list_users()
        return jsonify({"users": [u.to_public_dict() for u in users]})

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @admin_required
    def create_user():
        payload = CreateUserRequest.from_payload(json_body())
        user = container.user_service.create_user(payload)
        return jsonify({"message": "User created", "user": user.to_public_dict()}), 201

    @app.route("/api/users/<int:user_id>/status", methods=["PUT"], endpoint="users_status")
    @admin_required
    def set_status(user_id: int):
        payload = UserStatusRequest.from_payload(json_body())
        user = container.user_service.set_active(user_id, payload)
        state = "activated" if user.is_active else "deactivated"
        return jsonify({"message": f"User {state}", "user": user.to_public_dict()})
