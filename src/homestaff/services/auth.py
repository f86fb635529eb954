"""AuthService — registration, login, and session lifecycle."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from homestaff.domain.credentials import hash_password, verify_password
from homestaff.domain.schemas import LoginData, RegisterData, first_error_message
from homestaff.infrastructure.store import ConflictError
from homestaff.services.base import BaseService
from homestaff.services.contracts import SessionData, UserData, dump_validated
from homestaff.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"
USERNAME_TAKEN = "Username already exists"


class AuthService(BaseService):
    """Issues and revokes sessions."""

    def register(self, username: Any, password: Any, name: Any, role: Any) -> ServiceResult:
        """Create an account and log it in.

        The returned ``session_token`` authenticates every later call.
        """
        op = "register"
        warnings: list[str] = []
        try:
            data = RegisterData.model_validate(
                {"username": username, "password": password, "name": name, "role": role}
            )
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.VALIDATION_FAILED, first_error_message(exc))

        if self._store.get_user_by_username(data.username) is not None:
            return ServiceResult.failure(op, ErrorCode.CONFLICT, USERNAME_TAKEN)

        iterations = self._workspace.settings.auth.hash_iterations
        try:
            user = self._store.create_user(
                username=data.username,
                password_hash=hash_password(data.password, iterations=iterations),
                name=data.name,
                role=data.role,
            )
        except ConflictError:
            return ServiceResult.failure(op, ErrorCode.CONFLICT, USERNAME_TAKEN)

        token = self._workspace.sessions.open(user.id)
        log.info("user.registered", user_id=user.id, role=str(user.role))

        self._dispatch_event(
            "post_register",
            {"user_id": user.id, "username": user.username, "role": str(user.role)},
            warnings,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(SessionData, {"user": user.public_view(), "session_token": token}),
            warnings=warnings,
        )

    def login(self, username: Any, password: Any, role: Any) -> ServiceResult:
        """Verify credentials and the selected role, then open a session."""
        op = "login"
        try:
            data = LoginData.model_validate(
                {"username": username, "password": password, "role": role}
            )
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.VALIDATION_FAILED, first_error_message(exc))

        user = self._store.get_user_by_username(data.username)
        if user is None or not verify_password(data.password, user.password_hash):
            log.info("login.rejected", username=data.username)
            return ServiceResult.failure(op, ErrorCode.NOT_AUTHENTICATED, INVALID_CREDENTIALS)

        if user.role != data.role:
            return ServiceResult.failure(
                op,
                ErrorCode.NOT_AUTHENTICATED,
                f"This account is registered as {user.role}",
            )

        token = self._workspace.sessions.open(user.id)
        log.info("user.logged_in", user_id=user.id)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(SessionData, {"user": user.public_view(), "session_token": token}),
        )

    def logout(self, session_token: str | None) -> ServiceResult:
        op = "logout"
        user_id = self._workspace.sessions.resolve(session_token)
        if user_id is None or not self._workspace.sessions.close(session_token):
            return ServiceResult.failure(op, ErrorCode.NOT_AUTHENTICATED, "Not authenticated")
        log.info("user.logged_out", user_id=user_id)
        return ServiceResult(ok=True, op=op, data={"message": "Logged out successfully"})

    def current_user(self, session_token: str | None) -> ServiceResult:
        op = "current_user"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(UserData, {"user": actor.public_view()}),
        )
