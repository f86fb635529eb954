"""UserService — household directory and per-user preferences."""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from homestaff.domain.schemas import LanguageData, first_error_message
from homestaff.services.base import BaseService
from homestaff.services.contracts import UserData, UserListData, dump_validated
from homestaff.services.result import ErrorCode, ServiceResult

log = structlog.get_logger(__name__)


class UserService(BaseService):
    """Read the maid roster and change the caller's language."""

    def list_maids(self, session_token: str | None) -> ServiceResult:
        """Every maid account, in registration order. Any role may call this."""
        op = "list_maids"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        maids = self._store.list_maids()
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(
                UserListData,
                {"count": len(maids), "items": [m.public_view() for m in maids]},
            ),
        )

    def update_language(self, session_token: str | None, language: Any) -> ServiceResult:
        """Set the caller's display language. Only ever touches the caller."""
        op = "update_language"
        actor = self._authenticate(op, session_token)
        if isinstance(actor, ServiceResult):
            return actor

        try:
            data = LanguageData.model_validate({"language": language})
        except ValidationError as exc:
            return ServiceResult.failure(op, ErrorCode.VALIDATION_FAILED, first_error_message(exc))

        user = self._store.update_user_language(actor.id, data.language)
        if user is None:
            return ServiceResult.failure(op, ErrorCode.NOT_FOUND, "User not found")

        log.info("user.language_changed", user_id=user.id, language=str(user.language))
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(UserData, {"user": user.public_view()}),
        )
