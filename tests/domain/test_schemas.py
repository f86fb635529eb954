"""Tests for request input schemas and first-error reporting."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from homestaff.domain.lifecycle import TaskStatus
from homestaff.domain.schemas import (
    CreateTaskData,
    LanguageData,
    LoginData,
    RegisterData,
    UpdateTaskData,
    first_error_message,
)
from homestaff.domain.types import Language, TaskPriority, UserRole


def _message(model: type, data: dict) -> str:
    with pytest.raises(ValidationError) as exc_info:
        model.model_validate(data)
    return first_error_message(exc_info.value)


class TestLoginData:
    def test_valid(self) -> None:
        data = LoginData.model_validate({"username": "owner", "password": "1234", "role": "owner"})
        assert data.role is UserRole.OWNER

    def test_short_username(self) -> None:
        msg = _message(LoginData, {"username": "ab", "password": "1234", "role": "owner"})
        assert msg == "Username must be at least 3 characters"

    def test_short_password(self) -> None:
        msg = _message(LoginData, {"username": "owner", "password": "123", "role": "owner"})
        assert msg == "Password must be at least 4 characters"

    def test_unknown_role(self) -> None:
        msg = _message(LoginData, {"username": "owner", "password": "1234", "role": "butler"})
        assert msg.startswith("role:")

    def test_reports_first_error_only(self) -> None:
        msg = _message(LoginData, {"username": "a", "password": "b", "role": "owner"})
        assert msg == "Username must be at least 3 characters"

    def test_extra_keys_ignored(self) -> None:
        data = LoginData.model_validate(
            {"username": "owner", "password": "1234", "role": "maid", "remember": True}
        )
        assert not hasattr(data, "remember")


class TestRegisterData:
    def test_name_minimum(self) -> None:
        msg = _message(
            RegisterData, {"username": "newbie", "password": "1234", "name": "J", "role": "maid"}
        )
        assert msg == "Name must be at least 2 characters"

    def test_valid(self) -> None:
        data = RegisterData.model_validate(
            {"username": "newbie", "password": "1234", "name": "Jo", "role": "maid"}
        )
        assert data.name == "Jo"


class TestCreateTaskData:
    def test_missing_title(self) -> None:
        assert _message(CreateTaskData, {"priority": "high"}) == "Title is required"

    def test_empty_title(self) -> None:
        assert _message(CreateTaskData, {"title": ""}) == "Title is required"

    def test_defaults_are_unset(self) -> None:
        data = CreateTaskData.model_validate({"title": "Laundry"})
        assert data.status is None
        assert data.priority is None
        assert data.assigned_to is None

    def test_enums_parsed(self) -> None:
        data = CreateTaskData.model_validate(
            {"title": "Laundry", "status": "in_progress", "priority": "low"}
        )
        assert data.status is TaskStatus.IN_PROGRESS
        assert data.priority is TaskPriority.LOW

    def test_bad_priority(self) -> None:
        assert _message(CreateTaskData, {"title": "x", "priority": "urgent"}).startswith(
            "priority:"
        )

    def test_deadline_from_iso_string(self) -> None:
        data = CreateTaskData.model_validate(
            {"title": "x", "deadline": "2026-03-05T12:00:00+02:00"}
        )
        assert data.deadline == datetime(2026, 3, 5, 10, 0, tzinfo=UTC)
        assert data.deadline.tzinfo == UTC

    def test_naive_deadline_taken_as_utc(self) -> None:
        data = CreateTaskData.model_validate({"title": "x", "deadline": "2026-03-05T12:00:00"})
        assert data.deadline == datetime(2026, 3, 5, 12, 0, tzinfo=UTC)

    def test_deadline_from_epoch_seconds(self) -> None:
        data = CreateTaskData.model_validate({"title": "x", "deadline": 0})
        assert data.deadline == datetime(1970, 1, 1, tzinfo=UTC)


class TestUpdateTaskData:
    def test_changes_only_sent_fields(self) -> None:
        data = UpdateTaskData.model_validate({"notes": "half done", "deadline": None})
        assert data.changes() == {"notes": "half done", "deadline": None}

    def test_empty_payload(self) -> None:
        assert UpdateTaskData.model_validate({}).changes() == {}

    def test_unknown_keys_dropped(self) -> None:
        data = UpdateTaskData.model_validate({"id": "task-9", "created_by": "x", "notes": "n"})
        assert data.changes() == {"notes": "n"}

    def test_empty_title_rejected(self) -> None:
        assert _message(UpdateTaskData, {"title": ""}) == "Title cannot be empty"

    def test_null_title_rejected(self) -> None:
        assert _message(UpdateTaskData, {"title": None}) == "Title cannot be empty"

    def test_blank_strings_clear_fields(self) -> None:
        data = UpdateTaskData.model_validate({"assigned_to": "", "notes": "", "description": ""})
        assert data.changes() == {"assigned_to": None, "notes": None, "description": None}

    @pytest.mark.parametrize("field", ["status", "priority"])
    def test_null_enum_rejected(self, field: str) -> None:
        assert _message(UpdateTaskData, {field: None}) == "Field cannot be null"

    def test_bad_status(self) -> None:
        assert _message(UpdateTaskData, {"status": "done"}).startswith("status:")


class TestLanguageData:
    def test_valid(self) -> None:
        assert LanguageData.model_validate({"language": "fil"}).language is Language.FIL

    def test_invalid(self) -> None:
        assert _message(LanguageData, {"language": "fr"}).startswith("language:")
