"""Partial Update Bodies — tests for null handling and sent-field tracking.

Tests cover:
    - Explicit nulls are dropped before validation (never written as NULL)
    - changes() contains only fields the client sent
    - Enum fields are reported as their stored string values
    - Empty strings still fail min_length
"""

import pytest
from pydantic import ValidationError

from taskforge.schemas.custom import CustomFieldUpdate
from taskforge.schemas.task import TaskUpdate


def test_explicit_null_is_not_a_change():
    assert CustomFieldUpdate.model_validate({"name": None}).changes() == {}


def test_changes_only_lists_sent_fields():
    body = CustomFieldUpdate.model_validate({"value": "2", "name": None})
    assert body.changes() == {"value": "2"}


def test_enum_changes_are_plain_strings():
    changes = TaskUpdate.model_validate({"status": "in-progress"}).changes()
    assert changes == {"status": "in-progress"}
    assert type(changes["status"]) is str


def test_unknown_status_is_rejected():
    with pytest.raises(ValidationError):
        TaskUpdate.model_validate({"status": "someday"})


def test_empty_name_still_rejected():
    with pytest.raises(ValidationError):
        CustomFieldUpdate.model_validate({"name": ""})
