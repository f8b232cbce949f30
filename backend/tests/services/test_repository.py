"""Generic Repository — tests for the uniform CRUD contract.

Tests cover:
    - create persists and returns the record with an id
    - list_all returns everything, or one page when page is given, filtered by columns
    - update applies only known columns, returns None for unknown ids
    - delete returns True once, then False
    - AssigneeRepository returns assignees with their user loaded
"""

from uuid import uuid4

import pytest

from taskforge.models.custom import CustomAssignee, CustomField, CustomLabel
from taskforge.services.custom_entities import CUSTOM_ENTITIES, AssigneeRepository
from taskforge.services.repository import CrudRepository


async def test_create_returns_persisted_record(test_db):
    repo = CrudRepository(test_db, CustomField)
    field = await repo.create(name="Sprint", value="42")
    assert field.id is not None
    assert (await repo.get(field.id)).value == "42"


async def test_create_ignores_unknown_attributes(test_db):
    repo = CrudRepository(test_db, CustomLabel)
    label = await repo.create(name="bug", colour="red")
    assert label.name == "bug"
    assert not hasattr(label, "colour")


async def test_list_all_returns_every_record(test_db):
    repo = CrudRepository(test_db, CustomLabel)
    for name in ("a", "b", "c"):
        await repo.create(name=name)
    names = {label.name for label in await repo.list_all()}
    assert names == {"a", "b", "c"}


async def test_list_all_paginates_when_page_given(test_db):
    repo = CrudRepository(test_db, CustomLabel)
    for i in range(7):
        await repo.create(name=f"label-{i}")
    first = await repo.list_all(page=1, limit=5)
    second = await repo.list_all(page=2, limit=5)
    assert len(first) == 5
    assert len(second) == 2
    assert not {r.id for r in first} & {r.id for r in second}


async def test_update_applies_partial_changes(test_db):
    repo = CrudRepository(test_db, CustomField)
    field = await repo.create(name="Sprint", value="1")
    updated = await repo.update(field.id, {"value": "2"})
    assert updated.name == "Sprint"
    assert updated.value == "2"


async def test_update_cannot_overwrite_primary_key(test_db):
    repo = CrudRepository(test_db, CustomLabel)
    label = await repo.create(name="x")
    updated = await repo.update(label.id, {"id": uuid4(), "name": "y"})
    assert updated.id == label.id
    assert updated.name == "y"


@pytest.mark.parametrize("entity", CUSTOM_ENTITIES, ids=lambda e: e.slug)
async def test_update_unknown_id_returns_none(test_db, entity):
    repo = entity.repository(test_db, entity.model)
    assert await repo.update(uuid4(), {}) is None


@pytest.mark.parametrize("entity", CUSTOM_ENTITIES, ids=lambda e: e.slug)
async def test_delete_unknown_id_returns_false(test_db, entity):
    repo = entity.repository(test_db, entity.model)
    assert await repo.delete(uuid4()) is False


async def test_delete_existing_returns_true_then_false(test_db):
    repo = CrudRepository(test_db, CustomLabel)
    label = await repo.create(name="gone")
    assert await repo.delete(label.id) is True
    assert await repo.delete(label.id) is False
    assert await repo.get(label.id) is None


async def test_assignee_list_loads_user(test_db, seed_user):
    repo = AssigneeRepository(test_db, CustomAssignee)
    await repo.create(user_id=seed_user.id)
    assignees = await repo.list_all()
    assert len(assignees) == 1
    assert assignees[0].user.email == "member@example.com"


async def test_assignee_create_returns_loaded_user(test_db, seed_user):
    repo = AssigneeRepository(test_db, CustomAssignee)
    assignee = await repo.create(user_id=seed_user.id)
    assert assignee.user.id == seed_user.id


async def test_list_all_applies_column_filters(test_db):
    repo = CrudRepository(test_db, CustomField)
    await repo.create(name="Sprint", value="1")
    await repo.create(name="Sprint", value="2")
    await repo.create(name="Team", value="core")
    sprints = await repo.list_all(name="Sprint")
    assert sorted(f.value for f in sprints) == ["1", "2"]
    assert len(await repo.list_all(page=1, limit=1, name="Sprint")) == 1
