import uuid
from datetime import datetime

import pytest

from dtos.response import filter_user_record, filter_task_record, filter_user_records, filter_task_records
from exceptions import MalformedIdentityError
from models import Task, User


TASK_ID = "11111111-1111-1111-1111-111111111111"
USER_ID = "22222222-2222-2222-2222-222222222222"


@pytest.fixture
def secret_user(make_user):
    user = make_user(
        password="hashed-secret",
        verification_code="verify-secret",
        password_reset_token="reset-secret",
    )
    return user


def test_user_response_omits_credentials(secret_user):
    response = filter_user_record(secret_user)
    dumped = response.model_dump(mode="json")

    assert set(dumped) == {"id", "name", "email", "role", "photo", "provider", "created_at", "updated_at"}
    serialized = response.model_dump_json()
    for secret in ("hashed-secret", "verify-secret", "reset-secret"):
        assert secret not in serialized


def test_user_response_parses_identity(secret_user):
    response = filter_user_record(secret_user)
    assert response.id == uuid.UUID(secret_user.id)
    assert response.name == secret_user.name
    assert response.email == secret_user.email
    assert response.role == secret_user.role


def test_unset_provider_and_photo_use_defaults(make_user):
    user = make_user()
    assert user.provider is None

    response = filter_user_record(user)
    assert response.provider == "local"
    assert response.photo == "default.png"


def test_persisted_user_keeps_stored_values(db_session, make_user):
    user = make_user(provider="github", photo="ada.png")
    db_session.add(user)
    db_session.flush()

    response = filter_user_record(user)
    assert response.provider == "github"
    assert response.photo == "ada.png"
    assert response.created_at == user.created_at


def test_task_response_parses_both_identities():
    deadline = datetime(2026, 11, 1, 9, 0)
    task = Task(
        id=TASK_ID,
        user_id=USER_ID,
        title="Write report",
        description="Quarterly numbers",
        status="In Progress",
        deadline=deadline,
    )

    response = filter_task_record(task)

    assert response.id == uuid.UUID(TASK_ID)
    assert response.user_id == uuid.UUID(USER_ID)
    assert response.title == "Write report"
    assert response.description == "Quarterly numbers"
    assert response.status == "In Progress"
    assert response.deadline == deadline


def test_task_response_json_names():
    task = Task(id=TASK_ID, user_id=USER_ID, title="t", status="To Do")
    dumped = filter_task_record(task).model_dump(mode="json")
    assert dumped["id"] == TASK_ID
    assert dumped["user_id"] == USER_ID
    assert set(dumped) == {
        "id", "user_id", "title", "description", "status", "deadline", "created_at", "updated_at"
    }


def test_malformed_task_identity_fails_loudly():
    task = Task(id="not-a-uuid", user_id=USER_ID, title="t", status="To Do")
    with pytest.raises(MalformedIdentityError) as excinfo:
        filter_task_record(task)
    assert excinfo.value.details["field"] == "id"


def test_malformed_owner_identity_fails_loudly():
    task = Task(id=TASK_ID, user_id="", title="t", status="To Do")
    with pytest.raises(MalformedIdentityError) as excinfo:
        filter_task_record(task)
    assert excinfo.value.details["field"] == "user_id"


def test_list_filters(make_user):
    users = [make_user(email="a@example.com"), make_user(email="b@example.com")]
    tasks = [Task(user_id=users[0].id, title="t", status="To Do")]

    assert [r.email for r in filter_user_records(users)] == ["a@example.com", "b@example.com"]
    assert [r.user_id for r in filter_task_records(tasks)] == [uuid.UUID(users[0].id)]


def test_incomplete_user_raises_application_error():
    from exceptions import ApplicationError, IncompleteRecordError

    user = User(email="ada@example.com", password="hash", role="user")
    with pytest.raises(IncompleteRecordError) as excinfo:
        filter_user_record(user)

    assert isinstance(excinfo.value, ApplicationError)
    assert excinfo.value.details["fields"] == ["name"]


def test_incomplete_task_raises_application_error():
    from exceptions import IncompleteRecordError

    task = Task(id=TASK_ID, user_id=USER_ID, status="To Do")
    with pytest.raises(IncompleteRecordError) as excinfo:
        filter_task_record(task)

    assert excinfo.value.details["fields"] == ["title"]
