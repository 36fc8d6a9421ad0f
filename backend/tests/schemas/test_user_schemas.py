"""User Schemas — request body validation and partial-update semantics."""

import pytest
from pydantic import ValidationError

from users_api.core.domain_types import UserId
from users_api.core.user_registry import User
from users_api.schemas.user import UserCreate, UserResponse, UserUpdate


def test_create_requires_name_and_age():
    with pytest.raises(ValidationError):
        UserCreate(name="Amy")
    with pytest.raises(ValidationError):
        UserCreate(age=30)


def test_create_keeps_integer_age():
    assert UserCreate(name="Amy", age=30).age == 30
    assert isinstance(UserCreate(name="Amy", age=30).age, int)


def test_update_dump_only_has_sent_fields():
    body = UserUpdate.model_validate({"age": 31})
    assert body.model_dump(exclude_unset=True) == {"age": 31}


def test_update_ignores_unknown_fields():
    body = UserUpdate.model_validate({"id": "hijack", "name": "Jon"})
    assert body.model_dump(exclude_unset=True) == {"name": "Jon"}


def test_response_from_user():
    user = User(id=UserId("u1"), name="Jane", age=23)
    assert UserResponse.from_user(user).model_dump() == {
        "id": "u1", "name": "Jane", "age": 23,
    }
