"""User Schemas — Pydantic models for the /users API boundary.

Invariants:
    - UserCreate requires both name and age
    - UserUpdate fields are all optional; only explicitly sent fields are merged
    - Unknown body keys are ignored (id cannot be patched)

Design Decisions:
    - int | float for age: JSON numbers keep their integer form on the way back out
    - model_dump(exclude_unset=True) drives the shallow merge in PATCH
"""

from pydantic import BaseModel, ConfigDict, Field

from users_api.core.user_registry import User


class UserCreate(BaseModel):
    """User creation body."""
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"name": "Jane", "age": 23}]},
    )

    name: str = Field(description="name of the user")
    age: int | float = Field(description="age of the user")


class UserUpdate(BaseModel):
    """Partial update body — any subset of the user fields."""
    model_config = ConfigDict(
        json_schema_extra={"examples": [{"age": 24}]},
    )

    name: str | None = Field(None, description="name of the user")
    age: int | float | None = Field(None, description="age of the user")


class UserResponse(BaseModel):
    """Public-facing user record."""
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"id": "d5fE_asz", "name": "Jane", "age": 23}],
        },
    )

    id: str = Field(description="The auto-generated id of the user")
    name: str = Field(description="name of the user")
    age: int | float = Field(description="age of the user")

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id, name=user.name, age=user.age)


class UsersResponse(BaseModel):
    """Collection envelope used by list and get."""
    users: list[UserResponse]


class MessageResponse(BaseModel):
    """Plain acknowledgement."""
    message: str


class UserCreatedResponse(MessageResponse):
    """Creation acknowledgement with the generated id."""
    id: str
