"""User management schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from user_admin.password_validation import validate_password

# admin_users.id and admin_roles.id are int4
MAX_ID = 2_147_483_647

Email = EmailStr
RecordId = Annotated[int, Field(ge=1, le=MAX_ID)]
NonEmptyStr = Annotated[str, Field(min_length=1)]
IdList = Annotated[list[RecordId], Field(min_length=1)]


class UserCreationInput(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    email: Email
    firstname: NonEmptyStr
    lastname: str | None = None
    roles: IdList
    use_sso_registration: bool = Field(default=False, alias="useSSORegistration")


class UserUpdateInput(BaseModel):
    """Partial update. Only the keys present in the request are applied."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    email: Email | None = None
    firstname: NonEmptyStr | None = None
    lastname: str | None = None
    username: str | None = None
    password: str | None = None
    is_active: bool | None = Field(default=None, alias="isActive")
    roles: IdList | None = None
    prefered_language: str | None = Field(default=None, alias="preferedLanguage")

    @field_validator("email", "firstname", "password", "is_active", "roles", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value

    @field_validator("email")
    @classmethod
    def _lowercase_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("password")
    @classmethod
    def _strong_password(cls, value: str) -> str:
        errors = validate_password(value)
        if errors:
            raise ValueError("; ".join(errors))
        return value

    def changes(self) -> dict:
        """Attributes explicitly set by the caller, keyed by column name."""
        return self.model_dump(exclude_unset=True)


class UsersDeleteInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ids: IdList


class RoleInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    code: str


class UserResponse(BaseModel):
    """Public representation of a user. Secrets never appear here."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    firstname: str | None = None
    lastname: str | None = None
    username: str | None = None
    email: str
    is_active: bool
    blocked: bool = False
    prefered_language: str | None = None
    roles: list[RoleInfo] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None
