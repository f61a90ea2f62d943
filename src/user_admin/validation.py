"""Input validators for the admin user handlers.

Each validator returns the parsed input or raises ``ValidationError`` listing
every violated constraint.
"""

from typing import Any, NoReturn, TypeVar

import pydantic

from user_admin.api.schemas.users import (
    UserCreationInput,
    UserUpdateInput,
    UsersDeleteInput,
)
from user_admin.errors import ErrorKind, ValidationError

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def _raise_validation_error(exc: pydantic.ValidationError) -> NoReturn:
    errors = [
        {
            "path": [str(p) for p in err["loc"]],
            "message": err["msg"],
            "name": ErrorKind.validation.value,
        }
        for err in exc.errors()
    ]
    if len(errors) == 1:
        message = errors[0]["message"]
    else:
        message = f"{len(errors)} errors occurred"
    raise ValidationError(message, details={"errors": errors}) from exc


def _validate(model: type[ModelT], data: Any) -> ModelT:
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as exc:
        _raise_validation_error(exc)


def validate_user_creation_input(data: Any) -> UserCreationInput:
    return _validate(UserCreationInput, data)


def validate_user_update_input(data: Any) -> UserUpdateInput:
    return _validate(UserUpdateInput, data)


def validate_users_delete_input(data: Any) -> UsersDeleteInput:
    return _validate(UsersDeleteInput, data)
