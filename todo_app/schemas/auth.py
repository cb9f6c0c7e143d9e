from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from todo_app.errors import ValidationError
from todo_app.schemas.common import CamelModel
from todo_app.validation import require_credentials, require_email, require_password


class RegisterRequest(BaseModel):
    email: str
    password: str

    @model_validator(mode="before")
    @classmethod
    def check_present(cls, data: Any) -> Any:
        require_credentials(data)
        return data

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v: Any) -> str:
        return require_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v: Any) -> str:
        return require_password(v)


class LoginRequest(BaseModel):
    email: str
    password: str

    @model_validator(mode="before")
    @classmethod
    def check_present(cls, data: Any) -> Any:
        require_credentials(data)
        if not isinstance(data["email"], str) or not isinstance(data["password"], str):
            raise ValidationError("Email and password are required")
        return data

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserOut(CamelModel):
    id: str
    email: str


class AuthOut(BaseModel):
    message: str
    user: UserOut
    token: str
