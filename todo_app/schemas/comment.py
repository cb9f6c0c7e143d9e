from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from todo_app.schemas.common import CamelModel
from todo_app.validation import require_text


class CommentCreate(CamelModel):
    content: str = Field(default=None, validate_default=True)

    @field_validator("content", mode="before")
    @classmethod
    def check_content(cls, v: Any) -> str:
        return require_text(v, "Content")


class CommentOut(CamelModel):
    id: str
    content: str
    todo_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime
