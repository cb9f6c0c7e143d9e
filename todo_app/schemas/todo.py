from datetime import datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from todo_app.schemas.common import CamelModel
from todo_app.validation import optional_text, require_bool, require_text


class TodoCreate(CamelModel):
    # userId may still be sent by older clients; the owner always comes from the token
    title: str = Field(default=None, validate_default=True)
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def check_title(cls, v: Any) -> str:
        return require_text(v, "Title")

    @field_validator("description", mode="before")
    @classmethod
    def check_description(cls, v: Any) -> Optional[str]:
        # "" means "no description" on both create and update
        return optional_text(v, "Description") or None


class TodoUpdate(TodoCreate):
    completed: Optional[bool] = None

    @field_validator("completed", mode="before")
    @classmethod
    def check_completed(cls, v: Any) -> bool:
        return require_bool(v, "Completed")

    def changes(self) -> dict[str, Any]:
        """Title always; description/completed only when the client sent them."""
        data = {"title": self.title}
        for name in ("description", "completed"):
            if name in self.model_fields_set:
                data[name] = getattr(self, name)
        return data


class TodoOut(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    completed: bool
    user_id: str
    created_at: datetime
    updated_at: datetime


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_count: int
    limit: int


class TodoPage(CamelModel):
    items: list[TodoOut]
    pagination: Pagination
