from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from todo_app.errors import ValidationError
from todo_app.schemas.common import CamelModel
from todo_app.validation import MAX_EMOJI_LENGTH, require_text


class ReactionIn(CamelModel):
    emoji: str = Field(default=None, validate_default=True)

    @field_validator("emoji", mode="before")
    @classmethod
    def check_emoji(cls, v: Any) -> str:
        emoji = require_text(v, "Emoji")
        if len(emoji) > MAX_EMOJI_LENGTH:
            raise ValidationError("Invalid emoji")
        return emoji


class ReactionOut(CamelModel):
    id: str
    todo_id: str
    user_id: str
    emoji: str
    created_at: datetime
