"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


def _clean_text(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("text must not be empty")
    return value


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    text: StrictStr

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        return _clean_text(value)


class TaskUpdate(BaseModel):
    """Schema for a partial update: only the fields sent are applied."""

    text: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None

    # Un null explicite n'est pas une valeur valide (les colonnes sont NOT NULL)
    @field_validator("text", "completed")
    @classmethod
    def not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} must not be null")
        if info.field_name == "text":
            return _clean_text(value)
        return value


class TaskResponse(BaseModel):
    """Schema for task responses from API (camelCase on the wire)."""

    id: int
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
