"""
Pydantic models for Taskpad.

Defines the task record as read back from the store.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """
    A single persisted to-do item.

    The id and created_at fields are assigned by the store on insert; the
    client never constructs a task it intends to persist.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174001",
                "title": "Buy milk",
                "description": "2%",
                "created_at": "2025-01-14T10:00:00",
            }
        },
    )

    id: UUID = Field(..., description="Store-assigned unique identifier")
    title: str = Field(..., min_length=1, description="Task title")
    description: Optional[str] = Field(default=None, description="Optional description")
    created_at: datetime = Field(..., description="Store-assigned creation timestamp (UTC)")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """
        Reject titles made only of whitespace.

        Raises:
            ValueError: If the title is blank
        """
        if not v.strip():
            raise ValueError("Task title cannot be blank")
        return v

    @property
    def has_description(self) -> bool:
        """True when the task carries a non-empty description."""
        return bool(self.description)
