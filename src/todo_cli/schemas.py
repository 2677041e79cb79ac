from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Input for creating a new Todo item.

    The description is stored as given; an empty string is accepted.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"description": "buy milk"}},
    )

    description: str = Field(..., description="Text of the todo item")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Input for replacing the description of an existing Todo item.
    The completion flag and id are never touched by an update.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"description": "buy oat milk"}},
    )

    description: str = Field(..., description="New text of the todo item")
