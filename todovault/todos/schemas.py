"""Todo Pydantic schemas for storage and API validation."""

from datetime import datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_serializer,
)

from ..utils import isodatetime


class Todo(BaseModel):
    """A stored todo item.

    Frozen so that lists handed out by the store cannot be mutated
    behind its lock; changes go through the store's replace operation.
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    title: str = ""
    completed: bool = False
    created_at: datetime | None = None

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        return isodatetime.to_timestamp(value)


class TodoCreate(BaseModel):
    """Request body for creating a todo.

    Client-supplied id and created_at are accepted but ignored: the
    store assigns the id and the server stamps created_at. Field types
    are strict, so "true" or "5" in place of a bool or int is rejected.
    """

    title: StrictStr = ""
    completed: StrictBool = False


class TodoUpdate(BaseModel):
    """Request body for updating a todo.

    This is a whole-record replacement, not a merge: omitted fields are
    written with their zero values. created_at stays lax so that the ISO
    8601 string a client received can be sent back.
    """

    id: StrictInt = 0
    title: StrictStr = ""
    completed: StrictBool = False
    created_at: datetime | None = Field(default=None)

    def to_todo(self) -> Todo:
        return Todo(
            id=self.id,
            title=self.title,
            completed=self.completed,
            created_at=self.created_at,
        )
