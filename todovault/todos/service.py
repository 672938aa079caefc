"""Todo service: CRUD over one user's todo list.

The username always comes from a resolved session, never from the request
body, so a user can only ever touch their own list.
"""

import logging
import re
from datetime import datetime
from typing import TYPE_CHECKING

from ..exceptions import ResourceNotFound
from ..utils import isodatetime
from .schemas import Todo, TodoCreate, TodoUpdate

if TYPE_CHECKING:
    from ..store import SharedStore

logger = logging.getLogger(__name__)

# Canonical decimal rendering of an int: no sign but "-", no leading zeros
_TODO_ID_PATTERN = re.compile(r"-?(0|[1-9][0-9]*)")


def parse_todo_id(raw_id: str | int) -> int | None:
    """
    Parse a path id token into an int.

    Only the exact decimal rendering of an integer is accepted ("7", "-2").
    Tokens such as "07", " 7", "7.0" or "+7" can never name a stored todo
    and return None.
    """
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if not isinstance(raw_id, str) or not _TODO_ID_PATTERN.fullmatch(raw_id):
        return None
    if raw_id == "-0":
        return None
    return int(raw_id)


class TodoService:
    """Per-user todo operations backed by the shared store."""

    def __init__(self, store: "SharedStore"):
        self._store = store

    def create(self, username: str, data: TodoCreate, now: datetime | None = None) -> Todo:
        """
        Create a todo at the end of the user's list.

        The id is assigned by the store and created_at is stamped here;
        neither can be chosen by the client.
        """
        todo = Todo(
            title=data.title,
            completed=data.completed,
            created_at=now or isodatetime.utcnow(),
        )
        stored = self._store.append_todo(username, todo)
        logger.info(f"Todo {stored.id} created for {username}")
        return stored

    def list(self, username: str) -> list[Todo]:
        return self._store.list_todos(username)

    def update(self, username: str, todo_id: str | int, data: TodoUpdate) -> Todo:
        """
        Replace a todo with the supplied record.

        The stored todo is replaced wholesale, including id and created_at.

        Raises:
            ResourceNotFound: If no todo in the user's list has todo_id
        """
        parsed_id = parse_todo_id(todo_id)
        new_todo = data.to_todo()
        if parsed_id is None or not self._store.replace_todo_by_id(username, parsed_id, new_todo):
            raise ResourceNotFound("Todo not found", {"id": str(todo_id)})
        logger.info(f"Todo {parsed_id} updated for {username}")
        return new_todo

    def delete(self, username: str, todo_id: str | int) -> None:
        """
        Delete a todo; later todos keep their ids.

        Raises:
            ResourceNotFound: If no todo in the user's list has todo_id
        """
        parsed_id = parse_todo_id(todo_id)
        if parsed_id is None or not self._store.delete_todo_by_id(username, parsed_id):
            raise ResourceNotFound("Todo not found", {"id": str(todo_id)})
        logger.info(f"Todo {parsed_id} deleted for {username}")
