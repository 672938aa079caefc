"""In-memory shared store for TodoVault.

The store is the only shared mutable state in the process. It holds two
mappings behind a single reader/writer lock:

    users: username -> bcrypt password hash
    todos: username -> ordered list of Todo

Raw mappings are never handed out. Every public method is one atomic
operation: reads take the lock shared, mutations take it exclusive, so a
caller can never observe a half-applied change to any user's list.

ID ASSIGNMENT POLICY:
Todo ids are assigned inside the write lock by append_todo().
- "length" (default): id = len(list) + 1. After a delete the next id can
  equal an id that is still in the list, e.g. create x3, delete 2,
  create -> ids 1, 3, 3.
- "monotonic": id = per-user counter that only moves forward, so ids are
  never reused after a delete (1, 3, 4 for the same sequence).

The store is volatile: it is created empty and never persisted.
"""

import logging
from typing import Literal

from .todos.schemas import Todo
from .utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

IdPolicy = Literal["length", "monotonic"]


class SharedStore:
    """Concurrency-safe user and todo storage."""

    def __init__(self, id_policy: IdPolicy = "length"):
        """Initialize an empty store.

        Args:
            id_policy: "length" or "monotonic" (see module docstring)
        """
        if id_policy not in ("length", "monotonic"):
            raise ValueError(f"Unknown todo id policy: {id_policy!r}")
        self._lock = ReadWriteLock()
        self._users: dict[str, str] = {}
        self._todos: dict[str, list[Todo]] = {}
        self._last_ids: dict[str, int] = {}
        self._id_policy = id_policy

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    # ========================================================================
    # Users
    # ========================================================================

    def put_user_hash(self, username: str, password_hash: str) -> None:
        """Store a password hash; an existing entry is overwritten."""
        with self._lock.write_locked():
            self._users[username] = password_hash

    def get_user_hash(self, username: str) -> str | None:
        with self._lock.read_locked():
            return self._users.get(username)

    # ========================================================================
    # Todos
    # ========================================================================

    def append_todo(self, username: str, todo: Todo) -> Todo:
        """Assign an id to todo and append it to the user's list.

        Args:
            username: Owner of the list
            todo: Todo to store; its id is replaced by the assigned one

        Returns:
            The stored Todo carrying the assigned id
        """
        with self._lock.write_locked():
            todos = self._todos.setdefault(username, [])
            if self._id_policy == "monotonic":
                assigned_id = self._last_ids.get(username, 0) + 1
                self._last_ids[username] = assigned_id
            else:
                assigned_id = len(todos) + 1
            stored = todo.model_copy(update={"id": assigned_id})
            todos.append(stored)
        logger.debug(f"Appended todo {assigned_id} for {username}")
        return stored

    def list_todos(self, username: str) -> list[Todo]:
        """Return a copy of the user's todos in list order (empty if none)."""
        with self._lock.read_locked():
            return list(self._todos.get(username, ()))

    def replace_todo_by_id(self, username: str, todo_id: int, new_todo: Todo) -> bool:
        """Replace the first todo whose id matches with new_todo as given.

        No field merge happens: new_todo's id and created_at are stored as-is.

        Returns:
            True if a todo was replaced, False if none matched
        """
        with self._lock.write_locked():
            todos = self._todos.get(username, [])
            for index, todo in enumerate(todos):
                if todo.id == todo_id:
                    todos[index] = new_todo
                    return True
            return False

    def delete_todo_by_id(self, username: str, todo_id: int) -> bool:
        """Remove the first todo whose id matches.

        Returns:
            True if a todo was removed, False if none matched
        """
        with self._lock.write_locked():
            todos = self._todos.get(username, [])
            for index, todo in enumerate(todos):
                if todo.id == todo_id:
                    del todos[index]
                    return True
            return False
