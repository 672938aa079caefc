"""Todo CRUD endpoints for TodoVault.

- POST   /todos       - Create todo
- GET    /todos       - List todos
- PUT    /todos/<id>  - Replace todo
- DELETE /todos/<id>  - Delete todo

Authentication runs in before_request, ahead of body decoding, so a
request without a valid session never reaches the store.
"""

from flask import Blueprint, g, jsonify, request

from ..api.validation import validate_request
from ..auth.decorators import _authenticate_request
from ..core import get_core
from .schemas import TodoCreate, TodoUpdate


todos_bp = Blueprint("todos", __name__, url_prefix="/todos")


@todos_bp.before_request
def authenticate():
    """Require a valid session for every todo endpoint.

    CORS preflights never carry the cookie and are answered by flask-cors.
    """
    if request.method == "OPTIONS":
        return None
    _authenticate_request()


@todos_bp.post("")
@validate_request
def create_todo(data: TodoCreate):
    """
    Create a todo for the session user.

    Request Body (TodoCreate):
        - title: str (default: "")
        - completed: bool (default: false)

    Returns:
        201: Created Todo with assigned id and created_at
    """
    core = get_core()
    todo = core.todos.create(g.username, data)
    return jsonify(todo.model_dump()), 201


@todos_bp.get("")
def list_todos():
    """
    List the session user's todos in creation order.

    Returns:
        200: Array of Todo objects (empty if none)
    """
    core = get_core()
    return jsonify([todo.model_dump() for todo in core.todos.list(g.username)])


@todos_bp.put("/<todo_id>")
@validate_request
def update_todo(todo_id: str, data: TodoUpdate):
    """
    Replace a todo.

    The body is the complete new record (id, title, completed,
    created_at); omitted fields are stored as zero values.

    Returns:
        200: The stored Todo
        404: Todo not found
    """
    core = get_core()
    todo = core.todos.update(g.username, todo_id, data)
    return jsonify(todo.model_dump())


@todos_bp.delete("/<todo_id>")
def delete_todo(todo_id: str):
    """
    Delete a todo.

    Returns:
        204: No content
        404: Todo not found
    """
    core = get_core()
    core.todos.delete(g.username, todo_id)
    return "", 204
