"""Todo module for TodoVault.

Per-user todo CRUD over the shared store:
- POST   /todos       - Create todo
- GET    /todos       - List todos in creation order
- PUT    /todos/<id>  - Replace todo
- DELETE /todos/<id>  - Delete todo

Every route requires a valid session token.
"""

from . import schemas, service

__all__ = ["schemas", "service"]
