"""In-Memory Todo Controller — default TodoController implementation.

Invariants:
    - add_todo always creates a new id (uuid4), even for identical descriptions
    - complete_todo raises TodoNotFoundError for unknown ids and
      TodoAlreadyCompletedError for completed ones; state unchanged on error
    - send_mail calls the mail client exactly once per invocation

Design Decisions:
    - Todos live on the instance, one instance per app (state lost on restart)
    - No await between read and write of _todos
"""

import logging
import uuid
from datetime import datetime, timezone

from todo_api.config import Settings
from todo_api.core.controller_protocols import MailClient
from todo_api.core.domain_types import (
    TodoId, TodoItem, TodoStatus, format_todo_info,
)
from todo_api.core.errors import TodoAlreadyCompletedError, TodoNotFoundError
from todo_api.infrastructure.mail_client import build_mail_client

logger = logging.getLogger(__name__)


class InMemoryTodoController:
    """Holds todos in a dict and dispatches mail through a MailClient."""

    def __init__(self, mail_client: MailClient, base_url: str):
        self.mail_client = mail_client
        self.base_url = base_url
        self._todos: dict[TodoId, TodoItem] = {}

    async def todo_info(self) -> str:
        return format_todo_info(list(self._todos.values()))

    async def send_mail(self, email: str, template_id: str) -> None:
        await self.mail_client.send(
            email, template_id, {"base_url": self.base_url},
        )
        logger.info("Mail sent", extra={"template_id": template_id})

    async def add_todo(self, description: str) -> TodoId:
        todo_id = TodoId(uuid.uuid4())
        self._todos[todo_id] = TodoItem(id=todo_id, description=description)
        logger.info("Todo added", extra={"todo_id": str(todo_id)})
        return todo_id

    async def complete_todo(self, todo_id: TodoId) -> None:
        item = self._todos.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        if item.completed:
            raise TodoAlreadyCompletedError(todo_id)
        item.status = TodoStatus.COMPLETED
        item.completed_at = datetime.now(timezone.utc)
        logger.info("Todo completed", extra={"todo_id": str(todo_id)})

    def get(self, todo_id: TodoId) -> TodoItem | None:
        return self._todos.get(todo_id)


def build_controller(settings: Settings) -> InMemoryTodoController:
    return InMemoryTodoController(
        mail_client=build_mail_client(settings), base_url=settings.base_url,
    )
