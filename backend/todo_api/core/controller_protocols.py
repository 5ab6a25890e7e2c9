"""Boundary Protocols — contracts between the request router and its collaborators.

Invariants:
    - The router depends only on TodoController, never on an implementation
    - Failures surface as raised ControllerError subclasses (core/errors.py)
    - Implementations provided via dependency injection (TodoRest handle)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async in Protocol: controller and mail implementations do IO
"""

from typing import Protocol

from todo_api.core.domain_types import TodoId


class TodoController(Protocol):
    """Contract for todo business logic — implemented by services/."""
    async def todo_info(self) -> str: ...
    async def send_mail(self, email: str, template_id: str) -> None: ...
    async def add_todo(self, description: str) -> TodoId: ...
    async def complete_todo(self, todo_id: TodoId) -> None: ...


class MailClient(Protocol):
    """Contract for one-shot templated mail dispatch — implemented by infrastructure/."""
    async def send(
        self, email: str, template_id: str, variables: dict[str, str],
    ) -> None: ...
