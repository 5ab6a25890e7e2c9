"""Route test fixtures — app built around a call-counting fake controller.

Invariants:
    - Every test gets a fresh app and a fresh FakeTodoController
    - fake_controller.calls records (operation, args) for every controller call
    - raise_app_exceptions=False so catch-all 500 responses are observable

Design Decisions:
    - Fake passed through create_app(controller=...) instead of monkeypatching
    - Settings built with _env_file=None: no developer .env leaks into tests
"""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.core.domain_types import TodoId
from todo_api.main import create_app


class FakeTodoController:
    """Controllable TodoController that records every call.

    Configure `errors[operation]` with an exception to raise from that
    operation, and `todo_id` for the id returned by add_todo.
    """

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []
        self.errors: dict[str, Exception] = {}
        self.info = "0 total, 0 open, 0 completed"
        self.todo_id = TodoId(uuid.UUID("12345678-1234-5678-1234-567812345678"))

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)

    def _record(self, operation: str, *args):
        self.calls.append((operation, args))
        if operation in self.errors:
            raise self.errors[operation]

    async def todo_info(self) -> str:
        self._record("todo_info")
        return self.info

    async def send_mail(self, email: str, template_id: str) -> None:
        self._record("send_mail", email, template_id)

    async def add_todo(self, description: str) -> TodoId:
        self._record("add_todo", description)
        return self.todo_id

    async def complete_todo(self, todo_id: TodoId) -> None:
        self._record("complete_todo", todo_id)


@pytest.fixture
def test_settings():
    return Settings(_env_file=None, app_name="Todo API (test)")


@pytest.fixture
def fake_controller():
    return FakeTodoController()


@pytest.fixture
def test_app(test_settings, fake_controller):
    return create_app(settings=test_settings, controller=fake_controller)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
