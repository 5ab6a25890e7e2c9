"""Domain Types — rich types and bounds shared across the Todo API.

Invariants:
    - TodoId wraps a UUID — never use a bare UUID in controller signatures
    - Description length bounds: 1–100 characters
    - Template id length bounds: 1–64 characters

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

TodoId = NewType("TodoId", UUID)


# ─── Field Bounds ────────────────────────────────────────────────

DESCRIPTION_MIN_LENGTH = 1
DESCRIPTION_MAX_LENGTH = 100
TEMPLATE_ID_MIN_LENGTH = 1
TEMPLATE_ID_MAX_LENGTH = 64


# ─── Enums ───────────────────────────────────────────────────────

class TodoStatus(str, Enum):
    """Todo lifecycle states."""
    OPEN = "open"
    COMPLETED = "completed"


class MailBackend(str, Enum):
    """Mail client implementations selectable from settings."""
    LOG = "log"
    HTTP = "http"


# ─── Entities ────────────────────────────────────────────────────

@dataclass
class TodoItem:
    """A todo as held by the in-memory controller."""
    id: TodoId
    description: str
    status: TodoStatus = TodoStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None

    @property
    def completed(self) -> bool:
        return self.status == TodoStatus.COMPLETED


def format_todo_info(items: list[TodoItem]) -> str:
    """Summarize todo counts, e.g. '3 total, 2 open, 1 completed'."""
    done = sum(1 for item in items if item.completed)
    return f"{len(items)} total, {len(items) - done} open, {done} completed"
