"""Response Envelope — renders every Outcome into the one canonical JSON shape.

Invariants:
    - Ok(v) → 200 {"ok": true, "data": str(v)}
    - Err(e) → e.http_status {"ok": false, "error": {...}}
    - render() has no side effects and never logs
    - capture() converts only TodoApiError into Err; other exceptions propagate
"""

from collections.abc import Awaitable
from typing import TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from todo_api.core.errors import TodoApiError
from todo_api.core.outcome import Err, Ok, Outcome

T = TypeVar("T")


def render(outcome: Outcome) -> JSONResponse:
    """Single serialization point for success and error outcomes."""
    if isinstance(outcome, Ok):
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={"ok": True, "data": str(outcome.value)},
        )
    return JSONResponse(
        status_code=outcome.error.http_status,
        content={"ok": False, **outcome.error.to_response()},
    )


async def capture(call: Awaitable[T]) -> Outcome[T]:
    """Await one controller call and wrap its result or domain error."""
    try:
        return Ok(await call)
    except TodoApiError as exc:
        return Err(exc)
