"""Todo Routes — the four /todo operations, each delegating to one controller call.

Invariants:
    - Request records are parsed and validated before a handler body runs;
      a rejected request never reaches the controller
    - Each valid request makes exactly one controller call
    - Every handler returns through render() — one envelope per request
    - TodoRest is read-only after init_todo_rest()

Design Decisions:
    - Routes contain no business logic: controller outcome is only formatted
    - TodoRest stored on app.state and injected with Depends, so each app
      built by create_app() carries its own controller
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from todo_api.api.envelope import capture, render
from todo_api.config import Settings
from todo_api.core.controller_protocols import TodoController
from todo_api.core.domain_types import TodoId
from todo_api.schemas.todo import (
    AddTodoBody, CompleteTodoRequest, ErrorEnvelope, SendMailParams,
    SuccessEnvelope,
)

router = APIRouter(prefix="/todo", tags=["todo"])

_ERROR_RESPONSES = {
    400: {"model": ErrorEnvelope, "description": "Validation failed or malformed request"},
    500: {"model": ErrorEnvelope, "description": "Controller or internal failure"},
}


@dataclass(frozen=True)
class TodoRest:
    """Shared read-only handles for all todo requests."""
    cnfg: Settings
    todo_cnr: TodoController


def init_todo_rest(
    app: FastAPI, cnfg: Settings, todo_cnr: TodoController,
) -> TodoRest:
    rest = TodoRest(cnfg=cnfg, todo_cnr=todo_cnr)
    app.state.todo_rest = rest
    return rest


def get_todo_rest(request: Request) -> TodoRest:
    return request.app.state.todo_rest


@router.get(
    "/info", response_model=SuccessEnvelope, responses=_ERROR_RESPONSES,
)
async def info(rest: TodoRest = Depends(get_todo_rest)) -> JSONResponse:
    """Controller summary of current todos."""
    outcome = await capture(rest.todo_cnr.todo_info())
    return render(outcome.map(lambda summary: f"Todo info: {summary}"))


@router.get(
    "/send", response_model=SuccessEnvelope,
    responses={
        **_ERROR_RESPONSES,
        502: {"model": ErrorEnvelope, "description": "Mail provider rejected or unreachable"},
    },
)
async def send_mail(
    params: Annotated[SendMailParams, Query()],
    rest: TodoRest = Depends(get_todo_rest),
) -> JSONResponse:
    """Dispatch one templated mail to the given address."""
    outcome = await capture(
        rest.todo_cnr.send_mail(params.email, params.template_id),
    )
    return render(outcome.map(lambda _: "Mail sent"))


@router.post(
    "/add", response_model=SuccessEnvelope, responses=_ERROR_RESPONSES,
)
async def add_todo(
    body: AddTodoBody, rest: TodoRest = Depends(get_todo_rest),
) -> JSONResponse:
    outcome = await capture(rest.todo_cnr.add_todo(body.description))
    return render(outcome.map(lambda todo_id: f"Todo added: {todo_id}"))


@router.post(
    "/complete", response_model=SuccessEnvelope,
    responses={
        **_ERROR_RESPONSES,
        404: {"model": ErrorEnvelope, "description": "Unknown todo id"},
        409: {"model": ErrorEnvelope, "description": "Todo already completed"},
    },
)
async def complete_todo(
    req: CompleteTodoRequest, rest: TodoRest = Depends(get_todo_rest),
) -> JSONResponse:
    outcome = await capture(rest.todo_cnr.complete_todo(TodoId(req.id)))
    return render(outcome.map(lambda _: "Todo completed"))
