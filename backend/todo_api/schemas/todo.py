"""Todo Schemas — request records with declared field constraints, plus envelope shapes.

Invariants:
    - SendMailParams.email: bare RFC address (no display name, no deliverability
      check), forwarded exactly as sent
    - SendMailParams.template_id: 1-64 chars
    - AddTodoBody.description: 1-100 chars, taken verbatim (not stripped)
    - CompleteTodoRequest.id: structural UUID only

Design Decisions:
    - Constraints declared on the model, checked by Pydantic in one pass so
      every failing field is reported together
    - Envelope models exist for OpenAPI documentation; rendering builds the
      same shape directly (api/envelope.py)
"""

from typing import Annotated, Literal
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field

from todo_api.core.domain_types import (
    DESCRIPTION_MAX_LENGTH, DESCRIPTION_MIN_LENGTH,
    TEMPLATE_ID_MAX_LENGTH, TEMPLATE_ID_MIN_LENGTH,
)


def check_email_syntax(value: str) -> str:
    """Accept a bare RFC address only; the caller's string is returned unchanged."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_syntax)]


class SendMailParams(BaseModel):
    """Query parameters for GET /todo/send."""
    email: EmailAddress
    template_id: str = Field(
        min_length=TEMPLATE_ID_MIN_LENGTH, max_length=TEMPLATE_ID_MAX_LENGTH,
    )


class AddTodoBody(BaseModel):
    """JSON body for POST /todo/add."""
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH, max_length=DESCRIPTION_MAX_LENGTH,
    )


class CompleteTodoRequest(BaseModel):
    """JSON body for POST /todo/complete."""
    id: UUID


# --- Envelope ----------------------------------------------------------------

class SuccessEnvelope(BaseModel):
    ok: Literal[True] = True
    data: str


class FieldViolationOut(BaseModel):
    field: str
    message: str
    type: str


class ErrorContextOut(BaseModel):
    todo_id: str | None = None
    template_id: str | None = None


class ErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str
    details: list[FieldViolationOut] = []
    context: ErrorContextOut


class ErrorEnvelope(BaseModel):
    ok: Literal[False] = False
    error: ErrorBody
