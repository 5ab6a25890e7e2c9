"""Todo schemas — declared field constraints on the request records.

Invariants:
    - description 1-100 chars, not stripped
    - template_id 1-64 chars
    - email must be RFC syntax
    - every failing field reported in one ValidationError
"""

import uuid

import pytest
from pydantic import ValidationError

from todo_api.schemas.todo import AddTodoBody, CompleteTodoRequest, SendMailParams


def test_add_todo_body_bounds():
    assert AddTodoBody(description="a").description == "a"
    assert AddTodoBody(description="a" * 100).description == "a" * 100
    with pytest.raises(ValidationError):
        AddTodoBody(description="")
    with pytest.raises(ValidationError):
        AddTodoBody(description="a" * 101)


def test_add_todo_body_counts_characters_not_bytes():
    assert len(AddTodoBody(description="ü" * 100).description) == 100


def test_send_mail_params_valid():
    params = SendMailParams(email="ada@example.com", template_id="welcome")
    assert params.email == "ada@example.com"


def test_send_mail_params_collects_all_failures():
    with pytest.raises(ValidationError) as exc_info:
        SendMailParams(email="not-an-email", template_id="")
    fields = {e["loc"][0] for e in exc_info.value.errors()}
    assert fields == {"email", "template_id"}


def test_send_mail_params_template_upper_bound():
    SendMailParams(email="ada@example.com", template_id="t" * 64)
    with pytest.raises(ValidationError):
        SendMailParams(email="ada@example.com", template_id="t" * 65)


def test_complete_todo_request_parses_uuid():
    todo_id = uuid.uuid4()
    assert CompleteTodoRequest(id=str(todo_id)).id == todo_id


def test_complete_todo_request_rejects_non_uuid():
    with pytest.raises(ValidationError) as exc_info:
        CompleteTodoRequest(id="not-a-uuid")
    assert exc_info.value.errors()[0]["type"] == "uuid_parsing"


def test_send_mail_params_rejects_display_name():
    with pytest.raises(ValidationError) as exc_info:
        SendMailParams(email="Mallory <ada@example.com>", template_id="welcome")
    error = exc_info.value.errors()[0]
    assert error["loc"] == ("email",)
    assert error["type"] == "value_error"


def test_send_mail_params_keeps_email_verbatim():
    params = SendMailParams(email="Ada@EXAMPLE.COM", template_id="welcome")
    assert params.email == "Ada@EXAMPLE.COM"
