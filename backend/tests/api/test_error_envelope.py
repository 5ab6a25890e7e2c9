"""Error Envelope — every failure path renders the same error shape.

Tests cover:
    - unknown route and wrong method → routing error envelope
    - unexpected controller fault → INTERNAL_ERROR without leaking details
    - domain errors raised outside a captured call still render an envelope
    - health probe stays outside the envelope contract
"""

from fastapi import Depends

from todo_api.api.routes.todo import get_todo_rest
from todo_api.core.errors import TodoAlreadyCompletedError

ERROR_KEYS = {"code", "message", "category", "severity", "timestamp", "details", "context"}


async def test_unknown_route_renders_envelope(client):
    res = await client.get("/todo/missing")
    assert res.status_code == 404
    body = res.json()
    assert body["ok"] is False
    assert set(body["error"]) == ERROR_KEYS
    assert body["error"]["code"] == "ROUTE_NOT_FOUND"
    assert body["error"]["category"] == "routing"


async def test_wrong_method_renders_envelope(client, fake_controller):
    res = await client.get("/todo/add")
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
    assert "allow" in {h.lower() for h in res.headers}
    assert fake_controller.calls == []


async def test_unexpected_fault_never_leaks_details(client, fake_controller):
    fake_controller.errors["todo_info"] = RuntimeError("secret connection string")
    res = await client.get("/todo/info")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["message"] == "An unexpected error occurred"
    assert "secret" not in res.text


async def test_domain_error_outside_capture_renders_envelope(test_app, client):
    todo_id = "12345678-1234-5678-1234-567812345678"

    @test_app.get("/todo/raises")
    async def raises(rest=Depends(get_todo_rest)):
        raise TodoAlreadyCompletedError(todo_id)

    res = await client.get("/todo/raises")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TODO_ALREADY_COMPLETED"


async def test_validation_error_envelope_shape(client):
    res = await client.post("/todo/add", json={"description": ""})
    error = res.json()["error"]
    assert set(error) == ERROR_KEYS
    assert error["severity"] == "warning"
    assert error["details"][0]["type"] == "string_too_short"
    assert error["message"] == "Request failed validation: description"


async def test_health_check(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json() == {
        "status": "healthy", "service": "Todo API (test)", "version": "0.1.0",
    }


async def test_openapi_documents_send_mail_failure(client):
    res = await client.get("/openapi.json")
    responses = res.json()["paths"]["/todo/send"]["get"]["responses"]
    assert {"200", "400", "500", "502"} <= set(responses)
