from todo_api.core.errors import TodoNotFoundError
from todo_api.core.outcome import Err, Ok


def test_ok_map_transforms_value():
    assert Ok(3).map(lambda v: f"Todo info: {v}") == Ok("Todo info: 3")


def test_err_map_is_identity():
    err = Err(TodoNotFoundError("abc"))
    assert err.map(lambda v: "never") is err


def test_map_with_none_value():
    assert Ok(None).map(lambda _: "Mail sent").value == "Mail sent"
