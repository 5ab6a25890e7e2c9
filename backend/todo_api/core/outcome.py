"""Outcome — two-variant result of one request: success value or domain error.

Invariants:
    - An Outcome is exactly one of Ok or Err
    - map() transforms only the success value; an Err passes through unchanged
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from todo_api.core.errors import TodoApiError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))


@dataclass(frozen=True)
class Err:
    error: TodoApiError

    def map(self, fn: Callable) -> "Err":
        return self


Outcome = Union[Ok[T], Err]
