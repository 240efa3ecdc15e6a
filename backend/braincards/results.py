"""
Brain Cards Backend — Operation Results
========================================

What:  Ok / Err return values for domain operations.
Why:   Validation and lookup failures are ordinary outcomes of a request,
       so they are returned, not raised. The route layer decides how each
       outcome is rendered, and every path through it is visible in the code.
How:   A domain operation returns either Ok(value) or Err(kind, status, payload).
       Err already carries the HTTP status code and the JSON body the client
       should see, which keeps the route handlers to a single branch.

Error kinds:
    validation_error → 400  {"message": <what is wrong with the input>}
    not_found        → 404  {"message": "Item Not Found"}
    server_error     → 500  {"message": "Server Error"}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, TypeVar, Union

T = TypeVar("T")

VALIDATION_ERROR = "validation_error"
NOT_FOUND = "not_found"
SERVER_ERROR = "server_error"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping the operation's value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome: an error kind, its HTTP status and the JSON body to send."""

    kind: str
    status_code: int
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.payload.get("message", ""))


Result = Union[Ok[T], Err]


def validation_error(message: str) -> Err:
    return Err(kind=VALIDATION_ERROR, status_code=400, payload={"message": message})


def not_found(message: str = "Item Not Found") -> Err:
    return Err(kind=NOT_FOUND, status_code=404, payload={"message": message})


def server_error() -> Err:
    # Fixed message: details go to the log, never to the client
    return Err(kind=SERVER_ERROR, status_code=500, payload={"message": "Server Error"})
