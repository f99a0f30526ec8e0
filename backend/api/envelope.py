"""
Uniform response envelope shared by every endpoint.
"""
from typing import Any, Callable, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from domain.outcome import Outcome, OutcomeKind

DEFAULT_SUCCESS_MESSAGE = "Operation successful"

STATUS_CODES = {
    OutcomeKind.OK: 200,
    OutcomeKind.NOT_FOUND: 404,
    OutcomeKind.BAD_REQUEST: 400,
    OutcomeKind.INVALID: 400,
    OutcomeKind.FAILURE: 500,
}


class Envelope(BaseModel):
    status: str
    message: Optional[str] = None
    data: Any = None

    @classmethod
    def success(cls, data: Any = None, message: str = DEFAULT_SUCCESS_MESSAGE) -> "Envelope":
        return cls(status="success", message=message, data=data)

    @classmethod
    def error(cls, message: Optional[str]) -> "Envelope":
        return cls(status="error", message=message, data=None)


def envelope_response(envelope: Envelope, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope.model_dump())


def respond(outcome: Outcome, serialize: Optional[Callable[[Any], Any]] = None) -> JSONResponse:
    """Render a service outcome as an envelope with the matching HTTP status."""
    status_code = STATUS_CODES[outcome.kind]
    if outcome.is_ok:
        data = serialize(outcome.value) if serialize else outcome.value
        return envelope_response(Envelope.success(data), status_code)
    return envelope_response(Envelope.error(outcome.detail), status_code)
