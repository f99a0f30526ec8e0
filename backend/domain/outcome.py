"""
Tagged results returned by services.

Expected conditions (missing record, bad input, store or disk errors) come
back as an Outcome instead of an exception; the HTTP layer maps the kind to
a status code in one place.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeKind(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    INVALID = "invalid"
    FAILURE = "failure"


@dataclass(frozen=True)
class Outcome:
    kind: OutcomeKind
    value: Any = None
    detail: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.kind == OutcomeKind.OK

    @classmethod
    def ok(cls, value: Any = None) -> "Outcome":
        return cls(OutcomeKind.OK, value=value)

    @classmethod
    def not_found(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.NOT_FOUND, detail=detail)

    @classmethod
    def bad_request(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.BAD_REQUEST, detail=detail)

    @classmethod
    def invalid(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.INVALID, detail=detail)

    @classmethod
    def failure(cls, detail: str) -> "Outcome":
        return cls(OutcomeKind.FAILURE, detail=detail)
