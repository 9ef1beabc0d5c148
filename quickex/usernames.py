"""
Username intake validation.

Validation runs explicitly at the top of the intake handler and returns
either an accepted candidate or the list of reasons it was rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Union

from pydantic import ValidationError

from quickex.errors import format_validation_errors
from quickex.schemas import CreateUsernameRequest


@dataclass(frozen=True)
class UsernameAccepted:
    candidate: CreateUsernameRequest

    @property
    def username(self) -> str:
        return self.candidate.username


@dataclass(frozen=True)
class UsernameRejected:
    errors: List[str] = field(default_factory=list)


UsernameValidation = Union[UsernameAccepted, UsernameRejected]


def validate_username_payload(payload: Any) -> UsernameValidation:
    """Check a decoded request body against the strict username shape."""
    if not isinstance(payload, dict):
        return UsernameRejected(["request body must be a JSON object"])
    try:
        candidate = CreateUsernameRequest.model_validate(payload)
    except ValidationError as exc:
        return UsernameRejected(format_validation_errors(exc.errors()))
    return UsernameAccepted(candidate)
