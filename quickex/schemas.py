"""
Pydantic schemas for the QuickEx backend.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

USERNAME_PATTERN = r"^[a-z0-9_]+$"
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 32

_USERNAME_RE = re.compile(r"[a-z0-9_]+")


class HealthResponse(BaseModel):
    status: Literal["ok"] = Field(default="ok", description="Health status of the service")


class CreateUsernameRequest(BaseModel):
    """The username to register. Undeclared fields are rejected."""

    model_config = ConfigDict(extra="forbid")

    username: StrictStr = Field(
        ...,
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
        description="The username to register",
        json_schema_extra={"pattern": USERNAME_PATTERN, "examples": ["alice_123"]},
    )

    @field_validator("username")
    @classmethod
    def _check_charset(cls, v: str) -> str:
        if not _USERNAME_RE.fullmatch(v):
            raise ValueError(
                "Username must contain only lowercase letters, numbers, and underscores"
            )
        return v


class CreateUsernameResponse(BaseModel):
    ok: bool = Field(..., description="Indicates whether the operation was successful")
