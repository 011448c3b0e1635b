from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorOut(_CamelModel):
    error: str
    code: str


class AuthSuccessOut(_CamelModel):
    user_id: str
    auth_provider: str


class BackupValidationOut(_CamelModel):
    valid: bool
    session_count: int | None = None
    errors: list[str] = []
    code: str | None = None
