"""JWT payload model for cached session tokens."""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JwtPayload(BaseModel):
    """Claims read from the middle segment of a JWT."""
    model_config = ConfigDict(extra="allow")

    exp: int  # unix timestamp (seconds)
    user_id: str | int | None = None
    roles: list[Any] = Field(default_factory=list)

    @field_validator('roles', mode='before')
    @classmethod
    def validate_roles(cls, v: Any) -> list[Any]:
        """Accept a missing, single or list-valued roles claim."""
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return list(v)
        return [v]

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)
