"""Session Schemas — demo login payload (username only, no password).

Invariants:
    - username: 1-50 chars, stripped, non-empty
"""

from pydantic import Field, field_validator

from taskmanager.core.domain_types import USERNAME_MAX_LENGTH
from taskmanager.schemas.base import CamelModel, strip_required


class UserDTO(CamelModel):
    """Login request and current-user response."""
    username: str = Field(min_length=1, max_length=USERNAME_MAX_LENGTH)

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        return strip_required(v, "username")
