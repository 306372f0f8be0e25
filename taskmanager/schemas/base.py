"""Schema Base — camelCase wire format shared by every DTO.

Invariants:
    - JSON keys are camelCase (colorCode, isDefault, createdAt)
    - Python attributes stay snake_case; both spellings accepted on input
    - Response timestamps are UTC-aware whatever the driver hands back
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from taskmanager.core.completion_stats import as_utc

# SQLite returns naive datetimes, PostgreSQL aware ones
UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_required(v: str, field_name: str) -> str:
    """Strip whitespace; reject values that were only whitespace."""
    v = v.strip()
    if not v:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v
