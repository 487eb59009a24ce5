"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - JSON keys are camelCase (accountId, postedBy, messageText, timePostedEpoch)
    - Schemas check types only; business rules live in core/ so every violation
      maps to its own domain error

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )
