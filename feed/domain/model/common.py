"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are frozen; updates go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )
