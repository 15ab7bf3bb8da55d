"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen; state changes go through repositories and come back
    as new instances (``model_copy(update=...)``).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
