"""Base model for all domain entities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable: state changes produce a new instance via
    ``model_copy`` and must be saved back through a repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def _touched(self, **changes) -> "DomainModel":
        """Return a copy with ``changes`` applied and ``updated_at`` refreshed."""
        return self.model_copy(update={**changes, "updated_at": datetime.now()})
