"""Entity base class."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity; changes go through ``model_copy(update=...)``."""

    model_config = ConfigDict(frozen=True)
