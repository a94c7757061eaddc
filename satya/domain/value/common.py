"""Value object base class."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable, equal by value. Unknown fields from providers are dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")
