"""
Pydantic record for an actor.
"""

from pydantic import BaseModel, Field


class Actor(BaseModel):
    """An actor, identified by a generated id."""

    id: int | None = None
    name: str = Field(..., min_length=1)

    class Config:
        from_attributes = True
        validate_assignment = True

    def __str__(self) -> str:
        return self.name
