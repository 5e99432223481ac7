"""
Pydantic record for a genre.
"""

from pydantic import BaseModel, Field


class Genre(BaseModel):
    """A genre from the library's genre catalog."""

    id: int | None = None
    name: str = Field(..., min_length=1)

    class Config:
        from_attributes = True
        validate_assignment = True

    def __str__(self) -> str:
        return self.name
