"""
Pydantic record for a movie.
"""

from pydantic import BaseModel, Field

# Largest value an SQLite INTEGER column can hold
SQLITE_MAX_INTEGER = 2**63 - 1


class Movie(BaseModel):
    """A movie with the ids of its actors and genres."""

    id: int | None = None
    title: str = Field(..., min_length=1)
    release_year: int | None = None
    director: str | None = None
    writer: str | None = None
    producer: str | None = None
    cinematographer: str | None = None
    budget: int | None = Field(None, ge=0, le=SQLITE_MAX_INTEGER)
    country: str | None = None
    actor_ids: list[int] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)

    class Config:
        from_attributes = True
        validate_assignment = True

    def __str__(self) -> str:
        return self.title
