"""
Movie edit form contents, as typed by the user.
"""

from typing import Iterable

from pydantic import BaseModel, field_validator

from moviedb.models import Actor, Genre, Movie


def _text(value) -> str:
    return "" if value is None else str(value)


def _optional(text: str) -> str | None:
    text = text.strip()
    return text or None


class MovieForm(BaseModel):
    """
    Raw contents of the movie form.
    
    Text fields hold exactly what was typed; actors and genres are the
    entries of the form's two lists. Validate with validate_movie_form()
    before calling to_movie().
    """

    title: str = ""
    release_year: str = ""
    director: str = ""
    writer: str = ""
    producer: str = ""
    cinematographer: str = ""
    budget: str = ""
    country: str = ""
    actors: tuple[Actor, ...] = ()
    genres: tuple[Genre, ...] = ()

    class Config:
        frozen = True

    @field_validator(
        "title", "release_year", "director", "writer", "producer",
        "cinematographer", "budget", "country",
        mode="before",
    )
    @classmethod
    def text_fields(cls, value):
        return _text(value)

    @classmethod
    def from_movie(
        cls,
        movie: Movie,
        actors: Iterable[Actor] = (),
        genres: Iterable[Genre] = (),
    ) -> "MovieForm":
        """Fill a form with a stored movie and its resolved actors and genres."""
        return cls(
            title=movie.title,
            release_year=_text(movie.release_year),
            director=_text(movie.director),
            writer=_text(movie.writer),
            producer=_text(movie.producer),
            cinematographer=_text(movie.cinematographer),
            budget=_text(movie.budget),
            country=_text(movie.country),
            actors=tuple(actors),
            genres=tuple(genres),
        )

    def to_movie(self, movie_id: int | None = None) -> Movie:
        """Build a Movie record from a validated form."""
        return Movie(
            id=movie_id,
            title=self.title.strip(),
            release_year=int(self.release_year.strip()),
            director=_optional(self.director),
            writer=_optional(self.writer),
            producer=_optional(self.producer),
            cinematographer=_optional(self.cinematographer),
            budget=int(self.budget.strip()),
            country=_optional(self.country),
            actor_ids=[actor.id for actor in self.actors],
            genre_ids=[genre.id for genre in self.genres],
        )
