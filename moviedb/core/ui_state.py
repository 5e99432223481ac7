"""
Explicit UI state passed through the library controller's handlers.

The list focus decides what Add and Delete act on. It is a tagged variant:
exactly one of NoFocus, MovieFocus, ActorFocus or GenreFocus, each carrying
the id of the selected entry.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from moviedb.core.forms import MovieForm


class NoFocus(BaseModel):
    """No list is focused."""

    kind: Literal["none"] = "none"

    class Config:
        frozen = True


class MovieFocus(BaseModel):
    """A movie is selected in the movie list."""

    kind: Literal["movie"] = "movie"
    movie_id: int

    class Config:
        frozen = True


class ActorFocus(BaseModel):
    """An actor is selected in the form's actor list."""

    kind: Literal["actor"] = "actor"
    actor_id: int

    class Config:
        frozen = True


class GenreFocus(BaseModel):
    """A genre is selected in the form's genre list."""

    kind: Literal["genre"] = "genre"
    genre_id: int

    class Config:
        frozen = True


ListFocus = Annotated[
    Union[NoFocus, MovieFocus, ActorFocus, GenreFocus],
    Field(discriminator="kind"),
]


class UIState(BaseModel):
    """
    Everything the main view needs to decide what an action targets.
    
    Attributes:
        current_movie_id: Id of the movie loaded in the form, None for a new movie
        focus: Which list entry Delete acts on
        sort_criterion: Active sort criterion of the movie list
        search_text: Contents of the search field
        form: Contents of the movie form
    """

    current_movie_id: int | None = None
    focus: ListFocus = Field(default_factory=NoFocus)
    sort_criterion: str = "title"
    search_text: str = ""
    form: MovieForm = Field(default_factory=MovieForm)

    class Config:
        frozen = True

    def with_focus(self, focus: Union[NoFocus, MovieFocus, ActorFocus, GenreFocus]) -> "UIState":
        """Copy of the state with another list focused."""
        return self.model_copy(update={"focus": focus})

    def with_form(self, **changes) -> "UIState":
        """Copy of the state with some form fields replaced."""
        form = MovieForm.model_validate({**dict(self.form), **changes})
        return self.model_copy(update={"form": form})
