"""
Controller behind the main view of an open library.

A GUI forwards its events here: each handler takes the current UIState and
returns the next one, so no handler depends on shared mutable fields.
Data-access failures are logged with their SQLite code and turned into a
generic notice for the user.
"""

import logging
from typing import Callable, Iterable, List, Literal, Optional

from pydantic import BaseModel

from moviedb.core.catalog import search_movies_starting_with, sort_field, sort_movies
from moviedb.core.forms import MovieForm
from moviedb.core.ui_state import ActorFocus, GenreFocus, MovieFocus, NoFocus, UIState
from moviedb.core.validation import is_valid_text, validate_movie_form
from moviedb.database.actor_dao import ActorDao
from moviedb.database.connection import DatabaseManager
from moviedb.database.exceptions import DataAccessError
from moviedb.database.genre_dao import GenreDao
from moviedb.database.movie_dao import MovieDao
from moviedb.models import Actor, Genre, Movie

logger = logging.getLogger(__name__)

# Search only kicks in from this many characters; clearing the field reloads
MIN_SEARCH_LENGTH = 2


class Notice(BaseModel):
    """A message to show to the user."""

    level: Literal["info", "error"]
    message: str


def _log_notice(notice: Notice) -> None:
    logger.info("Notice (%s): %s", notice.level, notice.message)


class LibraryController:
    """
    Movie list and movie form logic for one open library.

    Attributes:
        movies: Every movie loaded from the library
        visible_movies: The movie list as shown: searched and sorted
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        notify: Optional[Callable[[Notice], None]] = None,
    ):
        """
        Initialize the controller.

        Args:
            db_manager: Connection manager of the open library
            notify: Callback showing a Notice to the user (default: log it)
        """
        self.movie_dao = MovieDao(db_manager)
        self.actor_dao = ActorDao(db_manager)
        self.genre_dao = GenreDao(db_manager)
        self.notify = notify or _log_notice
        self.movies: List[Movie] = []
        self.visible_movies: List[Movie] = []

    # ==================== MOVIE LIST ====================

    def load_movies(self, state: UIState) -> List[Movie]:
        """Re-query every movie and rebuild the visible list."""
        try:
            self.movies = self.movie_dao.read_all()
        except DataAccessError as e:
            self._report(e, "Failed to load movies from the database!")
            return self.visible_movies
        self.visible_movies = self._arrange(state)
        return self.visible_movies

    def search(self, state: UIState, text: str) -> UIState:
        """
        Handle a change of the search field.

        Two or more characters filter the loaded movies by title prefix;
        an empty field reloads the full list from the library.
        """
        state = state.model_copy(update={"search_text": text})
        if not text:
            self.load_movies(state)
        elif len(text) >= MIN_SEARCH_LENGTH:
            self.visible_movies = self._arrange(state)
        return state

    def sort_by(self, state: UIState, criterion: str) -> UIState:
        """Sort the visible list; an unrecognized criterion changes nothing."""
        if sort_field(criterion) is None:
            logger.debug("Ignoring unknown sort criterion '%s'", criterion)
            return state
        self.visible_movies = sort_movies(self.visible_movies, criterion)
        return state.model_copy(update={"sort_criterion": criterion})

    def select_movie(self, state: UIState, movie_id: int) -> UIState:
        """Load a movie from the list into the form."""
        movie = next((m for m in self.movies if m.id == movie_id), None)
        if movie is None:
            try:
                movie = self.movie_dao.read(movie_id)
            except DataAccessError as e:
                self._report(e, "Failed to load the movie from the database!")
                return state
        if movie is None:
            self.notify(Notice(level="error", message="The movie no longer exists in the database!"))
            return state

        return state.model_copy(update={
            "current_movie_id": movie.id,
            "focus": MovieFocus(movie_id=movie.id),
            "form": MovieForm.from_movie(
                movie,
                actors=self._resolve_actors(movie.actor_ids),
                genres=self._resolve_genres(movie.genre_ids),
            ),
        })

    def reset(self, state: UIState) -> UIState:
        """Start a new, empty movie; the sort criterion is kept."""
        return self.search(UIState(sort_criterion=state.sort_criterion), "")

    # ==================== SAVE ====================

    def save(self, state: UIState) -> UIState:
        """
        Save the form: update the current movie, or create a new one.

        Invalid forms are not saved; their validation messages are shown
        instead.
        """
        errors = validate_movie_form(state.form)
        if errors:
            self.notify(Notice(level="error", message="\n".join(errors)))
            return state

        movie = state.form.to_movie(movie_id=state.current_movie_id)
        try:
            if movie.id is not None:
                if not self.movie_dao.update(movie):
                    self.notify(Notice(level="error", message="The movie no longer exists in the database!"))
                    self.movies = [m for m in self.movies if m.id != movie.id]
                    self.visible_movies = self._arrange(state)
                    return state.model_copy(update={"current_movie_id": None, "focus": NoFocus()})
                self.movies = [movie if m.id == movie.id else m for m in self.movies]
            else:
                movie.id = self.movie_dao.create(movie)
                self.movies.append(movie)
        except DataAccessError as e:
            self._report(e, "Failed to save movie data to the database!")
            return state

        logger.info("Saved movie %d '%s'", movie.id, movie.title)
        self.visible_movies = self._arrange(state)
        self.notify(Notice(level="info", message="Movie saved"))
        return state.model_copy(update={"current_movie_id": movie.id})

    # ==================== ACTORS AND GENRES ====================

    def add_actor(self, state: UIState, name: str) -> UIState:
        """
        Add an actor to the form by name.

        An existing actor with exactly that name is reused; otherwise a new
        actor is created in the library.
        """
        name = (name or "").strip()
        if not name or not is_valid_text(name):
            self.notify(Notice(level="error", message="Actor's name is invalid."))
            return state

        try:
            actor = self.actor_dao.find_by_name(name)
            if actor is None:
                actor = Actor(name=name)
                actor.id = self.actor_dao.create(actor)
        except DataAccessError as e:
            self._report(e, "Failed to save the actor to the database!")
            return state

        if any(a.id == actor.id for a in state.form.actors):
            return state
        return state.with_form(actors=state.form.actors + (actor,))

    def available_genres(self) -> List[Genre]:
        """The library's genre catalog, for the genre chooser."""
        try:
            return self.genre_dao.read_all()
        except DataAccessError as e:
            self._report(e, "Failed to load genres from the database!")
            return []

    def choose_genres(self, state: UIState, genre_ids: Iterable[int]) -> UIState:
        """Replace the form's genres with the chosen catalog entries."""
        chosen = list(dict.fromkeys(genre_ids))
        return state.with_form(genres=tuple(self._resolve_genres(chosen)))

    # ==================== DELETE ====================

    def delete_focused(self, state: UIState) -> UIState:
        """Delete whatever the focused list has selected, then drop the focus."""
        focus = state.focus
        if isinstance(focus, MovieFocus):
            state = self.remove_movie(state, focus.movie_id)
        elif isinstance(focus, ActorFocus):
            state = self.remove_actor(state, focus.actor_id)
        elif isinstance(focus, GenreFocus):
            state = self.remove_genre(state, focus.genre_id)
        return state.with_focus(NoFocus())

    def remove_movie(self, state: UIState, movie_id: int) -> UIState:
        """Delete a movie from the library and from the movie list."""
        try:
            self.movie_dao.delete(movie_id)
        except DataAccessError as e:
            self._report(e, "Failed to delete the movie!")
            return state

        self.movies = [m for m in self.movies if m.id != movie_id]
        self.visible_movies = [m for m in self.visible_movies if m.id != movie_id]
        if state.current_movie_id == movie_id:
            return state.model_copy(update={"current_movie_id": None, "form": MovieForm()})
        return state

    def remove_actor(self, state: UIState, actor_id: int) -> UIState:
        """Detach an actor from the form; saving persists the change."""
        return state.with_form(actors=tuple(a for a in state.form.actors if a.id != actor_id))

    def remove_genre(self, state: UIState, genre_id: int) -> UIState:
        """Detach a genre from the form; saving persists the change."""
        return state.with_form(genres=tuple(g for g in state.form.genres if g.id != genre_id))

    # ==================== HELPERS ====================

    def _arrange(self, state: UIState) -> List[Movie]:
        movies = self.movies
        if len(state.search_text) >= MIN_SEARCH_LENGTH:
            movies = search_movies_starting_with(movies, state.search_text)
        return sort_movies(movies, state.sort_criterion)

    def _resolve_actors(self, actor_ids: Iterable[int]) -> List[Actor]:
        actors = []
        try:
            for actor_id in actor_ids:
                actor = self.actor_dao.get_actor_by_id(actor_id)
                if actor is not None:
                    actors.append(actor)
        except DataAccessError as e:
            self._report(e, "Error populating the actors list!")
        return actors

    def _resolve_genres(self, genre_ids: Iterable[int]) -> List[Genre]:
        genres = []
        try:
            for genre_id in genre_ids:
                genre = self.genre_dao.get_genre_by_id(genre_id)
                if genre is not None:
                    genres.append(genre)
        except DataAccessError as e:
            self._report(e, "Error populating the genres list!")
        return genres

    def _report(self, error: DataAccessError, message: str) -> None:
        logger.error(
            "%s SQLite code: %s (%s), message: %s",
            message, error.code, error.name, error.message,
            exc_info=error,
        )
        self.notify(Notice(level="error", message=message))
