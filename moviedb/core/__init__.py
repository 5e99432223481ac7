"""
Presentation-adjacent logic: sorting, searching, form validation, UI state
and the library controller that a GUI wires its events to.
"""

from moviedb.core.catalog import SORT_CRITERIA, sort_movies, search_movies_starting_with
from moviedb.core.forms import MovieForm
from moviedb.core.validation import validate_movie_form
from moviedb.core.ui_state import UIState, NoFocus, MovieFocus, ActorFocus, GenreFocus
from moviedb.core.library_controller import LibraryController, Notice

__all__ = [
    "SORT_CRITERIA",
    "sort_movies",
    "search_movies_starting_with",
    "MovieForm",
    "validate_movie_form",
    "UIState",
    "NoFocus",
    "MovieFocus",
    "ActorFocus",
    "GenreFocus",
    "LibraryController",
    "Notice",
]
