"""
Input validation for the movie form.

Validation problems are reported as user-facing messages, never raised:
a form with messages is simply not saved.
"""

import re
from typing import List

from moviedb.core.forms import MovieForm
from moviedb.models.movie import SQLITE_MAX_INTEGER

MIN_RELEASE_YEAR = 1900
MAX_RELEASE_YEAR = 2099

_INTEGER = re.compile(r"[+-]?\d+")
# A letter followed by letters, spaces and name punctuation, e.g.
# "J.R.R. Tolkien", "Janusz Kamiński", "New Zealand/USA"
_NAME_TEXT = re.compile(r"[^\W\d_](?:[^\W\d_]|[ .'\-/,&])*")


def is_integer(text: str) -> bool:
    """Whether text is a whole number."""
    return bool(_INTEGER.fullmatch((text or "").strip()))


def _small_integer(text: str) -> int | None:
    # More than 19 significant digits never fits a 64-bit column, and
    # int() refuses very long digit strings
    if not is_integer(text) or len(text.strip().lstrip("+-").lstrip("0")) > 19:
        return None
    return int(text)


def is_valid_release_year(text: str) -> bool:
    """Whether text is a year between 1900 and 2099."""
    year = _small_integer(text)
    return year is not None and MIN_RELEASE_YEAR <= year <= MAX_RELEASE_YEAR


def is_valid_budget(text: str) -> bool:
    """Whether text is a whole number that fits a budget column."""
    budget = _small_integer(text)
    return budget is not None and 0 <= budget <= SQLITE_MAX_INTEGER


def is_valid_text(text: str) -> bool:
    """Whether text is empty or looks like a person's or country's name."""
    text = (text or "").strip()
    return not text or bool(_NAME_TEXT.fullmatch(text))


def validate_movie_form(form: MovieForm) -> List[str]:
    """
    Check a movie form before it is saved.
    
    Args:
        form: Form contents
        
    Returns:
        One message per problem; an empty list means the form is valid
    """
    errors = []
    if not form.title.strip():
        errors.append("Title is required.")
    if not is_valid_release_year(form.release_year):
        errors.append(f"Give release year between {MIN_RELEASE_YEAR}-{MAX_RELEASE_YEAR}.")
    if not is_valid_text(form.director):
        errors.append("Director's name is invalid.")
    if not is_valid_text(form.writer):
        errors.append("Writer's name is invalid.")
    if not is_valid_text(form.producer):
        errors.append("Producer's name is invalid.")
    if not is_valid_text(form.cinematographer):
        errors.append("Cinematographer's name is invalid.")
    if not is_valid_budget(form.budget):
        errors.append("Give budget as a non-negative integer.")
    if not is_valid_text(form.country):
        errors.append("Invalid country name.")
    if not form.actors:
        errors.append("At least one actor is required.")
    if not form.genres:
        errors.append("At least one genre is required.")
    return errors
