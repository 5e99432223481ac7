"""
Pydantic records exchanged between the data layer and its callers.
"""

from moviedb.models.movie import Movie
from moviedb.models.actor import Actor
from moviedb.models.genre import Genre

__all__ = [
    "Movie",
    "Actor",
    "Genre",
]
