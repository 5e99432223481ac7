"""
Sorting and prefix search over the movies loaded from a library.

Both work on in-memory lists; neither touches the database.
"""

from typing import Any, Iterable, List, Optional, Tuple

from moviedb.models import Movie

# Criteria offered by the sort selector, in display order
SORT_CRITERIA = (
    "Title",
    "Release year",
    "Director",
    "Writer",
    "Producer",
    "Cinematography",
    "Budget",
    "Country",
)

_SORT_FIELDS = {
    "title": "title",
    "release year": "release_year",
    "director": "director",
    "writer": "writer",
    "producer": "producer",
    "cinematography": "cinematographer",
    "cinematographer": "cinematographer",
    "budget": "budget",
    "country": "country",
}


def sort_field(criterion: str) -> Optional[str]:
    """
    Map a sort criterion to the Movie attribute it orders by.
    
    Matching ignores case and accepts attribute spellings, so 'Release year',
    'release year' and 'release_year' are the same criterion.
    
    Returns:
        Attribute name, or None for an unrecognized criterion
    """
    key = (criterion or "").strip().lower().replace("_", " ")
    return _SORT_FIELDS.get(key)


def _sort_key(value: Any) -> Tuple[bool, Any]:
    # Missing values go last
    return (value is None, value if value is not None else 0)


def sort_movies(movies: Iterable[Movie], criterion: str) -> List[Movie]:
    """
    Sort movies in ascending order by one criterion.
    
    Text fields compare lexicographically, release year and budget
    numerically. The sort is stable.
    
    Args:
        movies: Movies to sort
        criterion: One of SORT_CRITERIA (case-insensitive)
        
    Returns:
        New sorted list; for an unrecognized criterion, the movies in their
        original order
    """
    field = sort_field(criterion)
    if field is None:
        return list(movies)
    return sorted(movies, key=lambda movie: _sort_key(getattr(movie, field)))


def search_movies_starting_with(movies: Iterable[Movie], prefix: str) -> List[Movie]:
    """Movies whose title starts with prefix, ignoring case."""
    lower_prefix = prefix.lower()
    return [movie for movie in movies if movie.title.lower().startswith(lower_prefix)]
