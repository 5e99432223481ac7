"""
Unit tests for sorting and prefix search.
"""

import pytest

from moviedb.core.catalog import SORT_CRITERIA, search_movies_starting_with, sort_movies
from moviedb.models import Movie


@pytest.fixture
def movies():
    return [
        Movie(id=1, title="Inception", release_year=2010, director="Christopher Nolan",
              writer="Christopher Nolan", producer="Emma Thomas", cinematographer="Wally Pfister",
              budget=160000000, country="USA"),
        Movie(id=2, title="Fight Club", release_year=1999, director="David Fincher",
              writer="Chuck Palahniuk", producer="Art Linson", cinematographer="Jeff Cronenweth",
              budget=63000000, country="Germany/USA"),
        Movie(id=3, title="The Godfather", release_year=1972, director="Francis Ford Coppola",
              writer="Mario Puzo", producer="Albert S. Ruddy", cinematographer="Gordon Willis",
              budget=6000000, country="USA"),
        Movie(id=4, title="The Inception Diaries", release_year=2015, director="Ava Example",
              writer="Ben Example", producer="Cy Example", cinematographer="Di Example",
              budget=900000000, country="Finland"),
    ]


FIELDS = {
    "Title": "title",
    "Release year": "release_year",
    "Director": "director",
    "Writer": "writer",
    "Producer": "producer",
    "Cinematography": "cinematographer",
    "Budget": "budget",
    "Country": "country",
}


class TestSortMovies:
    """Tests for sort_movies."""
    
    @pytest.mark.parametrize("criterion", SORT_CRITERIA)
    def test_sorted_ascending(self, movies, criterion):
        field = FIELDS[criterion]
        values = [getattr(m, field) for m in sort_movies(movies, criterion)]
        assert values == sorted(values)
    
    def test_budget_sorts_numerically(self, movies):
        """900000000 > 160000000 > 63000000 > 6000000 as numbers, not strings."""
        assert [m.id for m in sort_movies(movies, "budget")] == [3, 2, 1, 4]
    
    def test_criterion_spelling_is_flexible(self, movies):
        expected = [m.id for m in sort_movies(movies, "Release year")]
        assert [m.id for m in sort_movies(movies, "release_year")] == expected
        assert [m.id for m in sort_movies(movies, "RELEASE YEAR")] == expected
        assert [m.id for m in sort_movies(movies, "cinematographer")] == \
            [m.id for m in sort_movies(movies, "Cinematography")]
    
    def test_unknown_criterion_keeps_order(self, movies):
        assert [m.id for m in sort_movies(movies, "rating")] == [1, 2, 3, 4]
    
    def test_sort_is_stable(self, movies):
        """Equal keys keep their relative order."""
        assert [m.id for m in sort_movies(movies, "country")] == [4, 2, 1, 3]
    
    def test_missing_values_sort_last(self, movies):
        movies.append(Movie(id=5, title="Unknown Year"))
        assert sort_movies(movies, "release year")[-1].id == 5
    
    def test_input_not_modified(self, movies):
        sort_movies(movies, "title")
        assert [m.id for m in movies] == [1, 2, 3, 4]


class TestSearchMovies:
    """Tests for search_movies_starting_with."""
    
    def test_prefix_is_case_insensitive(self, movies):
        titles = [m.title for m in search_movies_starting_with(movies, "Inc")]
        assert titles == ["Inception"]
        assert search_movies_starting_with(movies, "inc") == search_movies_starting_with(movies, "INC")
    
    def test_only_title_start_matches(self, movies):
        """'The Inception Diaries' contains 'Inc' but does not start with it."""
        titles = [m.title for m in search_movies_starting_with(movies, "inc")]
        assert "The Inception Diaries" not in titles
    
    def test_multiple_matches(self, movies):
        titles = [m.title for m in search_movies_starting_with(movies, "the")]
        assert titles == ["The Godfather", "The Inception Diaries"]
    
    def test_no_match(self, movies):
        assert search_movies_starting_with(movies, "zz") == []
