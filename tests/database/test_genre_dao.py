"""
Unit tests for the genre data-access object.
"""

from moviedb.database import GENRE_CATALOG
from moviedb.models import Genre


class TestGenreDao:
    """Tests for GenreDao CRUD operations against the seeded catalog."""
    
    def test_catalog_is_seeded(self, genre_dao):
        genres = genre_dao.read_all()
        assert [g.name for g in genres] == list(GENRE_CATALOG)
        assert [g.id for g in genres] == list(range(1, len(GENRE_CATALOG) + 1))
    
    def test_create(self, genre_dao):
        genre_id = genre_dao.create(Genre(name="Western"))
        assert genre_dao.read(genre_id) == Genre(id=genre_id, name="Western")
        assert genre_dao.count() == len(GENRE_CATALOG) + 1
    
    def test_read_not_found(self, genre_dao):
        assert genre_dao.read(999) is None
    
    def test_get_genre_by_id_is_read(self, genre_dao):
        assert genre_dao.get_genre_by_id(1) == genre_dao.read(1)
    
    def test_find_by_name(self, genre_dao):
        assert genre_dao.find_by_name("Drama").name == "Drama"
        assert genre_dao.find_by_name("Telenovela") is None
    
    def test_update(self, genre_dao):
        genre = genre_dao.find_by_name("Sci-Fi")
        genre.name = "Science Fiction"
        
        assert genre_dao.update(genre) is True
        assert genre_dao.read(genre.id).name == "Science Fiction"
    
    def test_update_not_found(self, genre_dao):
        assert genre_dao.update(Genre(id=999, name="Nothing")) is False
    
    def test_delete_unlinks_genre_from_movies(self, filled_db, genre_dao, movie_dao, genre_ids):
        """Deleting a genre removes it from every movie (cascade)."""
        assert genre_dao.delete(genre_ids["Drama"]) is True
        
        assert movie_dao.read(4).genre_ids == []
        assert movie_dao.read(5).genre_ids == [genre_ids["Crime"]]
    
    def test_delete_not_found(self, genre_dao):
        assert genre_dao.delete(999) is False
