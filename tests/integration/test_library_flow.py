"""
End-to-end test of a library on disk.

Tests the complete journey:
1. Create a library by name
2. Create an actor and a movie linked to it
3. Read everything back through a fresh connection
4. Edit and delete through the controller
"""

import pytest

from moviedb.core.library_controller import LibraryController
from moviedb.core.ui_state import UIState
from moviedb.database import ActorDao, GenreDao, MovieDao
from moviedb.library import create_library, open_library
from moviedb.models import Actor, Movie
from moviedb.utils.logging_config import setup_logging


@pytest.fixture
def library_dir(tmp_path):
    setup_logging(level="DEBUG")
    return tmp_path / "libraries"


class TestLibraryFlow:
    """Test complete library flow."""
    
    def test_taxi_driver(self, library_dir):
        """Actor, movie and genre links survive a round trip through the file."""
        create_library("Scorsese Films", library_dir)
        
        db_manager = open_library("Scorsese Films", library_dir)
        try:
            actor_id = ActorDao(db_manager).create(Actor(name="Robert De Niro"))
            drama = GenreDao(db_manager).find_by_name("Drama")
            MovieDao(db_manager).create(Movie(
                title="Taxi Driver",
                release_year=1976,
                director="Martin Scorsese",
                actor_ids=[actor_id],
                genre_ids=[drama.id],
            ))
        finally:
            db_manager.close()
        
        db_manager = open_library("scorsesefilms", library_dir)
        try:
            movies = MovieDao(db_manager).read_all()
        finally:
            db_manager.close()
        
        assert len(movies) == 1
        assert movies[0].title == "Taxi Driver"
        assert movies[0].release_year == 1976
        assert actor_id in movies[0].actor_ids
        assert drama.id in movies[0].genre_ids
    
    def test_edit_through_controller(self, library_dir):
        """A movie saved through the controller can be found, edited and deleted."""
        db_manager = open_library("Workbench", library_dir, create=True)
        notices = []
        try:
            controller = LibraryController(db_manager, notify=notices.append)
            state = UIState()
            controller.load_movies(state)
            assert controller.visible_movies == []
            
            state = controller.add_actor(state, "Robert De Niro")
            drama = next(g for g in controller.available_genres() if g.name == "Drama")
            state = controller.choose_genres(state, [drama.id])
            state = state.with_form(
                title="Raging Bull",
                release_year="1980",
                director="Martin Scorsese",
                budget="18000000",
            )
            state = controller.save(state)
            movie_id = state.current_movie_id
            
            state = controller.search(controller.reset(state), "ra")
            assert [m.title for m in controller.visible_movies] == ["Raging Bull"]
            
            state = controller.select_movie(state, movie_id)
            state = controller.save(state.with_form(country="USA"))
            assert MovieDao(db_manager).read(movie_id).country == "USA"
            
            state = controller.delete_focused(controller.select_movie(state, movie_id))
            assert MovieDao(db_manager).read(movie_id) is None
            assert [n.level for n in notices] == ["info", "info"]
        finally:
            db_manager.close()
