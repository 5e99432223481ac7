"""
Tests for the library maintenance scripts.
"""

import importlib.util
import logging
from pathlib import Path

import pytest

from moviedb.database import ActorDao, MovieDao
from moviedb.utils import get_logger

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def load_script(name):
    loader_spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(loader_spec)
    loader_spec.loader.exec_module(module)
    return module


@pytest.fixture
def init_library():
    return load_script("init_library")


class TestFillDemoData:
    """Tests for init_library.fill_demo_data."""
    
    def test_fills_every_demo_movie(self, db_manager, init_library):
        created = init_library.fill_demo_data(db_manager, verbose=False)
        
        assert created == len(init_library.DEMO_MOVIES)
        assert MovieDao(db_manager).count() == len(init_library.DEMO_MOVIES)
        assert ActorDao(db_manager).count() == len(init_library.DEMO_ACTORS)
    
    def test_second_run_adds_nothing(self, db_manager, init_library):
        init_library.fill_demo_data(db_manager, verbose=False)
        
        assert init_library.fill_demo_data(db_manager, verbose=False) == 0
        assert MovieDao(db_manager).count() == len(init_library.DEMO_MOVIES)
        assert ActorDao(db_manager).count() == len(init_library.DEMO_ACTORS)
    
    def test_demo_movies_link_actors(self, db_manager, init_library):
        init_library.fill_demo_data(db_manager, verbose=False)
        
        fight_club = next(m for m in MovieDao(db_manager).read_all() if m.title == "Fight Club")
        names = [ActorDao(db_manager).read(actor_id).name for actor_id in fight_club.actor_ids]
        assert names == ["Brad Pitt", "Edward Norton"]


class TestLogging:
    """Tests for get_logger."""
    
    def test_get_logger_sets_level(self):
        logger = get_logger("moviedb.tests.verbose", level="debug")
        assert logger.level == logging.DEBUG
    
    def test_get_logger_keeps_level_by_default(self):
        logger = get_logger("moviedb.tests.plain")
        assert logger.level == logging.NOTSET
        assert logger is logging.getLogger("moviedb.tests.plain")
