"""
Unit tests for the actor data-access object.
"""

import pytest

from moviedb.models import Actor


class TestActorDao:
    """Tests for ActorDao CRUD operations."""
    
    def test_create(self, actor_dao):
        """Create a new actor and read it back."""
        actor_id = actor_dao.create(Actor(name="New Actor"))
        
        fetched = actor_dao.read(actor_id)
        assert fetched is not None
        assert fetched.id == actor_id
        assert fetched.name == "New Actor"
    
    def test_read_existing_actor(self, filled_db, actor_dao):
        fetched = actor_dao.read(6)
        assert fetched == Actor(id=6, name="Leonardo Di Caprio")
    
    def test_read_not_found(self, filled_db, actor_dao):
        """Reading a nonexistent actor returns None."""
        assert actor_dao.read(99) is None
    
    def test_get_actor_by_id_is_read(self, filled_db, actor_dao):
        assert actor_dao.get_actor_by_id(3) == actor_dao.read(3)
    
    def test_find_by_name(self, filled_db, actor_dao):
        assert actor_dao.find_by_name("Jamie Foxx").id == 3
        assert actor_dao.find_by_name("jamie foxx") is None
    
    def test_read_all(self, filled_db, actor_dao):
        actors = actor_dao.read_all()
        assert [a.id for a in actors] == [1, 2, 3, 4, 5, 6]
        assert actors[0].name == "Robert De Niro"
    
    def test_update(self, filled_db, actor_dao):
        """Rename an existing actor."""
        actor = actor_dao.read(2)
        actor.name = "Test Name"
        
        assert actor_dao.update(actor) is True
        assert actor_dao.read(2).name == "Test Name"
    
    def test_update_not_found(self, actor_dao):
        assert actor_dao.update(Actor(id=99, name="Nobody")) is False
        assert actor_dao.update(Actor(name="Nobody")) is False
    
    def test_delete(self, filled_db, actor_dao):
        assert actor_dao.delete(4) is True
        assert actor_dao.read(4) is None
        assert actor_dao.count() == 5
    
    def test_delete_not_found(self, actor_dao):
        assert actor_dao.delete(99) is False
    
    def test_delete_unlinks_actor_from_movies(self, filled_db, actor_dao, movie_dao):
        """Deleting an actor removes it from every movie (cascade)."""
        actor_dao.delete(6)  # Leonardo Di Caprio
        
        assert movie_dao.read(1).actor_ids == []
        assert movie_dao.read(2).actor_ids == [5]
    
    def test_empty_name_rejected_by_record(self):
        with pytest.raises(ValueError):
            Actor(name="")
