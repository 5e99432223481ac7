"""
Data-access object for actors.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select

from moviedb.database.connection import DatabaseManager
from moviedb.database.models import ActorRow
from moviedb.models import Actor

logger = logging.getLogger(__name__)


class ActorDao:
    """
    CRUD operations for actors.
    
    Deleting an actor also drops its movie_actors rows through the
    ON DELETE CASCADE foreign key; nothing else here touches the join table.
    """
    
    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
    
    def create(self, actor: Actor) -> int:
        """
        Insert an actor.
        
        Args:
            actor: Actor to insert (its id is ignored)
            
        Returns:
            Generated actor id
        """
        with self.db_manager.session_scope(f"Creating actor '{actor.name}'") as session:
            row = ActorRow(name=actor.name)
            session.add(row)
            session.flush()
            actor_id = row.id
        logger.debug("Created actor %d '%s'", actor_id, actor.name)
        return actor_id
    
    def read(self, actor_id: int) -> Optional[Actor]:
        """
        Get an actor by id.
        
        Args:
            actor_id: Actor id
            
        Returns:
            Actor or None if not found
        """
        with self.db_manager.session_scope(f"Reading actor {actor_id}") as session:
            row = session.get(ActorRow, actor_id)
            return Actor.model_validate(row) if row is not None else None

    def get_actor_by_id(self, actor_id: int) -> Optional[Actor]:
        """Alias of read()."""
        return self.read(actor_id)
    
    def find_by_name(self, name: str) -> Optional[Actor]:
        """Get the first actor (by id) with exactly this name, or None."""
        with self.db_manager.session_scope(f"Finding actor '{name}'") as session:
            row = session.scalars(
                select(ActorRow).where(ActorRow.name == name).order_by(ActorRow.id)
            ).first()
            return Actor.model_validate(row) if row is not None else None

    def read_all(self) -> List[Actor]:
        """Get every actor, ordered by id."""
        with self.db_manager.session_scope("Reading all actors") as session:
            rows = session.scalars(select(ActorRow).order_by(ActorRow.id)).all()
            return [Actor.model_validate(row) for row in rows]

    def update(self, actor: Actor) -> bool:
        """
        Rename an actor.
        
        Args:
            actor: Actor carrying the id of the row to update
            
        Returns:
            True if the actor existed and was updated, False otherwise
        """
        if actor.id is None:
            return False
        
        with self.db_manager.session_scope(f"Updating actor {actor.id}") as session:
            row = session.get(ActorRow, actor.id)
            if row is None:
                return False
            row.name = actor.name
        return True
    
    def delete(self, actor_id: int) -> bool:
        """
        Delete an actor.
        
        Args:
            actor_id: Actor id
            
        Returns:
            True if the actor was deleted, False if not found
        """
        with self.db_manager.session_scope(f"Deleting actor {actor_id}") as session:
            result = session.execute(delete(ActorRow).where(ActorRow.id == actor_id))
            return result.rowcount > 0

    def count(self) -> int:
        """Get total count of actors."""
        with self.db_manager.session_scope("Counting actors") as session:
            return session.scalar(select(func.count(ActorRow.id)))
