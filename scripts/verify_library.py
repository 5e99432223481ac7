#!/usr/bin/env python
"""
Library verification script.

This script performs checks on a movie library:
1. Schema (all five tables present)
2. Basic statistics (counts)
3. Referential integrity (join rows pointing at missing movies, actors or genres)
4. Movies without actors or genres

Usage:
    python scripts/verify_library.py "My Movies"
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from moviedb.database import (
    ActorDao, ActorRow, DataAccessError, GenreDao, GenreRow, MovieDao, MovieRow,
    movie_actors, movie_genres, verify_schema,
)
from moviedb.database.connection import DatabaseManager
from moviedb.library import library_exists, library_path
from moviedb.utils import get_logger

logger = get_logger(__name__)


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_basic_stats(db_manager):
    """Print entity counts."""
    print_section("1. Library Statistics")
    print(f"  Movies:  {MovieDao(db_manager).count():,}")
    print(f"  Actors:  {ActorDao(db_manager).count():,}")
    print(f"  Genres:  {GenreDao(db_manager).count():,}")
    return True


def count_orphans(session, column, target):
    """Count join rows whose column points at no row of the target table."""
    stmt = select(column).where(column.not_in(select(target.id)))
    return len(session.execute(stmt).all())


def check_integrity(db_manager):
    """Check that every join row references existing rows."""
    print_section("2. Referential Integrity")
    
    checks = [
        ("movie_actors.movie_id", movie_actors.c.movie_id, MovieRow),
        ("movie_actors.actor_id", movie_actors.c.actor_id, ActorRow),
        ("movie_genres.movie_id", movie_genres.c.movie_id, MovieRow),
        ("movie_genres.genre_id", movie_genres.c.genre_id, GenreRow),
    ]
    
    passed = True
    with db_manager.session_scope() as session:
        for label, column, target in checks:
            orphans = count_orphans(session, column, target)
            if orphans:
                print(f"  [FAIL] {label}: {orphans} orphaned rows")
                passed = False
            else:
                print(f"  [OK]   {label}")
    return passed


def check_coverage(db_manager):
    """Report movies without actors or genres."""
    print_section("3. Coverage")
    movies = MovieDao(db_manager).read_all()
    no_actors = [m.title for m in movies if not m.actor_ids]
    no_genres = [m.title for m in movies if not m.genre_ids]
    print(f"  Movies without actors: {len(no_actors)}")
    for title in no_actors[:10]:
        print(f"    - {title}")
    print(f"  Movies without genres: {len(no_genres)}")
    for title in no_genres[:10]:
        print(f"    - {title}")
    return True


def main():
    parser = argparse.ArgumentParser(description="Verify a movie library")
    parser.add_argument("name", help="Library name")
    parser.add_argument("--library-dir", type=Path, default=None,
                        help="Directory of library files (default: MOVIEDB_LIBRARY_DIR)")
    args = parser.parse_args()
    
    try:
        if not library_exists(args.name, args.library_dir):
            print(f"[ERROR] Library does not exist: {library_path(args.name, args.library_dir)}")
            return 1
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1
    
    # Opened directly so that missing tables are reported, not created
    db_manager = DatabaseManager(str(library_path(args.name, args.library_dir)))
    
    try:
        print_section("0. Schema")
        if not verify_schema(db_manager):
            print("  [FAIL] Missing tables")
            return 1
        print("  [OK]   All tables exist")
        
        results = [
            check_basic_stats(db_manager),
            check_integrity(db_manager),
            check_coverage(db_manager),
        ]
    except DataAccessError as e:
        logger.error("Verifying library failed. SQLite code: %s (%s), message: %s",
                     e.code, e.name, e.message)
        print(f"  [FAIL] {e}")
        return 1
    finally:
        db_manager.close()
    
    if all(results):
        print("\n✅ Library verification passed!")
        return 0
    print("\n❌ Library verification found problems!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
