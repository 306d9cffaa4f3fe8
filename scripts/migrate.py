#!/usr/bin/env python3
"""
Database migration script for the plugin feed server
"""

import asyncio
import sys

from config import get_config
from core import StorageError, create_engine, migrate_up, migration_status


async def run_up() -> int:
    """Apply all pending migrations"""
    config = get_config()
    engine = create_engine(config.database)
    try:
        applied = await migrate_up(engine)
    finally:
        await engine.dispose()

    if applied == 0:
        print("No migrations to apply - database is up to date")
    else:
        print(f"Applied {applied} migration(s) successfully")
    return applied


async def show_status() -> None:
    """Show current migration status"""
    config = get_config()
    engine = create_engine(config.database)
    try:
        migrations = await migration_status(engine)
    finally:
        await engine.dispose()

    if not migrations:
        print("No migrations applied")
        return
    print("Applied migrations:")
    for migration in migrations:
        print(f"  {migration.version}: {migration.description} (applied: {migration.applied_at})")


def main(argv: list[str] | None = None) -> int:
    """Main entry point"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: migrate.py [up|status]")
        return 1

    command = args[0]
    try:
        if command == "up":
            asyncio.run(run_up())
        elif command == "status":
            asyncio.run(show_status())
        else:
            print("Unknown command. Use: up or status")
            return 1
    except StorageError as e:
        print(f"Database error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
