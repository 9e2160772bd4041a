#!/usr/bin/env python3
"""
Postboard Server - Setup and Seed Script

This script prepares the Postboard database:
1. Creates the database schema (users and posts tables)
2. Optionally inserts sample posts (--seed)
3. Optionally deletes all posts (--unseed)

The database location comes from POSTBOARD_DATABASE_URL, as for the server.

Usage:
    python setup_server.py
    python setup_server.py --seed
    python setup_server.py --seed --count 10
    python setup_server.py --unseed
"""

import argparse
import sys
from pathlib import Path

# Ensure we can import from the same directory
sys.path.insert(0, str(Path(__file__).parent))

from config import LoadConfig
from managers.database_manager import DatabaseManager


def print_header():
    """Print script header"""
    print("=" * 70)
    print("Postboard Server - Setup and Seed Script")
    print("=" * 70)
    print()


def print_section(title):
    """Print section header"""
    print()
    print("-" * 70)
    print(f"  {title}")
    print("-" * 70)


def initialize_database(db_manager: DatabaseManager):
    """Create any missing tables"""
    print_section("Database Initialization")

    print(f"-> Database: {db_manager.engine.url.render_as_string(hide_password=True)}")

    try:
        db_manager.InitializeDatabase()
        print("[OK] Database schema ready")

    except Exception as e:
        print(f"[ERROR] Database initialization failed: {str(e)}")
        raise


def seed_posts(db_manager: DatabaseManager, count: int):
    """Insert sample posts"""
    print_section("Seed Posts")

    try:
        inserted = db_manager.SeedPosts(count)
        print(f"[OK] Inserted {inserted} sample posts")

    except Exception as e:
        print(f"[ERROR] Seeding failed: {str(e)}")
        raise


def unseed_posts(db_manager: DatabaseManager):
    """Delete all posts"""
    print_section("Remove Posts")

    try:
        deleted = db_manager.UnseedPosts()
        print(f"[OK] Deleted {deleted} posts")

    except Exception as e:
        print(f"[ERROR] Removing posts failed: {str(e)}")
        raise


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Set up the Postboard database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--seed",
        action="store_true",
        help="Insert sample posts after creating the schema"
    )
    action.add_argument(
        "--unseed",
        action="store_true",
        help="Delete all posts after creating the schema"
    )

    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Number of sample posts to insert with --seed (default: 5)"
    )

    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")

    return args


def main(argv=None):
    """Main setup script entry point"""
    args = parse_args(argv)

    print_header()

    config = LoadConfig()
    db_manager = DatabaseManager(config.database_url)

    try:
        initialize_database(db_manager)

        if args.seed:
            seed_posts(db_manager, args.count)
        elif args.unseed:
            unseed_posts(db_manager)

    except Exception:
        print("\n[ERROR] Setup failed")
        return 1

    finally:
        db_manager.Dispose()

    print()
    print("=" * 70)
    print("[OK] Postboard Server Setup Complete!")
    print("=" * 70)
    print()
    print("  Start the server with: python server.py")
    print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
