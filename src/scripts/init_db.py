#!/usr/bin/env python3
"""Create the yearly-planner SQLite3 database with the API request log tables."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import DB_PATH
from core.database import create_tables, get_connection


def create_database():
    """Create the database and tables if they don't exist."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)

    conn = get_connection()
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        create_tables(conn)
    finally:
        conn.close()
    print(f"Database created successfully at: {DB_PATH}")


if __name__ == "__main__":
    create_database()
