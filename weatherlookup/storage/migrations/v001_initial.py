"""Initial schema: recent city searches."""

import sqlite3

DDL = [
    """
    CREATE TABLE IF NOT EXISTS recent_searches (
        city TEXT PRIMARY KEY,
        searched_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%f', 'now'))
    )
    """,
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
