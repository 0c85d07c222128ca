"""Repository for recently searched city names.

Most-recent-first, deduplicated by exact string match, capped in size.
"""

import sqlite3

DEFAULT_MAX_ENTRIES = 5


def record_search(
    conn: sqlite3.Connection, city: str, max_entries: int = DEFAULT_MAX_ENTRIES
) -> list[str]:
    """Move a city to the front of the list and prune. Returns the new list."""
    city = city.strip()
    if not city:
        return list_recent(conn, max_entries)
    conn.execute("DELETE FROM recent_searches WHERE city = ?", (city,))
    conn.execute(
        "INSERT INTO recent_searches (city) VALUES (?)", (city,)
    )
    conn.execute(
        "DELETE FROM recent_searches WHERE city NOT IN ("
        "  SELECT city FROM recent_searches "
        "  ORDER BY rowid DESC LIMIT ?"
        ")",
        (max_entries,),
    )
    conn.commit()
    return list_recent(conn, max_entries)


def list_recent(
    conn: sqlite3.Connection, limit: int = DEFAULT_MAX_ENTRIES
) -> list[str]:
    # rowid grows with every insert, so it tracks recency
    rows = conn.execute(
        "SELECT city FROM recent_searches "
        "ORDER BY rowid DESC LIMIT ?",
        (limit,),
    ).fetchall()
    return [row["city"] for row in rows]


def clear_recent(conn: sqlite3.Connection) -> int:
    """Remove all entries. Returns how many were removed."""
    cursor = conn.execute("DELETE FROM recent_searches")
    conn.commit()
    return cursor.rowcount
