"""SQLAlchemy engine configuration for the embedded SQLite store.

The pysqlite-style driver opens transactions lazily and only before DML,
which would let two SELECTs of one read observe different snapshots. Driver
autocommit is therefore switched off and every SQLAlchemy transaction emits
an explicit ``BEGIN``: ``DEFERRED`` for readers, ``IMMEDIATE`` for writers
(selected through the ``sqlite_begin_mode`` execution option). WAL journaling
lets readers proceed while the single writer holds the lock.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

BEGIN_MODE_OPTION = "sqlite_begin_mode"
READ_BEGIN_MODE = "DEFERRED"
WRITE_BEGIN_MODE = "IMMEDIATE"


def _get_async_url(database: str) -> str:
    """Turn a file path or sync SQLite URL into an aiosqlite URL."""
    if database.startswith("sqlite+aiosqlite:///"):
        return database
    if database.startswith("sqlite:///"):
        return database.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return f"sqlite+aiosqlite:///{database}"


def create_store_engine(database: str, busy_timeout_ms: int = 30000, echo: bool = False) -> AsyncEngine:
    """Create an async engine bound to a file-backed SQLite database."""
    engine = create_async_engine(_get_async_url(database), echo=echo, future=True)

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute(f"PRAGMA busy_timeout={int(busy_timeout_ms)}")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        mode = conn.get_execution_options().get(BEGIN_MODE_OPTION, READ_BEGIN_MODE)
        conn.exec_driver_sql(f"BEGIN {mode}")

    return engine
