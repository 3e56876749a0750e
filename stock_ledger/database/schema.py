from pathlib import Path
import logging
import sqlite3
import sys

from ..constants import COLLECTIONS, TABLE_COLLECTIONS, TABLE_TENANTS

_log = logging.getLogger(__name__)

_COLLECTION_CHECK = ", ".join(f"'{c}'" for c in COLLECTIONS)

SQL = rf"""
PRAGMA foreign_keys = ON;

/* ======================== TENANTS ======================== */

/* One row per registered business. Identity (login, passwords) lives elsewhere;
   the ledger only needs a stable id to namespace collections. */
CREATE TABLE IF NOT EXISTS {TABLE_TENANTS} (
    tenant_id     TEXT PRIMARY KEY,
    display_name  TEXT NOT NULL,
    created_date  DATE DEFAULT CURRENT_DATE
);

/* ======================== COLLECTIONS ======================== */

/* Each tenant owns five collections. A collection is stored whole as a JSON
   array of records and is always overwritten whole (last writer wins). */
CREATE TABLE IF NOT EXISTS {TABLE_COLLECTIONS} (
    tenant_id   TEXT NOT NULL,
    collection  TEXT NOT NULL CHECK (collection IN ({_COLLECTION_CHECK})),
    payload     TEXT NOT NULL DEFAULT '[]',
    updated_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    PRIMARY KEY (tenant_id, collection),
    FOREIGN KEY (tenant_id) REFERENCES {TABLE_TENANTS}(tenant_id) ON DELETE CASCADE
);
CREATE INDEX IF NOT EXISTS idx_tenant_collections_tenant ON {TABLE_COLLECTIONS}(tenant_id);
"""


def apply_schema(conn: sqlite3.Connection) -> None:
    """Apply the (idempotent) schema on an open connection."""
    conn.executescript(SQL)
    conn.commit()


def init_schema(db_path: Path | str = "stock_ledger.db") -> None:
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(db_path) as conn:
        conn.execute("PRAGMA journal_mode=WAL;")
        apply_schema(conn)
    conn.close()
    _log.info("schema applied to %s", db_path)


if __name__ == "__main__":
    from ..config import DB_PATH
    from ..utils.loggers import get_logger

    get_logger()

    target = sys.argv[1] if len(sys.argv) > 1 else DB_PATH
    init_schema(target)
