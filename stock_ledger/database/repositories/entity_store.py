"""
Per-tenant record storage.

Every tenant owns five collections (products, suppliers, buyers, stock,
sales). A collection is an ordered list of plain dicts, stored as one JSON
array per (tenant_id, collection) row and always written back whole. There is
no merge: the last `save()` for a tenant+collection wins.

Conventions:
- Records are dicts keyed by the public field names (`productName`,
  `sellPrice`, ...). Typed repositories convert them to dataclasses.
- `load()` on a collection that was never written returns [].
- Every `save()` commits immediately.
"""

from __future__ import annotations

import json
import logging
import sqlite3
import threading
from typing import Any, Dict, List

from ...constants import COLLECTIONS, TABLE_COLLECTIONS, TABLE_TENANTS
from ...errors import NotFound

_log = logging.getLogger(__name__)


def _ensure_collection(collection: str) -> str:
    if collection not in COLLECTIONS:
        raise ValueError(
            f"Unknown collection {collection!r}; expected one of: {', '.join(COLLECTIONS)}"
        )
    return collection


class EntityStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        # Use Row for named access
        self.conn.row_factory = sqlite3.Row
        # one connection may be shared by several tenants' writers
        self._io = threading.RLock()

    # ---------------------------- Tenants ----------------------------

    def register_tenant(self, tenant_id: str, display_name: str) -> None:
        """
        Record the tenant and create its five collections empty.
        Safe to call again for an existing tenant: nothing already stored is touched.
        """
        with self._io:
            self.conn.execute(
                f"INSERT OR IGNORE INTO {TABLE_TENANTS}(tenant_id, display_name) VALUES (?, ?)",
                (tenant_id, display_name),
            )
            self.conn.executemany(
                f"INSERT OR IGNORE INTO {TABLE_COLLECTIONS}(tenant_id, collection, payload) "
                "VALUES (?, ?, '[]')",
                [(tenant_id, c) for c in COLLECTIONS],
            )
            self.conn.commit()
        _log.info("tenant %s registered (%s)", tenant_id, display_name)

    def has_tenant(self, tenant_id: str) -> bool:
        with self._io:
            row = self.conn.execute(
                f"SELECT 1 FROM {TABLE_TENANTS} WHERE tenant_id=?", (tenant_id,)
            ).fetchone()
        return row is not None

    def display_name(self, tenant_id: str) -> str | None:
        with self._io:
            row = self.conn.execute(
                f"SELECT display_name FROM {TABLE_TENANTS} WHERE tenant_id=?", (tenant_id,)
            ).fetchone()
        return row["display_name"] if row else None

    # ---------------------------- Collections ----------------------------

    def load(self, tenant_id: str, collection: str) -> List[Dict[str, Any]]:
        _ensure_collection(collection)
        with self._io:
            row = self.conn.execute(
                f"SELECT payload FROM {TABLE_COLLECTIONS} WHERE tenant_id=? AND collection=?",
                (tenant_id, collection),
            ).fetchone()
        if row is None:
            return []
        records = json.loads(row["payload"] or "[]")
        if not isinstance(records, list):
            raise ValueError(
                f"Stored {collection} for tenant {tenant_id!r} is not a JSON array."
            )
        return records

    def save(self, tenant_id: str, collection: str, records: List[Dict[str, Any]]) -> None:
        """Overwrite the whole collection."""
        _ensure_collection(collection)
        payload = json.dumps(list(records), ensure_ascii=False)
        with self._io:
            self.conn.execute(
                f"""
                INSERT INTO {TABLE_COLLECTIONS}(tenant_id, collection, payload, updated_at)
                VALUES (?, ?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(tenant_id, collection) DO UPDATE SET
                    payload    = excluded.payload,
                    updated_at = excluded.updated_at
                """,
                (tenant_id, collection, payload),
            )
            self.conn.commit()
        _log.debug("saved %d %s record(s) for tenant %s", len(records), collection, tenant_id)


class CollectionRepo:
    """
    Base for the typed repositories: one collection of one tenant.

    Subclasses set `collection` and `record_type` (a dataclass with
    `from_dict()` / `to_dict()`).
    """

    collection: str = ""
    record_type: Any = None

    def __init__(self, store: EntityStore, tenant_id: str):
        self.store = store
        self.tenant_id = tenant_id

    def _load(self) -> list:
        return [self.record_type.from_dict(d) for d in self.store.load(self.tenant_id, self.collection)]

    def _save(self, records: list) -> None:
        self.store.save(self.tenant_id, self.collection, [r.to_dict() for r in records])

    def append(self, record) -> None:
        records = self._load()
        records.append(record)
        self._save(records)


class IdentifiedRepo(CollectionRepo):
    """Collections whose records carry an `id` and may be edited in place."""

    def get(self, record_id: str):
        for r in self._load():
            if r.id == record_id:
                return r
        return None

    def replace(self, record_id: str, record) -> None:
        """
        Replace the record with `record_id`, keeping its id and position.

        Raises:
            NotFound if the id is not in the collection.
        """
        records = self._load()
        for i, r in enumerate(records):
            if r.id == record_id:
                record.id = record_id
                records[i] = record
                self._save(records)
                return
        raise NotFound(self.collection, record_id)
