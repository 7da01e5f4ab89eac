"""Definition stores (in-memory and SQLite) behind a common protocol.

Provides:
- DefinitionStore protocol
- MemoryStore, SqliteStore
"""

import sqlite3
import threading
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.constants import CacheConstants
from ..exceptions import CacheError
from ..logging_config import get_logger
from ..models.cache_models import CacheEntry

logger = get_logger(__name__)


@runtime_checkable
class DefinitionStore(Protocol):
    """Protocol for definition store implementations"""

    def get(self, term: str) -> CacheEntry | None: ...

    def insert(self, entry: CacheEntry) -> None: ...

    def entries(self, limit: int | None = None) -> list[CacheEntry]: ...

    def close(self) -> None: ...


class MemoryStore(DefinitionStore):
    def __init__(self) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()

    def get(self, term: str) -> CacheEntry | None:
        with self._lock:
            return self._entries.get(term)

    def insert(self, entry: CacheEntry) -> None:
        with self._lock:
            if entry.term in self._entries:
                raise CacheError(
                    "insert", "memory", KeyError(f"duplicate term: {entry.term}")
                )
            self._entries[entry.term] = entry

    def entries(self, limit: int | None = None) -> list[CacheEntry]:
        with self._lock:
            ordered = sorted(
                self._entries.values(), key=lambda e: e.created_at, reverse=True
            )
            return ordered[:limit] if limit else ordered

    def close(self) -> None:
        pass


class SqliteStore(DefinitionStore):
    """On-disk store, one row per term with a unique constraint on the term.

    The connection is opened once here and held until ``close``.
    """

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._lock = threading.RLock()
        try:
            self._conn = sqlite3.connect(str(self.db_path))
            self._conn.row_factory = sqlite3.Row
            with self._conn:
                self._conn.execute(CacheConstants.CREATE_TABLE_SQL)
                self._conn.execute(CacheConstants.CREATE_INDEX_SQL)
        except sqlite3.Error as e:
            raise CacheError("open", "sqlite", e) from e
        logger.debug(f"Opened definition store at {self.db_path}")

    def get(self, term: str) -> CacheEntry | None:
        with self._lock:
            try:
                row = self._conn.execute(
                    "SELECT term, definition, created_at, reviewed "
                    "FROM entries WHERE term = ?",
                    (term,),
                ).fetchone()
            except sqlite3.Error as e:
                raise CacheError("get", "sqlite", e) from e
            return self._row_to_entry(row) if row else None

    def insert(self, entry: CacheEntry) -> None:
        with self._lock:
            try:
                with self._conn:
                    self._conn.execute(
                        "INSERT INTO entries (term, definition, created_at, reviewed) "
                        "VALUES (?, ?, ?, ?)",
                        (
                            entry.term,
                            entry.definition,
                            entry.created_at.isoformat(),
                            int(entry.reviewed),
                        ),
                    )
            except sqlite3.Error as e:
                raise CacheError("insert", "sqlite", e) from e

    def entries(self, limit: int | None = None) -> list[CacheEntry]:
        query = (
            "SELECT term, definition, created_at, reviewed "
            "FROM entries ORDER BY created_at DESC, id DESC"
        )
        params: tuple[int, ...] = ()
        if limit:
            query += " LIMIT ?"
            params = (limit,)
        with self._lock:
            try:
                rows = self._conn.execute(query, params).fetchall()
            except sqlite3.Error as e:
                raise CacheError("entries", "sqlite", e) from e
            return [self._row_to_entry(row) for row in rows]

    def close(self) -> None:
        with self._lock:
            try:
                self._conn.close()
            except sqlite3.Error as e:
                logger.warning(f"Failed to close definition store: {e}")

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> CacheEntry:
        return CacheEntry(
            term=row["term"],
            definition=row["definition"],
            created_at=datetime.fromisoformat(row["created_at"]),
            reviewed=bool(row["reviewed"]),
        )
