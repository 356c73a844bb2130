# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Persistent per-page analysis cache.

One row per page identifier in a single SQLite table. The language is stored
alongside the result, so a read for another language misses and a write for
another language replaces the row. Entries older than the TTL are treated as
absent on read and physically removed only by `evict_expired`.

Pages are keyed by URL: a page whose text changes under the same URL keeps
returning the stored analysis until the entry expires.
"""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import time
from collections.abc import Callable

from .config import CACHE_TTL_SECONDS, CacheSettings, load_cache_settings
from .models import AnalysisResult, CacheEntry

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS analyses (
    page_key TEXT PRIMARY KEY,
    language TEXT NOT NULL,
    content TEXT NOT NULL,
    result TEXT NOT NULL,
    timestamp REAL NOT NULL
)
"""


class ResultCache:
    def __init__(
        self,
        path: str = MEMORY_PATH,
        *,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.path = path if path == MEMORY_PATH else os.path.expanduser(path)
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        if self.path != MEMORY_PATH:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
        self._conn = sqlite3.connect(self.path)
        with self._conn:
            self._conn.execute(_SCHEMA)

    @classmethod
    def from_settings(cls, settings: CacheSettings | None = None) -> ResultCache:
        settings = settings or load_cache_settings()
        return cls(settings.path, ttl_seconds=settings.ttl_seconds)

    def get_entry(self, page_key: str, language: str) -> CacheEntry | None:
        row = self._conn.execute(
            "SELECT page_key, language, content, result, timestamp FROM analyses WHERE page_key = ?",
            (page_key,),
        ).fetchone()
        if row is None:
            return None
        entry = self._row_to_entry(row)
        if entry is None or entry.language != language:
            return None
        if entry.is_expired(self.clock(), self.ttl_seconds):
            logger.debug("Cache entry for %s is past TTL", page_key)
            return None
        return entry

    def get(self, page_key: str, language: str) -> AnalysisResult | None:
        entry = self.get_entry(page_key, language)
        return entry.result if entry is not None else None

    def put(self, page_key: str, content: str, result: AnalysisResult, language: str) -> None:
        with self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO analyses (page_key, language, content, result, timestamp) VALUES (?, ?, ?, ?, ?)",
                (page_key, language, content, json.dumps(result.to_dict(), ensure_ascii=False), self.clock()),
            )

    def evict_expired(self) -> int:
        """Delete every entry older than the TTL; returns the number removed."""
        now = self.clock()
        expired = [
            page_key
            for page_key, timestamp in self._conn.execute("SELECT page_key, timestamp FROM analyses")
            if now - timestamp > self.ttl_seconds
        ]
        if expired:
            with self._conn:
                self._conn.executemany("DELETE FROM analyses WHERE page_key = ?", [(key,) for key in expired])
            logger.debug("Evicted %d expired cache entries", len(expired))
        return len(expired)

    def clear(self) -> None:
        with self._conn:
            self._conn.execute("DELETE FROM analyses")

    def __len__(self) -> int:
        return int(self._conn.execute("SELECT COUNT(*) FROM analyses").fetchone()[0])

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> ResultCache:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

    @staticmethod
    def _row_to_entry(row: tuple) -> CacheEntry | None:
        page_key, language, content, raw_result, timestamp = row
        try:
            result = AnalysisResult.from_mapping(json.loads(raw_result))
        except (TypeError, ValueError) as exc:
            logger.warning("Discarding unreadable cache entry for %s: %s", page_key, exc)
            return None
        return CacheEntry(
            page_key=page_key,
            language=language,
            content=content,
            result=result,
            timestamp=float(timestamp),
        )


__all__ = ["ResultCache"]
