# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import logging
import sqlite3
from typing import Any, Dict, Optional

from forest_focus.core.config import STATE_KEY
from forest_focus.storage.db import Database

logger = logging.getLogger(__name__)


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (key,),
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )
        self.db.conn.commit()

    def delete(self, key: str) -> None:
        self.db.conn.execute("DELETE FROM app_state WHERE key=?", (key,))
        self.db.conn.commit()


class StateStore:
    """
    One JSON object under a fixed app_state key.

    load() gives the stored dict or None; save(patch) merges patch into it.
    Storage and parse failures never escape: a bad record reads as absent and
    a failed write is dropped.
    """

    def __init__(self, repo: AppStateRepo, key: str = STATE_KEY):
        self.repo = repo
        self.key = key

    def load(self) -> Optional[Dict[str, Any]]:
        try:
            raw = self.repo.get(self.key)
        except sqlite3.Error as e:
            logger.warning("state load failed: %s", e)
            return None
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("discarding unreadable state record: %s", e)
            return None
        if not isinstance(data, dict):
            logger.warning("discarding state record of type %s", type(data).__name__)
            return None
        return data

    def save(self, patch: Dict[str, Any]) -> None:
        current = self.load() or {}
        current.update(patch)
        try:
            self.repo.set(self.key, json.dumps(current))
        except (sqlite3.Error, TypeError, ValueError) as e:
            logger.warning("state save failed: %s", e)

    def clear(self) -> None:
        try:
            self.repo.delete(self.key)
        except sqlite3.Error as e:
            logger.warning("state clear failed: %s", e)
