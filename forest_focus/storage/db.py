#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import sqlite3

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class Database:
    def __init__(self, db_path: str = "forest_focus.db"):
        self.db_path = db_path
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row

    @classmethod
    def open_or_memory(cls, db_path: str) -> "Database":
        """
        Open db_path with its schema; if that fails, fall back to an
        in-memory database so the timer keeps working without persistence.
        """
        try:
            db = cls(db_path)
            db.init_schema()
            return db
        except (sqlite3.Error, OSError) as e:
            logger.warning(
                "cannot open %s (%s), state will not survive a restart", db_path, e
            )
        db = cls(MEMORY_DB)
        db.init_schema()
        return db

    def init_schema(self):
        cur = self.conn.cursor()
        cur.execute("""
            CREATE TABLE IF NOT EXISTS app_state (
                key TEXT PRIMARY KEY,
                value TEXT
            );
        """)
        self.conn.commit()

    def close(self):
        try:
            self.conn.close()
        except sqlite3.Error as e:
            logger.debug("close failed: %s", e)
