from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.constants import DEFAULT_STORE_NAMESPACE
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .store import CollectionStore, Document, decode_document, encode_document, namespaced


class MySQLStore(CollectionStore):
    """Remote store: documents live in the ``kv_documents`` table."""

    def __init__(self, conn_factory: DatabaseConnection, namespace: str = DEFAULT_STORE_NAMESPACE):
        self._conn_factory = conn_factory
        self._namespace = namespace

    def get(self, name: str) -> Optional[Document]:
        key = namespaced(self._namespace, name)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT document FROM kv_documents WHERE store_key=%s", (key,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            # A failed read must never look like an empty collection.
            raise StoreError(f"Read of {key!r} failed: {e}") from e
        if not row:
            return None
        return decode_document(row["document"], key)

    def set(self, name: str, document: Document) -> None:
        key = namespaced(self._namespace, name)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO kv_documents(store_key, document)
                    VALUES(%s, %s)
                    ON DUPLICATE KEY UPDATE document=VALUES(document)
                    """,
                    (key, encode_document(document)),
                )
        except mysql.connector.Error as e:
            raise StoreError(f"Write of {key!r} failed: {e}") from e

    def remove(self, name: str) -> None:
        key = namespaced(self._namespace, name)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM kv_documents WHERE store_key=%s", (key,))
        except mysql.connector.Error as e:
            raise StoreError(f"Delete of {key!r} failed: {e}") from e
