from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable, Optional, Protocol, TypeVar, Union

logger = logging.getLogger(__name__)

Record = dict[str, Any]
Document = Union[list[Record], Record]
T = TypeVar("T")


class CollectionStore(Protocol):
    """Durable key -> document storage.

    Every collection is one document (a list of flat records) replaced as a
    whole on write. Reading a key that was never written returns ``None``,
    never an empty list, so the seed step can tell "never seeded" from
    "seeded empty". Corrupt data also reads as ``None``; a backend that cannot
    be reached raises ``StoreError`` instead.
    """

    def get(self, name: str) -> Optional[Document]:
        raise NotImplementedError

    def set(self, name: str, document: Document) -> None:
        raise NotImplementedError

    def remove(self, name: str) -> None:
        raise NotImplementedError


def namespaced(namespace: str, name: str) -> str:
    return f"{namespace}_{name}" if namespace else name


def encode_document(document: Document) -> str:
    return json.dumps(document, ensure_ascii=False, separators=(",", ":"))


def decode_document(raw: Optional[str], key: str) -> Optional[Document]:
    """JSON text -> document, or None when absent or unreadable."""
    if raw is None or raw == "":
        return None
    try:
        document = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Discarding unreadable document at %r", key)
        return None
    if not isinstance(document, (list, dict)):
        logger.warning("Discarding document of unexpected type %s at %r", type(document).__name__, key)
        return None
    return document


def read_records(store: CollectionStore, name: str) -> Optional[list[Record]]:
    """Load a collection as a list of records.

    Returns None when the collection is absent or is not a list. Non-dict
    entries are dropped.
    """
    document = store.get(name)
    if document is None:
        return None
    if not isinstance(document, list):
        logger.warning("Collection %r is not a list; treating as absent", name)
        return None
    records = [r for r in document if isinstance(r, dict)]
    if len(records) != len(document):
        logger.warning("Collection %r: dropped %d malformed entries", name, len(document) - len(records))
    return records


def parse_records(records: Iterable[Record], parser: Callable[[Record], T], name: str) -> list[T]:
    """Apply ``parser`` to each record, skipping (and logging) the ones it rejects."""
    out: list[T] = []
    for record in records:
        try:
            out.append(parser(record))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Skipping malformed %s record %r: %s", name, record.get("id"), e)
    return out
