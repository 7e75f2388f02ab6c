from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_STORE_NAMESPACE
from .store import CollectionStore, Document, decode_document, encode_document, namespaced


class InMemoryStore(CollectionStore):
    """Process-local store.

    Documents are kept as JSON text, like a browser's localStorage, so
    nothing handed out by ``get`` aliases what the store holds.
    """

    def __init__(self, namespace: str = DEFAULT_STORE_NAMESPACE):
        self._namespace = namespace
        self._raw: dict[str, str] = {}

    def get(self, name: str) -> Optional[Document]:
        key = namespaced(self._namespace, name)
        return decode_document(self._raw.get(key), key)

    def set(self, name: str, document: Document) -> None:
        self._raw[namespaced(self._namespace, name)] = encode_document(document)

    def remove(self, name: str) -> None:
        self._raw.pop(namespaced(self._namespace, name), None)

    def put_raw(self, name: str, raw: str) -> None:
        """Write text verbatim (used to simulate damaged storage)."""
        self._raw[namespaced(self._namespace, name)] = raw

    def keys(self) -> list[str]:
        return sorted(self._raw)
