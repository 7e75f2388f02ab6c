from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.constants import DEFAULT_STORE_NAMESPACE
from ..core.exceptions import StoreError
from .store import CollectionStore, Document, decode_document, encode_document, namespaced

logger = logging.getLogger(__name__)


class JsonFileStore(CollectionStore):
    """Local store: one ``<namespace>_<name>.json`` file per document."""

    def __init__(self, directory: str | Path, namespace: str = DEFAULT_STORE_NAMESPACE):
        self._dir = Path(directory)
        self._namespace = namespace
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path:
        return self._dir / f"{namespaced(self._namespace, name)}.json"

    def get(self, name: str) -> Optional[Document]:
        path = self._path(name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.warning("Cannot decode %s: %s", path, e)
            return None
        except OSError as e:
            raise StoreError(f"Cannot read {path}: {e}") from e
        return decode_document(raw, str(path))

    def set(self, name: str, document: Document) -> None:
        path = self._path(name)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=path.stem, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(encode_document(document))
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StoreError(f"Cannot write {path}: {e}") from e

    def remove(self, name: str) -> None:
        self._path(name).unlink(missing_ok=True)
