# storefront/data/store.py
import json
import os
import tempfile
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from storefront.domain.errors import StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

USERS = "users"
ITEMS = "items"
COLLECTIONS = (USERS, ITEMS)


class JsonStore:
    """
    Plikowy magazyn kolekcji, jeden dokument JSON na kolekcje:
    users.json -> {"users": [...]}, items.json -> {"items": [...]}

    kazdy zapis nadpisuje caly plik (tmp + os.replace, wiec czytajacy
    nigdy nie widzi polowy pliku)
    transaction() trzyma lock kolekcji na calym read-modify-write
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        self._locks = {name: threading.RLock() for name in COLLECTIONS}

    def path(self, collection: str) -> str:
        self._check(collection)
        return os.path.join(self.data_dir, f"{collection}.json")

    def init(self) -> None:
        """Load-or-create-empty: tworzy katalog i brakujace pliki kolekcji."""
        try:
            os.makedirs(self.data_dir, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create data directory {self.data_dir}: {e}") from e

        for name in COLLECTIONS:
            with self._locks[name]:
                if not os.path.exists(self.path(name)):
                    logger.info(f"Creating empty collection file {self.path(name)}")
                    self.write(name, {name: []})

    def read(self, collection: str) -> Dict[str, Any]:
        path = self.path(collection)
        try:
            with open(path, "r", encoding="utf-8") as f:
                doc = json.load(f)
        except OSError as e:
            raise StoreError(f"Cannot read {collection}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"Malformed {collection} file: {e}") from e

        if not isinstance(doc, dict) or not isinstance(doc.get(collection), list):
            raise StoreError(f"Malformed {collection} file: missing '{collection}' list")
        return doc

    def write(self, collection: str, doc: Dict[str, Any]) -> None:
        path = self.path(collection)
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{collection}.", suffix=".tmp", dir=self.data_dir
            )
        except OSError as e:
            raise StoreError(f"Cannot write {collection}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(doc, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreError(f"Cannot write {collection}: {e}") from e

    @contextmanager
    def transaction(self, collection: str) -> Iterator[Dict[str, Any]]:
        #zapis tylko gdy blok skonczyl sie bez wyjatku
        self._check(collection)
        with self._locks[collection]:
            doc = self.read(collection)
            yield doc
            self.write(collection, doc)

    @staticmethod
    def _check(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise StoreError(f"Unknown collection: {collection}")
