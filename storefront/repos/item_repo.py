# storefront/repos/item_repo.py
from contextlib import contextmanager
from typing import Iterator, List

from pydantic import ValidationError as SchemaError

from storefront.data.models import ItemModel
from storefront.data.store import ITEMS, JsonStore
from storefront.domain.errors import StoreError


def _load(records: list) -> List[ItemModel]:
    try:
        return [ItemModel.model_validate(r) for r in records]
    except SchemaError as e:
        raise StoreError(f"Malformed item record: {e}") from e


class ItemRepo:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_items(self) -> List[ItemModel]:
        return _load(self.store.read(ITEMS)[ITEMS])

    def get_item(self, item_id: str) -> ItemModel | None:
        return next((i for i in self.list_items() if i.id == item_id), None)

    @contextmanager
    def session(self) -> Iterator[List[ItemModel]]:
        with self.store.transaction(ITEMS) as doc:
            items = _load(doc[ITEMS])
            yield items
            doc[ITEMS] = [i.model_dump() for i in items]
