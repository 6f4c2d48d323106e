# storefront/services/item_service.py
import math
import uuid
from typing import Any, Dict, List

from pydantic import ValidationError as SchemaError

from storefront.data.models import ItemModel
from storefront.data.store import JsonStore
from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import ItemCreateIn, ItemUpdateIn
from storefront.repos.item_repo import ItemRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def parse_number(value: Any) -> int | float | None:
    """Liczba albo None (bool, pusty string, nan/inf tez None). Calkowite wartosci jako int."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _contains(haystack: str, needle: str) -> bool:
    return needle in (haystack or "").lower()


class ItemService:
    """
    query: list z filtrami (AND)
    commands: create, update, delete
    """

    def __init__(self, store: JsonStore):
        self.repo = ItemRepo(store)

    #query
    def list_items(
        self,
        q: str | None = None,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
    ) -> List[ItemModel]:
        items = self.repo.list_items()

        if q:
            needle = q.lower()
            items = [i for i in items if _contains(i.title, needle) or _contains(i.description, needle)]

        if category:
            wanted = category.lower()
            items = [i for i in items if (i.category or "").lower() == wanted]

        #nieliczbowe granice ceny ignorowane, bez bledu
        low = parse_number(min_price)
        if low is not None:
            items = [i for i in items if i.price >= low]

        high = parse_number(max_price)
        if high is not None:
            items = [i for i in items if i.price <= high]

        return items

    #commands
    def create_item(self, payload: ItemCreateIn) -> ItemModel:
        if not payload.title or payload.price is None or not payload.category:
            raise ValidationError("title, price, category are required")

        price = parse_number(payload.price)
        if price is None:
            raise ValidationError("price must be a number")

        item = ItemModel(
            id=str(uuid.uuid4()),
            title=payload.title,
            price=price,
            category=payload.category,
            image=payload.image or "",
            description=payload.description or "",
        )

        with self.repo.session() as items:
            items.append(item)

        logger.info(f"Created item {item.id} ({item.title})")
        return item

    def update_item(self, item_id: str, payload: ItemUpdateIn) -> ItemModel:
        #znane pola bez null + dowolne inne klucze z body (merge jak w oryginale), id pomijane
        changes: Dict[str, Any] = {
            k: v
            for k, v in payload.model_dump(exclude_unset=True).items()
            if k in ItemUpdateIn.model_fields and v is not None
        }
        changes.update({k: v for k, v in (payload.model_extra or {}).items() if k != "id"})

        if "price" in changes:
            price = parse_number(changes["price"])
            if price is None:
                raise ValidationError("price must be a number")
            changes["price"] = price

        with self.repo.session() as items:
            idx = next((n for n, i in enumerate(items) if i.id == item_id), None)
            if idx is None:
                raise NotFoundError("Item not found")

            #id niezmienne
            try:
                updated = ItemModel.model_validate({**items[idx].model_dump(), **changes, "id": item_id})
            except SchemaError as e:
                raise ValidationError(f"Invalid item fields: {e.errors()[0].get('msg')}") from e
            items[idx] = updated

        logger.info(f"Updated item {item_id}, fields: {sorted(changes)}")
        return updated

    def delete_item(self, item_id: str) -> ItemModel:
        with self.repo.session() as items:
            idx = next((n for n, i in enumerate(items) if i.id == item_id), None)
            if idx is None:
                raise NotFoundError("Item not found")
            removed = items.pop(idx)

        logger.info(f"Deleted item {item_id}")
        return removed
