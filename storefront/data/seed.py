# storefront/data/seed.py
import uuid

from storefront.data.models import ItemModel
from storefront.data.store import ITEMS, JsonStore
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_ITEMS = [
    {
        "title": "Mechanical Keyboard",
        "price": 89.99,
        "category": "electronics",
        "image": "/img/keyboard.jpg",
        "description": "Tenkeyless keyboard with brown switches",
    },
    {
        "title": "Wireless Mouse",
        "price": 24.5,
        "category": "electronics",
        "image": "/img/mouse.jpg",
        "description": "Ergonomic mouse, 2.4 GHz receiver",
    },
    {
        "title": "Notebook A5",
        "price": 4.0,
        "category": "office",
        "image": "/img/notebook.jpg",
        "description": "Dotted pages, 120 sheets",
    },
    {
        "title": "Ceramic Mug",
        "price": 12.0,
        "category": "kitchen",
        "image": "/img/mug.jpg",
        "description": "350 ml, dishwasher safe",
    },
]


def seed(store: JsonStore) -> int:
    """Zapisuje przykladowy katalog tylko gdy items jest puste. Zwraca liczbe dodanych."""
    with store.transaction(ITEMS) as doc:
        # not forcing: only seed if empty
        if doc[ITEMS]:
            return 0
        doc[ITEMS] = [
            ItemModel(id=str(uuid.uuid4()), **data).model_dump() for data in SAMPLE_ITEMS
        ]

    logger.info(f"Seeded catalog with {len(SAMPLE_ITEMS)} items")
    return len(SAMPLE_ITEMS)
