# storefront/api/routers/items.py
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from storefront.api.deps import get_store, require_user
from storefront.data.models import ItemModel
from storefront.data.store import JsonStore
from storefront.domain.schemas import Identity, ItemCreateIn, ItemsOut, ItemUpdateIn
from storefront.services.item_service import ItemService

router = APIRouter(prefix="/api/items", tags=["items"])


def get_service(store: JsonStore):
    return ItemService(store)


@router.get("", response_model=ItemsOut)
def list_items(
    q: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    min_price: Optional[str] = Query(default=None, alias="minPrice"),
    max_price: Optional[str] = Query(default=None, alias="maxPrice"),
    store: JsonStore = Depends(get_store),
):
    svc = get_service(store)
    return {"items": svc.list_items(q=q, category=category, min_price=min_price, max_price=max_price)}


@router.post("", response_model=ItemModel, status_code=201)
def create_item(
    identity: Identity = Depends(require_user),
    payload: Optional[ItemCreateIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    svc = get_service(store)
    return svc.create_item(payload or ItemCreateIn())


@router.put("/{item_id}", response_model=ItemModel)
def update_item(
    item_id: str,
    identity: Identity = Depends(require_user),
    payload: Optional[ItemUpdateIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    svc = get_service(store)
    return svc.update_item(item_id, payload or ItemUpdateIn())


@router.delete("/{item_id}", response_model=ItemModel)
def delete_item(
    item_id: str,
    identity: Identity = Depends(require_user),
    store: JsonStore = Depends(get_store),
):
    svc = get_service(store)
    return svc.delete_item(item_id)
