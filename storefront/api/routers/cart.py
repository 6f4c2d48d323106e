# storefront/api/routers/cart.py
from typing import Optional

from fastapi import APIRouter, Body, Depends

from storefront.api.deps import get_store, require_user
from storefront.data.store import JsonStore
from storefront.domain.schemas import CartAddIn, CartOut, CartRemoveIn, Identity
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(store: JsonStore):
    return CartService(store)


@router.get("", response_model=CartOut)
def get_cart(
    identity: Identity = Depends(require_user),
    store: JsonStore = Depends(get_store),
):
    svc = get_service(store)
    return {"cart": svc.get_cart(identity.id)}


@router.post("/add", response_model=CartOut)
def add_to_cart(
    identity: Identity = Depends(require_user),
    payload: Optional[CartAddIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    payload = payload or CartAddIn()
    svc = get_service(store)
    return {"cart": svc.add_item(identity.id, payload.itemId, payload.qty)}


@router.post("/remove", response_model=CartOut)
def remove_from_cart(
    identity: Identity = Depends(require_user),
    payload: Optional[CartRemoveIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    payload = payload or CartRemoveIn()
    svc = get_service(store)
    return {"cart": svc.remove_item(identity.id, payload.itemId)}
