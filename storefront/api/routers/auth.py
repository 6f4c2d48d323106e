# storefront/api/routers/auth.py
from typing import Optional

from fastapi import APIRouter, Body, Depends

from storefront.api.deps import get_store
from storefront.data.store import JsonStore
from storefront.domain.schemas import AuthOut, LoginIn, SignupIn
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_service(store: JsonStore):
    return AuthService(store)


@router.post("/signup", response_model=AuthOut)
def signup(
    payload: Optional[SignupIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    payload = payload or SignupIn()
    svc = get_service(store)
    return svc.signup(payload.name, payload.email, payload.password)


@router.post("/login", response_model=AuthOut)
def login(
    payload: Optional[LoginIn] = Body(default=None),
    store: JsonStore = Depends(get_store),
):
    payload = payload or LoginIn()
    svc = get_service(store)
    return svc.login(payload.email, payload.password)
