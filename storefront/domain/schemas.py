# storefront/domain/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional

from storefront.data.models import CartLineModel, ItemModel


class SignupIn(BaseModel):
    """Schema dla rejestracji. Pola opcjonalne, wymagalnosc sprawdza AuthService (400 zamiast 422)."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginIn(BaseModel):
    """Schema dla logowania."""

    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """Publiczne pola uzytkownika (bez hasha i koszyka)."""

    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthOut(BaseModel):
    token: str
    user: UserPublic


class Identity(BaseModel):
    """Tozsamosc z tokena, przekazywana do handlerow."""

    id: str
    email: str
    name: str


class ItemCreateIn(BaseModel):
    """
    Schema dla tworzenia produktu
    price jako Any -> koercja na liczbe w ItemService (np. "12.5" jest ok)
    """

    title: Optional[str] = None
    price: Any = None
    category: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None


class ItemUpdateIn(BaseModel):
    """Czesciowa aktualizacja, liczą sie tylko przeslane pola. Inne klucze tez sa scalane, id ignorowane."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    price: Any = None
    category: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None


class ItemsOut(BaseModel):
    items: List[ItemModel]


class CartAddIn(BaseModel):
    #dowolny typ, nieznane id (np. liczba) -> 404 a nie 400
    itemId: Any = None
    qty: Any = None


class CartRemoveIn(BaseModel):
    itemId: Any = None


class CartOut(BaseModel):
    cart: List[CartLineModel]
