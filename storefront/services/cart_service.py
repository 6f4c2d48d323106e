from typing import Any, List

from storefront.data.models import CartLineModel
from storefront.data.store import JsonStore
from storefront.domain.errors import NotFoundError
from storefront.repos.item_repo import ItemRepo
from storefront.repos.user_repo import UserRepo, find_by_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_item_id(item_id: Any) -> str | None:
    """Id produktu jako string, brak -> None. Liczba czy inny typ po prostu nie pasuje do zadnego id."""
    if item_id is None or item_id == "":
        return None
    return str(item_id)


def coerce_qty(qty: Any) -> int:
    """Ilosc jako int >= 1, nieprawidlowa wartosc -> 1."""
    if qty is None or isinstance(qty, bool):
        return 1
    try:
        value = int(float(qty))
    except (TypeError, ValueError, OverflowError):
        return 1
    return max(1, value)


class CartService:
    """
    Prosta implementacja cqrs dla koszyka osadzonego w uzytkowniku
    commands (add, remove) modyfikuja users.json
    query (get) tylko odczyt

    linia koszyka trzyma kopie produktu z chwili dodania,
    zmiana produktu w katalogu jej nie aktualizuje
    """

    def __init__(self, store: JsonStore):
        self.users = UserRepo(store)
        self.items = ItemRepo(store)

    #query - odczyt
    def get_cart(self, user_id: str) -> List[CartLineModel]:
        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user.cart

    #commands
    def add_item(self, user_id: str, item_id: Any, qty: Any = None) -> List[CartLineModel]:
        item_id = normalize_item_id(item_id)
        quantity = coerce_qty(qty)

        with self.users.session() as users:
            me = find_by_id(users, user_id)
            if not me:
                raise NotFoundError("User not found")

            #snapshot produktu z katalogu w momencie dodania
            item = self.items.get_item(item_id) if item_id else None
            if not item:
                raise NotFoundError("Item not found")

            existing = me.find_line(item_id)
            if existing:
                logger.info(
                    f"Item {item_id} already in cart of user {user_id}, "
                    f"qty {existing.qty} -> {existing.qty + quantity}"
                )
                existing.qty += quantity
            else:
                logger.info(f"Adding item {item_id} x{quantity} to cart of user {user_id}")
                me.cart.append(CartLineModel(item=item.model_copy(deep=True), qty=quantity))

            cart = me.cart

        return cart

    def remove_item(self, user_id: str, item_id: Any) -> List[CartLineModel]:
        item_id = normalize_item_id(item_id)
        with self.users.session() as users:
            me = find_by_id(users, user_id)
            if not me:
                raise NotFoundError("User not found")

            before = len(me.cart)
            me.cart = [line for line in me.cart if line.item.id != item_id]
            cart = me.cart

        if len(cart) != before:
            logger.info(f"Removed item {item_id} from cart of user {user_id}")
        return cart
