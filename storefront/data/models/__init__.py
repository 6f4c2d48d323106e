from storefront.data.models.item import ItemModel
from storefront.data.models.cart_line import CartLineModel
from storefront.data.models.user import UserModel

__all__ = ["ItemModel", "CartLineModel", "UserModel"]
