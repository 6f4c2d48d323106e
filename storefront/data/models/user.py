from typing import List
from pydantic import BaseModel, ConfigDict, Field

from storefront.data.models.cart_line import CartLineModel


class UserModel(BaseModel):
    """Rekord kolekcji users (users.json), koszyk osadzony w uzytkowniku."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str
    email: str
    password_hash: str = Field(..., alias="passwordHash")
    cart: List[CartLineModel] = Field(default_factory=list)

    def find_line(self, item_id: str) -> CartLineModel | None:
        return next((line for line in self.cart if line.item.id == item_id), None)
