from pydantic import BaseModel, ConfigDict, Field

from storefront.data.models.item import ItemModel


class CartLineModel(BaseModel):
    """
    Linia koszyka: kopia produktu z momentu dodania + ilosc
    to NIE jest referencja, pozniejsza zmiana produktu jej nie dotyka
    """

    model_config = ConfigDict(extra="allow")

    item: ItemModel
    qty: int = Field(..., ge=1)
