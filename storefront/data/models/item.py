from typing import Union

from pydantic import BaseModel, ConfigDict


class ItemModel(BaseModel):
    """
    Rekord kolekcji items (items.json)
    extra="allow" -> klucze spoza modelu (np. dopisane recznie w pliku) przechodza przez zapis
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    #int zostaje intem, 250 nie zamienia sie na 250.0
    price: Union[int, float]
    category: str
    image: str = ""
    description: str = ""
