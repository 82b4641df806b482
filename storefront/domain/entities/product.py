"""Domain entity — catalogue product."""

from dataclasses import dataclass


@dataclass
class Product:
    """A sellable item held by the product service."""

    name: str
    price: float
    category: str
    stock: int = 0
    description: str = ""
    id: int = 0
