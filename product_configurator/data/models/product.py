"""
Product data models.
"""
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple
from product_configurator.config.app_config import BASE_PRODUCT_URL


@dataclass(frozen=True)
class Product:
    """
    Represents a door or window in the catalog.
    """
    slug: str  # Path of the product page, relative to BASE_PRODUCT_URL
    image: str
    category: str  # "janela" or "porta"
    opening_system: str  # e.g. "janela-correr", "maxim-ar", "giro"
    shade: str  # "sim" or "nao"
    material: str  # e.g. "vidro", "vidro + veneziana"
    min_width: float  # Width interval is [min_width, max_width), in metres
    max_width: float
    leaf_count: int
    shade_motorization: Optional[str] = None  # None when there is no shade

    @property
    def product_url(self) -> str:
        return BASE_PRODUCT_URL + self.slug


@dataclass(frozen=True)
class Catalog:
    """
    Immutable, ordered collection of products shared by every engine call.
    """
    products: Tuple[Product, ...] = ()

    @classmethod
    def from_products(cls, products: Sequence[Product]) -> "Catalog":
        return cls(products=tuple(products))

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)

    def get(self, slug: str) -> Optional[Product]:
        """
        Look up a product by slug.

        Args:
            slug (str): The product slug

        Returns:
            Optional[Product]: The product, or None if the slug is unknown
        """
        for product in self.products:
            if product.slug == slug:
                return product
        return None
