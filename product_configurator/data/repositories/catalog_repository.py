"""
Catalog repository for loading door and window products.
"""
from typing import Any, List, Optional
import pandas as pd
from product_configurator.data.repositories.base_repository import BaseRepository
from product_configurator.data.models.product import Product, Catalog
from product_configurator.config.app_config import DEFAULT_CATALOG_PATH
from product_configurator.config.facet_config import CATALOG_COLUMN_MAP, REQUIRED_CATALOG_COLUMNS
from product_configurator.utils.validation import validate_dataframe
from product_configurator.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

WIDTH_COLUMNS = ["minLargura", "maxLargura"]


class CatalogError(Exception):
    """
    Raised when the product catalog cannot be read or is inconsistent.
    """


def _clean_value(value: Any) -> Any:
    """Convert pandas NA values to None while leaving other types intact."""
    try:
        return None if pd.isna(value) else value
    except (TypeError, ValueError):
        return value


class CatalogRepository(BaseRepository[Product]):
    """
    Repository for reading the product catalog from a CSV file.
    """

    def __init__(self, source: Optional[str] = None):
        """
        Initialize the catalog repository.

        Args:
            source (Optional[str]): Path to the catalog CSV (default: DEFAULT_CATALOG_PATH)
        """
        super().__init__(source or DEFAULT_CATALOG_PATH)

    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw catalog data as a pandas DataFrame.

        Returns:
            pd.DataFrame: One row per product, with the original catalog column names

        Raises:
            CatalogError: If the file cannot be read or is missing required columns
        """
        logger.info(f"Reading product catalog from {self.source}...")
        try:
            df = pd.read_csv(self.source, dtype={"folhasNumber": "Int64"})
        except (OSError, ValueError) as e:
            logger.error(f"Error reading catalog {self.source}: {str(e)}")
            raise CatalogError(f"Could not read catalog {self.source}: {e}") from e

        if not validate_dataframe(df, REQUIRED_CATALOG_COLUMNS):
            missing = [col for col in REQUIRED_CATALOG_COLUMNS if col not in df.columns]
            logger.error(f"Catalog {self.source} is empty or missing columns: {missing}")
            raise CatalogError(f"Catalog {self.source} is empty or missing columns: {missing}")

        for column in WIDTH_COLUMNS:
            df[column] = pd.to_numeric(df[column], errors="coerce")

        invalid = df[df[WIDTH_COLUMNS].isnull().any(axis=1) | df["folhasNumber"].isnull()]
        if not invalid.empty:
            slugs = invalid["slug"].tolist()
            logger.error(f"Catalog rows with invalid widths or leaf counts: {slugs}")
            raise CatalogError(f"Invalid widths or leaf counts for: {slugs}")

        logger.info(f"Retrieved {len(df)} catalog records.")
        return df

    def get_all(self, *args, **kwargs) -> List[Product]:
        """
        Get all products in the catalog.

        Returns:
            List[Product]: A list of Product objects, in file order
        """
        df = self.get_raw_data(*args, **kwargs)

        products = []
        for _, row in df.iterrows():
            fields = {
                field_name: _clean_value(row[column])
                for column, field_name in CATALOG_COLUMN_MAP.items()
            }
            product = Product(
                slug=str(fields["slug"]),
                image=str(fields["image"] or ""),
                category=str(fields["category"]),
                opening_system=str(fields["opening_system"]),
                shade=str(fields["shade"]),
                shade_motorization=(
                    str(fields["shade_motorization"]) if fields["shade_motorization"] is not None else None
                ),
                material=str(fields["material"]),
                min_width=float(fields["min_width"]),
                max_width=float(fields["max_width"]),
                leaf_count=int(fields["leaf_count"]),
            )
            products.append(product)

        return products

    def get_catalog(self) -> Catalog:
        """
        Load the catalog as an immutable Catalog object.

        Returns:
            Catalog: The loaded catalog
        """
        return Catalog.from_products(self.get_all())


def load_catalog(path: Optional[str] = None) -> Catalog:
    """
    Load the product catalog.

    Args:
        path (Optional[str]): Path to the catalog CSV (default: the packaged catalog)

    Returns:
        Catalog: The loaded catalog
    """
    return CatalogRepository(path).get_catalog()
