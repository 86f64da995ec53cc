"""
CSV exporter for configurator results.
"""
from typing import Optional, Sequence
import os
import pandas as pd
from product_configurator.config.app_config import EXPORT_FILENAME
from product_configurator.data.models.product import Product
from product_configurator.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

EXPORT_COLUMNS = [
    'slug',
    'product_url',
    'image',
    'category',
    'opening_system',
    'shade',
    'shade_motorization',
    'material',
    'min_width',
    'max_width',
    'leaf_count',
]


class CSVExporter:
    """
    Exporter for final product lists to CSV files.
    """

    def prepare_dataframe(self, products: Sequence[Product], display_name: Optional[str] = None) -> pd.DataFrame:
        """
        Prepare a DataFrame with one row per product.

        Args:
            products (Sequence[Product]): The final products
            display_name (Optional[str]): Running name of the configuration, added as a column

        Returns:
            pd.DataFrame: The product data
        """
        if not products:
            return pd.DataFrame(columns=EXPORT_COLUMNS)

        data = []
        for product in products:
            row = {
                'slug': product.slug,
                'product_url': product.product_url,
                'image': product.image,
                'category': product.category,
                'opening_system': product.opening_system,
                'shade': product.shade,
                'shade_motorization': product.shade_motorization,
                'material': product.material,
                'min_width': product.min_width,
                'max_width': product.max_width,
                'leaf_count': product.leaf_count,
            }
            data.append(row)

        df = pd.DataFrame(data, columns=EXPORT_COLUMNS)
        if display_name:
            df.insert(0, 'display_name', display_name)
        return df

    def export(
        self,
        products: Sequence[Product],
        output_dir: str,
        display_name: Optional[str] = None
    ) -> str:
        """
        Export the final products to a CSV file.

        Args:
            products (Sequence[Product]): The final products
            output_dir (str): Directory for the output file
            display_name (Optional[str]): Running name of the configuration

        Returns:
            str: Path to the exported CSV file
        """
        os.makedirs(output_dir, exist_ok=True)

        df = self.prepare_dataframe(products, display_name)
        output_path = os.path.join(output_dir, EXPORT_FILENAME)
        df.to_csv(output_path, index=False)
        logger.info(f"Exported {len(df)} products to {output_path}")

        return output_path
