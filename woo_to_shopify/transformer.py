"""
Data Transformer Module
Expands one WooCommerce parent product into its Shopify import rows.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from .models import ShopifyRow, SourceRecord, VariationPricing
from .schema import FIXED_VARIANT_VALUES, GRAMS_PER_POUND


def create_handle(name: Optional[str]) -> str:
    """
    Create a URL-friendly handle from a product name.

    Args:
        name: Product name

    Returns:
        Lowercase handle of letters, digits and single hyphens
    """
    if not name:
        return ''

    handle = str(name).lower()
    handle = re.sub(r'[^a-z0-9\s-]', '', handle)
    handle = re.sub(r'\s+', '-', handle)
    handle = re.sub(r'-+', '-', handle)
    return handle.strip('-')


def convert_weight_to_grams(weight_lbs: Any) -> Optional[int]:
    """
    Convert a WooCommerce weight in pounds to whole grams.

    Args:
        weight_lbs: Weight as parsed from the export

    Returns:
        Grams rounded half-up, or None for a missing, zero or non-numeric weight
    """
    if not weight_lbs or isinstance(weight_lbs, bool):
        return None

    try:
        pounds = float(weight_lbs)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(pounds):
        return None

    grams = Decimal(pounds * GRAMS_PER_POUND)
    return int(grams.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def parse_variations(attribute_values: Optional[str]) -> List[str]:
    """
    Split a comma-separated attribute value list. Empty entries are kept.
    """
    if not attribute_values:
        return []
    return [value.strip() for value in str(attribute_values).split(',')]


def parse_images(images: Optional[str]) -> List[str]:
    """
    Split the comma-separated Images column, dropping empty entries.
    """
    if not images:
        return []
    return [url.strip() for url in str(images).split(',') if url.strip()]


def inventory_policy(in_stock: bool) -> str:
    return 'continue' if in_stock else 'deny'


class ProductTransformer:
    """Turn parent products into Shopify rows using the variation price index."""

    def __init__(self, variation_index: Optional[Mapping[Tuple[str, str], VariationPricing]] = None):
        """
        Initialize product transformer.

        Args:
            variation_index: Lookup built by build_variation_index; never modified here
        """
        self.variation_index = variation_index if variation_index is not None else {}

    def get_options(self, product: SourceRecord) -> Tuple[str, List[str]]:
        """
        Return the option name and values a product is expanded over.

        Products without attribute data get a single unnamed, empty option so
        that they still produce one row.
        """
        if product.is_variable and product.attribute_name and product.attribute_values:
            return product.attribute_name, parse_variations(product.attribute_values)
        return '', ['']

    def resolve_variant_pricing(self, product: SourceRecord, option_value: str) -> Dict[str, Any]:
        """
        Work out price, compare-at price, stock and inventory policy for one option.

        Parent values are the baseline; a matching variation row overrides them.
        """
        pricing = {
            'Variant Price': product.sale_price or product.regular_price or product.min_variation_price or 0,
            'Variant Compare At Price': '',
            'Variant Inventory Qty': product.stock_quantity or 0,
            'Variant Inventory Policy': inventory_policy(product.in_stock),
        }

        if not (product.is_variable and option_value):
            return pricing

        variation = self.variation_index.get((product.name, option_value))
        if variation is None:
            logger.debug(f"No variation data for \"{product.name}\" / \"{option_value}\", using parent pricing")
            return pricing

        pricing['Variant Price'] = variation.sale_price or variation.regular_price or pricing['Variant Price']
        if variation.sale_price and variation.regular_price:
            pricing['Variant Compare At Price'] = variation.regular_price
        pricing['Variant Inventory Qty'] = variation.stock_quantity or pricing['Variant Inventory Qty']
        pricing['Variant Inventory Policy'] = inventory_policy(variation.in_stock)
        return pricing

    def _group_fields(self, product: SourceRecord, option_name: str, images: List[str]) -> Dict[str, Any]:
        """Product-level fields carried by the first row of the handle group only."""
        fields = {
            'Title': product.name,
            'Body (HTML)': product.description or product.short_description or '',
            'Product Category': product.categories or '',
            'Type': product.categories or '',
            'Tags': product.tags or '',
            'Published': 'TRUE' if product.published else 'FALSE',
            'Option1 Name': option_name,
            'SEO Title': product.name,
            'SEO Description': product.short_description or '',
            'Status': 'active' if product.published else 'draft',
        }
        if images:
            fields['Image Src'] = images[0]
            fields['Image Position'] = 1
            fields['Image Alt Text'] = product.name
        return fields

    def convert_product(self, product: SourceRecord) -> List[ShopifyRow]:
        """
        Convert a single parent product to Shopify rows.

        One row per option value, followed by one row per image after the first.

        Args:
            product: Simple or variable parent record

        Returns:
            Rows sharing the product's handle; the first one is primary
        """
        handle = create_handle(product.name)
        images = parse_images(product.images)
        option_name, option_values = self.get_options(product)
        grams = convert_weight_to_grams(product.weight_lbs)

        rows = []
        for variant_index, option_value in enumerate(option_values):
            fields = dict(FIXED_VARIANT_VALUES)
            fields.update({
                'Option1 Value': option_value,
                'Variant SKU': product.sku or '',
                'Variant Grams': grams,
                'Variant Barcode': product.gtin or '',
                'Google Shopping / MPN': product.gtin or '',
            })
            fields.update(self.resolve_variant_pricing(product, option_value))

            is_primary = variant_index == 0
            if is_primary:
                fields.update(self._group_fields(product, option_name, images))

            rows.append(ShopifyRow(handle=handle, is_primary=is_primary, fields=fields))

        # Extra images continue from position 1 of the primary row
        for position, image in enumerate(images[1:], start=2):
            rows.append(ShopifyRow(
                handle=handle,
                is_primary=False,
                kind='image',
                fields={
                    'Image Src': image,
                    'Image Position': position,
                    'Image Alt Text': product.name,
                },
            ))

        return rows
