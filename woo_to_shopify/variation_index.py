"""
Variation Index Module
Builds the (parent name, variant value) -> VariationPricing lookup.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Sequence, Tuple
from loguru import logger

from .models import SourceRecord, VariationPricing
from .schema import VARIATION_NAME_SEPARATOR


VariationKey = Tuple[str, str]


def split_variation_name(full_name: str) -> Optional[VariationKey]:
    """
    Split a variation display name into (parent name, variant value).

    WooCommerce names variations "<parent> - <value>". Only the first
    separator delimits the parent, so a value such as "SPF 30 - Vanilla"
    survives intact.

    Args:
        full_name: Variation display name

    Returns:
        (parent_name, variant_value), or None when the name has no separator
    """
    parts = (full_name or '').split(VARIATION_NAME_SEPARATOR)
    if len(parts) < 2:
        return None
    return parts[0].strip(), VARIATION_NAME_SEPARATOR.join(parts[1:]).strip()


def build_variation_index(records: Sequence[SourceRecord]) -> Mapping[VariationKey, VariationPricing]:
    """
    Index the price and stock of every variation row by its parent and value.

    Args:
        records: The full, unfiltered record sequence

    Returns:
        Read-only mapping of (parent_name, variant_value) to VariationPricing. A later
        variation with the same key replaces an earlier one.
    """
    variation_map: Dict[VariationKey, VariationPricing] = {}

    for record in records:
        if not record.is_variation:
            continue

        key = split_variation_name(record.name)
        if key is None:
            logger.debug(f"Skipping variation without parent in its name: \"{record.name}\"")
            continue

        variation_map[key] = VariationPricing(
            sale_price=record.sale_price,
            regular_price=record.regular_price,
            stock_quantity=record.stock_quantity,
            in_stock=record.in_stock,
        )

    logger.info(f"Created pricing map for {len(variation_map)} variations")
    return MappingProxyType(variation_map)
