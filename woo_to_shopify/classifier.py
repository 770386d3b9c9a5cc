"""
Classifier Module
Separates purchasable parent products from variation rows.
"""

from typing import List, Sequence
from loguru import logger

from .models import SourceRecord


def filter_parent_products(records: Sequence[SourceRecord]) -> List[SourceRecord]:
    """
    Keep only simple and variable products, in input order.

    Args:
        records: Every record of the export

    Returns:
        Parent records; variation rows and unknown types are dropped
    """
    parent_products = [record for record in records if record.is_parent]

    logger.info(f"Filtered {len(parent_products)} parent products from {len(records)} total rows")
    return parent_products
