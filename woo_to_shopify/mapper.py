"""
Field Mapper Module
Maps raw WooCommerce export rows onto typed SourceRecord objects.
"""

import json
from typing import Dict, Any, Optional
from loguru import logger
import pandas as pd

from .models import SourceRecord
from .schema import WOOCOMMERCE_COLUMNS


NUMBER_FIELDS = (
    'stock_quantity', 'weight_lbs', 'sale_price', 'regular_price', 'min_variation_price',
)
FLAG_FIELDS = ('published', 'in_stock')

TRUE_STRINGS = ('1', '1.0', 'true', 'yes', 'y')


class FieldMapper:
    """Map WooCommerce export columns to SourceRecord attributes."""

    def __init__(self, mapping_config_path: Optional[str] = None):
        """
        Initialize field mapper.

        Args:
            mapping_config_path: Optional path to a JSON file overriding column names
        """
        self.columns = dict(WOOCOMMERCE_COLUMNS)
        if mapping_config_path:
            self.load_mapping_config(mapping_config_path)

    def load_mapping_config(self, config_path: str) -> None:
        """
        Load column overrides from a JSON file of the form
        {"columns": {"<attribute>": "<source column>"}}.

        Args:
            config_path: Path to mapping configuration JSON file
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except FileNotFoundError:
            logger.warning(f"Mapping config not found: {config_path}, using default columns")
            return
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in mapping config: {e}")
            raise

        for attribute, column in config.get('columns', {}).items():
            if attribute not in self.columns:
                logger.warning(f"Ignoring unknown attribute in mapping config: {attribute}")
                continue
            self.columns[attribute] = column
        logger.info(f"Loaded mapping configuration from {config_path}")

    def map_row(self, source_row: Dict[str, Any], row_number: Optional[int] = None) -> SourceRecord:
        """
        Map a single parsed row to a SourceRecord.

        Args:
            source_row: Dictionary of column name to cell value
            row_number: Optional line number for error reporting

        Returns:
            SourceRecord with canonical values
        """
        values = {}
        for attribute, column in self.columns.items():
            value = clean_value(source_row.get(column))
            if attribute in FLAG_FIELDS:
                values[attribute] = to_flag(value)
            elif attribute in NUMBER_FIELDS:
                values[attribute] = to_number(value)
            elif value is not None:
                values[attribute] = str(value)

        record_kind = values.pop('record_kind', None) or ''
        return SourceRecord(
            record_kind=str(record_kind).strip().lower(),
            name=values.pop('name', None) or '',
            row_number=row_number,
            **values
        )

    def map_rows(self, source_rows) -> list:
        """Map every parsed row, numbering them from 1."""
        return [self.map_row(row, row_number=i) for i, row in enumerate(source_rows, start=1)]


def clean_value(value: Any) -> Any:
    """
    Normalise a parsed cell: blanks and NaN become None, strings are trimmed,
    integral floats become ints.
    """
    if value is None:
        return None
    if hasattr(value, 'item') and not isinstance(value, (str, bytes)):
        # numpy scalar
        value = value.item()
    if isinstance(value, float):
        if pd.isna(value):
            return None
        if value.is_integer():
            return int(value)
        return value
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def to_flag(value: Any) -> bool:
    """Canonical boolean for WooCommerce 1/0 flags."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    return str(value).strip().lower() in TRUE_STRINGS


def to_number(value: Any) -> Any:
    """
    Parse numeric strings; anything else is returned unchanged.

    Decimal commas ("12,50") are not numbers here and stay as text.
    """
    if not isinstance(value, str):
        return value
    try:
        number = float(value)
    except ValueError:
        return value
    if pd.isna(number):
        return value
    return int(number) if number.is_integer() else number
