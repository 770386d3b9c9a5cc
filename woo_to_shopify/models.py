"""
Data Models Module
Typed records passed between the conversion stages.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .schema import SHOPIFY_HEADERS, PARENT_KINDS, VARIATION_KIND


@dataclass
class SourceRecord:
    """One row of a WooCommerce product export.

    Populated by FieldMapper.map_row, which is the only place that reads
    columns by name. Numbers stay numbers, flags are real booleans and
    empty cells are None.
    """

    name: str = ''
    record_kind: str = ''
    sku: Optional[str] = None
    gtin: Optional[str] = None
    published: bool = False
    short_description: Optional[str] = None
    description: Optional[str] = None
    in_stock: bool = False
    stock_quantity: Any = None
    weight_lbs: Any = None
    sale_price: Any = None
    regular_price: Any = None
    min_variation_price: Any = None
    categories: Optional[str] = None
    tags: Optional[str] = None
    images: Optional[str] = None
    attribute_name: Optional[str] = None
    attribute_values: Optional[str] = None

    # 1-based line in the source file, for error messages
    row_number: Optional[int] = None

    @property
    def is_parent(self) -> bool:
        return self.record_kind in PARENT_KINDS

    @property
    def is_variable(self) -> bool:
        return self.record_kind == 'variable'

    @property
    def is_variation(self) -> bool:
        return self.record_kind == VARIATION_KIND


@dataclass(frozen=True)
class VariationPricing:
    """Price and stock carried by a single variation row."""

    sale_price: Any = None
    regular_price: Any = None
    stock_quantity: Any = None
    in_stock: bool = False


@dataclass
class ShopifyRow:
    """One row of the Shopify import file.

    is_primary marks the first row of a handle group, the only one that
    carries the product-level fields. kind is 'variant' for option rows
    and 'image' for the extra rows that only add a product image.
    """

    handle: str
    is_primary: bool
    fields: Dict[str, Any] = field(default_factory=dict)
    kind: str = 'variant'

    def to_dict(self) -> Dict[str, Any]:
        """Return the row keyed by every template column, blanks filled with ''."""
        row = {header: '' for header in SHOPIFY_HEADERS}
        for header, value in self.fields.items():
            row[header] = '' if value is None else value
        row['Handle'] = self.handle
        return row


@dataclass
class ConversionResult:
    """Rows produced by one conversion run plus the counts reported to the user."""

    rows: List[ShopifyRow] = field(default_factory=list)
    total_source_rows: int = 0
    parent_count: int = 0
    variation_count: int = 0
    errors: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def total_rows(self) -> int:
        return len(self.rows)

    @property
    def failed_products(self) -> int:
        return len(self.errors)

    @property
    def converted_products(self) -> int:
        return self.parent_count - self.failed_products

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [row.to_dict() for row in self.rows]
