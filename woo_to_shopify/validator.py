"""
Data Validator Module
Checks converted Shopify rows before they are written.
"""

from typing import Dict, Any, List, Tuple, Sequence
from loguru import logger
import re

from .models import ShopifyRow
from .schema import GROUP_FIELDS, SHOPIFY_HEADERS


HANDLE_PATTERN = re.compile(r'^[a-z0-9]+(-[a-z0-9]+)*$')


class DataValidator:
    """Validate converted rows. Findings are reported, rows are never changed."""

    def validate_row_shape(self, row: Dict[str, Any], row_number: int) -> List[str]:
        """
        Check that a row carries exactly the template columns, in order.

        Args:
            row: Output row dictionary
            row_number: Row number for error reporting

        Returns:
            List of errors
        """
        if tuple(row.keys()) == SHOPIFY_HEADERS:
            return []

        missing = [h for h in SHOPIFY_HEADERS if h not in row]
        extra = [h for h in row if h not in SHOPIFY_HEADERS]
        if not missing and not extra:
            return [f"Row {row_number}: Columns are out of template order"]
        errors = []
        if missing:
            errors.append(f"Row {row_number}: Missing columns: {', '.join(missing)}")
        if extra:
            errors.append(f"Row {row_number}: Unexpected columns: {', '.join(extra)}")
        return errors

    def validate_shopify_row(self, row: ShopifyRow, row_number: int) -> Tuple[bool, List[str], List[str]]:
        """
        Validate a converted Shopify row.

        Args:
            row: Converted row
            row_number: Row number for error reporting

        Returns:
            Tuple of (is_valid, list_of_errors, list_of_warnings)
        """
        values = row.to_dict()
        errors = self.validate_row_shape(values, row_number)
        warnings = []

        handle = str(values['Handle'])
        if not handle:
            warnings.append(f"Row {row_number}: Empty handle")
        elif not self._is_valid_handle(handle):
            errors.append(f"Row {row_number}: Invalid handle format: {handle}")

        if row.kind == 'variant':
            price = str(values['Variant Price']).strip()
            if not self._is_valid_price(price):
                errors.append(f"Row {row_number}: Invalid price format in 'Variant Price': {price}")

            qty = str(values['Variant Inventory Qty']).strip()
            if qty and not self._is_valid_inventory(qty):
                errors.append(f"Row {row_number}: Invalid inventory in 'Variant Inventory Qty': {qty}")

        if row.is_primary:
            if values['Published'] not in ('TRUE', 'FALSE'):
                warnings.append(f"Row {row_number}: 'Published' should be TRUE/FALSE, got: {values['Published']}")
            if values['Status'] not in ('active', 'draft'):
                warnings.append(f"Row {row_number}: 'Status' should be active/draft, got: {values['Status']}")
            if not values['Title']:
                warnings.append(f"Row {row_number}: Primary row has no title")
        else:
            leaked = [
                header for header in GROUP_FIELDS
                if values[header] != '' and not (row.kind == 'image' and header.startswith('Image'))
            ]
            if leaked:
                errors.append(f"Row {row_number}: Product fields set on a non-primary row: {', '.join(leaked)}")

        return len(errors) == 0, errors, warnings

    def _is_valid_price(self, value: str) -> bool:
        try:
            return float(value) >= 0
        except ValueError:
            return False

    def _is_valid_inventory(self, value: str) -> bool:
        try:
            return int(value) >= 0
        except ValueError:
            return False

    def _is_valid_handle(self, value: str) -> bool:
        return bool(HANDLE_PATTERN.match(value))

    def check_duplicate_handles(self, rows: Sequence[ShopifyRow]) -> List[str]:
        """
        Find handles shared by more than one handle group.

        Each primary row starts a group, so a handle with several primary
        rows belongs to different source products.

        Args:
            rows: Converted rows

        Returns:
            Sorted list of duplicated handles
        """
        seen = {}
        for row in rows:
            if row.is_primary:
                seen[row.handle] = seen.get(row.handle, 0) + 1
        return sorted(handle for handle, count in seen.items() if count > 1)

    def generate_validation_report(
        self,
        source_row_count: int,
        rows: Sequence[ShopifyRow],
    ) -> Dict[str, Any]:
        """
        Validate every row and summarise the findings.

        Args:
            source_row_count: Number of rows read from the source file
            rows: Converted rows

        Returns:
            Validation report dictionary
        """
        errors = []
        warnings = []
        for row_number, row in enumerate(rows, start=1):
            _, row_errors, row_warnings = self.validate_shopify_row(row, row_number)
            errors.extend(row_errors)
            warnings.extend(row_warnings)

        duplicate_handles = self.check_duplicate_handles(rows)
        for handle in duplicate_handles:
            warnings.append(f"Handle '{handle}' is used by more than one product")

        for message in errors:
            logger.warning(message)
        for message in warnings:
            logger.debug(message)

        return {
            'source_row_count': source_row_count,
            'shopify_row_count': len(rows),
            'total_errors': len(errors),
            'total_warnings': len(warnings),
            'errors': errors,
            'warnings': warnings,
            'duplicate_handles': duplicate_handles,
        }
