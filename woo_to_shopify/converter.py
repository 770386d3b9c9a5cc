"""
Conversion Orchestrator Module
Coordinates the entire WooCommerce to Shopify conversion.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from loguru import logger
from tqdm import tqdm

from .classifier import filter_parent_products
from .config import DEFAULT_SETTINGS
from .csv_handler import CSVHandler
from .mapper import FieldMapper
from .models import ConversionResult, SourceRecord
from .schema import SHOPIFY_HEADERS
from .transformer import ProductTransformer
from .validator import DataValidator
from .variation_index import build_variation_index


def default_output_path(input_path: str, suffix: str = DEFAULT_SETTINGS['output_suffix']) -> Path:
    """Place the output beside the input: products.csv -> products_shopify_import.csv."""
    input_path = Path(input_path)
    return input_path.parent / f"{input_path.stem}{suffix}.csv"


def convert(records: Sequence[SourceRecord], show_progress: bool = False) -> ConversionResult:
    """Convert mapped WooCommerce records to Shopify rows."""
    return ConversionOrchestrator(settings={'progress': show_progress}).convert(records)


class ConversionOrchestrator:
    """Orchestrate the complete conversion process."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize conversion orchestrator.

        Args:
            settings: Converter settings as returned by config.resolve_settings
        """
        self.settings = dict(DEFAULT_SETTINGS)
        self.settings.update(settings or {})

        self.csv_handler = CSVHandler(encoding=self.settings['encoding'])
        self.mapper = FieldMapper(self.settings['mapping_config'])
        self.validator = DataValidator()

    def convert(self, records: Sequence[SourceRecord]) -> ConversionResult:
        """
        Convert every parent product, isolating failures per product.

        Args:
            records: All mapped records of the export, in file order

        Returns:
            ConversionResult with the rows and run counts
        """
        parent_products = filter_parent_products(records)
        logger.info("Creating pricing map from variation data...")
        variation_index = build_variation_index(records)
        transformer = ProductTransformer(variation_index)

        result = ConversionResult(
            total_source_rows=len(records),
            parent_count=len(parent_products),
            variation_count=len(variation_index),
        )

        logger.info("Converting parent products to Shopify format...")
        progress = tqdm(
            parent_products,
            total=len(parent_products),
            desc="Converting",
            disable=not self.settings['progress'],
        )
        for index, product in enumerate(progress, start=1):
            try:
                rows = transformer.convert_product(product)
            except Exception as e:
                logger.error(f"Error converting product \"{product.name}\": {e}")
                result.errors.append({
                    'product': product.name,
                    'row_number': product.row_number,
                    'type': 'conversion',
                    'error': str(e),
                })
                continue

            result.rows.extend(rows)
            logger.debug(
                f"Processed product {index}/{len(parent_products)}: \"{product.name}\" → {len(rows)} rows"
            )

        return result

    def convert_file(self, input_path: str, output_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Read a WooCommerce export, convert it and write the Shopify import file.

        Args:
            input_path: WooCommerce product export CSV
            output_path: Destination CSV; defaults to <input>_shopify_import.csv

        Returns:
            Conversion summary dictionary
        """
        logger.info("Reading WooCommerce export file...")
        raw_rows = self.csv_handler.read_records(input_path)
        parse_warnings = list(self.csv_handler.parse_warnings)
        if parse_warnings:
            logger.warning(f"CSV parsing produced {len(parse_warnings)} warnings")
        logger.info(f"Found {len(raw_rows)} total rows...")

        records = self.mapper.map_rows(raw_rows)
        result = self.convert(records)

        if output_path is None:
            output_path = default_output_path(input_path, self.settings['output_suffix'])
        output_path = Path(output_path)

        logger.info(f"Converting {result.total_rows} product variants to CSV...")
        self.csv_handler.write_rows(result.to_dicts(), str(output_path), SHOPIFY_HEADERS)

        validation_report = None
        if self.settings['validate']:
            validation_report = self.validator.generate_validation_report(len(raw_rows), result.rows)

        if result.errors and self.settings['error_report']:
            self._generate_error_report(result.errors, output_path)

        summary = {
            'success': True,
            'input_path': str(input_path),
            'output_path': str(output_path),
            'original_products': result.parent_count,
            'shopify_products': result.converted_products,
            'total_variants': result.total_rows,
            'failed_products': result.failed_products,
            'parse_warnings': len(parse_warnings),
            'errors': result.errors,
            'validation_report': validation_report,
        }
        self._log_summary(summary)
        return summary

    def _generate_error_report(self, errors, output_path: Path) -> Path:
        """
        Write failed products to <output stem>_error_report.csv beside the output.

        Args:
            errors: Error dictionaries collected during conversion
            output_path: Output file the report sits next to

        Returns:
            Path of the report
        """
        error_report_path = output_path.with_name(f"{output_path.stem}_error_report.csv")

        error_rows = [
            {
                'product': error.get('product', ''),
                'error_type': error.get('type', ''),
                'error': error.get('error', ''),
            }
            for error in errors
        ]
        self.csv_handler.write_rows(error_rows, str(error_report_path), ['product', 'error_type', 'error'])
        logger.info(f"Error report saved to: {error_report_path}")
        return error_report_path

    def _log_summary(self, summary: Dict[str, Any]) -> None:
        """
        Log conversion summary.

        Args:
            summary: Summary returned by convert_file
        """
        logger.info("=" * 60)
        logger.info("CONVERSION SUMMARY")
        logger.info("=" * 60)
        logger.info(f"WooCommerce parent products: {summary['original_products']}")
        logger.info(f"Shopify products created: {summary['shopify_products']}")
        logger.info(f"Total variants/rows: {summary['total_variants']}")
        logger.info(f"Failed products: {summary['failed_products']}")
        logger.info(f"Parse warnings: {summary['parse_warnings']}")
        report = summary['validation_report']
        if report is not None:
            logger.info(f"Validation errors: {report['total_errors']}, warnings: {report['total_warnings']}")
        logger.info(f"Output file: {summary['output_path']}")
        logger.info("=" * 60)
