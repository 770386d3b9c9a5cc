"""
Command Line Module
convert <input-file> [output-file]
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger
from colorama import init, Fore

from .config import DEFAULT_CONFIG_PATH, load_config, resolve_settings
from .converter import ConversionOrchestrator, default_output_path

# Initialize colorama
init(autoreset=True)

USAGE = """
WooCommerce to Shopify Product Converter

Usage:
  convert <input-file> [output-file]

Examples:
  convert products.csv
  convert products.csv shopify_products.csv

The converter will:
  - Convert WooCommerce product exports to Shopify import format
  - Handle variable products with options/variations
  - Keep each WooCommerce parent product as a separate Shopify product
  - Convert weights from pounds to grams
  - Generate SEO-friendly handles
  - Set inventory and shipping defaults
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='convert',
        description='Convert a WooCommerce product export to a Shopify product import CSV'
    )
    parser.add_argument(
        'input',
        nargs='?',
        help='Path to the WooCommerce product export CSV'
    )
    parser.add_argument(
        'output',
        nargs='?',
        help='Output CSV path (default: <input>_shopify_import.csv beside the input)'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help='Path to configuration YAML file'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log every converted product'
    )
    return parser


def setup_logging(settings: dict, verbose: bool = False) -> None:
    """Send loguru output to stderr and, when configured, to a rotating log file."""
    log_level = 'DEBUG' if verbose else settings['log_level']
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=log_level
    )
    if settings['log_file']:
        logger.add(settings['log_file'], level=log_level, rotation=settings['log_rotation'])


def main(argv: Optional[List[str]] = None) -> int:
    """Main conversion function. Returns the process exit code."""
    args, extra_args = build_parser().parse_known_args(argv)

    if not args.input:
        print(USAGE)
        return 1

    if not Path(args.input).exists():
        print(Fore.RED + f"ERROR: Input file not found: {args.input}", file=sys.stderr)
        return 1

    load_dotenv()
    settings = resolve_settings(load_config(args.config))
    setup_logging(settings, args.verbose)
    if extra_args:
        logger.debug(f"Ignoring extra arguments: {extra_args}")

    output_path = args.output or str(default_output_path(args.input, settings['output_suffix']))

    print(Fore.CYAN + "=" * 60)
    print(Fore.CYAN + "WOOCOMMERCE TO SHOPIFY PRODUCT CONVERSION")
    print(Fore.CYAN + "=" * 60)
    print(f"Input: {args.input}")
    print(f"Output: {output_path}")
    print(Fore.CYAN + "=" * 60)

    try:
        orchestrator = ConversionOrchestrator(settings=settings)
        result = orchestrator.convert_file(args.input, output_path)
    except Exception as e:
        logger.exception("Conversion failed with error")
        print(Fore.RED + f"\nERROR: Conversion failed: {e}", file=sys.stderr)
        return 1

    print()
    print(Fore.GREEN + "Conversion completed successfully!")
    print(f"  Original WooCommerce parent products: {result['original_products']}")
    print(f"  Shopify products created: {result['shopify_products']}")
    print(f"  Total variants/rows: {result['total_variants']}")
    print(f"  Output file: {Fore.CYAN + result['output_path']}")

    if result['failed_products']:
        print(Fore.YELLOW + f"  {result['failed_products']} products failed. Check the log for details.")
    if result['parse_warnings']:
        print(Fore.YELLOW + f"  {result['parse_warnings']} malformed lines were skipped.")

    return 0


if __name__ == '__main__':
    sys.exit(main())
