"""
Tests for CSV Handler Module
"""

import pytest
import pandas as pd

from woo_to_shopify.csv_handler import CSVHandler
from woo_to_shopify.schema import SHOPIFY_HEADERS


class TestCSVHandler:
    """Test cases for CSVHandler."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = CSVHandler()

    def test_read_records_keeps_text(self, tmp_path):
        """Test cells are read as text without losing leading zeros."""
        source = tmp_path / 'products.csv'
        source.write_text(
            'Type,SKU,Name,Regular price,Sale price\n'
            'simple,00123,"Mug, large",9.50,\n',
            encoding='utf-8',
        )

        records = self.handler.read_records(str(source))

        assert records == [{
            'Type': 'simple',
            'SKU': '00123',
            'Name': 'Mug, large',
            'Regular price': '9.50',
            'Sale price': '',
        }]

    def test_read_semicolon_delimited(self, tmp_path):
        """Test the delimiter is detected."""
        source = tmp_path / 'products.csv'
        source.write_text('Name;Type\nA;simple\nB;variable\n', encoding='utf-8')

        records = self.handler.read_records(str(source))

        assert [record['Name'] for record in records] == ['A', 'B']
        assert records[1]['Type'] == 'variable'

    def test_malformed_line_is_skipped(self, tmp_path):
        """Test lines with too many fields are logged and skipped."""
        source = tmp_path / 'products.csv'
        source.write_text('a,b\n1,2\n3,4,5\n6,7\n', encoding='utf-8')

        records = self.handler.read_records(str(source))

        assert [record['a'] for record in records] == ['1', '6']
        assert len(self.handler.parse_warnings) == 1

    def test_blank_lines_skipped(self, tmp_path):
        """Test empty lines do not become records."""
        source = tmp_path / 'products.csv'
        source.write_text('Name,Type\n\nA,simple\n\n', encoding='utf-8')
        assert len(self.handler.read_records(str(source))) == 1

    def test_file_not_found(self):
        """Test error handling for missing file."""
        with pytest.raises(FileNotFoundError):
            self.handler.read_records('/nonexistent/file.csv')

    def test_write_rows(self, tmp_path):
        """Test rows are written under the fixed header with blanks filled."""
        output = tmp_path / 'out' / 'shopify.csv'
        rows = [
            {'Handle': 'mug', 'Title': 'Mug', 'Variant Grams': 454, 'Variant Price': 9.5},
            {'Handle': 'mug', 'Image Src': 'https://a.test/2.jpg', 'Image Position': 2},
        ]

        self.handler.write_rows(rows, str(output), SHOPIFY_HEADERS)

        df = pd.read_csv(output, dtype=str, keep_default_na=False)
        assert tuple(df.columns) == SHOPIFY_HEADERS
        assert len(df) == 2
        assert df.iloc[0]['Variant Grams'] == '454'
        assert df.iloc[0]['Variant Price'] == '9.5'
        assert df.iloc[1]['Title'] == ''
        assert df.iloc[1]['Image Position'] == '2'

    def test_write_no_rows(self, tmp_path):
        """Test an empty conversion still writes the header."""
        output = tmp_path / 'empty.csv'
        self.handler.write_rows([], str(output), SHOPIFY_HEADERS)
        assert output.read_text(encoding='utf-8').strip() == ','.join(
            f'"{h}"' if ',' in h else h for h in SHOPIFY_HEADERS
        )
