"""
Tests for Field Mapper Module
"""

import pytest
import json
import tempfile
import os
from woo_to_shopify.mapper import FieldMapper, clean_value, to_flag, to_number


class TestFieldMapper:
    """Test cases for FieldMapper."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mapper = FieldMapper()

    def test_map_row(self):
        """Test a parsed WooCommerce row becomes a typed record."""
        source_row = {
            'ID': '1',
            'Type': 'simple',
            'SKU': '00123',
            'GTIN, UPC, EAN, or ISBN': '0123456789012',
            'Name': ' Test Simple Product ',
            'Published': '1',
            'In stock?': '1',
            'Stock': '10',
            'Weight (lbs)': '0.5',
            'Sale price': '',
            'Regular price': '29.99',
            'Images': 'https://example.com/image.jpg',
        }

        record = self.mapper.map_row(source_row, row_number=3)

        assert record.name == 'Test Simple Product'
        assert record.record_kind == 'simple'
        assert record.sku == '00123'
        assert record.gtin == '0123456789012'
        assert record.published is True
        assert record.in_stock is True
        assert record.stock_quantity == 10
        assert record.weight_lbs == 0.5
        assert record.sale_price is None
        assert record.regular_price == 29.99
        assert record.images == 'https://example.com/image.jpg'
        assert record.attribute_name is None
        assert record.row_number == 3

    def test_missing_columns(self):
        """Test absent columns map to empty defaults."""
        record = self.mapper.map_row({})
        assert record.name == ''
        assert record.record_kind == ''
        assert record.published is False
        assert record.in_stock is False
        assert record.images is None

    def test_record_kind_normalised(self):
        """Test the product type is trimmed and lowercased."""
        assert self.mapper.map_row({'Type': ' Variable '}).is_variable

    def test_map_rows_numbers_rows(self):
        """Test map_rows numbers records from 1."""
        records = self.mapper.map_rows([{'Name': 'A'}, {'Name': 'B'}])
        assert [record.row_number for record in records] == [1, 2]

    def test_column_override(self):
        """Test a mapping config can rename source columns."""
        config = {"columns": {"name": "Product name", "unknown_field": "Whatever"}}

        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump(config, f)
            config_path = f.name

        try:
            mapper = FieldMapper(config_path)
            record = mapper.map_row({'Product name': 'Renamed', 'Name': 'Ignored'})
            assert record.name == 'Renamed'
            assert 'unknown_field' not in mapper.columns
        finally:
            if os.path.exists(config_path):
                os.unlink(config_path)

    def test_missing_mapping_config(self):
        """Test a missing mapping config falls back to default columns."""
        mapper = FieldMapper('/nonexistent/field_mapping.json')
        assert mapper.columns['name'] == 'Name'

    def test_invalid_mapping_config(self):
        """Test invalid JSON in the mapping config is an error."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            f.write('{not json')
            config_path = f.name

        try:
            with pytest.raises(json.JSONDecodeError):
                FieldMapper(config_path)
        finally:
            if os.path.exists(config_path):
                os.unlink(config_path)


class TestValueCoercion:
    """Test cases for cell value coercion."""

    def test_clean_value(self):
        """Test blanks, NaN and integral floats are normalised."""
        assert clean_value(None) is None
        assert clean_value('') is None
        assert clean_value('   ') is None
        assert clean_value(float('nan')) is None
        assert clean_value(30.0) == 30
        assert isinstance(clean_value(30.0), int)
        assert clean_value(29.99) == 29.99
        assert clean_value(' text ') == 'text'

    @pytest.mark.parametrize('value', [1, 1.0, True, '1', 'yes', 'TRUE'])
    def test_to_flag_true(self, value):
        """Test values meaning 'set'."""
        assert to_flag(value) is True

    @pytest.mark.parametrize('value', [None, 0, -1, False, '0', 'no', 'backorder'])
    def test_to_flag_false(self, value):
        """Test values meaning 'not set'."""
        assert to_flag(value) is False

    def test_to_number(self):
        """Test numeric strings are parsed and other values pass through."""
        assert to_number('10') == 10
        assert isinstance(to_number('10.00'), int)
        assert to_number('2.5') == 2.5
        assert to_number('1,234') == '1,234'
        assert to_number('heavy') == 'heavy'
        assert to_number(None) is None
        assert to_number(7) == 7
        assert to_number('nan') == 'nan'

    def test_to_number_keeps_decimal_commas(self):
        """Test decimal-comma values are left as text."""
        assert to_number('12,50') == '12,50'
        assert to_number('1,5') == '1,5'

        record = FieldMapper().map_row({'Name': 'Mug', 'Regular price': '12,50', 'Weight (lbs)': '1,5'})
        assert record.regular_price == '12,50'
        assert record.weight_lbs == '1,5'
