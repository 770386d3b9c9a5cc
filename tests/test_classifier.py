"""
Tests for Classifier Module
"""

from woo_to_shopify.classifier import filter_parent_products
from woo_to_shopify.models import SourceRecord


class TestFilterParentProducts:
    """Test cases for filter_parent_products."""

    def test_keeps_simple_and_variable(self):
        """Test simple and variable products are kept in order."""
        records = [
            SourceRecord(name='Variation - S', record_kind='variation'),
            SourceRecord(name='Shirt', record_kind='variable'),
            SourceRecord(name='Shirt - S', record_kind='variation'),
            SourceRecord(name='Mug', record_kind='simple'),
            SourceRecord(name='Bundle', record_kind='grouped'),
            SourceRecord(name='Link', record_kind='external'),
            SourceRecord(name='Untyped', record_kind=''),
        ]

        parents = filter_parent_products(records)

        assert [record.name for record in parents] == ['Shirt', 'Mug']

    def test_variation_never_kept(self):
        """Test variation rows are dropped wherever they appear."""
        for position in range(3):
            records = [SourceRecord(name=f'P{i}', record_kind='simple') for i in range(2)]
            records.insert(position, SourceRecord(name='P - X', record_kind='variation'))
            parents = filter_parent_products(records)
            assert all(not record.is_variation for record in parents)
            assert len(parents) == 2

    def test_no_deduplication(self):
        """Test repeated products are all kept."""
        records = [SourceRecord(name='Mug', record_kind='simple')] * 2
        assert len(filter_parent_products(records)) == 2
