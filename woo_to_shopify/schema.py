"""
Schema Module
Column names of the WooCommerce export and the Shopify product import template.
"""

# Shopify product import template, in template order
SHOPIFY_HEADERS = (
    'Handle', 'Title', 'Body (HTML)', 'Vendor', 'Product Category', 'Type', 'Tags', 'Published',
    'Option1 Name', 'Option1 Value', 'Option2 Name', 'Option2 Value', 'Option3 Name', 'Option3 Value',
    'Variant SKU', 'Variant Grams', 'Variant Inventory Tracker', 'Variant Inventory Qty',
    'Variant Inventory Policy', 'Variant Fulfillment Service', 'Variant Price', 'Variant Compare At Price',
    'Variant Requires Shipping', 'Variant Taxable', 'Variant Barcode', 'Image Src', 'Image Position',
    'Image Alt Text', 'Gift Card', 'SEO Title', 'SEO Description', 'Google Shopping / Google Product Category',
    'Google Shopping / Gender', 'Google Shopping / Age Group', 'Google Shopping / MPN',
    'Google Shopping / Condition', 'Google Shopping / Custom Product', 'Variant Image', 'Variant Weight Unit',
    'Variant Tax Code', 'Cost per item', 'Included / United States', 'Price / United States',
    'Compare At Price / United States', 'Included / International', 'Price / International',
    'Compare At Price / International', 'Status',
)

# Filled in on every variant row, whatever the source says
FIXED_VARIANT_VALUES = {
    'Variant Inventory Tracker': 'shopify',
    'Variant Fulfillment Service': 'manual',
    'Variant Requires Shipping': 'TRUE',
    'Variant Taxable': 'TRUE',
    'Gift Card': 'FALSE',
    'Variant Weight Unit': 'g',
    'Google Shopping / Age Group': 'adult',
    'Google Shopping / Condition': 'new',
    'Google Shopping / Custom Product': 'FALSE',
    'Included / United States': 'TRUE',
    'Included / International': 'TRUE',
}

# Only populated on the first row of a handle group
GROUP_FIELDS = (
    'Title', 'Body (HTML)', 'Product Category', 'Type', 'Tags', 'Published',
    'Option1 Name', 'SEO Title', 'SEO Description', 'Status',
    'Image Src', 'Image Position', 'Image Alt Text',
)

# WooCommerce export columns, keyed by the SourceRecord attribute they populate
WOOCOMMERCE_COLUMNS = {
    'record_kind': 'Type',
    'sku': 'SKU',
    'gtin': 'GTIN, UPC, EAN, or ISBN',
    'name': 'Name',
    'published': 'Published',
    'short_description': 'Short description',
    'description': 'Description',
    'in_stock': 'In stock?',
    'stock_quantity': 'Stock',
    'weight_lbs': 'Weight (lbs)',
    'sale_price': 'Sale price',
    'regular_price': 'Regular price',
    'min_variation_price': 'Meta: _min_variation_price',
    'categories': 'Categories',
    'tags': 'Tags',
    'images': 'Images',
    'attribute_name': 'Attribute 1 name',
    'attribute_values': 'Attribute 1 value(s)',
}

PARENT_KINDS = ('simple', 'variable')
VARIATION_KIND = 'variation'

VARIATION_NAME_SEPARATOR = ' - '

GRAMS_PER_POUND = 453.592
