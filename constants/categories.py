"""
Category Constants

Shopping list section order and defaults for ingredient and manual item
categories. The order is configuration: the aggregation engine never reads it
directly, the presenter receives it as a rank function.
"""

# Supermarket walk order for shopping list sections (matched case-insensitively)
SECTION_ORDER = [
    'Fruit',
    'Veg',
    'Vegetables',
    'Meat',
    'Fish',
    'Dairy',
    'Bakery',
    'Frozen',
    'Tins',
    'Cans',
    'Dry',
    'Pasta',
    'Rice',
    'Spices',
    'Sauces',
    'Snacks',
    'Drinks',
    'Other',
]

# Rank given to categories missing from the configured order
UNRANKED_SECTION = 999

DEFAULT_CATEGORY = 'Other'

# Display name for recipe lines whose ingredient record is missing
UNKNOWN_INGREDIENT = 'Unknown ingredient'
