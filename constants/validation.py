"""
Validation Constants

Whitelists and limits for validating user input before it reaches the
database.
"""

# Meal slot whose plan entries feed the shopping list
DINNER = 'dinner'

# Shopping list view modes
VIEW_MODES = {'prelim', 'shop'}

# Checklist fields a toggle may patch
CHECKLIST_FIELDS = ('in_cupboard', 'in_trolley')

# Maximum field lengths
MAX_LENGTHS = {
    'item_name': 200,
    'category': 50,
    'unit': 20,
}

# Upper bound for a servings override on a single dinner
MAX_SERVINGS = 100
