"""
Validation Constants

Contains whitelist values and limits for validating user input.
"""

# Valid meal types for meal planning
VALID_MEAL_TYPES = {'breakfast', 'lunch', 'dinner', 'snack'}

# Day of week indexes stored on meal plan items (0 = Monday)
MIN_DAY_OF_WEEK = 0
MAX_DAY_OF_WEEK = 6

# Gallery categories for user recipe images
VALID_IMAGE_TYPES = {'final', 'step', 'ingredient', 'custom'}

# Recipe note rating bounds
MIN_RATING = 1
MAX_RATING = 5

# Autocomplete result count
AUTOCOMPLETE_DEFAULT = 10
AUTOCOMPLETE_MIN = 1
AUTOCOMPLETE_MAX = 25
AUTOCOMPLETE_MIN_QUERY_LENGTH = 2

# Similar recipes result count
SIMILAR_DEFAULT = 10
SIMILAR_MIN = 1
SIMILAR_MAX = 100

# Servings on a planned meal
MAX_SERVINGS = 100

# Maximum field lengths for security
MAX_LENGTHS = {
    'collection_name': 200,
    'description': 2000,
    'color': 20,
    'recipe_title': 300,
    'recipe_image': 500,
    'shopping_list_name': 200,
    'note_title': 200,
    'note_content': 20000,
    'tag': 50,
    'caption': 500,
    'folder': 200,
}
