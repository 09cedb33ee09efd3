"""
Recipe Search Constants

Query parameters accepted by /recipes/search and forwarded to
Spoonacular's complexSearch endpoint.
"""

# Results per page (6 rows of 4 cards on desktop)
RECIPES_PER_PAGE = 24

# Free-text filters forwarded verbatim
TEXT_FILTERS = (
    'cuisine', 'excludeCuisine', 'diet', 'intolerances', 'equipment',
    'includeIngredients', 'excludeIngredients', 'type', 'sort',
    'sortDirection', 'author', 'tags', 'titleMatch',
)

# Boolean switches, forwarded only when set to "true"
FLAG_FILTERS = (
    'fillIngredients', 'addRecipeInformation', 'addRecipeInstructions',
    'addRecipeNutrition', 'instructionsRequired', 'ignorePantry',
)

# Plain integer filters
INTEGER_FILTERS = (
    'maxReadyTime', 'minServings', 'maxServings', 'recipeBoxId',
)

# Nutrients with min<Name>/max<Name> range filters
NUTRIENTS = (
    'Calories', 'Protein', 'Carbs', 'Fat', 'Alcohol', 'Caffeine', 'Copper',
    'Calcium', 'Choline', 'Cholesterol', 'Fluoride', 'SaturatedFat',
    'VitaminA', 'VitaminC', 'VitaminD', 'VitaminE', 'VitaminK',
    'VitaminB1', 'VitaminB2', 'VitaminB5', 'VitaminB3', 'VitaminB6',
    'VitaminB12', 'Fiber', 'Folate', 'FolicAcid', 'Iodine', 'Iron',
    'Magnesium', 'Manganese', 'Phosphorus', 'Potassium', 'Selenium',
    'Sodium', 'Sugar', 'Zinc',
)

NUTRIENT_FILTERS = tuple(
    f'{bound}{nutrient}' for nutrient in NUTRIENTS for bound in ('min', 'max')
)
