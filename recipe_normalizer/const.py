"""Constants for the Recipe Normalizer."""

# Configuration keys (environment)
ENV_CATALOG_PATH = "RECIPE_NORMALIZER_CATALOG"
ENV_LOG_LEVEL = "RECIPE_NORMALIZER_LOG_LEVEL"

# Default values
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_RECIPE_NAME = "Untitled Recipe"
DEFAULT_INGREDIENT_SECTION = "Ingredients"
DEFAULT_METHOD_SECTION = "Method"
MAX_SEARCH_DEPTH = 32

# Schema.org type names
TYPE_RECIPE = "Recipe"
TYPE_HOW_TO_STEP = "HowToStep"
TYPE_HOW_TO_SECTION = "HowToSection"

# Image record keys, in order of preference
IMAGE_URL_KEYS = ("url", "contentUrl", "thumbnailUrl")

# Leading labels stripped from yield strings
YIELD_PREFIXES = ("yield", "serves", "makes", "for")

# Unicode vulgar fractions
UNICODE_FRACTIONS = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

# Culinary fractions a decimal may be snapped to: (numerator, denominator)
COMMON_FRACTIONS = (
    ("1", "2"),
    ("1", "3"),
    ("2", "3"),
    ("1", "4"),
    ("3", "4"),
    ("1", "5"),
    ("2", "5"),
    ("3", "5"),
    ("4", "5"),
    ("1", "6"),
    ("5", "6"),
    ("1", "8"),
    ("3", "8"),
    ("5", "8"),
    ("7", "8"),
)
FRACTION_TOLERANCE = 0.01

# Units recognised directly after an amount
KNOWN_UNITS = frozenset({
    # Weight
    "g",
    "gram",
    "grams",
    "kg",
    "kilogram",
    "kilograms",
    "oz",
    "ounce",
    "ounces",
    "lb",
    "pound",
    "pounds",
    # Volume
    "ml",
    "milliliter",
    "milliliters",
    "l",
    "liter",
    "liters",
    "tsp",
    "teaspoon",
    "teaspoons",
    "tbsp",
    "tablespoon",
    "tablespoons",
    "cup",
    "cups",
    # Other
    "pinch",
    "pinches",
    "clove",
    "cloves",
})

# Recipe field -> taxonomy groups it may match
TAG_EXTRACTION_CONFIG = (
    ("recipeCuisine", ("Cuisine",)),
    ("recipeCategory", ("Meal", "Dietary")),
    ("keywords", ("Cuisine", "Meal", "Dietary", "Season", "Difficulty")),
)
