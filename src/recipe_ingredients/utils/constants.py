"""
Constants for the recipe-ingredients service.

This module defines:
- Application metadata
- Database file naming
- Environment variable names
- Default units of measure seeded on initialization
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Recipe Ingredients"
APP_VERSION = "0.1.0"

# ============================================================================
# Database
# ============================================================================

DATABASE_FILENAME = "recipe_ingredients.db"

# Environment variables
ENVIRONMENT_VARIABLE = "RECIPE_INGREDIENTS_ENV"
DATABASE_URL_VARIABLE = "RECIPE_INGREDIENTS_DATABASE_URL"

# ============================================================================
# Units of Measure
# ============================================================================

# Seeded into the unit_of_measure table; never modified by the services
DEFAULT_UNITS_OF_MEASURE: List[str] = [
    "Teaspoon",
    "Tablespoon",
    "Cup",
    "Pinch",
    "Ounce",
    "Each",
    "Pint",
    "Dash",
]

# Ingredient amount column precision (matches a 19,2 decimal)
AMOUNT_PRECISION = 19
AMOUNT_SCALE = 2
