#!/usr/bin/env python
"""
Launcher script for initializing the recipe-ingredients database.

This script puts src/ on the Python path so it works without installation.
"""

import sys
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent / "src"
sys.path.insert(0, str(src_dir))

from recipe_ingredients.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
