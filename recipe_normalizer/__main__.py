"""Allow ``python -m recipe_normalizer``."""
import sys

from .cli import main

sys.exit(main())
