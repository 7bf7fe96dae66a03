#!/usr/bin/env python3
"""
Recipe Normalizer - Convert schema.org Recipe JSON-LD into ExtractedRecipe JSON

Reads a JSON-LD document that has already been pulled out of a page and
prints the normalized recipe record.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .config import get_settings
from .exceptions import RecipeNormalizerError
from .services.recipe_service import extract_recipe
from .services.tag_service import load_catalog

logger = logging.getLogger(__name__)


def _read_document(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="recipe-normalizer",
        description="Normalize schema.org Recipe JSON-LD into an ExtractedRecipe record.",
    )
    parser.add_argument("file", help="JSON-LD document to read ('-' for stdin)")
    parser.add_argument(
        "--catalog",
        default=settings.catalog_path,
        help="JSON tag catalog (default: built-in catalog)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        catalog = load_catalog(args.catalog) if args.catalog else None
        document = _read_document(args.file)
    except RecipeNormalizerError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 1
    except json.JSONDecodeError as e:
        logger.error("%s is not valid JSON: %s", args.file, e)
        return 1

    recipe = extract_recipe(document, catalog)
    print(json.dumps(recipe.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
