"""Utilities to load a restaurant menu catalog from CSV.

The CSV expected columns include at least `name` (or `meal_name`) and the
numeric nutrition columns `calories`, `protein`, `carbs`, `fat`. Optional
columns are `id`, `restaurant`, `description`, `allergens` and `tags`; tags
may be separated by commas, pipes or semicolons. The parser is resilient to
blank cells and stray formatting: a bad row is skipped or defaulted, never
fatal for the whole file.
"""
from __future__ import annotations

import math
import re
from typing import List

import pandas as pd

from core.exceptions import CatalogError
from core.logger import get_logger
from schemas.meal_schema import Meal

logger = get_logger("data.ingest_meals")

NUTRIENT_COLUMNS = ("calories", "protein", "carbs", "fat")
_TAG_SPLIT = re.compile(r"[,|;]")


def _is_blank(val) -> bool:
    """Return True for None, NaN and whitespace-only cells."""
    if val is None:
        return True
    if isinstance(val, float) and math.isnan(val):
        return True
    return str(val).strip() == ""


def _text(val) -> str:
    return "" if _is_blank(val) else str(val).strip()


def _number(val) -> float:
    """Parse a numeric cell, treating blank or garbled values as zero."""
    if _is_blank(val):
        return 0.0
    try:
        number = float(str(val).strip())
    except ValueError:
        return 0.0
    if math.isnan(number) or number < 0:
        return 0.0
    return number


def _tags(val) -> List[str]:
    if _is_blank(val):
        return []
    return [t.strip().lower() for t in _TAG_SPLIT.split(str(val)) if t.strip()]


def parse_meals_csv(csv_path: str) -> List[Meal]:
    """Parse the CSV and return the catalog as Meal objects.

    Args:
        csv_path: Path to the menu CSV file.

    Returns:
        List of meals in file order.

    Raises:
        CatalogError: If the file is missing or cannot be parsed as CSV.
    """
    logger.info("Parsing meals CSV: %s", csv_path)
    try:
        df = pd.read_csv(csv_path, encoding="utf-8", engine="python", dtype=str, keep_default_na=False)
    except FileNotFoundError:
        raise CatalogError(f"Catalog file not found: {csv_path}", source=csv_path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Catalog file could not be parsed: {exc}", source=csv_path)
    df = df.rename(columns=lambda s: s.strip().lower())

    meals = []
    for position, (_, row) in enumerate(df.iterrows()):
        name = _text(row.get("name")) or _text(row.get("meal_name"))
        if not name:
            logger.warning("Skipping row %s without a meal name", position)
            continue
        meals.append(Meal(
            id=_text(row.get("id")) or f"csv-{position}",
            name=name,
            restaurant=_text(row.get("restaurant")),
            description=_text(row.get("description")),
            allergens=_text(row.get("allergens")),
            tags=_tags(row.get("tags")),
            **{col: _number(row.get(col)) for col in NUTRIENT_COLUMNS},
        ))

    logger.info("Parsed %s meals from CSV", len(meals))
    return meals
