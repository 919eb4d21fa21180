"""Tests for the CSV ingestion utilities in `data/ingest_meals.py`."""
import os

import pytest

from core.exceptions import CatalogError
from data.ingest_meals import parse_meals_csv
from data.meals_dataset import MEALS_DATA, load_default_catalog

FIXTURE = os.path.join(os.path.dirname(__file__), "..", "data", "fixtures", "restaurant_menu.csv")


def test_parse_meals_csv_reads_fixture():
    meals = parse_meals_csv(FIXTURE)
    assert [m.name for m in meals] == ["Kale Caesar", "Fish Taco", "Shroomami"]
    first = meals[0]
    assert first.id == "sg-1"
    assert (first.calories, first.protein, first.carbs, first.fat) == (430, 30, 21, 26)
    assert first.allergens == "dairy, egg"
    assert first.tags == ["chicken", "salad", "healthy"]


def test_parse_meals_csv_defaults_bad_cells():
    """Blank or garbled numbers become 0 and missing ids are generated."""
    meals = parse_meals_csv(FIXTURE)
    fish_taco, shroomami = meals[1], meals[2]
    assert fish_taco.calories == 0
    assert fish_taco.fat == 0
    assert fish_taco.tags == ["fish", "seafood"]
    assert shroomami.id == "csv-2"
    assert shroomami.tags == ["vegan", "bowl"]


def test_parse_meals_csv_accepts_meal_name_column(tmp_path):
    path = tmp_path / "menu.csv"
    path.write_text("Meal_Name,Calories,Protein,Carbs,Fat\nTurkey Club,-50,34,52,28\n", encoding="utf-8")
    meals = parse_meals_csv(str(path))
    assert len(meals) == 1
    assert meals[0].name == "Turkey Club"
    assert meals[0].calories == 0
    assert meals[0].id == "csv-0"


def test_parse_meals_csv_missing_file_raises():
    with pytest.raises(CatalogError) as exc_info:
        parse_meals_csv("does/not/exist.csv")
    assert exc_info.value.details == {"source": "does/not/exist.csv"}


def test_parse_meals_csv_empty_file_raises(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(CatalogError):
        parse_meals_csv(str(path))


def test_default_catalog_is_complete():
    meals = load_default_catalog()
    assert len(meals) == len(MEALS_DATA) == 25
    assert len({m.id for m in meals}) == 25
    assert all(m.calories > 0 and m.restaurant for m in meals)
