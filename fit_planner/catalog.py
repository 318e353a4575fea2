"""Exercise and meal reference catalog.

The catalog ships as ``data/catalog.json`` and is parsed once per process
into frozen dataclasses held in tuples, so every planning run reads the
same immutable entries.
"""

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fit_planner.config import CATALOG_PATH
from fit_planner.models import (
    EquipmentRequirement,
    Exercise,
    Experience,
    Intensity,
    Meal,
    MuscleGroup,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Catalog:
    version: str
    exercises: tuple
    meals: tuple

    def find_exercise(self, name: str) -> Optional[Exercise]:
        return next((e for e in self.exercises if e.name == name), None)

    def find_meal(self, name: str) -> Optional[Meal]:
        return next((m for m in self.meals if m.name == name), None)


def _parse_exercise(item: dict) -> Exercise:
    return Exercise(
        name=item["name"],
        muscle_group=MuscleGroup(item["muscle_group"]),
        equipment=EquipmentRequirement(item["equipment"]),
        intensity=Intensity(item["intensity"]),
        minutes=int(item["minutes"]),
        level=Experience(item["level"]),
        outdoors=item.get("outdoors", False),
    )


def _parse_meal(item: dict) -> Meal:
    return Meal(
        name=item["name"],
        cuisine=item["cuisine"],
        vegetarian=item["vegetarian"],
        vegan=item["vegan"],
        ingredients=tuple(item.get("ingredients", [])),
        calories=int(item["calories"]),
        protein_g=int(item["protein_g"]),
        carbs_g=int(item["carbs_g"]),
        fat_g=int(item["fat_g"]),
        cost=float(item["cost"]),
        halal=item.get("halal", True),
        lactose_free=item.get("lactose_free", False),
        gluten_free=item.get("gluten_free", False),
    )


def load_catalog(catalog_path: str = CATALOG_PATH) -> Catalog:
    """Load the exercise and meal catalog from a JSON file."""
    if not os.path.exists(catalog_path):
        raise FileNotFoundError(f"Catalog data not found at {catalog_path}")

    with open(catalog_path, "r") as f:
        data = json.load(f)

    catalog = Catalog(
        version=data.get("version", "0"),
        exercises=tuple(_parse_exercise(item) for item in data.get("exercises", [])),
        meals=tuple(_parse_meal(item) for item in data.get("meals", [])),
    )
    logger.debug(
        "Loaded catalog %s: %d exercises, %d meals",
        catalog.version, len(catalog.exercises), len(catalog.meals),
    )
    return catalog


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The bundled catalog, shared read-only across planning runs."""
    return load_catalog()
