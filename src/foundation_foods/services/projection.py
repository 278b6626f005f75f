"""Projection of foods into simplified nutrient views."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from foundation_foods.domain.foods import (
    FoodRecord,
    NutrientMeasurement,
    SimplifiedFood,
    SimplifiedNutrient,
    SimplifiedNutrientResponse,
    SimplifiedPortion,
)

_PUFA_PREFIX = "pufa "
_VITAMIN_C_NAMES = frozenset({"vitamin c, total ascorbic acid", "vitamin c"})


def normalize_nutrient_name(name: str) -> str:
    return name.strip().lower()


def is_kilojoule_energy(nutrient: NutrientMeasurement) -> bool:
    """Energy is reported in both kcal and kJ; only kcal is kept."""
    return (
        normalize_nutrient_name(nutrient.name) == "energy"
        and normalize_nutrient_name(nutrient.unit_name) == "kj"
    )


def is_alternative_nutrient_name(data_name: str, filter_name: str) -> bool:
    """Check whether two normalized names refer to the same nutrient."""
    if filter_name.startswith(_PUFA_PREFIX):
        if data_name == filter_name.removeprefix(_PUFA_PREFIX):
            return True
    if data_name.startswith(_PUFA_PREFIX):
        if filter_name == data_name.removeprefix(_PUFA_PREFIX):
            return True
    return (
        data_name != filter_name
        and data_name in _VITAMIN_C_NAMES
        and filter_name in _VITAMIN_C_NAMES
    )


@dataclass(frozen=True)
class NutrientProjector:
    """Builds simplified food views, filtering nutrients by name.

    ``default_nutrients`` is used when a caller passes no filter at all; an
    explicit empty filter keeps every nutrient.
    """

    default_nutrients: tuple[str, ...] = ()

    def project(
        self,
        foods: Iterable[FoodRecord],
        nutrient_filter: Sequence[str] | None = None,
    ) -> SimplifiedNutrientResponse:
        """Project foods into a simplified response."""
        requested = self.default_nutrients if nutrient_filter is None else nutrient_filter
        normalized_filter = tuple(normalize_nutrient_name(name) for name in requested)
        simplified = tuple(self._project_food(food, normalized_filter) for food in foods)
        return SimplifiedNutrientResponse(
            found=len(simplified) > 0,
            count=len(simplified),
            foods=simplified,
        )

    def _project_food(
        self, food: FoodRecord, normalized_filter: tuple[str, ...]
    ) -> SimplifiedFood:
        nutrients = tuple(
            SimplifiedNutrient(
                name=nutrient.name,
                unit_name=nutrient.unit_name,
                amount=nutrient.amount,
                data_points=nutrient.data_points,
                min=nutrient.min,
                max=nutrient.max,
                median=nutrient.median,
            )
            for nutrient in food.nutrients
            if not is_kilojoule_energy(nutrient)
            and _should_include(nutrient.name, normalized_filter)
        )
        portions = tuple(
            SimplifiedPortion(
                value=portion.value,
                measure_unit=portion.measure_unit,
                gram_weight=portion.gram_weight,
                amount=portion.amount,
            )
            for portion in food.portions
        )
        return SimplifiedFood(
            name=food.description, nutrients=nutrients, portions=portions
        )


def _should_include(nutrient_name: str, normalized_filter: tuple[str, ...]) -> bool:
    if not normalized_filter:
        return True
    data_name = normalize_nutrient_name(nutrient_name)
    return any(
        data_name == filter_name or is_alternative_nutrient_name(data_name, filter_name)
        for filter_name in normalized_filter
    )
