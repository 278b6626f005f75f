"""Tests for the nutrient projector."""

from foundation_foods.domain.foods import NutrientMeasurement
from foundation_foods.services.projection import (
    NutrientProjector,
    is_alternative_nutrient_name,
)
from tests.conftest import cup_portion, make_food, milk_nutrients


def _milk():
    return make_food(1, "Milk, whole, 3.25% milkfat", milk_nutrients(), [cup_portion()])


def _names(projector: NutrientProjector, nutrient_filter) -> list[str]:
    response = projector.project([_milk()], nutrient_filter)
    return [nutrient.name for nutrient in response.foods[0].nutrients]


def test_energy_keeps_only_kcal() -> None:
    response = NutrientProjector().project([_milk()], ["Energy"])

    nutrients = response.foods[0].nutrients
    assert len(nutrients) == 1
    assert nutrients[0].unit_name == "kcal"
    assert nutrients[0].amount == 61.0


def test_empty_filter_includes_everything_but_kilojoules() -> None:
    assert _names(NutrientProjector(), []) == [
        "Energy",
        "Protein",
        "Total lipid (fat)",
        "Vitamin C, total ascorbic acid",
        "PUFA 18:2",
        "Calcium, Ca",
    ]


def test_missing_filter_uses_defaults() -> None:
    projector = NutrientProjector(default_nutrients=("Protein", "Calcium, Ca"))

    assert _names(projector, None) == ["Protein", "Calcium, Ca"]
    assert len(_names(projector, [])) == 6


def test_filter_is_case_and_whitespace_insensitive() -> None:
    assert _names(NutrientProjector(), ["  PROTEIN ", "total LIPID (fat)"]) == [
        "Protein",
        "Total lipid (fat)",
    ]


def test_vitamin_c_alias() -> None:
    assert _names(NutrientProjector(), ["Vitamin C"]) == [
        "Vitamin C, total ascorbic acid"
    ]


def test_vitamin_c_alias_reverse() -> None:
    food = make_food(
        2,
        "Oranges, raw",
        [NutrientMeasurement(name="Vitamin C", unit_name="mg", amount=53.2)],
    )

    response = NutrientProjector().project([food], ["Vitamin C, total ascorbic acid"])

    assert [n.name for n in response.foods[0].nutrients] == ["Vitamin C"]


def test_pufa_prefix_is_optional() -> None:
    assert _names(NutrientProjector(), ["18:2"]) == ["PUFA 18:2"]
    assert is_alternative_nutrient_name("18:3", "pufa 18:3")
    assert is_alternative_nutrient_name("pufa 18:3", "18:3")
    assert not is_alternative_nutrient_name("pufa 18:3", "18:2")


def test_unknown_filter_yields_empty_nutrients() -> None:
    response = NutrientProjector().project([_milk()], ["Unobtainium"])

    assert response.found is True
    assert response.count == 1
    assert response.foods[0].nutrients == ()


def test_statistics_and_portions_carried_through() -> None:
    response = NutrientProjector().project([_milk()], ["Protein"])

    protein = response.foods[0].nutrients[0]
    assert (protein.data_points, protein.min, protein.max, protein.median) == (
        12,
        3.1,
        3.4,
        3.28,
    )
    portion = response.foods[0].portions[0]
    assert portion.measure_unit.name == "cup"
    assert portion.gram_weight == 244.0


def test_empty_input() -> None:
    response = NutrientProjector().project([], [])

    assert response.found is False
    assert response.count == 0
