"""JSON serialization of domain objects using the dataset's field names."""

from foundation_foods.domain.foods import (
    FoodPortion,
    FoodRecord,
    MeasureUnit,
    NutrientMeasurement,
    SimplifiedFood,
    SimplifiedNutrient,
    SimplifiedNutrientResponse,
    SimplifiedPortion,
)


def _with_statistics(
    payload: dict[str, object], nutrient: NutrientMeasurement | SimplifiedNutrient
) -> dict[str, object]:
    for key, value in (
        ("dataPoints", nutrient.data_points),
        ("min", nutrient.min),
        ("max", nutrient.max),
        ("median", nutrient.median),
    ):
        if value is not None:
            payload[key] = value
    return payload


def measure_unit_to_dict(unit: MeasureUnit) -> dict[str, object]:
    return {"name": unit.name, "abbreviation": unit.abbreviation}


def portion_to_dict(portion: FoodPortion | SimplifiedPortion) -> dict[str, object]:
    return {
        "value": portion.value,
        "measureUnit": measure_unit_to_dict(portion.measure_unit),
        "gramWeight": portion.gram_weight,
        "amount": portion.amount,
    }


def food_to_dict(food: FoodRecord) -> dict[str, object]:
    """Serialize a full food record."""
    nutrients = [
        _with_statistics(
            {
                "nutrient": {
                    "id": nutrient.nutrient_id,
                    "number": nutrient.number,
                    "name": nutrient.name,
                    "unitName": nutrient.unit_name,
                },
                "amount": nutrient.amount,
            },
            nutrient,
        )
        for nutrient in food.nutrients
    ]
    return {
        "fdcId": food.fdc_id,
        "description": food.description,
        "foodCategory": {"description": food.category},
        "dataType": food.data_type,
        "foodClass": food.food_class,
        "ndbNumber": food.ndb_number,
        "publicationDate": food.publication_date,
        "foodNutrients": nutrients,
        "foodPortions": [portion_to_dict(portion) for portion in food.portions],
    }


def simplified_food_to_dict(food: SimplifiedFood) -> dict[str, object]:
    return {
        "name": food.name,
        "nutrients": [
            _with_statistics(
                {
                    "name": nutrient.name,
                    "unitName": nutrient.unit_name,
                    "amount": nutrient.amount,
                },
                nutrient,
            )
            for nutrient in food.nutrients
        ],
        "foodPortions": [portion_to_dict(portion) for portion in food.portions],
    }


def simplified_response_to_dict(
    response: SimplifiedNutrientResponse,
) -> dict[str, object]:
    return {
        "found": response.found,
        "count": response.count,
        "foods": [simplified_food_to_dict(food) for food in response.foods],
    }
