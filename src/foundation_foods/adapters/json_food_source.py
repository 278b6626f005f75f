"""Foundation Foods JSON dataset reader."""

import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from foundation_foods.domain.errors import CorpusLoadError
from foundation_foods.domain.foods import (
    FoodPortion,
    FoodRecord,
    MeasureUnit,
    NutrientMeasurement,
)
from foundation_foods.services.corpus import FoodSource


class NutrientPayload(BaseModel):
    """Nutrient definition embedded in a food nutrient."""

    id: int | None = None
    number: str | None = None
    name: str = ""
    unit_name: str = Field(default="", alias="unitName")


class FoodNutrientPayload(BaseModel):
    """Nutrient reading for a food."""

    nutrient: NutrientPayload = Field(default_factory=NutrientPayload)
    amount: float | None = None
    data_points: int | None = Field(default=None, alias="dataPoints")
    min: float | None = None
    max: float | None = None
    median: float | None = None


class MeasureUnitPayload(BaseModel):
    """Measurement unit of a portion."""

    name: str = ""
    abbreviation: str = ""


class FoodPortionPayload(BaseModel):
    """Portion payload."""

    value: float | None = None
    measure_unit: MeasureUnitPayload = Field(
        default_factory=MeasureUnitPayload, alias="measureUnit"
    )
    gram_weight: float | None = Field(default=None, alias="gramWeight")
    amount: float | None = None


class FoodCategoryPayload(BaseModel):
    """Food category payload."""

    description: str = ""


class FoundationFoodPayload(BaseModel):
    """Single Foundation Foods record."""

    fdc_id: int = Field(alias="fdcId")
    description: str = ""
    food_nutrients: list[FoodNutrientPayload] = Field(
        default_factory=list, alias="foodNutrients"
    )
    food_portions: list[FoodPortionPayload] = Field(
        default_factory=list, alias="foodPortions"
    )
    food_category: FoodCategoryPayload | None = Field(
        default=None, alias="foodCategory"
    )
    data_type: str | None = Field(default=None, alias="dataType")
    food_class: str | None = Field(default=None, alias="foodClass")
    ndb_number: int | None = Field(default=None, alias="ndbNumber")
    publication_date: str | None = Field(default=None, alias="publicationDate")


class FoundationFoodsFile(BaseModel):
    """Root object of the USDA Foundation Foods download."""

    foundation_foods: list[FoundationFoodPayload] = Field(alias="FoundationFoods")


@dataclass
class JsonFoodSource(FoodSource):
    """Reads foods from a Foundation Foods JSON file."""

    path: Path

    @property
    def location(self) -> str:
        return str(self.path)

    def load_foods(self) -> list[FoodRecord]:
        """Read and parse the dataset file."""
        try:
            raw = Path(self.path).read_bytes()
        except OSError as exc:
            raise CorpusLoadError(self.location, f"unable to read file: {exc}") from exc
        return parse_foundation_foods(raw, source=self.location)


def parse_foundation_foods(raw: bytes | str, source: str = "<memory>") -> list[FoodRecord]:
    """Parse dataset JSON into food records.

    Accepts the official ``{"FoundationFoods": [...]}`` document or a bare
    array of food objects. Unknown fields are ignored.
    """
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CorpusLoadError(source, f"invalid JSON: {exc}") from exc

    if isinstance(payload, list):
        payload = {"FoundationFoods": payload}
    if not isinstance(payload, dict):
        raise CorpusLoadError(source, "expected a JSON object or array at top level")

    try:
        document = FoundationFoodsFile.model_validate(payload)
    except ValidationError as exc:
        raise CorpusLoadError(source, f"unexpected data shape: {exc}") from exc

    return [_to_record(food) for food in document.foundation_foods]


def _to_record(payload: FoundationFoodPayload) -> FoodRecord:
    nutrients = tuple(
        NutrientMeasurement(
            name=item.nutrient.name,
            unit_name=item.nutrient.unit_name,
            amount=item.amount or 0.0,
            nutrient_id=item.nutrient.id,
            number=item.nutrient.number,
            data_points=item.data_points,
            min=item.min,
            max=item.max,
            median=item.median,
        )
        for item in payload.food_nutrients
    )
    portions = tuple(
        FoodPortion(
            value=portion.value or 0.0,
            measure_unit=MeasureUnit(
                name=portion.measure_unit.name,
                abbreviation=portion.measure_unit.abbreviation,
            ),
            gram_weight=portion.gram_weight or 0.0,
            amount=portion.amount or 0.0,
        )
        for portion in payload.food_portions
    )
    return FoodRecord(
        fdc_id=payload.fdc_id,
        description=payload.description,
        nutrients=nutrients,
        portions=portions,
        category=payload.food_category.description if payload.food_category else "",
        data_type=payload.data_type,
        food_class=payload.food_class,
        ndb_number=payload.ndb_number,
        publication_date=payload.publication_date,
    )
