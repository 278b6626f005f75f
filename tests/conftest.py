"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from foundation_foods.config import Settings
from foundation_foods.containers import AppContainer
from foundation_foods.domain.errors import FoodNotFoundError
from foundation_foods.domain.foods import (
    FoodPortion,
    FoodRecord,
    MeasureUnit,
    NutrientMeasurement,
    SimplifiedNutrientResponse,
)
from foundation_foods.services.corpus import CorpusStore, FoodSource
from foundation_foods.services.engine import FoodQueryEngine, FoundationFoodsEngine
from foundation_foods.services.projection import NutrientProjector

SCENARIO_DESCRIPTIONS = (
    "Milk, whole, 3.25% milkfat",
    "Cheese, cottage, lowfat, 2% milkfat",
    "Eggs, whole, raw, fresh",
    "Bread, white, commercially prepared",
)


def make_food(
    fdc_id: int,
    description: str,
    nutrients: Sequence[NutrientMeasurement] = (),
    portions: Sequence[FoodPortion] = (),
    category: str = "Dairy and Egg Products",
) -> FoodRecord:
    return FoodRecord(
        fdc_id=fdc_id,
        description=description,
        nutrients=tuple(nutrients),
        portions=tuple(portions),
        category=category,
    )


def milk_nutrients() -> list[NutrientMeasurement]:
    return [
        NutrientMeasurement(name="Energy", unit_name="kcal", amount=61.0),
        NutrientMeasurement(name="Energy", unit_name="kJ", amount=255.0),
        NutrientMeasurement(
            name="Protein",
            unit_name="g",
            amount=3.27,
            data_points=12,
            min=3.1,
            max=3.4,
            median=3.28,
        ),
        NutrientMeasurement(name="Total lipid (fat)", unit_name="g", amount=3.2),
        NutrientMeasurement(
            name="Vitamin C, total ascorbic acid", unit_name="mg", amount=0.0
        ),
        NutrientMeasurement(name="PUFA 18:2", unit_name="g", amount=0.11),
        NutrientMeasurement(name="Calcium, Ca", unit_name="mg", amount=123.0),
    ]


def cup_portion() -> FoodPortion:
    return FoodPortion(
        value=1.0,
        measure_unit=MeasureUnit(name="cup", abbreviation="cup"),
        gram_weight=244.0,
        amount=1.0,
    )


@dataclass
class InMemoryFoodSource(FoodSource):
    """Food source backed by a list."""

    foods: list[FoodRecord] = field(default_factory=list)
    location: str = "<memory>"

    def load_foods(self) -> list[FoodRecord]:
        return list(self.foods)


@dataclass
class FakeFoodQueryEngine(FoodQueryEngine):
    """Engine double returning fixed foods and recording calls."""

    foods: list[FoodRecord] = field(default_factory=list)
    calls: list[tuple[str, object]] = field(default_factory=list)

    def search_by_name(self, query: str, limit: int = 3) -> list[FoodRecord]:
        self.calls.append(("search_by_name", (query, limit)))
        return self.foods[:limit]

    def search_by_name_simplified(
        self,
        query: str,
        limit: int = 3,
        nutrient_filter: Sequence[str] | None = None,
    ) -> SimplifiedNutrientResponse:
        self.calls.append(("search_by_name_simplified", (query, limit, nutrient_filter)))
        return NutrientProjector().project(self.foods[:limit], nutrient_filter or [])

    def get_food(self, fdc_id: int) -> FoodRecord:
        for food in self.foods:
            if food.fdc_id == fdc_id:
                return food
        raise FoodNotFoundError(fdc_id)

    def health_check(self) -> None:
        self.calls.append(("health_check", None))


@pytest.fixture
def scenario_foods() -> list[FoodRecord]:
    foods = [
        make_food(index + 1, description)
        for index, description in enumerate(SCENARIO_DESCRIPTIONS)
    ]
    foods[0] = make_food(1, SCENARIO_DESCRIPTIONS[0], milk_nutrients(), [cup_portion()])
    return foods


@pytest.fixture
def store(scenario_foods: list[FoodRecord]) -> CorpusStore:
    corpus_store = CorpusStore()
    corpus_store.load(InMemoryFoodSource(scenario_foods))
    return corpus_store


@pytest.fixture
def engine(store: CorpusStore) -> FoundationFoodsEngine:
    return FoundationFoodsEngine(store=store, projector=NutrientProjector())


@pytest.fixture
def settings() -> Settings:
    return Settings(
        auth_token="test-token",
        environment="test",
        default_nutrients=("Energy", "Protein"),
    )


@pytest.fixture
def container(settings: Settings, engine: FoundationFoodsEngine) -> AppContainer:
    return AppContainer(settings=settings, engine=engine)
