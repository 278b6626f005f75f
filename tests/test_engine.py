"""Tests for the search engine."""

import pytest

from foundation_foods.domain.errors import CorpusNotReadyError, FoodNotFoundError
from foundation_foods.services.corpus import CorpusStore
from foundation_foods.services.engine import FoundationFoodsEngine, clamp_limit
from foundation_foods.services.projection import NutrientProjector
from tests.conftest import InMemoryFoodSource, make_food


def _engine_for(descriptions: list[tuple[int, str]]) -> FoundationFoodsEngine:
    store = CorpusStore()
    store.load(InMemoryFoodSource([make_food(fdc_id, text) for fdc_id, text in descriptions]))
    return FoundationFoodsEngine(store=store)


def test_milk_query_ranks_milk_first(engine: FoundationFoodsEngine) -> None:
    results = engine.search_by_name("milk", 3)

    assert [food.description for food in results] == [
        "Milk, whole, 3.25% milkfat",
        "Cheese, cottage, lowfat, 2% milkfat",
    ]


def test_partial_word_match(engine: FoundationFoodsEngine) -> None:
    results = engine.search_by_name("egg", 3)

    assert len(results) == 1
    assert results[0].description == "Eggs, whole, raw, fresh"


def test_case_insensitive_search(engine: FoundationFoodsEngine) -> None:
    results = engine.search_by_name("MILK", 3)

    assert results[0].description == "Milk, whole, 3.25% milkfat"


def test_no_matches_returns_empty_list(engine: FoundationFoodsEngine) -> None:
    assert engine.search_by_name("xyz123nonexistent", 3) == []


def test_results_are_deterministic(engine: FoundationFoodsEngine) -> None:
    first = engine.search_by_name("milk", 10)
    second = engine.search_by_name("milk", 10)

    assert first == second


@pytest.mark.parametrize(
    "ids",
    [[3, 7, 5], [7, 5, 3]],
)
def test_equal_scores_keep_corpus_order(ids: list[int]) -> None:
    engine = _engine_for([(fdc_id, "Tomatoes, raw") for fdc_id in ids])

    results = engine.search_by_name("tomato", 10)

    assert [food.fdc_id for food in results] == ids


@pytest.mark.parametrize(
    ("limit", "expected"),
    [(0, 3), (-4, 3), (55, 10), (10, 10), (1, 1), (4, 4)],
)
def test_limit_is_clamped(limit: int, expected: int) -> None:
    engine = _engine_for([(index, f"Apple, variety {index}") for index in range(1, 13)])

    assert len(engine.search_by_name("apple", limit)) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 3), ("abc", 3), ("5", 5), (2.9, 2), (float("nan"), 3), (True, 3), (99, 10)],
)
def test_clamp_limit_handles_odd_values(raw: object, expected: int) -> None:
    assert clamp_limit(raw) == expected


def test_search_before_load_raises_not_ready() -> None:
    engine = FoundationFoodsEngine(store=CorpusStore())

    with pytest.raises(CorpusNotReadyError, match="not loaded"):
        engine.search_by_name("milk", 3)


def test_search_on_empty_corpus_raises_not_ready() -> None:
    engine = _engine_for([])

    with pytest.raises(CorpusNotReadyError, match="empty"):
        engine.search_by_name("milk", 3)
    with pytest.raises(CorpusNotReadyError):
        engine.health_check()


def test_health_check_passes_when_loaded(engine: FoundationFoodsEngine) -> None:
    engine.health_check()


def test_get_food(engine: FoundationFoodsEngine) -> None:
    assert engine.get_food(3).description == "Eggs, whole, raw, fresh"
    with pytest.raises(FoodNotFoundError, match="not found"):
        engine.get_food(99999)


def test_simplified_search_projects_matches(store: CorpusStore) -> None:
    engine = FoundationFoodsEngine(
        store=store, projector=NutrientProjector(default_nutrients=("Protein",))
    )

    response = engine.search_by_name_simplified("milk", 1, ["Energy"])

    assert response.found is True
    assert response.count == 1
    food = response.foods[0]
    assert food.name == "Milk, whole, 3.25% milkfat"
    assert [(n.name, n.unit_name) for n in food.nutrients] == [("Energy", "kcal")]

    defaulted = engine.search_by_name_simplified("milk", 1)
    assert [n.name for n in defaulted.foods[0].nutrients] == ["Protein"]


def test_simplified_search_without_matches(engine: FoundationFoodsEngine) -> None:
    response = engine.search_by_name_simplified("xyz123nonexistent", 3, [])

    assert response.found is False
    assert response.count == 0
    assert response.foods == ()
