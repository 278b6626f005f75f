"""Dependency container wiring for the application."""

from dataclasses import dataclass

from foundation_foods.adapters.json_food_source import JsonFoodSource
from foundation_foods.config import Settings
from foundation_foods.services.corpus import CorpusStore, FoodSource
from foundation_foods.services.engine import FoodQueryEngine, FoundationFoodsEngine
from foundation_foods.services.projection import NutrientProjector


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    engine: FoodQueryEngine


def build_container(
    settings: Settings | None = None, source: FoodSource | None = None
) -> AppContainer:
    """Create the default dependency container.

    The corpus is loaded here, before any transport is created; a
    ``CorpusLoadError`` propagates to the caller.
    """
    resolved_settings = settings or Settings()
    resolved_source = source or JsonFoodSource(resolved_settings.data_file)
    store = CorpusStore()
    store.load(resolved_source)
    engine = FoundationFoodsEngine(
        store=store,
        projector=NutrientProjector(
            default_nutrients=tuple(resolved_settings.default_nutrients)
        ),
    )
    return AppContainer(settings=resolved_settings, engine=engine)
