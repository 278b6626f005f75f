"""Search engine over the Foundation Foods corpus."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from foundation_foods.domain.foods import (
    FoodRecord,
    ScoredCandidate,
    SimplifiedNutrientResponse,
)
from foundation_foods.services.corpus import CorpusStore
from foundation_foods.services.projection import NutrientProjector
from foundation_foods.services.scoring import (
    normalize_text,
    score_description,
    split_words,
)

DEFAULT_LIMIT = 3
MAX_LIMIT = 10

_logger = logging.getLogger(__name__)


def clamp_limit(limit: object) -> int:
    """Clamp a requested result limit into 1..MAX_LIMIT.

    Non-positive or non-numeric values fall back to DEFAULT_LIMIT.
    """
    if isinstance(limit, bool):
        return DEFAULT_LIMIT
    try:
        value = int(limit)  # type: ignore[call-overload]
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_LIMIT
    if value <= 0:
        return DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


class FoodQueryEngine(Protocol):
    """Query capabilities exposed to the transports."""

    def search_by_name(self, query: str, limit: int = DEFAULT_LIMIT) -> list[FoodRecord]:
        """Search foods by description."""

    def search_by_name_simplified(
        self,
        query: str,
        limit: int = DEFAULT_LIMIT,
        nutrient_filter: Sequence[str] | None = None,
    ) -> SimplifiedNutrientResponse:
        """Search foods and return simplified nutrient views."""

    def get_food(self, fdc_id: int) -> FoodRecord:
        """Return a food by FDC id."""

    def health_check(self) -> None:
        """Raise if the engine cannot serve queries."""


@dataclass
class FoundationFoodsEngine(FoodQueryEngine):
    """Relevance-ranked search over an immutable corpus."""

    store: CorpusStore
    projector: NutrientProjector = field(default_factory=NutrientProjector)

    def search_by_name(self, query: str, limit: int = DEFAULT_LIMIT) -> list[FoodRecord]:
        """Return up to ``limit`` foods ranked by relevance to ``query``."""
        corpus = self.store.ensure_ready()
        limit = clamp_limit(limit)
        _logger.debug(
            "Searching Foundation Foods: query=%r limit=%s total_foods=%s",
            query,
            limit,
            len(corpus),
        )

        normalized_query = normalize_text(query)
        query_words = split_words(normalized_query)
        candidates = []
        for food in corpus:
            score = score_description(food.description, normalized_query, query_words)
            if score > 0:
                candidates.append(ScoredCandidate(food=food, score=score))

        # sorted() is stable, so equal scores keep corpus order.
        ranked = sorted(candidates, key=lambda candidate: candidate.score, reverse=True)
        top = ranked[:limit]
        for rank, candidate in enumerate(top, start=1):
            _logger.debug(
                "Search result: rank=%s score=%.2f description=%s",
                rank,
                candidate.score,
                candidate.food.description,
            )
        _logger.debug(
            "Search complete: query=%r results_found=%s results_returned=%s",
            query,
            len(ranked),
            len(top),
        )
        return [candidate.food for candidate in top]

    def search_by_name_simplified(
        self,
        query: str,
        limit: int = DEFAULT_LIMIT,
        nutrient_filter: Sequence[str] | None = None,
    ) -> SimplifiedNutrientResponse:
        """Search and project matches through the nutrient filter."""
        foods = self.search_by_name(query, limit)
        return self.projector.project(foods, nutrient_filter)

    def get_food(self, fdc_id: int) -> FoodRecord:
        return self.store.lookup(fdc_id)

    def health_check(self) -> None:
        self.store.ensure_ready()
